"""Identifiers, masks and logical addresses of road network components."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

_DIGITS = frozenset("0123456789")
_UNSIGNED = re.compile(r"\+?[0-9]+")
_SIGNED = re.compile(r"[+-]?[0-9]+")

_U16 = (0, 0xFFFF)
_I16 = (-0x8000, 0x7FFF)

_MINUS_MESSAGE = "Expected whole number, got minus sign"
_EMPTY_MESSAGE = "Expected some content before the '/'"
_DEFAULT_MASK = "1.1.1.1"


class AddressError(ValueError):
    """Raised when an address cannot be parsed."""


class ParsingState(Enum):
    """States of the small scanners that read dotted addresses."""

    INITIAL = auto()
    FOUND_DIGIT = auto()
    ACCEPTED = auto()


def _to_int(digits: str, signed: bool) -> int | None:
    """Convert a run of digits to a 16-bit integer, or None if it does not fit."""
    pattern = _SIGNED if signed else _UNSIGNED
    if not pattern.fullmatch(digits):
        return None
    value = int(digits)
    low, high = _I16 if signed else _U16
    return value if low <= value <= high else None


@dataclass(frozen=True)
class Identifier:
    """An identifier for a network component.

    ``link`` is a directed connection between two junctions, ``tile`` a
    road piece such as a straight or a circular curve, ``segment`` an
    individual piece of road and ``lane`` a lateral portion of a segment.
    """

    link: int
    tile: int
    segment: int
    lane: int

    @classmethod
    def parse(cls, text: str) -> Identifier:
        """Parse a dotted identifier such as ``"2.10.2.-1"``.

        Only the lane may be negative. Fields that cannot be read as
        numbers of their width are taken as zero.
        """
        fields = [0, 0, 0, 0]
        state = ParsingState.INITIAL
        start = end = 0
        completed = 0
        allow_negative = False

        for index, char in enumerate(text):
            if state is ParsingState.INITIAL:
                if char in _DIGITS or (char == "-" and allow_negative):
                    start, end = index, index + 1
                    state = ParsingState.FOUND_DIGIT
                elif char == "-":
                    raise AddressError(_MINUS_MESSAGE)
            elif state is ParsingState.FOUND_DIGIT:
                if char in _DIGITS:
                    end += 1
                elif char == ".":
                    if completed < len(fields):
                        value = _to_int(text[start:end], signed=completed == 3)
                        fields[completed] = 0 if value is None else value
                        completed += 1
                        allow_negative = completed == 3
                        start = end = 0
                        state = ParsingState.INITIAL
                    else:
                        state = ParsingState.ACCEPTED
            else:
                break

        if state is ParsingState.FOUND_DIGIT and completed == 3:
            digits = text[start:end]
            lane = _to_int(digits, signed=True)
            if lane is None:
                raise AddressError(f"Invalid lane number: {digits!r}")
            fields[3] = lane

        return cls(*fields)


@dataclass(frozen=True)
class Mask:
    """Which fields of an identifier are relevant for a query."""

    link: bool
    tile: bool
    segment: bool
    lane: bool

    @classmethod
    def parse(cls, text: str) -> Mask:
        """Parse a dotted mask such as ``"1.1.1.0"``.

        Each field is set by the first digit of its part; fields that are
        not given stay set.
        """
        flags = [True, True, True, True]
        state = ParsingState.INITIAL
        count = 0

        for char in text:
            if state is ParsingState.INITIAL:
                if char in _DIGITS:
                    if count < len(flags):
                        flags[count] = char != "0"
                        state = ParsingState.FOUND_DIGIT
                        count += 1
                    else:
                        state = ParsingState.ACCEPTED
            elif state is ParsingState.FOUND_DIGIT:
                if char == ".":
                    state = ParsingState.INITIAL
            else:
                break

        return cls(*flags)


@dataclass(frozen=True)
class LogicalAddress:
    """An identifier together with the mask that selects its relevant fields."""

    identifier: Identifier
    mask: Mask

    @classmethod
    def parse(cls, text: str) -> LogicalAddress:
        """Parse ``"<identifier>/<mask>"``; the mask defaults to all fields."""
        parts = text.split("/")
        identifier_text = parts[0]
        if not identifier_text:
            raise AddressError(_EMPTY_MESSAGE)
        mask_text = parts[1] if len(parts) > 1 else _DEFAULT_MASK
        return cls(Identifier.parse(identifier_text), Mask.parse(mask_text))