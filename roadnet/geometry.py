"""Coordinates and curves that map between logical and inertial frames."""

from __future__ import annotations

from dataclasses import dataclass, field

from roadnet.addressing import Identifier, LogicalAddress, Mask


@dataclass
class InertialCoord:
    """A point in the inertial (world) frame."""

    x: float
    y: float
    z: float


def _empty_address() -> LogicalAddress:
    return LogicalAddress(Identifier(0, 0, 0, 0), Mask(False, False, False, False))


@dataclass
class LogicalCoord:
    """A point given relative to a piece of road."""

    addr: LogicalAddress
    offset: float
    distance: float
    loft: float

    @classmethod
    def empty(cls) -> LogicalCoord:
        """A coordinate at the origin with an address that selects nothing."""
        return cls(_empty_address(), 0.0, 0.0, 0.0)


@dataclass
class Curve:
    """A reference curve; currently an infinite straight."""

    points: list[InertialCoord] = field(default_factory=list)

    def logical_to_inertial(self, logical: LogicalCoord) -> InertialCoord:
        """Return the inertial position of a logical coordinate."""
        return InertialCoord(logical.offset, logical.distance, logical.loft)

    def inertial_to_logical(
        self, inertial: InertialCoord, addr: LogicalAddress | None = None
    ) -> LogicalCoord:
        """Return the logical coordinate of an inertial position.

        Without an address the result carries the empty address.
        """
        if addr is None:
            addr = _empty_address()
        return LogicalCoord(addr, inertial.x, inertial.y, inertial.z)