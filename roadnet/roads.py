"""Basic road identifiers."""

from __future__ import annotations

from dataclasses import InitVar, dataclass, field


@dataclass(frozen=True)
class RoadID:
    """A road identifier made of a major and a minor number."""

    major: int
    minor: int


@dataclass(frozen=True)
class Road:
    """A road, known by its identifier."""

    major: InitVar[int]
    minor: InitVar[int]
    road_id: RoadID = field(init=False)

    def __post_init__(self, major: int, minor: int) -> None:
        object.__setattr__(self, "road_id", RoadID(major, minor))