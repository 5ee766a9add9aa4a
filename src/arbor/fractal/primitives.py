from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

CHANNEL_NAMES = ("red", "green", "blue")
CHANNEL_MIN = 0
CHANNEL_MAX = 255


class Color(NamedTuple):
    """RGB triple. Range checks happen where colors are produced, not here."""

    red: int
    green: int
    blue: int

    def shifted(self, increment: tuple[int, int, int]) -> Color:
        return Color(*(a + b for a, b in zip(self, increment, strict=True)))

    def out_of_range_channel(self) -> tuple[str, int] | None:
        """Return the first channel outside ``[0, 255]`` as ``(name, value)``."""

        for name, value in zip(CHANNEL_NAMES, self):
            if not CHANNEL_MIN <= value <= CHANNEL_MAX:
                return name, value
        return None


class Point(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class LineSegment:
    """One branch of the tree, in pixel space."""

    x1: int
    y1: int
    x2: int
    y2: int
    width: int
    color: Color

    @property
    def start(self) -> Point:
        return Point(self.x1, self.y1)

    @property
    def end(self) -> Point:
        return Point(self.x2, self.y2)
