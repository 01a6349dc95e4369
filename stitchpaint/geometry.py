"""Vectors and conversions between screen and base coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Protocol, Union


@dataclass(frozen=True)
class Vec2:
    """A point or offset in the base (drawing) coordinate system."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Vec2i:
    """A point or offset in screen pixels."""

    x: int = 0
    y: int = 0


class _Point(Protocol):
    x: float
    y: float


Point = Union[Vec2, Vec2i, _Point]


def screen_to_base(coords: Point, scale: float, camera_pos: Vec2) -> Vec2:
    """Convert screen coordinates to base coordinates.

    The screen y axis points down while the base y axis points up.
    """
    return Vec2(
        float(coords.x) / scale + camera_pos.x,
        -float(coords.y) / scale + camera_pos.y,
    )


def base_to_screen(coords: Vec2, scale: float, camera_pos: Vec2) -> Vec2i:
    """Convert base coordinates to whole screen pixels, truncating toward zero."""
    return Vec2i(
        int((coords.x - camera_pos.x) * scale),
        int(-(coords.y - camera_pos.y) * scale),
    )


def to_absolute(relative: Iterable[Vec2]) -> List[Vec2]:
    """Turn points each relative to the previous one into absolute points.

    The first point is taken as absolute already.
    """
    result: List[Vec2] = []
    for offset in relative:
        result.append(offset if not result else result[-1] + offset)
    return result