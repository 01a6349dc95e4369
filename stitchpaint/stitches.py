"""A sequence of stitches and its plain-text file format."""

from __future__ import annotations

import re
from os import PathLike
from typing import Iterable, List, Optional, Tuple, Union

from stitchpaint.geometry import Vec2, to_absolute

MAX_STITCH_LENGTH = 10.0

StrPath = Union[str, "PathLike[str]"]

_NUMBER = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _parse_double(text: str) -> float:
    """Parse the leading number of text, skipping leading whitespace."""
    match = _NUMBER.match(text.lstrip())
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(0))


def read_stitches(path: StrPath) -> List[Vec2]:
    """Read relative stitch offsets, one "x y" pair per line."""
    stitches: List[Vec2] = []
    with open(path, encoding="utf-8") as fh:
        for line in fh:
            line = line.rstrip("\n")
            space = line.find(" ")
            if space < 0:
                raise ValueError(f"expected 'x y', got {line!r}")
            stitches.append(Vec2(_parse_double(line[:space]), _parse_double(line[space:])))
    return stitches


def write_stitches(stitches: Iterable[Vec2], path: StrPath) -> None:
    """Write relative stitch offsets, one "x y" pair per line."""
    with open(path, "w", encoding="utf-8") as fh:
        for stitch in stitches:
            fh.write(f"{stitch.x:g} {stitch.y:g}\n")


class StitchPattern:
    """Stitches kept both as offsets from the previous one and as absolute points."""

    def __init__(
        self,
        relative: Iterable[Vec2] = (),
        max_stitch_length: float = MAX_STITCH_LENGTH,
    ) -> None:
        self.max_stitch_length = max_stitch_length
        self._relative: List[Vec2] = list(relative)
        self._absolute: List[Vec2] = to_absolute(self._relative)

    @property
    def relative(self) -> Tuple[Vec2, ...]:
        return tuple(self._relative)

    @property
    def absolute(self) -> Tuple[Vec2, ...]:
        return tuple(self._absolute)

    @property
    def last(self) -> Optional[Vec2]:
        """The absolute position of the last stitch, if any."""
        return self._absolute[-1] if self._absolute else None

    def __len__(self) -> int:
        return len(self._relative)

    def __bool__(self) -> bool:
        return bool(self._relative)

    def add_stitch(self, coords: Vec2) -> None:
        """Append a stitch at an absolute position."""
        last = self.last
        self._relative.append(coords if last is None else coords - last)
        self._absolute.append(coords)

    def undo(self) -> bool:
        """Remove the last stitch; return False when there was none."""
        if not self._relative:
            return False
        self._relative.pop()
        self._absolute.pop()
        return True

    def can_place(self, coords: Vec2) -> bool:
        """Whether a stitch at coords is within reach of the last one."""
        last = self.last
        if last is None:
            return True
        distance_sqr = (last.x - coords.x) ** 2 + (last.y - coords.y) ** 2
        return distance_sqr <= self.max_stitch_length**2

    def drawing_size(self) -> Vec2:
        """Width and height of the bounding box of all stitches."""
        if not self._absolute:
            return Vec2(0.0, 0.0)
        xs = [p.x for p in self._absolute]
        ys = [p.y for p in self._absolute]
        return Vec2(max(xs) - min(xs), max(ys) - min(ys))

    def relative_to_last(self, coords: Vec2) -> Optional[Vec2]:
        """Offset of coords from the last stitch, or None if there is none."""
        last = self.last
        return None if last is None else coords - last

    def load(self, path: StrPath) -> None:
        """Replace the stitches with those read from a file."""
        relative = read_stitches(path)
        self._relative = relative
        self._absolute = to_absolute(relative)

    def save(self, path: StrPath) -> None:
        """Write the stitches to a file."""
        write_stitches(self._relative, path)