"""Camera, zoom and grid of the drawing view."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from stitchpaint.geometry import Point, Vec2, Vec2i, base_to_screen, screen_to_base

MIN_SCALE = 1.0
ZOOM_SPEED = 1.1

Segment = Tuple[Tuple[int, int], Tuple[int, int]]


@dataclass
class Viewport:
    """The visible window onto the base coordinate system."""

    width: int
    height: int
    scale: float = 20.0
    camera_pos: Vec2 = field(default_factory=Vec2)
    zoom_speed: float = ZOOM_SPEED
    min_scale: float = MIN_SCALE

    def zoom(self, direction: float) -> float:
        """Zoom in for a positive direction, out otherwise; return the new scale."""
        if direction > 0:
            new_scale = self.scale * self.zoom_speed
        else:
            new_scale = self.scale / self.zoom_speed
        self.scale = new_scale if new_scale > self.min_scale else self.min_scale
        return self.scale

    def pan(self, dx: int, dy: int) -> None:
        """Move the view so the drawing follows a drag of (dx, dy) pixels."""
        motion = screen_to_base(Vec2i(dx, dy), self.scale, Vec2(0.0, 0.0))
        self.camera_pos = self.camera_pos - motion

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def to_base(self, screen_pos: Point) -> Vec2:
        return screen_to_base(screen_pos, self.scale, self.camera_pos)

    def to_screen(self, base_pos: Vec2) -> Vec2i:
        return base_to_screen(base_pos, self.scale, self.camera_pos)

    def grid_lines(self) -> Iterator[Segment]:
        """Yield the screen segments of the unit grid, vertical lines first."""
        x_start = math.modf(self.camera_pos.x)[0]
        y_start = math.modf(self.camera_pos.y)[0]

        pos = -x_start * self.scale
        while pos <= self.width:
            yield (int(pos), 0), (int(pos), self.height)
            pos += self.scale
        pos = y_start * self.scale
        while pos <= self.height:
            yield (0, int(pos)), (self.width, int(pos))
            pos += self.scale