"""Geometry, sprite-sheet animation and positioned actors."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

FRAME_SIZE = 100


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in scene coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        """Return True when the two rectangles overlap with a non-empty area."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )

    def translated(self, dx: float, dy: float) -> Rect:
        """Return a copy of this rectangle moved by (dx, dy)."""
        return Rect(self.x + dx, self.y + dy, self.width, self.height)


@dataclass
class Animation:
    """A cycle over equally sized frames laid out in one row of a sheet."""

    frames: int
    index: int = 0
    frame_width: int = FRAME_SIZE
    frame_height: int = FRAME_SIZE

    def __post_init__(self) -> None:
        if self.frames <= 0:
            raise ValueError("an animation needs at least one frame")
        if not 0 <= self.index < self.frames:
            raise ValueError(f"frame index {self.index} outside 0..{self.frames - 1}")

    def advance(self) -> int:
        """Step to the next frame, wrapping around, and return its index."""
        self.index = (self.index + 1) % self.frames
        return self.index

    def reset(self) -> None:
        """Go back to the first frame."""
        self.index = 0

    def frame_box(self) -> Rect:
        """The area of the sheet holding the current frame."""
        return Rect(self.index * self.frame_width, 0, self.frame_width, self.frame_height)


@dataclass
class Actor:
    """A sprite placed in the scene, positioned by its top-left corner."""

    name: str
    x: float
    y: float
    width: float = FRAME_SIZE
    height: float = FRAME_SIZE
    scale: float = 1.0
    animation: Animation | None = field(default=None)

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def bounds(self) -> Rect:
        """The scene area the sprite covers, scaled about its top-left corner."""
        return Rect(self.x, self.y, self.width * self.scale, self.height * self.scale)

    def move_by(self, dx: float, dy: float) -> None:
        """Shift the actor by (dx, dy)."""
        self.x += dx
        self.y += dy

    def distance_to(self, other: Actor) -> float:
        """Straight-line distance between the two actors' positions."""
        return math.hypot(other.x - self.x, other.y - self.y)