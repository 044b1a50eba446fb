"""Geometric value types: angles, positions and bounding boxes.

Coordinates are integer centimetres with y increasing down the page, and a
skater facing ``Direction(0)`` travels towards increasing y.  Angles follow
the SVG convention, so a positive rotation turns clockwise on the page.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rotation:
    """Signed change of direction in degrees."""

    degrees: int

    def __neg__(self) -> Rotation:
        return Rotation(-self.degrees)

    def __str__(self) -> str:
        return f"{self.degrees:+d}°"


@dataclass(frozen=True, slots=True)
class Direction:
    """Facing direction in degrees, always normalized to [0, 360)."""

    degrees: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "degrees", self.degrees % 360)

    def __add__(self, rotation: Rotation) -> Direction:
        return Direction(self.degrees + rotation.degrees)

    def __sub__(self, other: Direction) -> Rotation:
        return Rotation(self.degrees - other.degrees)

    @property
    def radians(self) -> float:
        return math.radians(self.degrees)

    def __str__(self) -> str:
        return f"{self.degrees}°"


@dataclass(frozen=True, slots=True)
class Position:
    """Point on the ice in centimetres."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __neg__(self) -> Position:
        return Position(-self.x, -self.y)

    def add_rotated(self, direction: Direction, delta: Position) -> Position:
        """Add *delta*, expressed in a frame facing *direction*, to this point."""
        theta = direction.radians
        cos, sin = math.cos(theta), math.sin(theta)
        return Position(
            self.x + round(delta.x * cos - delta.y * sin),
            self.y + round(delta.x * sin + delta.y * cos),
        )

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(slots=True)
class Bounds:
    """Axis-aligned bounding box; only ever grows."""

    top_left: Position
    bottom_right: Position

    @classmethod
    def at(cls, pos: Position) -> Bounds:
        """Zero-sized bounds containing a single point."""
        return cls(pos, pos)

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    @property
    def midpoint(self) -> Position:
        return Position(
            (self.top_left.x + self.bottom_right.x) // 2,
            (self.top_left.y + self.bottom_right.y) // 2,
        )

    @property
    def diagonal(self) -> float:
        return math.hypot(self.width, self.height)

    def encompass(self, pos: Position) -> None:
        """Grow to include *pos*."""
        self.top_left = Position(min(self.top_left.x, pos.x), min(self.top_left.y, pos.y))
        self.bottom_right = Position(
            max(self.bottom_right.x, pos.x), max(self.bottom_right.y, pos.y)
        )

    def encompass_bounds(self, other: Bounds) -> None:
        """Grow to include all of *other*."""
        self.encompass(other.top_left)
        self.encompass(other.bottom_right)

    def add_margin(self, margin_x: int, margin_y: int) -> Bounds:
        """Return a copy grown by the given margins on every side."""
        return Bounds(
            Position(self.top_left.x - margin_x, self.top_left.y - margin_y),
            Position(self.bottom_right.x + margin_x, self.bottom_right.y + margin_y),
        )

    def copy(self) -> Bounds:
        return Bounds(self.top_left, self.bottom_right)

    def __str__(self) -> str:
        return f"{self.top_left}->{self.bottom_right}"


@dataclass(frozen=True, slots=True)
class TextPosition:
    """Zero-indexed (row, column) of a fragment in the source text.

    ``repeat`` is set on copies made while expanding a repeated passage so
    that each copy gets distinct element ids.
    """

    row: int = 0
    col: int = 0
    repeat: int | None = None

    def at_repeat(self, repeat: int | None) -> TextPosition:
        return TextPosition(self.row, self.col, repeat)

    @property
    def unique_id(self) -> str:
        """Element id stem for content generated from this position."""
        base = f"r_{self.row}_c_{self.col}"
        if self.repeat is not None:
            base += f"_x{self.repeat}"
        return base

    def __str__(self) -> str:
        return f"{self.row + 1}:{self.col + 1}"
