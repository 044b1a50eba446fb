"""Skater state and the transitions that advance it."""

from __future__ import annotations

from dataclasses import dataclass, field

from skreate.core.code import Code
from skreate.core.enums import Foot, PreTransition, SkatingDirection
from skreate.core.types import Direction, Position, Rotation


@dataclass(frozen=True, slots=True)
class RelativeTransition:
    """Offset and turn expressed in the skater's current frame."""

    delta: Position = field(default_factory=Position)
    rotate: Rotation = field(default_factory=lambda: Rotation(0))

    def __str__(self) -> str:
        return f"rel {self.delta} {self.rotate}"


@dataclass(frozen=True, slots=True)
class AbsoluteTransition:
    """Jump straight to a location and heading."""

    pos: Position
    direction: Direction

    def __str__(self) -> str:
        return f"abs {self.pos} {self.direction}"


SpatialTransition = RelativeTransition | AbsoluteTransition


@dataclass(frozen=True, slots=True)
class Transition:
    """Spatial effect of a move plus the code the skater ends on."""

    spatial: SpatialTransition = field(default_factory=RelativeTransition)
    code: Code | None = None

    @property
    def is_absolute(self) -> bool:
        return isinstance(self.spatial, AbsoluteTransition)

    def __str__(self) -> str:
        code = "" if self.code is None else f" => {self.code}"
        return f"{self.spatial}{code}"


@dataclass(frozen=True, slots=True)
class Skater:
    """Position, heading and blade state at a point in a sequence."""

    pos: Position
    direction: Direction
    code: Code

    @classmethod
    def at_zero(cls, code: Code) -> Skater:
        return cls(Position(), Direction(0), code)

    def __add__(self, other: Transition | Position) -> Skater:
        if isinstance(other, Position):
            return Skater(self.pos.add_rotated(self.direction, other), self.direction, self.code)
        spatial = other.spatial
        if isinstance(spatial, AbsoluteTransition):
            pos, direction = spatial.pos, spatial.direction
        else:
            pos = self.pos.add_rotated(self.direction, spatial.delta)
            direction = self.direction + spatial.rotate
        code = self.code if other.code is None else other.code
        return Skater(pos, direction, code)

    def __str__(self) -> str:
        return f"{self.pos} {self.direction} {self.code}"


# Sideways shift (positive = skater's left) when changing feet.
_FOOT_CHANGE_SHIFT: dict[tuple[Foot, Foot], int] = {
    (Foot.LEFT, Foot.RIGHT): -36,
    (Foot.LEFT, Foot.BOTH): -18,
    (Foot.RIGHT, Foot.LEFT): 36,
    (Foot.RIGHT, Foot.BOTH): 18,
}
_CROSS_SIDE = 18
_CROSS_FWD = 18


def pre_transition(kind: PreTransition, before: Code, after: Code) -> Transition:
    """Footwork that takes the skater from *before* onto *after*."""
    shift = _FOOT_CHANGE_SHIFT.get((before.foot, after.foot), 0)
    if kind is PreTransition.WIDE:
        delta = Position(2 * shift, 0)
    elif kind in (PreTransition.CROSS_FRONT, PreTransition.CROSS_BEHIND) and shift:
        # The free foot crosses over, landing on the far side.
        side = _CROSS_SIDE if shift < 0 else -_CROSS_SIDE
        fwd = _CROSS_FWD if kind is PreTransition.CROSS_FRONT else -_CROSS_FWD
        if before.direction is SkatingDirection.BACKWARD:
            fwd = -fwd
        delta = Position(side, fwd)
    else:
        delta = Position(shift, 0)
    return Transition(RelativeTransition(delta), after)
