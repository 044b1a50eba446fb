"""Core value types for skating diagrams, with no rendering dependencies.

Quick start::

    from skreate.core import Skater, Transition, RelativeTransition, Position, code

    skater = Skater.at_zero(code("LFO"))
    skater = skater + Transition(RelativeTransition(Position(0, 100)))
"""

from skreate.core.code import Code, code
from skreate.core.enums import Edge, Foot, PreTransition, SkatingDirection
from skreate.core.errors import ParseError
from skreate.core.skater import (
    AbsoluteTransition,
    RelativeTransition,
    Skater,
    SpatialTransition,
    Transition,
    pre_transition,
)
from skreate.core.types import Bounds, Direction, Position, Rotation, TextPosition

__all__ = [
    # Enums
    "Edge",
    "Foot",
    "PreTransition",
    "SkatingDirection",
    # Geometry
    "Bounds",
    "Direction",
    "Position",
    "Rotation",
    "TextPosition",
    # Kinematics
    "AbsoluteTransition",
    "Code",
    "RelativeTransition",
    "Skater",
    "SpatialTransition",
    "Transition",
    "code",
    "pre_transition",
    # Errors
    "ParseError",
]
