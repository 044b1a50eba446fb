"""Core enumerations describing blade state and footwork."""

from __future__ import annotations

from enum import StrEnum


class Foot(StrEnum):
    """Skating foot."""

    LEFT = "L"
    RIGHT = "R"
    BOTH = "B"

    @property
    def opposite(self) -> Foot:
        return _OPPOSITE_FOOT[self]


class SkatingDirection(StrEnum):
    """Direction of travel relative to the skater's body."""

    FORWARD = "F"
    BACKWARD = "B"

    @property
    def opposite(self) -> SkatingDirection:
        if self is SkatingDirection.FORWARD:
            return SkatingDirection.BACKWARD
        return SkatingDirection.FORWARD


class Edge(StrEnum):
    """Blade edge; a flat is written as nothing."""

    OUTSIDE = "O"
    INSIDE = "I"
    FLAT = ""

    @property
    def opposite(self) -> Edge:
        return _OPPOSITE_EDGE[self]


class PreTransition(StrEnum):
    """How a move's first step is placed relative to the previous foot."""

    NORMAL = ""
    CROSS_FRONT = "xf-"
    CROSS_BEHIND = "xb-"
    WIDE = "wd-"

    @property
    def prefix(self) -> str:
        """Text prefix written before the move code."""
        return self.value

    @property
    def label(self) -> str | None:
        """Diagram label for the transition, if it is drawn."""
        return _PRE_TRANSITION_LABELS.get(self)


_OPPOSITE_FOOT: dict[Foot, Foot] = {
    Foot.LEFT: Foot.RIGHT,
    Foot.RIGHT: Foot.LEFT,
    Foot.BOTH: Foot.BOTH,
}

_OPPOSITE_EDGE: dict[Edge, Edge] = {
    Edge.OUTSIDE: Edge.INSIDE,
    Edge.INSIDE: Edge.OUTSIDE,
    Edge.FLAT: Edge.FLAT,
}

_PRE_TRANSITION_LABELS: dict[PreTransition, str] = {
    PreTransition.CROSS_FRONT: "xf",
    PreTransition.CROSS_BEHIND: "xb",
    PreTransition.WIDE: "wd",
}
