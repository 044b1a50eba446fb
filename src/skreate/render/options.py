"""Options threaded through the passes that draw a diagram."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field

from skreate.core.types import Bounds, Position, TextPosition

DEFAULT_TITLE = "Skating Diagram"
DEFAULT_MARGIN = 50

# (diagonal upper limit in cm, value), checked in order.
_FONT_SIZES: tuple[tuple[float, int], ...] = (
    (500.0, 10),
    (800.0, 12),
    (933.0, 14),
    (1067.0, 16),
    (1200.0, 18),
    (1600.0, 20),
    (2400.0, 22),
)
_MAX_FONT_SIZE = 24
_STROKE_WIDTHS: tuple[tuple[float, int], ...] = (
    (1000.0, 1),
    (1600.0, 2),
    (2400.0, 3),
)
_MAX_STROKE_WIDTH = 4


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Immutable snapshot of diagram-wide settings.

    Each step of the render fold returns a new snapshot (see
    ``dataclasses.replace``), so a move can only affect the moves after it.
    """

    title: str = DEFAULT_TITLE
    markers: bool = False
    grid: int | None = None
    show_bounds: bool = False
    show_move_bounds: bool = False
    margin_x: int = DEFAULT_MARGIN
    margin_y: int = DEFAULT_MARGIN
    bounds: Bounds = field(default_factory=lambda: Bounds.at(Position()))
    font_size_override: int | None = None
    stroke_width_override: int | None = None
    # Percentage applied to label offsets of moves that don't set their own.
    label_offset: int = 100
    # Count to show on the next visible move when auto-counting.
    auto_count: int | None = None
    count: int | None = None
    duration: int | None = None

    def font_size(self) -> int:
        """Effective font size in points, scaled to the diagram unless fixed."""
        if self.font_size_override is not None:
            return self.font_size_override
        diagonal = self.bounds.diagonal
        for limit, size in _FONT_SIZES:
            if diagonal < limit:
                return size
        return _MAX_FONT_SIZE

    def stroke_width(self) -> int:
        """Effective stroke width, scaled to the diagram unless fixed."""
        if self.stroke_width_override is not None:
            return self.stroke_width_override
        diagonal = self.bounds.diagonal
        for limit, width in _STROKE_WIDTHS:
            if diagonal < limit:
                return width
        return _MAX_STROKE_WIDTH

    def label_scale(self, percent: int) -> float:
        """Label offset multiplier; ``-1`` defers to the diagram-wide setting."""
        if percent == -1:
            return self.label_offset / 100
        return percent / 100


class ElementIds:
    """Hands out unique element ids derived from source positions."""

    __slots__ = ("_issued",)

    def __init__(self) -> None:
        self._issued: defaultdict[TextPosition, int] = defaultdict(int)

    def next(self, pos: TextPosition) -> str:
        self._issued[pos] += 1
        n = self._issued[pos]
        if n == 1:
            return pos.unique_id
        return f"{pos.unique_id}_n{n}"

    def issued(self) -> list[str]:
        """Id stems in the order their positions were first seen."""
        return [pos.unique_id for pos in self._issued]
