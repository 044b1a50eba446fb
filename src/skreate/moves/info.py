"""Diagram-wide settings written inline as an ``Info`` directive."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from skreate.core.skater import Skater
from skreate.core.types import TextPosition
from skreate.moves.base import Definition, MoveInfo, PseudoMove
from skreate.notation import params as p
from skreate.notation.params import MoveParam, param_map

if TYPE_CHECKING:
    from svgwrite import Drawing
    from svgwrite.base import BaseElement

    from skreate.render.options import ElementIds, RenderOptions

START_MARK = "start-mark"
END_MARK = "end-mark"
_MARK_PATH = "M 0,0 l 10,0 l -20,0 l 10,0 l 0,20 l 8,-8 l -8,8 l-8,-8 l 8,8 l 0,-30 l 0,10"


@dataclass(frozen=True, slots=True)
class Info(PseudoMove):
    """Switches diagram features on or off for the rest of the sequence.

    Bounds, grid, per-move bounds and margins apply to the whole diagram.
    Markers, font size, stroke width, label offset and auto-counting take
    effect from the point where the directive appears.
    """

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Info",
        summary="Diagram settings",
        example="Info[markers=true,grid=100,move-bounds=true]",
        params=(
            p.boolean("markers", "Show start and end markers for each move"),
            p.boolean("bounds", "Show the bounding box of the diagram"),
            p.number("grid", "Grid spacing in centimetres, or 0 for none", 0, p.Range.POSITIVE),
            p.number("margin-x", "Horizontal margin in centimetres", 50, p.Range.POSITIVE),
            p.number("margin-y", "Vertical margin in centimetres", 50, p.Range.POSITIVE),
            p.boolean("move-bounds", "Show the bounding box of each move"),
            p.number("font-size", "Font size in points, or -1 to scale with the diagram", -1),
            p.number(
                "stroke-width",
                "Line width, or 0 to scale with the diagram",
                0,
                p.Range.POSITIVE,
            ),
            p.number("label-offset", "Percentage to scale label offsets by", 100),
            p.boolean("auto-count", "Number visible moves automatically"),
        ),
        visible=False,
    )
    KEYWORD: ClassVar[str] = "Info"

    markers: bool = False
    show_bounds: bool = False
    grid: int = 0
    margin_x: int = 50
    margin_y: int = 50
    move_bounds: bool = False
    font_size: int = -1
    stroke_width: int = 0
    label_offset: int = 100
    auto_count: bool = False
    text_pos: TextPosition | None = field(default=None, compare=False)

    @classmethod
    def from_params(cls, params: list[MoveParam], text_pos: TextPosition | None = None) -> Info:
        v = param_map(params)
        return cls(
            markers=bool(v["markers"]),
            show_bounds=bool(v["bounds"]),
            grid=int(v["grid"]),
            margin_x=int(v["margin-x"]),
            margin_y=int(v["margin-y"]),
            move_bounds=bool(v["move-bounds"]),
            font_size=int(v["font-size"]),
            stroke_width=int(v["stroke-width"]),
            label_offset=int(v["label-offset"]),
            auto_count=bool(v["auto-count"]),
            text_pos=text_pos,
        )

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("markers", self.markers),
            MoveParam("bounds", self.show_bounds),
            MoveParam("grid", self.grid),
            MoveParam("margin-x", self.margin_x),
            MoveParam("margin-y", self.margin_y),
            MoveParam("move-bounds", self.move_bounds),
            MoveParam("font-size", self.font_size),
            MoveParam("stroke-width", self.stroke_width),
            MoveParam("label-offset", self.label_offset),
            MoveParam("auto-count", self.auto_count),
        ]

    def prepare(self, opts: RenderOptions) -> RenderOptions:
        return dataclasses.replace(
            opts,
            show_bounds=self.show_bounds,
            grid=self.grid or None,
            show_move_bounds=self.move_bounds,
            margin_x=self.margin_x,
            margin_y=self.margin_y,
        )

    def configure(self, opts: RenderOptions) -> RenderOptions:
        return dataclasses.replace(
            opts,
            markers=self.markers,
            font_size_override=self.font_size if self.font_size > 0 else None,
            stroke_width_override=self.stroke_width or None,
            label_offset=self.label_offset,
            auto_count=1 if self.auto_count else None,
        )

    def defs(self, dwg: Drawing, opts: RenderOptions) -> list[Definition]:
        if not self.markers:
            return []
        return [
            (START_MARK, dwg.path(d=_MARK_PATH, style="stroke:green;")),
            (END_MARK, dwg.path(d=_MARK_PATH, style="stroke:red;")),
        ]

    def bounds(self, before: Skater) -> None:
        return None

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        return []
