"""Ice rink outline drawn behind a sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from skreate.core.skater import Skater
from skreate.core.types import Bounds, Position, TextPosition
from skreate.moves.base import Definition, MoveInfo, PseudoMove, svg_id, use_at
from skreate.notation import params as p
from skreate.notation.params import MoveParam, param_map

if TYPE_CHECKING:
    from svgwrite import Drawing
    from svgwrite.base import BaseElement

    from skreate.render.options import ElementIds, RenderOptions

_MAX_CORNER_RADIUS = 850
_FACEOFF_SPOT_RADIUS = 2


@dataclass(frozen=True, slots=True)
class Rink(PseudoMove):
    """Rink boundary with optional centre, mid and goal lines."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Rink",
        summary="Ice rink outline",
        example="Rink",
        params=(
            p.number("width", "Width in centimetres", 3000, p.Range.STRICTLY_POSITIVE),
            p.number("length", "Length in centimetres", 6100, p.Range.STRICTLY_POSITIVE),
            p.boolean("centre-line", "Show the centre line", True),
            p.number("centre-circle", "Centre circle radius in centimetres, <= 0 to omit", 400),
            p.boolean("centre-faceoff", "Show the centre faceoff spot", True),
            p.number("mid-lines", "Distance of mid lines from centre, <= 0 to omit", 800),
            p.number("goal-lines", "Distance of goal lines from the ends, <= 0 to omit", 0),
            p.boolean("goals", "Show goals"),
            p.boolean("faceoffs", "Show faceoff spots"),
        ),
    )
    KEYWORD: ClassVar[str] = "Rink"

    width: int = 3000
    length: int = 6100
    centre_line: bool = True
    centre_circle: int = 400
    centre_faceoff: bool = True
    mid_lines: int = 800
    goal_lines: int = 0
    goals: bool = False
    faceoffs: bool = False
    text_pos: TextPosition | None = field(default=None, compare=False)

    @classmethod
    def from_params(cls, params: list[MoveParam], text_pos: TextPosition | None = None) -> Rink:
        v = param_map(params)
        return cls(
            width=int(v["width"]),
            length=int(v["length"]),
            centre_line=bool(v["centre-line"]),
            centre_circle=int(v["centre-circle"]),
            centre_faceoff=bool(v["centre-faceoff"]),
            mid_lines=int(v["mid-lines"]),
            goal_lines=int(v["goal-lines"]),
            goals=bool(v["goals"]),
            faceoffs=bool(v["faceoffs"]),
            text_pos=text_pos,
        )

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("width", self.width),
            MoveParam("length", self.length),
            MoveParam("centre-line", self.centre_line),
            MoveParam("centre-circle", self.centre_circle),
            MoveParam("centre-faceoff", self.centre_faceoff),
            MoveParam("mid-lines", self.mid_lines),
            MoveParam("goal-lines", self.goal_lines),
            MoveParam("goals", self.goals),
            MoveParam("faceoffs", self.faceoffs),
        ]

    @property
    def portrait(self) -> bool:
        return self.width < self.length

    @property
    def corner_radius(self) -> int:
        return min(min(self.width, self.length) // 4, _MAX_CORNER_RADIUS)

    def bounds(self, before: Skater) -> Bounds:
        return Bounds(Position(0, 0), Position(self.width, self.length))

    def _across(self, dwg: Drawing, at: int, style: str | None = None) -> BaseElement:
        """Line across the short side of the rink, *at* cm along it."""
        if self.portrait:
            d = f"M 0,{at} l {self.width},0"
        else:
            d = f"M {at},0 l 0,{self.length}"
        return dwg.path(d=d) if style is None else dwg.path(d=d, style=style)

    def defs(self, dwg: Drawing, opts: RenderOptions) -> list[Definition]:
        w, n = self.width, self.length
        long_side = n if self.portrait else w
        centre = (w // 2, n // 2)
        group = dwg.g()
        group.add(
            dwg.rect(insert=(0, 0), size=(w, n), rx=self.corner_radius, ry=self.corner_radius)
        )
        if self.centre_line:
            group.add(self._across(dwg, long_side // 2, "stroke:red;"))
        if self.centre_circle > 0:
            group.add(dwg.circle(center=centre, r=self.centre_circle, style="stroke:red;"))
        if self.centre_faceoff:
            group.add(dwg.circle(center=centre, r=_FACEOFF_SPOT_RADIUS, style="fill: black;"))
        if self.mid_lines > 0:
            for at in (long_side // 2 - self.mid_lines, long_side // 2 + self.mid_lines):
                group.add(self._across(dwg, at, "stroke: blue;"))
        if self.goal_lines > 0:
            for at in (self.goal_lines, long_side - self.goal_lines):
                group.add(self._across(dwg, at))
        return [(svg_id(self.text()), group)]

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        """Draw the rink at the origin, whatever the skater's position."""
        use = use_at(dwg, Skater.at_zero(start.code), svg_id(self.text()), opts)
        if self.text_pos is not None:
            use["id"] = ids.next(self.text_pos)
        return [use]
