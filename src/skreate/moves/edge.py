"""Curving edges: the arc every other skating figure is built from."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from skreate.core.code import Code, code
from skreate.core.enums import PreTransition
from skreate.core.skater import RelativeTransition, Skater, Transition, pre_transition
from skreate.core.types import Bounds, Position, Rotation, TextPosition
from skreate.moves.base import Definition, Move, MoveInfo, MoveLabel, apply_style, svg_id
from skreate.notation import params as p
from skreate.notation.params import MoveParam, param_map, to_string

if TYPE_CHECKING:
    from svgwrite import Drawing

    from skreate.render.options import RenderOptions

# Curving towards the skater's left (-1, widdershins) or right (+1, clockwise).
_SIGNS: dict[Code, int] = {
    code("LFO"): -1,
    code("RFI"): -1,
    code("LBI"): -1,
    code("RBO"): -1,
    code("RFO"): 1,
    code("LFI"): 1,
    code("RBI"): 1,
    code("LBO"): 1,
}

LEN_PARAM = p.number(
    "len",
    "Length in centimetres",
    100,
    p.Range.STRICTLY_POSITIVE,
    p.plus_minus(150, 200, 300, 75, 50, 25),
)
LABEL_OFFSET_PARAM = p.number(
    "label-offset",
    "Amount to scale label offsets by, as a percentage, or -1 to use global value",
    -1,
)


@dataclass(frozen=True, slots=True)
class Curve(Move):
    """Arc of a circle on a single edge."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Edge",
        summary="Curving edge",
        example="LFO",
        params=(
            p.number(
                "angle",
                "Angle of rotation from start to finish, in degrees",
                45,
                p.Range.STRICTLY_POSITIVE,
                p.greater_less(60, 90, 120, 30, 20, 10),
            ),
            LEN_PARAM,
            p.text("label", "Replacement label, used if non-empty"),
            p.text("style", "Style of line"),
            p.text("transition-label", "Replacement transition label, used if non-empty"),
            LABEL_OFFSET_PARAM,
        ),
    )

    code: Code
    angle: int = 45
    length: int = 100
    label: str = ""
    style: str = ""
    transition_label: str = ""
    label_offset: int = -1
    pre: PreTransition = PreTransition.NORMAL
    text_pos: TextPosition | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.code not in _SIGNS:
            raise ValueError(f"{self.code} is not a curving edge")
        if self.angle <= 0:
            raise ValueError(f"{self.angle} out of range, must be > 0")
        if self.length <= 0:
            raise ValueError(f"{self.length} out of range, must be > 0")

    @classmethod
    def from_params(
        cls,
        pre: PreTransition,
        entry_code: Code,
        params: list[MoveParam],
        text_pos: TextPosition | None = None,
    ) -> Curve:
        v = param_map(params)
        return cls(
            entry_code,
            angle=int(v["angle"]),
            length=int(v["len"]),
            label=str(v["label"]),
            style=str(v["style"]),
            transition_label=str(v["transition-label"]),
            label_offset=int(v["label-offset"]),
            pre=pre,
            text_pos=text_pos,
        )

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def sign(self) -> int:
        return _SIGNS[self.code]

    @property
    def radius(self) -> float:
        # An arc of `angle` degrees is that fraction of 2πr.
        return self.length * 180 / (self.angle * math.pi)

    def percent_point(self, percent: int) -> Position:
        """Point part-way along the arc, starting at (0,0) facing 0°."""
        r = self.radius
        theta = math.radians(self.angle) * percent / 100
        if self.sign == 1:
            x, y = r * math.cos(theta) - r, r * math.sin(theta)
        else:
            x, y = r - r * math.cos(theta), r * math.sin(theta)
        return Position(int(x), int(y))

    def endpoint(self) -> Position:
        return self.percent_point(100)

    # ── Move ─────────────────────────────────────────────────────────────

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("angle", self.angle),
            MoveParam("len", self.length),
            MoveParam("label", self.label),
            MoveParam("style", self.style),
            MoveParam("transition-label", self.transition_label),
            MoveParam("label-offset", self.label_offset),
        ]

    def text(self) -> str:
        return f"{self.pre.prefix}{self.code}{to_string(self.INFO.params, self.params())}"

    def opposite(self) -> Curve:
        return dataclasses.replace(self, code=self.code.opposite())

    def start(self) -> Code:
        return self.code

    def pre_transition(self, from_code: Code) -> Transition:
        return pre_transition(self.pre, from_code, self.code)

    def transition(self) -> Transition:
        return Transition(
            RelativeTransition(self.endpoint(), Rotation(self.angle * self.sign)),
            self.code,
        )

    def bounds(self, before: Skater) -> Bounds:
        bounds = Bounds.at(before.pos)
        for percent in range(101):
            bounds.encompass((before + self.percent_point(percent)).pos)
        return bounds

    def defs(self, dwg: Drawing, opts: RenderOptions) -> list[Definition]:
        r = int(self.radius)
        big = 1 if self.angle >= 180 else 0
        sweep = 0 if self.sign == -1 else 1
        end = self.endpoint()
        path = dwg.path(d=f"M 0,0 a {r},{r} 0 {big} {sweep} {end.x},{end.y}")
        group = dwg.g()
        group.add(apply_style(path, self.style))
        return [(svg_id(self.text()), group)]

    def labels(self, opts: RenderOptions) -> list[MoveLabel]:
        font_size = opts.font_size()
        mid = self.percent_point(50)
        half_theta = math.radians(self.sign * self.angle) / 2
        distance = -3 * font_size * self.sign * opts.label_scale(self.label_offset)
        offset = Position(
            int(distance * math.cos(half_theta)), int(distance * math.sin(half_theta))
        )

        text = self.label or str(self.code)
        labels = [
            MoveLabel(
                text,
                mid + offset,
                count=opts.count,
                display=opts.count is not None or bool(text.strip()),
            )
        ]
        if opts.duration is not None:
            labels.append(MoveLabel("", mid + -offset, count=opts.duration))

        transition = self.transition_label or self.pre.label
        if transition:
            # 5% along the arc is still close to vertical.
            early = self.percent_point(5)
            labels.append(
                MoveLabel(
                    transition,
                    early + Position(self.sign * 2 * font_size, 0),
                    display=bool(transition.strip()),
                )
            )
        return labels


def edge_sign(c: Code) -> int | None:
    """Which way a curving edge turns: ``-1`` widdershins, ``1`` clockwise."""
    return _SIGNS.get(c)
