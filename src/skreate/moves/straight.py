"""Straight-line edges on the flat of the blade."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from skreate.core.code import Code
from skreate.core.enums import Edge, Foot, PreTransition
from skreate.core.skater import RelativeTransition, Transition, pre_transition
from skreate.core.types import Position, TextPosition
from skreate.moves.base import Definition, Move, MoveInfo, MoveLabel, apply_style, svg_id
from skreate.moves.edge import LEN_PARAM
from skreate.notation import params as p
from skreate.notation.params import MoveParam, param_map, to_string

if TYPE_CHECKING:
    from svgwrite import Drawing

    from skreate.render.options import RenderOptions

# Half the gap between the two tracks of a two-footed glide.
_HALF_WIDTH = 10


@dataclass(frozen=True, slots=True)
class StraightEdge(Move):
    """Straight glide on one or both feet."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Straight Edge",
        summary="Straight edge",
        example="LF",
        params=(
            LEN_PARAM,
            p.text("label", "Replacement label, used if non-empty"),
            p.text("style", "Style of line"),
        ),
    )

    code: Code
    length: int = 100
    label: str = ""
    style: str = ""
    pre: PreTransition = PreTransition.NORMAL
    text_pos: TextPosition | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.code.edge is not Edge.FLAT:
            raise ValueError(f"{self.code} is not a flat")
        if self.length <= 0:
            raise ValueError(f"{self.length} out of range, must be > 0")

    @classmethod
    def from_params(
        cls,
        pre: PreTransition,
        entry_code: Code,
        params: list[MoveParam],
        text_pos: TextPosition | None = None,
    ) -> StraightEdge:
        v = param_map(params)
        return cls(
            entry_code,
            length=int(v["len"]),
            label=str(v["label"]),
            style=str(v["style"]),
            pre=pre,
            text_pos=text_pos,
        )

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("len", self.length),
            MoveParam("label", self.label),
            MoveParam("style", self.style),
        ]

    def text(self) -> str:
        return f"{self.pre.prefix}{self.code}{to_string(self.INFO.params, self.params())}"

    def opposite(self) -> StraightEdge:
        return dataclasses.replace(self, code=self.code.opposite())

    def start(self) -> Code:
        return self.code

    def pre_transition(self, from_code: Code) -> Transition:
        return pre_transition(self.pre, from_code, self.code)

    def transition(self) -> Transition:
        return Transition(RelativeTransition(Position(0, self.length)), self.code)

    def defs(self, dwg: Drawing, opts: RenderOptions) -> list[Definition]:
        n, hw = self.length, _HALF_WIDTH
        if self.code.foot is Foot.BOTH:
            d = f"M 0,0 m {hw},0 l 0,{n} m -{2 * hw},-{n} l 0,{n}"
        else:
            d = f"M 0,0 l 0,{n}"
        group = dwg.g()
        group.add(apply_style(dwg.path(d=d), self.style))
        return [(svg_id(self.text()), group)]

    def labels(self, opts: RenderOptions) -> list[MoveLabel]:
        if self.code.foot is Foot.BOTH:
            return []
        text = self.label or str(self.code)
        return [
            MoveLabel(
                text,
                Position(30, self.length // 2),
                count=opts.count,
                display=opts.count is not None or bool(text.strip()),
            )
        ]
