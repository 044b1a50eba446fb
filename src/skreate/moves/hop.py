"""Hops: a spot on the ice where the skater leaves and lands on the same point."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from skreate.core.code import Code
from skreate.core.enums import Edge, PreTransition
from skreate.core.skater import Transition, pre_transition
from skreate.core.types import Position, TextPosition
from skreate.moves.base import Definition, Move, MoveInfo, MoveLabel, svg_id
from skreate.moves.edge import LABEL_OFFSET_PARAM
from skreate.notation import params as p
from skreate.notation.params import MoveParam, param_map, to_string

if TYPE_CHECKING:
    from svgwrite import Drawing

    from skreate.render.options import RenderOptions


@dataclass(frozen=True, slots=True)
class Hop(Move):
    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Hop",
        summary="Hop",
        example="RB-Hop",
        params=(
            p.number("size", "Size of the hop mark in centimetres", 5, p.Range.STRICTLY_POSITIVE),
            p.text("label", "Replacement label, used if non-empty"),
            LABEL_OFFSET_PARAM,
        ),
    )
    SUFFIX: ClassVar[str] = "-Hop"

    code: Code
    size: int = 5
    label: str = ""
    label_offset: int = -1
    pre: PreTransition = PreTransition.NORMAL
    text_pos: TextPosition | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.code.edge is not Edge.FLAT:
            raise ValueError(f"Hop must be written on a flat, not {self.code}")

    @classmethod
    def from_params(
        cls,
        pre: PreTransition,
        entry_code: Code,
        params: list[MoveParam],
        text_pos: TextPosition | None = None,
    ) -> Hop:
        v = param_map(params)
        return cls(
            entry_code,
            size=int(v["size"]),
            label=str(v["label"]),
            label_offset=int(v["label-offset"]),
            pre=pre,
            text_pos=text_pos,
        )

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("size", self.size),
            MoveParam("label", self.label),
            MoveParam("label-offset", self.label_offset),
        ]

    def text(self) -> str:
        suffix = to_string(self.INFO.params, self.params())
        return f"{self.pre.prefix}{self.code}{self.SUFFIX}{suffix}"

    def opposite(self) -> Hop:
        return Hop(
            self.code.opposite(),
            self.size,
            self.label,
            self.label_offset,
            self.pre,
            self.text_pos,
        )

    def start(self) -> Code:
        return self.code

    def pre_transition(self, from_code: Code) -> Transition:
        return pre_transition(self.pre, from_code, self.code)

    def transition(self) -> Transition:
        return Transition(code=self.code)

    def defs(self, dwg: Drawing, opts: RenderOptions) -> list[Definition]:
        group = dwg.g()
        group.add(dwg.circle(center=(0, 0), r=self.size, style="fill: black;"))
        return [(svg_id(self.text()), group)]

    def labels(self, opts: RenderOptions) -> list[MoveLabel]:
        text = self.label or "Hop"
        dist = int(30 * opts.label_scale(self.label_offset))
        return [MoveLabel(text, Position(dist, 0), display=bool(text.strip()))]
