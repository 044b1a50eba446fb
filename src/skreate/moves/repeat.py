"""Repeat markers, written like the repeat signs of sheet music."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from skreate.core.skater import Skater
from skreate.core.types import TextPosition
from skreate.moves.base import MoveInfo, PseudoMove
from skreate.notation import params as p
from skreate.notation.params import MoveParam, param_map

if TYPE_CHECKING:
    from svgwrite import Drawing
    from svgwrite.base import BaseElement

    from skreate.render.options import ElementIds, RenderOptions


@dataclass(frozen=True, slots=True)
class RepeatStart(PseudoMove):
    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="RepeatStart",
        summary="Mark start of repeating section",
        example="|:",
        visible=False,
    )
    KEYWORD: ClassVar[str] = "RepeatStart"
    SYMBOL: ClassVar[str] = "|:"

    text_pos: TextPosition | None = field(default=None, compare=False)

    @classmethod
    def from_params(
        cls, params: list[MoveParam], text_pos: TextPosition | None = None
    ) -> RepeatStart:
        return cls(text_pos=text_pos)

    def params(self) -> list[MoveParam]:
        return []

    def text(self) -> str:
        return self.SYMBOL

    def bounds(self, before: Skater) -> None:
        return None

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        return []


@dataclass(frozen=True, slots=True)
class RepeatEnd(PseudoMove):
    """End of a repeated section; ``!|`` flips alternate passes onto the other foot."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="RepeatEnd",
        summary="Mark end of repeating section",
        example="!|x4",
        params=(
            p.number("count", "Number of passes through the section", 2, p.Range.STRICTLY_POSITIVE),
            p.boolean("alternate", "Whether alternate passes switch to the opposite foot"),
        ),
        visible=False,
    )
    KEYWORD: ClassVar[str] = "RepeatEnd"
    SYMBOL_SAME: ClassVar[str] = ":|"
    SYMBOL_ALTERNATE: ClassVar[str] = "!|"

    count: int = 2
    alternate: bool = False
    text_pos: TextPosition | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.count <= 0:
            raise ValueError(f"{self.count} out of range, must be > 0")

    @classmethod
    def from_params(
        cls, params: list[MoveParam], text_pos: TextPosition | None = None
    ) -> RepeatEnd:
        v = param_map(params)
        return cls(count=int(v["count"]), alternate=bool(v["alternate"]), text_pos=text_pos)

    def params(self) -> list[MoveParam]:
        return [MoveParam("count", self.count), MoveParam("alternate", self.alternate)]

    def text(self) -> str:
        symbol = self.SYMBOL_ALTERNATE if self.alternate else self.SYMBOL_SAME
        if self.count == 2:
            return symbol
        return f"{symbol}x{self.count}"

    def bounds(self, before: Skater) -> None:
        return None

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        return []
