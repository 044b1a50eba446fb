"""Invisible repositioning: relative shifts and absolute warps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from skreate.core.code import Code
from skreate.core.skater import AbsoluteTransition, RelativeTransition, Skater, Transition
from skreate.core.types import Bounds, Direction, Position, Rotation, TextPosition
from skreate.moves.base import MoveInfo, PseudoMove
from skreate.notation import params as p
from skreate.notation.params import MoveParam, param_map

if TYPE_CHECKING:
    from svgwrite import Drawing
    from svgwrite.base import BaseElement

    from skreate.render.options import ElementIds, RenderOptions

_CODE_PARAM = p.text("code", "Code to switch to, if non-empty")


def _optional_code(text: str) -> Code | None:
    return Code.parse(text) if text else None


@dataclass(frozen=True, slots=True)
class Shift(PseudoMove):
    """Move the skater without drawing anything, e.g. across a turn's cusp."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Shift",
        summary="Shift without drawing",
        example="Shift[fwd=50,side=50,rotate=270]",
        params=(
            p.number("fwd", "Distance forward in centimetres", 0),
            p.number("side", "Distance to the skater's left in centimetres", 0),
            p.number("rotate", "Rotation in degrees, clockwise", 0),
            _CODE_PARAM,
        ),
        visible=False,
    )
    KEYWORD: ClassVar[str] = "Shift"

    side: int = 0
    fwd: int = 0
    rotate: int = 0
    code: Code | None = None
    text_pos: TextPosition | None = field(default=None, compare=False)

    @classmethod
    def from_params(cls, params: list[MoveParam], text_pos: TextPosition | None = None) -> Shift:
        v = param_map(params)
        return cls(
            side=int(v["side"]),
            fwd=int(v["fwd"]),
            rotate=int(v["rotate"]),
            code=_optional_code(str(v["code"])),
            text_pos=text_pos,
        )

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("fwd", self.fwd),
            MoveParam("side", self.side),
            MoveParam("rotate", self.rotate),
            MoveParam("code", "" if self.code is None else str(self.code)),
        ]

    def opposite(self) -> Shift:
        return Shift(
            side=-self.side,
            fwd=self.fwd,
            rotate=-self.rotate,
            code=None if self.code is None else self.code.opposite(),
            text_pos=self.text_pos,
        )

    def transition(self) -> Transition:
        return Transition(
            RelativeTransition(Position(self.side, self.fwd), Rotation(self.rotate)),
            self.code,
        )

    def bounds(self, before: Skater) -> Bounds:
        return Bounds.at((before + Position(self.side, self.fwd)).pos)

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        return []


@dataclass(frozen=True, slots=True)
class Warp(PseudoMove):
    """Teleport the skater to an absolute position and heading."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Warp",
        summary="Move to a fixed position without drawing",
        example="Warp[x=100,y=100,dir=270]",
        params=(
            p.number("x", "Horizontal position in centimetres", 0),
            p.number("y", "Vertical position in centimetres", 0),
            p.number(
                "dir", "Direction to face, in degrees clockwise from down", 0, p.Range.POSITIVE
            ),
            _CODE_PARAM,
        ),
        visible=False,
    )
    KEYWORD: ClassVar[str] = "Warp"

    x: int = 0
    y: int = 0
    direction: int = 0
    code: Code | None = None
    text_pos: TextPosition | None = field(default=None, compare=False)

    @classmethod
    def from_params(cls, params: list[MoveParam], text_pos: TextPosition | None = None) -> Warp:
        v = param_map(params)
        return cls(
            x=int(v["x"]),
            y=int(v["y"]),
            direction=int(v["dir"]),
            code=_optional_code(str(v["code"])),
            text_pos=text_pos,
        )

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("x", self.x),
            MoveParam("y", self.y),
            MoveParam("dir", self.direction),
            MoveParam("code", "" if self.code is None else str(self.code)),
        ]

    def opposite(self) -> Warp:
        return Warp(
            self.x,
            self.y,
            self.direction,
            None if self.code is None else self.code.opposite(),
            self.text_pos,
        )

    def transition(self) -> Transition:
        return Transition(
            AbsoluteTransition(Position(self.x, self.y), Direction(self.direction)), self.code
        )

    def bounds(self, before: Skater) -> Bounds:
        return Bounds.at(Position(self.x, self.y))

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        return []
