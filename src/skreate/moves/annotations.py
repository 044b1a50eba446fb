"""Free text on the diagram: labels, fixed text and the title."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from skreate.core.skater import Skater
from skreate.core.types import Bounds, Position, TextPosition
from skreate.moves.base import LABEL_STYLE, MoveInfo, PseudoMove
from skreate.notation import params as p
from skreate.notation.params import MoveParam, param_map

if TYPE_CHECKING:
    from svgwrite import Drawing
    from svgwrite.base import BaseElement

    from skreate.render.options import ElementIds, RenderOptions

_TEXT_PARAM = p.text("text", "Text to display")
_FONT_SIZE_PARAM = p.number(
    "font-size", "Font size in points, or 0 to scale with the diagram", 0, p.Range.POSITIVE
)
_ROTATE_PARAM = p.number("rotate", "Rotation of the text in degrees", 0)


def _text(
    dwg: Drawing, text: str, pos: Position, font_size: int, rotate: int = 0
) -> BaseElement:
    element = dwg.text(text, insert=(pos.x, pos.y), style=LABEL_STYLE.format(font_size))
    if rotate:
        element["transform"] = f"rotate({rotate},{pos.x},{pos.y})"
    return element


@dataclass(frozen=True, slots=True)
class Label(PseudoMove):
    """Text placed relative to the skater's current position and heading."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Label",
        summary="Text relative to the skater",
        example='Label[text="CoE",fwd=50,side=20]',
        params=(
            _TEXT_PARAM,
            p.number("fwd", "Distance forward in centimetres", 0),
            p.number("side", "Distance to the skater's left in centimetres", 0),
            _FONT_SIZE_PARAM,
            _ROTATE_PARAM,
        ),
        visible=False,
    )
    KEYWORD: ClassVar[str] = "Label"

    text_value: str = ""
    fwd: int = 0
    side: int = 0
    font_size: int = 0
    rotate: int = 0
    text_pos: TextPosition | None = field(default=None, compare=False)

    @classmethod
    def from_params(cls, params: list[MoveParam], text_pos: TextPosition | None = None) -> Label:
        v = param_map(params)
        return cls(
            text_value=str(v["text"]),
            fwd=int(v["fwd"]),
            side=int(v["side"]),
            font_size=int(v["font-size"]),
            rotate=int(v["rotate"]),
            text_pos=text_pos,
        )

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("text", self.text_value),
            MoveParam("fwd", self.fwd),
            MoveParam("side", self.side),
            MoveParam("font-size", self.font_size),
            MoveParam("rotate", self.rotate),
        ]

    def opposite(self) -> Label:
        return dataclasses.replace(self, side=-self.side)

    def bounds(self, before: Skater) -> None:
        return None

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        pos = (start + Position(self.side, self.fwd)).pos
        element = _text(dwg, self.text_value, pos, self.font_size or opts.font_size(), self.rotate)
        if self.text_pos is not None:
            element["id"] = ids.next(self.text_pos)
        return [element]


@dataclass(frozen=True, slots=True)
class Text(PseudoMove):
    """Text at a fixed position on the diagram."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Text",
        summary="Text at a fixed position",
        example='Text[text="Start",x=500,y=200]',
        params=(
            _TEXT_PARAM,
            p.number("x", "Horizontal position in centimetres", 100),
            p.number("y", "Vertical position in centimetres", 100),
            _FONT_SIZE_PARAM,
            _ROTATE_PARAM,
        ),
        visible=False,
    )
    KEYWORD: ClassVar[str] = "Text"

    text_value: str = ""
    x: int = 100
    y: int = 100
    font_size: int = 0
    rotate: int = 0
    text_pos: TextPosition | None = field(default=None, compare=False)

    @classmethod
    def from_params(cls, params: list[MoveParam], text_pos: TextPosition | None = None) -> Text:
        v = param_map(params)
        return cls(
            text_value=str(v["text"]),
            x=int(v["x"]),
            y=int(v["y"]),
            font_size=int(v["font-size"]),
            rotate=int(v["rotate"]),
            text_pos=text_pos,
        )

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("text", self.text_value),
            MoveParam("x", self.x),
            MoveParam("y", self.y),
            MoveParam("font-size", self.font_size),
            MoveParam("rotate", self.rotate),
        ]

    def bounds(self, before: Skater) -> Bounds:
        return Bounds.at(Position(self.x, self.y))

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        pos = Position(self.x, self.y)
        element = _text(dwg, self.text_value, pos, self.font_size or opts.font_size(), self.rotate)
        if self.text_pos is not None:
            element["id"] = ids.next(self.text_pos)
        return [element]


@dataclass(frozen=True, slots=True)
class Title(PseudoMove):
    """Diagram title, also used as the document's title."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Title",
        summary="Diagram title",
        example='Title[text="Waltz"]',
        params=(
            _TEXT_PARAM,
            p.number("x", "Horizontal position in centimetres, or -1 to centre", -1),
            p.number("y", "Vertical position in centimetres", 100),
            p.number(
                "font-size",
                "Font size in points, or 0 for twice the label size",
                0,
                p.Range.POSITIVE,
            ),
        ),
        visible=False,
    )
    KEYWORD: ClassVar[str] = "Title"

    text_value: str = ""
    x: int = -1
    y: int = 100
    font_size: int = 0
    text_pos: TextPosition | None = field(default=None, compare=False)

    @classmethod
    def from_params(cls, params: list[MoveParam], text_pos: TextPosition | None = None) -> Title:
        v = param_map(params)
        return cls(
            text_value=str(v["text"]),
            x=int(v["x"]),
            y=int(v["y"]),
            font_size=int(v["font-size"]),
            text_pos=text_pos,
        )

    def params(self) -> list[MoveParam]:
        return [
            MoveParam("text", self.text_value),
            MoveParam("x", self.x),
            MoveParam("y", self.y),
            MoveParam("font-size", self.font_size),
        ]

    def prepare(self, opts: RenderOptions) -> RenderOptions:
        return dataclasses.replace(opts, title=self.text_value)

    def bounds(self, before: Skater) -> None:
        return None

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        x = self.x if self.x >= 0 else opts.bounds.midpoint.x
        font_size = self.font_size or 2 * opts.font_size()
        element = _text(dwg, self.text_value, Position(x, self.y), font_size)
        if self.text_pos is not None:
            element["id"] = ids.next(self.text_pos)
        return [element]
