"""Capability contract shared by every kind of move."""

from __future__ import annotations

import dataclasses
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TypeAlias

from skreate.core.code import Code
from skreate.core.skater import Skater, Transition
from skreate.core.types import Bounds, Position, TextPosition
from skreate.notation.params import MoveParam, ParamInfo, to_string

if TYPE_CHECKING:
    from svgwrite import Drawing
    from svgwrite.base import BaseElement
    from svgwrite.path import Path

    from skreate.render.options import ElementIds, RenderOptions

Definition: TypeAlias = "tuple[str, BaseElement]"

LABEL_STYLE = "stroke:black; fill:black; font-size:{}pt;"
_ID_UNSAFE_RE = re.compile(r"[^A-Za-z0-9.-]")


@dataclass(frozen=True, slots=True)
class MoveInfo:
    """Static description of a move kind, used for parsing and documentation."""

    name: str
    summary: str
    example: str
    params: tuple[ParamInfo, ...] = ()
    visible: bool = True


@dataclass(frozen=True, slots=True)
class MoveLabel:
    """Text drawn alongside a move, positioned in the move's own frame."""

    text: str
    pos: Position
    count: int | None = None
    display: bool = True


# ── SVG helpers ──────────────────────────────────────────────────────────────


def svg_id(text: str) -> str:
    """XML-safe element id for a move's canonical text."""
    return _ID_UNSAFE_RE.sub(lambda m: f"_{ord(m.group()):x}_", text)


def use_at(dwg: Drawing, skater: Skater, def_id: str, opts: RenderOptions) -> BaseElement:
    """Reference definition *def_id*, placed at the skater's position and heading."""
    use = dwg.use(f"#{def_id}")
    use["transform"] = (
        f"translate({skater.pos.x} {skater.pos.y}) rotate({skater.direction.degrees})"
    )
    use["style"] = f"stroke:black; stroke-width:{opts.stroke_width()};"
    return use


def apply_style(path: Path, style: str) -> Path:
    if style == "dashed":
        path["stroke-dasharray"] = "50 30"
    return path


def text_element(
    dwg: Drawing, text: str, pos: Position, font_size: int, count: int | None = None
) -> BaseElement:
    """Label text, optionally led by a highlighted count."""
    element = dwg.text("", insert=(pos.x, pos.y), style=LABEL_STYLE.format(font_size))
    if count is not None:
        element.add(
            dwg.tspan(
                str(count),
                style="font-weight:bolder; fill:purple; stroke:purple;",
            )
        )
    element.add(dwg.tspan(text))
    return element


# ── Move contract ────────────────────────────────────────────────────────────


class Move(ABC):
    """A step, turn, jump or directive in a skating sequence.

    Geometry is expressed relative to a skater at (0,0) facing 0°; callers
    place the results by composing with the accumulated :class:`Skater`.
    """

    __slots__ = ()

    INFO: ClassVar[MoveInfo]
    text_pos: TextPosition | None

    # ── Identity ─────────────────────────────────────────────────────────

    @abstractmethod
    def params(self) -> list[MoveParam]:
        """Current parameter values, in schema order."""

    @abstractmethod
    def text(self) -> str:
        """Canonical text that parses back to an identical move."""

    @abstractmethod
    def opposite(self) -> Move:
        """The same move performed on the other foot."""

    @property
    def visible(self) -> bool:
        return self.INFO.visible

    def with_text_pos(self, pos: TextPosition | None) -> Move:
        return dataclasses.replace(self, text_pos=pos)  # type: ignore[type-var]

    # ── Kinematics ───────────────────────────────────────────────────────

    def start(self) -> Code | None:
        return None

    def end(self) -> Code | None:
        return self.start()

    def pre_transition(self, from_code: Code) -> Transition:
        """Footwork before the move, coming off a move that ended on *from_code*."""
        return Transition()

    def transition(self) -> Transition:
        """Effect of the move itself, assuming the pre-transition already happened."""
        return Transition()

    def bounds(self, before: Skater) -> Bounds | None:
        bounds = Bounds.at(before.pos)
        bounds.encompass((before + self.transition()).pos)
        return bounds

    # ── Rendering ────────────────────────────────────────────────────────

    def prepare(self, opts: RenderOptions) -> RenderOptions:
        """Diagram settings established before any bounds are known."""
        return opts

    def configure(self, opts: RenderOptions) -> RenderOptions:
        """Settings in force from this move onwards while drawing."""
        return opts

    def defs(self, dwg: Drawing, opts: RenderOptions) -> list[Definition]:
        return []

    def labels(self, opts: RenderOptions) -> list[MoveLabel]:
        return []

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        """Place this move's definition at *start*, plus its labels."""
        use = use_at(dwg, start, svg_id(self.text()), opts)
        if self.text_pos is not None:
            use["id"] = ids.next(self.text_pos)
        return [use, *self.render_labels(dwg, start, opts, ids)]

    def render_labels(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        elements = []
        for label in self.labels(opts):
            if not label.display:
                continue
            loc = (start + label.pos).pos
            element = text_element(dwg, label.text, loc, opts.font_size(), label.count)
            if self.text_pos is not None:
                element["id"] = ids.next(self.text_pos)
            elements.append(element)
        return elements

    def __str__(self) -> str:
        return self.text()


class PseudoMove(Move):
    """Directive written as a keyword followed by parameters."""

    __slots__ = ()

    KEYWORD: ClassVar[str]

    def text(self) -> str:
        return self.KEYWORD + to_string(self.INFO.params, self.params())

    def opposite(self) -> Move:
        return self
