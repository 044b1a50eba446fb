"""Compound moves: fixed sequences of simpler moves drawn as one figure."""

from __future__ import annotations

import dataclasses
import logging
from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from skreate.core.code import Code
from skreate.core.enums import PreTransition
from skreate.core.skater import RelativeTransition, Skater, Transition
from skreate.core.types import Bounds, Rotation, TextPosition
from skreate.moves.base import Definition, Move
from skreate.moves.edge import LABEL_OFFSET_PARAM, edge_sign
from skreate.notation import params as p
from skreate.notation.params import MoveParam, ParamInfo, param_map, to_string

if TYPE_CHECKING:
    from svgwrite import Drawing
    from svgwrite.base import BaseElement

    from skreate.render.options import ElementIds, RenderOptions

_LOGGER = logging.getLogger(__name__)


# ── Schemas ──────────────────────────────────────────────────────────────────


def two_part_schema(
    angles: tuple[int, int, int, int, int, int, int],
    lengths: tuple[int, int, int, int, int, int, int],
    *,
    flat: bool = False,
) -> tuple[ParamInfo, ...]:
    """Schema for a move with an entry part and an exit part.

    *angles* and *lengths* run from the ``<<<``/``---`` value up through the
    default to the ``>>>``/``+++`` value.
    """
    a_less3, a_less2, a_less1, a_default, a_add1, a_add2, a_add3 = angles
    l_less3, l_less2, l_less1, l_default, l_add1, l_add2, l_add3 = lengths
    schema = (
        p.number(
            "angle",
            "Angle of rotation for each curved part, in degrees",
            a_default,
            p.Range.STRICTLY_POSITIVE,
            p.greater_less(a_add1, a_add2, a_add3, a_less1, a_less2, a_less3),
        ),
        p.number(
            "len",
            "Length of each curved part in centimetres",
            l_default,
            p.Range.STRICTLY_POSITIVE,
            p.plus_minus(l_add1, l_add2, l_add3, l_less1, l_less2, l_less3),
        ),
        p.number("delta-angle", "Difference in angle for second curved part, in degrees", 0),
        p.number("delta-len", "Difference in length for second curved part, in centimetres", 0),
        p.text("style", "Style of line"),
        p.text("transition-label", "Replacement transition label, used if non-empty"),
        p.text("label1", "Replacement entry label, used if non-empty"),
        p.text("label2", "Replacement exit label, used if non-empty"),
        LABEL_OFFSET_PARAM,
    )
    if flat:
        schema += (
            p.number(
                "flat-len", "Length between edges in centimetres", 50, p.Range.STRICTLY_POSITIVE
            ),
        )
    return schema


# ── Structure ────────────────────────────────────────────────────────────────


def check_children(moves: Sequence[Move]) -> None:
    """Raise :class:`ValueError` unless *moves* can form a compound."""
    if len(moves) < 2:
        raise ValueError(f"Compound move needs at least 2 parts, got {len(moves)}")
    if moves[0].start() is None:
        raise ValueError(f"Compound move must start with a skating move, not {moves[0]}")
    for mv in moves[1:]:
        if mv.transition().is_absolute:
            raise ValueError(f"Only the first part of a compound move may be absolute: {mv}")


class Compound(Move):
    """A move made of ``moves``, each placed where the previous one ended.

    Only the first part's pre-transition applies; later parts follow on
    directly.
    """

    __slots__ = ()

    # Index of the part that shows the count and duration, if any.
    MOVE_FOR_COUNT: ClassVar[int | None] = 0

    moves: tuple[Move, ...]

    def _walk(self, start: Skater) -> list[tuple[Skater, Move]]:
        result = []
        skater = start
        for mv in self.moves:
            result.append((skater, mv))
            skater = skater + mv.transition()
        return result

    def start(self) -> Code | None:
        return self.moves[0].start()

    def end(self) -> Code | None:
        return self.moves[-1].end()

    def pre_transition(self, from_code: Code) -> Transition:
        return self.moves[0].pre_transition(from_code)

    def transition(self) -> Transition:
        start = self.start()
        assert start is not None
        skater = Skater.at_zero(start)
        for mv in self.moves:
            skater = skater + mv.transition()
        return Transition(
            RelativeTransition(skater.pos, Rotation(skater.direction.degrees)), skater.code
        )

    def bounds(self, before: Skater) -> Bounds | None:
        bounds: Bounds | None = None
        for skater, mv in self._walk(before):
            part = mv.bounds(skater)
            if part is None:
                continue
            if bounds is None:
                bounds = part.copy()
            else:
                bounds.encompass_bounds(part)
        return bounds

    def defs(self, dwg: Drawing, opts: RenderOptions) -> list[Definition]:
        return [definition for mv in self.moves for definition in mv.defs(dwg, opts)]

    def render(
        self, dwg: Drawing, start: Skater, opts: RenderOptions, ids: ElementIds
    ) -> list[BaseElement]:
        untimed = dataclasses.replace(opts, count=None, duration=None)
        elements: list[BaseElement] = []
        for idx, (skater, mv) in enumerate(self._walk(start)):
            part_opts = opts if idx == self.MOVE_FOR_COUNT else untimed
            elements.extend(mv.render(dwg, skater, part_opts, ids))
        return elements


@dataclass(frozen=True, slots=True)
class SkatingCompound(Compound):
    """Compound written as ``[prefix]CODE<suffix>[params]``.

    Subclasses supply ``SUFFIX`` and :meth:`build`, which lays out the parts
    from the entry code and the resolved parameter values.
    """

    SUFFIX: ClassVar[str]

    code: Code
    values: tuple[MoveParam, ...] = ()
    pre: PreTransition = PreTransition.NORMAL
    text_pos: TextPosition | None = field(default=None, compare=False)
    moves: tuple[Move, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.values:
            object.__setattr__(self, "values", tuple(p.defaults(self.INFO.params)))
        elif not p.compatible(self.INFO.params, self.values):
            raise ValueError(f"Parameters {list(self.values)} do not match {self.INFO.name}")
        moves = tuple(self.build())
        check_children(moves)
        object.__setattr__(self, "moves", moves)
        _LOGGER.debug("%s expands to %s", self.text(), "; ".join(mv.text() for mv in moves))

    @classmethod
    def from_params(
        cls,
        pre: PreTransition,
        entry_code: Code,
        params: list[MoveParam],
        text_pos: TextPosition | None = None,
    ) -> SkatingCompound:
        return cls(entry_code, tuple(params), pre, text_pos)

    @abstractmethod
    def build(self) -> list[Move]:
        """Parts of the move, each in the frame where the previous part ends."""

    def int_param(self, name: str) -> int:
        return int(param_map(self.values)[name])

    def str_param(self, name: str) -> str:
        return str(param_map(self.values)[name])

    def entry_sign(self) -> int:
        """Turn direction of the entry edge, rejecting codes that aren't curving edges."""
        sign = edge_sign(self.code)
        if sign is None:
            raise ValueError(f"{self.code} is not a valid entry edge for {self.INFO.name}")
        return sign

    def params(self) -> list[MoveParam]:
        return list(self.values)

    def text(self) -> str:
        suffix = to_string(self.INFO.params, self.values)
        return f"{self.pre.prefix}{self.code}{self.SUFFIX}{suffix}"

    def opposite(self) -> SkatingCompound:
        return dataclasses.replace(self, code=self.code.opposite())


@dataclass(frozen=True, slots=True)
class TwoPart:
    """Resolved values of a :func:`two_part_schema` move."""

    angle1: int
    len1: int
    angle2: int
    len2: int
    style: str
    transition_label: str
    label1: str
    label2: str
    label_offset: int

    @classmethod
    def of(cls, move: SkatingCompound) -> TwoPart:
        angle, length = move.int_param("angle"), move.int_param("len")
        return cls(
            angle1=angle,
            len1=length,
            angle2=angle + move.int_param("delta-angle"),
            len2=length + move.int_param("delta-len"),
            style=move.str_param("style"),
            transition_label=move.str_param("transition-label"),
            label1=move.str_param("label1"),
            label2=move.str_param("label2"),
            label_offset=move.int_param("label-offset"),
        )
