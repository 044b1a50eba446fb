"""Twizzles: travelling multi-rotation turns on one foot."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from skreate.core.code import Code
from skreate.moves.annotations import Label
from skreate.moves.base import Move, MoveInfo
from skreate.moves.compound import SkatingCompound
from skreate.moves.edge import Curve
from skreate.moves.shift import Shift
from skreate.notation import params as p
from skreate.notation.params import to_string

# Whole turns, optionally with a trailing half, e.g. ``1.5``.
TURN_COUNT_RE = re.compile(r"([1-9][0-9]*)(\.5)?")
_BLANK = " "
_POSITIVE = p.Range.STRICTLY_POSITIVE


def parse_half_turns(text: str, pos: int = 0) -> tuple[int, int] | None:
    """Half-turns written at *pos*, and the index just past them."""
    m = TURN_COUNT_RE.match(text, pos)
    if m is None:
        return None
    half_turns = 2 * int(m.group(1)) + (1 if m.group(2) else 0)
    return half_turns, m.end()


@dataclass(frozen=True, slots=True)
class Twizzle(SkatingCompound):
    """Entry edge, ``half_turns`` half-rotations, then an exit edge."""

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Twizzle",
        summary="Twizzle",
        example="LFI-Tw1.5",
        params=(
            p.number(
                "angle",
                "Angle of rotation for each curved part, in degrees",
                60,
                p.Range.STRICTLY_POSITIVE,
                p.greater_less(70, 80, 90, 50, 40, 30),
            ),
            p.number(
                "len",
                "Length of each curved part in centimetres",
                200,
                p.Range.STRICTLY_POSITIVE,
                p.plus_minus(300, 450, 600, 180, 100, 80),
            ),
            p.number("pre-len", "Length of entry curve in centimetres", 100, _POSITIVE),
            p.number("pre-angle", "Angle of entry curve in degrees", 45, _POSITIVE),
            p.number("post-len", "Length of exit curve in centimetres", 100, _POSITIVE),
            p.number("post-angle", "Angle of exit curve in degrees", 45, _POSITIVE),
            p.text("style", "Style of line"),
            p.text("transition-label", "Replacement transition label, used if non-empty"),
        ),
    )
    SUFFIX: ClassVar[str] = "-Tw"
    MOVE_FOR_COUNT: ClassVar[int | None] = None

    half_turns: int = 2

    @property
    def turns_text(self) -> str:
        half = ".5" if self.half_turns % 2 else ""
        return f"{self.half_turns // 2}{half}"

    def text(self) -> str:
        suffix = to_string(self.INFO.params, self.values)
        return f"{self.pre.prefix}{self.code}{self.SUFFIX}{self.turns_text}{suffix}"

    def build(self) -> list[Move]:
        if self.half_turns < 2:
            raise ValueError(f"Twizzle needs at least 2 half-turns, got {self.half_turns}")
        sign = self.entry_sign()
        angle, length = self.int_param("angle"), self.int_param("len")
        style = self.str_param("style")
        pos = self.text_pos
        # Each half-turn splits its length 75/25 and its angle 40/60 around the cusp.
        len_a = length * 75 // 100
        len_b = length - len_a
        angle_b = angle * 60 // 100
        angle_a = angle - angle_b
        label = f"{self.code}{self.SUFFIX}{self.turns_text}"
        n = self.half_turns

        def arc(c: Code, arc_angle: int, arc_len: int) -> Curve:
            return Curve(
                c, angle=arc_angle, length=arc_len, label=_BLANK, style=style, text_pos=pos
            )

        c = self.code
        moves: list[Move] = [
            Curve(
                c,
                angle=self.int_param("pre-angle"),
                length=self.int_param("pre-len"),
                label=_BLANK,
                style=style,
                transition_label=self.str_param("transition-label"),
                pre=self.pre,
                text_pos=pos,
            )
        ]
        for idx in range(n):
            out = c.with_changes(direction=c.direction.opposite, edge=c.edge.opposite)
            moves.append(arc(c, angle_a, len_a))
            moves.append(arc(c, angle_b, len_b))
            if n % 2 == 1 and idx == n // 2:
                moves.append(Label(text_value=label, fwd=100, side=30, text_pos=pos))
            moves.append(Shift(rotate=-sign * 2 * angle, code=out, text_pos=pos))
            moves.append(arc(out, angle_b, len_b))
            moves.append(arc(out, angle_a, len_a))
            if n % 2 == 0 and idx == (n - 1) // 2:
                moves.append(Label(text_value=label, side=100, text_pos=pos))
            c = out
        moves.append(
            Curve(
                c,
                angle=self.int_param("post-angle"),
                length=self.int_param("post-len"),
                label=_BLANK,
                style=style,
                text_pos=pos,
            )
        )
        return moves
