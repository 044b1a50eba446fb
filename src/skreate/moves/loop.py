"""Loop figure: a small, tight circle on one edge."""

from __future__ import annotations

from typing import ClassVar

from skreate.moves.base import Move, MoveInfo
from skreate.moves.compound import SkatingCompound, TwoPart, two_part_schema
from skreate.moves.edge import Curve

# (angle, len) of each arc in the loop itself; 330° overall.
_LOOP_ARCS = ((100, 80), (130, 80), (100, 80))


class LoopFigure(SkatingCompound):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Loop",
        summary="Loop figure",
        example="RBI-Loop",
        params=two_part_schema(
            (60, 70, 80, 90, 100, 120, 140),
            (100, 240, 300, 450, 600, 850, 1000),
        ),
    )
    SUFFIX: ClassVar[str] = "-Loop"

    def build(self) -> list[Move]:
        self.entry_sign()
        v = TwoPart.of(self)
        pos = self.text_pos
        moves: list[Move] = [
            Curve(
                self.code,
                angle=v.angle1,
                length=v.len1,
                label=v.label1,
                style=v.style,
                transition_label=v.transition_label,
                label_offset=v.label_offset,
                pre=self.pre,
                text_pos=pos,
            )
        ]
        for angle, length in _LOOP_ARCS:
            moves.append(
                Curve(self.code, angle=angle, length=length, label=" ", style=v.style, text_pos=pos)
            )
        moves.append(
            Curve(
                self.code,
                angle=v.angle2,
                length=v.len2,
                label=v.label2 or " ",
                style=v.style,
                label_offset=v.label_offset,
                text_pos=pos,
            )
        )
        return moves
