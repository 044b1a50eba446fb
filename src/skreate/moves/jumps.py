"""Jumps: an entry edge, a take-off mark and a backward landing edge."""

from __future__ import annotations

import re
from abc import abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from skreate.core.code import Code, code
from skreate.core.enums import Foot, SkatingDirection
from skreate.moves.base import Move, MoveInfo
from skreate.moves.compound import SkatingCompound
from skreate.moves.edge import LABEL_OFFSET_PARAM, Curve
from skreate.moves.hop import Hop
from skreate.moves.shift import Shift
from skreate.notation import params as p
from skreate.notation.params import ParamInfo, to_string

MAX_ROTATIONS = 4

JUMP_PARAMS: tuple[ParamInfo, ...] = (
    p.number(
        "entry-angle",
        "Angle of rotation for entry edge, in degrees",
        30,
        p.Range.STRICTLY_POSITIVE,
        p.greater_less(45, 60, 80, 25, 20, 15),
    ),
    p.number(
        "entry-len",
        "Length of entry edge, in centimetres",
        600,
        p.Range.STRICTLY_POSITIVE,
        p.plus_minus(700, 850, 1000, 450, 300, 200),
    ),
    p.number("exit-angle", "Angle of rotation for exit edge, in degrees", 40),
    p.number("exit-len", "Length of exit edge, in centimetres", 400),
    p.text("style", "Style of line"),
    p.text("jump-label", "Replacement jump label, used if non-empty"),
    LABEL_OFFSET_PARAM,
)

_RBO, _LBO = code("RBO"), code("LBO")
_BLANK = " "


@dataclass(frozen=True, slots=True)
class Jump(SkatingCompound):
    """Common layout of every jump.

    ``ENTRIES`` maps each legal entry code to whether it is the regular
    (anticlockwise-rotating) take-off; the mirror take-off lands on the
    other foot.
    """

    JUMP: ClassVar[str]
    ENTRIES: ClassVar[dict[Code, bool]]
    # Foot that leaves the ice last, for the regular take-off.
    TAKE_OFF_FOOT: ClassVar[Foot] = Foot.RIGHT

    rotations: int = 1

    @property
    def regular(self) -> bool:
        if self.code not in self.ENTRIES:
            raise ValueError(f"{self.code} is not a valid entry edge for {self.INFO.name}")
        return self.ENTRIES[self.code]

    @property
    def jump_text(self) -> str:
        return f"{self.rotations}{self.JUMP}"

    def text(self) -> str:
        suffix = to_string(self.INFO.params, self.values)
        return f"{self.pre.prefix}{self.code}-{self.jump_text}{suffix}"

    def take_off(self, regular: bool) -> Hop:
        foot = self.TAKE_OFF_FOOT if regular else self.TAKE_OFF_FOOT.opposite
        return Hop(
            Code(foot, SkatingDirection.BACKWARD),
            label=self.str_param("jump-label") or self.jump_text,
            text_pos=self.text_pos,
        )

    def landing(self, regular: bool) -> Curve:
        return Curve(
            _RBO if regular else _LBO,
            angle=self.int_param("exit-angle"),
            length=self.int_param("exit-len"),
            style=self.str_param("style"),
            label_offset=self.int_param("label-offset"),
            text_pos=self.text_pos,
        )

    def entry(self, angle: int, length: int, *, first: bool) -> Curve:
        if first:
            return Curve(
                self.code,
                angle=angle,
                length=length,
                style=self.str_param("style"),
                label_offset=self.int_param("label-offset"),
                pre=self.pre,
                text_pos=self.text_pos,
            )
        return Curve(
            self.code,
            angle=angle,
            length=length,
            label=_BLANK,
            style=self.str_param("style"),
            text_pos=self.text_pos,
        )

    def build(self) -> list[Move]:
        if not 1 <= self.rotations <= MAX_ROTATIONS:
            raise ValueError(f"{self.rotations} rotations out of range, must be 1-{MAX_ROTATIONS}")
        regular = self.regular
        return [*self.approach(regular), self.landing(regular)]

    @abstractmethod
    def approach(self, regular: bool) -> list[Move]:
        """Everything up to the landing edge."""


class EdgeJump(Jump):
    """Jump off a tightening edge: arcs of growing curvature, then a turn in the air."""

    __slots__ = ()

    # (angle numerator, len divisor) per entry arc, angle in thirds of entry-angle.
    ARCS: ClassVar[tuple[tuple[int, int], ...]] = ((2, 2), (3, 3), (5, 6), (7, 12))

    def approach(self, regular: bool) -> list[Move]:
        angle, length = self.int_param("entry-angle"), self.int_param("entry-len")
        arcs = [
            self.entry(numerator * angle // 3, length // divisor, first=idx == 0)
            for idx, (numerator, divisor) in enumerate(self.ARCS)
        ]
        side = -200 if regular else 200
        rotate = 120 if regular else -120
        turn = Shift(side=side, fwd=-150, rotate=rotate, text_pos=self.text_pos)
        return [*arcs, self.take_off(regular), turn]


class ToeJump(Jump):
    """Jump off a picked toe: entry edge, step aside to the toe pick, then take off."""

    __slots__ = ()

    # (side, fwd) to the toe pick, then from it to the landing, for the regular take-off.
    TO_PICK: ClassVar[tuple[int, int]] = (100, 50)
    FROM_PICK: ClassVar[tuple[int, int]] = (-50, 150)

    def approach(self, regular: bool) -> list[Move]:
        mirror = 1 if regular else -1
        (side1, fwd1), (side2, fwd2) = self.TO_PICK, self.FROM_PICK
        return [
            self.entry(self.int_param("entry-angle"), self.int_param("entry-len"), first=True),
            Shift(side=mirror * side1, fwd=fwd1, text_pos=self.text_pos),
            self.take_off(regular),
            Shift(side=mirror * side2, fwd=fwd2, text_pos=self.text_pos),
        ]


class Salchow(EdgeJump):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Salchow", summary="Salchow jump", example="LBI-1S", params=JUMP_PARAMS
    )
    JUMP: ClassVar[str] = "S"
    ENTRIES: ClassVar[dict[Code, bool]] = {code("LBI"): True, code("RBI"): False}
    TAKE_OFF_FOOT: ClassVar[Foot] = Foot.LEFT


class LoopJump(EdgeJump):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Loop jump", summary="Loop jump", example="RBO-1Lo", params=JUMP_PARAMS
    )
    JUMP: ClassVar[str] = "Lo"
    ENTRIES: ClassVar[dict[Code, bool]] = {_RBO: True, _LBO: False}


class Axel(EdgeJump):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Axel", summary="Axel jump", example="LFO-1A", params=JUMP_PARAMS
    )
    JUMP: ClassVar[str] = "A"
    ENTRIES: ClassVar[dict[Code, bool]] = {code("LFO"): True, code("RFO"): False}
    ARCS: ClassVar[tuple[tuple[int, int], ...]] = ((2, 2), (3, 3), (5, 6))


class ToeLoop(ToeJump):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Toe Loop", summary="Toe Loop jump", example="RBO-1T", params=JUMP_PARAMS
    )
    JUMP: ClassVar[str] = "T"
    ENTRIES: ClassVar[dict[Code, bool]] = {_RBO: True, _LBO: False}


class Flip(ToeJump):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Flip", summary="Flip jump", example="LBI-1F", params=JUMP_PARAMS
    )
    JUMP: ClassVar[str] = "F"
    ENTRIES: ClassVar[dict[Code, bool]] = {code("LBI"): True, code("RBI"): False}


class Lutz(ToeJump):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Lutz", summary="Lutz jump", example="LBO-1Lz", params=JUMP_PARAMS
    )
    JUMP: ClassVar[str] = "Lz"
    ENTRIES: ClassVar[dict[Code, bool]] = {_LBO: True, code("RBO"): False}
    TO_PICK: ClassVar[tuple[int, int]] = (50, 50)
    FROM_PICK: ClassVar[tuple[int, int]] = (-50, 100)


# Jump kinds by the letters that follow the rotation count, e.g. ``-2Lz``.
JUMPS: dict[str, type[Jump]] = {
    kind.JUMP: kind for kind in (Salchow, ToeLoop, LoopJump, Flip, Axel, Lutz)
}
JUMP_RE = re.compile(r"-([1-9])(" + "|".join(sorted(JUMPS, key=len, reverse=True)) + ")")
