"""Two-foot turns (choctaws and mohawks) and the change of edge."""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar

from skreate.core.code import Code, code
from skreate.core.enums import Edge
from skreate.moves.annotations import Label
from skreate.moves.base import Move, MoveInfo
from skreate.moves.compound import SkatingCompound, TwoPart, two_part_schema
from skreate.moves.edge import Curve
from skreate.moves.shift import Shift
from skreate.moves.straight import StraightEdge

_STEP_SCHEMA = two_part_schema(
    (60, 70, 80, 90, 110, 130, 150),
    (100, 240, 300, 450, 600, 850, 1000),
)


class FootChange(SkatingCompound):
    """Entry edge, a labelled step onto the other foot, then the exit edge.

    ``SIDES`` maps each legal entry code to the side (``-1`` right, ``1``
    left) the free foot steps towards.
    """

    __slots__ = ()

    SIDES: ClassVar[dict[Code, int]]
    SAME_EDGE: ClassVar[bool] = False

    def side(self) -> int:
        if self.code not in self.SIDES:
            raise ValueError(f"{self.code} is not a valid entry edge for {self.INFO.name}")
        return self.SIDES[self.code]

    def out_code(self) -> Code:
        c = self.code
        return Code(
            c.foot.opposite,
            c.direction.opposite,
            c.edge if self.SAME_EDGE else c.edge.opposite,
        )

    @abstractmethod
    def step(self, side: int, out: Code) -> list[Move]:
        """Label and shift between the two edges."""

    def build(self) -> list[Move]:
        side = self.side()
        v = TwoPart.of(self)
        out = self.out_code()
        entry = Curve(
            self.code,
            angle=v.angle1,
            length=v.len1,
            label=v.label1,
            style=v.style,
            transition_label=v.transition_label,
            label_offset=v.label_offset,
            pre=self.pre,
            text_pos=self.text_pos,
        )
        exit_ = Curve(
            out,
            angle=v.angle2,
            length=v.len2,
            label=v.label2,
            style=v.style,
            label_offset=v.label_offset,
            text_pos=self.text_pos,
        )
        return [entry, *self.step(side, out), exit_]


class OpenChoctaw(FootChange):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Open Choctaw",
        summary="Open choctaw",
        example="LFI-OpCho",
        params=_STEP_SCHEMA,
    )
    SUFFIX: ClassVar[str] = "-OpCho"
    SIDES: ClassVar[dict[Code, int]] = {code("LFI"): -1, code("RFI"): 1}

    def step(self, side: int, out: Code) -> list[Move]:
        return [
            Label(text_value="OpCho", fwd=10, side=80 * side, text_pos=self.text_pos),
            Shift(side=40 * side, code=out, text_pos=self.text_pos),
        ]


class ClosedChoctaw(FootChange):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Closed Choctaw",
        summary="Closed choctaw",
        example="RBO-ClCho",
        params=_STEP_SCHEMA,
    )
    SUFFIX: ClassVar[str] = "-ClCho"
    SIDES: ClassVar[dict[Code, int]] = {code("LBO"): -1, code("RBO"): 1}

    def step(self, side: int, out: Code) -> list[Move]:
        return [
            Label(text_value="ClCho", side=60 * side, text_pos=self.text_pos),
            Shift(side=30 * side, fwd=-30, code=out, text_pos=self.text_pos),
        ]


class OpenMohawk(FootChange):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Open Mohawk",
        summary="Open mohawk",
        example="LFI-OpMo",
        params=_STEP_SCHEMA,
    )
    SUFFIX: ClassVar[str] = "-OpMo"
    SIDES: ClassVar[dict[Code, int]] = {code("LFI"): -1, code("RFI"): 1}
    SAME_EDGE: ClassVar[bool] = True

    def step(self, side: int, out: Code) -> list[Move]:
        return [
            Label(text_value="OpMo", fwd=30, side=70 * side, text_pos=self.text_pos),
            Shift(side=80 * side, fwd=-65, rotate=90 * side, code=out, text_pos=self.text_pos),
        ]


class ClosedMohawk(FootChange):
    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Closed Mohawk",
        summary="Closed mohawk",
        example="RBO-ClMo",
        params=_STEP_SCHEMA,
    )
    SUFFIX: ClassVar[str] = "-ClMo"
    SIDES: ClassVar[dict[Code, int]] = {
        code("LBO"): -1,
        code("RFO"): -1,
        code("RBO"): 1,
        code("LFO"): 1,
    }
    SAME_EDGE: ClassVar[bool] = True

    def step(self, side: int, out: Code) -> list[Move]:
        return [
            Label(text_value="ClMo", side=60 * side, text_pos=self.text_pos),
            Shift(side=30 * side, fwd=-30, code=out, text_pos=self.text_pos),
        ]


class ChangeOfEdge(SkatingCompound):
    """Curve, a short flat, then a curve on the other edge of the same foot."""

    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Change of Edge",
        summary="Change of edge",
        example="LFO-CoE",
        params=two_part_schema(
            (30, 45, 60, 90, 120, 180, 210),
            (100, 240, 300, 450, 600, 850, 1000),
            flat=True,
        ),
    )
    SUFFIX: ClassVar[str] = "-CoE"
    ALT_SUFFIX: ClassVar[str] = "-COE"

    def build(self) -> list[Move]:
        self.entry_sign()
        v = TwoPart.of(self)
        c = self.code
        pos = self.text_pos
        return [
            Curve(
                c,
                angle=v.angle1,
                length=v.len1,
                label=v.label1,
                style=v.style,
                transition_label=v.transition_label,
                label_offset=v.label_offset,
                pre=self.pre,
                text_pos=pos,
            ),
            StraightEdge(
                c.with_changes(edge=Edge.FLAT),
                length=self.int_param("flat-len"),
                label="COE",
                style=v.style,
                text_pos=pos,
            ),
            Curve(
                c.with_changes(edge=c.edge.opposite),
                angle=v.angle2,
                length=v.len2,
                label=v.label2,
                style=v.style,
                label_offset=v.label_offset,
                text_pos=pos,
            ),
        ]
