"""One-foot turns: three, bracket, rocker and counter."""

from __future__ import annotations

from typing import ClassVar

from skreate.core.enums import Edge
from skreate.moves.annotations import Label
from skreate.moves.base import Move, MoveInfo
from skreate.moves.compound import SkatingCompound, TwoPart, two_part_schema
from skreate.moves.edge import Curve
from skreate.moves.shift import Shift
from skreate.moves.straight import StraightEdge

_TURN_ANGLES = (60, 70, 80, 90, 100, 120, 140)
_TURN_LENGTHS = (100, 240, 300, 450, 600, 850, 1000)
_TURN_SCHEMA = two_part_schema(_TURN_ANGLES, _TURN_LENGTHS)

# Rotation across the cusp of a turn, before the sign of the entry edge.
_CUSP_ROTATION = 135
# Fixed angle of the tight arc into and out of a bracket, rocker or counter.
_LOBE_ANGLE = 80
_BLANK = " "


class ThreeTurn(SkatingCompound):
    """Turn onto the opposite direction and edge, cusp into the curve."""

    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Three Turn",
        summary="Three turn",
        example="LFO3",
        params=_TURN_SCHEMA,
    )
    SUFFIX: ClassVar[str] = "3"

    def build(self) -> list[Move]:
        sign = self.entry_sign()
        v = TwoPart.of(self)
        out = self.code.with_changes(
            direction=self.code.direction.opposite, edge=self.code.edge.opposite
        )
        # The entry splits 75/25 by length and 40/60 by angle around the cusp.
        len1a = v.len1 * 75 // 100
        angle1b = v.angle1 * 60 // 100
        len2a = v.len2 * 75 // 100
        angle2b = v.angle2 * 60 // 100
        pos = self.text_pos
        return [
            Curve(
                self.code,
                angle=v.angle1 - angle1b,
                length=len1a,
                label=v.label1 or f"{self.code}{self.SUFFIX}",
                style=v.style,
                transition_label=v.transition_label,
                label_offset=v.label_offset,
                pre=self.pre,
                text_pos=pos,
            ),
            Curve(
                self.code,
                angle=angle1b,
                length=v.len1 - len1a,
                label=_BLANK,
                style=v.style,
                text_pos=pos,
            ),
            Shift(rotate=-sign * _CUSP_ROTATION, code=out, text_pos=pos),
            Curve(
                out,
                angle=angle2b,
                length=v.len2 - len2a,
                label=_BLANK,
                style=v.style,
                text_pos=pos,
            ),
            Curve(
                out,
                angle=v.angle2 - angle2b,
                length=len2a,
                label=v.label2,
                style=v.style,
                label_offset=v.label_offset,
                text_pos=pos,
            ),
        ]


class Bracket(SkatingCompound):
    """Turn onto the opposite direction and edge, cusp out of the curve."""

    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Bracket",
        summary="Bracket turn",
        example="LFO-Br",
        params=_TURN_SCHEMA,
    )
    SUFFIX: ClassVar[str] = "-Br"
    _FLAT_LEN: ClassVar[int] = 40

    def build(self) -> list[Move]:
        sign = self.entry_sign()
        v = TwoPart.of(self)
        c = self.code
        reverse = c.direction.opposite
        entry_flat = c.with_changes(edge=Edge.FLAT)
        entry_rev = c.with_changes(edge=c.edge.opposite)
        out_rev = c.with_changes(direction=reverse)
        out_flat = c.with_changes(direction=reverse, edge=Edge.FLAT)
        out = c.with_changes(direction=reverse, edge=c.edge.opposite)
        len1a = v.len1 * 75 // 100
        len2a = v.len2 * 75 // 100
        pos = self.text_pos
        return [
            Curve(
                c,
                angle=v.angle1,
                length=len1a,
                label=v.label1 or str(c),
                style=v.style,
                transition_label=v.transition_label,
                label_offset=v.label_offset,
                pre=self.pre,
                text_pos=pos,
            ),
            StraightEdge(
                entry_flat, length=self._FLAT_LEN, label=_BLANK, style=v.style, text_pos=pos
            ),
            Curve(
                entry_rev,
                angle=_LOBE_ANGLE,
                length=v.len1 - len1a - self._FLAT_LEN,
                label=_BLANK,
                style=v.style,
                text_pos=pos,
            ),
            Label(text_value="Br", fwd=40, text_pos=pos),
            Shift(rotate=sign * _CUSP_ROTATION, code=out_rev, text_pos=pos),
            Curve(
                out_rev,
                angle=_LOBE_ANGLE,
                length=v.len2 - len2a - self._FLAT_LEN,
                label=_BLANK,
                style=v.style,
                text_pos=pos,
            ),
            StraightEdge(
                out_flat, length=self._FLAT_LEN, label=_BLANK, style=v.style, text_pos=pos
            ),
            Curve(
                out,
                angle=v.angle2,
                length=len2a,
                label=v.label2,
                style=v.style,
                label_offset=v.label_offset,
                text_pos=pos,
            ),
        ]


class Rocker(SkatingCompound):
    """Turn onto the opposite direction on the same edge, cusp into the curve."""

    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Rocker",
        summary="Rocker turn",
        example="LFO-Rk",
        params=_TURN_SCHEMA,
    )
    SUFFIX: ClassVar[str] = "-Rk"
    _FLAT_LEN: ClassVar[int] = 20

    def build(self) -> list[Move]:
        sign = self.entry_sign()
        v = TwoPart.of(self)
        c = self.code
        reverse = c.direction.opposite
        out_rev = c.with_changes(direction=reverse, edge=c.edge.opposite)
        out_flat = c.with_changes(direction=reverse, edge=Edge.FLAT)
        out = c.with_changes(direction=reverse)
        len1a = v.len1 * 85 // 100
        len2a = v.len2 * 75 // 100
        pos = self.text_pos
        return [
            Curve(
                c,
                angle=v.angle1,
                length=len1a,
                label=v.label1,
                style=v.style,
                transition_label=v.transition_label,
                label_offset=v.label_offset,
                pre=self.pre,
                text_pos=pos,
            ),
            Curve(
                c,
                angle=_LOBE_ANGLE,
                length=v.len1 - len1a,
                label=_BLANK,
                style=v.style,
                text_pos=pos,
            ),
            Label(text_value="Rk", fwd=40, text_pos=pos),
            Shift(rotate=-sign * _CUSP_ROTATION, code=out_rev, text_pos=pos),
            Curve(
                out_rev,
                angle=_LOBE_ANGLE,
                length=v.len2 - len2a - self._FLAT_LEN,
                label=_BLANK,
                style=v.style,
                text_pos=pos,
            ),
            StraightEdge(
                out_flat, length=self._FLAT_LEN, label=_BLANK, style=v.style, text_pos=pos
            ),
            Curve(
                out,
                angle=v.angle2,
                length=len2a,
                label=v.label2,
                style=v.style,
                label_offset=v.label_offset,
                text_pos=pos,
            ),
        ]


class Counter(SkatingCompound):
    """Turn onto the opposite direction on the same edge, cusp out of the curve."""

    __slots__ = ()

    INFO: ClassVar[MoveInfo] = MoveInfo(
        name="Counter",
        summary="Counter turn",
        example="LFO-Ctr",
        params=_TURN_SCHEMA,
    )
    SUFFIX: ClassVar[str] = "-Ctr"
    _FLAT_LEN: ClassVar[int] = 20

    def build(self) -> list[Move]:
        sign = self.entry_sign()
        v = TwoPart.of(self)
        c = self.code
        entry_flat = c.with_changes(edge=Edge.FLAT)
        entry_rev = c.with_changes(edge=c.edge.opposite)
        out = c.with_changes(direction=c.direction.opposite)
        len1a = v.len1 * 75 // 100
        len2a = v.len2 * 85 // 100
        pos = self.text_pos
        return [
            Curve(
                c,
                angle=v.angle1,
                length=len1a,
                label=v.label1 or f"{c}{self.SUFFIX}",
                style=v.style,
                transition_label=v.transition_label,
                label_offset=v.label_offset,
                pre=self.pre,
                text_pos=pos,
            ),
            StraightEdge(
                entry_flat, length=self._FLAT_LEN, label=_BLANK, style=v.style, text_pos=pos
            ),
            Curve(
                entry_rev,
                angle=_LOBE_ANGLE,
                length=v.len1 - len1a - self._FLAT_LEN,
                label=_BLANK,
                style=v.style,
                text_pos=pos,
            ),
            Label(text_value="Ctr", fwd=40, text_pos=pos),
            Shift(rotate=sign * _CUSP_ROTATION, code=out, text_pos=pos),
            Curve(
                out,
                angle=_LOBE_ANGLE,
                length=v.len2 - len2a,
                label=_BLANK,
                style=v.style,
                text_pos=pos,
            ),
            Curve(
                out,
                angle=v.angle2,
                length=len2a,
                label=v.label2,
                style=v.style,
                label_offset=v.label_offset,
                text_pos=pos,
            ),
        ]
