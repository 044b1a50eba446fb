"""Tests for compound moves: structure, turns, steps, twizzles and jumps."""

from collections.abc import Callable

import pytest

from skreate.core.code import code
from skreate.core.enums import PreTransition
from skreate.core.skater import Skater
from skreate.core.types import Direction, Position
from skreate.moves import (
    Axel,
    Bracket,
    ChangeOfEdge,
    ClosedMohawk,
    Counter,
    Curve,
    Flip,
    Hop,
    Label,
    Move,
    LoopFigure,
    OpenChoctaw,
    Rocker,
    Salchow,
    Shift,
    StraightEdge,
    ThreeTurn,
    Twizzle,
    Warp,
    check_children,
)
from skreate.notation import params as p
from skreate.notation.params import MoveParam


class TestCheckChildren:
    def test_valid(self) -> None:
        check_children([Curve(code("LFO")), Shift(side=10), Curve(code("LFI"))])

    def test_too_few(self) -> None:
        with pytest.raises(ValueError, match="at least 2"):
            check_children([Curve(code("LFO"))])

    def test_first_must_skate(self) -> None:
        with pytest.raises(ValueError, match="must start with a skating move"):
            check_children([Shift(side=10), Curve(code("LFO"))])

    def test_later_absolute_rejected(self) -> None:
        with pytest.raises(ValueError, match="Only the first part"):
            check_children([Curve(code("LFO")), Warp(x=10, y=10)])


class TestCompoundGeometry:
    def test_transition_matches_walking_parts(self) -> None:
        turn = ThreeTurn(code("LFO"))
        skater = Skater.at_zero(code("LFO"))
        for part in turn.moves:
            skater = skater + part.transition()
        after = Skater.at_zero(code("LFO")) + turn.transition()
        assert after == skater

    def test_bounds_cover_every_part(self) -> None:
        turn = Bracket(code("RFI"))
        start = Skater(Position(100, 100), Direction(0), code("RFI"))
        bounds = turn.bounds(start)
        assert bounds is not None
        skater = start
        for part in turn.moves:
            skater = skater + part.transition()
            assert bounds.top_left.x <= skater.pos.x <= bounds.bottom_right.x
            assert bounds.top_left.y <= skater.pos.y <= bounds.bottom_right.y

    def test_only_first_part_keeps_prefix(self) -> None:
        turn = ThreeTurn(code("LFO"), pre=PreTransition.CROSS_BEHIND)
        first = turn.moves[0]
        assert isinstance(first, Curve)
        assert first.pre is PreTransition.CROSS_BEHIND
        assert all(
            part.pre is PreTransition.NORMAL for part in turn.moves[1:] if isinstance(part, Curve)
        )

    def test_parts_share_text_position(self, parse_one: Callable[[str], Move]) -> None:
        turn = parse_one("LFO3")
        assert {part.text_pos for part in turn.moves} == {turn.text_pos}

    def test_mismatched_values_rejected(self) -> None:
        with pytest.raises(ValueError, match="do not match"):
            ThreeTurn(code("LFO"), values=(MoveParam("angle", 90),))

    def test_values_default_to_schema(self) -> None:
        assert list(ThreeTurn(code("LFO")).values) == p.defaults(ThreeTurn.INFO.params)


class TestTurns:
    @pytest.mark.parametrize(
        ("kind", "entry", "exit_"),
        [
            (ThreeTurn, "LFO", "LBI"),
            (Bracket, "LFO", "LBI"),
            (Rocker, "LFO", "LBO"),
            (Counter, "LFO", "LBO"),
            (ThreeTurn, "RBI", "RFO"),
            (Counter, "RBO", "RFO"),
        ],
    )
    def test_exit_edge(self, kind, entry: str, exit_: str) -> None:
        assert kind(code(entry)).end() == code(exit_)

    @pytest.mark.parametrize("kind", [ThreeTurn, Bracket, Rocker, Counter, LoopFigure])
    def test_flat_entry_rejected(self, kind) -> None:
        with pytest.raises(ValueError, match="not a valid entry edge"):
            kind(code("LF"))

    def test_three_turn_label(self) -> None:
        first = ThreeTurn(code("RFO")).moves[0]
        assert isinstance(first, Curve)
        assert first.label == "RFO3"

    def test_bracket_marks_turn(self) -> None:
        labels = [part for part in Bracket(code("LFO")).moves if isinstance(part, Label)]
        assert [label.text_value for label in labels] == ["Br"]

    def test_delta_changes_exit(self, parse_one: Callable[[str], Move]) -> None:
        turn = parse_one("LFO3[delta-len=100]")
        last = turn.moves[-1]
        assert isinstance(last, Curve)
        assert last.length == 550 * 75 // 100

    def test_loop_ends_on_entry_edge(self) -> None:
        assert LoopFigure(code("RBI")).end() == code("RBI")


class TestSteps:
    def test_open_choctaw_changes_foot_direction_and_edge(self) -> None:
        assert OpenChoctaw(code("LFI")).end() == code("RBO")

    def test_closed_mohawk_keeps_edge(self) -> None:
        assert ClosedMohawk(code("LFO")).end() == code("RBO")

    def test_invalid_entry(self) -> None:
        with pytest.raises(ValueError, match="not a valid entry edge for Open Choctaw"):
            OpenChoctaw(code("LFO"))

    def test_change_of_edge(self) -> None:
        move = ChangeOfEdge(code("LFO"))
        assert move.end() == code("LFI")
        flats = [part for part in move.moves if isinstance(part, StraightEdge)]
        assert [flat.length for flat in flats] == [50]


class TestTwizzle:
    def test_needs_two_half_turns(self) -> None:
        with pytest.raises(ValueError, match="at least 2 half-turns"):
            Twizzle(code("LFI"), half_turns=1)

    @pytest.mark.parametrize(("half_turns", "end"), [(2, "LFI"), (3, "LBO"), (18, "LFI")])
    def test_end_code(self, half_turns: int, end: str) -> None:
        assert Twizzle(code("LFI"), half_turns=half_turns).end() == code(end)

    def test_one_label(self) -> None:
        twizzle = Twizzle(code("LFI"), half_turns=3)
        labels = [part for part in twizzle.moves if isinstance(part, Label)]
        assert [label.text_value for label in labels] == ["LFI-Tw1.5"]

    def test_opposite_keeps_turns(self) -> None:
        assert Twizzle(code("LFI"), half_turns=5).opposite().text() == "RFI-Tw2.5"


class TestJumps:
    def test_regular_lands_on_right_back_outside(self) -> None:
        assert Axel(code("LFO")).end() == code("RBO")

    def test_mirror_lands_on_left_back_outside(self) -> None:
        assert Salchow(code("RBI")).end() == code("LBO")

    def test_take_off_foot(self) -> None:
        hops = [part for part in Salchow(code("LBI")).moves if isinstance(part, Hop)]
        assert [hop.code for hop in hops] == [code("LB")]
        assert [hop.label for hop in hops] == ["1S"]

    def test_jump_label_override(self, parse_one: Callable[[str], Move]) -> None:
        jump = parse_one('LBI-2F[jump-label="flip"]')
        hops = [part for part in jump.moves if isinstance(part, Hop)]
        assert [hop.label for hop in hops] == ["flip"]

    def test_illegal_entry(self) -> None:
        with pytest.raises(ValueError, match="not a valid entry edge for Flip"):
            Flip(code("LFO"))

    @pytest.mark.parametrize("rotations", [0, 5])
    def test_rotations_range(self, rotations: int) -> None:
        with pytest.raises(ValueError, match="rotations out of range"):
            Axel(code("LFO"), rotations=rotations)

    def test_opposite(self) -> None:
        assert Axel(code("LFO"), rotations=3).opposite().text() == "RFO-3A"
