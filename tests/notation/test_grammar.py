"""Tests for move dispatch, timing prefixes and repeat expansion."""

import pytest

from skreate.core.code import code
from skreate.core.enums import PreTransition
from skreate.core.errors import ParseError
from skreate.core.types import TextPosition
from skreate.moves import (
    Bracket,
    ChangeOfEdge,
    Curve,
    Hop,
    Info,
    Lutz,
    RepeatEnd,
    RepeatStart,
    StraightEdge,
    ThreeTurn,
    Twizzle,
)
from skreate.notation.grammar import TimedMove, expand_repeats, parse_move, parse_moves
from skreate.notation.segmenter import Fragment


def parse_timed(text: str) -> TimedMove:
    return parse_move(Fragment(TextPosition(), text))


class TestSkatingMoves:
    def test_curve(self) -> None:
        mv = parse_timed("LFO").move
        assert isinstance(mv, Curve)
        assert mv.code == code("LFO")

    def test_prefix(self) -> None:
        mv = parse_timed("xf-RBI").move
        assert isinstance(mv, Curve)
        assert mv.pre is PreTransition.CROSS_FRONT
        assert mv.text() == "xf-RBI"

    def test_curve_shorts(self) -> None:
        mv = parse_timed("LFO>++").move
        assert isinstance(mv, Curve)
        assert (mv.angle, mv.length) == (60, 200)

    def test_flat(self) -> None:
        assert isinstance(parse_timed("BF").move, StraightEdge)

    def test_hop(self) -> None:
        assert isinstance(parse_timed("LB-Hop").move, Hop)

    def test_three_turn(self) -> None:
        assert isinstance(parse_timed("RFI3").move, ThreeTurn)

    def test_bracket(self) -> None:
        assert isinstance(parse_timed("LBO-Br").move, Bracket)

    @pytest.mark.parametrize("suffix", ["-CoE", "-COE"])
    def test_change_of_edge_spellings(self, suffix: str) -> None:
        mv = parse_timed(f"LFO{suffix}").move
        assert isinstance(mv, ChangeOfEdge)
        assert mv.text() == "LFO-CoE"

    @pytest.mark.parametrize(("turns", "half_turns"), [("1", 2), ("1.5", 3), ("9", 18)])
    def test_twizzle_turns(self, turns: str, half_turns: int) -> None:
        mv = parse_timed(f"LFI-Tw{turns}").move
        assert isinstance(mv, Twizzle)
        assert mv.half_turns == half_turns
        assert mv.text() == f"LFI-Tw{turns}"

    @pytest.mark.parametrize("text", ["LFI-Tw", "LFI-Tw0", "LFI-Tw0.5"])
    def test_twizzle_needs_two_half_turns(self, text: str) -> None:
        with pytest.raises(ParseError):
            parse_timed(text)

    def test_jump(self) -> None:
        mv = parse_timed("LBO-2Lz").move
        assert isinstance(mv, Lutz)
        assert mv.rotations == 2
        assert mv.text() == "LBO-2Lz"

    def test_too_many_rotations(self) -> None:
        with pytest.raises(ParseError, match="out of range"):
            parse_timed("LBO-5Lz")

    def test_wrong_entry_edge(self) -> None:
        with pytest.raises(ParseError, match="not a valid entry edge"):
            parse_timed("BFO-Br")

    def test_unknown_suffix(self) -> None:
        with pytest.raises(ParseError):
            parse_timed("LFO-Bogus")

    def test_prefix_without_code(self) -> None:
        with pytest.raises(ParseError, match="Expected a code"):
            parse_timed("xf-Info")


class TestTiming:
    def test_count_and_duration(self) -> None:
        timed = parse_timed("3) /4 LFO")
        assert timed.count == 3
        assert timed.duration == 4
        assert timed.text() == "3) /4 LFO"

    def test_count_only(self) -> None:
        timed = parse_timed("12)RFO")
        assert (timed.count, timed.duration) == (12, None)
        assert timed.text() == "12) RFO"

    def test_untimed(self) -> None:
        timed = parse_timed("LFO")
        assert timed.count is None
        assert timed.duration is None

    def test_rejected_on_pseudo_moves(self) -> None:
        with pytest.raises(ParseError, match="only apply to skating moves"):
            parse_timed("2) Info")


class TestPseudoMoves:
    def test_keyword(self) -> None:
        mv = parse_timed("Info[markers=true]").move
        assert isinstance(mv, Info)
        assert mv.markers

    def test_repeat_start(self) -> None:
        assert isinstance(parse_timed("|:").move, RepeatStart)

    @pytest.mark.parametrize(
        ("text", "count", "alternate"),
        [(":|", 2, False), ("!|", 2, True), (":|x3", 3, False), ("!| x 4", 4, True)],
    )
    def test_repeat_end(self, text: str, count: int, alternate: bool) -> None:
        mv = parse_timed(text).move
        assert mv == RepeatEnd(count, alternate)

    def test_unrecognized(self) -> None:
        with pytest.raises(ParseError, match="Unrecognized move"):
            parse_timed("Bogus")


class TestParseMoves:
    def test_sequence(self) -> None:
        texts = [timed.text() for timed in parse_moves("LFO; RFO\nLFO3")]
        assert texts == ["LFO", "RFO", "LFO3"]

    def test_error_position(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse_moves("LFO\n  Bogus")
        assert (excinfo.value.row, excinfo.value.col) == (1, 2)
        assert str(excinfo.value).startswith("2:3: ")

    def test_text_positions(self) -> None:
        moves = parse_moves("LFO;RFO")
        assert [timed.move.text_pos for timed in moves] == [TextPosition(0, 0), TextPosition(0, 4)]


class TestExpandRepeats:
    def test_no_repeats(self) -> None:
        moves = parse_moves("LFO;RFO")
        assert expand_repeats(moves) == moves

    def test_plain_repeat(self) -> None:
        expanded = expand_repeats(parse_moves("|:;LFO;RFO;:|"))
        assert [timed.text() for timed in expanded] == ["LFO", "RFO", "LFO", "RFO"]

    def test_repeat_passes_in_positions(self) -> None:
        expanded = expand_repeats(parse_moves("|:;LFO;:|"))
        positions = [timed.move.text_pos for timed in expanded]
        assert positions == [TextPosition(0, 3, 1), TextPosition(0, 3, 2)]

    def test_repeat_count(self) -> None:
        expanded = expand_repeats(parse_moves("|:;LFO;:|x3"))
        assert [timed.text() for timed in expanded] == ["LFO"] * 3

    def test_alternate_flips_feet(self) -> None:
        expanded = expand_repeats(parse_moves("|:;LFO;xf-RBI3;!|"))
        assert [timed.text() for timed in expanded] == ["LFO", "xf-RBI3", "RFO", "xf-LBI3"]

    def test_alternate_keeps_timing(self) -> None:
        expanded = expand_repeats(parse_moves("|:;2) LFO;!|"))
        assert [timed.text() for timed in expanded] == ["2) LFO", "2) RFO"]

    def test_moves_around_repeat(self) -> None:
        expanded = expand_repeats(parse_moves("BF;|:;LFO;:|;RFO"))
        assert [timed.text() for timed in expanded] == ["BF", "LFO", "LFO", "RFO"]
        assert expanded[0].move.text_pos == TextPosition(0, 0)

    def test_nested(self) -> None:
        expanded = expand_repeats(parse_moves("|:;LFO;|:;RFO;:|;:|"))
        assert [timed.text() for timed in expanded] == ["LFO", "RFO", "RFO"] * 2

    def test_end_without_start(self) -> None:
        with pytest.raises(ParseError, match="no repeat in progress") as excinfo:
            expand_repeats(parse_moves("LFO;:|"))
        assert excinfo.value.col == 4

    def test_start_without_end(self) -> None:
        with pytest.raises(ParseError, match="repeat still pending") as excinfo:
            expand_repeats(parse_moves("LFO\n|:;RFO"))
        assert (excinfo.value.row, excinfo.value.col) == (1, 0)
