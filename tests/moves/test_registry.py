"""Tests for the move registry and the capability contract shared by all moves."""

from collections.abc import Callable

import pytest

from skreate.core.code import code
from skreate.core.skater import Skater
from skreate.moves import MOVE_INFOS, PSEUDO_MOVES, SKATING_MOVES, Move

SKATING_EXAMPLES = [kind.INFO.example for kind in SKATING_MOVES]
START_CODES = ["LFO", "RBI", "BF", "LB"]


class TestRegistry:
    def test_every_kind_listed(self) -> None:
        assert len(MOVE_INFOS) == len(SKATING_MOVES) + len(PSEUDO_MOVES)

    def test_names_unique(self) -> None:
        names = [info.name for info in MOVE_INFOS]
        assert len(names) == len(set(names))

    @pytest.mark.parametrize("info", MOVE_INFOS, ids=lambda info: info.name)
    def test_example_round_trips(self, info, parse_one: Callable[[str], Move]) -> None:
        assert parse_one(info.example).text() == info.example

    @pytest.mark.parametrize("info", MOVE_INFOS, ids=lambda info: info.name)
    def test_example_kind_matches(self, info, parse_one: Callable[[str], Move]) -> None:
        assert parse_one(info.example).INFO is info

    def test_pseudo_moves_invisible_except_rink(self) -> None:
        visible = [kind.INFO.name for kind in PSEUDO_MOVES if kind.INFO.visible]
        assert visible == ["Rink"]


class TestSkatingContract:
    @pytest.mark.parametrize("example", SKATING_EXAMPLES)
    @pytest.mark.parametrize("before", START_CODES)
    def test_pre_transition_lands_on_start(
        self, example: str, before: str, parse_one: Callable[[str], Move]
    ) -> None:
        mv = parse_one(example)
        assert mv.pre_transition(code(before)).code == mv.start()

    @pytest.mark.parametrize("example", SKATING_EXAMPLES)
    def test_transition_ends_on_end(
        self, example: str, parse_one: Callable[[str], Move]
    ) -> None:
        mv = parse_one(example)
        assert mv.transition().code == mv.end()

    @pytest.mark.parametrize("example", SKATING_EXAMPLES)
    def test_opposite_twice_is_identity(
        self, example: str, parse_one: Callable[[str], Move]
    ) -> None:
        mv = parse_one(example)
        assert mv.opposite().opposite() == mv

    @pytest.mark.parametrize("example", SKATING_EXAMPLES)
    def test_opposite_changes_foot(
        self, example: str, parse_one: Callable[[str], Move]
    ) -> None:
        mv = parse_one(example)
        start = mv.start()
        assert start is not None
        assert mv.opposite().start() == start.opposite()

    @pytest.mark.parametrize("example", SKATING_EXAMPLES)
    def test_bounds_include_start(
        self, example: str, parse_one: Callable[[str], Move]
    ) -> None:
        mv = parse_one(example)
        start = mv.start()
        assert start is not None
        bounds = mv.bounds(Skater.at_zero(start))
        assert bounds is not None
        assert bounds.top_left.x <= 0 <= bounds.bottom_right.x
        assert bounds.top_left.y <= 0 <= bounds.bottom_right.y

    @pytest.mark.parametrize("example", SKATING_EXAMPLES)
    def test_text_pos_does_not_affect_equality(
        self, example: str, parse_one: Callable[[str], Move]
    ) -> None:
        mv = parse_one(example)
        assert mv.with_text_pos(None) == mv
