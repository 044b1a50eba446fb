"""Tests for directions, positions, bounds and text positions."""

import pytest

from skreate.core.types import Bounds, Direction, Position, Rotation, TextPosition


class TestDirection:
    def test_wraps_past_full_turn(self) -> None:
        assert Direction(350) + Rotation(380) == Direction(10)

    def test_negative_normalizes(self) -> None:
        assert Direction(-90).degrees == 270

    @pytest.mark.parametrize("start", [-725, -360, -1, 0, 1, 359, 360, 1000])
    @pytest.mark.parametrize("rotate", [-1080, -181, -1, 0, 1, 179, 720])
    def test_always_in_range(self, start: int, rotate: int) -> None:
        assert 0 <= (Direction(start) + Rotation(rotate)).degrees < 360

    def test_difference_is_rotation(self) -> None:
        assert Direction(90) - Direction(30) == Rotation(60)

    def test_negated_rotation(self) -> None:
        assert -Rotation(45) == Rotation(-45)


class TestPosition:
    def test_add(self) -> None:
        assert Position(1, 2) + Position(10, 20) == Position(11, 22)

    def test_add_rotated_facing_zero(self) -> None:
        assert Position(5, 5).add_rotated(Direction(0), Position(3, 100)) == Position(8, 105)

    def test_add_rotated_quarter_turn(self) -> None:
        # Facing 90° travels towards -x.
        assert Position().add_rotated(Direction(90), Position(0, 100)) == Position(-100, 0)

    def test_add_rotated_half_turn(self) -> None:
        assert Position().add_rotated(Direction(180), Position(10, 100)) == Position(-10, -100)


class TestBounds:
    def test_at_is_zero_sized(self) -> None:
        bounds = Bounds.at(Position(3, 4))
        assert bounds.width == 0
        assert bounds.height == 0

    def test_encompass_grows(self) -> None:
        bounds = Bounds.at(Position())
        bounds.encompass(Position(-5, 10))
        assert bounds.top_left == Position(-5, 0)
        assert bounds.bottom_right == Position(0, 10)

    def test_encompass_never_shrinks(self) -> None:
        bounds = Bounds(Position(-10, -10), Position(10, 10))
        for pos in (Position(0, 0), Position(-3, 7), Position(10, -10)):
            bounds.encompass(pos)
            assert bounds.top_left == Position(-10, -10)
            assert bounds.bottom_right == Position(10, 10)

    def test_encompass_sequence_is_monotonic(self) -> None:
        bounds = Bounds.at(Position())
        for pos in (Position(4, -2), Position(-7, 1), Position(2, 9), Position(0, 0)):
            before_tl, before_br = bounds.top_left, bounds.bottom_right
            bounds.encompass(pos)
            assert bounds.top_left.x <= before_tl.x
            assert bounds.top_left.y <= before_tl.y
            assert bounds.bottom_right.x >= before_br.x
            assert bounds.bottom_right.y >= before_br.y

    def test_encompass_bounds(self) -> None:
        bounds = Bounds.at(Position())
        bounds.encompass_bounds(Bounds(Position(-1, -2), Position(3, 4)))
        assert bounds == Bounds(Position(-1, -2), Position(3, 4))

    def test_add_margin_returns_copy(self) -> None:
        bounds = Bounds(Position(0, 0), Position(100, 200))
        outer = bounds.add_margin(50, 10)
        assert outer == Bounds(Position(-50, -10), Position(150, 210))
        assert bounds == Bounds(Position(0, 0), Position(100, 200))

    def test_midpoint(self) -> None:
        assert Bounds(Position(0, 0), Position(100, 50)).midpoint == Position(50, 25)


class TestTextPosition:
    def test_str_is_one_indexed(self) -> None:
        assert str(TextPosition(1, 4)) == "2:5"

    def test_unique_id(self) -> None:
        assert TextPosition(1, 2).unique_id == "r_1_c_2"

    def test_unique_id_in_repeat(self) -> None:
        assert TextPosition(1, 2).at_repeat(3).unique_id == "r_1_c_2_x3"

    def test_at_repeat_none_clears(self) -> None:
        assert TextPosition(1, 2, 3).at_repeat(None) == TextPosition(1, 2)
