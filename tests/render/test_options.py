"""Tests for render options and element id allocation."""

from skreate.core.types import Bounds, Position, TextPosition
from skreate.render import ElementIds, RenderOptions


class TestElementIds:
    def test_first_id_is_the_stem(self) -> None:
        ids = ElementIds()
        assert ids.next(TextPosition(2, 5)) == "r_2_c_5"

    def test_repeated_position_suffixed(self) -> None:
        ids = ElementIds()
        pos = TextPosition(0, 0)
        assert [ids.next(pos) for _ in range(3)] == ["r_0_c_0", "r_0_c_0_n2", "r_0_c_0_n3"]

    def test_issued_in_first_seen_order(self) -> None:
        ids = ElementIds()
        ids.next(TextPosition(1, 0))
        ids.next(TextPosition(0, 0))
        ids.next(TextPosition(1, 0))
        assert ids.issued() == ["r_1_c_0", "r_0_c_0"]

    def test_repeat_pass_in_stem(self) -> None:
        ids = ElementIds()
        assert ids.next(TextPosition(0, 0, 2)) == "r_0_c_0_x2"


class TestRenderOptions:
    def test_small_diagram(self) -> None:
        opts = RenderOptions()
        assert opts.font_size() == 10
        assert opts.stroke_width() == 1

    def test_scales_with_diagonal(self) -> None:
        opts = RenderOptions(bounds=Bounds(Position(0, 0), Position(600, 800)))
        assert opts.font_size() == 16
        assert opts.stroke_width() == 2

    def test_large_diagram(self) -> None:
        opts = RenderOptions(bounds=Bounds(Position(0, 0), Position(3000, 4000)))
        assert opts.font_size() == 24
        assert opts.stroke_width() == 4

    def test_overrides(self) -> None:
        opts = RenderOptions(font_size_override=30, stroke_width_override=5)
        assert opts.font_size() == 30
        assert opts.stroke_width() == 5

    def test_label_scale(self) -> None:
        opts = RenderOptions(label_offset=50)
        assert opts.label_scale(-1) == 0.5
        assert opts.label_scale(200) == 2.0
