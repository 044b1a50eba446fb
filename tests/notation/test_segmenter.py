"""Tests for splitting diagram text into fragments."""

from skreate.core.types import TextPosition
from skreate.notation.segmenter import Fragment, segment


def _positions(text: str) -> list[tuple[str, int, int]]:
    return [(f.text, f.pos.row, f.pos.col) for f in segment(text)]


class TestSegment:
    def test_rows_and_columns(self) -> None:
        assert _positions("a;b\nc; d\n¥;e") == [
            ("a", 0, 0),
            ("b", 0, 2),
            ("c", 1, 0),
            ("d", 1, 3),
            ("¥", 2, 0),
            ("e", 2, 2),
        ]

    def test_strips_comments(self) -> None:
        assert _positions("LFO # outside edge; not a move\nRFO") == [
            ("LFO", 0, 0),
            ("RFO", 1, 0),
        ]

    def test_skips_empty_fragments(self) -> None:
        assert segment("  ;;  \n\n# only a comment\n") == []

    def test_trims_whitespace(self) -> None:
        assert segment("   LFO3  ") == [Fragment(TextPosition(0, 3), "LFO3")]

    def test_keeps_inner_spaces(self) -> None:
        assert segment("3) /2 LFO")[0].text == "3) /2 LFO"
