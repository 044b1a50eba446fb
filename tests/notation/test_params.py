"""Tests for the parameter codec."""

import pytest

from skreate.notation import params as p
from skreate.notation.params import MoveParam, populate, to_string

SCHEMA = (
    p.number(
        "len1",
        "First length",
        100,
        p.Range.STRICTLY_POSITIVE,
        p.plus_minus(125, 150, 200, 75, 50, 25),
    ),
    p.number("len2", "Second length", 10),
    p.number(
        "curve",
        "Curvature",
        45,
        p.Range.STRICTLY_POSITIVE,
        p.greater_less(60, 90, 120, 30, 20, 10),
    ),
    p.text("label", "Label"),
    p.boolean("flag", "Flag"),
)


def _values(params: list[MoveParam]) -> dict[str, object]:
    return {param.name: param.value for param in params}


class TestToString:
    def test_defaults_are_empty(self) -> None:
        assert to_string(SCHEMA, p.defaults(SCHEMA)) == ""

    def test_shorts_then_explicit(self) -> None:
        params = [
            MoveParam("len1", 200),
            MoveParam("len2", 11),
            MoveParam("curve", 10),
            MoveParam("label", ""),
            MoveParam("flag", False),
        ]
        assert to_string(SCHEMA, params) == "+++<<<[len2=11]"

    def test_non_detent_is_explicit(self) -> None:
        params = p.defaults(SCHEMA)
        params[0] = MoveParam("len1", 101)
        assert to_string(SCHEMA, params) == "[len1=101]"

    def test_text_and_bool(self) -> None:
        params = p.defaults(SCHEMA)
        params[3] = MoveParam("label", 'say "hi"')
        params[4] = MoveParam("flag", True)
        assert to_string(SCHEMA, params) == '[label="say \\"hi\\"",flag=true]'

    def test_mismatched_schema(self) -> None:
        with pytest.raises(ValueError):
            to_string(SCHEMA, [MoveParam("len1", 100)])


class TestPopulate:
    def test_empty_gives_defaults(self) -> None:
        assert populate(SCHEMA, "") == p.defaults(SCHEMA)

    def test_round_trip(self) -> None:
        params = populate(SCHEMA, "+++<<<[len2=11]")
        assert _values(params) == {
            "len1": 200,
            "len2": 11,
            "curve": 10,
            "label": "",
            "flag": False,
        }
        assert to_string(SCHEMA, params) == "+++<<<[len2=11]"

    def test_order_matches_schema(self) -> None:
        params = populate(SCHEMA, "[flag=y,len2=3]")
        assert [param.name for param in params] == ["len1", "len2", "curve", "label", "flag"]

    def test_single_short(self) -> None:
        assert _values(populate(SCHEMA, "-"))["len1"] == 75
        assert _values(populate(SCHEMA, ">>"))["curve"] == 90

    def test_escaped_string(self) -> None:
        assert _values(populate(SCHEMA, '[label="a\\"b"]'))["label"] == 'a"b'

    def test_spaces_in_list(self) -> None:
        assert _values(populate(SCHEMA, "[ len2 = -4 , flag = n ]"))["len2"] == -4

    @pytest.mark.parametrize(
        ("text", "message"),
        [
            ("++++", "too long"),
            ("+-", "Conflicting"),
            ("<>", "Conflicting"),
            ("[bogus=1]", "Unknown parameter"),
            ("[len1=0]", "must be > 0"),
            ('[len2="x"]', "unexpected"),
            ("[label=3]", "unexpected"),
            ("[flag=3]", "expect boolean"),
            ("[len2=1", "Expected ','"),
            ("oops", "Expected '\\['"),
            ("[len2=1] extra", "Unexpected text"),
        ],
    )
    def test_errors(self, text: str, message: str) -> None:
        with pytest.raises(ValueError, match=message):
            populate(SCHEMA, text)

    def test_too_many_groups(self) -> None:
        with pytest.raises(ValueError, match="Too many short codes"):
            populate(SCHEMA, "+ > +")
