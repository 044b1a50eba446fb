"""Tests for curves, straight edges and hops."""

import pytest

from skreate.core.code import code
from skreate.core.enums import PreTransition
from skreate.core.skater import RelativeTransition, Skater
from skreate.core.types import Position, Rotation
from skreate.moves import Curve, Hop, StraightEdge
from skreate.render.options import RenderOptions


class TestCurve:
    def test_defaults(self) -> None:
        curve = Curve(code("LFO"))
        assert (curve.angle, curve.length) == (45, 100)
        assert curve.text() == "LFO"

    def test_widdershins_turns_anticlockwise(self) -> None:
        spatial = Curve(code("LFO")).transition().spatial
        assert isinstance(spatial, RelativeTransition)
        assert spatial.rotate == Rotation(-45)
        assert spatial.delta.x > 0

    def test_clockwise_turns_clockwise(self) -> None:
        spatial = Curve(code("RFO")).transition().spatial
        assert isinstance(spatial, RelativeTransition)
        assert spatial.rotate == Rotation(45)
        assert spatial.delta.x < 0

    def test_endpoint(self) -> None:
        assert Curve(code("LFO")).endpoint() == Position(37, 90)

    def test_mirror_endpoints(self) -> None:
        left = Curve(code("LFO"), angle=90, length=300).endpoint()
        right = Curve(code("RFO"), angle=90, length=300).endpoint()
        assert right == Position(-left.x, left.y)

    def test_flat_rejected(self) -> None:
        with pytest.raises(ValueError, match="not a curving edge"):
            Curve(code("LF"))

    def test_non_positive_angle_rejected(self) -> None:
        with pytest.raises(ValueError, match="must be > 0"):
            Curve(code("LFO"), angle=0)

    def test_text_with_params(self) -> None:
        curve = Curve(code("RBI"), angle=60, length=123, pre=PreTransition.WIDE)
        assert curve.text() == "wd-RBI>[len=123]"

    def test_default_label_is_code(self) -> None:
        labels = Curve(code("LFO")).labels(RenderOptions())
        assert [label.text for label in labels] == ["LFO"]

    def test_duration_adds_label(self) -> None:
        labels = Curve(code("LFO")).labels(RenderOptions(duration=3))
        assert [label.count for label in labels] == [None, 3]

    def test_pre_transition_label(self) -> None:
        labels = Curve(code("LFO"), pre=PreTransition.CROSS_FRONT).labels(RenderOptions())
        assert "xf" in [label.text for label in labels]

    def test_blank_label_hidden(self) -> None:
        labels = Curve(code("LFO"), label=" ").labels(RenderOptions())
        assert not labels[0].display


class TestStraightEdge:
    def test_travels_forward(self) -> None:
        after = Skater.at_zero(code("LF")) + StraightEdge(code("LF"), length=250).transition()
        assert after.pos == Position(0, 250)

    def test_curving_code_rejected(self) -> None:
        with pytest.raises(ValueError, match="not a flat"):
            StraightEdge(code("LFO"))

    def test_two_footed_has_no_label(self) -> None:
        assert StraightEdge(code("BF")).labels(RenderOptions()) == []


class TestHop:
    def test_does_not_move(self) -> None:
        after = Skater.at_zero(code("RB")) + Hop(code("RB")).transition()
        assert after.pos == Position()

    def test_text(self) -> None:
        assert Hop(code("RB"), size=8).text() == "RB-Hop[size=8]"

    def test_curving_code_rejected(self) -> None:
        with pytest.raises(ValueError):
            Hop(code("RBO"))
