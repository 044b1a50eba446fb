"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from skreate.core.types import TextPosition
from skreate.moves import Move
from skreate.notation.grammar import parse_move
from skreate.notation.segmenter import Fragment


@pytest.fixture
def parse_one() -> Callable[[str], Move]:
    """Parse a single fragment, as if it started the document, into its move."""

    def _parse(text: str) -> Move:
        return parse_move(Fragment(TextPosition(), text)).move

    return _parse
