"""Positioned diagnostics raised while compiling a diagram."""

from __future__ import annotations

from skreate.core.types import TextPosition


class ParseError(ValueError):
    """Failure to understand the input, tied to a location in it.

    ``row`` and ``col`` are zero-indexed; the string form is 1-indexed.
    """

    def __init__(self, pos: TextPosition, msg: str) -> None:
        super().__init__(f"{pos.row + 1}:{pos.col + 1}: {msg}")
        self.pos = pos
        self.msg = msg

    @property
    def row(self) -> int:
        return self.pos.row

    @property
    def col(self) -> int:
        return self.pos.col
