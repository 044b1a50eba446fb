"""Split raw diagram text into positioned move fragments."""

from __future__ import annotations

from dataclasses import dataclass

from skreate.core.types import TextPosition


@dataclass(frozen=True, slots=True)
class Fragment:
    """One move's source text and where it started."""

    pos: TextPosition
    text: str


def segment(text: str) -> list[Fragment]:
    """Break *text* into fragments on newlines and ``;``, dropping ``#`` comments.

    Columns count characters, so multi-byte characters occupy one column.
    """
    fragments: list[Fragment] = []
    for row, line in enumerate(text.split("\n")):
        line = line.split("#", 1)[0]
        col = 0
        for part in line.split(";"):
            stripped = part.lstrip()
            body = stripped.rstrip()
            if body:
                lead = len(part) - len(stripped)
                fragments.append(Fragment(TextPosition(row, col + lead), body))
            col += len(part) + 1
    return fragments
