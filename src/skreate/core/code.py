"""Blade state value object: foot, direction and edge."""

from __future__ import annotations

import re
from dataclasses import dataclass

from skreate.core.enums import Edge, Foot, SkatingDirection

_CODE_RE = re.compile(r"([LRB])([FB])([OI]?)")


@dataclass(frozen=True, slots=True)
class Code:
    """Immutable blade state, written as e.g. ``LFO`` or ``BF``.

    ``Foot.BOTH`` is only used with ``Edge.FLAT``.
    """

    foot: Foot
    direction: SkatingDirection
    edge: Edge = Edge.FLAT

    def __str__(self) -> str:
        return f"{self.foot}{self.direction}{self.edge}"

    @classmethod
    def parse(cls, text: str) -> Code:
        """Parse a complete code, e.g. ``'RBI'``."""
        m = _CODE_RE.fullmatch(text)
        if m is None:
            raise ValueError(f"Invalid code: {text!r}")
        return cls(Foot(m.group(1)), SkatingDirection(m.group(2)), Edge(m.group(3)))

    @classmethod
    def match_prefix(cls, text: str, pos: int = 0) -> tuple[Code, int] | None:
        """Match a code at *pos*, returning it and the index just past it."""
        m = _CODE_RE.match(text, pos)
        if m is None:
            return None
        code = cls(Foot(m.group(1)), SkatingDirection(m.group(2)), Edge(m.group(3)))
        return code, m.end()

    def opposite(self) -> Code:
        """Mirror image: the same step on the other foot."""
        return Code(self.foot.opposite, self.direction, self.edge)

    def with_changes(
        self,
        *,
        foot: Foot | None = None,
        direction: SkatingDirection | None = None,
        edge: Edge | None = None,
    ) -> Code:
        return Code(
            self.foot if foot is None else foot,
            self.direction if direction is None else direction,
            self.edge if edge is None else edge,
        )


def code(text: str) -> Code:
    """Shorthand for :meth:`Code.parse`."""
    return Code.parse(text)
