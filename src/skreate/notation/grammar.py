"""Move grammar: turns fragments into moves, and expands repeated passages."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from skreate.core.code import Code
from skreate.core.enums import Edge, PreTransition
from skreate.core.errors import ParseError
from skreate.core.types import TextPosition
from skreate.moves import (
    JUMPS,
    PSEUDO_MOVES,
    Bracket,
    ChangeOfEdge,
    ClosedChoctaw,
    ClosedMohawk,
    Counter,
    Curve,
    Hop,
    LoopFigure,
    Move,
    OpenChoctaw,
    OpenMohawk,
    RepeatEnd,
    RepeatStart,
    Rocker,
    SkatingCompound,
    StraightEdge,
    ThreeTurn,
    Twizzle,
)
from skreate.moves.jumps import JUMP_RE
from skreate.moves.twizzle import parse_half_turns
from skreate.notation.params import populate
from skreate.notation.segmenter import Fragment, segment

_LOGGER = logging.getLogger(__name__)

_COUNT_RE = re.compile(r"(\d+)\)\s*")
_DURATION_RE = re.compile(r"/(\d+)\s*")
_REPEAT_END_RE = re.compile(r"(:\||!\|)(?:\s*x\s*(\d+))?")

# Suffixes tried in order after a curving-edge code; a plain Curve if none match.
_SUFFIXED: tuple[tuple[str, type[SkatingCompound]], ...] = (
    (ThreeTurn.SUFFIX, ThreeTurn),
    (OpenMohawk.SUFFIX, OpenMohawk),
    (ClosedMohawk.SUFFIX, ClosedMohawk),
    (Bracket.SUFFIX, Bracket),
    (Rocker.SUFFIX, Rocker),
    (Counter.SUFFIX, Counter),
    (OpenChoctaw.SUFFIX, OpenChoctaw),
    (ClosedChoctaw.SUFFIX, ClosedChoctaw),
    (ChangeOfEdge.SUFFIX, ChangeOfEdge),
    (ChangeOfEdge.ALT_SUFFIX, ChangeOfEdge),
)

_PREFIXED = tuple(kind for kind in PreTransition if kind.prefix)


@dataclass(frozen=True, slots=True)
class TimedMove:
    """A move with the optional count and duration written in front of it."""

    move: Move
    count: int | None = None
    duration: int | None = None

    def text(self) -> str:
        count = "" if self.count is None else f"{self.count}) "
        duration = "" if self.duration is None else f"/{self.duration} "
        return f"{count}{duration}{self.move.text()}"

    def opposite(self, repeat: int | None = None) -> TimedMove:
        move = self.move.opposite().with_text_pos(_at_repeat(self.move.text_pos, repeat))
        return TimedMove(move, self.count, self.duration)

    def at_repeat(self, repeat: int | None) -> TimedMove:
        move = self.move.with_text_pos(_at_repeat(self.move.text_pos, repeat))
        return TimedMove(move, self.count, self.duration)


def _at_repeat(pos: TextPosition | None, repeat: int | None) -> TextPosition | None:
    return None if pos is None else pos.at_repeat(repeat)


# ── Skating moves ────────────────────────────────────────────────────────────


def _flat_move(pre: PreTransition, entry: Code, rest: str, pos: TextPosition) -> Move:
    if rest.startswith(Hop.SUFFIX):
        return Hop.from_params(pre, entry, populate(Hop.INFO.params, rest[len(Hop.SUFFIX) :]), pos)
    return StraightEdge.from_params(pre, entry, populate(StraightEdge.INFO.params, rest), pos)


def _curving_move(pre: PreTransition, entry: Code, rest: str, pos: TextPosition) -> Move:
    for suffix, kind in _SUFFIXED:
        if rest.startswith(suffix):
            params = populate(kind.INFO.params, rest[len(suffix) :])
            return kind.from_params(pre, entry, params, pos)

    if rest.startswith(Twizzle.SUFFIX):
        turns = parse_half_turns(rest, len(Twizzle.SUFFIX))
        if turns is None:
            raise ValueError(f"Expected a turn count after {Twizzle.SUFFIX!r} in {rest!r}")
        half_turns, end = turns
        params = populate(Twizzle.INFO.params, rest[end:])
        return Twizzle(entry, tuple(params), pre, pos, half_turns=half_turns)

    if m := JUMP_RE.match(rest):
        kind = JUMPS[m.group(2)]
        params = populate(kind.INFO.params, rest[m.end() :])
        return kind(entry, tuple(params), pre, pos, rotations=int(m.group(1)))

    if rest.startswith(LoopFigure.SUFFIX):
        params = populate(LoopFigure.INFO.params, rest[len(LoopFigure.SUFFIX) :])
        return LoopFigure.from_params(pre, entry, params, pos)

    return Curve.from_params(pre, entry, populate(Curve.INFO.params, rest), pos)


def _skating_move(text: str, pos: TextPosition) -> Move | None:
    """Parse a skating move, or return ``None`` if *text* doesn't start with a code."""
    pre = PreTransition.NORMAL
    for kind in _PREFIXED:
        if text.startswith(kind.prefix):
            pre = kind
            break
    matched = Code.match_prefix(text, len(pre.prefix))
    if matched is None:
        if pre is not PreTransition.NORMAL:
            raise ValueError(f"Expected a code after {pre.prefix!r}")
        return None
    entry, end = matched
    rest = text[end:]
    if entry.edge is Edge.FLAT:
        return _flat_move(pre, entry, rest, pos)
    return _curving_move(pre, entry, rest, pos)


# ── Pseudo-moves ─────────────────────────────────────────────────────────────


def _pseudo_move(text: str, pos: TextPosition) -> Move:
    if text == RepeatStart.SYMBOL:
        return RepeatStart(text_pos=pos)
    if m := _REPEAT_END_RE.fullmatch(text):
        count = 2 if m.group(2) is None else int(m.group(2))
        return RepeatEnd(count, m.group(1) == RepeatEnd.SYMBOL_ALTERNATE, pos)

    for kind in PSEUDO_MOVES:
        if text.startswith(kind.KEYWORD):
            params = populate(kind.INFO.params, text[len(kind.KEYWORD) :])
            from_params: Callable[..., Move] = getattr(kind, "from_params")
            return from_params(params, pos)
    raise ValueError(f"Unrecognized move {text!r}")


# ── Public API ───────────────────────────────────────────────────────────────


def _timed_move(text: str, pos: TextPosition) -> TimedMove:
    idx = 0
    count = duration = None
    if m := _COUNT_RE.match(text, idx):
        count, idx = int(m.group(1)), m.end()
    if m := _DURATION_RE.match(text, idx):
        duration, idx = int(m.group(1)), m.end()

    move = _skating_move(text[idx:], pos)
    if move is not None:
        return TimedMove(move, count, duration)
    if count is not None or duration is not None:
        raise ValueError(f"Count and duration only apply to skating moves: {text[idx:]!r}")
    return TimedMove(_pseudo_move(text, pos))


def parse_move(fragment: Fragment) -> TimedMove:
    """Parse one fragment into exactly one move.

    Raises:
        ParseError: if the fragment is not a valid move, located at the fragment.
    """
    try:
        timed = _timed_move(fragment.text, fragment.pos)
    except ParseError:
        raise
    except ValueError as err:
        _LOGGER.debug("failed to parse %r at %s: %s", fragment.text, fragment.pos, err)
        raise ParseError(fragment.pos, str(err)) from err
    _LOGGER.debug("found %s at %s", timed.text(), fragment.pos)
    return timed


def parse_moves(text: str) -> list[TimedMove]:
    """Parse every fragment of *text*, stopping at the first error."""
    return [parse_move(fragment) for fragment in segment(text)]


def expand_repeats(moves: Sequence[TimedMove]) -> list[TimedMove]:
    """Unroll ``|:`` ... ``:|`` passages, flipping alternate passes for ``!|``.

    The markers themselves are dropped. Copies made inside a repeat carry the
    pass number in their text position.
    """
    # (index of the start marker, pass number) for each open repeat.
    starts: list[tuple[int, int]] = []
    flipped = False
    expanded: list[TimedMove] = []
    idx = 0
    while idx < len(moves):
        timed = moves[idx]
        mv = timed.move
        if isinstance(mv, RepeatEnd):
            if not starts:
                raise ParseError(
                    mv.text_pos or TextPosition(), "found end of repeat when no repeat in progress!"
                )
            start, passes = starts[-1]
            passes += 1
            if passes > mv.count:
                _LOGGER.debug("[%d] end of repeat, done", idx)
                starts.pop()
                flipped = False
                idx += 1
            else:
                starts[-1] = (start, passes)
                if mv.alternate:
                    flipped = not flipped
                _LOGGER.debug(
                    "[%d] end of repeat, back to [%d] flipped=%s", idx, start + 1, flipped
                )
                idx = start + 1
        elif isinstance(mv, RepeatStart):
            starts.append((idx, 1))
            idx += 1
        else:
            repeat = starts[-1][1] if starts else None
            expanded.append(timed.opposite(repeat) if flipped else timed.at_repeat(repeat))
            idx += 1
    if starts:
        start_pos = moves[starts[-1][0]].move.text_pos or TextPosition()
        raise ParseError(start_pos, "found end of input with repeat still pending!")
    return expanded
