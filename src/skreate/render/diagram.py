"""Compile diagram text to SVG in three passes: definitions, bounds, placement."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import svgwrite

from skreate.core.code import code
from skreate.core.skater import Skater
from skreate.core.types import Bounds, Position
from skreate.moves.base import use_at
from skreate.moves.info import END_MARK, START_MARK
from skreate.notation.grammar import TimedMove, expand_repeats, parse_moves
from skreate.render.options import ElementIds, RenderOptions

if TYPE_CHECKING:
    from svgwrite.shapes import Rect

_LOGGER = logging.getLogger(__name__)

STYLE_DEF = "text { text-anchor: middle } path,rect,circle { fill:none; }"
_DESCRIPTION = "Ice skating diagram"


def _walk(moves: Sequence[TimedMove]) -> list[tuple[Skater, TimedMove, Skater]]:
    """Skater state before and after each move, starting from the origin.

    The first move's pre-transition is skipped: the sequence simply starts
    on that move's code.
    """
    result = []
    skater = Skater.at_zero(code("BF"))
    for idx, timed in enumerate(moves):
        mv = timed.move
        if idx == 0:
            start = mv.start()
            if start is not None:
                skater = dataclasses.replace(skater, code=start)
        else:
            skater = skater + mv.pre_transition(skater.code)
        after = skater + mv.transition()
        result.append((skater, timed, after))
        skater = after
    return result


def _count(timed: TimedMove, opts: RenderOptions) -> int | None:
    if timed.count == 0:
        return None
    if timed.count is not None:
        return timed.count
    return opts.auto_count


def _grid_starts(low: int, high: int, spacing: int) -> range:
    first = -(-low // spacing) * spacing
    return range(first, high, spacing)


def _add_grid(dwg: svgwrite.Drawing, bounds: Bounds, spacing: int) -> None:
    top, bottom = bounds.top_left, bounds.bottom_right
    for x in _grid_starts(top.x, bottom.x, spacing):
        style = "stroke:gray; stroke-width:2;" if x == 0 else "stroke:lightgray;"
        dwg.add(dwg.path(d=f"M {x},{top.y} L {x},{bottom.y}", style=style))
    for y in _grid_starts(top.y, bottom.y, spacing):
        style = "stroke:gray; stroke-width:2;" if y == 0 else "stroke:lightgray;"
        dwg.add(dwg.path(d=f"M {top.x},{y} L {bottom.x},{y}", style=style))


def _bounds_rect(
    dwg: svgwrite.Drawing, bounds: Bounds, style: str, dash: str
) -> Rect:
    rect = dwg.rect(
        insert=(bounds.top_left.x, bounds.top_left.y),
        size=(bounds.width, bounds.height),
        style=style,
    )
    rect["stroke-dasharray"] = dash
    return rect


def _render(moves: Sequence[TimedMove]) -> tuple[svgwrite.Drawing, ElementIds]:
    dwg = svgwrite.Drawing(profile="full", debug=False)
    opts = RenderOptions()
    ids = ElementIds()

    # Pass 1: one definition per distinct move, plus document-wide settings.
    seen: set[str] = set()
    dwg.embed_stylesheet(STYLE_DEF)
    for timed in moves:
        opts = timed.move.prepare(opts)
        for def_id, element in timed.move.defs(dwg, opts):
            if def_id in seen:
                continue
            seen.add(def_id)
            element["id"] = def_id
            dwg.defs.add(element)
    _LOGGER.debug("%d definitions for %d moves", len(seen), len(moves))
    dwg.set_desc(title=opts.title, desc=_DESCRIPTION)

    walk = _walk(moves)

    # Pass 2: overall bounds.
    bounds: Bounds | None = None
    for before, timed, _ in walk:
        move_bounds = timed.move.bounds(before)
        if move_bounds is None:
            continue
        if bounds is None:
            bounds = move_bounds.copy()
        else:
            bounds.encompass_bounds(move_bounds)
        if opts.show_move_bounds:
            dwg.add(
                _bounds_rect(
                    dwg,
                    move_bounds,
                    f"stroke:blue; stroke-width:{2 * opts.stroke_width()};",
                    "2,2",
                )
            )
    if bounds is None:
        bounds = Bounds.at(Position())
    opts = dataclasses.replace(opts, bounds=bounds)
    outer = bounds.add_margin(opts.margin_x, opts.margin_y)
    _LOGGER.debug("diagram bounds %s, with margin %s", bounds, outer)
    dwg["width"] = outer.width
    dwg["height"] = outer.height

    # Pass 3: place every move in sequence.
    for before, timed, after in walk:
        mv = timed.move
        markers = opts.markers
        if markers:
            dwg.add(use_at(dwg, before, START_MARK, opts))
        opts = mv.configure(opts)
        count = _count(timed, opts)
        move_opts = dataclasses.replace(opts, count=count, duration=timed.duration)
        for element in mv.render(dwg, before, move_opts, ids):
            dwg.add(element)
        if markers:
            dwg.add(use_at(dwg, after, END_MARK, opts))
        if mv.visible and opts.auto_count is not None:
            next_count = count + 1 if count is not None else opts.auto_count + 1
            opts = dataclasses.replace(opts, auto_count=next_count)

    if opts.grid:
        _add_grid(dwg, bounds, opts.grid)
    if opts.show_bounds:
        width = 3 * opts.stroke_width()
        dwg.add(_bounds_rect(dwg, outer, f"stroke:red; stroke-width:{width};", "5,5"))
        dwg.add(_bounds_rect(dwg, bounds, f"stroke:green; stroke-width:{width};", "5,5"))

    dwg["viewBox"] = f"{outer.top_left.x} {outer.top_left.y} {outer.width} {outer.height}"
    return dwg, ids


def _parse(text: str) -> list[TimedMove]:
    moves = expand_repeats(parse_moves(text))
    _LOGGER.info("parsed %d moves", len(moves))
    return moves


def generate_with_positions(text: str) -> tuple[str, list[str]]:
    """Compile *text* to SVG, also returning the element id stems issued.

    Raises:
        ParseError: at the first fragment that can't be understood.
    """
    dwg, ids = _render(_parse(text))
    return dwg.tostring(), ids.issued()


def generate(text: str) -> str:
    """Compile *text* to an SVG document."""
    svg, _ = generate_with_positions(text)
    return svg


def canonicalize(text: str, separator: str = ";") -> str:
    """Re-emit *text* as the minimal equivalent moves, joined by *separator*.

    Repeat markers are kept as written; pass ``"\\n"`` for one move per line.
    """
    return separator.join(timed.text() for timed in parse_moves(text))
