"""Compile the ice-skating diagram language to SVG.

Quick start::

    from skreate import ParseError, generate

    try:
        svg = generate("LFO; RFO; LFO3; xf-RBI")
    except ParseError as err:
        print(f"{err.row + 1}:{err.col + 1} {err.msg}")
"""

from skreate.core.errors import ParseError
from skreate.moves import MOVE_INFOS, MoveInfo
from skreate.render import canonicalize, generate, generate_with_positions

__version__ = "0.1.0"

__all__ = [
    "MOVE_INFOS",
    "MoveInfo",
    "ParseError",
    "canonicalize",
    "generate",
    "generate_with_positions",
]
