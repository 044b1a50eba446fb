"""Every kind of move, and the read-only registry describing them.

Quick start::

    from skreate.moves import MOVE_INFOS

    for info in MOVE_INFOS:
        print(info.name, info.example)
"""

from skreate.moves.annotations import Label, Text, Title
from skreate.moves.base import Move, MoveInfo, MoveLabel, PseudoMove
from skreate.moves.compound import Compound, SkatingCompound, check_children
from skreate.moves.edge import Curve
from skreate.moves.hop import Hop
from skreate.moves.info import Info
from skreate.moves.jumps import JUMPS, Axel, Flip, Jump, LoopJump, Lutz, Salchow, ToeLoop
from skreate.moves.loop import LoopFigure
from skreate.moves.repeat import RepeatEnd, RepeatStart
from skreate.moves.rink import Rink
from skreate.moves.shift import Shift, Warp
from skreate.moves.steps import ChangeOfEdge, ClosedChoctaw, ClosedMohawk, OpenChoctaw, OpenMohawk
from skreate.moves.straight import StraightEdge
from skreate.moves.turns import Bracket, Counter, Rocker, ThreeTurn
from skreate.moves.twizzle import Twizzle

SKATING_MOVES: tuple[type[Move], ...] = (
    Curve,
    StraightEdge,
    Hop,
    ThreeTurn,
    Bracket,
    Rocker,
    Counter,
    OpenMohawk,
    ClosedMohawk,
    OpenChoctaw,
    ClosedChoctaw,
    ChangeOfEdge,
    LoopFigure,
    Twizzle,
    Salchow,
    ToeLoop,
    LoopJump,
    Flip,
    Axel,
    Lutz,
)

# Keyword-introduced moves, in the order the grammar tries them.
PSEUDO_MOVES: tuple[type[PseudoMove], ...] = (
    Warp,
    Shift,
    Rink,
    Info,
    Title,
    Text,
    Label,
    RepeatStart,
    RepeatEnd,
)

MOVE_INFOS: tuple[MoveInfo, ...] = tuple(kind.INFO for kind in (*SKATING_MOVES, *PSEUDO_MOVES))

__all__ = [
    # Contract
    "Compound",
    "Move",
    "MoveInfo",
    "MoveLabel",
    "PseudoMove",
    "SkatingCompound",
    "check_children",
    # Edges
    "Curve",
    "Hop",
    "StraightEdge",
    # Turns and steps
    "Bracket",
    "ChangeOfEdge",
    "ClosedChoctaw",
    "ClosedMohawk",
    "Counter",
    "LoopFigure",
    "OpenChoctaw",
    "OpenMohawk",
    "Rocker",
    "ThreeTurn",
    "Twizzle",
    # Jumps
    "JUMPS",
    "Axel",
    "Flip",
    "Jump",
    "LoopJump",
    "Lutz",
    "Salchow",
    "ToeLoop",
    # Pseudo-moves
    "Info",
    "Label",
    "RepeatEnd",
    "RepeatStart",
    "Rink",
    "Shift",
    "Text",
    "Title",
    "Warp",
    # Registry
    "MOVE_INFOS",
    "PSEUDO_MOVES",
    "SKATING_MOVES",
]
