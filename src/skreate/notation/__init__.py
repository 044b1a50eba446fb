"""Text layer: fragments and move parameters.

The move grammar itself lives in :mod:`skreate.notation.grammar`, which
depends on :mod:`skreate.moves`.
"""

from skreate.notation.params import (
    Abbrev,
    Detents,
    MoveParam,
    ParamInfo,
    Range,
    Value,
    populate,
    to_string,
)
from skreate.notation.segmenter import Fragment, segment

__all__ = [
    # Segmentation
    "Fragment",
    "segment",
    # Parameters
    "Abbrev",
    "Detents",
    "MoveParam",
    "ParamInfo",
    "Range",
    "Value",
    "populate",
    "to_string",
]
