"""SVG rendering of parsed move sequences.

Quick start::

    from skreate.render import generate

    svg = generate("LFO; RFO; LFO3")
"""

from skreate.render.diagram import canonicalize, generate, generate_with_positions
from skreate.render.options import DEFAULT_MARGIN, DEFAULT_TITLE, ElementIds, RenderOptions

__all__ = [
    # Options
    "DEFAULT_MARGIN",
    "DEFAULT_TITLE",
    "ElementIds",
    "RenderOptions",
    # Entry points
    "canonicalize",
    "generate",
    "generate_with_positions",
]
