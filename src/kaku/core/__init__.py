"""Core data structures for cell-based pixel art."""

from kaku.core.cell import Cell, ResolvedCell, compose, cycle_glyph, resolve, resolved
from kaku.core.canvas import Canvas
from kaku.core.color import ColorFormatError, ColorMode, Rgb
from kaku.core.document import Project, ProjectFormatError

__all__ = [
    "Cell",
    "ResolvedCell",
    "compose",
    "cycle_glyph",
    "resolve",
    "resolved",
    "Canvas",
    "ColorFormatError",
    "ColorMode",
    "Rgb",
    "Project",
    "ProjectFormatError",
]
