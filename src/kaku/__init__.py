"""
kaku: block-character pixel art for the terminal

Draw on a grid of full and half block cells with true-color RGB, then
export as plain text or ANSI art.

Quick Start:
    >>> import kaku
    >>> session = kaku.EditSession.new(16, 16)
    >>> session.set_color((255, 0, 0))
    >>> session.apply_tool(3, 4)
    >>> session.save("sprite.kaku")
    >>> print(kaku.TerminalRenderer().render(session.canvas))

Features:
    - Half-block cells with per-half transparency
    - Pencil, eraser, line, rectangle, flood fill and eyedropper tools
    - Horizontal, vertical and quad symmetry
    - Undo/redo with stroke batching
    - JSON project files, plain text and ANSI export
    - Image import via Pillow
"""

__version__ = "0.1.0"

# Core types (imported first: edit and io depend on them)
from kaku.core.cell import Cell
from kaku.core.canvas import Canvas
from kaku.core.color import ColorMode
from kaku.core.document import Project, ProjectFormatError

# Editing
from kaku.edit.document import EditSession
from kaku.edit.symmetry import SymmetryMode
from kaku.edit.tools import ToolKind

# I/O
from kaku.io.reader import load_project
from kaku.io.writer import save_project

# Rendering
from kaku.render import TerminalRenderer, TextRenderer

__all__ = [
    # Version
    "__version__",
    # Core types
    "Cell",
    "Canvas",
    "ColorMode",
    "Project",
    "ProjectFormatError",
    # Editing
    "EditSession",
    "SymmetryMode",
    "ToolKind",
    # I/O
    "load_project",
    "save_project",
    # Rendering
    "TerminalRenderer",
    "TextRenderer",
]
