"""Edit module - drawing tools, symmetry and undo history.

The session object that ties them to a canvas lives in
``kaku.edit.document`` (``EditSession``).
"""

from kaku.edit.history import Action, CellMutation, History
from kaku.edit.symmetry import SymmetryMode, apply_symmetry
from kaku.edit.tools import (
    AwaitingSecondPoint,
    Brush,
    Idle,
    ToolKind,
    ToolResult,
    ToolState,
    apply_tool,
    bresenham_line,
    eraser,
    eyedropper,
    flood_fill,
    line,
    pencil,
    rectangle,
)

__all__ = [
    "Action",
    "CellMutation",
    "History",
    "SymmetryMode",
    "apply_symmetry",
    "AwaitingSecondPoint",
    "Brush",
    "Idle",
    "ToolKind",
    "ToolResult",
    "ToolState",
    "apply_tool",
    "bresenham_line",
    "eraser",
    "eyedropper",
    "flood_fill",
    "line",
    "pencil",
    "rectangle",
]
