"""Drawing tools.

Every tool is a pure function of the canvas and its parameters that
returns the list of :class:`CellMutation` it would make, without touching
the canvas. A mutation is only produced where the cell would actually
change.

Line and rectangle take two clicks; the anchor of the first click is
carried between calls in a :data:`ToolState` value owned by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from kaku.core.canvas import Canvas
from kaku.core.cell import DEFAULT_CELL, Cell, compose
from kaku.core.color import Rgb
from kaku.core.constants import DEFAULT_FG, FULL
from kaku.edit.history import CellMutation


class ToolKind(Enum):
    """The available drawing tools."""
    PENCIL = "pencil"
    ERASER = "eraser"
    LINE = "line"
    RECTANGLE = "rectangle"
    FILL = "fill"
    EYEDROPPER = "eyedropper"

    @property
    def label(self) -> str:
        """Short display name."""
        return _TOOL_INFO[self][0]

    @property
    def icon(self) -> str:
        return _TOOL_INFO[self][1]

    @property
    def key(self) -> str:
        """Keyboard shortcut."""
        return _TOOL_INFO[self][2]

    @property
    def is_two_click(self) -> bool:
        return self in (ToolKind.LINE, ToolKind.RECTANGLE)


_TOOL_INFO = {
    ToolKind.PENCIL: ("Pencil", "✏", "P"),
    ToolKind.ERASER: ("Eraser", "◻", "E"),
    ToolKind.LINE: ("Line", "╱", "L"),
    ToolKind.RECTANGLE: ("Rect", "▭", "R"),
    ToolKind.FILL: ("Fill", "◉", "F"),
    ToolKind.EYEDROPPER: ("Pick", "◈", "I"),
}


# -----------------------------------------------------------------------------
# Tool state
# -----------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Idle:
    """No click pending."""


@dataclass(frozen=True, slots=True)
class AwaitingSecondPoint:
    """First point of a line or rectangle has been placed."""
    x: int
    y: int


ToolState = Idle | AwaitingSecondPoint

IDLE = Idle()


@dataclass(frozen=True, slots=True)
class Brush:
    """What the drawing tools paint with."""
    glyph: str = FULL
    fg: Rgb | None = DEFAULT_FG
    bg: Rgb | None = None
    filled: bool = False


@dataclass(slots=True)
class ToolResult:
    """Outcome of one tool click.

    Attributes:
        mutations: Proposed changes, not yet applied
        state: Tool state to pass to the next call
        picked: Cell read by the eyedropper, if any
    """
    mutations: list[CellMutation] = field(default_factory=list)
    state: ToolState = IDLE
    picked: Cell | None = None


# -----------------------------------------------------------------------------
# Tools
# -----------------------------------------------------------------------------

def _paint(canvas: Canvas, points, glyph: str, fg: Rgb | None, bg: Rgb | None) -> list[CellMutation]:
    mutations = []
    for x, y in points:
        old = canvas.get(x, y)
        if old is None:
            continue
        new = compose(old, glyph, fg, bg)
        if new != old:
            mutations.append(CellMutation(x, y, old, new))
    return mutations


def pencil(canvas: Canvas, x: int, y: int, glyph: str, fg: Rgb | None, bg: Rgb | None) -> list[CellMutation]:
    """Paint a single cell."""
    return _paint(canvas, [(x, y)], glyph, fg, bg)


def eraser(canvas: Canvas, x: int, y: int) -> list[CellMutation]:
    """Reset a single cell to the default cell."""
    old = canvas.get(x, y)
    if old is None or old == DEFAULT_CELL:
        return []
    return [CellMutation(x, y, old, DEFAULT_CELL)]


def bresenham_line(x0: int, y0: int, x1: int, y1: int) -> list[tuple[int, int]]:
    """
    Integer line from (x0, y0) to (x1, y1), both endpoints included.

    The path is always traced from the lexicographically smaller endpoint,
    so swapping the endpoints gives the same cells in reverse order.
    Produces ``max(|dx|, |dy|) + 1`` points.
    """
    swapped = (x1, y1) < (x0, y0)
    if swapped:
        x0, y0, x1, y1 = x1, y1, x0, y0

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    points = []
    x, y = x0, y0
    while True:
        points.append((x, y))
        if x == x1 and y == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x += sx
        if e2 <= dx:
            err += dx
            y += sy

    if swapped:
        points.reverse()
    return points


def line(
    canvas: Canvas,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    glyph: str,
    fg: Rgb | None,
    bg: Rgb | None,
) -> list[CellMutation]:
    """Paint a straight line between two points."""
    return _paint(canvas, bresenham_line(x0, y0, x1, y1), glyph, fg, bg)


def rectangle(
    canvas: Canvas,
    x0: int,
    y0: int,
    x1: int,
    y1: int,
    glyph: str,
    fg: Rgb | None,
    bg: Rgb | None,
    filled: bool = False,
) -> list[CellMutation]:
    """Paint an axis-aligned box with corners (x0, y0) and (x1, y1).

    Outline mode paints only the border cells.
    """
    min_x, max_x = min(x0, x1), max(x0, x1)
    min_y, max_y = min(y0, y1), max(y0, y1)
    points = [
        (x, y)
        for y in range(min_y, max_y + 1)
        for x in range(min_x, max_x + 1)
        if filled or x in (min_x, max_x) or y in (min_y, max_y)
    ]
    return _paint(canvas, points, glyph, fg, bg)


def flood_fill(
    canvas: Canvas,
    x: int,
    y: int,
    glyph: str,
    fg: Rgb | None,
    bg: Rgb | None,
) -> list[CellMutation]:
    """
    Replace the 4-connected region of cells equal to the seed cell.

    Uses an explicit stack, and each cell is visited at most once.
    Returns nothing if the seed is off the canvas or already matches the
    new cell.
    """
    target = canvas.get(x, y)
    if target is None:
        return []
    new = compose(target, glyph, fg, bg)
    if new == target:
        return []

    width, height = canvas.width, canvas.height
    visited = [False] * (width * height)
    mutations = []
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if not canvas.in_bounds(cx, cy):
            continue
        index = cy * width + cx
        if visited[index] or canvas.get(cx, cy) != target:
            continue
        visited[index] = True
        mutations.append(CellMutation(cx, cy, target, new))
        stack.append((cx - 1, cy))
        stack.append((cx + 1, cy))
        stack.append((cx, cy - 1))
        stack.append((cx, cy + 1))
    return mutations


def eyedropper(canvas: Canvas, x: int, y: int) -> Cell | None:
    """Read the cell under the cursor."""
    return canvas.get(x, y)


# -----------------------------------------------------------------------------
# Dispatch
# -----------------------------------------------------------------------------

def apply_tool(
    kind: ToolKind,
    canvas: Canvas,
    state: ToolState,
    x: int,
    y: int,
    brush: Brush,
) -> ToolResult:
    """
    Run one click of a tool.

    For line and rectangle the first click only returns an
    :class:`AwaitingSecondPoint` state; the second click draws from that
    anchor and returns to :class:`Idle`.
    """
    if kind == ToolKind.PENCIL:
        return ToolResult(pencil(canvas, x, y, brush.glyph, brush.fg, brush.bg))
    if kind == ToolKind.ERASER:
        return ToolResult(eraser(canvas, x, y))
    if kind == ToolKind.FILL:
        return ToolResult(flood_fill(canvas, x, y, brush.glyph, brush.fg, brush.bg))
    if kind == ToolKind.EYEDROPPER:
        return ToolResult(picked=eyedropper(canvas, x, y))

    if not isinstance(state, AwaitingSecondPoint):
        return ToolResult(state=AwaitingSecondPoint(x, y))
    if kind == ToolKind.LINE:
        mutations = line(canvas, state.x, state.y, x, y, brush.glyph, brush.fg, brush.bg)
    else:
        mutations = rectangle(
            canvas, state.x, state.y, x, y, brush.glyph, brush.fg, brush.bg, brush.filled
        )
    return ToolResult(mutations)
