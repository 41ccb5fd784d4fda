"""EditSession - the editing state wrapped around one canvas.

This module provides EditSession, which sequences tool output, symmetry
expansion, application to the canvas and history recording. It also
carries the brush settings, recent colors and the project file the
canvas belongs to.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from kaku.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, PROJECT_EXTENSION, RECENT_COLOR_LIMIT
from kaku.core.canvas import Canvas
from kaku.core.cell import Cell, compose, cycle_glyph
from kaku.core.color import Rgb
from kaku.core.constants import DEFAULT_FG, EMPTY
from kaku.core.document import Project
from kaku.edit.history import Action, CellMutation, History
from kaku.edit.symmetry import SymmetryMode, apply_symmetry
from kaku.edit.tools import IDLE, Brush, ToolKind, ToolState, apply_tool

logger = logging.getLogger(__name__)


class EditSession:
    """Interactive editing state for a single canvas.

    Attributes:
        tool: Active drawing tool
        tool_state: Pending first click of a line or rectangle
        brush: Glyph, colors and fill flag used by the tools
        symmetry: Active mirror axes
        recent_colors: Most recently used colors, newest first
        dirty: True if there are unsaved changes

    Example:
        session = EditSession.new(16, 16)
        session.set_color((255, 0, 0))
        session.apply_tool(3, 4)
        session.undo()
        session.save("sprite.kaku")
    """

    def __init__(
        self,
        canvas: Canvas | None = None,
        name: str | None = None,
        path: Path | str | None = None,
    ) -> None:
        self._canvas = canvas if canvas is not None else Canvas()
        self._history = History()
        self.tool = ToolKind.PENCIL
        self.tool_state: ToolState = IDLE
        self.brush = Brush()
        self.symmetry = SymmetryMode.OFF
        self.recent_colors: list[Rgb] = []
        self.dirty = False
        self.name = name
        self.path = Path(path) if path is not None else None
        self.created_at: str | None = None

    # -------------------------------------------------------------------------
    # Class Methods - Factory constructors
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> EditSession:
        """Start a session on a blank canvas (dimensions are clamped)."""
        return cls(Canvas(width, height))

    @classmethod
    def open(cls, path: Path | str) -> EditSession:
        """Start a session on a project file."""
        session = cls()
        session.load(path)
        return session

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def canvas(self) -> Canvas:
        return self._canvas

    @property
    def history(self) -> History:
        return self._history

    @property
    def color(self) -> Rgb | None:
        """Brush foreground color."""
        return self.brush.fg

    @property
    def glyph(self) -> str:
        return self.brush.glyph

    # -------------------------------------------------------------------------
    # Brush
    # -------------------------------------------------------------------------

    def select_tool(self, kind: ToolKind) -> None:
        """Switch tools, dropping any pending first click."""
        self.tool = kind
        self.tool_state = IDLE

    def set_color(self, color: Rgb) -> None:
        """Set the brush color and remember it as recently used."""
        self.brush = replace(self.brush, fg=color)
        self._track_recent_color(color)

    def set_background(self, color: Rgb | None) -> None:
        self.brush = replace(self.brush, bg=color)

    def set_glyph(self, glyph: str) -> None:
        self.brush = replace(self.brush, glyph=glyph)

    def cycle_glyph(self) -> str:
        """Advance the brush through full and half blocks."""
        self.set_glyph(cycle_glyph(self.brush.glyph))
        return self.brush.glyph

    def set_filled(self, filled: bool) -> None:
        """Choose between outlined and filled rectangles."""
        self.brush = replace(self.brush, filled=filled)

    def toggle_horizontal_symmetry(self) -> SymmetryMode:
        self.symmetry = self.symmetry.toggle_horizontal()
        return self.symmetry

    def toggle_vertical_symmetry(self) -> SymmetryMode:
        self.symmetry = self.symmetry.toggle_vertical()
        return self.symmetry

    def _track_recent_color(self, color: Rgb | None) -> None:
        if color is None:
            return
        if color in self.recent_colors:
            self.recent_colors.remove(color)
        self.recent_colors.insert(0, color)
        del self.recent_colors[RECENT_COLOR_LIMIT:]

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def apply_tool(self, x: int, y: int) -> list[CellMutation]:
        """Apply the active tool at (x, y).

        Tool output is expanded by the symmetry mode, then every mutation
        is rebuilt against the live canvas: ``old`` is re-read at its own
        position and ``new`` recomposed on top of it. Mutations that no
        longer change anything are dropped. The rest are applied and
        recorded, as part of the open stroke if there is one, otherwise as
        one undoable action.

        Returns:
            The mutations that were applied
        """
        draws = self.tool not in (ToolKind.ERASER, ToolKind.EYEDROPPER)
        finishes_shape = not self.tool.is_two_click or self.tool_state != IDLE
        if draws and finishes_shape:
            self._track_recent_color(self.brush.fg)

        result = apply_tool(self.tool, self._canvas, self.tool_state, x, y, self.brush)
        self.tool_state = result.state

        if result.picked is not None:
            self._pick(result.picked)
            return []

        expanded = apply_symmetry(
            result.mutations, self.symmetry, self._canvas.width, self._canvas.height
        )
        mutations = []
        for mutation in expanded:
            actual = self._canvas.get(mutation.x, mutation.y)
            if actual is None:
                continue
            new = compose(actual, mutation.new.char, mutation.new.fg, mutation.new.bg)
            if new != actual:
                mutations.append(CellMutation(mutation.x, mutation.y, actual, new))

        if not mutations:
            return []

        for mutation in mutations:
            self._canvas.set(mutation.x, mutation.y, mutation.new)

        if self._history.is_stroke_active():
            for mutation in mutations:
                self._history.push_mutation(mutation)
        else:
            self._history.commit(Action(mutations))

        self.dirty = True
        return mutations

    def _pick(self, cell: Cell) -> None:
        if cell.fg is not None:
            self.brush = replace(self.brush, fg=cell.fg)
            self._track_recent_color(cell.fg)
        if cell.char != EMPTY:
            self.brush = replace(self.brush, glyph=cell.char)
        logger.debug("Picked %r fg=%s", cell.char, cell.fg)

    def begin_stroke(self) -> None:
        self._history.begin_stroke()

    def end_stroke(self) -> None:
        self._history.end_stroke()

    def undo(self) -> bool:
        """Undo the last action. Returns False if there was nothing to undo."""
        if self._history.undo(self._canvas):
            self.dirty = True
            return True
        return False

    def redo(self) -> bool:
        """Redo the last undone action. Returns False if there was none."""
        if self._history.redo(self._canvas):
            self.dirty = True
            return True
        return False

    def cancel_tool(self) -> None:
        """Forget a pending line or rectangle anchor."""
        self.tool_state = IDLE

    # -------------------------------------------------------------------------
    # Canvas replacement
    # -------------------------------------------------------------------------

    def _replace_canvas(self, canvas: Canvas) -> None:
        self._canvas = canvas
        self._history.clear()
        self.tool_state = IDLE
        logger.debug("Canvas replaced (%dx%d), history reset", canvas.width, canvas.height)

    def new_canvas(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
        """Replace the canvas with a blank one and reset history."""
        self._replace_canvas(Canvas(width, height))
        self.name = None
        self.path = None
        self.created_at = None
        self.dirty = False

    def resize(self, width: int, height: int) -> None:
        """Resize the canvas, keeping the top-left overlap.

        History is reset since recorded mutations may fall outside the
        new bounds.
        """
        canvas = self._canvas.copy()
        canvas.resize(width, height)
        self._replace_canvas(canvas)
        self.dirty = True

    def load(self, path: Path | str) -> None:
        """Replace the canvas and settings with a project file.

        Raises:
            ProjectFormatError: If the file cannot be parsed
            OSError: If the file cannot be read
        """
        path = Path(path)
        project = Project.load(path)
        self._replace_canvas(project.canvas)
        self.brush = replace(self.brush, fg=project.color, glyph=project.glyph)
        self.symmetry = project.symmetry
        self.name = project.name
        self.path = path
        self.created_at = project.created_at
        self.dirty = False

    def to_project(self) -> Project:
        """Snapshot the session as a Project."""
        project = Project(
            name=self.name or "untitled",
            canvas=self._canvas.copy(),
            color=self.brush.fg if self.brush.fg is not None else DEFAULT_FG,
            glyph=self.brush.glyph,
            symmetry=self.symmetry,
        )
        if self.created_at:
            project.created_at = self.created_at
        return project

    def save(self, path: Path | str | None = None) -> Path:
        """Save to a project file.

        Args:
            path: Destination (uses the current path if not provided).
                  The project extension is appended when missing.

        Returns:
            The path written to

        Raises:
            ValueError: If no path provided and the session has none
        """
        if path is not None:
            save_path = Path(path)
            if save_path.suffix != PROJECT_EXTENSION:
                save_path = save_path.with_name(save_path.name + PROJECT_EXTENSION)
        elif self.path is not None:
            save_path = self.path
        else:
            raise ValueError("No path specified and session has no existing path")
        if self.name is None:
            self.name = save_path.stem

        project = self.to_project()
        project.save(save_path)

        self.path = save_path
        self.created_at = project.created_at
        self.dirty = False
        return save_path
