"""Project - a canvas plus the editor settings saved with it."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from kaku.config import PROJECT_VERSION
from kaku.core.canvas import Canvas
from kaku.core.color import Rgb
from kaku.core.constants import DEFAULT_FG, FULL
from kaku.edit.symmetry import SymmetryMode


class ProjectFormatError(ValueError):
    """Raised when a project file cannot be read."""


def now_iso8601() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SSZ``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass
class Project:
    """
    A saved artwork.

    Holds the canvas together with the brush color, brush glyph and
    symmetry mode that were active when it was saved.
    """
    name: str = "untitled"
    canvas: Canvas = field(default_factory=Canvas)
    color: Rgb = DEFAULT_FG
    glyph: str = FULL
    symmetry: SymmetryMode = SymmetryMode.OFF
    created_at: str = field(default_factory=now_iso8601)
    modified_at: str = ""
    version: int = PROJECT_VERSION

    def __post_init__(self) -> None:
        if not self.modified_at:
            self.modified_at = self.created_at

    @classmethod
    def load(cls, path: str | Path) -> Project:
        """Load a project file from disk."""
        from kaku.io.reader import load_project
        return load_project(path)

    def save(self, path: str | Path) -> None:
        """Save this project to disk, updating ``modified_at``."""
        from kaku.io.writer import save_project
        save_project(self, path)

    @property
    def width(self) -> int:
        return self.canvas.width

    @property
    def height(self) -> int:
        return self.canvas.height
