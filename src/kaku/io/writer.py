"""Save project files."""

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from kaku.core.cell import Cell
from kaku.core.color import Rgb, to_hex
from kaku.core.document import now_iso8601

if TYPE_CHECKING:
    from kaku.core.document import Project

logger = logging.getLogger(__name__)


def _color(rgb: Rgb | None) -> str | None:
    return to_hex(rgb).lower() if rgb is not None else None


def _cell(cell: Cell) -> dict[str, Any]:
    return {"ch": cell.char, "fg": _color(cell.fg), "bg": _color(cell.bg)}


def project_to_dict(project: "Project") -> dict[str, Any]:
    """Convert a Project to its JSON structure."""
    canvas = project.canvas
    return {
        "version": project.version,
        "name": project.name,
        "created_at": project.created_at,
        "modified_at": project.modified_at,
        "color": _color(project.color),
        "glyph": project.glyph,
        "symmetry": project.symmetry.value,
        "canvas": {
            "width": canvas.width,
            "height": canvas.height,
            "cells": [[_cell(cell) for cell in row] for row in canvas.rows()],
        },
    }


def save_project(project: "Project", path: str | Path) -> None:
    """
    Save a project to disk as JSON.

    Stamps ``modified_at`` with the current time before writing.
    """
    path = Path(path)
    project.modified_at = now_iso8601()
    content = json.dumps(project_to_dict(project), indent=2, ensure_ascii=False)

    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
        f.write("\n")

    logger.info("Saved project %r to %s", project.name, path)
