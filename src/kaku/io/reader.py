"""Load project files."""

import json
import logging
from pathlib import Path
from typing import Any

from kaku.config import PROJECT_EXTENSION, PROJECT_VERSION
from kaku.core.canvas import Canvas
from kaku.core.cell import Cell
from kaku.core.color import Rgb, color_from_legacy, parse_hex_color
from kaku.core.constants import BLOCK_NAMES, DEFAULT_FG, FULL, HALF_BLOCKS
from kaku.core.document import Project, ProjectFormatError
from kaku.edit.symmetry import SymmetryMode

logger = logging.getLogger(__name__)

_MISSING = object()


def load_project(path: str | Path) -> Project:
    """
    Load a project file from disk.

    Raises:
        ProjectFormatError: If the file is not a valid project, or was
            written by a newer version
        OSError: If the file cannot be read
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ProjectFormatError(f"{path.name}: not valid JSON ({e.msg})") from e

    project = project_from_dict(data)
    logger.info(
        "Loaded project %r from %s (%dx%d, v%d)",
        project.name, path, project.width, project.height, project.version,
    )
    return project


def project_from_dict(data: Any) -> Project:
    """Build a Project from parsed JSON.

    Colors may be ``#rrggbb`` strings, legacy 256-color indices or legacy
    standard color names. Cells may give their glyph as ``ch`` or as a
    legacy ``block`` name. In palette-based cells black means transparent.
    """
    if not isinstance(data, dict):
        raise ProjectFormatError("Project must be a JSON object")

    version = data.get("version")
    if not isinstance(version, int) or isinstance(version, bool):
        raise ProjectFormatError("Missing or invalid 'version'")
    if version > PROJECT_VERSION:
        raise ProjectFormatError(
            f"File version {version} is newer than supported (v{PROJECT_VERSION})"
        )

    canvas_data = data.get("canvas")
    if not isinstance(canvas_data, dict):
        raise ProjectFormatError("Missing or invalid 'canvas'")

    color = _read_color(data.get("color", _MISSING), "color")
    project = Project(
        name=str(data.get("name", "untitled")),
        canvas=_read_canvas(canvas_data),
        color=color if color is not None else DEFAULT_FG,
        glyph=_read_glyph(data.get("glyph", FULL)),
        symmetry=_read_symmetry(data.get("symmetry", SymmetryMode.OFF.value)),
        version=version,
    )
    if isinstance(data.get("created_at"), str):
        project.created_at = data["created_at"]
    if isinstance(data.get("modified_at"), str):
        project.modified_at = data["modified_at"]
    return project


def _read_color(value: Any, where: str) -> Rgb | None:
    if value is _MISSING:
        return DEFAULT_FG
    if value is None:
        return None
    if isinstance(value, str):
        rgb = parse_hex_color(value)
        if rgb is not None:
            return rgb
    if isinstance(value, (int, str)):
        try:
            return color_from_legacy(value)
        except ValueError as e:
            raise ProjectFormatError(f"Invalid color in {where}: {e}") from e
    raise ProjectFormatError(f"Invalid color in {where}: {value!r}")


def _read_glyph(value: Any) -> str:
    if not isinstance(value, str):
        raise ProjectFormatError(f"Invalid glyph: {value!r}")
    if len(value) == 1:
        return value
    # Unknown block names from newer files draw as full blocks
    return BLOCK_NAMES.get(value, FULL)


def _read_symmetry(value: Any) -> SymmetryMode:
    try:
        return SymmetryMode(value)
    except ValueError as e:
        raise ProjectFormatError(f"Invalid symmetry mode: {value!r}") from e


def _read_cell(data: Any, x: int, y: int) -> Cell:
    where = f"cell ({x}, {y})"
    if not isinstance(data, dict):
        raise ProjectFormatError(f"Invalid {where}: {data!r}")
    if "ch" in data:
        char = data["ch"]
        if not isinstance(char, str) or len(char) != 1:
            raise ProjectFormatError(f"Invalid glyph in {where}: {char!r}")
    elif "block" in data:
        char = _read_glyph(data["block"])
    else:
        raise ProjectFormatError(f"Missing glyph in {where}")
    fg_value = data.get("fg", _MISSING)
    bg_value = data.get("bg")
    fg = _read_color(fg_value, where)
    bg = _read_color(bg_value, where) if bg_value is not None else None

    # Palette black was the transparent color in palette-based files
    if _is_legacy_black(bg_value):
        bg = None
    if char in HALF_BLOCKS and _is_legacy_black(fg_value):
        fg = None
    return Cell(char, fg, bg)


def _is_legacy_black(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return value == 0 or value == "Black"


def _read_canvas(data: dict) -> Canvas:
    rows = data.get("cells")
    if not isinstance(rows, list) or not all(isinstance(row, list) for row in rows):
        raise ProjectFormatError("Missing or invalid 'canvas.cells'")

    height = data.get("height", len(rows))
    width = data.get("width", max((len(row) for row in rows), default=0))
    if not isinstance(width, int) or not isinstance(height, int):
        raise ProjectFormatError("Invalid canvas dimensions")

    canvas = Canvas(width, height)
    for y, row in enumerate(rows[:canvas.height]):
        for x, cell_data in enumerate(row[:canvas.width]):
            canvas.set(x, y, _read_cell(cell_data, x, y))
    return canvas


def list_project_files(directory: str | Path) -> list[str]:
    """Names of the project files in a directory, sorted."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    return sorted(
        entry.name
        for entry in directory.iterdir()
        if entry.is_file() and entry.suffix == PROJECT_EXTENSION
    )
