"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from kaku.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, PROJECT_EXTENSION, default_log_level
from kaku.core.color import (
    ColorFormatError,
    ColorMode,
    Rgb,
    color256_to_rgb,
    color_name,
    nearest_16,
    nearest_256,
    require_hex_color,
    rgb_to_hsl,
    to_hex,
)
from kaku.core.constants import ALL_GLYPHS, GLYPH_ALIASES
from kaku.core.document import Project, ProjectFormatError
from kaku.edit.document import EditSession
from kaku.edit.symmetry import SymmetryMode
from kaku.edit.tools import AwaitingSecondPoint, ToolKind
from kaku.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _parse_color(value: str) -> Rgb:
    try:
        return require_hex_color(value)
    except ColorFormatError as e:
        raise typer.BadParameter(str(e)) from e


def _parse_glyph(value: str) -> str:
    glyph = GLYPH_ALIASES.get(value.lower(), value)
    if glyph not in ALL_GLYPHS:
        names = ", ".join(GLYPH_ALIASES)
        raise typer.BadParameter(f"Unknown glyph {value!r}, expected one of: {names}")
    return glyph


def _parse_point(value: str) -> tuple[int, int]:
    parts = value.replace(" ", "").split(",")
    if len(parts) != 2 or not all(p.lstrip("-").isdigit() for p in parts):
        raise typer.BadParameter(f"Invalid point {value!r}, expected X,Y")
    return int(parts[0]), int(parts[1])


def _with_extension(path: Path) -> Path:
    if path.suffix == PROJECT_EXTENSION:
        return path
    return path.with_name(path.name + PROJECT_EXTENSION)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="kaku",
        help="Draw block-character pixel art in the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def open_session(path: Path) -> EditSession:
        try:
            return EditSession.open(path)
        except FileNotFoundError:
            console.print(f"[red]No such project: {path}[/]")
            raise typer.Exit(1)
        except (ProjectFormatError, OSError) as e:
            console.print(f"[red]Cannot open {path}: {e}[/]")
            raise typer.Exit(1)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
        log_file: Annotated[Optional[Path], typer.Option("--log-file", help="Also write logs to this file")] = None,
    ) -> None:
        """Draw block-character pixel art in the terminal."""
        level = logging.DEBUG if verbose else default_log_level()
        setup_logging(level, str(log_file) if log_file else None)

    @app.command()
    def new(
        path: Annotated[Path, typer.Argument(help="Project file to create")],
        width: Annotated[int, typer.Option("--width", "-w", help="Canvas width (8-128)")] = DEFAULT_WIDTH,
        height: Annotated[int, typer.Option("--height", "-h", help="Canvas height (8-128)")] = DEFAULT_HEIGHT,
        name: Annotated[Optional[str], typer.Option("--name", "-n", help="Project name")] = None,
        force: Annotated[bool, typer.Option("--force", "-f", help="Overwrite an existing file")] = False,
    ) -> None:
        """Create a blank project."""
        path = _with_extension(path)
        if path.exists() and not force:
            console.print(f"[red]{path} already exists (use --force to overwrite)[/]")
            raise typer.Exit(1)

        session = EditSession.new(width, height)
        session.name = name or path.stem
        saved = session.save(path)
        canvas = session.canvas
        console.print(f"[green]Created {saved} ({canvas.width}x{canvas.height})[/]")

    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Project file to inspect")],
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show project metadata."""
        session = open_session(path)
        project = session.to_project()
        painted = sum(1 for _, _, cell in project.canvas.cells() if not cell.is_empty())

        if json_output:
            data = {
                "name": project.name,
                "width": project.width,
                "height": project.height,
                "version": project.version,
                "created_at": project.created_at,
                "color": to_hex(project.color),
                "glyph": project.glyph,
                "symmetry": project.symmetry.value,
                "painted_cells": painted,
            }
            print(json.dumps(data, indent=2, ensure_ascii=False))
            return

        console.print(f"[bold cyan]{project.name}[/] ({path.name})")
        console.print(f"  [bold]Size:[/]     {project.width}x{project.height}")
        console.print(f"  [bold]Created:[/]  {project.created_at}")
        console.print(f"  [bold]Color:[/]    {to_hex(project.color)}")
        console.print(f"  [bold]Glyph:[/]    {project.glyph}")
        console.print(f"  [bold]Symmetry:[/] {project.symmetry.label}")
        console.print(f"  [bold]Painted:[/]  {painted} cells")

    @app.command()
    def draw(
        path: Annotated[Path, typer.Argument(help="Project file to edit")],
        points: Annotated[list[str], typer.Option("--at", "-a", help="Cell as X,Y (repeat for more points)")],
        tool: Annotated[ToolKind, typer.Option("--tool", "-t", help="Drawing tool")] = ToolKind.PENCIL,
        color: Annotated[Optional[str], typer.Option("--color", "-c", help="Brush color as #RRGGBB")] = None,
        background: Annotated[Optional[str], typer.Option("--bg", help="Background color as #RRGGBB")] = None,
        glyph: Annotated[Optional[str], typer.Option("--glyph", "-g", help="Glyph name or character")] = None,
        filled: Annotated[bool, typer.Option("--filled", help="Fill rectangles")] = False,
        symmetry: Annotated[Optional[SymmetryMode], typer.Option("--symmetry", "-s", help="Mirror mode", case_sensitive=False)] = None,
    ) -> None:
        """Apply a drawing tool to a project and save it.

        Line and rectangle take their points in pairs. All points are
        recorded as a single stroke.
        """
        coords = [_parse_point(p) for p in points]
        session = open_session(path)
        if color is not None:
            session.set_color(_parse_color(color))
        if background is not None:
            session.set_background(_parse_color(background))
        if glyph is not None:
            session.set_glyph(_parse_glyph(glyph))
        if symmetry is not None:
            session.symmetry = symmetry
        session.set_filled(filled)
        session.select_tool(tool)

        changed = 0
        session.begin_stroke()
        for x, y in coords:
            changed += len(session.apply_tool(x, y))
        session.end_stroke()

        if isinstance(session.tool_state, AwaitingSecondPoint):
            console.print("[yellow]Odd number of points: last point ignored[/]")
            session.cancel_tool()

        session.save()
        console.print(f"[green]{tool.label}: {changed} cells changed[/]")

    @app.command()
    def export(
        path: Annotated[Path, typer.Argument(help="Project file to export")],
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write to file instead of stdout")] = None,
        format: Annotated[str, typer.Option("--format", "-f", help="text or ansi")] = "ansi",
        colors: Annotated[ColorMode, typer.Option("--colors", help="Color depth for ANSI output")] = ColorMode.TRUE_COLOR,
    ) -> None:
        """Export a project as plain text or ANSI art."""
        from kaku.render import TerminalRenderer, TextRenderer

        session = open_session(path)
        if format == "text":
            content = TextRenderer().render(session.canvas)
        elif format == "ansi":
            content = TerminalRenderer(colors).render(session.canvas)
        else:
            console.print(f"[red]Unknown format: {format}[/]")
            raise typer.Exit(1)

        if output is None:
            print(content)
        else:
            output.write_text(content + "\n", encoding="utf-8")
            console.print(f"[green]Exported {path} → {output}[/]")

    @app.command("import-image")
    def import_image(
        source: Annotated[Path, typer.Argument(help="PNG/JPG/GIF image")],
        dest: Annotated[Path, typer.Argument(help="Project file to create")],
        width: Annotated[int, typer.Option("--width", "-w", help="Canvas width in cells")] = DEFAULT_WIDTH,
        alpha_threshold: Annotated[int, typer.Option("--alpha-threshold", help="Alpha below this is transparent")] = 128,
        sharpen: Annotated[bool, typer.Option("--sharpen", help="Sharpen after downscaling")] = False,
    ) -> None:
        """Convert an image into a half-block project."""
        from kaku.import_image import image_to_canvas

        try:
            canvas = image_to_canvas(source, width, alpha_threshold=alpha_threshold, sharpen=sharpen)
        except OSError as e:
            console.print(f"[red]Cannot read image {source}: {e}[/]")
            raise typer.Exit(1)

        dest = _with_extension(dest)
        Project(name=dest.stem, canvas=canvas).save(dest)
        console.print(f"[green]Imported {source} → {dest} ({canvas.width}x{canvas.height})[/]")

    @app.command("list")
    def list_projects(
        directory: Annotated[Path, typer.Argument(help="Directory to scan")] = Path("."),
    ) -> None:
        """List project files in a directory."""
        from kaku.io import list_project_files

        files = list_project_files(directory)
        if not files:
            console.print(f"[dim]No {PROJECT_EXTENSION} files in {directory}[/]")
            return
        for name in files:
            console.print(name)

    @app.command()
    def color(
        value: Annotated[str, typer.Argument(help="Color as #RRGGBB")],
    ) -> None:
        """Show a color in RGB, HSL and palette terms."""
        rgb = _parse_color(value)
        h, s, l = rgb_to_hsl(*rgb)
        index_256 = nearest_256(rgb)
        index_16 = nearest_16(rgb)

        console.print(f"[on {to_hex(rgb)}]      [/] [bold]{to_hex(rgb)}[/]")
        console.print(f"  [bold]RGB:[/] {rgb[0]}, {rgb[1]}, {rgb[2]}")
        console.print(f"  [bold]HSL:[/] {h}, {s}%, {l}%")
        console.print(f"  [bold]256:[/] {index_256}")
        console.print(f"  [bold]16:[/]  {index_16} ({color_name(index_16)})")

    @app.command()
    def palette(
        groups: Annotated[bool, typer.Option("--groups", "-g", help="Also show the 216-color cube by hue")] = False,
    ) -> None:
        """Show the default palette as 256-color indices."""
        from kaku.core.palette import DEFAULT_PALETTE, build_hue_groups

        def swatches(indices) -> str:
            return "".join(f"[on {to_hex(color256_to_rgb(i))}]  [/]" for i in indices)

        console.print("[bold]Default[/]")
        console.print(swatches(DEFAULT_PALETTE))
        console.print(" ".join(str(i) for i in DEFAULT_PALETTE))
        if not groups:
            return
        for group in build_hue_groups():
            console.print(f"[bold]{group.name}[/] ({len(group.colors)})")
            console.print(swatches(group.colors))

    return app
