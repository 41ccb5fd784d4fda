"""Tests for the command line interface."""

import json
from pathlib import Path

import pytest
from PIL import Image
from typer.testing import CliRunner

from kaku.cli.app import create_app
from kaku.core.cell import Cell
from kaku.core.constants import FULL, UPPER_HALF
from kaku.io import load_project

RED = (255, 0, 0)

runner = CliRunner()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def created(app, project_path: Path) -> Path:
    result = runner.invoke(app, ["new", str(project_path), "--width", "16", "--height", "8"])
    assert result.exit_code == 0, result.output
    return project_path


class TestNew:
    def test_creates_project(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["new", str(tmp_path / "hero"), "-n", "Hero"])
        assert result.exit_code == 0, result.output
        project = load_project(tmp_path / "hero.kaku")
        assert project.name == "Hero"
        assert (project.width, project.height) == (32, 32)

    def test_clamps_size(self, app, project_path: Path) -> None:
        runner.invoke(app, ["new", str(project_path), "-w", "2", "-h", "500"])
        project = load_project(project_path)
        assert (project.width, project.height) == (8, 128)

    def test_refuses_overwrite(self, app, created: Path) -> None:
        result = runner.invoke(app, ["new", str(created)])
        assert result.exit_code == 1

    def test_force_overwrites(self, app, created: Path) -> None:
        result = runner.invoke(app, ["new", str(created), "--force"])
        assert result.exit_code == 0
        assert load_project(created).width == 32


class TestDraw:
    """Tests for the draw command."""

    def test_pencil(self, app, created: Path) -> None:
        result = runner.invoke(app, ["draw", str(created), "--at", "1,2", "--color", "#ff0000"])
        assert result.exit_code == 0, result.output
        assert "Pencil: 1 cells changed" in result.output
        assert load_project(created).canvas.get(1, 2) == Cell(FULL, RED, None)

    def test_brush_color_saved(self, app, created: Path) -> None:
        runner.invoke(app, ["draw", str(created), "--at", "0,0", "-c", "#FF0000"])
        assert load_project(created).color == RED

    def test_line_with_symmetry(self, app, created: Path) -> None:
        result = runner.invoke(app, [
            "draw", str(created), "-t", "line", "-a", "0,0", "-a", "2,0",
            "-s", "horizontal", "-g", "upper",
        ])
        assert result.exit_code == 0, result.output
        canvas = load_project(created).canvas
        painted = {(x, y) for x, y, cell in canvas.cells() if cell.char == UPPER_HALF}
        assert painted == {(0, 0), (1, 0), (2, 0), (13, 0), (14, 0), (15, 0)}

    def test_odd_points_warns(self, app, created: Path) -> None:
        result = runner.invoke(app, [
            "draw", str(created), "-t", "rectangle", "-a", "0,0", "-a", "3,3", "-a", "5,5",
        ])
        assert result.exit_code == 0
        assert "Odd number of points" in result.output
        assert "Rect: 12 cells changed" in result.output

    def test_fill(self, app, created: Path) -> None:
        result = runner.invoke(app, ["draw", str(created), "-t", "fill", "-a", "0,0"])
        assert "Fill: 128 cells changed" in result.output

    def test_bad_color(self, app, created: Path) -> None:
        result = runner.invoke(app, ["draw", str(created), "--at", "0,0", "--color", "red"])
        assert result.exit_code == 2

    def test_bad_point(self, app, created: Path) -> None:
        result = runner.invoke(app, ["draw", str(created), "--at", "zero"])
        assert result.exit_code == 2

    def test_missing_project(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["draw", str(tmp_path / "nope.kaku"), "--at", "0,0"])
        assert result.exit_code == 1
        assert "No such project" in result.output

    def test_broken_project(self, app, project_path: Path) -> None:
        project_path.write_text('{"version": 9}')
        result = runner.invoke(app, ["draw", str(project_path), "--at", "0,0"])
        assert result.exit_code == 1
        assert "Cannot open" in result.output


class TestInfo:
    def test_json(self, app, created: Path) -> None:
        runner.invoke(app, ["draw", str(created), "-a", "0,0", "-a", "1,0"])
        result = runner.invoke(app, ["info", str(created), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["name"] == "art"
        assert (data["width"], data["height"]) == (16, 8)
        assert data["painted_cells"] == 2
        assert data["symmetry"] == "Off"

    def test_text(self, app, created: Path) -> None:
        result = runner.invoke(app, ["info", str(created)])
        assert result.exit_code == 0
        assert "16x8" in result.output


class TestExport:
    """Tests for the export command."""

    def test_text_to_stdout(self, app, created: Path) -> None:
        runner.invoke(app, ["draw", str(created), "-a", "0,0"])
        result = runner.invoke(app, ["export", str(created), "--format", "text"])
        assert result.exit_code == 0
        assert result.output == FULL * 2 + "\n"

    def test_verbose_logs_stay_off_stdout(self, app, created: Path) -> None:
        runner.invoke(app, ["draw", str(created), "-a", "0,0"])
        result = runner.invoke(app, ["-v", "export", str(created), "--format", "text"])
        assert result.exit_code == 0
        assert result.stdout == FULL * 2 + "\n"
        assert "Loaded project" in result.stderr

    def test_ansi_to_file(self, app, created: Path, tmp_path: Path) -> None:
        runner.invoke(app, ["draw", str(created), "-a", "0,0", "-c", "#ff0000"])
        out = tmp_path / "art.ans"
        result = runner.invoke(app, ["export", str(created), "-o", str(out), "--colors", "256"])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8").startswith("\x1b[38;5;9;49m")

    def test_unknown_format(self, app, created: Path) -> None:
        result = runner.invoke(app, ["export", str(created), "--format", "html"])
        assert result.exit_code == 1


class TestImportImage:
    def test_import(self, app, tmp_path: Path) -> None:
        source = tmp_path / "sprite.png"
        Image.new("RGB", (8, 16), RED).save(source)
        result = runner.invoke(app, ["import-image", str(source), str(tmp_path / "sprite"), "-w", "8"])
        assert result.exit_code == 0, result.output
        project = load_project(tmp_path / "sprite.kaku")
        assert project.name == "sprite"
        assert project.canvas.get(0, 0) == Cell(UPPER_HALF, RED, RED)

    def test_unreadable_image(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["import-image", str(tmp_path / "none.png"), str(tmp_path / "out")])
        assert result.exit_code == 1


class TestListAndColor:
    def test_list(self, app, tmp_path: Path) -> None:
        runner.invoke(app, ["new", str(tmp_path / "b")])
        runner.invoke(app, ["new", str(tmp_path / "a")])
        result = runner.invoke(app, ["list", str(tmp_path)])
        assert result.output.split() == ["a.kaku", "b.kaku"]

    def test_list_empty(self, app, tmp_path: Path) -> None:
        result = runner.invoke(app, ["list", str(tmp_path)])
        assert "No .kaku files" in result.output

    def test_color(self, app) -> None:
        result = runner.invoke(app, ["color", "#ff0000"])
        assert result.exit_code == 0
        assert "#FF0000" in result.output
        assert "0, 100%, 50%" in result.output
        assert "BrightRed" in result.output

    def test_bad_color(self, app) -> None:
        result = runner.invoke(app, ["color", "nothex"])
        assert result.exit_code == 2


class TestPalette:
    def test_default_palette(self, app) -> None:
        result = runner.invoke(app, ["palette"])
        assert result.exit_code == 0
        assert "Default" in result.output
        assert "0 236 244" in result.output
        assert "Reds" not in result.output

    def test_hue_groups(self, app) -> None:
        result = runner.invoke(app, ["palette", "--groups"])
        assert result.exit_code == 0
        for name in ("Reds", "Greens", "Blues", "Pinks"):
            assert name in result.output
