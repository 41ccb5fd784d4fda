"""Tests for the drawing tools."""

import pytest

from kaku.core.canvas import Canvas
from kaku.core.cell import DEFAULT_CELL, Cell
from kaku.core.constants import FULL, UPPER_HALF
from kaku.edit.tools import (
    AwaitingSecondPoint,
    Brush,
    Idle,
    ToolKind,
    apply_tool,
    bresenham_line,
    eraser,
    eyedropper,
    flood_fill,
    line,
    pencil,
    rectangle,
)

RED = (255, 0, 0)
BLUE = (0, 0, 255)


def _apply(canvas: Canvas, mutations) -> None:
    for m in mutations:
        canvas.set(m.x, m.y, m.new)


class TestPencilAndEraser:
    def test_pencil_single_mutation(self, canvas: Canvas) -> None:
        mutations = pencil(canvas, 3, 4, FULL, RED, None)
        assert len(mutations) == 1
        m = mutations[0]
        assert (m.x, m.y) == (3, 4)
        assert m.old == DEFAULT_CELL
        assert m.new == Cell(FULL, RED, None)

    def test_pencil_does_not_touch_canvas(self, canvas: Canvas) -> None:
        pencil(canvas, 3, 4, FULL, RED, None)
        assert canvas.get(3, 4) == DEFAULT_CELL

    def test_pencil_same_cell_is_noop(self, canvas: Canvas) -> None:
        canvas.set(3, 4, Cell(FULL, RED, None))
        assert pencil(canvas, 3, 4, FULL, RED, None) == []

    def test_pencil_out_of_bounds(self, canvas: Canvas) -> None:
        assert pencil(canvas, -1, 0, FULL, RED, None) == []
        assert pencil(canvas, 32, 0, FULL, RED, None) == []

    def test_eraser_resets_to_default(self, canvas: Canvas) -> None:
        canvas.set(1, 1, Cell(FULL, RED, BLUE))
        mutations = eraser(canvas, 1, 1)
        assert len(mutations) == 1
        assert mutations[0].new == DEFAULT_CELL

    def test_eraser_on_default_is_noop(self, canvas: Canvas) -> None:
        assert eraser(canvas, 1, 1) == []


class TestBresenham:
    """Tests for bresenham_line."""

    def test_horizontal(self) -> None:
        assert bresenham_line(0, 0, 5, 0) == [(x, 0) for x in range(6)]

    def test_vertical(self) -> None:
        assert bresenham_line(0, 0, 0, 5) == [(0, y) for y in range(6)]

    def test_diagonal(self) -> None:
        assert bresenham_line(0, 0, 4, 4) == [(i, i) for i in range(5)]

    def test_single_point(self) -> None:
        assert bresenham_line(3, 3, 3, 3) == [(3, 3)]

    @pytest.mark.parametrize("a, b", [
        ((0, 0), (5, 0)),
        ((0, 0), (2, 1)),
        ((1, 7), (9, 2)),
        ((0, 0), (7, 3)),
        ((5, 5), (0, 9)),
        ((3, 0), (4, 11)),
    ])
    def test_reversal_gives_same_points(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        forward = bresenham_line(*a, *b)
        backward = bresenham_line(*b, *a)
        assert set(forward) == set(backward)
        assert backward == list(reversed(forward))

    @pytest.mark.parametrize("a, b", [
        ((0, 0), (7, 3)),
        ((1, 7), (9, 2)),
        ((5, 5), (0, 9)),
        ((3, 0), (4, 11)),
    ])
    def test_point_count(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        dx = abs(b[0] - a[0])
        dy = abs(b[1] - a[1])
        points = bresenham_line(*a, *b)
        assert len(points) == max(dx, dy) + 1
        assert points[0] == a
        assert points[-1] == b

    def test_line_clips_at_edges(self, small_canvas: Canvas) -> None:
        mutations = line(small_canvas, -2, 0, 10, 0, FULL, RED, None)
        assert sorted(m.x for m in mutations) == list(range(8))


class TestRectangle:
    """Tests for rectangle."""

    def test_outline(self, canvas: Canvas) -> None:
        assert len(rectangle(canvas, 0, 0, 3, 3, FULL, RED, None)) == 12

    def test_filled(self, canvas: Canvas) -> None:
        assert len(rectangle(canvas, 0, 0, 3, 3, FULL, RED, None, filled=True)) == 16

    def test_single_point(self, canvas: Canvas) -> None:
        assert len(rectangle(canvas, 4, 4, 4, 4, FULL, RED, None)) == 1
        assert len(rectangle(canvas, 4, 4, 4, 4, FULL, RED, None, filled=True)) == 1

    def test_corner_order_irrelevant(self, canvas: Canvas) -> None:
        a = {(m.x, m.y) for m in rectangle(canvas, 0, 0, 3, 5, FULL, RED, None)}
        b = {(m.x, m.y) for m in rectangle(canvas, 3, 5, 0, 0, FULL, RED, None)}
        assert a == b

    def test_outline_leaves_interior(self, canvas: Canvas) -> None:
        points = {(m.x, m.y) for m in rectangle(canvas, 0, 0, 3, 3, FULL, RED, None)}
        assert (1, 1) not in points
        assert (2, 2) not in points

    def test_skips_unchanged(self, canvas: Canvas) -> None:
        canvas.set(0, 0, Cell(FULL, RED, None))
        assert len(rectangle(canvas, 0, 0, 3, 3, FULL, RED, None)) == 11


class TestFloodFill:
    """Tests for flood_fill."""

    def test_fills_empty_canvas(self, canvas: Canvas) -> None:
        mutations = flood_fill(canvas, 0, 0, FULL, RED, None)
        assert len(mutations) == 32 * 32
        assert len({(m.x, m.y) for m in mutations}) == 32 * 32

    def test_refill_same_is_noop(self, canvas: Canvas) -> None:
        _apply(canvas, flood_fill(canvas, 0, 0, FULL, RED, None))
        assert flood_fill(canvas, 10, 10, FULL, RED, None) == []

    def test_stops_at_boundary(self, small_canvas: Canvas) -> None:
        # Vertical wall at x = 3
        for y in range(8):
            small_canvas.set(3, y, Cell(FULL, BLUE, None))
        mutations = flood_fill(small_canvas, 0, 0, FULL, RED, None)
        assert len(mutations) == 3 * 8
        assert all(m.x < 3 for m in mutations)

    def test_not_diagonally_connected(self, small_canvas: Canvas) -> None:
        # Diagonal wall from (0,1) to (1,0) cuts off the corner
        small_canvas.set(1, 0, Cell(FULL, BLUE, None))
        small_canvas.set(0, 1, Cell(FULL, BLUE, None))
        mutations = flood_fill(small_canvas, 0, 0, FULL, RED, None)
        assert [(m.x, m.y) for m in mutations] == [(0, 0)]

    def test_off_canvas_seed(self, canvas: Canvas) -> None:
        assert flood_fill(canvas, -1, 0, FULL, RED, None) == []

    def test_old_is_seed_value(self, small_canvas: Canvas) -> None:
        seed = Cell(UPPER_HALF, BLUE, None)
        small_canvas.set(4, 4, seed)
        mutations = flood_fill(small_canvas, 4, 4, FULL, RED, None)
        assert len(mutations) == 1
        assert mutations[0].old == seed

    def test_large_canvas_no_recursion_limit(self) -> None:
        canvas = Canvas(128, 128)
        assert len(flood_fill(canvas, 64, 64, FULL, RED, None)) == 128 * 128


class TestEyedropper:
    def test_reads_cell(self, canvas: Canvas) -> None:
        cell = Cell(UPPER_HALF, RED, BLUE)
        canvas.set(2, 2, cell)
        assert eyedropper(canvas, 2, 2) == cell

    def test_off_canvas(self, canvas: Canvas) -> None:
        assert eyedropper(canvas, 50, 2) is None


class TestApplyTool:
    """Tests for apply_tool dispatch and the two-click state machine."""

    def test_pencil(self, canvas: Canvas) -> None:
        result = apply_tool(ToolKind.PENCIL, canvas, Idle(), 1, 1, Brush(FULL, RED))
        assert len(result.mutations) == 1
        assert result.state == Idle()
        assert result.picked is None

    def test_line_first_click_records_anchor(self, canvas: Canvas) -> None:
        result = apply_tool(ToolKind.LINE, canvas, Idle(), 1, 2, Brush())
        assert result.mutations == []
        assert result.state == AwaitingSecondPoint(1, 2)

    def test_line_second_click_draws(self, canvas: Canvas) -> None:
        result = apply_tool(ToolKind.LINE, canvas, AwaitingSecondPoint(0, 0), 5, 0, Brush(FULL, RED))
        assert [(m.x, m.y) for m in result.mutations] == [(x, 0) for x in range(6)]
        assert isinstance(result.state, Idle)

    def test_rectangle_uses_brush_fill(self, canvas: Canvas) -> None:
        state = AwaitingSecondPoint(0, 0)
        outline = apply_tool(ToolKind.RECTANGLE, canvas, state, 3, 3, Brush(FULL, RED))
        filled = apply_tool(ToolKind.RECTANGLE, canvas, state, 3, 3, Brush(FULL, RED, filled=True))
        assert len(outline.mutations) == 12
        assert len(filled.mutations) == 16

    def test_eyedropper_picks(self, canvas: Canvas) -> None:
        canvas.set(2, 2, Cell(FULL, RED, None))
        result = apply_tool(ToolKind.EYEDROPPER, canvas, Idle(), 2, 2, Brush())
        assert result.mutations == []
        assert result.picked == Cell(FULL, RED, None)

    def test_tool_info(self) -> None:
        assert ToolKind.RECTANGLE.label == "Rect"
        assert ToolKind.EYEDROPPER.key == "I"
        assert ToolKind.LINE.is_two_click
        assert not ToolKind.FILL.is_two_click
