"""Canvas - bounded 2D grid of cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from kaku.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, MAX_DIMENSION, MIN_DIMENSION
from kaku.core.cell import DEFAULT_CELL, Cell, resolved


def clamp_dimension(value: int) -> int:
    """Clamp a canvas dimension to the supported range."""
    return max(MIN_DIMENSION, min(MAX_DIMENSION, value))


@dataclass
class Canvas:
    """
    A fixed-size 2D grid of Cells.

    Width and height are clamped to [MIN_DIMENSION, MAX_DIMENSION] on
    construction and resize. Access outside the grid never raises:
    ``get`` returns None and ``set`` does nothing, so drawing tools can
    walk past the edges freely.
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        self.width = clamp_dimension(self.width)
        self.height = clamp_dimension(self.height)
        if not self._buffer:
            self._buffer = self._blank(self.width, self.height)
        elif len(self._buffer) != self.height or any(len(row) != self.width for row in self._buffer):
            self._buffer = self._fitted(self._buffer, self.width, self.height)

    @staticmethod
    def _blank(width: int, height: int) -> list[list[Cell]]:
        return [[DEFAULT_CELL] * width for _ in range(height)]

    @classmethod
    def _fitted(cls, rows: list[list[Cell]], width: int, height: int) -> list[list[Cell]]:
        """Crop or pad rows to width x height with default cells."""
        buffer = cls._blank(width, height)
        for y, row in enumerate(rows[:height]):
            for x, cell in enumerate(row[:width]):
                buffer[y][x] = cell
        return buffer

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether (x, y) lies on the canvas."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Cell | None:
        """Get the cell at position (x, y), or None if out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self._buffer[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y). Out of bounds is a no-op."""
        if self.in_bounds(x, y):
            self._buffer[y][x] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell | None:
        """Get cell using indexing: canvas[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: canvas[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def resize(self, width: int, height: int) -> None:
        """
        Resize the canvas in place.

        The overlapping top-left region is preserved; newly exposed cells
        are default cells.
        """
        width = clamp_dimension(width)
        height = clamp_dimension(height)
        self._buffer = self._fitted(self._buffer, width, height)
        self.width = width
        self.height = height

    def clear(self) -> None:
        """Reset every cell to the default cell."""
        self._buffer = self._blank(self.width, self.height)

    def copy(self) -> Canvas:
        """Return an independent copy of this canvas."""
        return Canvas(self.width, self.height, [list(row) for row in self._buffer])

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield x, y, cell

    def last_content_row(self) -> int | None:
        """Index of the last row that displays anything, None if blank."""
        for y in range(self.height - 1, -1, -1):
            if any(not resolved(cell).is_empty() for cell in self._buffer[y]):
                return y
        return None
