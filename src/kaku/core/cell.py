"""Cell - atomic unit of the pixel-art canvas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from kaku.core.color import Rgb
from kaku.core.constants import (
    DEFAULT_FG,
    EMPTY,
    FULL,
    LEFT_HALF,
    LOWER_HALF,
    RIGHT_HALF,
    UPPER_HALF,
)


@dataclass(frozen=True, slots=True)
class Cell:
    """
    A single character cell with optional colors.

    ``None`` for a color means transparent. Half-block glyphs use both
    colors: for ``UPPER_HALF`` fg is the top half and bg the bottom half,
    for ``LEFT_HALF`` fg is the left half and bg the right half. ``LOWER_HALF``
    and ``RIGHT_HALF`` store the halves the other way round.
    """
    char: str = EMPTY
    fg: Rgb | None = DEFAULT_FG
    bg: Rgb | None = None

    def is_empty(self) -> bool:
        """Check if this cell shows nothing (space glyph)."""
        return self.char == EMPTY

    def is_default(self) -> bool:
        """Check if this cell equals the default cell."""
        return self == DEFAULT_CELL


DEFAULT_CELL = Cell()


class ResolvedCell(NamedTuple):
    """Display form of a half-block cell."""
    char: str
    fg: Rgb | None
    bg: Rgb | None


# (canonical glyph, flipped glyph, stored with halves swapped)
_HALF_BLOCK_FORMS = {
    UPPER_HALF: (UPPER_HALF, LOWER_HALF, False),
    LOWER_HALF: (UPPER_HALF, LOWER_HALF, True),
    LEFT_HALF: (LEFT_HALF, RIGHT_HALF, False),
    RIGHT_HALF: (LEFT_HALF, RIGHT_HALF, True),
}


def resolve(cell: Cell) -> ResolvedCell | None:
    """
    Resolve a half-block cell to what should actually be drawn.

    Lower/right orientations are first normalized to the canonical
    upper/left form, so that the primary half is the top (or left) one.
    Then transparency decides the glyph:

    - both halves opaque: canonical glyph, fg = primary, bg = secondary
    - secondary transparent: canonical glyph, fg = primary, no bg
    - primary transparent: flipped glyph, fg = secondary, no bg
    - both transparent: empty cell

    Returns:
        ResolvedCell, or None if the glyph is not a half block
    """
    form = _HALF_BLOCK_FORMS.get(cell.char)
    if form is None:
        return None
    canonical, flipped, swapped = form
    if swapped:
        primary, secondary = cell.bg, cell.fg
    else:
        primary, secondary = cell.fg, cell.bg

    if primary is not None and secondary is not None:
        return ResolvedCell(canonical, primary, secondary)
    if primary is not None:
        return ResolvedCell(canonical, primary, None)
    if secondary is not None:
        return ResolvedCell(flipped, secondary, None)
    return ResolvedCell(EMPTY, None, None)


def resolved(cell: Cell) -> Cell:
    """Return the cell as it should be displayed."""
    result = resolve(cell)
    if result is None:
        return cell
    return Cell(result.char, result.fg, result.bg)


def compose(existing: Cell, char: str, fg: Rgb | None, bg: Rgb | None) -> Cell:
    """Compose a drawing operation onto an existing cell.

    Every glyph replaces the cell entirely. A half block stamped over
    another one does not blend with it, even on the same axis: drawing
    LOWER_HALF over UPPER_HALF gives LOWER_HALF, not FULL.
    """
    return Cell(char, fg, bg)


_GLYPH_CYCLE = {
    FULL: UPPER_HALF,
    UPPER_HALF: LOWER_HALF,
    LOWER_HALF: LEFT_HALF,
    LEFT_HALF: RIGHT_HALF,
    RIGHT_HALF: FULL,
}


def cycle_glyph(char: str) -> str:
    """Next glyph in the full/half-block brush cycle."""
    return _GLYPH_CYCLE.get(char, FULL)
