"""Mirror edits across the vertical and horizontal center lines."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from kaku.edit.history import CellMutation


class SymmetryMode(Enum):
    """Active mirror axes.

    HORIZONTAL mirrors left/right (x), VERTICAL mirrors top/bottom (y),
    QUAD does both.
    """
    OFF = "Off"
    HORIZONTAL = "Horizontal"
    VERTICAL = "Vertical"
    QUAD = "Quad"

    def toggle_horizontal(self) -> SymmetryMode:
        return _combine(not self.has_horizontal(), self.has_vertical())

    def toggle_vertical(self) -> SymmetryMode:
        return _combine(self.has_horizontal(), not self.has_vertical())

    def has_horizontal(self) -> bool:
        return self in (SymmetryMode.HORIZONTAL, SymmetryMode.QUAD)

    def has_vertical(self) -> bool:
        return self in (SymmetryMode.VERTICAL, SymmetryMode.QUAD)

    @property
    def label(self) -> str:
        """Short label for status displays."""
        return _LABELS[self]


_LABELS = {
    SymmetryMode.OFF: "Off",
    SymmetryMode.HORIZONTAL: "Horiz",
    SymmetryMode.VERTICAL: "Vert",
    SymmetryMode.QUAD: "Quad",
}


def _combine(horizontal: bool, vertical: bool) -> SymmetryMode:
    if horizontal and vertical:
        return SymmetryMode.QUAD
    if horizontal:
        return SymmetryMode.HORIZONTAL
    if vertical:
        return SymmetryMode.VERTICAL
    return SymmetryMode.OFF


def apply_symmetry(
    mutations: list[CellMutation],
    mode: SymmetryMode,
    width: int,
    height: int,
) -> list[CellMutation]:
    """
    Expand mutations with their mirrored copies.

    For each mutation the output holds, in order: the original, the
    horizontal mirror, the vertical mirror and the diagonal mirror. A
    mirror that lands on the original coordinate is skipped, and the
    diagonal copy is only added when both coordinates move.

    Mirrored copies keep the original's ``old`` cell, which is stale
    for the mirrored position. Callers must re-read the canvas before
    applying them.
    """
    if mode == SymmetryMode.OFF:
        return list(mutations)

    result: list[CellMutation] = []
    for mutation in mutations:
        result.append(mutation)
        mx = width - 1 - mutation.x
        my = height - 1 - mutation.y

        if mode.has_horizontal() and mx != mutation.x:
            result.append(replace(mutation, x=mx))
        if mode.has_vertical() and my != mutation.y:
            result.append(replace(mutation, y=my))
        if mode == SymmetryMode.QUAD and mx != mutation.x and my != mutation.y:
            result.append(replace(mutation, x=mx, y=my))
    return result
