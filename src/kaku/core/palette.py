"""Curated palette and hue grouping of the xterm 216-color cube."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from kaku.core.color import Rgb, color256_to_rgb

# 24 hand-picked xterm indices shown first in the palette
DEFAULT_PALETTE: tuple[int, ...] = (
    # Neutrals
    0, 236, 244, 250, 255, 15,
    # Warm
    1, 196, 208, 214, 226, 229,
    # Cool
    22, 46, 30, 39, 21, 54,
    # Accent
    200, 213, 93, 180, 137, 94,
)

CUBE_START = 16
CUBE_END = 231


@dataclass(slots=True)
class HueGroup:
    """A named run of 216-cube indices sharing a hue range."""
    name: str
    colors: list[int] = field(default_factory=list)


# (name, inclusive hue ranges)
_HUE_RANGES: tuple[tuple[str, tuple[tuple[int, int], ...]], ...] = (
    ("Reds", ((0, 14), (346, 359))),
    ("Oranges", ((15, 39),)),
    ("Yellows", ((40, 69),)),
    ("Greens", ((70, 159),)),
    ("Cyans", ((160, 199),)),
    ("Blues", ((200, 259),)),
    ("Purples", ((260, 299),)),
    ("Pinks", ((300, 345),)),
)


def hue_of(rgb: Rgb) -> int | None:
    """Hue angle in whole degrees (0-359, truncated), None for grays."""
    r, g, b = rgb
    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    if delta < 1:
        return None
    if high == r:
        hue = 60.0 * math.fmod((g - b) / delta, 6.0)
    elif high == g:
        hue = 60.0 * ((b - r) / delta + 2.0)
    else:
        hue = 60.0 * ((r - g) / delta + 4.0)
    if hue < 0:
        hue += 360.0
    return int(hue) % 360


def _group_name(hue: int) -> str:
    for name, ranges in _HUE_RANGES:
        if any(low <= hue <= high for low, high in ranges):
            return name
    raise ValueError(f"Hue out of range: {hue}")


def build_hue_groups() -> list[HueGroup]:
    """
    Sort the 216-color cube (indices 16-231) into 8 hue groups.

    Grays inside the cube have no hue and are appended to the Reds group,
    so every cube index lands in exactly one group.
    """
    groups = {name: HueGroup(name) for name, _ in _HUE_RANGES}
    grays: list[int] = []
    for index in range(CUBE_START, CUBE_END + 1):
        hue = hue_of(color256_to_rgb(index))
        if hue is None:
            grays.append(index)
        else:
            groups[_group_name(hue)].colors.append(index)
    groups["Reds"].colors.extend(grays)
    return list(groups.values())
