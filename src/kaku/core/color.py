"""Color math: RGB/HSL conversion, hex parsing and palette quantization.

Colors are plain ``(r, g, b)`` tuples with 8 bits per channel. Palette
indices only appear as a quantization target for export, or as a legacy
input that is converted to RGB straight away.
"""

from __future__ import annotations

import colorsys
import math
import re
from enum import Enum

from kaku.core.constants import ANSI_16_RGB, COLOR_NAMES_16

Rgb = tuple[int, int, int]

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


class ColorFormatError(ValueError):
    """Raised when a color string cannot be parsed."""


class ColorMode(Enum):
    """Color mode for ANSI sequences."""
    STANDARD_16 = "16"      # Standard 16-color (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Extended 256-color (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit true color (SGR 38;2;r;g;b, 48;2;r;g;b)


def _round(value: float) -> int:
    """Round half away from zero (``round()`` rounds half to even)."""
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


# -----------------------------------------------------------------------------
# HSL
# -----------------------------------------------------------------------------

def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Convert RGB (0-255 each) to HSL.

    Returns:
        ``(h, s, l)`` with h in 0-359 and s, l in 0-100. Grays give h = s = 0.
    """
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    if max(r, g, b) == min(r, g, b):
        return (0, 0, min(100, _round(l * 100)))
    return (
        _round(h * 360) % 360,
        min(100, _round(s * 100)),
        min(100, _round(l * 100)),
    )


def hsl_to_rgb(h: float, s: float, l: float) -> Rgb:
    """Convert HSL (h: 0-360, s: 0-100, l: 0-100) to RGB."""
    h_norm = (h % 360) / 360
    s_norm = _clamp(s, 0, 100) / 100
    l_norm = _clamp(l, 0, 100) / 100
    r, g, b = colorsys.hls_to_rgb(h_norm, l_norm, s_norm)
    return (
        int(_clamp(_round(r * 255), 0, 255)),
        int(_clamp(_round(g * 255), 0, 255)),
        int(_clamp(_round(b * 255), 0, 255)),
    )


# -----------------------------------------------------------------------------
# Palettes
# -----------------------------------------------------------------------------

def _cube_level(step: int) -> int:
    return 0 if step == 0 else 55 + 40 * step


def color256_to_rgb(index: int) -> Rgb:
    """Convert an xterm 256-color index to RGB.

    Raises:
        ValueError: If index is not in 0-255
    """
    if not 0 <= index <= 255:
        raise ValueError(f"256-color index must be 0-255, got {index}")
    if index < 16:
        return ANSI_16_RGB[index]
    if index < 232:
        # 216-color cube (6x6x6)
        index -= 16
        r = index // 36
        g = (index % 36) // 6
        b = index % 6
        return (_cube_level(r), _cube_level(g), _cube_level(b))
    # Grayscale ramp (24 shades)
    gray = 8 + 10 * (index - 232)
    return (gray, gray, gray)


PALETTE_256: tuple[Rgb, ...] = tuple(color256_to_rgb(i) for i in range(256))


def _nearest(rgb: Rgb, palette: tuple[Rgb, ...]) -> int:
    best_index = 0
    best_distance = None
    for i, (pr, pg, pb) in enumerate(palette):
        distance = (rgb[0] - pr) ** 2 + (rgb[1] - pg) ** 2 + (rgb[2] - pb) ** 2
        # Strict comparison keeps the lowest index on ties
        if best_distance is None or distance < best_distance:
            best_distance = distance
            best_index = i
    return best_index


def nearest_256(rgb: Rgb) -> int:
    """Find the nearest xterm-256 palette index for an RGB color."""
    return _nearest(rgb, PALETTE_256)


def nearest_16(rgb: Rgb) -> int:
    """Find the nearest standard 16-color palette index for an RGB color."""
    return _nearest(rgb, ANSI_16_RGB)


def color_name(index: int) -> str:
    """Name for the 16 standard colors, ``#n`` for the rest."""
    if 0 <= index < 16:
        return COLOR_NAMES_16[index]
    return f"#{index}"


def color_from_legacy(value: int | str) -> Rgb:
    """Convert a legacy palette value (index or standard color name) to RGB.

    Older project files stored colors as 256-color indices, and before that
    as names of the 16 standard colors. Only used when reading input.

    Raises:
        ValueError: If the index is out of range or the name is unknown
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid legacy color: {value!r}")
    if isinstance(value, int):
        return color256_to_rgb(value)
    if value in COLOR_NAMES_16:
        return ANSI_16_RGB[COLOR_NAMES_16.index(value)]
    raise ValueError(f"Unknown color name: {value!r}")


# -----------------------------------------------------------------------------
# Hex
# -----------------------------------------------------------------------------

def parse_hex_color(text: str) -> Rgb | None:
    """Parse ``#RRGGBB`` or ``RRGGBB`` (case-insensitive).

    Returns:
        RGB tuple, or None if the string is not exactly six hex digits
        after an optional leading ``#``.
    """
    match = _HEX_PATTERN.fullmatch(text)
    if match is None:
        return None
    digits = match.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def require_hex_color(text: str) -> Rgb:
    """Like :func:`parse_hex_color` but raises on malformed input."""
    rgb = parse_hex_color(text)
    if rgb is None:
        raise ColorFormatError(f"Invalid hex color {text!r}, expected #RRGGBB")
    return rgb


def to_hex(rgb: Rgb) -> str:
    """Format as ``#RRGGBB``."""
    return f"#{rgb[0]:02X}{rgb[1]:02X}{rgb[2]:02X}"


# -----------------------------------------------------------------------------
# SGR
# -----------------------------------------------------------------------------

def sgr_fg(rgb: Rgb | None, mode: ColorMode) -> str:
    """Return SGR parameters selecting ``rgb`` as foreground (39 for None)."""
    if rgb is None:
        return "39"
    if mode == ColorMode.STANDARD_16:
        index = nearest_16(rgb)
        return str(30 + index) if index < 8 else str(90 + index - 8)
    if mode == ColorMode.EXTENDED_256:
        return f"38;5;{nearest_256(rgb)}"
    r, g, b = rgb
    return f"38;2;{r};{g};{b}"


def sgr_bg(rgb: Rgb | None, mode: ColorMode) -> str:
    """Return SGR parameters selecting ``rgb`` as background (49 for None)."""
    if rgb is None:
        return "49"
    if mode == ColorMode.STANDARD_16:
        index = nearest_16(rgb)
        return str(40 + index) if index < 8 else str(100 + index - 8)
    if mode == ColorMode.EXTENDED_256:
        return f"48;5;{nearest_256(rgb)}"
    r, g, b = rgb
    return f"48;2;{r};{g};{b}"
