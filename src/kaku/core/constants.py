"""Shared constants for the cell model and ANSI output."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# Empty cell glyph
EMPTY = " "

# Block drawing characters
FULL = "\u2588"         # █
UPPER_HALF = "\u2580"   # ▀  FG = top half, BG = bottom half
LOWER_HALF = "\u2584"   # ▄  FG = bottom half, BG = top half
LEFT_HALF = "\u258C"    # ▌  FG = left half, BG = right half
RIGHT_HALF = "\u2590"   # ▐  FG = right half, BG = left half

SHADE_LIGHT = "\u2591"  # ░
SHADE_MEDIUM = "\u2592" # ▒
SHADE_DARK = "\u2593"   # ▓

# Lower N/8 blocks (the 4/8 block is LOWER_HALF)
VERTICAL_FILLS: tuple[str, ...] = (
    "\u2581",  # ▁ 1/8
    "\u2582",  # ▂ 1/4
    "\u2583",  # ▃ 3/8
    "\u2585",  # ▅ 5/8
    "\u2586",  # ▆ 3/4
    "\u2587",  # ▇ 7/8
)

# Left N/8 blocks (the 4/8 block is LEFT_HALF)
HORIZONTAL_FILLS: tuple[str, ...] = (
    "\u2589",  # ▉ 7/8
    "\u258A",  # ▊ 3/4
    "\u258B",  # ▋ 5/8
    "\u258D",  # ▍ 3/8
    "\u258E",  # ▎ 1/4
    "\u258F",  # ▏ 1/8
)

SHADES: tuple[str, ...] = (SHADE_LIGHT, SHADE_MEDIUM, SHADE_DARK)

HALF_BLOCKS: tuple[str, ...] = (UPPER_HALF, LOWER_HALF, LEFT_HALF, RIGHT_HALF)

# Glyphs drawable with the pencil (everything except EMPTY)
DRAWABLE_GLYPHS: tuple[str, ...] = (
    (FULL,) + HALF_BLOCKS + SHADES + VERTICAL_FILLS + HORIZONTAL_FILLS
)

ALL_GLYPHS: tuple[str, ...] = (EMPTY,) + DRAWABLE_GLYPHS

# Names used by project files that store blocks by name
BLOCK_NAMES = {
    "Empty": EMPTY,
    "Full": FULL,
    "UpperHalf": UPPER_HALF,
    "LowerHalf": LOWER_HALF,
    "LeftHalf": LEFT_HALF,
    "RightHalf": RIGHT_HALF,
}

# Short names accepted on the command line
GLYPH_ALIASES = {
    "empty": EMPTY,
    "full": FULL,
    "upper": UPPER_HALF,
    "lower": LOWER_HALF,
    "left": LEFT_HALF,
    "right": RIGHT_HALF,
    "light": SHADE_LIGHT,
    "medium": SHADE_MEDIUM,
    "dark": SHADE_DARK,
}

# Standard 16 xterm colors (indices 0-15)
ANSI_16_RGB: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),        # 0  Black
    (205, 0, 0),      # 1  Red
    (0, 205, 0),      # 2  Green
    (205, 205, 0),    # 3  Yellow
    (0, 0, 238),      # 4  Blue
    (205, 0, 205),    # 5  Magenta
    (0, 205, 205),    # 6  Cyan
    (229, 229, 229),  # 7  White
    (127, 127, 127),  # 8  BrightBlack
    (255, 0, 0),      # 9  BrightRed
    (0, 255, 0),      # 10 BrightGreen
    (255, 255, 0),    # 11 BrightYellow
    (92, 92, 255),    # 12 BrightBlue
    (255, 0, 255),    # 13 BrightMagenta
    (0, 255, 255),    # 14 BrightCyan
    (255, 255, 255),  # 15 BrightWhite
)

COLOR_NAMES_16: tuple[str, ...] = (
    "Black", "Red", "Green", "Yellow",
    "Blue", "Magenta", "Cyan", "White",
    "BrightBlack", "BrightRed", "BrightGreen", "BrightYellow",
    "BrightBlue", "BrightMagenta", "BrightCyan", "BrightWhite",
)

DEFAULT_FG: tuple[int, int, int] = ANSI_16_RGB[7]
