"""Render a canvas to terminal-compatible escape sequences."""

from kaku.core.canvas import Canvas
from kaku.core.cell import resolved
from kaku.core.color import ColorMode, sgr_bg, sgr_fg
from kaku.core.constants import CSI, RESET


class TerminalRenderer:
    """
    Render a Canvas to ANSI escape sequences for terminal display.

    Half blocks are resolved before output, so a half with a transparent
    color shows the terminal background. Colors are quantized according
    to ``color_mode``. Only emits SGR codes when colors change, and ends
    every line with a reset so colors never bleed into the next line.
    """

    def __init__(self, color_mode: ColorMode = ColorMode.TRUE_COLOR, double_width: bool = True):
        self.color_mode = color_mode
        self.double_width = double_width

    def render(self, canvas: Canvas) -> str:
        """Render canvas rows up to the last one with content."""
        last_row = canvas.last_content_row()
        if last_row is None:
            return ""

        repeat = 2 if self.double_width else 1
        lines: list[str] = []

        for row in list(canvas.rows())[:last_row + 1]:
            line_parts: list[str] = []
            last_fg = None
            last_bg = None

            for cell in row:
                cell = resolved(cell)
                sgr_parts: list[str] = []

                if not cell.is_empty():
                    fg = sgr_fg(cell.fg, self.color_mode)
                    if fg != last_fg:
                        sgr_parts.append(fg)
                        last_fg = fg

                bg = sgr_bg(cell.bg, self.color_mode)
                if bg != last_bg:
                    sgr_parts.append(bg)
                    last_bg = bg

                if sgr_parts:
                    line_parts.append(f"{CSI}{';'.join(sgr_parts)}m")
                line_parts.append(cell.char * repeat)

            line_parts.append(RESET)
            lines.append(''.join(line_parts))

        return '\n'.join(lines)
