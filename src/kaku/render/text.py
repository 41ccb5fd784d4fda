"""Render a canvas to plain text (glyphs only)."""

from kaku.core.canvas import Canvas
from kaku.core.cell import resolved


class TextRenderer:
    """Render a Canvas to plain text without any styling.

    Each cell is written twice so pixels come out roughly square.
    """

    def __init__(self, double_width: bool = True):
        self.double_width = double_width

    def render(self, canvas: Canvas) -> str:
        """Render canvas to plain text."""
        last_row = canvas.last_content_row()
        if last_row is None:
            return ''

        repeat = 2 if self.double_width else 1
        lines: list[str] = []
        for row in list(canvas.rows())[:last_row + 1]:
            line = ''.join(resolved(cell).char * repeat for cell in row)
            lines.append(line.rstrip())

        return '\n'.join(lines)
