"""Renderers for exporting canvases as text."""

from kaku.render.terminal import TerminalRenderer
from kaku.render.text import TextRenderer

__all__ = ["TerminalRenderer", "TextRenderer"]
