"""Shared fixtures for the test suite."""

import logging
from pathlib import Path

import pytest

from kaku.core.canvas import Canvas
from kaku.core.constants import FULL
from kaku.edit.document import EditSession

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def canvas() -> Canvas:
    """A blank default-size (32x32) canvas."""
    return Canvas()


@pytest.fixture
def small_canvas() -> Canvas:
    """A blank canvas at the minimum size (8x8)."""
    return Canvas(8, 8)


@pytest.fixture
def session() -> EditSession:
    """A session on a blank 32x32 canvas, painting full red blocks."""
    session = EditSession.new(32, 32)
    session.set_color(RED)
    session.set_glyph(FULL)
    return session


@pytest.fixture
def project_path(tmp_path: Path) -> Path:
    """Path for a project file that does not exist yet."""
    return tmp_path / "art.kaku"


@pytest.fixture(autouse=True)
def reset_kaku_logger():
    """Drop handlers installed by setup_logging (CLI runs bind closed streams)."""
    yield
    logger = logging.getLogger("kaku")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
