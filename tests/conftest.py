import os
from pathlib import Path

import pytest

from nonogram.model.parser import parse_puzzle

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

PUZZLES_DIR = Path(__file__).resolve().parent.parent / "assets" / "puzzles"

EXAMPLE_XML = """
<puzzle>
  <clues type="rows">
    <line><count color="red">2</count></line>
    <line><count>1</count><count color="blue">1</count></line>
  </clues>
  <clues type="columns">
    <line><count>1</count></line>
    <line><count color="red">1</count></line>
  </clues>
</puzzle>
"""


class RecordingSurface:
    """Surface fake that remembers every draw call in order."""

    def __init__(self):
        self.calls = []

    def clear(self, width, height):
        self.calls.append(("clear", width, height))

    def fill_rect(self, x, y, w, h, color):
        self.calls.append(("fill_rect", x, y, w, h, color))

    def stroke_rect(self, x, y, w, h, color, line_width):
        self.calls.append(("stroke_rect", x, y, w, h, color, line_width))

    def line(self, x0, y0, x1, y1, color, line_width):
        self.calls.append(("line", x0, y0, x1, y1, color, line_width))

    def text(self, x, y, text, color, font_size):
        self.calls.append(("text", x, y, text, color, font_size))

    def kinds(self):
        return [c[0] for c in self.calls]

    def of_kind(self, kind):
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def example_xml():
    return EXAMPLE_XML


@pytest.fixture
def example_puzzle():
    return parse_puzzle(EXAMPLE_XML)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
