"""
Frame Rendering
===============
The draw sequence for one frame, issued against an abstract 2D Surface so
the same code paints a QWidget, a QPixmap or a recording fake in the tests.

Order (later calls sit on top):
    1. clear
    2. hover crosshair in the clue bands
    3. column clues
    4. per row: row clues, then the cells
    5. heavy separators
    6. hover cell outline
"""
from __future__ import annotations

from typing import Optional, Protocol

from nonogram.config import (
    CELL_OUTLINE_COLOR,
    CELL_OUTLINE_WIDTH,
    EMPTY_CELL_FILL,
    HOVER_BAND_COLOR,
    HOVER_OUTLINE_COLOR,
    HOVER_OUTLINE_WIDTH,
    SEPARATOR_COLOR,
    SEPARATOR_WIDTH,
)
from nonogram.model.layout import GridGeometry
from nonogram.model.puzzle import Color, Position, PuzzleView


class Surface(Protocol):
    """Minimal 2D drawing API. Coordinates are pixels from the top-left."""

    def clear(self, width: float, height: float) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Color) -> None: ...

    def stroke_rect(self, x: float, y: float, w: float, h: float, color: Color, line_width: float) -> None: ...

    def line(self, x0: float, y0: float, x1: float, y1: float, color: Color, line_width: float) -> None: ...

    def text(self, x: float, y: float, text: str, color: Color, font_size: float) -> None:
        """Draw `text` centered on (x, y)."""
        ...


def draw_cell(surface: Surface, color: Optional[Color], x: float, y: float, size: float) -> None:
    """A filled, outlined square; an unfilled cell gets a diagonal cross."""
    surface.fill_rect(x, y, size, size, color if color is not None else EMPTY_CELL_FILL)
    surface.stroke_rect(x, y, size, size, CELL_OUTLINE_COLOR, CELL_OUTLINE_WIDTH)
    if color is None:
        lo, hi = 0.25 * size, 0.75 * size
        surface.line(x + lo, y + lo, x + hi, y + hi, CELL_OUTLINE_COLOR, CELL_OUTLINE_WIDTH)
        surface.line(x + lo, y + hi, x + hi, y + lo, CELL_OUTLINE_COLOR, CELL_OUTLINE_WIDTH)


def render_frame(
    surface: Surface,
    view: PuzzleView,
    geometry: GridGeometry,
    hover_cell: Optional[Position] = None,
) -> None:
    if geometry.height <= 0 or geometry.width <= 0:
        return
    surface.clear(geometry.width, geometry.height)
    if geometry.is_degenerate:
        return

    if hover_cell is not None:
        row, column = hover_cell
        surface.fill_rect(*geometry.row_highlight_rect(row), HOVER_BAND_COLOR)
        surface.fill_rect(*geometry.column_highlight_rect(column), HOVER_BAND_COLOR)

    font_size = geometry.font_size
    for j, line in enumerate(view.column_clues):
        for n, clue in enumerate(line):
            x, y = geometry.column_clue_position(j, n)
            surface.text(x, y, str(clue.count), clue.color, font_size)

    for i, line in enumerate(view.row_clues):
        for n, clue in enumerate(line):
            x, y = geometry.row_clue_position(i, n)
            surface.text(x, y, str(clue.count), clue.color, font_size)
        for j in range(view.columns):
            x, y = geometry.cell_top_left(i, j)
            draw_cell(surface, view.color_at(i, j), x, y, geometry.cell_size)

    for (x0, y0), (x1, y1) in geometry.separator_lines():
        surface.line(x0, y0, x1, y1, SEPARATOR_COLOR, SEPARATOR_WIDTH)

    if hover_cell is not None:
        x, y = geometry.cell_top_left(*hover_cell)
        surface.stroke_rect(x, y, geometry.cell_size, geometry.cell_size, HOVER_OUTLINE_COLOR, HOVER_OUTLINE_WIDTH)
