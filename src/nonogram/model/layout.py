"""
Grid Layout
===========
Maps the drawable box onto pixel regions for the clue bands, the cells and
the separator lines, and maps pointer positions back onto cells.

    +-----------------------------------------+
    | padding                                 |
    |        +---------------------------+    |
    |        |  column clue band          |    |
    |  row   +---------------------------+    |
    |  clue  |                           |    |
    |  band  |          cells            |    |
    |        |                           |    |
    +-----------------------------------------+

Every clue takes half a cell along its band, so with `n` clues the band is
`n * cell_size / 2` deep. One cell size has to satisfy both axes at once:

    H = 2 * padding + (rows    + max_column_clues / 2) * cell_size
    W = 2 * padding + (columns + max_row_clues    / 2) * cell_size

Taking the smaller of the two candidates keeps both axes inside the box;
the other axis may be under-filled.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from nonogram.config import PADDING, SEPARATOR_INTERVAL
from nonogram.model.puzzle import Position, PuzzleView, line_lengths

Point = tuple[float, float]
Rect = tuple[float, float, float, float]  # x, y, w, h
Segment = tuple[Point, Point]


def compute_cell_size(
    height: float,
    width: float,
    rows: int,
    columns: int,
    max_row_clues: int,
    max_column_clues: int,
    padding: float = PADDING,
) -> float:
    """
    Largest cell size for which the clue bands and the grid fit the box.

    Returns 0.0 for an empty puzzle or a box too small to hold anything.
    """
    if rows <= 0 or columns <= 0:
        return 0.0
    # Height holds the rows plus the column clue band above them, width the
    # columns plus the row clue band beside them. Pairing rows with
    # max_row_clues instead would not fit the bands that are drawn.
    size = min(
        (height - 2 * padding) / (rows + max_column_clues / 2),
        (width - 2 * padding) / (columns + max_row_clues / 2),
    )
    return max(size, 0.0)


@dataclass(frozen=True)
class GridGeometry:
    """
    Pixel geometry of one puzzle in one drawable box.

    Pure value: recompute it whenever the box or the puzzle changes, never
    when only cell colors change.
    """
    height: float
    width: float
    row_clue_lengths: tuple[int, ...]
    column_clue_lengths: tuple[int, ...]
    cell_size: float
    padding: float = PADDING

    # ---- counts ----

    @property
    def rows(self) -> int:
        return len(self.row_clue_lengths)

    @property
    def columns(self) -> int:
        return len(self.column_clue_lengths)

    @property
    def max_row_clues(self) -> int:
        return max(self.row_clue_lengths, default=0)

    @property
    def max_column_clues(self) -> int:
        return max(self.column_clue_lengths, default=0)

    @property
    def is_degenerate(self) -> bool:
        """Nothing to draw: no rows, no columns, or no room."""
        return self.rows == 0 or self.columns == 0 or self.cell_size <= 0

    # ---- sizes ----

    @property
    def clue_size(self) -> float:
        return self.cell_size / 2

    @property
    def font_size(self) -> float:
        return self.clue_size

    @property
    def row_clues_band(self) -> float:
        """Width of the band left of the grid."""
        return self.clue_size * self.max_row_clues

    @property
    def column_clues_band(self) -> float:
        """Height of the band above the grid."""
        return self.clue_size * self.max_column_clues

    @property
    def grid_left(self) -> float:
        return self.padding + self.row_clues_band

    @property
    def grid_top(self) -> float:
        return self.padding + self.column_clues_band

    @property
    def grid_right(self) -> float:
        return self.grid_left + self.columns * self.cell_size

    @property
    def grid_bottom(self) -> float:
        return self.grid_top + self.rows * self.cell_size

    # ---- forward mapping ----

    def cell_top_left(self, row: int, column: int) -> Point:
        return (
            self.grid_left + column * self.cell_size,
            self.grid_top + row * self.cell_size,
        )

    def column_clue_position(self, column: int, n: int) -> Point:
        """Center of the n-th clue glyph of a column; the last clue sits next to the grid."""
        offset = self.max_column_clues - self.column_clue_lengths[column]
        return (
            self.grid_left + (column + 0.5) * self.cell_size,
            self.padding + (offset + n + 0.5) * self.clue_size,
        )

    def row_clue_position(self, row: int, n: int) -> Point:
        """Center of the n-th clue glyph of a row; the last clue sits next to the grid."""
        offset = self.max_row_clues - self.row_clue_lengths[row]
        return (
            self.padding + (offset + n + 0.5) * self.clue_size,
            self.grid_top + (row + 0.5) * self.cell_size,
        )

    def row_highlight_rect(self, row: int) -> Rect:
        """The row's strip across the row clue band."""
        return self.padding, self.grid_top + row * self.cell_size, self.row_clues_band, self.cell_size

    def column_highlight_rect(self, column: int) -> Rect:
        """The column's strip across the column clue band."""
        return self.grid_left + column * self.cell_size, self.padding, self.cell_size, self.column_clues_band

    def separator_lines(self, interval: int = SEPARATOR_INTERVAL) -> list[Segment]:
        """
        Heavy lines on every `interval`-th column and row boundary.

        Vertical lines run from the top padding edge to the bottom of the
        grid, horizontal ones from the left padding edge to its right side.
        """
        if self.is_degenerate:
            return []
        segments: list[Segment] = []
        for j in np.arange(0, self.columns + 1, interval):
            x = self.grid_left + int(j) * self.cell_size
            segments.append(((x, self.padding), (x, self.grid_bottom)))
        for i in np.arange(0, self.rows + 1, interval):
            y = self.grid_top + int(i) * self.cell_size
            segments.append(((self.padding, y), (self.grid_right, y)))
        return segments

    # ---- inverse mapping ----

    def cell_at(self, x: float, y: float) -> Optional[Position]:
        """
        Cell under a point, or None outside the playable area.

        Inverse of cell_top_left: every point of the half-open square
        [left, left + cell_size) x [top, top + cell_size) maps to its cell.
        """
        if self.is_degenerate:
            return None
        row = self._axis_index(y, self.grid_top)
        column = self._axis_index(x, self.grid_left)
        if 0 <= row < self.rows and 0 <= column < self.columns:
            return row, column
        return None

    def _axis_index(self, value: float, origin: float) -> int:
        index = math.floor((value - origin) / self.cell_size)
        # snap to the forward mapping so float rounding cannot move a boundary
        if origin + index * self.cell_size > value:
            index -= 1
        elif origin + (index + 1) * self.cell_size <= value:
            index += 1
        return index


def compute_geometry(
    height: float,
    width: float,
    row_clue_lengths: Sequence[int],
    column_clue_lengths: Sequence[int],
    padding: float = PADDING,
) -> GridGeometry:
    row_clue_lengths = tuple(row_clue_lengths)
    column_clue_lengths = tuple(column_clue_lengths)
    cell_size = compute_cell_size(
        height,
        width,
        rows=len(row_clue_lengths),
        columns=len(column_clue_lengths),
        max_row_clues=max(row_clue_lengths, default=0),
        max_column_clues=max(column_clue_lengths, default=0),
        padding=padding,
    )
    return GridGeometry(
        height=height,
        width=width,
        row_clue_lengths=row_clue_lengths,
        column_clue_lengths=column_clue_lengths,
        cell_size=cell_size,
        padding=padding,
    )


def geometry_for(view: PuzzleView, height: float, width: float, padding: float = PADDING) -> GridGeometry:
    """Geometry of a puzzle in a box; depends on clue counts only, never on colors."""
    return compute_geometry(
        height,
        width,
        line_lengths(view.row_clues),
        line_lengths(view.column_clues),
        padding=padding,
    )
