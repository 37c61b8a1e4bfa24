"""
Puzzle (Data Model)
===================
This module defines the nonogram being solved: the clue lists along every
row and column, and the color the player has put into each cell.

Why is this file needed?
------------------------
1. State Management: The cell grid is the only mutable state of a running
   game. It lives here, behind a single mutation entry point (set_color).
2. Decoupling: Layout, rendering and widgets only get a PuzzleView, which
   can read everything but cannot write.

Classes:
    Clue: One "run length + color" constraint.
    Cell: One grid cell.
    Puzzle: Clues + cell grid (the owning object).
    PuzzleView: Read-only facade over a Puzzle.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from nonogram.config import DEFAULT_CLUE_COLOR

logger = logging.getLogger(__name__)

Color = str
Position = tuple[int, int]
ClueLine = tuple["Clue", ...]


@dataclass(frozen=True)
class Clue:
    """`count` consecutive cells of `color` appear somewhere in the line."""
    count: int
    color: Color = DEFAULT_CLUE_COLOR


@dataclass
class Cell:
    """A grid cell. `None` means unfilled."""
    color: Optional[Color] = None


def _freeze_lines(lines: Iterable[Iterable[Clue]]) -> tuple[ClueLine, ...]:
    return tuple(tuple(line) for line in lines)


class Puzzle:
    """
    Owns the clues and the cell grid.

    Dimensions are fixed at construction: `rows` is the number of row clue
    lines and `columns` the number of column clue lines. Pass the object
    itself only to whoever applies selections; hand `view()` to everyone else.
    """

    def __init__(
        self,
        row_clues: Iterable[Iterable[Clue]],
        column_clues: Iterable[Iterable[Clue]],
    ) -> None:
        self._row_clues = _freeze_lines(row_clues)
        self._column_clues = _freeze_lines(column_clues)
        self._state: list[list[Cell]] = [
            [Cell() for _ in range(len(self._column_clues))] for _ in range(len(self._row_clues))
        ]
        self._view = PuzzleView(self)

    def __repr__(self) -> str:
        return f"Puzzle(rows={self.rows}, columns={self.columns})"

    # ---- clues & dimensions ----

    @property
    def row_clues(self) -> tuple[ClueLine, ...]:
        return self._row_clues

    @property
    def column_clues(self) -> tuple[ClueLine, ...]:
        return self._column_clues

    @property
    def rows(self) -> int:
        return len(self._row_clues)

    @property
    def columns(self) -> int:
        return len(self._column_clues)

    @property
    def max_row_clues(self) -> int:
        return max((len(line) for line in self._row_clues), default=0)

    @property
    def max_column_clues(self) -> int:
        return max((len(line) for line in self._column_clues), default=0)

    # ---- cell state ----

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def color_at(self, row: int, column: int) -> Optional[Color]:
        if not self.in_bounds(row, column):
            raise IndexError(f"Cell ({row}, {column}) is outside a {self.rows}x{self.columns} puzzle.")
        return self._state[row][column].color

    def snapshot(self) -> tuple[tuple[Optional[Color], ...], ...]:
        """Current colors as an immutable row-major grid."""
        return tuple(tuple(cell.color for cell in row) for row in self._state)

    def set_color(self, row: int, column: int, color: Optional[Color]) -> bool:
        """
        The only way to change a cell.

        Out-of-range positions are ignored (pointer coordinates routinely land
        outside the grid), as is re-applying the color a cell already has.

        Returns:
            True if the cell changed.
        """
        if not self.in_bounds(row, column):
            return False
        cell = self._state[row][column]
        if cell.color == color:
            return False
        cell.color = color
        logger.debug(f"Cell ({row}, {column}) -> {color}")
        return True

    # ---- palette ----

    def colors(self) -> list[Color]:
        """Distinct clue colors, first seen across columns, then rows."""
        seen: dict[Color, None] = {}
        for lines in (self._column_clues, self._row_clues):
            for line in lines:
                for clue in line:
                    seen.setdefault(clue.color, None)
        return list(seen)

    def palette(self) -> list[Optional[Color]]:
        """Choices for the color picker; the leading None is the eraser."""
        return [None, *self.colors()]

    def view(self) -> PuzzleView:
        return self._view


class PuzzleView:
    """
    Read-only access to a Puzzle.

    Everything that draws or measures the puzzle gets one of these, so
    nothing but the owner can reach `set_color`.
    """
    __slots__ = ("_puzzle",)

    def __init__(self, puzzle: Puzzle) -> None:
        self._puzzle = puzzle

    def __repr__(self) -> str:
        return f"PuzzleView(rows={self.rows}, columns={self.columns})"

    @property
    def row_clues(self) -> tuple[ClueLine, ...]:
        return self._puzzle.row_clues

    @property
    def column_clues(self) -> tuple[ClueLine, ...]:
        return self._puzzle.column_clues

    @property
    def rows(self) -> int:
        return self._puzzle.rows

    @property
    def columns(self) -> int:
        return self._puzzle.columns

    @property
    def max_row_clues(self) -> int:
        return self._puzzle.max_row_clues

    @property
    def max_column_clues(self) -> int:
        return self._puzzle.max_column_clues

    def in_bounds(self, row: int, column: int) -> bool:
        return self._puzzle.in_bounds(row, column)

    def color_at(self, row: int, column: int) -> Optional[Color]:
        return self._puzzle.color_at(row, column)

    def snapshot(self) -> tuple[tuple[Optional[Color], ...], ...]:
        return self._puzzle.snapshot()

    def colors(self) -> list[Color]:
        return self._puzzle.colors()

    def palette(self) -> list[Optional[Color]]:
        return self._puzzle.palette()


def empty_puzzle() -> Puzzle:
    """A 0x0 puzzle, used before anything has been loaded."""
    return Puzzle([], [])


def line_lengths(lines: Sequence[ClueLine]) -> tuple[int, ...]:
    return tuple(len(line) for line in lines)
