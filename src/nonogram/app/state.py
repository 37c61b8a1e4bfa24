from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from nonogram.model.interaction import InteractionController
from nonogram.model.layout import GridGeometry, geometry_for
from nonogram.model.puzzle import Color, Position, Puzzle, PuzzleView, empty_puzzle

logger = logging.getLogger(__name__)


class Store(QObject):
    """
    Central game state with signals for widget sync.

    Owns the Puzzle (the only writer of cell colors), the drawable box, the
    currently chosen color and the interaction controller. Two kinds of
    change are kept apart:

    - geometry_changed: box size or puzzle changed, layout was recomputed.
    - redraw_requested: a cell color or the hover cell changed; the layout
      is still valid, only a repaint is needed.
    """
    puzzle_changed = Signal(object)          # PuzzleView
    geometry_changed = Signal(object)        # GridGeometry
    redraw_requested = Signal()
    selected_color_changed = Signal(object)  # Color | None

    def __init__(self, puzzle: Optional[Puzzle] = None) -> None:
        super().__init__()
        self._puzzle = puzzle if puzzle is not None else empty_puzzle()
        self._box: tuple[float, float] = (0.0, 0.0)
        self._selected_color: Optional[Color] = None
        self._geometry = geometry_for(self._puzzle.view(), *self._box)

        self.interaction = InteractionController(self._geometry)
        self.interaction.add_select_handler(self.apply_selected_color)
        self.interaction.add_hover_handler(self._on_hover_changed)

    # ---- read-only state ----

    @property
    def puzzle(self) -> PuzzleView:
        return self._puzzle.view()

    @property
    def geometry(self) -> GridGeometry:
        return self._geometry

    @property
    def container_box(self) -> tuple[float, float]:
        return self._box

    @property
    def selected_color(self) -> Optional[Color]:
        return self._selected_color

    @property
    def hover_cell(self) -> Optional[Position]:
        return self.interaction.hover_cell

    def palette(self) -> list[Optional[Color]]:
        return self._puzzle.palette()

    # ---- geometry-affecting changes ----

    def set_puzzle(self, puzzle: Puzzle) -> None:
        self._puzzle = puzzle
        self.interaction.reset()
        logger.info(f"Puzzle set: {puzzle.rows}x{puzzle.columns}")
        self.puzzle_changed.emit(self.puzzle)
        self._recompute_geometry()

    def set_container_box(self, height: float, width: float) -> None:
        box = (float(height), float(width))
        if box == self._box:
            return
        self._box = box
        self._recompute_geometry()

    # ---- redraw-only changes ----

    def set_selected_color(self, color: Optional[Color]) -> None:
        if color == self._selected_color:
            return
        self._selected_color = color
        logger.debug(f"Selected color: {color}")
        self.selected_color_changed.emit(color)

    def apply_selected_color(self, row: int, column: int) -> None:
        """Cell-select handler: paint the cell with the chosen color."""
        if self._puzzle.set_color(row, column, self._selected_color):
            self.redraw_requested.emit()

    def clear_grid(self) -> None:
        """Reset every cell to unfilled."""
        changed = False
        for row in range(self._puzzle.rows):
            for column in range(self._puzzle.columns):
                changed |= self._puzzle.set_color(row, column, None)
        if changed:
            logger.info("Grid cleared.")
            self.redraw_requested.emit()

    # ---- internals ----

    def _recompute_geometry(self) -> None:
        height, width = self._box
        self._geometry = geometry_for(self._puzzle.view(), height, width)
        self.interaction.set_geometry(self._geometry)
        logger.debug(f"Geometry recomputed: box={self._box}, cell_size={self._geometry.cell_size:.2f}")
        self.geometry_changed.emit(self._geometry)

    def _on_hover_changed(self, _cell: Optional[Position]) -> None:
        self.redraw_requested.emit()
