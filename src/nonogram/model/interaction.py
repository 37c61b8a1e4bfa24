"""
Pointer Interaction
===================
Turns pointer events on the drawing surface into hover feedback and
cell-select events.

States:
    hover_cell is None       pointer outside the surface, or over the clue
                             bands / padding
    hover_cell is (r, c)     pointer over a cell

Transitions:
    pointer_move   -> hover_cell = cell_at(x, y); with the primary button
                      held this also selects that cell (drag to paint)
    pointer_down   -> selects the cell under the pointer (primary button only)
    pointer_leave  -> hover_cell = None

Selecting is stateless: every click or drag step is reported on its own and
the owner decides what color to apply.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from nonogram.model.layout import GridGeometry
from nonogram.model.puzzle import Position

logger = logging.getLogger(__name__)

# Button bits, matching the DOM/Qt convention of bit 0 = primary.
PRIMARY_BUTTON = 0x1
SECONDARY_BUTTON = 0x2
MIDDLE_BUTTON = 0x4

SelectHandler = Callable[[int, int], None]
HoverHandler = Callable[[Optional[Position]], None]


class InteractionController:
    """Hover/selection tracker for one grid."""

    def __init__(self, geometry: GridGeometry) -> None:
        self._geometry = geometry
        self._hover_cell: Optional[Position] = None
        self._select_handlers: list[SelectHandler] = []
        self._hover_handlers: list[HoverHandler] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def hover_cell(self) -> Optional[Position]:
        return self._hover_cell

    @property
    def geometry(self) -> GridGeometry:
        return self._geometry

    def set_geometry(self, geometry: GridGeometry) -> None:
        """Use new geometry; a hover cell the new grid no longer has is dropped."""
        self._geometry = geometry
        if self._hover_cell is not None:
            row, column = self._hover_cell
            if geometry.is_degenerate or not (0 <= row < geometry.rows and 0 <= column < geometry.columns):
                self._set_hover(None)

    def add_select_handler(self, handler: SelectHandler) -> None:
        self._select_handlers.append(handler)

    def remove_select_handler(self, handler: SelectHandler) -> None:
        self._select_handlers.remove(handler)

    def add_hover_handler(self, handler: HoverHandler) -> None:
        self._hover_handlers.append(handler)

    def remove_hover_handler(self, handler: HoverHandler) -> None:
        self._hover_handlers.remove(handler)

    # ---- pointer events ----

    def pointer_move(self, x: float, y: float, buttons: int = 0) -> None:
        """
        Pointer moved inside the surface.

        Args:
            x, y: Position relative to the surface's top-left corner.
            buttons: Bit mask of the buttons currently held.
        """
        cell = self._geometry.cell_at(x, y)
        if cell is not None and buttons & PRIMARY_BUTTON:
            self._emit_select(cell)
        self._set_hover(cell)

    def pointer_down(self, x: float, y: float, button: int = PRIMARY_BUTTON) -> None:
        """A button was pressed; `button` is the bit of the pressed button."""
        if not button & PRIMARY_BUTTON:
            return
        cell = self._geometry.cell_at(x, y)
        if cell is not None:
            self._emit_select(cell)

    def pointer_leave(self) -> None:
        self._set_hover(None)

    def reset(self) -> None:
        """Forget the hover cell, e.g. after a different puzzle was loaded."""
        self._set_hover(None)

    # ------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------

    def _set_hover(self, cell: Optional[Position]) -> None:
        if cell == self._hover_cell:
            return
        self._hover_cell = cell
        for handler in list(self._hover_handlers):
            handler(cell)

    def _emit_select(self, cell: Position) -> None:
        row, column = cell
        logger.debug(f"Cell selected: ({row}, {column})")
        for handler in list(self._select_handlers):
            handler(row, column)
