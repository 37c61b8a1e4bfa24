from __future__ import annotations

import logging

from PySide6.QtCore import QEvent, QPointF, QSize, Qt
from PySide6.QtGui import QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from nonogram.app.state import Store
from nonogram.app.ui.painter_surface import PainterSurface
from nonogram.model.interaction import MIDDLE_BUTTON, PRIMARY_BUTTON, SECONDARY_BUTTON
from nonogram.model.render import render_frame

logger = logging.getLogger(__name__)

_BUTTON_BITS = (
    (Qt.MouseButton.LeftButton, PRIMARY_BUTTON),
    (Qt.MouseButton.RightButton, SECONDARY_BUTTON),
    (Qt.MouseButton.MiddleButton, MIDDLE_BUTTON),
)


def button_mask(buttons: Qt.MouseButton) -> int:
    """Qt button flags -> controller button bits."""
    mask = 0
    for qt_button, bit in _BUTTON_BITS:
        if buttons & qt_button:
            mask |= bit
    return mask


class GridWidget(QWidget):
    """
    Canvas for the puzzle grid:
      - square drawable box, centered in the widget,
      - reports its box to the store on every resize,
      - forwards mouse move/press/leave to the interaction controller,
      - repaints on the store's redraw and geometry signals.
    """
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self.store = store

        self.setMouseTracking(True)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(120, 120)

        self.store.redraw_requested.connect(self.update)
        self.store.geometry_changed.connect(lambda *_: self.update())

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def sizeHint(self) -> QSize:
        return QSize(640, 640)

    def box_side(self) -> int:
        """Side of the square drawable box."""
        return max(0, min(self.width(), self.height()))

    def box_origin(self) -> QPointF:
        """Top-left corner of the drawable box in widget coordinates."""
        side = self.box_side()
        return QPointF((self.width() - side) / 2, (self.height() - side) / 2)

    def to_box(self, pos: QPointF) -> tuple[float, float] | None:
        """Widget position -> drawable box position, None outside the box."""
        origin = self.box_origin()
        x, y = pos.x() - origin.x(), pos.y() - origin.y()
        side = self.box_side()
        if 0 <= x < side and 0 <= y < side:
            return x, y
        return None

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        side = self.box_side()
        self.store.set_container_box(side, side)

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            painter.translate(self.box_origin())
            render_frame(
                PainterSurface(painter),
                self.store.puzzle,
                self.store.geometry,
                self.store.hover_cell,
            )
        finally:
            painter.end()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        point = self.to_box(event.position())
        if point is None:
            self.store.interaction.pointer_leave()
        else:
            self.store.interaction.pointer_move(*point, buttons=button_mask(event.buttons()))
        event.accept()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        point = self.to_box(event.position())
        if point is not None:
            self.store.interaction.pointer_down(*point, button=button_mask(event.button()))
        event.accept()

    def leaveEvent(self, event: QEvent) -> None:
        self.store.interaction.pointer_leave()
        super().leaveEvent(event)
