from __future__ import annotations

from typing import Optional, Sequence

from PySide6.QtCore import QSize, Qt, Signal
from PySide6.QtGui import QColor, QIcon, QPainter, QPixmap
from PySide6.QtWidgets import QButtonGroup, QHBoxLayout, QToolButton, QWidget

from nonogram.config import COLOR_TILE_SIZE
from nonogram.app.ui.painter_surface import PainterSurface
from nonogram.model.puzzle import Color
from nonogram.model.render import draw_cell


def tile_icon(color: Optional[Color], size: int = COLOR_TILE_SIZE) -> QIcon:
    """A swatch drawn like a grid cell, so the eraser shows the empty-cell cross."""
    pixmap = QPixmap(size, size)
    pixmap.fill(QColor(0, 0, 0, 0))
    painter = QPainter(pixmap)
    try:
        draw_cell(PainterSurface(painter), color, 0.5, 0.5, size - 1)
    finally:
        painter.end()
    return QIcon(pixmap)


class ColorPicker(QWidget):
    """Row of swatch buttons; exactly one is selected at a time."""
    color_selected = Signal(object)  # Color | None

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._colors: list[Optional[Color]] = []

        self._layout = QHBoxLayout(self)
        self._layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._layout.setSpacing(8)

        self._group = QButtonGroup(self)
        self._group.setExclusive(True)
        self._group.idClicked.connect(self._on_clicked)

    @property
    def colors(self) -> list[Optional[Color]]:
        return list(self._colors)

    def set_colors(self, colors: Sequence[Optional[Color]]) -> None:
        for button in self._group.buttons():
            self._group.removeButton(button)
            self._layout.removeWidget(button)
            button.deleteLater()

        self._colors = list(colors)
        for index, color in enumerate(self._colors):
            button = QToolButton(self)
            button.setCheckable(True)
            button.setAutoRaise(True)
            button.setIcon(tile_icon(color))
            button.setIconSize(QSize(COLOR_TILE_SIZE, COLOR_TILE_SIZE))
            button.setToolTip(self.tr("Eraser") if color is None else color)
            self._group.addButton(button, index)
            self._layout.addWidget(button)

    def set_selected(self, color: Optional[Color]) -> None:
        """Check the swatch for `color` without emitting color_selected."""
        if color not in self._colors:
            return
        button = self._group.button(self._colors.index(color))
        if button is not None and not button.isChecked():
            button.setChecked(True)

    def _on_clicked(self, index: int) -> None:
        self.color_selected.emit(self._colors[index])
