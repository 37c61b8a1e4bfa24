"""
QPainter adapter for the model's Surface protocol.
"""
from __future__ import annotations

from PySide6.QtCore import QPointF, QRectF, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPainter, QPen

from nonogram.config import CANVAS_BACKGROUND, CLUE_FONT_FAMILY


class PainterSurface:
    """Draws onto an active QPainter (widget, pixmap or image)."""

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self.painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        self.painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)

    @staticmethod
    def _pen(color: str, line_width: float) -> QPen:
        pen = QPen(QColor(color))
        pen.setWidthF(line_width)
        pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
        return pen

    def clear(self, width: float, height: float) -> None:
        self.painter.fillRect(QRectF(0.0, 0.0, width, height), QColor(CANVAS_BACKGROUND))

    def fill_rect(self, x: float, y: float, w: float, h: float, color: str) -> None:
        self.painter.fillRect(QRectF(x, y, w, h), QBrush(QColor(color)))

    def stroke_rect(self, x: float, y: float, w: float, h: float, color: str, line_width: float) -> None:
        self.painter.save()
        self.painter.setPen(self._pen(color, line_width))
        self.painter.setBrush(Qt.BrushStyle.NoBrush)
        self.painter.drawRect(QRectF(x, y, w, h))
        self.painter.restore()

    def line(self, x0: float, y0: float, x1: float, y1: float, color: str, line_width: float) -> None:
        self.painter.save()
        self.painter.setPen(self._pen(color, line_width))
        self.painter.drawLine(QPointF(x0, y0), QPointF(x1, y1))
        self.painter.restore()

    def text(self, x: float, y: float, text: str, color: str, font_size: float) -> None:
        if font_size <= 0:
            return
        self.painter.save()
        font = QFont(CLUE_FONT_FAMILY)
        font.setPixelSize(max(1, round(font_size)))
        self.painter.setFont(font)
        self.painter.setPen(QColor(color))
        # wide enough for two-digit counts, centered on (x, y)
        box = QRectF(x - font_size, y - font_size, 2 * font_size, 2 * font_size)
        self.painter.drawText(box, Qt.AlignmentFlag.AlignCenter, text)
        self.painter.restore()
