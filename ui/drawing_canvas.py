"""
Drawing Canvas
도형 작도 캔버스 (격자 + 점)
"""

from typing import List

from PyQt5.QtCore import Qt, QPointF, QSize, pyqtSignal
from PyQt5.QtGui import QPainter, QPen
from PyQt5.QtWidgets import QSizePolicy
from loguru import logger

from core.enums import WidgetKind
from ui.theme import ThemedWidget, ThemeManager


class DrawingCanvas(ThemedWidget):
    """Canvas painted with the drawing background, grid and foreground colors"""

    widget_kind = WidgetKind.DRAWING_CANVAS

    POINT_RADIUS = 4

    # Signals
    point_added = pyqtSignal(float, float)
    cleared = pyqtSignal()

    def __init__(self, theme_manager: ThemeManager, grid_spacing: int = 40, show_grid: bool = True, parent=None):
        """
        Initialize drawing canvas

        Args:
            theme_manager: Theme manager providing colors
            grid_spacing: Grid cell size in pixels
            show_grid: Draw the background grid
            parent: Parent widget
        """
        super().__init__(theme_manager, parent)
        self.grid_spacing = max(4, grid_spacing)
        self.show_grid = show_grid
        self.points: List[QPointF] = []

        self.setMinimumSize(400, 300)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMouseTracking(True)

    def sizeHint(self) -> QSize:
        return QSize(1200, 900)

    def _apply_theme(self):
        # 색상은 paintEvent에서 테마 관리자로부터 직접 읽음
        self.update()

    def set_show_grid(self, show: bool):
        self.show_grid = show
        self.update()

    def clear(self):
        """Remove all points"""
        self.points.clear()
        self.cleared.emit()
        self.update()
        logger.debug("Canvas cleared")

    def mousePressEvent(self, event):
        """Add a point on left click"""
        if event.button() == Qt.LeftButton:
            pos = QPointF(event.pos())
            self.points.append(pos)
            self.point_added.emit(pos.x(), pos.y())
            self.update()
        super().mousePressEvent(event)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.fillRect(self.rect(), self.theme_manager.get_drawing_background_color())

        # 격자는 1px 선이 흐려지지 않도록 안티앨리어싱 없이 그림
        if self.show_grid:
            painter.setPen(QPen(self.theme_manager.get_grid_color(), 1))
            for x in range(0, self.width(), self.grid_spacing):
                painter.drawLine(x, 0, x, self.height())
            for y in range(0, self.height(), self.grid_spacing):
                painter.drawLine(0, y, self.width(), y)

        painter.setRenderHint(QPainter.Antialiasing)
        foreground = self.theme_manager.get_foreground_color()
        painter.setPen(QPen(foreground, 1))
        painter.setBrush(foreground)
        for point in self.points:
            painter.drawEllipse(point, self.POINT_RADIUS, self.POINT_RADIUS)

        painter.end()
