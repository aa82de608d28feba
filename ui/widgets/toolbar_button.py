"""
Toolbar Button
테마 색상으로 호버/선택 상태를 그리는 툴바 버튼
"""

from typing import Tuple

from PyQt5.QtCore import Qt, QRectF, QSize
from PyQt5.QtGui import QColor, QPainter, QPen
from PyQt5.QtWidgets import QToolButton

from core.enums import WidgetKind


class ToolbarButton(QToolButton):
    """
    체크 가능한 툴바 버튼

    상태별 색상:
        - 기본: button_background / border
        - 호버: button_hover / border_hover
        - 선택(체크): button_selected / border_selected
    """

    widget_kind = WidgetKind.BUTTON

    def __init__(self, theme_manager, text: str = "", parent=None):
        super().__init__(parent)
        self.theme_manager = theme_manager
        self.theme_manager.theme_changed.connect(self._on_theme_changed)
        self._hovered = False

        self.setText(text)
        self.setCheckable(True)
        self.setAutoRaise(True)
        self.setToolButtonStyle(Qt.ToolButtonTextOnly)

    def sizeHint(self) -> QSize:
        hint = super().sizeHint()
        return QSize(max(hint.width(), 64), max(hint.height(), 28))

    def _on_theme_changed(self, theme: str):
        self.update()

    def enterEvent(self, event):
        self._hovered = True
        self.update()
        super().enterEvent(event)

    def leaveEvent(self, event):
        self._hovered = False
        self.update()
        super().leaveEvent(event)

    def current_colors(self) -> Tuple[QColor, QColor]:
        """
        현재 상태의 (배경색, 보더색)

        선택 상태가 호버보다 우선합니다.
        """
        tm = self.theme_manager
        if self.isChecked() or self.isDown():
            return tm.get_button_selected_color(), tm.get_border_selected_color()
        if self._hovered:
            return tm.get_button_hover_color(), tm.get_border_hover_color()
        return tm.get_button_background_color(), tm.get_border_color()

    def paintEvent(self, event):
        background, border = self.current_colors()

        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)

        rect = QRectF(self.rect()).adjusted(0.5, 0.5, -0.5, -0.5)
        painter.setPen(QPen(border, 1))
        painter.setBrush(background)
        painter.drawRoundedRect(rect, 3, 3)

        painter.setPen(self.theme_manager.get_foreground_color())
        painter.drawText(self.rect(), Qt.AlignCenter, self.text())
        painter.end()
