"""
위젯 트리 테마 적용기

위젯 분류(WidgetKind)별로 QPalette 색상을 설정하고 트리를 따라 재귀적으로 적용합니다.
메뉴 내용(서브메뉴, QWidgetAction 항목)은 일반 자식으로 보이지 않을 수 있으므로
별도의 순회 규칙으로 방문합니다.
"""

from typing import Callable, Dict, Iterator, List, Optional, Set, Tuple

from PyQt5 import sip
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QColor, QPalette
from PyQt5.QtWidgets import (
    QWidget, QFrame, QGroupBox, QAbstractButton, QLineEdit, QTextEdit,
    QPlainTextEdit, QLabel, QMenuBar, QMenu, QToolBar, QAbstractScrollArea,
    QWidgetAction
)

from core.enums import WidgetKind


# 먼저 일치하는 항목이 우선 (하위 클래스가 상위 클래스보다 앞에 와야 함)
KIND_TABLE = (
    (QMenuBar, WidgetKind.MENU_BAR),
    (QMenu, WidgetKind.MENU),
    (QToolBar, WidgetKind.TOOLBAR),
    (QLineEdit, WidgetKind.TEXT_INPUT),
    (QTextEdit, WidgetKind.TEXT_INPUT),
    (QPlainTextEdit, WidgetKind.TEXT_INPUT),
    (QAbstractButton, WidgetKind.BUTTON),
    (QLabel, WidgetKind.LABEL),
    (QAbstractScrollArea, WidgetKind.SCROLL_AREA),
    (QGroupBox, WidgetKind.PANEL),
    (QFrame, WidgetKind.PANEL),
)

# Qt는 텍스트 커서(caret)를 Text 역할 색상으로 그린다
FOREGROUND_ROLES = (QPalette.WindowText, QPalette.Text, QPalette.ButtonText)


def classify(widget: QWidget) -> WidgetKind:
    """
    위젯 분류 결정

    ``widget_kind`` 클래스 속성이 있으면 그 값을, 없으면 타입 테이블을 사용합니다.
    """
    declared = getattr(widget, 'widget_kind', None)
    if isinstance(declared, WidgetKind):
        return declared

    for widget_type, kind in KIND_TABLE:
        if isinstance(widget, widget_type):
            return kind

    # PyQt는 Qt 내부 QWidget 하위 클래스도 QWidget으로 감싸므로 메타 객체 이름으로 비교
    if widget.metaObject().className() == "QWidget":
        return WidgetKind.PANEL
    return WidgetKind.OTHER


def direct_children(widget: QWidget) -> List[QWidget]:
    return widget.findChildren(QWidget, options=Qt.FindDirectChildrenOnly)


def set_colors(widget: QWidget, background: Optional[QColor] = None,
               foreground: Optional[QColor] = None,
               background_roles=(QPalette.Window,)):
    """위젯 팔레트의 배경/전경 역할 색상 설정"""
    palette = widget.palette()
    if background is not None:
        for role in background_roles:
            palette.setColor(role, background)
    if foreground is not None:
        for role in FOREGROUND_ROLES:
            palette.setColor(role, foreground)
    widget.setPalette(palette)


class WidgetStyler:
    """
    위젯 트리에 현재 테마 색상 적용

    Args:
        theme: 색상 getter를 제공하는 ThemeManager
    """

    def __init__(self, theme):
        self.theme = theme
        self._stylers: Dict[WidgetKind, Callable[[QWidget], None]] = {
            WidgetKind.DRAWING_CANVAS: self._style_drawing_canvas,
            WidgetKind.PANEL: self._style_panel,
            WidgetKind.BUTTON: self._style_button,
            WidgetKind.TEXT_INPUT: self._style_text_input,
            WidgetKind.LABEL: self._style_label,
            WidgetKind.TOOLBAR: self._style_toolbar,
            WidgetKind.SCROLL_AREA: self._style_scroll_area,
            WidgetKind.OTHER: self._style_other,
        }
        self._stylers.update(
            (kind, self._style_menu) for kind in WidgetKind if kind.is_menu_family
        )

    def apply(self, widget: Optional[QWidget]) -> int:
        """
        위젯과 모든 하위 위젯에 테마 적용

        Args:
            widget: 루트 위젯 (None이면 아무 작업도 하지 않음)

        Returns:
            스타일이 적용된 위젯 수
        """
        if widget is None:
            return 0

        visited: Set[int] = set()
        self._apply(widget, None, visited)
        return len(visited)

    def _apply(self, widget: QWidget, kind: Optional[WidgetKind], visited: Set[int]):
        key = sip.unwrapinstance(widget)
        if key in visited:
            return
        visited.add(key)

        if kind is None:
            kind = classify(widget)
        self.style(widget, kind)

        for child, child_kind in self.children(widget, kind):
            self._apply(child, child_kind, visited)

    def style(self, widget: QWidget, kind: WidgetKind):
        """단일 위젯에 분류별 색상 설정"""
        self._stylers[kind](widget)

    def children(self, widget: QWidget, kind: WidgetKind) -> Iterator[Tuple[QWidget, Optional[WidgetKind]]]:
        """
        순회할 하위 위젯 목록

        메뉴 내용을 일반 자식보다 먼저 돌려주므로 메뉴에 포함된 위젯 항목은
        MENU_ITEM으로 스타일됩니다.

        Yields:
            (하위 위젯, 분류 강제값 또는 None)
        """
        if kind.is_menu_family:
            for action in widget.actions():
                submenu = action.menu()
                if submenu is not None:
                    yield submenu, None
                elif kind is WidgetKind.MENU and isinstance(action, QWidgetAction):
                    item = action.defaultWidget()
                    if item is not None:
                        yield item, WidgetKind.MENU_ITEM

        if isinstance(widget, QAbstractScrollArea):
            viewport = widget.viewport()
            viewport_key = sip.unwrapinstance(viewport) if viewport is not None else None
            for child in direct_children(widget):
                if sip.unwrapinstance(child) != viewport_key:
                    yield child, None
                elif kind is WidgetKind.SCROLL_AREA:
                    # viewport 자체는 _style_scroll_area에서 처리, 내용 위젯만 순회
                    for content in direct_children(child):
                        yield content, None
                else:
                    # 텍스트 편집기의 viewport는 패널이 아닌 기타 위젯
                    yield child, WidgetKind.OTHER
            return

        for child in direct_children(widget):
            yield child, None

    # ========== 분류별 스타일 ==========

    def _style_drawing_canvas(self, widget: QWidget):
        set_colors(widget, self.theme.get_drawing_background_color(), self.theme.get_foreground_color())

    def _style_panel(self, widget: QWidget):
        set_colors(widget, self.theme.get_panel_background_color(), self.theme.get_foreground_color())

    def _style_button(self, widget: QWidget):
        set_colors(
            widget,
            self.theme.get_button_background_color(),
            self.theme.get_foreground_color(),
            background_roles=(QPalette.Button,)
        )

    def _style_text_input(self, widget: QWidget):
        set_colors(
            widget,
            self.theme.get_text_field_background_color(),
            self.theme.get_foreground_color(),
            background_roles=(QPalette.Base,)
        )

    def _style_label(self, widget: QWidget):
        set_colors(widget, foreground=self.theme.get_foreground_color())

    def _style_menu(self, widget: QWidget):
        set_colors(
            widget,
            self.theme.get_menu_background_color(),
            self.theme.get_foreground_color(),
            background_roles=(QPalette.Window, QPalette.Base, QPalette.Button)
        )
        widget.setAutoFillBackground(True)

    def _style_toolbar(self, widget: QWidget):
        set_colors(widget, self.theme.get_toolbar_background_color(), self.theme.get_foreground_color())

    def _style_scroll_area(self, widget: QWidget):
        background = self.theme.get_background_color()
        set_colors(widget, background)
        viewport = widget.viewport()
        if viewport is not None:
            set_colors(viewport, background)

    def _style_other(self, widget: QWidget):
        # 배경을 직접 칠하는 위젯(autoFill 또는 최상위 창)만 배경색 적용
        if widget.autoFillBackground() or widget.isWindow():
            set_colors(widget, self.theme.get_background_color(), self.theme.get_foreground_color())
        else:
            set_colors(widget, foreground=self.theme.get_foreground_color())
