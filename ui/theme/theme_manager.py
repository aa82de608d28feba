"""
테마 관리자

현재 테마(라이트/다크)를 보관하고 역할별 색상 조회와 위젯 트리 적용을 담당합니다.
애플리케이션이 인스턴스를 하나 만들어 창과 위젯에 전달합니다.
"""

from typing import Mapping, Optional, Union

from PyQt5.QtCore import QObject, pyqtSignal
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import QWidget
from loguru import logger

from core.enums import Theme
from .colors import ColorPalette
from .widget_styler import WidgetStyler


class ThemeManager(QObject):
    """
    테마 관리자

    현재 테마를 관리하고, 테마 변경 시 연결된 위젯에 알립니다.

    Args:
        theme: 초기 테마 (기본: 라이트)
        settings: 다크 모드 설정 저장소 (is_dark_mode() / set_dark_mode(bool) 제공)
        parent: 부모 QObject
    """

    theme_changed = pyqtSignal(str)  # 테마 변경 시그널 (theme value)

    def __init__(self, theme: Union[Theme, str] = Theme.LIGHT, settings=None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.settings = settings
        self._current_theme = self._coerce(theme)
        self._styler = WidgetStyler(self)

    @staticmethod
    def _coerce(theme: Union[Theme, str]) -> Theme:
        if isinstance(theme, Theme):
            return theme
        try:
            return Theme(theme)
        except ValueError:
            logger.warning(f"Unknown theme '{theme}', falling back to {Theme.LIGHT.value}")
            return Theme.LIGHT

    @property
    def current_theme(self) -> Theme:
        """현재 테마"""
        return self._current_theme

    def get_current_theme(self) -> Theme:
        return self._current_theme

    def set_theme(self, theme: Union[Theme, str], force_update: bool = False):
        """
        테마 변경

        Args:
            theme: Theme 또는 'dark' / 'light'
            force_update: True면 테마가 같아도 시그널 emit (초기화용)
        """
        theme = self._coerce(theme)

        if self._current_theme != theme or force_update:
            logger.info(f"Theme set: {self._current_theme.value} -> {theme.value}")
            self._current_theme = theme
            self.theme_changed.emit(theme.value)

    def toggle_theme(self):
        """라이트 ↔ 다크 전환"""
        self.set_theme(self._current_theme.opposite)

    def is_dark(self) -> bool:
        return self._current_theme is Theme.DARK

    # ========== 색상 조회 ==========

    def get_color(self, key: str) -> str:
        """
        현재 테마의 색상 가져오기

        Args:
            key: 색상 역할 (예: 'panel_background')

        Returns:
            HEX 색상 코드
        """
        return ColorPalette.get_color(self._current_theme, key)

    def get_palette(self) -> Mapping[str, str]:
        """현재 테마의 전체 팔레트"""
        return ColorPalette.get_palette(self._current_theme)

    def _qcolor(self, key: str) -> QColor:
        return QColor(self.get_color(key))

    def get_background_color(self) -> QColor:
        return self._qcolor('background')

    def get_foreground_color(self) -> QColor:
        return self._qcolor('foreground')

    def get_panel_background_color(self) -> QColor:
        return self._qcolor('panel_background')

    def get_button_background_color(self) -> QColor:
        return self._qcolor('button_background')

    def get_button_hover_color(self) -> QColor:
        return self._qcolor('button_hover')

    def get_button_selected_color(self) -> QColor:
        return self._qcolor('button_selected')

    def get_border_color(self) -> QColor:
        return self._qcolor('border')

    def get_border_hover_color(self) -> QColor:
        return self._qcolor('border_hover')

    def get_border_selected_color(self) -> QColor:
        return self._qcolor('border_selected')

    def get_text_field_background_color(self) -> QColor:
        return self._qcolor('text_field_background')

    def get_menu_background_color(self) -> QColor:
        return self._qcolor('menu_background')

    def get_toolbar_background_color(self) -> QColor:
        return self._qcolor('toolbar_background')

    def get_grid_color(self) -> QColor:
        return self._qcolor('grid_color')

    def get_drawing_background_color(self) -> QColor:
        return self._qcolor('drawing_background')

    # ========== 위젯 적용 ==========

    def apply_theme(self, widget: Optional[QWidget]) -> int:
        """
        위젯 트리에 현재 테마 적용

        Args:
            widget: 루트 위젯 (None이면 무시)

        Returns:
            스타일이 적용된 위젯 수
        """
        if widget is None:
            return 0

        count = self._styler.apply(widget)
        logger.debug(f"Applied {self._current_theme.value} theme to {count} widgets ({type(widget).__name__})")
        return count

    # ========== 설정 동기화 ==========

    def sync_from_settings(self):
        """저장된 다크 모드 설정을 현재 테마로 반영"""
        if self.settings is None:
            logger.debug("No settings attached - skipping theme sync")
            return
        self.set_theme(Theme.DARK if self.settings.is_dark_mode() else Theme.LIGHT)

    def push_to_settings(self):
        """현재 테마를 다크 모드 설정에 기록"""
        if self.settings is None:
            logger.debug("No settings attached - skipping theme push")
            return
        self.settings.set_dark_mode(self.is_dark())
