"""
테마 시스템

애플리케이션 전체의 라이트/다크 테마를 관리하는 시스템입니다.

사용 예:
    from ui.theme import ThemeManager, ThemedDialog

    # 테마 관리자 생성 후 창에 전달
    theme_manager = ThemeManager(settings=config_manager)
    theme_manager.sync_from_settings()
    theme_manager.apply_theme(main_window)

    # 테마 인식 다이얼로그
    class MyDialog(ThemedDialog):
        def __init__(self, theme_manager, parent=None):
            super().__init__(theme_manager, parent)
            self._setup_ui()
            self.apply_initial_theme()  # UI 구성 후 테마 적용
"""

from .theme_manager import ThemeManager
from .colors import ColorPalette, COLOR_ROLES
from .widget_styler import WidgetStyler, classify
from .base import ThemedWidget, ThemedDialog

__all__ = [
    'ThemeManager',
    'ColorPalette',
    'COLOR_ROLES',
    'WidgetStyler',
    'classify',
    'ThemedWidget',
    'ThemedDialog',
]
