"""
테마 인식 베이스 클래스

위젯과 다이얼로그가 테마 변경에 자동으로 반응하도록 합니다.
"""

from PyQt5.QtWidgets import QWidget, QDialog
from .theme_manager import ThemeManager


class ThemedWidget(QWidget):
    """
    테마 인식 위젯 베이스 클래스

    이 클래스를 상속받은 위젯은 테마 변경 시 ``_apply_theme()`` 이 호출됩니다.
    """

    def __init__(self, theme_manager: ThemeManager, parent=None):
        super().__init__(parent)
        self.theme_manager = theme_manager
        self.theme_manager.theme_changed.connect(self._on_theme_changed)
        # 초기 테마 적용은 서브클래스의 UI 구성 후에 호출해야 함

    def _apply_theme(self):
        """
        테마 적용 (서브클래스에서 오버라이드)

        기본 구현은 자기 자신과 하위 위젯에 팔레트를 적용합니다.
        """
        self.theme_manager.apply_theme(self)

    def _on_theme_changed(self, theme: str):
        self._apply_theme()

    def apply_initial_theme(self):
        """
        초기 테마 적용

        UI 구성이 완료된 후 호출합니다.
        """
        self._apply_theme()


class ThemedDialog(QDialog):
    """
    테마 인식 다이얼로그 베이스 클래스

    이 클래스를 상속받은 다이얼로그는 테마 변경 시 팔레트가 다시 적용됩니다.
    """

    def __init__(self, theme_manager: ThemeManager, parent=None):
        super().__init__(parent)
        self.theme_manager = theme_manager
        self.theme_manager.theme_changed.connect(self._on_theme_changed)

    def _apply_theme(self):
        self.theme_manager.apply_theme(self)

    def _on_theme_changed(self, theme: str):
        self._apply_theme()

    def apply_initial_theme(self):
        """UI 구성이 완료된 후 호출"""
        self._apply_theme()
