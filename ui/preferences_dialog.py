"""
Preferences Dialog
테마 및 캔버스 환경설정 다이얼로그
"""

from PyQt5.QtWidgets import (
    QVBoxLayout, QFormLayout, QGroupBox, QCheckBox, QSpinBox,
    QDialogButtonBox
)
from loguru import logger

from core.config import UIConfig
from ui.theme import ThemedDialog, ThemeManager


class PreferencesDialog(ThemedDialog):
    """
    환경설정 다이얼로그

    확인 시 values()로 선택값을 돌려주며, 실제 반영은 호출한 쪽에서 합니다.
    """

    def __init__(self, theme_manager: ThemeManager, ui_config: UIConfig, parent=None):
        """
        초기화

        Args:
            theme_manager: 테마 관리자
            ui_config: 현재 UI 설정 (초기값)
            parent: 부모 위젯
        """
        super().__init__(theme_manager, parent)
        self.ui_config = ui_config

        self._setup_ui()
        self._load_settings()
        self.apply_initial_theme()

        logger.debug("PreferencesDialog initialized")

    def _setup_ui(self):
        """UI 구성"""
        self.setWindowTitle("Preferences")
        self.setModal(True)

        layout = QVBoxLayout(self)

        appearance_group = QGroupBox("Appearance")
        appearance_layout = QFormLayout(appearance_group)
        self.dark_mode_check = QCheckBox("Dark mode")
        appearance_layout.addRow(self.dark_mode_check)
        layout.addWidget(appearance_group)

        canvas_group = QGroupBox("Canvas")
        canvas_layout = QFormLayout(canvas_group)
        self.show_grid_check = QCheckBox("Show grid")
        canvas_layout.addRow(self.show_grid_check)
        self.grid_spacing_spin = QSpinBox()
        self.grid_spacing_spin.setRange(10, 200)
        self.grid_spacing_spin.setSuffix(" px")
        canvas_layout.addRow("Grid spacing:", self.grid_spacing_spin)
        layout.addWidget(canvas_group)

        self.button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.button_box.accepted.connect(self.accept)
        self.button_box.rejected.connect(self.reject)
        layout.addWidget(self.button_box)

    def _load_settings(self):
        # 저장된 설정이 아니라 현재 테마를 표시
        self.dark_mode_check.setChecked(self.theme_manager.is_dark())
        self.show_grid_check.setChecked(self.ui_config.show_grid)
        self.grid_spacing_spin.setValue(self.ui_config.grid_spacing)

    def values(self) -> dict:
        """
        선택값

        Returns:
            {"dark_mode": bool, "show_grid": bool, "grid_spacing": int}
        """
        return {
            "dark_mode": self.dark_mode_check.isChecked(),
            "show_grid": self.show_grid_check.isChecked(),
            "grid_spacing": self.grid_spacing_spin.value(),
        }
