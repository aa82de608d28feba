"""
Main Window
Drawing canvas with construction side panel, menus and tool bar
"""

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QScrollArea, QAction,
    QWidgetAction, QLabel, QLineEdit, QPlainTextEdit, QPushButton,
    QToolBar, QButtonGroup, QMessageBox, QDialog
)
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence, QCloseEvent
from loguru import logger

from core.config import ConfigManager
from core.enums import Theme
from ui.theme import ThemeManager
from ui.drawing_canvas import DrawingCanvas
from ui.preferences_dialog import PreferencesDialog
from ui.widgets.toolbar_button import ToolbarButton


class MainWindow(QMainWindow):
    """Main application window"""

    TOOLS = ("Select", "Point", "Line", "Circle")

    def __init__(self, config_manager: ConfigManager, theme_manager: ThemeManager):
        super().__init__()
        self.config_manager = config_manager
        self.theme_manager = theme_manager
        self.theme_manager.theme_changed.connect(self._on_theme_changed)

        self.app_name = self.config_manager.app_config.app_name
        self.app_version = self.config_manager.app_config.version
        self.app_display_name = f"{self.app_name}/{self.app_version}"

        self.canvas = None
        self.tool_buttons = []

        self._setup_ui()
        self._setup_menus()
        self._setup_toolbar()
        self._restore_window_state()

        # Apply theme from settings
        self._apply_theme()

    def _setup_ui(self):
        """Setup central widgets"""
        self.setWindowTitle(self.app_display_name)

        ui_config = self.config_manager.ui_config

        splitter = QSplitter(Qt.Horizontal)

        # Canvas area
        self.canvas = DrawingCanvas(
            self.theme_manager,
            grid_spacing=ui_config.grid_spacing,
            show_grid=ui_config.show_grid
        )
        self.canvas.point_added.connect(self._on_point_added)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidget(self.canvas)
        self.scroll_area.setWidgetResizable(True)
        splitter.addWidget(self.scroll_area)

        # Side panel
        self.side_panel = QWidget()
        side_layout = QVBoxLayout(self.side_panel)

        side_layout.addWidget(QLabel("Construction"))
        self.construction_name = QLineEdit()
        self.construction_name.setPlaceholderText("Untitled construction")
        side_layout.addWidget(self.construction_name)

        side_layout.addWidget(QLabel("Points"))
        self.points_log = QPlainTextEdit()
        self.points_log.setReadOnly(True)
        side_layout.addWidget(self.points_log, 1)

        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self._clear_canvas)
        side_layout.addWidget(self.clear_button)

        splitter.addWidget(self.side_panel)
        splitter.setStretchFactor(0, 4)
        splitter.setStretchFactor(1, 1)

        self.setCentralWidget(splitter)
        self.statusBar().showMessage("Ready")

    def _setup_menus(self):
        """Setup menu bar"""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("File")

        clear_action = QAction("Clear Canvas", self)
        clear_action.setShortcut(QKeySequence("Ctrl+N"))
        clear_action.triggered.connect(self._clear_canvas)
        file_menu.addAction(clear_action)

        file_menu.addSeparator()

        exit_action = QAction("Exit", self)
        exit_action.setShortcut(QKeySequence("Ctrl+Q"))
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # View menu
        view_menu = menubar.addMenu("View")

        # 현재 테마 표시 (메뉴에 포함된 위젯 항목)
        self.theme_status_label = QLabel()
        self.theme_status_label.setContentsMargins(8, 4, 8, 4)
        theme_status_action = QWidgetAction(self)
        theme_status_action.setDefaultWidget(self.theme_status_label)
        view_menu.addAction(theme_status_action)

        view_menu.addSeparator()

        self.dark_mode_action = QAction("Dark Mode", self)
        self.dark_mode_action.setShortcut(QKeySequence("Ctrl+Shift+T"))
        self.dark_mode_action.setCheckable(True)
        self.dark_mode_action.toggled.connect(self._on_dark_mode_toggled)
        view_menu.addAction(self.dark_mode_action)

        self.show_grid_action = QAction("Show Grid", self)
        self.show_grid_action.setShortcut(QKeySequence("Ctrl+G"))
        self.show_grid_action.setCheckable(True)
        self.show_grid_action.setChecked(self.config_manager.ui_config.show_grid)
        self.show_grid_action.toggled.connect(self._on_show_grid_toggled)
        view_menu.addAction(self.show_grid_action)

        view_menu.addSeparator()

        preferences_action = QAction("Preferences...", self)
        preferences_action.setShortcut(QKeySequence("Ctrl+,"))
        preferences_action.triggered.connect(self._show_preferences_dialog)
        view_menu.addAction(preferences_action)

        # Help menu
        help_menu = menubar.addMenu("Help")

        about_action = QAction("About", self)
        about_action.triggered.connect(self._show_about)
        help_menu.addAction(about_action)

    def _setup_toolbar(self):
        """Setup drawing tool bar"""
        self.toolbar = QToolBar("Tools")
        self.toolbar.setMovable(False)
        self.addToolBar(self.toolbar)

        self.tool_group = QButtonGroup(self)
        self.tool_group.setExclusive(True)

        for tool in self.TOOLS:
            button = ToolbarButton(self.theme_manager, tool)
            self.tool_group.addButton(button)
            self.toolbar.addWidget(button)
            self.tool_buttons.append(button)

        self.tool_buttons[0].setChecked(True)
        self.tool_group.buttonClicked.connect(
            lambda button: self.statusBar().showMessage(f"Tool: {button.text()}")
        )

    def _restore_window_state(self):
        state = self.config_manager.ui_config.window_state
        self.setGeometry(
            state.get("x", 100),
            state.get("y", 100),
            state.get("width", 1280),
            state.get("height", 800)
        )

    def _apply_theme(self):
        """Apply current theme to the whole window"""
        self._sync_theme_controls()
        count = self.theme_manager.apply_theme(self)
        logger.info(f"Applied {self.theme_manager.current_theme.value} theme to main window ({count} widgets)")

    def _sync_theme_controls(self):
        is_dark = self.theme_manager.is_dark()

        # toggled 시그널 재진입 방지
        self.dark_mode_action.blockSignals(True)
        self.dark_mode_action.setChecked(is_dark)
        self.dark_mode_action.blockSignals(False)

        self.theme_status_label.setText(f"Theme: {self.theme_manager.current_theme.value.capitalize()}")

    def _on_theme_changed(self, theme: str):
        """Handle theme changed signal from ThemeManager"""
        self._apply_theme()
        self.theme_manager.push_to_settings()
        self.statusBar().showMessage(f"Theme changed to {theme}", 3000)

    def _on_dark_mode_toggled(self, checked: bool):
        self.theme_manager.set_theme(Theme.DARK if checked else Theme.LIGHT)

    def _on_show_grid_toggled(self, checked: bool):
        self.canvas.set_show_grid(checked)
        self.config_manager.ui_config.show_grid = checked
        self.config_manager.save_ui_config()

    def _on_point_added(self, x: float, y: float):
        self.points_log.appendPlainText(f"P{len(self.canvas.points)} ({x:.0f}, {y:.0f})")

    def _clear_canvas(self):
        self.canvas.clear()
        self.points_log.clear()
        self.statusBar().showMessage("Canvas cleared", 3000)

    def _show_preferences_dialog(self):
        dialog = PreferencesDialog(self.theme_manager, self.config_manager.ui_config, self)
        accepted = dialog.exec_() == QDialog.Accepted
        values = dialog.values()
        dialog.deleteLater()
        if not accepted:
            return

        logger.debug(f"Preferences accepted: {values}")

        ui_config = self.config_manager.ui_config
        ui_config.grid_spacing = values["grid_spacing"]
        self.canvas.grid_spacing = values["grid_spacing"]
        self.canvas.update()
        self.show_grid_action.setChecked(values["show_grid"])
        self.config_manager.save_ui_config()

        self.theme_manager.set_theme(Theme.DARK if values["dark_mode"] else Theme.LIGHT)

    def _show_about(self):
        QMessageBox.about(
            self,
            f"About {self.app_name}",
            f"{self.app_display_name}\n\nGeometry construction and proving tool."
        )

    def closeEvent(self, event: QCloseEvent):
        """Save window geometry on close"""
        geometry = self.geometry()
        self.config_manager.update_ui_window_state(
            geometry.x(), geometry.y(), geometry.width(), geometry.height()
        )
        if not self.config_manager.save_ui_config():
            logger.warning("Failed to save window state")
        logger.info("Main window closed")
        super().closeEvent(event)
