"""
테마 인식 위젯 테스트 (캔버스, 툴바 버튼, 환경설정 다이얼로그)
"""

from PyQt5.QtCore import Qt, QPoint, QEvent
from PyQt5.QtGui import QPalette
from PyQt5.QtTest import QTest
from PyQt5.QtWidgets import QApplication

from core.config import UIConfig
from core.enums import Theme, WidgetKind
from ui.theme import ColorPalette, classify
from ui.drawing_canvas import DrawingCanvas
from ui.preferences_dialog import PreferencesDialog
from ui.widgets.toolbar_button import ToolbarButton


def test_canvas_paints_drawing_background(theme_manager):
    theme_manager.set_theme(Theme.DARK)
    canvas = DrawingCanvas(theme_manager, grid_spacing=40)
    canvas.resize(200, 200)

    image = canvas.grab().toImage()
    assert image.pixelColor(20, 20).name() == ColorPalette.DARK['drawing_background']


def test_canvas_repaints_after_theme_change(theme_manager):
    canvas = DrawingCanvas(theme_manager, grid_spacing=40)
    canvas.resize(200, 200)

    theme_manager.toggle_theme()
    image = canvas.grab().toImage()
    assert image.pixelColor(20, 20).name() == ColorPalette.DARK['drawing_background']


def test_canvas_grid_uses_grid_color(theme_manager):
    canvas = DrawingCanvas(theme_manager, grid_spacing=40)
    canvas.resize(200, 200)

    image = canvas.grab().toImage()
    assert image.pixelColor(40, 20).name() == ColorPalette.LIGHT['grid_color']

    canvas.set_show_grid(False)
    image = canvas.grab().toImage()
    assert image.pixelColor(40, 20).name() == ColorPalette.LIGHT['drawing_background']


def test_canvas_click_adds_point(theme_manager):
    canvas = DrawingCanvas(theme_manager)
    canvas.resize(400, 300)
    canvas.show()
    added = []
    canvas.point_added.connect(lambda x, y: added.append((x, y)))

    QTest.mouseClick(canvas, Qt.LeftButton, pos=QPoint(15, 25))

    assert added == [(15.0, 25.0)]
    assert len(canvas.points) == 1

    canvas.clear()
    assert canvas.points == []


def test_toolbar_button_state_colors(theme_manager):
    button = ToolbarButton(theme_manager, "Point")
    assert classify(button) is WidgetKind.BUTTON

    background, border = button.current_colors()
    assert background.name() == ColorPalette.LIGHT['button_background']
    assert border.name() == ColorPalette.LIGHT['border']

    QApplication.sendEvent(button, QEvent(QEvent.Enter))
    background, border = button.current_colors()
    assert background.name() == ColorPalette.LIGHT['button_hover']
    assert border.name() == ColorPalette.LIGHT['border_hover']

    button.setChecked(True)
    background, border = button.current_colors()
    assert background.name() == ColorPalette.LIGHT['button_selected']
    assert border.name() == ColorPalette.LIGHT['border_selected']

    QApplication.sendEvent(button, QEvent(QEvent.Leave))
    theme_manager.set_theme(Theme.DARK)
    background, border = button.current_colors()
    assert background.name() == ColorPalette.DARK['button_selected']
    assert border.name() == ColorPalette.DARK['border_selected']


def test_preferences_dialog_values(theme_manager):
    theme_manager.set_theme(Theme.DARK)
    ui_config = UIConfig(show_grid=False, grid_spacing=25)
    dialog = PreferencesDialog(theme_manager, ui_config)

    assert dialog.values() == {"dark_mode": True, "show_grid": False, "grid_spacing": 25}

    dialog.dark_mode_check.setChecked(False)
    dialog.grid_spacing_spin.setValue(60)
    assert dialog.values() == {"dark_mode": False, "show_grid": False, "grid_spacing": 60}


def test_preferences_dialog_follows_theme(theme_manager):
    dialog = PreferencesDialog(theme_manager, UIConfig())
    assert dialog.palette().color(QPalette.Window).name() == ColorPalette.LIGHT['background']

    theme_manager.set_theme(Theme.DARK)
    assert dialog.palette().color(QPalette.Window).name() == ColorPalette.DARK['background']
    assert dialog.dark_mode_check.palette().color(QPalette.ButtonText).name() == ColorPalette.DARK['foreground']
