"""
ThemeManager 테스트
테마 전환, 색상 조회, 설정 동기화
"""

from PyQt5.QtGui import QColor

from core.enums import Theme
from ui.theme import ThemeManager, ColorPalette, COLOR_ROLES

from conftest import FakeSettings


def test_default_theme_is_light(theme_manager):
    assert theme_manager.current_theme is Theme.LIGHT
    assert theme_manager.get_current_theme() is Theme.LIGHT
    assert not theme_manager.is_dark()


def test_toggle_twice_restores_theme(theme_manager):
    original = theme_manager.current_theme
    theme_manager.toggle_theme()
    assert theme_manager.current_theme is not original
    theme_manager.toggle_theme()
    assert theme_manager.current_theme is original


def test_set_theme_emits_only_on_change(theme_manager):
    emitted = []
    theme_manager.theme_changed.connect(emitted.append)

    theme_manager.set_theme(Theme.DARK)
    theme_manager.set_theme(Theme.DARK)
    assert emitted == ['dark']

    theme_manager.set_theme(Theme.DARK, force_update=True)
    assert emitted == ['dark', 'dark']


def test_set_theme_accepts_string(theme_manager):
    theme_manager.set_theme('dark')
    assert theme_manager.is_dark()
    theme_manager.set_theme('light')
    assert theme_manager.current_theme is Theme.LIGHT


def test_unknown_theme_string_falls_back_to_light(qapp):
    manager = ThemeManager(Theme.DARK)
    manager.set_theme('solarized')
    assert manager.current_theme is Theme.LIGHT
    assert ThemeManager('neon').current_theme is Theme.LIGHT


def test_role_getters_follow_current_theme(theme_manager):
    getters = {
        'background': theme_manager.get_background_color,
        'foreground': theme_manager.get_foreground_color,
        'panel_background': theme_manager.get_panel_background_color,
        'button_background': theme_manager.get_button_background_color,
        'button_hover': theme_manager.get_button_hover_color,
        'button_selected': theme_manager.get_button_selected_color,
        'border': theme_manager.get_border_color,
        'border_hover': theme_manager.get_border_hover_color,
        'border_selected': theme_manager.get_border_selected_color,
        'text_field_background': theme_manager.get_text_field_background_color,
        'menu_background': theme_manager.get_menu_background_color,
        'toolbar_background': theme_manager.get_toolbar_background_color,
        'grid_color': theme_manager.get_grid_color,
        'drawing_background': theme_manager.get_drawing_background_color,
    }
    assert set(getters) == set(COLOR_ROLES)

    for theme, palette in ((Theme.LIGHT, ColorPalette.LIGHT), (Theme.DARK, ColorPalette.DARK)):
        theme_manager.set_theme(theme)
        for role, getter in getters.items():
            color = getter()
            assert isinstance(color, QColor)
            assert color.name() == palette[role], role


def test_dark_foreground_rgb(theme_manager):
    theme_manager.set_theme(Theme.DARK)
    color = theme_manager.get_foreground_color()
    assert (color.red(), color.green(), color.blue()) == (187, 187, 187)


def test_get_palette_tracks_theme(theme_manager):
    assert theme_manager.get_palette() is ColorPalette.LIGHT
    theme_manager.toggle_theme()
    assert theme_manager.get_palette() is ColorPalette.DARK


def test_sync_from_settings_reads_dark_flag(qapp):
    settings = FakeSettings(dark_mode=True)
    manager = ThemeManager(settings=settings)

    manager.sync_from_settings()
    assert manager.current_theme is Theme.DARK

    manager.push_to_settings()
    assert settings.writes == [True]


def test_push_to_settings_writes_current_theme(qapp, fake_settings):
    manager = ThemeManager(settings=fake_settings)
    manager.push_to_settings()
    manager.toggle_theme()
    manager.push_to_settings()
    assert fake_settings.writes == [False, True]
    assert fake_settings.is_dark_mode()


def test_sync_without_settings_is_noop(theme_manager):
    theme_manager.sync_from_settings()
    theme_manager.push_to_settings()
    assert theme_manager.current_theme is Theme.LIGHT


def test_sync_with_config_manager(qapp, config_manager):
    config_manager.set_dark_mode(True)
    manager = ThemeManager(settings=config_manager)
    manager.sync_from_settings()
    assert manager.is_dark()

    manager.set_theme(Theme.LIGHT)
    manager.push_to_settings()
    assert config_manager.is_dark_mode() is False
