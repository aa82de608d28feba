"""
색상 팔레트 테스트
"""

import pytest

from core.enums import Theme
from ui.theme.colors import ColorPalette, COLOR_ROLES


def test_palettes_are_total():
    """모든 역할이 두 팔레트에 정의되어 있어야 함"""
    assert len(COLOR_ROLES) == 14
    for role in COLOR_ROLES:
        assert role in ColorPalette.LIGHT
        assert role in ColorPalette.DARK
    assert set(ColorPalette.LIGHT) == set(COLOR_ROLES)
    assert set(ColorPalette.DARK) == set(COLOR_ROLES)


def test_palettes_are_distinct():
    differing = [role for role in COLOR_ROLES if ColorPalette.LIGHT[role] != ColorPalette.DARK[role]]
    assert differing
    assert ColorPalette.LIGHT['background'] != ColorPalette.DARK['background']


def test_palettes_are_read_only():
    with pytest.raises(TypeError):
        ColorPalette.DARK['background'] = '#ff0000'


def test_known_values():
    assert ColorPalette.get_color(Theme.LIGHT, 'border_selected') == '#316ac5'
    assert ColorPalette.get_color(Theme.DARK, 'panel_background') == '#3c3f41'
    assert ColorPalette.get_color('dark', 'text_field_background') == '#45494a'
    assert ColorPalette.get_color('light', 'grid_color') == '#dcdcdc'


def test_get_palette_accepts_theme_or_string():
    assert ColorPalette.get_palette(Theme.DARK) is ColorPalette.DARK
    assert ColorPalette.get_palette('dark') is ColorPalette.DARK
    assert ColorPalette.get_palette(Theme.LIGHT) is ColorPalette.LIGHT


def test_unknown_role_falls_back_to_black():
    assert ColorPalette.get_color(Theme.DARK, 'no_such_role') == '#000000'
