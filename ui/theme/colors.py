"""
색상 팔레트 정의

테마별 색상을 중앙에서 관리합니다.
"""

from types import MappingProxyType
from typing import Mapping, Union

from loguru import logger

from core.enums import Theme


# 팔레트가 정의해야 하는 모든 역할
COLOR_ROLES = (
    'background',
    'foreground',
    'panel_background',
    'button_background',
    'button_hover',
    'button_selected',
    'border',
    'border_hover',
    'border_selected',
    'text_field_background',
    'menu_background',
    'toolbar_background',
    'grid_color',
    'drawing_background',
)


class ColorPalette:
    """테마별 색상 정의"""

    LIGHT = MappingProxyType({
        'background': '#ffffff',
        'foreground': '#000000',
        'panel_background': '#f0f0f0',
        'button_background': '#e6e6e6',
        'button_hover': '#e0e8f6',
        'button_selected': '#c1d2ee',
        'border': '#808080',
        'border_hover': '#98b4e2',
        'border_selected': '#316ac5',
        'text_field_background': '#ffffff',
        'menu_background': '#ffffff',
        'toolbar_background': '#f0f0f0',
        'grid_color': '#dcdcdc',             # 캔버스 격자
        'drawing_background': '#ffffff',     # 캔버스 배경
    })

    DARK = MappingProxyType({
        'background': '#2b2b2b',
        'foreground': '#bbbbbb',
        'panel_background': '#3c3f41',
        'button_background': '#4b4b4b',
        'button_hover': '#646464',
        'button_selected': '#828282',
        'border': '#555555',
        'border_hover': '#787878',
        'border_selected': '#a0a0a0',
        'text_field_background': '#45494a',
        'menu_background': '#2d2d2d',
        'toolbar_background': '#3c3f41',
        'grid_color': '#646464',
        'drawing_background': '#2b2b2b',
    })

    @classmethod
    def get_palette(cls, theme: Union[Theme, str]) -> Mapping[str, str]:
        """
        전체 팔레트 가져오기

        Args:
            theme: Theme 또는 'dark' / 'light'

        Returns:
            읽기 전용 색상 매핑
        """
        if isinstance(theme, Theme):
            theme = theme.value
        return cls.DARK if theme == Theme.DARK.value else cls.LIGHT

    @classmethod
    def get_color(cls, theme: Union[Theme, str], key: str) -> str:
        """
        색상 가져오기

        Args:
            theme: Theme 또는 'dark' / 'light'
            key: 색상 역할 (예: 'panel_background', 'grid_color')

        Returns:
            HEX 색상 코드 (예: '#3c3f41')
        """
        palette = cls.get_palette(theme)
        if key not in palette:
            logger.warning(f"Unknown color role: {key}")
            return '#000000'
        return palette[key]
