"""
PyGeoProver 전체에서 사용되는 열거형 정의
"""
from enum import Enum, auto


class Theme(Enum):
    """UI 테마 (라이트 / 다크)"""
    LIGHT = "light"
    DARK = "dark"

    @property
    def opposite(self) -> 'Theme':
        """반대 테마"""
        return Theme.LIGHT if self is Theme.DARK else Theme.DARK


class WidgetKind(Enum):
    """
    테마 적용 시 위젯 분류

    위젯은 클래스 속성 ``widget_kind`` 로 자신의 분류를 직접 선언할 수 있고,
    선언하지 않은 경우 타입 테이블로 결정됩니다.
    """
    DRAWING_CANVAS = auto()  # 도형 그리기 캔버스
    PANEL = auto()           # 일반 컨테이너 (QWidget, QFrame, QGroupBox)
    BUTTON = auto()
    TEXT_INPUT = auto()      # QLineEdit, QTextEdit, QPlainTextEdit
    LABEL = auto()
    MENU_BAR = auto()
    MENU = auto()
    MENU_ITEM = auto()       # 메뉴에 포함된 위젯 항목 (QWidgetAction)
    TOOLBAR = auto()
    SCROLL_AREA = auto()
    OTHER = auto()

    @property
    def is_menu_family(self) -> bool:
        return self in (WidgetKind.MENU_BAR, WidgetKind.MENU, WidgetKind.MENU_ITEM)
