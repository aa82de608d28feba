"""
PyGeoProver Core Module

이 모듈은 애플리케이션 설정과 공용 도메인 타입을 포함합니다.

Modules:
    - enums: 시스템 전체에서 사용되는 열거형
    - exceptions: 커스텀 예외 클래스
    - db_manager: SQLite 설정 저장소
    - config: 설정 관리
"""

from .enums import Theme, WidgetKind
from .exceptions import GeoProverException, DatabaseError
from .config import ConfigManager

__all__ = [
    'Theme',
    'WidgetKind',
    'GeoProverException',
    'DatabaseError',
    'ConfigManager',
]
