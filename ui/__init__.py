"""
PyGeoProver UI

Modules:
    - theme: 라이트/다크 테마 시스템
    - main_window: 메인 윈도우
    - drawing_canvas: 작도 캔버스
    - preferences_dialog: 환경설정 다이얼로그
    - widgets: 커스텀 위젯
"""
