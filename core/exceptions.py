"""
PyGeoProver 커스텀 예외 클래스
"""


class GeoProverException(Exception):
    """PyGeoProver 기본 예외"""
    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code
        self.message = message


class DatabaseError(GeoProverException):
    """설정 데이터베이스 오류"""
    def __init__(self, db_path: str, message: str, error_code: str = "DB_ERR"):
        super().__init__(message, error_code)
        self.db_path = db_path
