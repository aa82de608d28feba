"""
Database Manager
SQLite 데이터베이스 기반 설정 관리
"""

import sqlite3
import threading
from typing import Dict, Any
from loguru import logger

from core.exceptions import DatabaseError


DEFAULT_APP_NAME = "PyGeoProver"
DEFAULT_APP_VERSION = "1.0.0"

DEFAULT_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>"
)
DEFAULT_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS app (
    app_idx INTEGER PRIMARY KEY AUTOINCREMENT,
    app_name TEXT NOT NULL DEFAULT 'PyGeoProver',
    version TEXT NOT NULL DEFAULT '1.0.0'
);

CREATE TABLE IF NOT EXISTS ui (
    ui_idx INTEGER PRIMARY KEY AUTOINCREMENT,
    dark_mode INTEGER NOT NULL DEFAULT 0,
    show_grid INTEGER NOT NULL DEFAULT 1,
    grid_spacing INTEGER NOT NULL DEFAULT 40,
    window_state_x INTEGER NOT NULL DEFAULT 100,
    window_state_y INTEGER NOT NULL DEFAULT 100,
    window_state_width INTEGER NOT NULL DEFAULT 1280,
    window_state_height INTEGER NOT NULL DEFAULT 800
);

CREATE TABLE IF NOT EXISTS logging (
    logging_idx INTEGER PRIMARY KEY AUTOINCREMENT,
    enabled INTEGER NOT NULL DEFAULT 1,
    log_path TEXT NOT NULL DEFAULT './logs',
    console_enabled INTEGER NOT NULL DEFAULT 1,
    console_level TEXT NOT NULL DEFAULT 'INFO',
    console_colorize INTEGER NOT NULL DEFAULT 1,
    console_format TEXT,
    file_enabled INTEGER NOT NULL DEFAULT 1,
    file_level TEXT NOT NULL DEFAULT 'DEBUG',
    file_filename TEXT NOT NULL DEFAULT 'pygeoprover_{time:YYYY-MM-DD}.log',
    file_rotation TEXT NOT NULL DEFAULT '1 day',
    file_retention TEXT NOT NULL DEFAULT '7 days',
    file_format TEXT
);
"""


def default_ui_config() -> Dict[str, Any]:
    return {
        "dark_mode": False,
        "show_grid": True,
        "grid_spacing": 40,
        "window_state": {"x": 100, "y": 100, "width": 1280, "height": 800},
    }


def default_logging_config() -> Dict[str, Any]:
    return {
        "enabled": True,
        "log_path": "./logs",
        "console": {
            "enabled": True,
            "level": "INFO",
            "colorize": True,
            "format": DEFAULT_CONSOLE_FORMAT,
        },
        "file": {
            "enabled": True,
            "level": "DEBUG",
            "filename": "pygeoprover_{time:YYYY-MM-DD}.log",
            "rotation": "1 day",
            "retention": "7 days",
            "format": DEFAULT_FILE_FORMAT,
        },
    }


class DBManager:
    """
    SQLite 데이터베이스 관리 클래스
    설정 정보를 데이터베이스에 저장하고 조회하는 기능 제공
    """

    def __init__(self, db_path: str = "PyGeoProver.db"):
        """
        DBManager 초기화

        Args:
            db_path: 데이터베이스 파일 경로

        Raises:
            DatabaseError: 파일을 열 수 없거나 SQLite 데이터베이스가 아닌 경우
        """
        self.db_path = db_path
        self.lock = threading.RLock()
        self.conn = None

        try:
            self.conn = sqlite3.connect(db_path, timeout=30.0, check_same_thread=False)
            self.conn.row_factory = sqlite3.Row

            # WAL 모드 활성화 (읽기/쓰기 동시 처리 가능)
            self.conn.execute("PRAGMA journal_mode=WAL")
            self.conn.execute("PRAGMA synchronous=NORMAL")

            self._init_schema()
        except sqlite3.Error as e:
            logger.error(f"Failed to open database {db_path}: {e}")
            self.close()
            raise DatabaseError(db_path, f"Failed to open database: {e}") from e

        logger.info(f"DBManager initialized: {db_path}")

    def _init_schema(self):
        """데이터베이스 스키마 초기화"""
        with self.lock:
            self.conn.executescript(SCHEMA_SQL)
            self.conn.commit()
        logger.debug("Database schema initialized")

    def close(self):
        """데이터베이스 연결 종료"""
        if self.conn:
            self.conn.close()
            self.conn = None
            logger.debug("Database connection closed")

    def get_record_count(self, table_name: str) -> int:
        """
        테이블의 레코드 개수 반환

        Args:
            table_name: 테이블 이름

        Returns:
            레코드 개수
        """
        try:
            with self.lock:
                cursor = self.conn.execute(f"SELECT COUNT(*) FROM {table_name}")
                return cursor.fetchone()[0]
        except sqlite3.Error as e:
            logger.error(f"Failed to get record count from {table_name}: {e}")
            return 0

    # ========== 데이터 타입 변환 유틸리티 ==========

    def _flatten_window_state(self, window_state: dict) -> dict:
        """
        window_state nested dict → flat dict 변환

        Args:
            window_state: {"x": 100, "y": 100, "width": 1280, "height": 800}

        Returns:
            {"window_state_x": 100, "window_state_y": 100, ...}
        """
        return {
            "window_state_x": window_state.get("x", 100),
            "window_state_y": window_state.get("y", 100),
            "window_state_width": window_state.get("width", 1280),
            "window_state_height": window_state.get("height", 800),
        }

    def _unflatten_window_state(self, data: dict) -> dict:
        """flat dict → window_state nested dict 변환"""
        return {
            "x": data.get("window_state_x", 100),
            "y": data.get("window_state_y", 100),
            "width": data.get("window_state_width", 1280),
            "height": data.get("window_state_height", 800),
        }

    def _unflatten_logging_config(self, data: dict) -> dict:
        return {
            "enabled": bool(data["enabled"]),
            "log_path": data["log_path"],
            "console": {
                "enabled": bool(data["console_enabled"]),
                "level": data["console_level"],
                "colorize": bool(data["console_colorize"]),
                "format": data.get("console_format") or DEFAULT_CONSOLE_FORMAT,
            },
            "file": {
                "enabled": bool(data["file_enabled"]),
                "level": data["file_level"],
                "filename": data["file_filename"],
                "rotation": data["file_rotation"],
                "retention": data["file_retention"],
                "format": data.get("file_format") or DEFAULT_FILE_FORMAT,
            },
        }

    # ========== 조회 ==========

    def get_app_config(self) -> dict:
        """
        app 테이블 → dict 반환

        Returns:
            {"app_name": "PyGeoProver", "version": "1.0.0"}
        """
        default = {"app_name": DEFAULT_APP_NAME, "version": DEFAULT_APP_VERSION}
        try:
            with self.lock:
                row = self.conn.execute("SELECT * FROM app LIMIT 1").fetchone()
            if row:
                return {"app_name": row["app_name"], "version": row["version"]}
            return default
        except sqlite3.Error as e:
            logger.error(f"Failed to get app config: {e}")
            return default

    def get_ui_config(self) -> dict:
        """
        ui 테이블 → dict 반환 (nested 구조로 변환)

        Returns:
            {"dark_mode": False, "show_grid": True, "grid_spacing": 40, "window_state": {...}}
        """
        try:
            with self.lock:
                row = self.conn.execute("SELECT * FROM ui LIMIT 1").fetchone()
            if not row:
                return default_ui_config()

            data = dict(row)
            return {
                "dark_mode": bool(data["dark_mode"]),
                "show_grid": bool(data["show_grid"]),
                "grid_spacing": data["grid_spacing"],
                "window_state": self._unflatten_window_state(data),
            }
        except sqlite3.Error as e:
            logger.error(f"Failed to get ui config: {e}")
            return default_ui_config()

    def get_logging_config(self) -> dict:
        """
        logging 테이블 → dict (nested 구조)

        Returns:
            {"enabled": True, "log_path": "./logs", "console": {...}, "file": {...}}
        """
        try:
            with self.lock:
                row = self.conn.execute("SELECT * FROM logging LIMIT 1").fetchone()
            if row:
                return self._unflatten_logging_config(dict(row))
            return default_logging_config()
        except sqlite3.Error as e:
            logger.error(f"Failed to get logging config: {e}")
            return default_logging_config()

    # ========== 저장 ==========

    def save_app_config(self, data: dict):
        """
        dict → app 테이블 UPDATE/INSERT

        Args:
            data: {"app_name": "PyGeoProver", "version": "1.0.0"}
        """
        values = (
            data.get("app_name", DEFAULT_APP_NAME),
            data.get("version", DEFAULT_APP_VERSION),
        )
        try:
            with self.lock:
                # 기존 레코드가 있으면 UPDATE, 없으면 INSERT
                if self.get_record_count("app") > 0:
                    self.conn.execute(
                        """
                        UPDATE app SET app_name = ?, version = ?
                        WHERE app_idx = (SELECT MIN(app_idx) FROM app)
                        """,
                        values
                    )
                else:
                    self.conn.execute(
                        "INSERT INTO app (app_name, version) VALUES (?, ?)",
                        values
                    )
                self.conn.commit()
            logger.debug("app config saved")
        except sqlite3.Error as e:
            logger.error(f"Failed to save app config: {e}")
            raise DatabaseError(self.db_path, f"Failed to save app config: {e}") from e

    def save_ui_config(self, data: dict):
        """
        dict → ui 테이블 UPDATE/INSERT (flat 구조로 변환)

        Args:
            data: {"dark_mode": True, "show_grid": True, "window_state": {...}, ...}
        """
        flat = {
            "dark_mode": int(bool(data.get("dark_mode", False))),
            "show_grid": int(bool(data.get("show_grid", True))),
            "grid_spacing": int(data.get("grid_spacing", 40)),
        }
        flat.update(self._flatten_window_state(data.get("window_state", {})))

        values = (
            flat["dark_mode"],
            flat["show_grid"],
            flat["grid_spacing"],
            flat["window_state_x"],
            flat["window_state_y"],
            flat["window_state_width"],
            flat["window_state_height"],
        )
        try:
            with self.lock:
                if self.get_record_count("ui") > 0:
                    self.conn.execute(
                        """
                        UPDATE ui SET
                            dark_mode = ?,
                            show_grid = ?,
                            grid_spacing = ?,
                            window_state_x = ?,
                            window_state_y = ?,
                            window_state_width = ?,
                            window_state_height = ?
                        WHERE ui_idx = (SELECT MIN(ui_idx) FROM ui)
                        """,
                        values
                    )
                else:
                    self.conn.execute(
                        """
                        INSERT INTO ui (
                            dark_mode, show_grid, grid_spacing,
                            window_state_x, window_state_y, window_state_width, window_state_height
                        ) VALUES (?, ?, ?, ?, ?, ?, ?)
                        """,
                        values
                    )
                self.conn.commit()
            logger.debug("ui config saved")
        except sqlite3.Error as e:
            logger.error(f"Failed to save ui config: {e}")
            raise DatabaseError(self.db_path, f"Failed to save ui config: {e}") from e

    def save_logging_config(self, data: dict):
        """
        dict (nested) → logging 테이블 UPDATE/INSERT

        Args:
            data: {"enabled": True, "console": {...}, "file": {...}}
        """
        defaults = default_logging_config()
        console = {**defaults["console"], **data.get("console", {})}
        file = {**defaults["file"], **data.get("file", {})}

        values = (
            int(bool(data.get("enabled", True))),
            data.get("log_path", defaults["log_path"]),
            int(bool(console["enabled"])),
            console["level"],
            int(bool(console["colorize"])),
            console["format"],
            int(bool(file["enabled"])),
            file["level"],
            file["filename"],
            file["rotation"],
            file["retention"],
            file["format"],
        )
        try:
            with self.lock:
                if self.get_record_count("logging") > 0:
                    self.conn.execute(
                        """
                        UPDATE logging SET
                            enabled = ?,
                            log_path = ?,
                            console_enabled = ?,
                            console_level = ?,
                            console_colorize = ?,
                            console_format = ?,
                            file_enabled = ?,
                            file_level = ?,
                            file_filename = ?,
                            file_rotation = ?,
                            file_retention = ?,
                            file_format = ?
                        WHERE logging_idx = (SELECT MIN(logging_idx) FROM logging)
                        """,
                        values
                    )
                else:
                    self.conn.execute(
                        """
                        INSERT INTO logging (
                            enabled, log_path,
                            console_enabled, console_level, console_colorize, console_format,
                            file_enabled, file_level, file_filename, file_rotation, file_retention, file_format
                        ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                        """,
                        values
                    )
                self.conn.commit()
            logger.debug("logging config saved")
        except sqlite3.Error as e:
            logger.error(f"Failed to save logging config: {e}")
            raise DatabaseError(self.db_path, f"Failed to save logging config: {e}") from e
