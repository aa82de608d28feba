"""
Configuration Manager
SQLite DB 기반 설정 관리
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass, asdict, field
from loguru import logger

from core.db_manager import DBManager, DEFAULT_APP_NAME, DEFAULT_APP_VERSION
from core.exceptions import DatabaseError


@dataclass
class AppConfig:
    """Application configuration"""
    app_name: str = DEFAULT_APP_NAME
    version: str = DEFAULT_APP_VERSION


@dataclass
class UIConfig:
    """UI configuration"""
    dark_mode: bool = False
    show_grid: bool = True
    grid_spacing: int = 40  # 캔버스 격자 간격 (px)
    window_state: Dict[str, int] = field(default_factory=lambda: {
        "x": 100,
        "y": 100,
        "width": 1280,
        "height": 800
    })


class ConfigManager:
    """
    Singleton class for managing application settings (DB-based)

    Also serves as the persisted dark-mode preference for ThemeManager
    through is_dark_mode() / set_dark_mode().

    Usage:
        config_manager = ConfigManager.get_instance()
        # or
        config_manager = ConfigManager()  # Also returns singleton instance
    """
    _instance: Optional['ConfigManager'] = None
    _initialized: bool = False

    def __new__(cls, *_args, **_kwargs):
        """
        Create or return singleton instance
        """
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self, db_path: str = "PyGeoProver.db"):
        """
        Initialize configuration manager (only once for singleton)

        Args:
            db_path: Path to database file (default: PyGeoProver.db)
        """
        # 이미 초기화되었으면 다시 초기화하지 않음
        if ConfigManager._initialized:
            return

        self.db_path = db_path
        self.db_manager = DBManager(db_path)

        self.app_config = AppConfig()
        self.ui_config = UIConfig()
        self.logging_config: Dict[str, Any] = {}

        self.load_config()

        ConfigManager._initialized = True
        logger.info(f"ConfigManager singleton instance initialized (DB: {db_path})")

    @classmethod
    def get_instance(cls, db_path: str = "PyGeoProver.db") -> 'ConfigManager':
        """
        Get singleton instance of ConfigManager

        Args:
            db_path: Path to database file (only used on first call)

        Returns:
            ConfigManager singleton instance
        """
        if cls._instance is None or not cls._initialized:
            cls._instance = ConfigManager(db_path=db_path)
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """
        Reset singleton instance (mainly for testing)
        """
        if cls._instance and hasattr(cls._instance, 'db_manager'):
            cls._instance.db_manager.close()
        cls._instance = None
        cls._initialized = False
        logger.debug("ConfigManager singleton instance reset")

    def load_config(self) -> bool:
        """
        DB에서 설정 로드

        Returns:
            True if loaded successfully
        """
        try:
            self.app_config = AppConfig(**self.db_manager.get_app_config())
            self.ui_config = UIConfig(**self.db_manager.get_ui_config())
            self.logging_config = self.db_manager.get_logging_config()

            logger.info("설정이 DB에서 로드되었습니다")
            logger.debug(f"UI config: dark_mode={self.ui_config.dark_mode}, show_grid={self.ui_config.show_grid}")
            return True

        except (TypeError, DatabaseError) as e:
            logger.error(f"DB 설정 로드 실패: {e}")
            return False

    def save_config(self) -> bool:
        """
        설정을 DB에 저장 (모든 섹션 포함)

        Returns:
            True if saved successfully
        """
        try:
            logger.debug("Saving app config...")
            self.db_manager.save_app_config(asdict(self.app_config))

            logger.debug("Saving UI config...")
            self.db_manager.save_ui_config(asdict(self.ui_config))

            if self.logging_config:
                logger.debug("Saving logging config...")
                self.db_manager.save_logging_config(self.logging_config)

            logger.info("설정이 DB에 저장되었습니다")
            return True

        except DatabaseError as e:
            logger.error(f"DB 설정 저장 실패: {e}")
            return False

    def save_ui_config(self) -> bool:
        """
        UI 설정만 DB에 저장

        Returns:
            True if saved successfully
        """
        try:
            self.db_manager.save_ui_config(asdict(self.ui_config))
            logger.debug("UI 설정이 DB에 저장되었습니다")
            return True
        except DatabaseError as e:
            logger.error(f"UI 설정 저장 실패: {e}")
            return False

    def is_dark_mode(self) -> bool:
        """Persisted dark-mode preference"""
        return self.ui_config.dark_mode

    def set_dark_mode(self, dark_mode: bool) -> bool:
        """
        Update and persist the dark-mode preference

        Args:
            dark_mode: True for the dark theme

        Returns:
            True if saved successfully
        """
        dark_mode = bool(dark_mode)
        if self.ui_config.dark_mode != dark_mode:
            logger.info(f"Dark mode preference changed: {self.ui_config.dark_mode} -> {dark_mode}")
        self.ui_config.dark_mode = dark_mode
        return self.save_ui_config()

    def get_logging_config(self) -> Dict[str, Any]:
        """
        Get logging configuration

        Returns:
            Logging configuration dictionary
        """
        return self.logging_config

    def update_ui_window_state(self, x: int, y: int, width: int, height: int):
        """
        Update window state in UI configuration

        Args:
            x: Window X position
            y: Window Y position
            width: Window width
            height: Window height
        """
        self.ui_config.window_state = {
            "x": x,
            "y": y,
            "width": width,
            "height": height
        }
        logger.debug(f"Updated window state: x={x}, y={y}, w={width}, h={height}")
