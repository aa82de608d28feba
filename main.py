#!/usr/bin/env python3
"""
PyGeoProver - Geometry construction and proving tool
Main application entry point
"""

import sys
import argparse
from pathlib import Path

# Add current directory to path for imports
current_dir = Path(__file__).parent
sys.path.insert(0, str(current_dir))

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt
from loguru import logger

from core.config import ConfigManager
from core.db_manager import default_logging_config
from core.exceptions import DatabaseError
from ui.theme import ThemeManager
from ui.main_window import MainWindow


def setup_logging(debug: bool = False, db_path: str = "PyGeoProver.db"):
    """
    Configure loguru sinks from the logging table of the settings database

    Args:
        debug: Force DEBUG level on every sink
        db_path: Path to settings database
    """
    logger.remove()

    defaults = default_logging_config()
    try:
        logging_config = ConfigManager.get_instance(db_path=db_path).get_logging_config()
    except DatabaseError as e:
        print(f"Warning: Failed to load logging config: {e}. Using defaults.", file=sys.stderr)
        logging_config = defaults

    if not logging_config.get('enabled', True):
        return

    console_config = {**defaults['console'], **logging_config.get('console', {})}
    if console_config['enabled']:
        logger.add(
            sys.stdout,
            format=console_config['format'],
            level="DEBUG" if debug else console_config['level'],
            colorize=console_config['colorize']
        )

    file_config = {**defaults['file'], **logging_config.get('file', {})}
    if file_config['enabled']:
        log_path = Path(logging_config.get('log_path', defaults['log_path']))
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path / file_config['filename'],
            format=file_config['format'],
            level="DEBUG" if debug else file_config['level'],
            rotation=file_config['rotation'],
            retention=file_config['retention']
        )

    logger.info("Logging initialized from configuration")


def main():
    """Main application entry point"""
    parser = argparse.ArgumentParser(description="PyGeoProver - Geometry construction and proving tool")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--db", type=str, default="PyGeoProver.db", help="Path to settings database")
    parser.add_argument("--theme", choices=["light", "dark"], help="Start with this theme and remember it")
    args = parser.parse_args()

    setup_logging(debug=args.debug, db_path=args.db)
    logger.info("Starting PyGeoProver application...")

    try:
        config_manager = ConfigManager.get_instance(db_path=args.db)
    except DatabaseError as e:
        logger.error(f"Cannot open settings database: {e}")
        sys.exit(1)

    # Create Qt application
    if hasattr(Qt, 'AA_EnableHighDpiScaling'):
        QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)
    if hasattr(Qt, 'AA_UseHighDpiPixmaps'):
        QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)

    app = QApplication(sys.argv)
    app.setApplicationName(config_manager.app_config.app_name)
    app.setApplicationVersion(config_manager.app_config.version)

    # Theme from persisted preference, optionally overridden on the command line
    theme_manager = ThemeManager(settings=config_manager)
    theme_manager.sync_from_settings()
    if args.theme:
        theme_manager.set_theme(args.theme)
        theme_manager.push_to_settings()
    logger.info(f"Starting with {theme_manager.current_theme.value} theme")

    try:
        window = MainWindow(config_manager, theme_manager)
        window.show()

        logger.success("PyGeoProver application started successfully")
        sys.exit(app.exec_())

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
