"""
Category Browser - Main Entry Point

A desktop application for browsing entries through a category hierarchy.
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QFont

from database.base import dispose_all_engines
from database.session import database_session_factory
from gui.main_window import MainWindow
from gui.settings_manager import settings
from gui.styles import get_stylesheet
from services.category_service import CategoryService
from utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    log_file = setup_logging()
    logger.info("Starting category browser", extra={"event": "startup", "log_file": str(log_file)})

    # Database is created on first session (tables + root category)
    service = CategoryService(database_session_factory(settings.database_path))

    app = QApplication(sys.argv)
    app.setApplicationName("Category Browser")
    app.setFont(QFont("Segoe UI", 10))
    app.setStyleSheet(get_stylesheet())
    app.aboutToQuit.connect(dispose_all_engines)

    window = MainWindow(service)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
