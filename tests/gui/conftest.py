"""Shared fixtures for GUI tests."""

from __future__ import annotations

import os

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qt_app():
    """Provide a QApplication instance for GUI tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    app.processEvents()
    yield app
    app.processEvents()
