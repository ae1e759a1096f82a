"""Process-wide QApplication for the viewer."""

from __future__ import annotations

import sys
from typing import cast

from PySide6.QtWidgets import QApplication

APP_NAME = "MD Reader"
# Same id as the console script.
DESKTOP_FILE_NAME = "mdreader-py"

_APP: QApplication | None = None


def get_app() -> QApplication:
    """Return the running QApplication, creating and naming it on first use."""
    global _APP
    if _APP is None:
        _APP = cast(QApplication, QApplication.instance()) or QApplication(sys.argv)
        _APP.setApplicationName(APP_NAME)
        QApplication.setDesktopFileName(DESKTOP_FILE_NAME)
    return _APP
