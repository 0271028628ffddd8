from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

# pyvistaqt resolves its Qt binding through qtpy; must be set before it is imported
os.environ.setdefault("QT_API", "pyside6")

APP_ID = "barycentric-explorer"

VISIBLE_APP_NAME = "Barycentric Explorer"


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
