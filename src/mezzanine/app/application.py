from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import sys
import os

ORG_ID = "mezzanine"
APP_ID = "mezzanine-generator"

VISIBLE_APP_NAME = "Mezzanine Generator"


def create_app() -> QApplication:
    """Create and configure the QApplication instance (reuses a running one)."""
    existing = QApplication.instance()
    if existing is not None:
        return existing

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
