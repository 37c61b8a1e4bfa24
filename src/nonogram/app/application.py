from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import os
import sys
from typing import Optional, Sequence

ORG_ID = "nonogram"
APP_ID = "nonogram"
ORG_DOMAIN = "nonogram.local"

VISIBLE_APP_NAME = "Nonogram"


def create_app(argv: Optional[Sequence[str]] = None) -> QApplication:
    """
    Create and configure the QApplication instance.

    An already running QApplication is reused instead of constructing a
    second one, which Qt does not allow; tests and embedding callers create
    theirs first.
    """
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(list(argv) if argv is not None else sys.argv)

    # Set the visible, translatable display name
    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
