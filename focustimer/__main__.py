"""Allow running Focus Timer as a module: python -m focustimer."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .database.db import init_db
from .storage import DatabaseStore
from .app import FocusTimerApp


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db()

    app = QApplication(sys.argv)
    app.setApplicationName("Focus Timer")
    app.setOrganizationName("FocusTimer")

    window = FocusTimerApp(DatabaseStore())
    app.aboutToQuit.connect(window.engine.flush)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
