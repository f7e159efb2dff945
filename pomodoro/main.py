from __future__ import annotations

"""Точка входа Pomodoro Timer.

Модуль настраивает логирование, создает Qt-приложение и главное окно.
"""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from pomodoro.core.constants import WINDOW_TITLE
from pomodoro.core.logging_setup import configure_logging
from pomodoro.ui.main_window import MainWindow
from pomodoro.ui.styles import apply_theme

log = logging.getLogger(__name__)


def main() -> int:
    """Создает окно таймера и запускает UI-цикл."""
    configure_logging()
    try:
        app = QApplication(sys.argv)
        app.setApplicationName(WINDOW_TITLE)
        apply_theme(app)
        window = MainWindow()
        window.show()
    except Exception:
        log.exception("Could not initialise the timer window")
        return 1
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
