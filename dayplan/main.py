from __future__ import annotations

"""Точка входа приложения Day Plan.

Модуль настраивает логирование, читает настройки окружения, создает
Qt-приложение и контроллер иконки в трее, который запускает тики раз в секунду.
"""

import sys

from PyQt6.QtWidgets import QApplication

from dayplan.core.logger import setup_logger
from dayplan.core.settings import RuntimeSettings
from dayplan.ui.styles import apply_theme
from dayplan.ui.tray import TrayController



def main() -> int:
    """Создает зависимости приложения и запускает главный UI-цикл."""
    runtime = RuntimeSettings()
    setup_logger(level=runtime.log_level, log_file=runtime.log_file)

    app = QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)
    apply_theme(app)

    controller = TrayController(runtime, app)
    if controller.settings.dev_mode:
        controller.show_window()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
