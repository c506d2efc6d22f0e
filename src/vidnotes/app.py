from __future__ import annotations

import sys

from PySide6.QtCore import Qt
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QApplication
from qfluentwidgets import Theme, setTheme

from .core.config_manager import config_manager
from .utils.logger import logger
from .utils.paths import resource_path

_THEMES = {"dark": Theme.DARK, "light": Theme.LIGHT, "auto": Theme.AUTO}


def main() -> None:
    app = QApplication(sys.argv)
    app.setAttribute(Qt.ApplicationAttribute.AA_DontCreateNativeWidgetSiblings)

    icon_path = resource_path("assets", "logo.png")
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))

    setTheme(_THEMES.get(config_manager.get("theme"), Theme.DARK))

    # Import the UI after QApplication exists so no Qt font work happens at import time
    from .ui.main_window import MainWindow

    logger.info("[App] Starting VidNotes")
    window = MainWindow()
    window.show()

    sys.exit(app.exec())
