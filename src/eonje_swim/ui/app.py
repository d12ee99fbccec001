from __future__ import annotations

import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from ..services.context import ServiceContext
from ..services.shell import ScheduleApp
from .main_window import start_window
from .styles.theme import apply_palette


def run_gui(link: Optional[str] = None) -> None:
    configure_logging()
    app = QApplication.instance() or QApplication(sys.argv)
    settings = get_settings()
    apply_palette(app, AppPalette())

    shell = ScheduleApp(ServiceContext(settings))
    _window = start_window(shell, settings, link=link)
    sys.exit(app.exec())
