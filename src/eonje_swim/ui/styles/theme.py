from __future__ import annotations

from typing import Dict

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from ...config import AppPalette

Role = QPalette.ColorRole


def palette_roles(palette: AppPalette) -> Dict[QPalette.ColorRole, str]:
    """Colour per Qt role for the light calendar theme.

    Buttons default to white surfaces; the stylesheet paints the accent ones.
    """

    return {
        Role.Window: palette.background_primary,
        Role.Base: palette.surface,
        Role.AlternateBase: palette.surface_alt,
        Role.Text: palette.text_primary,
        Role.WindowText: palette.text_primary,
        Role.PlaceholderText: palette.text_muted,
        Role.Button: palette.surface,
        Role.ButtonText: palette.text_primary,
        Role.ToolTipBase: palette.accent_dark,
        Role.ToolTipText: palette.background_secondary,
        Role.Highlight: palette.accent_primary,
        Role.HighlightedText: palette.background_secondary,
        Role.BrightText: palette.accent_error,
    }


def apply_palette(app: QApplication, palette: AppPalette) -> None:
    qt_palette = QPalette()
    for role, colour in palette_roles(palette).items():
        qt_palette.setColor(role, QColor(colour))
    app.setPalette(qt_palette)
    app.setStyleSheet(palette.as_stylesheet())
