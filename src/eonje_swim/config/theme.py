from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#f1f5f9"
    background_secondary: str = "#ffffff"
    surface: str = "#ffffff"
    surface_alt: str = "#f8fafc"
    accent_primary: str = "#4f46e5"
    accent_primary_hover: str = "#4338ca"
    accent_dark: str = "#0f172a"
    accent_error: str = "#fb7185"
    text_primary: str = "#0f172a"
    text_secondary: str = "#64748b"
    text_muted: str = "#cbd5e1"
    weekend_text: str = "#fb7185"
    border_subtle: str = "#f1f5f9"
    border_strong: str = "#e2e8f0"

    def as_stylesheet(self) -> str:
        """Quick access to a global stylesheet for the PyQt app."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-family: 'Pretendard', 'Helvetica Neue', 'Segoe UI', Arial, sans-serif;
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: #ffffff;
            border: none;
            padding: 10px 16px;
            border-radius: 12px;
            font-weight: 800;
        }}
        QPushButton:hover {{
            background-color: {self.accent_primary_hover};
        }}
        QPushButton:disabled {{
            background-color: {self.border_strong};
            color: {self.text_secondary};
        }}
        QPushButton#secondaryButton {{
            background-color: {self.background_secondary};
            color: {self.text_secondary};
            border: 1px solid {self.border_strong};
        }}
        QPushButton#secondaryButton:hover {{
            color: {self.accent_primary};
            border-color: #c7d2fe;
        }}
        QPushButton#darkButton {{
            background-color: {self.accent_dark};
        }}
        QPushButton#pickerOption {{
            background-color: transparent;
            color: {self.text_secondary};
            text-align: left;
            padding: 10px 14px;
        }}
        QPushButton#pickerOption:hover {{
            background-color: {self.surface_alt};
        }}
        QPushButton#pickerOption[current="true"] {{
            background-color: #eef2ff;
            color: #4338ca;
        }}
        QLineEdit, QDateEdit {{
            background-color: {self.surface_alt};
            color: {self.text_primary};
            border: 1px solid {self.border_strong};
            border-radius: 12px;
            padding: 10px 12px;
            font-weight: 700;
        }}
        QLineEdit:focus, QDateEdit:focus {{
            border-color: {self.accent_primary};
        }}
        QTableWidget {{
            background-color: {self.surface};
            border: 1px solid {self.border_strong};
            border-radius: 24px;
            gridline-color: {self.border_subtle};
        }}
        QHeaderView::section {{
            background-color: {self.surface_alt};
            color: {self.text_secondary};
            border: none;
            padding: 12px 4px;
            font-weight: 800;
        }}
        QFrame#statusPicker {{
            background-color: {self.surface};
            border: 1px solid {self.border_strong};
            border-radius: 20px;
        }}
        QLabel#toast {{
            background-color: {self.accent_dark};
            color: #ffffff;
            border-radius: 18px;
            padding: 10px 22px;
            font-weight: 800;
        }}
        QLabel#heroTitle {{
            font-size: 56px;
            font-weight: 900;
        }}
        QLabel#heroTagline {{
            font-size: 12px;
            font-weight: 900;
            color: {self.accent_primary};
            letter-spacing: 4px;
        }}
        QLabel#heroSubtitle, #periodLabel {{
            font-size: 18px;
            font-weight: 700;
            color: {self.text_secondary};
        }}
        #calendarTitle, #periodLabel {{
            background: transparent;
            border: none;
        }}
        #calendarTitle {{
            color: {self.text_primary};
            font-size: 36px;
            font-weight: 900;
        }}
        QLabel#emptyState {{
            font-size: 22px;
            font-weight: 900;
            color: {self.text_muted};
        }}
        """
