from __future__ import annotations

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from ...domain.presentation import LEGEND_TYPES, style_for


class Legend(QWidget):
    def __init__(self) -> None:
        super().__init__()
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(16)
        for work_type in LEGEND_TYPES:
            style = style_for(work_type)
            swatch = QLabel()
            swatch.setFixedSize(14, 14)
            swatch.setStyleSheet(f"background-color:{style.color}; border-radius:4px;")
            layout.addWidget(swatch)
            layout.addWidget(QLabel(style.label))
        layout.addStretch(1)
