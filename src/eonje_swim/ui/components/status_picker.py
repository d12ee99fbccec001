from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QPoint, QRect, pyqtSignal
from PyQt6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from ...domain import WorkType
from ...domain.presentation import PICKER_TYPES, style_for
from ...utils.geometry import Rect, Size, place_popover


class StatusPicker(QFrame):
    """Floating list of selectable statuses for one grid cell."""

    chosen = pyqtSignal(object)

    def __init__(self, parent: QWidget) -> None:
        super().__init__(parent)
        self.setObjectName("statusPicker")
        self.setMinimumWidth(210)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(6)

        heading = QLabel("Change status")
        heading.setStyleSheet("color:#94a3b8; font-weight:900; letter-spacing:2px;")
        layout.addWidget(heading)

        self._buttons: dict[WorkType, QPushButton] = {}
        for work_type in PICKER_TYPES:
            style = style_for(work_type)
            button = QPushButton(f"■  {style.label}")
            button.setObjectName("pickerOption")
            button.clicked.connect(lambda _checked=False, kind=work_type: self.chosen.emit(kind))
            layout.addWidget(button)
            self._buttons[work_type] = button
        self.hide()

    def mark_current(self, current: Optional[WorkType]) -> None:
        for work_type, button in self._buttons.items():
            button.setProperty("current", "true" if work_type == current else "false")
            button.style().unpolish(button)
            button.style().polish(button)

    def place(self, anchor: QRect) -> None:
        """Position next to ``anchor`` (in parent coordinates) inside the parent's bounds."""

        self.adjustSize()
        parent = self.parentWidget()
        origin = place_popover(
            Rect(anchor.x(), anchor.y(), anchor.width(), anchor.height()),
            Size(self.width(), self.height()),
            Size(parent.width(), parent.height()),
        )
        self.move(QPoint(int(origin.x), int(origin.y)))
        self.raise_()
