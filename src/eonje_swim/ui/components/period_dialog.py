from __future__ import annotations

from datetime import date

from PyQt6.QtCore import QDate
from PyQt6.QtWidgets import QDateEdit, QDialog, QDialogButtonBox, QFormLayout, QVBoxLayout, QWidget


def _to_qdate(value: str) -> QDate:
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        parsed = date.today()
    return QDate(parsed.year, parsed.month, parsed.day)


class PeriodDialog(QDialog):
    def __init__(self, *, start: str, end: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Period")
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.start_input = QDateEdit(_to_qdate(start))
        self.start_input.setCalendarPopup(True)
        self.start_input.setDisplayFormat("yyyy.MM.dd")
        form.addRow("From", self.start_input)

        self.end_input = QDateEdit(_to_qdate(end))
        self.end_input.setCalendarPopup(True)
        self.end_input.setDisplayFormat("yyyy.MM.dd")
        form.addRow("To", self.end_input)
        layout.addLayout(form)

        buttons = QDialogButtonBox(QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel)
        buttons.accepted.connect(self.accept)
        buttons.rejected.connect(self.reject)
        layout.addWidget(buttons)

    def values(self) -> tuple[str, str]:
        return (
            self.start_input.date().toString("yyyy-MM-dd"),
            self.end_input.date().toString("yyyy-MM-dd"),
        )
