from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QDialog, QFormLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget


class LinkDialog(QDialog):
    """Shows the share link of the open calendar and lets the user rename it."""

    copy_requested = pyqtSignal()

    def __init__(self, *, title: str, share_link: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Link settings")
        self.resize(520, 260)
        layout = QVBoxLayout(self)
        form = QFormLayout()

        self.title_input = QLineEdit(title)
        self.title_input.setPlaceholderText("Calendar name")
        form.addRow("Calendar name", self.title_input)

        link_row = QHBoxLayout()
        self.link_display = QLineEdit(share_link)
        self.link_display.setReadOnly(True)
        link_row.addWidget(self.link_display, stretch=1)
        copy_button = QPushButton("Copy link")
        copy_button.clicked.connect(self.copy_requested)
        link_row.addWidget(copy_button)
        form.addRow("Share link", link_row)
        layout.addLayout(form)

        hint = QLabel("Anyone with this link can view and edit the calendar.")
        hint.setStyleSheet("color:#94a3b8; font-size:12px;")
        layout.addWidget(hint)

        done = QPushButton("Done")
        done.setObjectName("darkButton")
        done.clicked.connect(self.accept)
        layout.addWidget(done)

    def title(self) -> str:
        return self.title_input.text()
