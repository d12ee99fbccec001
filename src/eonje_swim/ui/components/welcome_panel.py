from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QInputDialog, QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget


class WelcomePanel(QWidget):
    """Entry screen: create a calendar or join one from a shared link."""

    create_requested = pyqtSignal(str)
    enter_requested = pyqtSignal(str)

    def __init__(self) -> None:
        super().__init__()
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.setSpacing(14)

        tagline = QLabel("EONJE SWIM?")
        tagline.setObjectName("heroTagline")
        tagline.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(tagline)

        title = QLabel("언제쉼?")
        title.setObjectName("heroTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        subtitle = QLabel("Share your team's work schedule at a glance")
        subtitle.setObjectName("heroSubtitle")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(subtitle)
        layout.addSpacing(32)

        create_button = QPushButton("Create a new calendar")
        create_button.clicked.connect(self._ask_title)
        layout.addWidget(create_button)
        layout.addSpacing(24)

        self.link_input = QLineEdit()
        self.link_input.setPlaceholderText("Shared link or calendar ID")
        self.link_input.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.link_input.returnPressed.connect(self._enter)
        layout.addWidget(self.link_input)

        enter_button = QPushButton("Join calendar")
        enter_button.setObjectName("darkButton")
        enter_button.clicked.connect(self._enter)
        layout.addWidget(enter_button)

    def _ask_title(self) -> None:
        title, accepted = QInputDialog.getText(self, "New calendar", "Name (e.g. Platform team)")
        if accepted:
            self.create_requested.emit(title)

    def _enter(self) -> None:
        self.enter_requested.emit(self.link_input.text())

    def reset(self) -> None:
        self.link_input.clear()
