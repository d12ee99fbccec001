from __future__ import annotations

from typing import List, Sequence

from PyQt6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from ...domain import Member
from ...services.roster import RosterEditor


class RosterDialog(QDialog):
    """Add, rename, remove and reorder members; nothing is saved until Save."""

    def __init__(self, members: Sequence[Member], parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Team members")
        self.resize(460, 560)
        self.editor = RosterEditor(members)

        layout = QVBoxLayout(self)

        add_row = QHBoxLayout()
        self.name_input = QLineEdit()
        self.name_input.setPlaceholderText("New member name")
        self.name_input.textChanged.connect(self._update_buttons)
        self.name_input.returnPressed.connect(self._add_member)
        add_row.addWidget(self.name_input, stretch=1)
        self.add_button = QPushButton("Add")
        self.add_button.clicked.connect(self._add_member)
        add_row.addWidget(self.add_button)
        layout.addLayout(add_row)

        self._rows_host = QWidget()
        self._rows_layout = QVBoxLayout(self._rows_host)
        self._rows_layout.setContentsMargins(0, 0, 0, 0)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._rows_host)
        layout.addWidget(scroll, stretch=1)

        actions = QHBoxLayout()
        cancel = QPushButton("Cancel")
        cancel.setObjectName("secondaryButton")
        cancel.clicked.connect(self.reject)
        actions.addWidget(cancel)
        self.save_button = QPushButton("Save")
        self.save_button.clicked.connect(self.accept)
        actions.addWidget(self.save_button)
        layout.addLayout(actions)

        self._render_rows()

    def members(self) -> List[Member]:
        return list(self.editor.members)

    # ------------------------------------------------------------------ editing

    def _add_member(self) -> None:
        if self.editor.add(self.name_input.text()) is None:
            return
        self.name_input.clear()
        self._render_rows()

    def _rename(self, member_id: str, name: str) -> None:
        self.editor.rename(member_id, name)
        self._update_buttons()

    def _apply(self, action, member_id: str) -> None:
        action(member_id)
        self._render_rows()

    def _render_rows(self) -> None:
        while self._rows_layout.count():
            item = self._rows_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        if not self.editor.members:
            placeholder = QLabel("No members yet.")
            placeholder.setObjectName("emptyState")
            self._rows_layout.addWidget(placeholder)

        last = len(self.editor.members) - 1
        for index, member in enumerate(self.editor.members):
            row = QWidget()
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(0, 0, 0, 0)

            name = QLineEdit(member.name)
            name.textEdited.connect(lambda text, member_id=member.id: self._rename(member_id, text))
            row_layout.addWidget(name, stretch=1)

            up = QPushButton("↑")
            up.setObjectName("secondaryButton")
            up.setEnabled(index > 0)
            up.clicked.connect(lambda _checked=False, member_id=member.id: self._apply(self.editor.move_up, member_id))
            row_layout.addWidget(up)

            down = QPushButton("↓")
            down.setObjectName("secondaryButton")
            down.setEnabled(index < last)
            down.clicked.connect(lambda _checked=False, member_id=member.id: self._apply(self.editor.move_down, member_id))
            row_layout.addWidget(down)

            remove = QPushButton("Remove")
            remove.setObjectName("secondaryButton")
            remove.clicked.connect(lambda _checked=False, member_id=member.id: self._apply(self.editor.remove, member_id))
            row_layout.addWidget(remove)

            self._rows_layout.addWidget(row)
        self._rows_layout.addStretch(1)
        self._update_buttons()

    def _update_buttons(self, *_args) -> None:
        self.add_button.setEnabled(bool(self.name_input.text().strip()))
        self.save_button.setEnabled(self.editor.is_dirty)
