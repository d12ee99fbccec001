from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QEvent, QObject, QRect, Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QApplication,
    QHeaderView,
    QLabel,
    QPushButton,
    QStackedLayout,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ...domain import WorkType
from ...domain.presentation import cell_color, cell_label, cell_text_color, wrap_member_name
from ...services.shell import GridView
from ..interaction import CellRef, GridInteraction
from .status_picker import StatusPicker

_WEEKEND_HEADER = QColor("#fb7185")


class AttendanceGrid(QWidget):
    """Members x dates table; clicking an editable cell opens the status picker."""

    status_chosen = pyqtSignal(object)
    open_roster_requested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.interaction = GridInteraction()
        self._view: Optional[GridView] = None
        self._picker: Optional[StatusPicker] = None

        self._stack = QStackedLayout(self)

        self.table = QTableWidget()
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self.table.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Fixed)
        self.table.horizontalHeader().setDefaultSectionSize(80)
        self.table.verticalHeader().setDefaultSectionSize(64)
        self.table.cellClicked.connect(self._on_cell_clicked)
        self.table.horizontalScrollBar().valueChanged.connect(self._reposition_picker)
        self.table.verticalScrollBar().valueChanged.connect(self._reposition_picker)
        self._stack.addWidget(self.table)

        self._no_members = QWidget()
        empty_layout = QVBoxLayout(self._no_members)
        empty_layout.addStretch(1)
        empty_label = QLabel("Nobody has been added yet.")
        empty_label.setObjectName("emptyState")
        empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        empty_layout.addWidget(empty_label)
        add_button = QPushButton("Add team members")
        add_button.setObjectName("darkButton")
        add_button.clicked.connect(self.open_roster_requested)
        empty_layout.addWidget(add_button, alignment=Qt.AlignmentFlag.AlignCenter)
        empty_layout.addStretch(1)
        self._stack.addWidget(self._no_members)

        self._no_dates = QLabel("No dates in the selected period")
        self._no_dates.setObjectName("emptyState")
        self._no_dates.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._stack.addWidget(self._no_dates)

    # ------------------------------------------------------------------ rendering

    def set_view(self, view: GridView) -> None:
        self._view = view
        if not view.rows:
            self._close_picker()
            self._stack.setCurrentWidget(self._no_members)
            return
        if not view.dates:
            self._close_picker()
            self._stack.setCurrentWidget(self._no_dates)
            return

        self._stack.setCurrentWidget(self.table)
        self.table.clear()
        self.table.setRowCount(len(view.rows))
        self.table.setColumnCount(len(view.dates))

        for column, stats in enumerate(view.stats):
            header = QTableWidgetItem(stats.label.replace(" ", "\n"))
            header.setToolTip(f"On leave: {stats.leave_count} · Working: {stats.working_count}")
            if view.rows[0].days[column].is_weekend:
                header.setForeground(_WEEKEND_HEADER)
            self.table.setHorizontalHeaderItem(column, header)

        for row_index, row in enumerate(view.rows):
            name_item = QTableWidgetItem("\n".join(wrap_member_name(row.member.name)))
            self.table.setVerticalHeaderItem(row_index, name_item)
            for column, status in enumerate(row.days):
                item = QTableWidgetItem(cell_label(status.work_type))
                item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
                color = cell_color(status.work_type)
                if color != "transparent":
                    item.setBackground(QColor(color))
                item.setForeground(QColor(cell_text_color(status.work_type)))
                if status.is_locked:
                    item.setFlags(Qt.ItemFlag.ItemIsEnabled)
                self.table.setItem(row_index, column, item)

        if self.interaction.active is not None and self._locate(self.interaction.active) is None:
            self._close_picker()

    # ------------------------------------------------------------------ picker

    def _locate(self, cell: CellRef) -> Optional[tuple[int, int]]:
        if self._view is None:
            return None
        for row_index, row in enumerate(self._view.rows):
            if row.member.id != cell.member_id:
                continue
            for column, status in enumerate(row.days):
                if status.date == cell.date:
                    return row_index, column
        return None

    def _ensure_picker(self) -> StatusPicker:
        if self._picker is None:
            host = self.window()
            self._picker = StatusPicker(host)
            self._picker.chosen.connect(self._on_status_chosen)
            host.installEventFilter(self)
            QApplication.instance().installEventFilter(self)
        return self._picker

    def _on_cell_clicked(self, row_index: int, column: int) -> None:
        if self._view is None:
            return
        row = self._view.rows[row_index]
        status = row.days[column]
        if status.is_locked:
            return
        active = self.interaction.activate(row.member.id, status.date)
        if active is None:
            self._close_picker()
            return
        picker = self._ensure_picker()
        picker.mark_current(status.work_type)
        picker.show()
        self._reposition_picker()

    def _on_status_chosen(self, work_type: WorkType) -> None:
        update = self.interaction.choose(work_type)
        self._close_picker()
        if update is not None:
            self.status_chosen.emit(update)

    def _close_picker(self) -> None:
        self.interaction.dismiss()
        if self._picker is not None:
            self._picker.hide()

    def _anchor_rect(self, row_index: int, column: int) -> QRect:
        rect = self.table.visualRect(self.table.model().index(row_index, column))
        viewport = self.table.viewport()
        top_left = viewport.mapTo(self.window(), rect.topLeft())
        return QRect(top_left, rect.size())

    def _reposition_picker(self, *_args) -> None:
        if self._picker is None or self.interaction.active is None:
            return
        location = self._locate(self.interaction.active)
        if location is None:
            self._close_picker()
            return
        self._picker.place(self._anchor_rect(*location))

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802
        if self._picker is None or not self._picker.isVisible():
            return False
        if watched is self.window() and event.type() == QEvent.Type.Resize:
            self._reposition_picker()
        elif event.type() == QEvent.Type.MouseButtonPress and isinstance(watched, QWidget):
            global_pos = event.globalPosition().toPoint()
            inside_picker = self._picker.rect().contains(self._picker.mapFromGlobal(global_pos))
            inside_table = self.table.viewport().rect().contains(self.table.viewport().mapFromGlobal(global_pos))
            if not inside_picker and not inside_table:
                self._close_picker()
        return False

