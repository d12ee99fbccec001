from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QGuiApplication
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from ..config.settings import AppSettings
from ..domain import Member
from ..errors import EonjeSwimError
from ..services.calendar import CalendarSnapshot
from ..services.shell import Notice, ScheduleApp
from ..utils.qt import TaskRunner
from .components.attendance_grid import AttendanceGrid
from .components.legend import Legend
from .components.link_dialog import LinkDialog
from .components.period_dialog import PeriodDialog
from .components.roster_dialog import RosterDialog
from .components.toast import Toast
from .components.welcome_panel import WelcomePanel
from .interaction import StatusUpdate

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, *, app: ScheduleApp, settings: AppSettings) -> None:
        super().__init__()
        self.settings = settings
        self.runner = TaskRunner()

        # Backend calls run on the pool; state changes and notices stay on the GUI thread.
        self.app = app
        self.app.on_notice = self._show_notice
        self.app.on_address = self._on_address_changed

        self.setWindowTitle(settings.ui.app_name)
        self.resize(1280, 800)

        self.stack = QStackedWidget()
        self.welcome = WelcomePanel()
        self.stack.addWidget(self.welcome)
        self.stack.addWidget(self._build_calendar_view())
        self.setCentralWidget(self.stack)
        self.toast = Toast(self)

        self.welcome.create_requested.connect(self.create_calendar)
        self.welcome.enter_requested.connect(self.enter_link)

    def _build_calendar_view(self) -> QWidget:
        view = QWidget()
        layout = QVBoxLayout(view)
        layout.setContentsMargins(24, 16, 24, 16)

        header = QHBoxLayout()
        home = QPushButton("언제쉼?")
        home.setObjectName("secondaryButton")
        home.clicked.connect(self.go_home)
        header.addWidget(home)

        self.title_button = QPushButton()
        self.title_button.setObjectName("calendarTitle")
        self.title_button.setFlat(True)
        self.title_button.setToolTip("Rename calendar")
        self.title_button.clicked.connect(self.open_link_settings)
        header.addWidget(self.title_button)
        header.addStretch(1)

        self.period_label = QPushButton()
        self.period_label.setObjectName("periodLabel")
        self.period_label.setFlat(True)
        self.period_label.clicked.connect(self.edit_period)
        header.addWidget(self.period_label)

        link_button = QPushButton("Link settings")
        link_button.setObjectName("secondaryButton")
        link_button.clicked.connect(self.open_link_settings)
        header.addWidget(link_button)

        self.roster_button = QPushButton("Team members")
        self.roster_button.setObjectName("darkButton")
        self.roster_button.clicked.connect(self.edit_members)
        header.addWidget(self.roster_button)
        layout.addLayout(header)

        self.loading_label = QLabel("Loading…")
        self.loading_label.setObjectName("emptyState")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.loading_label)

        self.grid = AttendanceGrid()
        self.grid.status_chosen.connect(self.update_status)
        self.grid.open_roster_requested.connect(self.edit_members)
        layout.addWidget(self.grid, stretch=1)
        layout.addWidget(Legend())
        return view

    # ------------------------------------------------------------------ rendering

    def render(self) -> None:
        state = self.app.state
        if not state.has_calendar:
            self.stack.setCurrentWidget(self.welcome)
            return
        self.stack.setCurrentIndex(1)
        self.title_button.setText(state.title or "Untitled calendar")
        self.period_label.setText(f"{state.start_date.replace('-', '.')} ~ {state.end_date.replace('-', '.')}")
        self.loading_label.setVisible(state.loading)
        self.grid.setVisible(not state.loading)
        self.roster_button.setEnabled(state.calendar is not None)
        if not state.loading:
            self.grid.set_view(self.app.grid())

    def _show_notice(self, notice: Notice) -> None:
        self.toast.show_notice(notice)

    def _on_address_changed(self, address: str) -> None:
        self.statusBar().showMessage(address)

    # ------------------------------------------------------------------ navigation

    def open_address(self, address: str) -> None:
        generation = self.app.navigate(address)
        self.render()
        if generation is None:
            return
        token = self.app.state.token

        def done(snapshot: CalendarSnapshot) -> None:
            if self.app.apply_load(generation, snapshot):
                self.render()

        def failed(exc: Exception) -> None:
            if self.app.fail_load(generation, exc):
                self.render()

        self.runner.submit(self.app.fetch, token, on_success=done, on_error=failed)

    def enter_link(self, text: str) -> None:
        address = self.app.enter_link(text)
        if address is None:
            return
        self.welcome.reset()
        self.open_address(address)

    def go_home(self) -> None:
        self.app.navigate(self.settings.ui.public_url)
        self.statusBar().clearMessage()
        self.render()

    # ------------------------------------------------------------------ actions

    def create_calendar(self, title: str) -> None:
        self.runner.submit(
            self.app.calendars.create_calendar,
            title,
            on_success=self._then_render(self.app.apply_created),
            on_error=self._route_failure(self.app.creation_failed),
        )

    def open_link_settings(self) -> None:
        link = self.app.share_link()
        if link is None:
            return
        dialog = LinkDialog(title=self.app.state.title, share_link=link, parent=self)
        dialog.copy_requested.connect(lambda: self.app.copy_link(QGuiApplication.clipboard().setText))
        if dialog.exec() != LinkDialog.DialogCode.Accepted:
            return
        title = dialog.title()
        token = self.app.state.token
        if title == self.app.state.title or token is None:
            return
        self.runner.submit(
            self.app.calendars.rename_calendar,
            token,
            title,
            on_success=self._then_render(lambda _result: self.app.apply_title(token, title)),
            on_error=self._route_failure(self.app.rename_failed),
        )

    def edit_period(self) -> None:
        state = self.app.state
        dialog = PeriodDialog(start=state.start_date, end=state.end_date, parent=self)
        if dialog.exec() != PeriodDialog.DialogCode.Accepted:
            return
        self.app.set_period(*dialog.values())
        self.render()

    def update_status(self, update: StatusUpdate) -> None:
        self.app.apply_status(update.member_id, update.date, update.work_type)
        self.render()
        self.runner.submit(
            self.app.calendars.set_status,
            update.member_id,
            update.date,
            update.work_type,
            on_error=self._route_failure(self.app.status_failed),
        )

    def edit_members(self) -> None:
        calendar = self.app.state.calendar
        if calendar is None:
            return
        original: List[Member] = list(self.app.state.members)
        dialog = RosterDialog(original, parent=self)
        if dialog.exec() != RosterDialog.DialogCode.Accepted:
            return
        working: List[Member] = dialog.members()
        self.runner.submit(
            self.app.roster.save_members,
            calendar.id,
            original,
            working,
            on_success=self._then_render(lambda saved: self.app.apply_members(calendar.id, saved)),
            on_error=self._route_failure(self.app.members_failed),
        )

    # ------------------------------------------------------------------ misc

    def _then_render(self, apply: Callable[[Any], Any]) -> Callable[[Any], None]:
        def done(result: Any) -> None:
            apply(result)
            self.render()

        return done

    def _route_failure(self, handler: Callable[[EonjeSwimError], Any]) -> Callable[[Exception], None]:
        def failed(exc: Exception) -> None:
            if isinstance(exc, EonjeSwimError):
                handler(exc)
            else:
                self._handle_error(exc)
            self.render()

        return failed

    def _handle_error(self, exc: Exception) -> None:
        logger.error("Unexpected error", exc_info=exc)
        self.app.notify("Something went wrong.", level="error")

    def resizeEvent(self, event) -> None:  # noqa: N802
        super().resizeEvent(event)
        if self.toast.isVisible():
            self.toast.move((self.width() - self.toast.width()) // 2, 24)


def start_window(app: ScheduleApp, settings: AppSettings, *, link: Optional[str] = None) -> MainWindow:
    window = MainWindow(app=app, settings=settings)
    window.show()
    if link:
        window.enter_link(link)
    else:
        window.render()
    return window
