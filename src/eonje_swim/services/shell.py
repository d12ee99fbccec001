from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional, Sequence

from ..config import AppSettings
from ..domain import Calendar, DailyStats, DayStatus, Member, WorkType
from ..domain.schedule import daily_stats, dates_in_range, day_status, default_period
from ..errors import CalendarNotFoundError, EonjeSwimError, InvalidLinkError, RemoteStoreError
from .calendar import CalendarService, CalendarSnapshot
from .context import ServiceContext
from .links import address_for_token, token_from_address, token_from_link
from .roster import RosterService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Notice:
    message: str
    level: str = "info"
    timeout_ms: int = 3000


@dataclass(frozen=True)
class OperationResult:
    ok: bool
    error: Optional[EonjeSwimError] = None

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: EonjeSwimError) -> "OperationResult":
        return cls(ok=False, error=error)


@dataclass
class AppState:
    """Top-level state owned by :class:`ScheduleApp`."""

    start_date: str
    end_date: str
    address: str = ""
    token: Optional[str] = None
    calendar: Optional[Calendar] = None
    title: str = ""
    members: List[Member] = field(default_factory=list)
    loading: bool = False
    generation: int = 0
    notice: Optional[Notice] = None

    @property
    def has_calendar(self) -> bool:
        return self.token is not None


@dataclass(frozen=True)
class GridRow:
    member: Member
    days: List[DayStatus]


@dataclass(frozen=True)
class GridView:
    dates: List[str]
    rows: List[GridRow]
    stats: List[DailyStats]


NoticeListener = Callable[[Notice], None]
AddressListener = Callable[[str], None]


class ScheduleApp:
    """Application shell: owns :class:`AppState` and routes edits to the backend.

    Status edits are applied locally before they are persisted and are not
    rolled back when persisting fails. Loads carry a generation number so a
    slow response for a calendar the user already left is discarded.
    """

    def __init__(
        self,
        context: ServiceContext,
        *,
        on_notice: Optional[NoticeListener] = None,
        on_address: Optional[AddressListener] = None,
    ) -> None:
        self.context = context
        self.settings: AppSettings = context.settings
        self.calendars = CalendarService(context)
        self.roster = RosterService(context)
        self.on_notice = on_notice
        self.on_address = on_address
        start, end = default_period(span_days=self.settings.calendar.default_span_days)
        self.state = AppState(start_date=start, end_date=end)

    # ------------------------------------------------------------------ notices

    def notify(self, message: str, *, level: str = "info") -> Notice:
        notice = Notice(message=message, level=level, timeout_ms=self.settings.ui.toast_ms)
        self.state.notice = notice
        if self.on_notice is not None:
            self.on_notice(notice)
        return notice

    def dismiss_notice(self) -> None:
        self.state.notice = None

    def _fail(self, error: EonjeSwimError, message: str) -> OperationResult:
        self.notify(message, level="error")
        return OperationResult.failure(error)

    # ------------------------------------------------------------------ addressing

    def _set_address(self, address: str) -> None:
        self.state.address = address
        if self.on_address is not None:
            self.on_address(address)

    def _show_entry_screen(self) -> None:
        self.state.token = None
        self.state.calendar = None
        self.state.title = ""
        self.state.members = []
        self.state.loading = False

    def navigate(self, address: str) -> Optional[int]:
        """React to a change of the entry address.

        Returns the generation of the load the caller must complete, or
        ``None`` when nothing needs loading.
        """

        self.state.address = address
        token = token_from_address(address)
        if token is None:
            self.state.generation += 1
            self._show_entry_screen()
            return None
        if token == self.state.token:
            return None
        return self.begin_load(token)

    def enter_link(self, text: str) -> Optional[str]:
        """Validate a pasted link and return the address to navigate to."""

        try:
            token = token_from_link(text)
        except InvalidLinkError as exc:
            self.notify(str(exc), level="error")
            return None
        address = address_for_token(self.settings.ui.public_url, token)
        self._set_address(address)
        return address

    def open(self, address: str) -> bool:
        generation = self.navigate(address)
        if generation is None:
            return False
        return self._complete(generation, self.state.token)

    # ------------------------------------------------------------------ loading

    def begin_load(self, token: str) -> int:
        self.state.generation += 1
        self.state.token = token
        self.state.loading = True
        return self.state.generation

    def fetch(self, token: str) -> CalendarSnapshot:
        return self.calendars.load(token)

    def apply_load(self, generation: int, snapshot: CalendarSnapshot) -> bool:
        if generation != self.state.generation:
            logger.debug("Discarding stale load %d (current %d)", generation, self.state.generation)
            return False
        self.state.calendar = snapshot.calendar
        self.state.title = snapshot.calendar.name
        self.state.members = snapshot.members
        self.state.loading = False
        return True

    def fail_load(self, generation: int, error: Exception) -> bool:
        if generation != self.state.generation:
            logger.debug("Ignoring failure of stale load %d", generation)
            return False
        if isinstance(error, CalendarNotFoundError):
            logger.warning("Calendar not found: %s", error.token)
            self._show_entry_screen()
            self._set_address(address_for_token(self.settings.ui.public_url, None))
            self.notify("Calendar not found.", level="error")
            return True
        logger.error("Error loading calendar data: %s", error)
        self.state.loading = False
        self.notify("Something went wrong while loading data.", level="error")
        return True

    def load(self, token: str) -> bool:
        return self._complete(self.begin_load(token), token)

    def _complete(self, generation: int, token: Optional[str]) -> bool:
        try:
            snapshot = self.fetch(token)
        except EonjeSwimError as exc:
            self.fail_load(generation, exc)
            return False
        return self.apply_load(generation, snapshot)

    # ------------------------------------------------------------------ calendar
    #
    # Writes come in two halves: the backend call, which never touches
    # ``state``, and an apply/failed step that runs on the thread owning the
    # state. The plain methods chain both for synchronous callers.

    def create_calendar(self, title: Optional[str] = None) -> OperationResult:
        requested = self.state.title if title is None else title
        try:
            calendar = self.calendars.create_calendar(requested)
        except RemoteStoreError as exc:
            return self.creation_failed(exc)
        return self.apply_created(calendar)

    def apply_created(self, calendar: Calendar) -> OperationResult:
        self.state.generation += 1
        self.state.token = calendar.token
        self.state.calendar = calendar
        self.state.title = calendar.name
        self.state.members = []
        self.state.loading = False
        self._set_address(address_for_token(self.settings.ui.public_url, calendar.token))
        self.notify("New calendar created!")
        return OperationResult.success()

    def creation_failed(self, error: EonjeSwimError) -> OperationResult:
        logger.error("Error creating calendar: %s", error)
        return self._fail(error, "Could not create the calendar.")

    def update_title(self, title: str) -> OperationResult:
        token = self.state.token
        if token is None:
            self.state.title = title
            return self.create_calendar(title)
        try:
            self.calendars.rename_calendar(token, title)
        except RemoteStoreError as exc:
            return self.rename_failed(exc)
        return self.apply_title(token, title)

    def apply_title(self, token: str, title: str) -> OperationResult:
        """Record a completed rename; ignored locally if another calendar is open by now."""

        if token == self.state.token:
            self.state.title = title
            if self.state.calendar is not None:
                self.state.calendar.name = title
        self.notify("Title updated.")
        return OperationResult.success()

    def rename_failed(self, error: EonjeSwimError) -> OperationResult:
        logger.error("Error updating title: %s", error)
        return self._fail(error, "Could not update the title.")

    def set_period(self, start: str, end: str) -> None:
        self.state.start_date = start
        self.state.end_date = end

    # ------------------------------------------------------------------ statuses

    def apply_status(self, member_id: str, day: str, work_type: WorkType) -> None:
        for member in self.state.members:
            if member.id == member_id:
                member.statuses = {**member.statuses, day: work_type}
                return

    def persist_status(self, member_id: str, day: str, work_type: WorkType) -> OperationResult:
        try:
            self.calendars.set_status(member_id, day, work_type)
        except RemoteStoreError as exc:
            return self.status_failed(exc)
        return OperationResult.success()

    def status_failed(self, error: EonjeSwimError) -> OperationResult:
        logger.error("Error updating status: %s", error)
        return self._fail(error, "Could not save the status.")

    def update_status(self, member_id: str, day: str, work_type: WorkType) -> OperationResult:
        self.apply_status(member_id, day, work_type)
        return self.persist_status(member_id, day, work_type)

    # ------------------------------------------------------------------ roster

    def save_members(self, working: Sequence[Member]) -> OperationResult:
        calendar = self.state.calendar
        if calendar is None:
            return OperationResult.failure(EonjeSwimError("No calendar is open."))
        try:
            saved = self.roster.save_members(calendar.id, self.state.members, working)
        except RemoteStoreError as exc:
            return self.members_failed(exc)
        return self.apply_members(calendar.id, saved)

    def apply_members(self, calendar_id: int, saved: Sequence[Member]) -> OperationResult:
        """Swap in a saved roster, keeping statuses edited while the save ran."""

        calendar = self.state.calendar
        if calendar is not None and calendar.id == calendar_id:
            current = {member.id: member for member in self.state.members}
            self.state.members = [
                replace(member, statuses=dict(current[member.id].statuses)) if member.id in current else member
                for member in saved
            ]
        self.notify("Team members saved.")
        return OperationResult.success()

    def members_failed(self, error: EonjeSwimError) -> OperationResult:
        logger.error("Error saving members: %s", error)
        return self._fail(error, "Could not save team members.")

    # ------------------------------------------------------------------ sharing

    def share_link(self) -> Optional[str]:
        if self.state.token is None:
            return None
        return address_for_token(self.settings.ui.public_url, self.state.token)

    def copy_link(self, write: Callable[[str], None]) -> OperationResult:
        link = self.share_link()
        if link is None:
            return OperationResult.failure(EonjeSwimError("No calendar is open."))
        write(link)
        self.notify("Share link copied!")
        return OperationResult.success()

    # ------------------------------------------------------------------ rendering

    def grid(self) -> GridView:
        holidays = self.context.holidays
        dates = dates_in_range(self.state.start_date, self.state.end_date)
        rows = [
            GridRow(member=member, days=[day_status(day, member.statuses, holidays) for day in dates])
            for member in self.state.members
        ]
        return GridView(dates=dates, rows=rows, stats=daily_stats(self.state.members, dates, holidays))
