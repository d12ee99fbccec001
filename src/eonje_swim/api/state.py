from __future__ import annotations

from dataclasses import dataclass, field

from ..services import CalendarService, RosterService, ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    calendar: CalendarService = field(init=False)
    roster: RosterService = field(init=False)

    def __post_init__(self) -> None:
        self.bind(self.context)

    def bind(self, context: ServiceContext) -> None:
        self.context = context
        self.calendar = CalendarService(context)
        self.roster = RosterService(context)


api_state = ApiState()
