from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict

from .enums import WorkType

PROVISIONAL_PREFIX = "member-"


def _parse_date(value: Any) -> str:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        return date.fromisoformat(value[:10]).isoformat()
    raise ValueError(f"Unsupported date value: {value!r}")


@dataclass(slots=True)
class Calendar:
    id: int
    token: str
    name: str

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Calendar":
        return cls(
            id=int(record["id"]),
            token=str(record["uuid"]),
            name=record.get("name") or "",
        )

    def to_record(self) -> Dict[str, Any]:
        return {"uuid": self.token, "name": self.name}


@dataclass(slots=True)
class Member:
    id: str
    name: str
    calendar_id: int | None = None
    position: int = 0
    statuses: Dict[str, WorkType] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Member":
        return cls(
            id=str(record["id"]),
            name=str(record["name"]),
            calendar_id=record.get("calendar_id"),
            position=int(record.get("position") or 0),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "calendar_id": self.calendar_id,
            "name": self.name,
            "position": self.position,
        }

    @property
    def is_provisional(self) -> bool:
        return self.id.startswith(PROVISIONAL_PREFIX)

    @property
    def backend_id(self) -> int:
        return int(self.id)


@dataclass(slots=True, frozen=True)
class ScheduleEntry:
    member_id: str
    date: str
    work_type: WorkType

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "ScheduleEntry":
        return cls(
            member_id=str(record["member_id"]),
            date=_parse_date(record["date"]),
            work_type=WorkType(record.get("work_type") or WorkType.NONE),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "member_id": int(self.member_id),
            "date": self.date,
            "work_type": self.work_type.value,
        }


@dataclass(slots=True, frozen=True)
class DayStatus:
    date: str
    is_weekend: bool
    is_holiday: bool
    work_type: WorkType

    @property
    def is_locked(self) -> bool:
        """Weekend and holiday cells are not editable from the grid."""

        return self.is_weekend or self.is_holiday


@dataclass(slots=True, frozen=True)
class DailyStats:
    date: str
    label: str
    leave_count: int
    working_count: int
