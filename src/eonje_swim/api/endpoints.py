from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from ..domain import Member, WorkType
from ..domain.presentation import PICKER_TYPES, WORK_TYPE_STYLES
from ..domain.schedule import daily_stats, dates_in_range, day_status, default_period
from ..errors import InvalidInputError
from ..services.links import address_for_token, token_from_link
from ..services.roster import provisional_id
from ..services.shell import GridRow
from .models import DailyStatsPayload, MemberInput, WorkTypePayload
from .registry import register_api
from .serializers import serialize_calendar, serialize_member, serialize_row
from .state import api_state


def _share_link(token: str) -> str:
    return address_for_token(api_state.context.settings.ui.public_url, token)


def _parse_date(value: str) -> str:
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError as exc:  # noqa: TRY003
        raise InvalidInputError(f"Invalid ISO date: {value}") from exc


def _parse_work_type(value: str) -> WorkType:
    try:
        return WorkType(value)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in WorkType)
        raise InvalidInputError(f"Unknown work type '{value}'. Expected one of: {allowed}") from exc


@register_api(
    "create_calendar",
    description="Create a new shared calendar and return its share link.",
    category="calendar",
    tags=("write",),
)
def create_calendar(title: str = "") -> Dict[str, Any]:
    calendar = api_state.calendar.create_calendar(title)
    return {"calendar": serialize_calendar(calendar, share_link=_share_link(calendar.token))}


@register_api(
    "get_calendar",
    description="Return a calendar with its members and their recorded statuses.",
    category="calendar",
    tags=("read",),
)
def get_calendar(token: str) -> Dict[str, Any]:
    snapshot = api_state.calendar.load(token)
    return {
        "calendar": serialize_calendar(snapshot.calendar, share_link=_share_link(token)),
        "members": [serialize_member(member) for member in snapshot.members],
    }


@register_api(
    "rename_calendar",
    description="Change the display title of a calendar.",
    category="calendar",
    tags=("write",),
)
def rename_calendar(token: str, title: str) -> Dict[str, Any]:
    calendar = api_state.calendar.fetch_calendar(token)
    api_state.calendar.rename_calendar(token, title)
    calendar.name = title
    return {"calendar": serialize_calendar(calendar, share_link=_share_link(token))}


@register_api(
    "calendar_grid",
    description="Resolve every member's effective status for each date of the inclusive range, with daily totals.",
    category="calendar",
    tags=("read", "grid"),
)
def calendar_grid(token: str, start: Optional[str] = None, end: Optional[str] = None) -> Dict[str, Any]:
    context = api_state.context
    default_start, default_end = default_period(span_days=context.settings.calendar.default_span_days)
    first = start or default_start
    last = end or default_end
    snapshot = api_state.calendar.load(token)
    dates = dates_in_range(first, last)
    rows = [
        GridRow(member=member, days=[day_status(day, member.statuses, context.holidays) for day in dates])
        for member in snapshot.members
    ]
    stats = daily_stats(snapshot.members, dates, context.holidays)
    return {
        "calendar": serialize_calendar(snapshot.calendar),
        "start": first,
        "end": last,
        "dates": dates,
        "rows": [serialize_row(row) for row in rows],
        "stats": [DailyStatsPayload.from_domain(item).model_dump() for item in stats],
    }


@register_api(
    "set_status",
    description="Record a member's status for one date (last write wins).",
    category="schedule",
    tags=("write",),
)
def set_status(token: str, member_id: str, day: str, work_type: str) -> Dict[str, Any]:
    target_day = _parse_date(day)
    kind = _parse_work_type(work_type)
    snapshot = api_state.calendar.load(token)
    if not any(member.id == str(member_id) for member in snapshot.members):
        raise InvalidInputError(f"Member '{member_id}' does not belong to this calendar.")
    entry = api_state.calendar.set_status(str(member_id), target_day, kind)
    return {"member_id": entry.member_id, "date": entry.date, "work_type": entry.work_type.value}


@register_api(
    "save_members",
    description="Replace the roster with the given ordered list; rows without an id are added, missing rows removed.",
    category="roster",
    tags=("write",),
)
def save_members(token: str, members: List[Dict[str, Any]]) -> Dict[str, Any]:
    try:
        rows = [MemberInput.model_validate(item) for item in members]
    except ValidationError as exc:
        raise InvalidInputError(str(exc)) from exc
    snapshot = api_state.calendar.load(token)
    existing = {member.id: member for member in snapshot.members}

    working: list[Member] = []
    seen: set[str] = set()
    for row in rows:
        if row.id is None:
            working.append(Member(id=provisional_id(), name=row.name))
            continue
        current = existing.get(row.id)
        if current is None:
            raise InvalidInputError(f"Member '{row.id}' does not belong to this calendar.")
        if row.id in seen:
            raise InvalidInputError(f"Member '{row.id}' is listed more than once.")
        seen.add(row.id)
        working.append(Member(id=current.id, name=row.name, calendar_id=current.calendar_id, position=current.position))

    saved = api_state.roster.save_members(snapshot.calendar.id, snapshot.members, working)
    return {"members": [serialize_member(member) for member in saved]}


@register_api(
    "resolve_link",
    description="Extract the calendar token from a pasted share link or raw identifier.",
    category="links",
    tags=("read",),
)
def resolve_link(link: str) -> Dict[str, Any]:
    token = token_from_link(link)
    return {"token": token, "share_link": _share_link(token)}


@register_api(
    "share_link",
    description="Return the share link of an existing calendar.",
    category="links",
    tags=("read",),
)
def share_link(token: str) -> Dict[str, Any]:
    calendar = api_state.calendar.fetch_calendar(token)
    return {"token": calendar.token, "share_link": _share_link(calendar.token)}


@register_api(
    "list_work_types",
    description="List status kinds with their display labels and colours.",
    category="meta",
    tags=("metadata",),
)
def list_work_types() -> Dict[str, Any]:
    kinds = [
        WorkTypePayload.from_style(kind, style, selectable=kind in PICKER_TYPES).model_dump()
        for kind, style in WORK_TYPE_STYLES.items()
    ]
    return {"work_types": kinds}
