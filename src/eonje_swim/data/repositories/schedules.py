from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from ...domain import ScheduleEntry
from ...errors import RemoteStoreError
from ..supabase import SupabaseGateway


@dataclass(slots=True)
class ScheduleRepository:
    gateway: SupabaseGateway
    table_name: str

    def list_for_members(self, member_ids: Iterable[int]) -> List[ScheduleEntry]:
        identifiers = list(member_ids)
        if not identifiers:
            return []
        query = (
            self.gateway.table(self.table_name)
            .select("member_id, date, work_type")
            .in_("member_id", identifiers)
        )
        response = self.gateway.execute(query, action="load schedules")
        try:
            return [ScheduleEntry.from_record(record) for record in response.data or []]
        except (KeyError, ValueError) as exc:
            raise RemoteStoreError(f"Failed to load schedules: malformed row ({exc}).") from exc

    def upsert(self, entry: ScheduleEntry) -> None:
        query = self.gateway.table(self.table_name).upsert(
            entry.to_record(),
            on_conflict="member_id,date",
        )
        self.gateway.execute(query, action="save status")
