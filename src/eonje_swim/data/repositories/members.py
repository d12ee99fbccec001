from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from ...domain import Member
from ...errors import RemoteStoreError
from ..supabase import SupabaseGateway


@dataclass(slots=True)
class MemberRepository:
    gateway: SupabaseGateway
    table_name: str

    def list_for_calendar(self, calendar_id: int) -> List[Member]:
        query = (
            self.gateway.table(self.table_name)
            .select("id, calendar_id, name, position")
            .eq("calendar_id", calendar_id)
            .order("position")
            .order("id")
        )
        response = self.gateway.execute(query, action="list members")
        return [Member.from_record(record) for record in response.data or []]

    def create(self, calendar_id: int, name: str, position: int) -> Member:
        query = self.gateway.table(self.table_name).insert(
            {"calendar_id": calendar_id, "name": name, "position": position}
        )
        response = self.gateway.execute(query, action="add member")
        records = response.data or []
        if not records:
            raise RemoteStoreError("Failed to add member: backend returned no row.")
        return Member.from_record(records[0])

    def update(self, member_id: int, *, name: str, position: int) -> None:
        query = (
            self.gateway.table(self.table_name)
            .update({"name": name, "position": position})
            .eq("id", member_id)
        )
        self.gateway.execute(query, action="update member")

    def delete_many(self, member_ids: Iterable[int]) -> None:
        identifiers = list(member_ids)
        if not identifiers:
            return
        query = self.gateway.table(self.table_name).delete().in_("id", identifiers)
        self.gateway.execute(query, action="remove members")
