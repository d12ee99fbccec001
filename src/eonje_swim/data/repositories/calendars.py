from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...domain import Calendar
from ...errors import RemoteStoreError
from ..supabase import SupabaseGateway


@dataclass(slots=True)
class CalendarRepository:
    gateway: SupabaseGateway
    table_name: str

    def create(self, token: str, name: str) -> Calendar:
        query = self.gateway.table(self.table_name).insert({"uuid": token, "name": name})
        response = self.gateway.execute(query, action="create calendar")
        records = response.data or []
        if not records:
            raise RemoteStoreError("Failed to create calendar: backend returned no row.")
        return Calendar.from_record(records[0])

    def fetch_by_token(self, token: str) -> Optional[Calendar]:
        query = (
            self.gateway.table(self.table_name)
            .select("*")
            .eq("uuid", token)
            .limit(1)
        )
        response = self.gateway.execute(query, action="load calendar")
        records = response.data or []
        if not records:
            return None
        return Calendar.from_record(records[0])

    def rename(self, token: str, name: str) -> None:
        query = self.gateway.table(self.table_name).update({"name": name}).eq("uuid", token)
        self.gateway.execute(query, action="rename calendar")
