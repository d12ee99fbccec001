from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence
from uuid import uuid4

from ..domain import Member
from ..domain.models import PROVISIONAL_PREFIX
from .context import ServiceContext

logger = logging.getLogger(__name__)


def provisional_id() -> str:
    return f"{PROVISIONAL_PREFIX}{uuid4().hex}"


def _signature(members: Sequence[Member]) -> list[tuple[str, str]]:
    return [(member.id, member.name) for member in members]


class RosterEditor:
    """Working copy of a calendar's member list, kept apart from the loaded list until saved."""

    def __init__(self, initial: Iterable[Member]) -> None:
        self._initial = [replace(member, statuses=dict(member.statuses)) for member in initial]
        self.members: List[Member] = [replace(member) for member in self._initial]

    @property
    def initial(self) -> List[Member]:
        return list(self._initial)

    @property
    def is_dirty(self) -> bool:
        return _signature(self.members) != _signature(self._initial)

    def _index(self, member_id: str) -> Optional[int]:
        for index, member in enumerate(self.members):
            if member.id == member_id:
                return index
        return None

    def add(self, name: str) -> Optional[Member]:
        cleaned = name.strip()
        if not cleaned:
            return None
        member = Member(id=provisional_id(), name=cleaned, position=len(self.members))
        self.members.append(member)
        return member

    def rename(self, member_id: str, name: str) -> None:
        index = self._index(member_id)
        if index is not None:
            self.members[index] = replace(self.members[index], name=name)

    def remove(self, member_id: str) -> None:
        self.members = [member for member in self.members if member.id != member_id]

    def move_up(self, member_id: str) -> None:
        index = self._index(member_id)
        if index is None or index == 0:
            return
        self._swap(index, index - 1)

    def move_down(self, member_id: str) -> None:
        index = self._index(member_id)
        if index is None or index == len(self.members) - 1:
            return
        self._swap(index, index + 1)

    def _swap(self, first: int, second: int) -> None:
        self.members[first], self.members[second] = self.members[second], self.members[first]


@dataclass(slots=True)
class RosterService:
    context: ServiceContext

    def save_members(
        self,
        calendar_id: int,
        original: Sequence[Member],
        working: Sequence[Member],
    ) -> List[Member]:
        """Persist the difference between the loaded and the edited roster.

        Writes run as independent calls in the order deletions, inserts,
        updates. A failure leaves earlier writes applied.
        """

        kept_ids = {member.id for member in working if not member.is_provisional}
        removed = [
            member.backend_id
            for member in original
            if not member.is_provisional and member.id not in kept_ids
        ]
        if removed:
            logger.info("Removing %d members from calendar %s", len(removed), calendar_id)
            self.context.members.delete_many(removed)

        created: dict[int, Member] = {}
        for position, member in enumerate(working):
            if member.is_provisional:
                row = self.context.members.create(calendar_id, member.name, position)
                created[position] = replace(row, statuses=dict(member.statuses))

        previous = {member.id: member for member in original}
        saved: list[Member] = []
        for position, member in enumerate(working):
            if position in created:
                saved.append(created[position])
                continue
            before = previous.get(member.id)
            if before is None or before.name != member.name or before.position != position:
                self.context.members.update(member.backend_id, name=member.name, position=position)
            statuses = dict(before.statuses) if before is not None else dict(member.statuses)
            saved.append(replace(member, calendar_id=calendar_id, position=position, statuses=statuses))
        return saved
