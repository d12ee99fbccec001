from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..domain import WorkType


@dataclass(frozen=True)
class CellRef:
    member_id: str
    date: str


@dataclass(frozen=True)
class StatusUpdate:
    member_id: str
    date: str
    work_type: WorkType


class GridInteraction:
    """Which grid cell, if any, has its status picker open.

    ``active is None`` is the idle state; otherwise exactly one cell is being
    edited. Kept free of Qt so the transitions can be tested headless.
    """

    def __init__(self) -> None:
        self.active: Optional[CellRef] = None

    @property
    def is_editing(self) -> bool:
        return self.active is not None

    def activate(self, member_id: str, day: str, *, locked: bool = False) -> Optional[CellRef]:
        """Handle a click on a cell and return the cell left open, if any."""

        if locked:
            return self.active
        cell = CellRef(member_id=member_id, date=day)
        if self.active == cell:
            self.active = None
        else:
            self.active = cell
        return self.active

    def choose(self, work_type: WorkType) -> Optional[StatusUpdate]:
        if self.active is None:
            return None
        update = StatusUpdate(member_id=self.active.member_id, date=self.active.date, work_type=work_type)
        self.active = None
        return update

    def dismiss(self) -> None:
        self.active = None
