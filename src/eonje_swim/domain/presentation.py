from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List

from .enums import WorkType


@dataclass(frozen=True)
class WorkTypeStyle:
    label: str
    color: str
    text_color: str


WORK_TYPE_STYLES: Dict[WorkType, WorkTypeStyle] = {
    WorkType.OFFICE: WorkTypeStyle(label="Office", color="#c7d2fe", text_color="#312e81"),
    WorkType.REMOTE: WorkTypeStyle(label="Remote", color="#a7f3d0", text_color="#064e3b"),
    WorkType.AM_HALF: WorkTypeStyle(label="AM half", color="#fde68a", text_color="#78350f"),
    WorkType.PM_HALF: WorkTypeStyle(label="PM half", color="#fdba74", text_color="#7c2d12"),
    WorkType.FULL_LEAVE: WorkTypeStyle(label="Leave", color="#fb7185", text_color="#ffffff"),
    WorkType.HOLIDAY: WorkTypeStyle(label="Holiday", color="#e2e8f0", text_color="#475569"),
    WorkType.NONE: WorkTypeStyle(label="", color="transparent", text_color="#cbd5e1"),
}

_missing = set(WorkType) - set(WORK_TYPE_STYLES)
if _missing:  # pragma: no cover - guards future enum additions
    raise RuntimeError(f"Missing presentation styles for: {sorted(item.value for item in _missing)}")

# Cells for these kinds render colour only.
_UNLABELLED = frozenset({WorkType.OFFICE, WorkType.HOLIDAY, WorkType.FULL_LEAVE, WorkType.NONE})

PICKER_TYPES: List[WorkType] = [item for item in WorkType if item not in (WorkType.NONE, WorkType.HOLIDAY)]
LEGEND_TYPES: List[WorkType] = [item for item in WorkType if item is not WorkType.NONE]

_CJK = re.compile(r"[ㄱ-ㆎ가-힣ぁ-ゔァ-ヴー々〆〤一-龥]")


def style_for(work_type: WorkType) -> WorkTypeStyle:
    return WORK_TYPE_STYLES[work_type]


def cell_label(work_type: WorkType) -> str:
    if work_type in _UNLABELLED:
        return ""
    return WORK_TYPE_STYLES[work_type].label


def cell_color(work_type: WorkType) -> str:
    return WORK_TYPE_STYLES[work_type].color


def cell_text_color(work_type: WorkType) -> str:
    return WORK_TYPE_STYLES[work_type].text_color


def wrap_member_name(name: str) -> List[str]:
    """Split a display name into grid-sized lines.

    Names with CJK characters wrap every 5 characters, others every 10.
    """

    limit = 5 if _CJK.search(name) else 10
    return [name[index : index + limit] for index in range(0, len(name), limit)]
