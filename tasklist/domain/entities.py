from __future__ import annotations

from dataclasses import dataclass, field

from .enums import DueTag, Priority


@dataclass
class Task:
    index: int
    date: str
    time: str
    priority: Priority
    lines: list[str] = field(default_factory=list)
    due: DueTag = DueTag.INTIME
