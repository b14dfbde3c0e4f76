from __future__ import annotations

from enum import Enum, StrEnum


def _cell(background: int) -> str:
    return f"\u001b[{background}m \u001b[0m"


class Priority(Enum):
    CRITICAL = "C"
    HIGH = "H"
    NORMAL = "N"
    LOW = "L"

    @property
    def marker(self) -> str:
        return _PRIORITY_MARKERS[self]

    @classmethod
    def from_code(cls, code: str) -> Priority:
        return cls(code.strip().upper())

    @classmethod
    def from_marker(cls, marker: str) -> Priority:
        for priority, value in _PRIORITY_MARKERS.items():
            if value == marker:
                return priority
        raise ValueError(f"unknown priority marker {marker!r}")


class DueTag(Enum):
    INTIME = "I"
    TODAY = "T"
    OVERDUE = "O"

    @property
    def marker(self) -> str:
        return _DUE_MARKERS[self]

    @classmethod
    def from_marker(cls, marker: str) -> DueTag:
        for tag, value in _DUE_MARKERS.items():
            if value == marker:
                return tag
        raise ValueError(f"unknown due marker {marker!r}")


_PRIORITY_MARKERS = {
    Priority.CRITICAL: _cell(101),
    Priority.HIGH: _cell(103),
    Priority.NORMAL: _cell(102),
    Priority.LOW: _cell(104),
}

_DUE_MARKERS = {
    DueTag.INTIME: _cell(102),
    DueTag.TODAY: _cell(103),
    DueTag.OVERDUE: _cell(101),
}


class EditField(StrEnum):
    PRIORITY = "priority"
    DATE = "date"
    TIME = "time"
    TASK = "task"


class Command(StrEnum):
    ADD = "add"
    PRINT = "print"
    EDIT = "edit"
    DELETE = "delete"
    END = "end"
