from __future__ import annotations

from collections.abc import Iterable
from datetime import date, time

from .enums import DueTag, EditField, Priority
from .errors import EmptyContentError, InvalidFieldError, InvalidIndexError, InvalidInputError


def parse_priority(raw: str) -> Priority:
    try:
        return Priority.from_code(raw)
    except ValueError:
        raise InvalidInputError(f"invalid priority {raw!r}") from None


def _int_parts(raw: str, sep: str, count: int) -> list[int]:
    parts = raw.strip().split(sep)
    if len(parts) != count:
        raise ValueError(f"expected {count} parts separated by {sep!r}")
    return [int(part) for part in parts]


def parse_date(raw: str) -> str:
    """Return ``raw`` as a canonical ``yyyy-mm-dd`` string.

    Accepts unpadded parts (``2024-1-5``) but rejects impossible dates.
    """
    try:
        year, month, day = _int_parts(raw, "-", 3)
        return date(year, month, day).isoformat()
    except ValueError:
        raise InvalidInputError(f"invalid date {raw!r}") from None


def parse_time(raw: str) -> str:
    try:
        hour, minute = _int_parts(raw, ":", 2)
        return time(hour, minute).strftime("%H:%M")
    except ValueError:
        raise InvalidInputError(f"invalid time {raw!r}") from None


def parse_task_number(raw: str, count: int) -> int:
    try:
        number = int(raw.strip())
    except ValueError:
        raise InvalidIndexError(f"not a task number: {raw!r}") from None
    if not 1 <= number <= count:
        raise InvalidIndexError(f"task number {number} outside 1-{count}")
    return number


def parse_field(raw: str) -> EditField:
    try:
        return EditField(raw.strip().lower())
    except ValueError:
        raise InvalidFieldError(f"invalid field {raw!r}") from None


def wrap_line(line: str, width: int) -> list[str]:
    if len(line) <= width:
        return [line]
    return [line[start:start + width].strip() for start in range(0, len(line), width)]


def wrap_description(lines: Iterable[str], width: int) -> list[str]:
    """Wrap every line to ``width`` and refuse a description with no content."""
    wrapped: list[str] = []
    for line in lines:
        wrapped.extend(wrap_line(line, width))
    if not any(chunk.strip() for chunk in wrapped):
        raise EmptyContentError("The task is blank")
    return wrapped


def due_tag_for(task_date: str, today: date) -> DueTag:
    delta = (date.fromisoformat(task_date) - today).days
    if delta < 0:
        return DueTag.OVERDUE
    if delta > 0:
        return DueTag.INTIME
    return DueTag.TODAY
