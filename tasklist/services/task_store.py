from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import date
from typing import Any, Protocol

from tasklist.domain.entities import Task
from tasklist.domain.enums import EditField, Priority
from tasklist.domain.errors import EmptyListError, InvalidIndexError
from tasklist.domain.parsing import due_tag_for, wrap_description

from .table import render_table

logger = logging.getLogger(__name__)


class TaskRepository(Protocol):
    def load(self) -> list[Task]: ...

    def save(self, tasks: list[Task]) -> None: ...


class TaskStore:
    def __init__(
        self,
        repo: TaskRepository,
        line_width: int = 44,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._repo = repo
        self._line_width = line_width
        self._today = today
        self._tasks: list[Task] = []
        self._last_index = 0

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def load(self) -> None:
        self._tasks = self._repo.load()
        self._last_index = max((task.index for task in self._tasks), default=0)

    def persist(self) -> None:
        self._repo.save(self._tasks)

    def add(
        self, priority: Priority, task_date: str, task_time: str, description: Iterable[str]
    ) -> Task:
        lines = wrap_description(description, self._line_width)
        self._last_index += 1
        task = Task(
            index=self._last_index,
            date=task_date,
            time=task_time,
            priority=priority,
            lines=lines,
            due=due_tag_for(task_date, self._today()),
        )
        self._tasks.append(task)
        logger.info("Added task %d (%s, due %s)", task.index, task.date, task.due.name)
        return task

    def get(self, number: int) -> Task:
        self.check_number(number)
        return self._tasks[number - 1]

    def check_number(self, number: int) -> None:
        if not 1 <= number <= len(self._tasks):
            raise InvalidIndexError(f"task number {number} outside 1-{len(self._tasks)}")

    def edit(self, number: int, field: EditField, value: Any) -> Task:
        """Replace one field of task ``number``.

        ``value`` is a ``Priority`` for priority edits, a canonical string for
        date and time, and the raw description lines for task edits.
        """
        task = self.get(number)
        if field is EditField.PRIORITY:
            task.priority = value
        elif field is EditField.DATE:
            task.due = due_tag_for(value, self._today())
            task.date = value
        elif field is EditField.TIME:
            task.time = value
        elif field is EditField.TASK:
            task.lines = wrap_description(value, self._line_width)
        logger.info("Edited %s of task %d", field.value, number)
        return task

    def delete(self, number: int) -> Task:
        self.check_number(number)
        removed = self._tasks.pop(number - 1)
        self.renumber()
        logger.info("Deleted task %d, %d left", number, len(self._tasks))
        return removed

    def renumber(self) -> None:
        for position, task in enumerate(self._tasks, start=1):
            task.index = position

    def render(self) -> str:
        if not self._tasks:
            raise EmptyListError("No tasks have been input")
        return render_table(self._tasks, self._line_width)
