from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from tasklist.domain.enums import Command, EditField, Priority
from tasklist.domain.errors import EmptyContentError, EmptyListError, InvalidInputError
from tasklist.domain.parsing import (
    parse_date,
    parse_field,
    parse_priority,
    parse_task_number,
    parse_time,
)
from tasklist.services.task_store import TaskStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

ACTION_PROMPT = "Input an action (add, print, edit, delete, end):"
PRIORITY_PROMPT = "Input the task priority (C, H, N, L):"
DATE_PROMPT = "Input the date (yyyy-mm-dd):"
TIME_PROMPT = "Input the time (hh:mm):"
TASK_PROMPT = "Input a new task (enter a blank line to end):"
FIELD_PROMPT = "Input a field to edit (priority, date, time, task):"


class ConsoleApp:
    def __init__(
        self,
        store: TaskStore,
        read: Callable[[], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._store = store
        self._read = read
        self._write = write

    def run(self) -> None:
        """Loop until ``end`` (or end of input), then persist the store once."""
        try:
            while self.handle(self._ask(ACTION_PROMPT)):
                pass
        except EOFError:
            logger.info("Input closed, treating as end")
            self._write("Tasklist exiting!")
        self._store.persist()

    def handle(self, raw: str) -> bool:
        """Dispatch one command; return False once the session should end."""
        try:
            command = Command(raw.strip().lower())
        except ValueError:
            self._write("The input action is invalid")
            return True

        if command is Command.END:
            self._write("Tasklist exiting!")
            return False
        if command is Command.ADD:
            self.add()
        elif command is Command.PRINT:
            self.print_tasks()
        elif command is Command.EDIT:
            self.edit()
        elif command is Command.DELETE:
            self.delete()
        return True

    def add(self) -> None:
        priority = self._ask_priority()
        task_date = self._retry(DATE_PROMPT, parse_date, "The input date is invalid")
        task_time = self._retry(TIME_PROMPT, parse_time, "The input time is invalid")
        try:
            self._store.add(priority, task_date, task_time, self._ask_description())
        except EmptyContentError as exc:
            self._write(str(exc))

    def print_tasks(self) -> bool:
        try:
            table = self._store.render()
        except EmptyListError as exc:
            self._write(str(exc))
            return False
        self._write(table)
        return True

    def edit(self) -> None:
        if not self.print_tasks():
            return
        number = self._ask_number()
        field = self._retry(FIELD_PROMPT, parse_field, "Invalid field")
        if field is EditField.PRIORITY:
            self._store.edit(number, field, self._ask_priority())
        elif field is EditField.DATE:
            value = self._retry(DATE_PROMPT, parse_date, "The input date is invalid")
            self._store.edit(number, field, value)
        elif field is EditField.TIME:
            value = self._retry(TIME_PROMPT, parse_time, "The input time is invalid")
            self._store.edit(number, field, value)
        else:
            self._edit_description(number)
        self._write("The task is changed")

    def delete(self) -> None:
        if not self.print_tasks():
            return
        self._store.delete(self._ask_number())
        self._write("The task is deleted")

    def _edit_description(self, number: int) -> None:
        while True:
            try:
                self._store.edit(number, EditField.TASK, self._ask_description())
                return
            except EmptyContentError as exc:
                self._write(str(exc))

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._read()

    def _retry(self, prompt: str, parse: Callable[[str], T], notice: str | None) -> T:
        while True:
            raw = self._ask(prompt)
            try:
                return parse(raw)
            except InvalidInputError as exc:
                logger.debug("Rejected input: %s", exc)
                if notice:
                    self._write(notice)

    def _ask_priority(self) -> Priority:
        # Bad priorities just repeat the prompt.
        return self._retry(PRIORITY_PROMPT, parse_priority, None)

    def _ask_number(self) -> int:
        count = len(self._store)
        return self._retry(
            f"Input the task number (1-{count}):",
            lambda raw: parse_task_number(raw, count),
            "Invalid task number",
        )

    def _ask_description(self) -> list[str]:
        self._write(TASK_PROMPT)
        lines = []
        while True:
            line = self._read().strip()
            if not line:
                return lines
            lines.append(line)
