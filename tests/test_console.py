from __future__ import annotations

from datetime import date

from tasklist.domain.entities import Task
from tasklist.domain.enums import DueTag, Priority
from tasklist.services.task_store import TaskStore
from tasklist.ui.console import ConsoleApp


class FakeRepo:
    def __init__(self, tasks: list[Task] | None = None) -> None:
        self.stored: list[Task] = list(tasks or [])
        self.saves = 0

    def load(self) -> list[Task]:
        return list(self.stored)

    def save(self, tasks: list[Task]) -> None:
        self.stored = list(tasks)
        self.saves += 1


class ScriptedConsole:
    def __init__(self, *lines: str) -> None:
        self._lines = list(lines)
        self.output: list[str] = []

    def read(self) -> str:
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.output.append(text)


def run_session(*lines: str, tasks: list[Task] | None = None) -> tuple[FakeRepo, ScriptedConsole]:
    repo = FakeRepo(tasks)
    store = TaskStore(repo, today=lambda: date(2024, 1, 10))
    store.load()
    console = ScriptedConsole(*lines)
    ConsoleApp(store, read=console.read, write=console.write).run()
    return repo, console


def sample_tasks() -> list[Task]:
    return [
        Task(1, "2024-01-01", "09:00", Priority.LOW, ["first"], DueTag.OVERDUE),
        Task(2, "2024-01-02", "10:00", Priority.HIGH, ["second"], DueTag.OVERDUE),
        Task(3, "2024-01-03", "11:00", Priority.NORMAL, ["third"], DueTag.OVERDUE),
    ]


def test_add_retries_until_valid_then_persists_on_end() -> None:
    repo, console = run_session(
        "ADD",
        "x", "h",
        "2024-02-30", "2024-01-01",
        "25:00", "9:30",
        "Buy milk", "",
        "end",
    )

    assert console.output.count("Input the task priority (C, H, N, L):") == 2
    assert "The input date is invalid" in console.output
    assert "The input time is invalid" in console.output
    assert console.output[-1] == "Tasklist exiting!"
    assert repo.saves == 1
    (task,) = repo.stored
    assert (task.index, task.date, task.time) == (1, "2024-01-01", "09:30")
    assert task.priority is Priority.HIGH
    assert task.lines == ["Buy milk"]


def test_blank_add_adds_nothing() -> None:
    repo, console = run_session("add", "n", "2024-01-10", "10:00", "", "end")

    assert "The task is blank" in console.output
    assert repo.stored == []


def test_unknown_action_and_empty_print() -> None:
    _, console = run_session("list", "print", "end")

    assert "The input action is invalid" in console.output
    assert "No tasks have been input" in console.output


def test_edit_on_empty_list_returns_to_prompt() -> None:
    _, console = run_session("edit", "delete", "end")

    assert console.output.count("No tasks have been input") == 2
    assert not any(line.startswith("Input the task number") for line in console.output)


def test_delete_renumbers_remaining_tasks() -> None:
    repo, console = run_session("delete", "9", "1", "end", tasks=sample_tasks())

    assert "Input the task number (1-3):" in console.output
    assert "Invalid task number" in console.output
    assert "The task is deleted" in console.output
    assert [(t.index, t.lines[0]) for t in repo.stored] == [(1, "second"), (2, "third")]


def test_edit_field_is_reprompted_without_number() -> None:
    repo, console = run_session(
        "edit", "2", "colour", "date", "2024-01-10", "end", tasks=sample_tasks()
    )

    assert "Invalid field" in console.output
    assert console.output.count("Input the task number (1-3):") == 1
    assert "The task is changed" in console.output
    edited = repo.stored[1]
    assert edited.date == "2024-01-10"
    assert edited.due is DueTag.TODAY


def test_edit_task_retries_blank_description() -> None:
    repo, console = run_session(
        "edit", "1", "task", "", "new text", "", "end", tasks=sample_tasks()
    )

    assert console.output.count("The task is blank") == 1
    assert repo.stored[0].lines == ["new text"]


def test_end_of_input_still_persists() -> None:
    repo, console = run_session("add", "c", "2024-01-11", "08:00", "Ship it", "")

    assert console.output[-1] == "Tasklist exiting!"
    assert repo.saves == 1
    assert repo.stored[0].due is DueTag.INTIME


def test_added_index_continues_after_delete() -> None:
    repo, _ = run_session(
        "delete", "3",
        "add", "l", "2024-01-12", "07:00", "new", "",
        "end",
        tasks=sample_tasks(),
    )

    assert [t.index for t in repo.stored] == [1, 2, 4]
