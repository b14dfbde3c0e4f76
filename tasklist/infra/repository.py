from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from tasklist.domain.entities import Task
from tasklist.domain.enums import DueTag, Priority
from tasklist.domain.errors import TaskFileError

logger = logging.getLogger(__name__)


def _to_entity(record: dict[str, Any]) -> Task:
    lines = record["tasks"]
    if not isinstance(lines, list) or not all(isinstance(line, str) for line in lines):
        raise ValueError("'tasks' must be a list of strings")
    return Task(
        index=int(record["index"]),
        date=str(record["date"]),
        time=str(record["time"]),
        priority=Priority.from_marker(record["priority"]),
        lines=list(lines),
        due=DueTag.from_marker(record["due"]),
    )


def _to_record(task: Task) -> dict[str, Any]:
    return {
        "index": task.index,
        "date": task.date,
        "time": task.time,
        "priority": task.priority.marker,
        "tasks": list(task.lines),
        "due": task.due.marker,
    }


class JsonTaskRepository:
    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s, starting empty", self._path)
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise TaskFileError(f"Cannot read {self._path}: {exc}") from exc
        if not isinstance(data, list):
            raise TaskFileError(f"{self._path} does not contain a JSON array")

        tasks = []
        for position, record in enumerate(data, start=1):
            try:
                tasks.append(_to_entity(record))
            except (KeyError, TypeError, ValueError) as exc:
                raise TaskFileError(f"Malformed task #{position} in {self._path}: {exc}") from exc
        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        payload = json.dumps([_to_record(task) for task in tasks], ensure_ascii=False)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(payload, encoding="utf-8")
        os.replace(tmp_path, self._path)
        logger.info("Saved %d tasks to %s", len(tasks), self._path)
