from __future__ import annotations


class TaskListError(Exception):
    """Base class for everything the task list raises on purpose."""


class InvalidInputError(TaskListError, ValueError):
    """Malformed priority, date, time, task number or field name."""


class InvalidIndexError(InvalidInputError):
    pass


class InvalidFieldError(InvalidInputError):
    pass


class EmptyContentError(TaskListError):
    """The task description had no non-blank lines."""


class EmptyListError(TaskListError):
    pass


class TaskFileError(TaskListError):
    """The backing file exists but cannot be read back as a task list."""
