from __future__ import annotations

from tasklist.domain.entities import Task

# title, cell width, left margin
_COLUMNS = (("N", 4, 1), ("Date", 12, 4), ("Time", 7, 1), ("P", 3, 1), ("D", 3, 1))


def _separator(width: int) -> str:
    cells = ["-" * size for _, size, _ in _COLUMNS] + ["-" * width]
    return "+" + "+".join(cells) + "+"


def _header(width: int) -> str:
    cells = [(" " * margin + title).ljust(size) for title, size, margin in _COLUMNS]
    cells.append((" " * ((width - 4) // 2 - 1) + "Task").ljust(width))
    return "|" + "|".join(cells) + "|"


def render_table(tasks: list[Task], width: int = 44) -> str:
    separator = _separator(width)
    blank_lead = "|" + "|".join(" " * size for _, size, _ in _COLUMNS) + "|"
    index_width = _COLUMNS[0][1]

    rows = [separator, _header(width), separator]
    for task in tasks:
        first, *rest = task.lines or [""]
        number = f" {task.index}".ljust(index_width)
        rows.append(
            f"|{number}| {task.date} | {task.time} "
            f"| {task.priority.marker} | {task.due.marker} |{first.ljust(width)}|"
        )
        rows.extend(f"{blank_lead}{line.ljust(width)}|" for line in rest)
        rows.append(separator)
    return "\n".join(rows)
