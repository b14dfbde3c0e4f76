from __future__ import annotations

import logging
import sys

from tasklist.config import SETTINGS
from tasklist.domain.errors import TaskFileError
from tasklist.infra.logging import setup_logging
from tasklist.infra.repository import JsonTaskRepository
from tasklist.services.task_store import TaskStore
from tasklist.ui.console import ConsoleApp

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    store = TaskStore(JsonTaskRepository(SETTINGS.data_path), line_width=SETTINGS.line_width)
    try:
        store.load()
    except TaskFileError as exc:
        logger.error("%s", exc)
        print(f"Cannot load tasks: {exc}", file=sys.stderr)
        sys.exit(1)

    ConsoleApp(store).run()
    sys.exit(0)


if __name__ == "__main__":
    main()
