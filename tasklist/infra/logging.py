from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler

from tasklist.config import SETTINGS, Settings


def setup_logging(settings: Settings = SETTINGS) -> None:
    log_dir = settings.log_path
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "tasklist.log"

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = RotatingFileHandler(
        log_file, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
    )
    file_handler.setLevel(settings.log_level.upper())
    file_handler.setFormatter(formatter)

    # Prompts share the terminal, so stderr only gets warnings by default.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(settings.console_log_level.upper())
    console_handler.setFormatter(formatter)

    logging.basicConfig(
        level=logging.DEBUG,
        handlers=[file_handler, console_handler],
        force=True,
    )
