from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _resolve_project_root() -> Path:
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parents[1]


PROJECT_ROOT = _resolve_project_root()


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


@dataclass(frozen=True)
class Settings:
    data_file: str = "tasklist.json"
    line_width: int = 44
    log_level: str = "INFO"
    console_log_level: str = "WARNING"
    log_dir: str = "logs"

    @property
    def data_path(self) -> Path:
        return Path.cwd() / self.data_file

    @property
    def log_path(self) -> Path:
        return Path.cwd() / self.log_dir


def _line_width_from_env() -> int:
    raw = os.getenv("TASKLIST_LINE_WIDTH", "44").strip()
    try:
        width = int(raw)
    except ValueError:
        raise RuntimeError(f"TASKLIST_LINE_WIDTH must be an integer, got {raw!r}.") from None
    if width < 1:
        raise RuntimeError("TASKLIST_LINE_WIDTH must be positive.")
    return width


load_env()

SETTINGS = Settings(
    data_file=os.getenv("TASKLIST_FILE", "").strip() or "tasklist.json",
    line_width=_line_width_from_env(),
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    console_log_level=os.getenv("LOG_CONSOLE_LEVEL", "WARNING"),
    log_dir=os.getenv("LOG_DIR", "logs"),
)
