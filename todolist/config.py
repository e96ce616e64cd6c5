"""Runtime settings resolved from the process environment."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .domain.errors import ConfigurationError, StorageError

LOG = logging.getLogger("todolist.config")

TODO_FILENAME = "todo_list.txt"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class TodoSettings:
    data_dir: Path
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def todo_path(self) -> Path:
        return self.data_dir / TODO_FILENAME

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> "TodoSettings":
        """Prefers ``$XDG_DATA_HOME/todo`` and falls back to ``$HOME/.local/share/todo``."""

        base = env.get("XDG_DATA_HOME")
        if base:
            data_dir = Path(base) / "todo"
        else:
            home = env.get("HOME")
            if not home:
                raise ConfigurationError("Failed to get name of home folder")
            data_dir = Path(home) / ".local" / "share" / "todo"

        log_level = env.get("TODO_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
        if log_level not in LOG_LEVELS:
            log_level = DEFAULT_LOG_LEVEL
        return cls(data_dir=data_dir, log_level=log_level)

    def ensure_data_dir(self) -> Path:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Failed to create {self.data_dir}: {exc}") from exc
        LOG.debug("data directory %s", self.data_dir)
        return self.data_dir


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level, logging.WARNING))
