"""Plain-text repository for the todo list file."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, TextIO

from ..domain.errors import StorageError
from ..ports.storage import TodoStoragePort

LOG = logging.getLogger("todolist.storage")


class FileTodoStorage(TodoStoragePort):
    """One entry per line, UTF-8, no trailing newline after the last entry."""

    encoding = "utf-8"

    def __init__(self, path: Path, stderr: Optional[TextIO] = None) -> None:
        self._path = path
        self._stderr = stderr

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[str]:
        try:
            # "a+b" creates the file when missing and leaves existing bytes alone.
            with self._path.open("a+b") as handle:
                handle.seek(0)
                raw = handle.read()
        except OSError as exc:
            raise StorageError(f"Failed to open {self._path}: {exc}") from exc

        entries: List[str] = []
        for line_no, raw_line in enumerate(raw.split(b"\n"), start=1):
            if raw_line.endswith(b"\r"):
                raw_line = raw_line[:-1]
            try:
                text = raw_line.decode(self.encoding)
            except UnicodeDecodeError as exc:
                self._report(f"Failed to read line {line_no}: {exc}")
                continue
            if not text:
                continue
            entries.append(text)
        LOG.debug("loaded %d entries from %s", len(entries), self._path)
        return entries

    def save(self, entries: Sequence[str]) -> None:
        content = "\n".join(entries)
        try:
            with self._path.open("w", encoding=self.encoding, newline="") as handle:
                handle.write(content)
        except OSError as exc:
            raise StorageError(f"Failed to write {self._path}: {exc}") from exc
        LOG.debug("wrote %d entries to %s", len(entries), self._path)

    def _report(self, message: str) -> None:
        stream = self._stderr if self._stderr is not None else sys.stderr
        print(message, file=stream)
