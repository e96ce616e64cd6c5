from __future__ import annotations

from typing import List, Optional, Sequence

from ..ports.storage import TodoStoragePort


class MemoryTodoStorage(TodoStoragePort):
    """Keeps entries in memory; stands in for the file in tests."""

    def __init__(self, entries: Optional[Sequence[str]] = None) -> None:
        self.entries: List[str] = list(entries or [])
        self.save_count = 0

    def load(self) -> List[str]:
        return list(self.entries)

    def save(self, entries: Sequence[str]) -> None:
        self.entries = list(entries)
        self.save_count += 1
