"""Storage port for the todo list."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence


class TodoStoragePort(ABC):
    """Gateway that loads and rewrites the whole list at once."""

    @abstractmethod
    def load(self) -> List[str]:
        """Returns the stored entries in display order."""

    @abstractmethod
    def save(self, entries: Sequence[str]) -> None:
        """Replaces the stored entries with ``entries``."""
