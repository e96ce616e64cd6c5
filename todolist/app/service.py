"""Application service that applies commands to the stored list."""
from __future__ import annotations

import logging
from typing import List, Sequence

from ..domain.todo_list import TodoList
from ..ports.storage import TodoStoragePort

LOG = logging.getLogger("todolist.service")


class TodoService:
    """Coordinates loading, mutation and persistence of the todo list."""

    def __init__(self, storage: TodoStoragePort) -> None:
        self._storage = storage

    def load_list(self) -> TodoList:
        return TodoList(self._storage.load())

    def add(self, todo_list: TodoList, texts: Sequence[str]) -> List[str]:
        added = todo_list.add(texts)
        self._persist(todo_list)
        LOG.info("added %d entries", len(added))
        return added

    def complete(self, todo_list: TodoList, indices: Sequence[int]) -> List[str]:
        """Removes ``indices`` (0-based) and persists; returns removed entries
        in removal order. Nothing is written when an index is out of range."""

        removed = todo_list.remove(indices)
        self._persist(todo_list)
        LOG.info("completed %d entries", len(removed))
        return removed

    def _persist(self, todo_list: TodoList) -> None:
        self._storage.save(todo_list.entries)
