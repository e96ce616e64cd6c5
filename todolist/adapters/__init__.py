"""Storage adapters for the todo list."""

from .file_storage import FileTodoStorage
from .memory_storage import MemoryTodoStorage

__all__ = [
    "FileTodoStorage",
    "MemoryTodoStorage",
]
