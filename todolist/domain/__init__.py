"""Domain objects for the todo list."""

from .errors import (
    ConfigurationError,
    FatalError,
    IndexOutOfRangeError,
    InvalidCommand,
    MissingArgs,
    MissingCommand,
    StorageError,
    TodoError,
    UsageError,
)
from .todo_list import IndexSelection, TodoList, parse_indices

__all__ = [
    "ConfigurationError",
    "FatalError",
    "IndexOutOfRangeError",
    "IndexSelection",
    "InvalidCommand",
    "MissingArgs",
    "MissingCommand",
    "StorageError",
    "TodoError",
    "TodoList",
    "UsageError",
    "parse_indices",
]
