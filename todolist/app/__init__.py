"""Application services for the todo list."""

from .service import TodoService

__all__ = ["TodoService"]
