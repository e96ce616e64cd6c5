"""Ports for todo storage."""

from .storage import TodoStoragePort

__all__ = ["TodoStoragePort"]
