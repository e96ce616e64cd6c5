"""In-memory todo list and index parsing for the ``done`` command."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

from .errors import IndexOutOfRangeError


@dataclass(frozen=True)
class IndexSelection:
    """Result of parsing user supplied 1-based indices.

    ``indices`` are 0-based, in the order given, without repeats. ``rejected``
    keeps the raw arguments that were not positive integers and ``duplicates``
    the 1-based values that appeared more than once.
    """

    indices: Tuple[int, ...]
    rejected: Tuple[str, ...] = ()
    duplicates: Tuple[int, ...] = ()


def parse_indices(raw_args: Iterable[str]) -> IndexSelection:
    indices: List[int] = []
    rejected: List[str] = []
    duplicates: List[int] = []
    seen: set[int] = set()
    for raw in raw_args:
        # ASCII digits only; int() would also take "+3", "1_0" and "٣".
        if not (raw.isascii() and raw.isdigit()):
            rejected.append(raw)
            continue
        value = int(raw)
        if value == 0:
            rejected.append(raw)
            continue
        if value in seen:
            duplicates.append(value)
            continue
        seen.add(value)
        indices.append(value - 1)
    return IndexSelection(
        indices=tuple(indices),
        rejected=tuple(rejected),
        duplicates=tuple(duplicates),
    )


@dataclass
class TodoList:
    """Ordered entries; position is the only identity an entry has."""

    entries: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def add(self, texts: Iterable[str]) -> List[str]:
        added = list(texts)
        self.entries.extend(added)
        return added

    def remove(self, indices: Sequence[int]) -> List[str]:
        """Removes 0-based ``indices`` and returns the removed entries.

        Every index is validated before the list is touched. Removal runs from
        the highest index down so earlier removals never shift later ones.
        """

        length = len(self.entries)
        for index in indices:
            if index < 0 or index >= length:
                raise IndexOutOfRangeError(index + 1, length)
        removed: List[str] = []
        for index in sorted(indices, reverse=True):
            removed.append(self.entries.pop(index))
        return removed

    def numbered(self) -> List[Tuple[int, str]]:
        return [(position, text) for position, text in enumerate(self.entries, start=1)]
