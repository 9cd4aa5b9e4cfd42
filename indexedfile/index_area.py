"""Sparse index over the blocks of the primary data area."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_RULE = "|-----------------------------|"


@dataclass(frozen=True)
class IndexEntry:
    """First key of a block and the address where that block starts."""

    key: int = 0
    address: int = 0


def _sort_key(entry: IndexEntry) -> tuple[bool, int]:
    # Entries with key 0 are empty and always go last.
    return (entry.key == 0, entry.key)


class IndexArea:
    """Fixed-capacity table mapping the first key of each block to its address."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._entries: list[IndexEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, key: int) -> int:
        """Return the address of the last block whose first key is <= key, else 0."""
        address = 0
        for entry in self._entries:
            if entry.key <= key:
                address = entry.address
        return address

    def update(self, entries: Iterable[IndexEntry]) -> None:
        """Replace the table with the given entries, kept sorted by key."""
        new_entries = list(entries)
        if len(new_entries) > self.capacity:
            raise ValueError(
                f"{len(new_entries)} entries do not fit in an index of capacity {self.capacity}"
            )
        self._entries = sorted(new_entries, key=_sort_key)

    def __str__(self) -> str:
        if not self._entries:
            return "[ Tabla de indices vacía ] "
        lines = ["|----[Clave]---|---[Indice]---|"]
        for entry in self._entries:
            if entry.key != 0:
                lines.append(_RULE)
                lines.append(f"| {entry.key:>11} | {entry.address:>13} |")
                lines.append(_RULE)
        return "\n".join(lines) + "\n"