"""Indexed sequential file: a sparse index over a blocked data area."""

from __future__ import annotations

from typing import Any

from indexedfile.data_area import DataArea, InsertStatus
from indexedfile.index_area import IndexArea

OVERFLOW_FULL_WARNING = "Overflow lleno, por favor reorganizar.."
PRIMARY_FULL_WARNING = (
    "Ultimo bloque del area primaria colocado, sin espacio para mas bloques."
)


class IndexedFile:
    """A data area plus the index that locates its blocks by key."""

    def __init__(self, records_per_block: int, primary_size: int, total_size: int) -> None:
        self.data_area = DataArea(records_per_block, primary_size, total_size)
        self.index_area = IndexArea(primary_size // records_per_block)
        self.warning = ""

    def lookup(self, key: int) -> Any:
        """Return the data stored under key, or None when it is absent."""
        block = self.index_area.lookup(key)
        return self.data_area.lookup(block, key)

    def insert(self, key: int, data: Any) -> str:
        """Insert a record and return the warning it produced ("" when none)."""
        block = self.index_area.lookup(key)
        status = self.data_area.insert(block, key, data)
        if status is InsertStatus.INTERMEDIATE:
            self.warning = ""
        elif status is InsertStatus.OVERFLOW_FULL:
            self.warning = OVERFLOW_FULL_WARNING
        elif status is InsertStatus.PRIMARY_FULL:
            self.warning = PRIMARY_FULL_WARNING
        else:
            # A block was created or the first key of a block changed.
            self.index_area.update(self.data_area.index_entries())
            self.warning = ""
        return self.warning

    def __str__(self) -> str:
        return (
            "\n+---------------[Tabla de Indices]--------------+\n"
            f"{self.index_area}"
            "\n+---------------[Tabla de datos]--------------+\n"
            f"{self.data_area}"
        )