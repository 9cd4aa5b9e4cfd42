"""Primary data area split into fixed-size blocks, followed by an overflow zone."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from indexedfile.index_area import IndexEntry

_RULE = "|------------------------------------------|"


class InsertStatus(Enum):
    """Outcome of an insertion into the data area."""

    INTERMEDIATE = auto()
    NEW_BLOCK = auto()
    OVERFLOW_FULL = auto()
    PRIMARY_FULL = auto()
    FIRST_RECORD_CHANGED = auto()


@dataclass
class Record:
    """One slot of the data area; a key of 0 marks an empty slot."""

    key: int = 0
    data: Any = None
    link: int = 0


def _sort_key(record: Record) -> tuple[bool, int]:
    return (record.key == 0, record.key)


class DataArea:
    """Blocks of records in the primary zone with a shared overflow zone after it."""

    def __init__(self, records_per_block: int, primary_size: int, total_size: int) -> None:
        if records_per_block < 1:
            raise ValueError("records_per_block must be at least 1")
        if primary_size < records_per_block:
            raise ValueError("primary_size must hold at least one block")
        if total_size <= primary_size:
            raise ValueError("total_size must be larger than primary_size")
        self._block_size = records_per_block
        self._primary_size = primary_size
        self._total_size = total_size
        self._max_blocks = primary_size // records_per_block
        self._block_count = 0
        self._last_block = 0
        # The overflow zone starts at primary_size + 1; this is the slot before it.
        self._last_overflow = primary_size
        self._records = [Record() for _ in range(total_size)]

    def insert(self, block: int, key: int, data: Any) -> InsertStatus:
        """Insert a record, using the block that the index points to."""
        if self._block_count == 0:
            return self._insert_new_block(key, data)
        self._check_block(block)
        occupied = self._occupied(block)
        if 2 * occupied < self._block_size:
            return self._insert_common(block, key, data)
        if occupied == self._block_size:
            return self._insert_full(block, key, data)
        return self._insert_half_full(block, key, data)

    def lookup(self, block: int, key: int) -> Any:
        """Return the data stored under key, or None when it is not there."""
        self._check_block(block)
        for record in self._block(block):
            if record.key == key:
                return record.data
        start = self._records[self._last_record(block)].link
        if start == 0:
            return None
        for record in self._records[start:]:
            if record.key == key:
                return record.data
        return None

    def index_entries(self) -> list[IndexEntry]:
        """Return the first key and start address of every block in use."""
        end = self._block_count * self._block_size
        return [
            IndexEntry(self._records[start].key, start)
            for start in range(0, end, self._block_size)
        ]

    def __str__(self) -> str:
        if self._block_count == 0:
            return "[ Area de datos vacia (Sin bloques) ]"
        lines = ["+|--[Clave]--|--[Indice]--|--[Direccion]--|+", _RULE]
        end = self._block_count * self._block_size
        for number, start in enumerate(range(0, end, self._block_size), start=1):
            lines.append(f"| BLOQUE {number}" + "|".rjust(34))
            lines.append(_RULE)
            for record in self._block(start):
                if record.key != 0:
                    lines.append(self._format_record(record))
                    lines.append(_RULE)
        if self._last_overflow != self._primary_size:
            lines.append("| ============= [ OVERFLOW ] ============= |")
            lines.append("| ---------------------------------------- |")
            for record in self._records[self._primary_size + 1:]:
                if record.key == 0:
                    break
                lines.append(self._format_record(record))
                lines.append(_RULE)
        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_record(record: Record) -> str:
        return f"| {record.key:>5} | {record.data!s:>5} |{record.link:>5}"

    def _check_block(self, block: int) -> None:
        if not 0 <= block < self._max_blocks * self._block_size or block % self._block_size:
            raise IndexError(f"{block} is not the start of a block")

    def _block(self, start: int) -> list[Record]:
        return self._records[start:start + self._block_size]

    def _occupied(self, block: int) -> int:
        return sum(1 for record in self._block(block) if record.key != 0)

    def _empty_slot(self, block: int) -> int:
        for offset, record in enumerate(self._block(block)):
            if record.key == 0:
                return block + offset
        raise RuntimeError(f"block {block} has no empty slot")

    def _last_record(self, block: int) -> int:
        last = block
        for offset, record in enumerate(self._block(block)):
            if record.key == 0:
                break
            last = block + offset
        return last

    def _key_range(self, block: int) -> tuple[int, int]:
        return self._records[block].key, self._records[self._last_record(block)].key

    def _sort_block(self, block: int) -> bool:
        """Sort a block by key, empty slots last; True if its first key changed."""
        first_key = self._records[block].key
        end = block + self._block_size
        self._records[block:end] = sorted(self._records[block:end], key=_sort_key)
        return self._records[block].key != first_key

    def _overflow_full(self) -> bool:
        return self._last_overflow == self._total_size - 1

    def _primary_full(self) -> bool:
        return self._block_count == self._max_blocks

    def _insert_new_block(self, key: int, data: Any) -> InsertStatus:
        self._block_count += 1
        if self._block_count > 1:
            self._last_block += self._block_size
        self._records[self._last_block] = Record(key, data)
        return InsertStatus.NEW_BLOCK

    def _insert_common(self, block: int, key: int, data: Any) -> InsertStatus:
        self._records[self._empty_slot(block)] = Record(key, data)
        if self._sort_block(block):
            return InsertStatus.FIRST_RECORD_CHANGED
        return InsertStatus.INTERMEDIATE

    def _insert_half_full(self, block: int, key: int, data: Any) -> InsertStatus:
        low, high = self._key_range(block)
        if low < key < high:
            self._records[self._empty_slot(block)] = Record(key, data)
            self._sort_block(block)
            return InsertStatus.INTERMEDIATE
        if self._primary_full():
            return InsertStatus.PRIMARY_FULL
        return self._insert_new_block(key, data)

    def _insert_full(self, block: int, key: int, data: Any) -> InsertStatus:
        low, high = self._key_range(block)
        if low < key < high:
            if self._overflow_full():
                return InsertStatus.OVERFLOW_FULL
            self._last_overflow += 1
            self._records[self._last_overflow] = Record(key, data)
            self._records[self._last_record(block)].link = self._primary_size + 1
            return InsertStatus.INTERMEDIATE
        if self._primary_full():
            return InsertStatus.PRIMARY_FULL
        return self._insert_new_block(key, data)