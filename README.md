# indexedfile

An in-memory indexed sequential file. Records are kept sorted by an integer
key in fixed-size blocks inside a primary data area. A separate index area
holds the first key of each block. When a record falls inside the key range
of a block that is already full, it goes into an overflow area that follows
the primary area.

A key of `0` marks an empty slot, so `0` cannot be used as a record key.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Interactive menu

```
indexedfile
```

This starts a text menu on standard input and output. By default the file
has 4 records per block, a primary area of 16 slots and 24 slots in total.
These options change that:

- `--records-per-block N`
- `--primary-size N`
- `--total-size N` (must be larger than the primary size)
- `--sample` fills the file with nine sample records before the menu starts.

The menu options are:

1. Insert a key and a value.
2. Look up a key.
3. Show the index area and the data area.
4. Quit.

The menu reads whitespace-separated tokens from its input, so it can also be
driven by a pipe, for example `printf '1 5 hello 2 5 4' | indexedfile`.
It stops at option `4` or at the end of its input. The prompts and messages
are in Spanish.

## Library use

```python
from indexedfile.archive import IndexedFile

archive = IndexedFile(records_per_block=4, primary_size=16, total_size=24)
warning = archive.insert(2, "first")   # "" when nothing needs attention
archive.insert(8, "second")

print(archive.lookup(8))   # "second"
print(archive.lookup(99))  # None
print(archive)             # index table followed by data blocks and overflow
```

`IndexedFile.insert` returns a warning string, also kept in
`IndexedFile.warning`. It is empty when the insert worked. Otherwise it is
`OVERFLOW_FULL_WARNING` (the overflow area has no free slot) or
`PRIMARY_FULL_WARNING` (the primary area has no room for another block), and
the record was not stored.

The parts can also be used on their own:

- `indexedfile.index_area.IndexArea` is the table of `IndexEntry` key and
  address pairs. `IndexArea.lookup` gives the start address of the block for
  a key and `IndexArea.update` replaces the table.
- `indexedfile.data_area.DataArea` holds the blocks and the overflow area.
  `DataArea.insert` returns an `InsertStatus`, `DataArea.lookup` returns the
  stored data or `None`, and `DataArea.index_entries` lists the first key and
  address of every block in use.
- `indexedfile.menu.insert_sample_records` fills a file with the sample
  records, and `indexedfile.menu.run_menu` runs the menu on any pair of text
  streams.

## What it does not do

- The file lives in memory only; nothing is saved to or loaded from disk.
- There is no reorganisation: once the overflow area or the primary area is
  full, further inserts that need them are refused with a warning.
- Records cannot be deleted or updated, and inserting an existing key again
  stores a second record rather than replacing the first.