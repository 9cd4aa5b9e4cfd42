"""Interactive text menu for an indexed file of string records."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from indexedfile.archive import IndexedFile

_BANNER = "\n===============[ MENU ]===============\n"

SAMPLE_RECORDS = (
    (2, "test1"),
    (8, "test2"),
    (5, "test3"),
    (10, "test4"),
    (12, "test5"),
    (14, "test6"),
    (6, "test7"),
    (7, "test8"),
    (4, "test9"),
)


def insert_sample_records(archive: IndexedFile) -> None:
    """Fill the archive with a fixed set of sample records."""
    for key, data in SAMPLE_RECORDS:
        archive.insert(key, data)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_key(tokens: Iterator[str], stdout: TextIO) -> int | None:
    token = next(tokens)
    try:
        return int(token)
    except ValueError:
        stdout.write(f"Clave invalida: {token}\n")
        return None


def _insert(archive: IndexedFile, tokens: Iterator[str], stdout: TextIO) -> None:
    stdout.write("Clave a insertar: \n")
    key = _read_key(tokens, stdout)
    if key is None:
        return
    stdout.write("Dato a insertar\n")
    data = next(tokens)
    warning = archive.insert(key, data)
    stdout.write(f"{warning}\nTermino insercion.")


def _lookup(archive: IndexedFile, tokens: Iterator[str], stdout: TextIO) -> None:
    stdout.write("Clave a consultar: \n")
    key = _read_key(tokens, stdout)
    if key is None:
        return
    result = archive.lookup(key)
    if result is not None:
        stdout.write(f"DATO ES:{result}\n")
    else:
        stdout.write("no se encontro\n")


def run_menu(archive: IndexedFile, stdin: TextIO, stdout: TextIO) -> None:
    """Show the menu and serve commands until option 4 or end of input."""
    tokens = _tokens(stdin)
    while True:
        stdout.write(_BANNER)
        stdout.write("1. Insertar en Archivo \n")
        stdout.write("2. Consultar en Archivo\n")
        stdout.write("3. Mostrar Area de indices y Area de datos\n")
        stdout.write("4. Salir")
        stdout.write(_BANNER)
        try:
            option = next(tokens)
            if option == "1":
                _insert(archive, tokens, stdout)
            elif option == "2":
                _lookup(archive, tokens, stdout)
            elif option == "3":
                stdout.write(f"{archive}\n")
            elif option == "4":
                return
        except StopIteration:
            return


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Indexed sequential file menu.")
    parser.add_argument("--records-per-block", type=int, default=4)
    parser.add_argument("--primary-size", type=int, default=16)
    parser.add_argument("--total-size", type=int, default=24)
    parser.add_argument(
        "--sample", action="store_true", help="preload the sample records"
    )
    args = parser.parse_args(argv)
    try:
        archive = IndexedFile(args.records_per_block, args.primary_size, args.total_size)
    except ValueError as error:
        parser.error(str(error))
    if args.sample:
        insert_sample_records(archive)
    run_menu(archive, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())