"""Interactive menu for inserting, deleting, scanning and printing rows."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence
from typing import TextIO, TypeVar

from rowstore.row import (
    BRANCH_MAX_LENGTH,
    CITY_MAX_LENGTH,
    NAME_MAX_LENGTH,
    InvalidInputError,
    Row,
    parse_integer,
    parse_letters,
)
from rowstore.table import RowNotFoundError, Table, TableFullError

Reader = Callable[[], str]
Writer = Callable[[str], object]
T = TypeVar("T")

MENU = (
    "\n1. Insert a new Row\n"
    "2. Delete Row by id\n"
    "3. Scan Table for a specific entry by ID\n"
    "4. To print the table\n"
    "5. Exit\n"
    "Enter your choice: "
)

INSERTION_FAILED = "Error: Invalid input. Row insertion failed."

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _ask(
    read: Reader, write: Writer, prompt: str, parse: Callable[[str], T]
) -> T | None:
    """Prompt for one field; report a problem and return None if it is unusable."""
    write(prompt)
    line = read()
    if not line:
        write("Error reading input.\n")
        return None
    try:
        return parse(line)
    except InvalidInputError as exc:
        write(f"{exc}\n")
        return None


def prompt_row(read: Reader, write: Writer) -> Row:
    """Ask for every field of a row and build it.

    A bad ID is reported but the remaining fields are still asked for; any
    other bad field stops the prompting. Either way InvalidInputError is raised.
    """
    row_id = _ask(read, write, "Enter Student ID (integer): ", parse_integer)
    failed = row_id is None

    text_fields = (
        ("Enter Student name (max 19 characters): ", NAME_MAX_LENGTH),
        ("Enter Student branch (max 3 characters): ", BRANCH_MAX_LENGTH),
        ("Enter Student city (max 11 characters): ", CITY_MAX_LENGTH),
    )
    texts: list[str] = []
    for prompt, max_length in text_fields:
        value = _ask(read, write, prompt, lambda s, n=max_length: parse_letters(s, n))
        if value is None:
            raise InvalidInputError(INSERTION_FAILED)
        texts.append(value)

    marks: list[int] = []
    for course in ("MTH", "PHY", "CHM", "TA", "LIF"):
        value = _ask(read, write, f"Enter {course} marks: ", parse_integer)
        if value is None:
            raise InvalidInputError(INSERTION_FAILED)
        marks.append(value)

    if failed or row_id is None:
        raise InvalidInputError(INSERTION_FAILED)

    name, branch, city = texts
    return Row(row_id, name, branch, city, *marks)


def _read_int(line: str) -> int | None:
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def _has_room(table: Table) -> bool:
    return any(page is None or not page.is_full() for page in table.pages)


def _insert(table: Table, read: Reader, write: Writer) -> None:
    if not _has_room(table):
        write("No empty page found in the table.\n")
        return
    try:
        row = prompt_row(read, write)
    except InvalidInputError as exc:
        write(f"{exc}\n")
        return
    write("Row inserted successfully!\n")
    try:
        table.insert(row)
    except TableFullError as exc:
        write(f"{exc}\n")


def _ask_id(read: Reader, write: Writer, prompt: str) -> int | None:
    write(prompt)
    row_id = _read_int(read())
    if row_id is None:
        write("Invalid input. Please enter an integer.\n")
    return row_id


def _delete(table: Table, read: Reader, write: Writer) -> None:
    row_id = _ask_id(read, write, "Enter ID of the row to delete: ")
    if row_id is None:
        return
    try:
        table.delete(row_id)
    except RowNotFoundError:
        write(f"Row with ID {row_id} not found.\n")
    else:
        write(f"Row with ID {row_id} deleted successfully.\n")


def _scan(table: Table, read: Reader, write: Writer) -> None:
    row_id = _ask_id(read, write, "Enter ID to scan: ")
    if row_id is None:
        return
    found = table.scan(row_id)
    limit = found[0] if found is not None else table.num_pages
    for index in range(limit):
        if table.pages[index] is None:
            write(f"Page {index + 1} is empty.\n")
    if found is None:
        write(f"No entry found with ID {row_id}.\n")
        return
    _, slot, row = found
    write(f"{row.describe(slot + 1)}\n")
    write(f"Entry found with ID {row_id}.\n")


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Drive the menu loop until the user exits or input runs out."""
    read = stdin.readline
    write = stdout.write
    table = Table()
    while True:
        write(MENU)
        line = read()
        if not line:
            return 0
        choice = _read_int(line)
        if choice == 1:
            write("Inserting a new row...\n")
            _insert(table, read, write)
        elif choice == 2:
            write("Deleting a row by ID...\n")
            _delete(table, read, write)
        elif choice == 3:
            write("Scanning table for a specific entry by ID...\n")
            _scan(table, read, write)
        elif choice == 4:
            write("Printing the table...\n")
            write(f"{table.format()}\n")
        elif choice == 5:
            write("Exiting\n")
            return 0
        else:
            write("Invalid choice. Please try again.\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the interactive row store."""
    parser = argparse.ArgumentParser(
        prog="row_store", description="Interactive paged row store."
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)