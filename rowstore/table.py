"""Paged in-memory table of student rows."""

from __future__ import annotations

from collections.abc import Iterator

from rowstore.bitmap import Bitmap
from rowstore.row import Row

PAGE_SIZE = 4096
ROW_DATA_SIZE = 60
ROWS_PER_PAGE = 68
MAX_PAGES = 100


class TableFullError(Exception):
    """Raised when there is no free slot left to hold a row."""


class RowNotFoundError(LookupError):
    """Raised when a requested row does not exist."""


class Page:
    """A fixed number of row slots with a bitmap of the occupied ones."""

    def __init__(self) -> None:
        self.bitmap = Bitmap(ROWS_PER_PAGE)
        self.slots: list[Row | None] = [None] * ROWS_PER_PAGE

    @property
    def num_rows(self) -> int:
        return sum(1 for row in self.slots if row is not None)

    def is_full(self) -> bool:
        """Return whether every slot is occupied."""
        return self.num_rows >= ROWS_PER_PAGE

    def insert(self, row: Row) -> int:
        """Store ``row`` in the first free slot and return that slot."""
        slot = self.bitmap.first_clear()
        if slot is None:
            raise TableFullError("No empty row found in the page.")
        self.bitmap.set(slot)
        self.slots[slot] = row
        return slot

    def find(self, row_id: int) -> int | None:
        """Return the slot of the first row with ``row_id``, or None."""
        return next((slot for slot, row in self.rows() if row.id == row_id), None)

    def remove(self, slot: int) -> Row:
        """Empty ``slot`` and return the row it held."""
        if not 0 <= slot < ROWS_PER_PAGE:
            raise IndexError(f"Slot {slot} is out of range.")
        row = self.slots[slot]
        if row is None:
            raise RowNotFoundError(f"Slot {slot} is empty.")
        self.bitmap.clear(slot)
        self.slots[slot] = None
        return row

    def rows(self) -> Iterator[tuple[int, Row]]:
        """Yield ``(slot, row)`` for every occupied slot in slot order."""
        for slot, row in enumerate(self.slots):
            if row is not None:
                yield slot, row


class Table:
    """Up to ``MAX_PAGES`` pages; pages are created on demand and dropped when empty."""

    def __init__(self) -> None:
        self.pages: list[Page | None] = [None] * MAX_PAGES
        self.num_pages = 0

    def _counted_pages(self) -> Iterator[tuple[int, Page | None]]:
        # Lookups walk the first num_pages page positions.
        for index in range(self.num_pages):
            yield index, self.pages[index]

    def insert(self, row: Row) -> tuple[int, int]:
        """Store ``row`` and return its ``(page_index, slot)``."""
        for index, page in enumerate(self.pages):
            if page is None:
                page = Page()
                self.pages[index] = page
                self.num_pages += 1
                return index, page.insert(row)
            if not page.is_full():
                return index, page.insert(row)
        raise TableFullError("No empty page found in the table.")

    def delete(self, row_id: int) -> Row:
        """Remove the first row with ``row_id`` and return it."""
        for index, page in self._counted_pages():
            if page is None:
                continue
            slot = page.find(row_id)
            if slot is None:
                continue
            row = page.remove(slot)
            if page.num_rows == 0:
                self.pages[index] = None
                self.num_pages -= 1
            return row
        raise RowNotFoundError(f"Row with ID {row_id} not found.")

    def scan(self, row_id: int) -> tuple[int, int, Row] | None:
        """Return ``(page_index, slot, row)`` for the first row with ``row_id``."""
        for index, page in self._counted_pages():
            if page is None:
                continue
            slot = page.find(row_id)
            if slot is not None:
                row = page.slots[slot]
                assert row is not None
                return index, slot, row
        return None

    def format(self) -> str:
        """Render the table's contents, one line per page header and row."""
        if self.num_pages == 0:
            return "Table is empty."
        lines: list[str] = []
        for index, page in self._counted_pages():
            if page is None:
                continue
            lines.append(f"Page {index + 1}:")
            lines.extend(f"  {row.describe(slot + 1)}" for slot, row in page.rows())
        return "\n".join(lines)