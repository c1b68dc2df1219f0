# rowstore

An in-memory row store for student records. The records are kept in
fixed-size pages. Each page has 68 slots, and a bitmap records which slots
are in use. A table holds at most 100 pages. A page is created when a row
needs one and dropped again when its last row is deleted.

## Installing

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## The console

```
rowstore
```

The console shows a menu with these entries:

1. Insert a new row. You are asked for:
   - the student ID: digits only
   - the name: letters and spaces, cut to 19 characters
   - the branch: letters and spaces, cut to 3 characters
   - the city: letters and spaces, cut to 11 characters
   - the MTH, PHY, CHM, TA and LIF marks: digits only

   If any answer is rejected, the row is not inserted.
2. Delete a row by ID.
3. Scan the table for a row by ID and show it.
4. Print the whole table.
5. Exit.

The console also stops when its input ends.

## As a library

```python
from rowstore.row import Row
from rowstore.table import Table

table = Table()
page_index, slot = table.insert(Row(1, "Asha", "CSE", "Pune", 90, 85, 80, 75, 70))
found = table.scan(1)     # (page_index, slot, row), or None if there is no such ID
print(table.format())
removed = table.delete(1) # the removed Row; raises RowNotFoundError if there is no such ID
```

`Row.describe(position)` renders one row as a single line. The classes
`rowstore.table.Page` and `rowstore.bitmap.Bitmap` can also be used directly.

User input can be checked with `rowstore.row.parse_integer` and
`rowstore.row.parse_letters`. Both raise `InvalidInputError` when the text is
rejected. When every page is full, `Table.insert` raises `TableFullError`.

## What it does not do

Rows are held only in memory. Nothing is saved to disk, so the contents of a
table are lost when the console exits.

## Running the tests

```
pytest
```