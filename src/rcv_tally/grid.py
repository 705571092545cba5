"""
Contains the CellRef and GridRegion classes, used to locate the ballot block in a sheet.
"""

from __future__ import annotations

from rcv_tally.errors import InvalidCellReference

# column letters accepted in a cell reference. there is no H
ALPHABET = "ABCDEFGIJKLMNOPQRSTUVWXYZ"

# fields skipped in each record ahead of the column the reference points at
COLUMN_OFFSET = 1

# the first sheet row holds the column headers
HEADER_ROWS = 1


class CellRef:
    """A parsed "<column letter><row number>" reference. `row` and `col` are 0-based."""

    @staticmethod
    def from_str(reference: str) -> CellRef:
        """Parse a reference such as "R3".

        :param reference: Column letter from :data:`ALPHABET` followed by a 1-based row number.
        :type reference: str
        :raises InvalidCellReference: Raised on an unknown column letter or a bad row number.
        :rtype: CellRef
        """
        if not reference or reference[0] not in ALPHABET:
            raise InvalidCellReference(reference, "column must be one of " + ALPHABET)
        col = ALPHABET.index(reference[0])

        row_text = reference[1:]
        if not row_text.isascii() or not row_text.isdigit():
            raise InvalidCellReference(reference, "row must be a positive number")
        row = int(row_text)
        if row < 1:
            raise InvalidCellReference(reference, "rows are numbered from 1")

        return CellRef(row - 1, col)

    def __init__(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def __eq__(self, other) -> bool:
        if not isinstance(other, CellRef):
            return NotImplemented
        return (self.row, self.col) == (other.row, other.col)

    def __repr__(self) -> str:
        return f"CellRef({str(self)!r})"

    def __str__(self) -> str:
        return f"{ALPHABET[self.col]}{self.row + 1}"


class GridRegion:
    """Inclusive rectangle between two cell references."""

    @staticmethod
    def from_str(start: str, end: str) -> GridRegion:
        return GridRegion(CellRef.from_str(start), CellRef.from_str(end))

    def __init__(self, start: CellRef, end: CellRef) -> None:
        if end.row < start.row or end.col < start.col:
            raise InvalidCellReference(f"{start}:{end}", "end cell comes before start cell")
        if start.row < HEADER_ROWS:
            raise InvalidCellReference(str(start), "region starts inside the header row")
        self.start = start
        self.end = end

    @property
    def n_rows(self) -> int:
        return self.end.row - self.start.row + 1

    @property
    def n_cols(self) -> int:
        return self.end.col - self.start.col + 1

    @property
    def first_record(self) -> int:
        """Index of the first data record (below the header) in the region."""
        return self.start.row - HEADER_ROWS

    @property
    def first_field(self) -> int:
        """Index of the first field consumed from each record."""
        return self.start.col + COLUMN_OFFSET

    def __repr__(self) -> str:
        return f"GridRegion({str(self.start)!r}, {str(self.end)!r})"
