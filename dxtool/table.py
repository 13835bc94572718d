"""A plain text table that aligns columns to their widest cell."""

from __future__ import annotations

from typing import TextIO

from dxtool.colors import strip
from dxtool.padding import Align, pad

_HEADER_PREFIX = "# "


def _ensure_length(values: list[int], index: int) -> None:
    if len(values) <= index:
        values.extend([0] * (index + 1 - len(values)))


class Table:
    """Rows of cells written to a text stream with aligned columns.

    A cell starting with '# ' does not take part in width calculation,
    which lets a single-cell row act as a full-width header line.
    """

    def __init__(self, out: TextIO):
        self.out = out
        self.rows: list[list[str]] = []
        self.column_widths: list[int] = []
        self.column_align: list[int] = []
        self.separator = " "

    def clear(self) -> None:
        """Remove all rows while keeping the layout."""
        self.rows = []

    def add_row(self, *args: str) -> None:
        """Append a row of cells."""
        self.rows.append(list(args))

    def render(self) -> None:
        """Write the table to the output stream."""
        for row in self.rows:
            for index, cell in enumerate(row):
                _ensure_length(self.column_widths, index)
                if not cell.startswith(_HEADER_PREFIX):
                    self.column_widths[index] = max(self.column_widths[index], len(strip(cell)))

        for row in self.rows:
            last_column = len(row) - 1
            for index, cell in enumerate(row):
                if index > 0:
                    self.out.write(self.separator)
                width = self.column_widths[index]
                align = self.get_column_align(index)
                if index >= last_column and align not in (Align.CENTER, Align.LEFT):
                    if cell.startswith(_HEADER_PREFIX):
                        self.out.write(cell.replace(_HEADER_PREFIX, ""))
                    else:
                        self.out.write(cell)
                else:
                    self.out.write(pad(cell, " ", width, align))
            self.out.write("\n")

    def set_columns_aligns(self, aligns: list[int]) -> None:
        """Set the alignment of all columns."""
        self.column_align = list(aligns)

    def get_column_align(self, index: int) -> int:
        """Return the alignment of a column, right by default."""
        _ensure_length(self.column_align, index)
        return self.column_align[index]

    def set_column_align(self, index: int, align: int) -> None:
        """Set the alignment of one column."""
        _ensure_length(self.column_align, index)
        self.column_align[index] = align