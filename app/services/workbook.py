# app/services/workbook.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol, Sequence, Union

# A decoded cell: numbers for serial dates/time fractions, text, booleans,
# or None for an undefined cell.
CellValue = Union[str, int, float, bool, None]
Row = List[CellValue]


class Worksheet(Protocol):
    """
    Read-only view over one decoded sheet.
    """

    def cell(self, row: int, col: int) -> CellValue:
        """Value at zero-based (row, col), or None when undefined."""

    def rows(self, start_row: int = 0) -> List[Row]:
        """Row-major values from `start_row` (zero-based) to the last row."""


class Workbook(Protocol):
    """
    A decoded spreadsheet workbook.

    Turning raw .xlsx/.xlsm bytes into this structure is left to the caller.
    """

    @property
    def sheet_names(self) -> Sequence[str]:
        ...

    def sheet(self, name: str) -> Worksheet:
        ...


def _trim_trailing_undefined(row: Sequence[CellValue]) -> Row:
    values = list(row)
    while values and values[-1] is None:
        values.pop()
    return values


@dataclass
class GridWorksheet:
    """
    In-memory worksheet backed by a list of rows.

    Rows may have different lengths; cells past the end of a row read as
    None. Extracted rows drop trailing undefined cells, so a row's length is
    the position of its last defined cell plus one.
    """

    grid: List[Row] = field(default_factory=list)

    def cell(self, row: int, col: int) -> CellValue:
        if row < 0 or col < 0 or row >= len(self.grid):
            return None
        values = self.grid[row]
        if col >= len(values):
            return None
        return values[col]

    def rows(self, start_row: int = 0) -> List[Row]:
        return [_trim_trailing_undefined(r) for r in self.grid[max(start_row, 0):]]


@dataclass
class GridWorkbook:
    """
    In-memory workbook: sheet name -> GridWorksheet, in insertion order.
    """

    sheets: Dict[str, GridWorksheet] = field(default_factory=dict)

    @classmethod
    def from_rows(cls, sheets: Dict[str, List[Row]]) -> "GridWorkbook":
        return cls({name: GridWorksheet([list(r) for r in grid]) for name, grid in sheets.items()})

    @property
    def sheet_names(self) -> List[str]:
        return list(self.sheets)

    def sheet(self, name: str) -> GridWorksheet:
        return self.sheets[name]

