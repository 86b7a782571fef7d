"""
Cell-coordinate selection for two-dimensional grids.

A selector describes *which* cells of a grid to address without being bound
to any grid: it is evaluated with `cells(count_rows, count_columns)` against
the extent current at the time of use, and yields (row, column) pairs that
the styling layer then applies options to.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from cell_types import (
    Bound,
    CombineMode,
    Coordinate,
    Excluded,
    Included,
    Span,
    Unbounded,
    check_non_negative,
    resolve_bounds,
)

__all__ = [
    "Bound",
    "Cell",
    "Column",
    "Columns",
    "Combination",
    "CombineMode",
    "Coordinate",
    "EmptySelector",
    "Excluded",
    "FirstColumn",
    "FirstRow",
    "Frame",
    "Full",
    "Included",
    "LastColumn",
    "LastColumnOffset",
    "LastRow",
    "LastRowOffset",
    "Row",
    "Rows",
    "Segment",
    "Selector",
    "Span",
    "Unbounded",
    "combine_cells",
    "remove_cells",
    "resolve_bounds",
]

logger = logging.getLogger(__name__)


def _last_index(count: int) -> int:
    # A zero extent still resolves to index 0.
    return count - 1 if count > 0 else 0


# =============================================================================
# Selector Capability
# =============================================================================


class Selector(ABC):
    """Locates a set of cells on a grid of a given size."""

    @abstractmethod
    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        """Return the coordinates this selector denotes for the given extent."""

    def union_with(self, other: Selector) -> Combination:
        """Cells of both selectors. Repeated cells are emitted once."""
        return Combination(self, other, CombineMode.UNION)

    def difference_from(self, other: Selector) -> Combination:
        """Cells of this selector that are absent from other."""
        return Combination(self, other, CombineMode.DIFFERENCE)


# =============================================================================
# Whole Grid and Sub-Regions
# =============================================================================


@dataclass(frozen=True)
class Full(Selector):
    """Every cell of the grid, row by row."""

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        return Segment.all().cells(count_rows, count_columns)


@dataclass(frozen=True)
class Segment(Selector):
    """A rectangular sub-grid given by a row span and a column span."""

    rows: Span
    columns: Span

    @classmethod
    def all(cls) -> Segment:
        """The whole grid, same as Full."""
        return cls(Span.full(), Span.full())

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        rows_start, rows_end = self.rows.resolve(count_rows)
        columns_start, columns_end = self.columns.resolve(count_columns)

        return [
            (row, col)
            for row in range(rows_start, rows_end)
            for col in range(columns_start, columns_end)
        ]


@dataclass(frozen=True)
class Frame(Selector):
    """Cells on the edges of each side.

    Sides are emitted independently (top, bottom, left, right), so corners and
    the cells of single-row or single-column grids appear more than once.
    """

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        cells: list[Coordinate] = []

        if count_rows > 0:
            cells.extend((0, col) for col in range(count_columns))
            cells.extend((count_rows - 1, col) for col in range(count_columns))

        if count_columns > 0:
            cells.extend((row, 0) for row in range(count_rows))
            cells.extend((row, count_columns - 1) for row in range(count_rows))

        return cells


# =============================================================================
# Rows
# =============================================================================


@dataclass(frozen=True)
class Row(Selector):
    """A single row located by its index from the top."""

    index: int

    def __post_init__(self) -> None:
        check_non_negative("Row index", self.index)

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        if self.index >= count_rows:
            return []

        return [(self.index, column) for column in range(count_columns)]


@dataclass(frozen=True)
class LastRowOffset(Selector):
    """A single row located by its distance from the last row."""

    offset: int

    def __post_init__(self) -> None:
        check_non_negative("Row offset", self.offset)

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        row = _last_index(count_rows)
        if self.offset > row:
            return []

        row -= self.offset
        return [(row, column) for column in range(count_columns)]


@dataclass(frozen=True)
class FirstRow(Selector):
    """The first row of a grid, often holding the header."""

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        return [(0, column) for column in range(count_columns)]

    def shifted_forward(self, amount: int) -> Row:
        """The row `amount` rows below the first one."""
        return Row(amount)


@dataclass(frozen=True)
class LastRow(Selector):
    """The last row of a grid."""

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        row = _last_index(count_rows)
        return [(row, column) for column in range(count_columns)]

    def shifted_backward(self, amount: int) -> LastRowOffset:
        """The row `amount` rows above the last one."""
        return LastRowOffset(amount)


@dataclass(frozen=True)
class Rows(Selector):
    """All cells on a span of rows, row by row."""

    span: Span

    @staticmethod
    def single(index: int) -> Row:
        return Row(index)

    @staticmethod
    def first() -> FirstRow:
        """If the grid has no columns the selection is empty."""
        return FirstRow()

    @staticmethod
    def last() -> LastRow:
        """If the grid has no columns the selection is empty."""
        return LastRow()

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        start, end = self.span.resolve(count_rows)
        return [(row, column) for row in range(start, end) for column in range(count_columns)]


# =============================================================================
# Columns
# =============================================================================


@dataclass(frozen=True)
class Column(Selector):
    """A single column located by its index from the left."""

    index: int

    def __post_init__(self) -> None:
        check_non_negative("Column index", self.index)

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        if self.index >= count_columns:
            return []

        return [(row, self.index) for row in range(count_rows)]


@dataclass(frozen=True)
class LastColumnOffset(Selector):
    """A single column located by its distance from the last column."""

    offset: int

    def __post_init__(self) -> None:
        check_non_negative("Column offset", self.offset)

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        col = _last_index(count_columns)
        if self.offset > col:
            return []

        col -= self.offset
        return [(row, col) for row in range(count_rows)]


@dataclass(frozen=True)
class FirstColumn(Selector):
    """The first column of a grid."""

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        return [(row, 0) for row in range(count_rows)]

    def shifted_forward(self, amount: int) -> Column:
        """The column `amount` columns right of the first one."""
        return Column(amount)


@dataclass(frozen=True)
class LastColumn(Selector):
    """The last column of a grid."""

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        col = _last_index(count_columns)
        return [(row, col) for row in range(count_rows)]

    def shifted_backward(self, amount: int) -> LastColumnOffset:
        """The column `amount` columns left of the last one."""
        return LastColumnOffset(amount)


@dataclass(frozen=True)
class Columns(Selector):
    """All cells on a span of columns, column by column."""

    span: Span

    @staticmethod
    def single(index: int) -> Column:
        return Column(index)

    @staticmethod
    def first() -> FirstColumn:
        """If the grid has no rows the selection is empty."""
        return FirstColumn()

    @staticmethod
    def last() -> LastColumn:
        """If the grid has no rows the selection is empty."""
        return LastColumn()

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        start, end = self.span.resolve(count_columns)
        return [(row, column) for column in range(start, end) for row in range(count_rows)]


# =============================================================================
# Single Cells
# =============================================================================


@dataclass(frozen=True)
class Cell(Selector):
    """One particular cell.

    The extent is ignored: the coordinate is returned even when it lies outside
    the grid. Keeping it in bounds is up to the caller.
    """

    row: int
    column: int

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        return [(self.row, self.column)]


@dataclass(frozen=True)
class EmptySelector(Selector):
    """Selects nothing."""

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        return []


# =============================================================================
# Combination
# =============================================================================


def combine_cells(lhs: list[Coordinate], rhs: list[Coordinate]) -> list[Coordinate]:
    """Merge two sets of cells into one, sorted by row then column, without repeats."""
    return sorted(set(lhs) | set(rhs))


def remove_cells(lhs: list[Coordinate], rhs: list[Coordinate]) -> list[Coordinate]:
    """Drop the cells of lhs that are present in rhs. Order of lhs is kept."""
    excluded = set(rhs)
    return [cell for cell in lhs if cell not in excluded]


@dataclass(frozen=True)
class Combination(Selector):
    """Two selectors chained together by a merge mode.

    A Combination is itself a Selector, so chains evaluate left to right:
    `a.union_with(b).difference_from(c)` selects (a | b) - c.
    """

    lhs: Selector
    rhs: Selector
    mode: CombineMode

    def cells(self, count_rows: int, count_columns: int) -> list[Coordinate]:
        left = self.lhs.cells(count_rows, count_columns)
        right = self.rhs.cells(count_rows, count_columns)

        match self.mode:
            case CombineMode.UNION:
                result = combine_cells(left, right)
            case CombineMode.DIFFERENCE:
                result = remove_cells(left, right)

        logger.debug(
            "Combination(%s): lhs=%d cells, rhs=%d cells -> %d cells (extent %dx%d)",
            self.mode.value,
            len(left),
            len(right),
            len(result),
            count_rows,
            count_columns,
        )
        return result
