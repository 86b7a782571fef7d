"""
Cell styling driven by selectors.

`Modify(selector).with_option(option).apply(sheet)` evaluates the selector
against the sheet's extent and applies every option to each selected cell.
`Padding` is the option provided here; anything implementing `CellOption`
can be applied the same way.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace

from cell_types import Coordinate, check_non_negative
from cellselect import Selector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Indent:
    """Inner indent on one side of a cell."""

    size: int
    fill: str = " "

    def __post_init__(self) -> None:
        check_non_negative("Indent size", self.size)
        if len(self.fill) != 1:
            raise ValueError(f"Indent fill must be a single character, got {self.fill!r}")

    @classmethod
    def spaced(cls, size: int) -> Indent:
        return cls(size)


class CellOption(ABC):
    """A setting that can be applied to a single cell of a sheet."""

    @abstractmethod
    def change_cell(self, sheet: StyleSheet, row: int, column: int) -> None:
        ...


@dataclass(frozen=True)
class Padding(CellOption):
    """Left/right/top/bottom inner indent of a cell.

    Example:
        >>> Modify(Rows.single(0)).with_option(Padding.new(0, 0, 1, 1).set_fill(">", "<", "^", "V"))
    """

    left: Indent
    right: Indent
    top: Indent
    bottom: Indent

    @classmethod
    def new(cls, left: int, right: int, top: int, bottom: int) -> Padding:
        """Padding filled with spaces. Use set_fill for other characters."""
        return cls(Indent.spaced(left), Indent.spaced(right), Indent.spaced(top), Indent.spaced(bottom))

    @classmethod
    def zero(cls) -> Padding:
        return cls.new(0, 0, 0, 0)

    def set_fill(self, left: str, right: str, top: str, bottom: str) -> Padding:
        return Padding(
            replace(self.left, fill=left),
            replace(self.right, fill=right),
            replace(self.top, fill=top),
            replace(self.bottom, fill=bottom),
        )

    def change_cell(self, sheet: StyleSheet, row: int, column: int) -> None:
        sheet.set_padding(row, column, self)


@dataclass
class StyleSheet:
    """Per-cell settings of a grid with a fixed extent."""

    count_rows: int
    count_columns: int
    paddings: dict[Coordinate, Padding] = field(default_factory=dict)

    def __post_init__(self) -> None:
        check_non_negative("count_rows", self.count_rows)
        check_non_negative("count_columns", self.count_columns)

    @property
    def extent(self) -> tuple[int, int]:
        return (self.count_rows, self.count_columns)

    def contains(self, row: int, column: int) -> bool:
        return 0 <= row < self.count_rows and 0 <= column < self.count_columns

    def set_padding(self, row: int, column: int, padding: Padding) -> None:
        self.paddings[(row, column)] = padding

    def padding(self, row: int, column: int) -> Padding:
        return self.paddings.get((row, column), Padding.zero())


@dataclass(frozen=True)
class Modify:
    """Applies cell options to the cells a selector locates."""

    selector: Selector
    options: tuple[CellOption, ...] = ()

    def with_option(self, option: CellOption) -> Modify:
        return Modify(self.selector, self.options + (option,))

    def apply(self, sheet: StyleSheet) -> None:
        """
        Apply every option to every selected cell, in selection order.

        Cells outside the sheet (only a Cell selector can produce them) are
        skipped with a warning.
        """
        cells = self.selector.cells(sheet.count_rows, sheet.count_columns)
        logger.debug(
            "Modify: %d option(s) on %d cell(s) of a %dx%d sheet",
            len(self.options),
            len(cells),
            sheet.count_rows,
            sheet.count_columns,
        )

        for row, column in cells:
            if not sheet.contains(row, column):
                logger.warning(
                    "Modify: skipping cell (%d, %d) outside %dx%d sheet",
                    row,
                    column,
                    sheet.count_rows,
                    sheet.count_columns,
                )
                continue
            for option in self.options:
                option.change_cell(sheet, row, column)
