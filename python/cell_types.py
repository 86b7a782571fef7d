"""
Shared type definitions for the cellselect system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Coordinate = tuple[int, int]  # (row, column), 0-indexed


class CombineMode(Enum):
    """How a Combination merges the cells of its two children."""

    UNION = "union"  # Both sets, deduplicated and sorted
    DIFFERENCE = "difference"  # Left set minus right set, left order kept


def check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# Range Endpoints
# =============================================================================


@dataclass(frozen=True)
class Included:
    """An endpoint that contains its value."""

    value: int

    def __post_init__(self) -> None:
        check_non_negative("Included value", self.value)


@dataclass(frozen=True)
class Excluded:
    """An endpoint that stops just before its value."""

    value: int

    def __post_init__(self) -> None:
        check_non_negative("Excluded value", self.value)


@dataclass(frozen=True)
class Unbounded:
    """An open endpoint."""

    pass


Bound = Included | Excluded | Unbounded


# =============================================================================
# Spans
# =============================================================================


@dataclass(frozen=True)
class Span:
    """A one-dimensional range of row or column indexes.

    The start endpoint is never Excluded; such a span can be built but is
    rejected when it is resolved.
    """

    start: Bound
    end: Bound

    @classmethod
    def full(cls) -> Span:
        """`..`"""
        return cls(Unbounded(), Unbounded())

    @classmethod
    def starting_at(cls, start: int) -> Span:
        """`start..`"""
        return cls(Included(start), Unbounded())

    @classmethod
    def between(cls, start: int, stop: int) -> Span:
        """`start..stop`"""
        return cls(Included(start), Excluded(stop))

    @classmethod
    def between_inclusive(cls, start: int, last: int) -> Span:
        """`start..=last`"""
        return cls(Included(start), Included(last))

    @classmethod
    def up_to(cls, stop: int) -> Span:
        """`..stop`"""
        return cls(Unbounded(), Excluded(stop))

    @classmethod
    def up_to_inclusive(cls, last: int) -> Span:
        """`..=last`"""
        return cls(Unbounded(), Included(last))

    @classmethod
    def at(cls, index: int) -> Span:
        """A single index."""
        return cls(Included(index), Included(index))

    def __str__(self) -> str:
        match self.start:
            case Included(value=x):
                head = str(x)
            case Excluded(value=x):
                head = f"({x}"
            case _:
                head = ""
        match self.end:
            case Included(value=y):
                tail = f"..={y}"
            case Excluded(value=y):
                tail = f"..{y}"
            case _:
                tail = ".."
        return head + tail

    def resolve(self, count_elements: int) -> tuple[int, int]:
        """Resolve against an extent, see resolve_bounds."""
        return resolve_bounds(self.start, self.end, count_elements)


def resolve_bounds(start: Bound, end: Bound, count_elements: int) -> tuple[int, int]:
    """
    Convert a pair of endpoints into a half-open [start, end) index interval.

    Only the Unbounded cases consult count_elements; explicit values are passed
    through as given, so an interval reaching past the extent simply iterates
    over fewer (or no) indexes.

    Raises:
        AssertionError: if start is Excluded. A span can only get such a start
            through a programming error, so callers should never catch this.
    """
    match (start, end):
        case (Included(value=x), Included(value=y)):
            return (x, y + 1)
        case (Included(value=x), Excluded(value=y)):
            return (x, y)
        case (Included(value=x), Unbounded()):
            return (x, count_elements)
        case (Unbounded(), Unbounded()):
            return (0, count_elements)
        case (Unbounded(), Included(value=y)):
            return (0, y + 1)
        case (Unbounded(), Excluded(value=y)):
            return (0, y)
        case _:
            raise AssertionError("A start bound can't be excluded")
