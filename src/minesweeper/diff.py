"""
Reversible descriptions of board changes.

A diff keeps full before/after snapshots of every touched cell, so it
can be applied or reverted without recomputing anything.
"""
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from .cell import Cell


@dataclass(frozen=True)
class SingleCellDiff:
    """
    Change of one cell.

    Attributes:
        index: Flat row-major index of the cell.
        before: Cell value prior to the change.
        after: Cell value after the change.
    """

    index: int
    before: Cell
    after: Cell


@dataclass(frozen=True)
class SingleCell:
    """Diff touching exactly one cell."""

    change: SingleCellDiff


@dataclass(frozen=True)
class MultiCell:
    """Diff touching several cells, in application order."""

    changes: Tuple[SingleCellDiff, ...]


Diff = Union[SingleCell, MultiCell]


def iter_changes(diff: Diff) -> Iterator[SingleCellDiff]:
    """Yield the single-cell changes of a diff in application order."""
    if isinstance(diff, SingleCell):
        yield diff.change
    else:
        yield from diff.changes
