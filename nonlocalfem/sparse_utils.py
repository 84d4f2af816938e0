"""Helpers for boundary condition kinds and compressed sparse row storage."""

from __future__ import annotations

from enum import Enum
from itertools import accumulate
from typing import Any, Iterable, NamedTuple, Sequence

from .constants import BoundaryCondition

__all__ = [
    "CsrStorage",
    "to_general_condition",
    "to_general_conditions",
    "prepare_memory",
    "sort_indices",
]


class CsrStorage(NamedTuple):
    """Row pointers, column indices and values of a sparse row-major matrix."""

    indptr: list[int]
    indices: list[int]
    values: list[float]


def to_general_condition(condition: Any) -> BoundaryCondition:
    """Map a problem-specific boundary condition onto its general kind."""
    value = condition.value if isinstance(condition, Enum) else condition
    return BoundaryCondition(int(value))


def to_general_conditions(conditions: Iterable[Any]) -> list[BoundaryCondition]:
    """Map every condition of a sequence onto its general kind."""
    return [to_general_condition(condition) for condition in conditions]


def prepare_memory(row_counts: Sequence[int], cols: int) -> CsrStorage:
    """Allocate storage for rows holding the given numbers of entries.

    Every column index is set to the last column and every value to zero.
    """
    if any(count < 0 for count in row_counts):
        raise ValueError("row counts must be non-negative")
    indptr = [0, *accumulate(row_counts)]
    total = indptr[-1]
    if total and cols < 1:
        raise ValueError("a matrix with entries needs at least one column")
    return CsrStorage(indptr, [cols - 1] * total, [0.0] * total)


def sort_indices(indptr: Sequence[int], indices: Sequence[int]) -> list[int]:
    """Return the column indices with each row's part sorted."""
    result = list(indices)
    for start, stop in zip(indptr, indptr[1:]):
        result[start:stop] = sorted(result[start:stop])
    return result