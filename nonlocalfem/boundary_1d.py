"""Boundary conditions of one-dimensional problems and their right-hand side parts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from .constants import BoundaryCondition
from .sparse_utils import to_general_condition

__all__ = [
    "StationaryBoundary1D",
    "NonstationaryBoundary1D",
    "boundary_type",
    "to_stationary",
    "to_stationary_pair",
    "boundary_condition_first_kind_1d",
    "boundary_condition_second_kind_1d",
]


@dataclass(frozen=True)
class StationaryBoundary1D:
    """A boundary condition with a fixed value."""

    type: Any = BoundaryCondition.SECOND_KIND
    val: float = 0.0


@dataclass(frozen=True)
class NonstationaryBoundary1D:
    """A boundary condition whose value depends on time."""

    type: Any = BoundaryCondition.SECOND_KIND
    func: Callable[[float], float] = field(default=lambda t: 0.0)


def boundary_type(conditions: Sequence[Any]) -> tuple:
    """Return the kinds of the left and right conditions."""
    return tuple(condition.type for condition in conditions)


def to_stationary(condition: NonstationaryBoundary1D, t: float) -> StationaryBoundary1D:
    """Freeze a time-dependent condition at time t."""
    return StationaryBoundary1D(condition.type, condition.func(t))


def to_stationary_pair(conditions: Sequence[NonstationaryBoundary1D], t: float) -> tuple[StationaryBoundary1D, ...]:
    """Freeze both conditions of a segment at time t."""
    return tuple(to_stationary(condition, t) for condition in conditions)


def boundary_condition_first_kind_1d(f: Sequence[float],
                                     boundary_condition: Sequence[StationaryBoundary1D],
                                     matrix_bound: Sequence[Mapping[int, float]]) -> list[float]:
    """Apply prescribed values at the ends of the segment.

    The columns of the boundary nodes, given by ``matrix_bound``, are moved
    to the right-hand side and the boundary entries receive the values.
    """
    result = list(f)
    ends = (0, len(result) - 1)
    for end, condition, bound_column in zip(ends, boundary_condition, matrix_bound):
        if to_general_condition(condition.type) is BoundaryCondition.FIRST_KIND:
            for i, value in bound_column.items():
                result[i] -= value * condition.val
            result[end] = condition.val
    return result


def boundary_condition_second_kind_1d(f: Sequence[float],
                                      boundary_condition: Sequence[StationaryBoundary1D],
                                      ind: Sequence[int]) -> list[float]:
    """Add prescribed fluxes at the given indices of the right-hand side."""
    result = list(f)
    for index, condition in zip(ind, boundary_condition):
        if to_general_condition(condition.type) is BoundaryCondition.SECOND_KIND:
            result[index] += condition.val
    return result