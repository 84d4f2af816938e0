"""Parameters, convection terms and solvability checks of 1D heat problems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableSequence, Sequence

from .boundary_1d import StationaryBoundary1D
from .constants import BoundaryCondition, alpha_threshold, neumann_max_boundary_error
from .sparse_utils import to_general_condition

__all__ = [
    "EquationParameters1D",
    "convection_condition_matrix_part_1d",
    "convection_condition_right_part_1d",
    "is_neumann_problem",
    "is_robin_problem",
    "is_solvable_robin_problem",
    "check_solvability",
]


@dataclass
class EquationParameters1D:
    """Material constants of a one-dimensional heat equation."""

    thermal_conductivity: float = 1.0
    heat_capacity: float = 1.0
    density: float = 1.0
    integral: float = 0.0
    alpha: tuple[float, float] = (0.0, 0.0)


def _is(kind: Any, general: BoundaryCondition) -> bool:
    return to_general_condition(kind) is general


def convection_condition_matrix_part_1d(matrix: MutableSequence[MutableSequence[float]],
                                        boundary_condition: Sequence[Any],
                                        alpha: Sequence[float]) -> MutableSequence[MutableSequence[float]]:
    """Subtract heat transfer coefficients from the corner diagonal entries.

    The matrix is updated in place and returned.
    """
    left, right = boundary_condition
    if _is(left, BoundaryCondition.THIRD_KIND):
        matrix[0][0] -= alpha[0]
    if _is(right, BoundaryCondition.THIRD_KIND):
        last = len(matrix) - 1
        matrix[last][len(matrix[last]) - 1] -= alpha[1]
    return matrix


def convection_condition_right_part_1d(f: Sequence[float],
                                       boundary_condition: Sequence[StationaryBoundary1D],
                                       alpha: Sequence[float]) -> list[float]:
    """Return the right-hand side with the ambient temperature terms added."""
    result = list(f)
    left, right = boundary_condition
    if _is(left.type, BoundaryCondition.THIRD_KIND):
        result[0] += alpha[0] * left.val
    if _is(right.type, BoundaryCondition.THIRD_KIND):
        result[-1] += alpha[1] * right.val
    return result


def _neumann_end(condition: StationaryBoundary1D, alpha: float) -> bool:
    return (_is(condition.type, BoundaryCondition.SECOND_KIND)
            or (_is(condition.type, BoundaryCondition.THIRD_KIND) and abs(alpha) < alpha_threshold()))


def is_neumann_problem(boundary_condition: Sequence[StationaryBoundary1D], alpha: Sequence[float]) -> bool:
    """True when both ends carry a flux, or a convection with vanishing coefficient."""
    left, right = boundary_condition
    return _neumann_end(left, alpha[0]) and _neumann_end(right, alpha[1])


def is_robin_problem(boundary_condition: Sequence[StationaryBoundary1D]) -> bool:
    """True when the left end carries a convection condition."""
    return _is(boundary_condition[0].type, BoundaryCondition.THIRD_KIND)


def is_solvable_robin_problem(section: Sequence[float], alpha: Sequence[float]) -> bool:
    """False when alpha[0] == alpha[1] / ((b - a) * alpha[1] - 1)."""
    length = section[1] - section[0]
    denominator = length * alpha[1] - 1
    if denominator == 0:
        return True
    return abs(alpha[1] / denominator - alpha[0]) > alpha_threshold()


def check_solvability(boundary_condition: Sequence[StationaryBoundary1D],
                      alpha: Sequence[float],
                      section: Sequence[float]) -> bool:
    """Raise ValueError for unsolvable problems; return whether it is a Neumann problem."""
    is_neumann = is_neumann_problem(boundary_condition, alpha)
    left, right = boundary_condition
    if is_neumann and abs(left.val + right.val) > neumann_max_boundary_error():
        raise ValueError("Unsolvable Neumann problem: left_flow + right_flow != 0.")
    if is_robin_problem(boundary_condition) and not is_solvable_robin_problem(section, alpha):
        raise ValueError("Unsolvable Robin problem: alpha[0] == alpha[1] / ((b - a) * alpha[1] - 1).")
    return is_neumann