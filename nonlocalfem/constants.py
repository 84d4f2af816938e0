"""Enumerations and numeric thresholds shared by the solvers."""

from __future__ import annotations

from enum import Enum, IntEnum

__all__ = [
    "Axis",
    "BoundaryCondition",
    "Material",
    "Theory",
    "ThermalBoundaryCondition",
    "MechanicalBoundaryCondition",
    "MAX_NONLOCAL_WEIGHT",
    "neumann_max_boundary_error",
    "alpha_threshold",
]


class Axis(IntEnum):
    """Coordinate axes, usable as indices."""

    X = 0
    Y = 1
    Z = 2


class BoundaryCondition(Enum):
    """General kinds of boundary conditions."""

    FIRST_KIND = 0
    SECOND_KIND = 1
    THIRD_KIND = 2
    FOURTH_KIND = 3


class Material(Enum):
    """Material symmetry classes."""

    ISOTROPIC = 0
    ORTHOTROPIC = 1
    ANISOTROPIC = 2


class Theory(Enum):
    """Whether the nonlocal part of a model is taken into account."""

    LOCAL = 0
    NONLOCAL = 1


class ThermalBoundaryCondition(Enum):
    """Boundary conditions of heat problems."""

    TEMPERATURE = BoundaryCondition.FIRST_KIND.value
    FLUX = BoundaryCondition.SECOND_KIND.value
    CONVECTION = BoundaryCondition.THIRD_KIND.value


class MechanicalBoundaryCondition(Enum):
    """Boundary conditions of elasticity problems."""

    DISPLACEMENT = BoundaryCondition.FIRST_KIND.value
    PRESSURE = BoundaryCondition.SECOND_KIND.value


MAX_NONLOCAL_WEIGHT = 0.999
"""Local weights at or above this value are treated as a purely local model."""

# Tolerances by precision: single precision first, double precision second.
_NEUMANN_BOUNDARY_ERRORS = {True: 1e-5, False: 1e-10}
_ALPHA_THRESHOLDS = {True: 1e-5, False: 1e-10}


def neumann_max_boundary_error(single_precision: bool = False) -> float:
    """Largest boundary imbalance still accepted for a Neumann problem."""
    return _NEUMANN_BOUNDARY_ERRORS[bool(single_precision)]


def alpha_threshold(single_precision: bool = False) -> float:
    """Heat transfer coefficients below this value are treated as zero."""
    return _ALPHA_THRESHOLDS[bool(single_precision)]