from nonlocalfem.boundary_1d import (
    NonstationaryBoundary1D,
    StationaryBoundary1D,
    boundary_condition_first_kind_1d,
    boundary_condition_second_kind_1d,
    boundary_type,
    to_stationary,
    to_stationary_pair,
)
from nonlocalfem.constants import BoundaryCondition, ThermalBoundaryCondition as TBC
from nonlocalfem.sparse_utils import to_general_condition


def test_default_stationary_condition_is_second_kind_zero():
    condition = StationaryBoundary1D()
    assert to_general_condition(condition.type) is BoundaryCondition.SECOND_KIND
    assert condition.val == 0


def test_default_nonstationary_condition_is_zero_at_any_time():
    assert to_stationary(NonstationaryBoundary1D(), 3.5).val == 0


def test_boundary_type_returns_both_kinds():
    conditions = (StationaryBoundary1D(TBC.TEMPERATURE, 1.0), StationaryBoundary1D(TBC.FLUX, 2.0))
    assert boundary_type(conditions) == (TBC.TEMPERATURE, TBC.FLUX)


def test_to_stationary_evaluates_at_time():
    condition = NonstationaryBoundary1D(TBC.FLUX, lambda t: 2 * t)
    frozen = to_stationary(condition, 1.5)
    assert frozen == StationaryBoundary1D(TBC.FLUX, condition.func(1.5))


def test_to_stationary_pair_keeps_types_and_order():
    pair = (NonstationaryBoundary1D(TBC.TEMPERATURE, lambda t: t),
            NonstationaryBoundary1D(TBC.CONVECTION, lambda t: -t))
    frozen = to_stationary_pair(pair, 4.0)
    assert [c.type for c in frozen] == [TBC.TEMPERATURE, TBC.CONVECTION]
    assert [c.val for c in frozen] == [4.0, -4.0]


def test_first_kind_moves_columns_and_sets_value():
    f = [1.0, 2.0, 3.0, 4.0]
    value = 5.0
    conditions = (StationaryBoundary1D(TBC.TEMPERATURE, value), StationaryBoundary1D(TBC.FLUX, 1.0))
    matrix_bound = ({1: 2.0, 2: 0.5}, {2: 9.0})
    result = boundary_condition_first_kind_1d(f, conditions, matrix_bound)
    assert result[0] == value
    assert result[1] == f[1] - matrix_bound[0][1] * value
    assert result[2] == f[2] - matrix_bound[0][2] * value
    assert result[3] == f[3]
    assert f == [1.0, 2.0, 3.0, 4.0]


def test_first_kind_without_temperature_changes_nothing():
    f = [1.0, 2.0, 3.0]
    conditions = (StationaryBoundary1D(TBC.FLUX, 3.0), StationaryBoundary1D(TBC.CONVECTION, 3.0))
    assert boundary_condition_first_kind_1d(f, conditions, ({1: 1.0}, {1: 1.0})) == f


def test_second_kind_adds_flux_only_for_flux_conditions():
    conditions = (StationaryBoundary1D(TBC.FLUX, 2.0), StationaryBoundary1D(TBC.TEMPERATURE, 7.0))
    result = boundary_condition_second_kind_1d([0.0] * 4, conditions, (0, 3))
    assert result == [2.0, 0.0, 0.0, 0.0]