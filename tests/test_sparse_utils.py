import pytest

from nonlocalfem.constants import BoundaryCondition, MechanicalBoundaryCondition, ThermalBoundaryCondition
from nonlocalfem.sparse_utils import prepare_memory, sort_indices, to_general_condition, to_general_conditions


def test_to_general_condition_from_thermal():
    assert to_general_condition(ThermalBoundaryCondition.CONVECTION) is BoundaryCondition.THIRD_KIND
    assert to_general_condition(ThermalBoundaryCondition.TEMPERATURE) is BoundaryCondition.FIRST_KIND


def test_to_general_condition_is_idempotent():
    for kind in BoundaryCondition:
        assert to_general_condition(kind) is kind


def test_to_general_condition_rejects_unknown_value():
    with pytest.raises(ValueError):
        to_general_condition(17)


def test_to_general_conditions_keeps_order():
    result = to_general_conditions([MechanicalBoundaryCondition.PRESSURE, ThermalBoundaryCondition.TEMPERATURE])
    assert result == [BoundaryCondition.SECOND_KIND, BoundaryCondition.FIRST_KIND]


def test_prepare_memory_invariants():
    counts = [2, 0, 3, 1]
    storage = prepare_memory(counts, 5)
    assert storage.indptr[0] == 0
    assert len(storage.indptr) == len(counts) + 1
    assert [b - a for a, b in zip(storage.indptr, storage.indptr[1:])] == counts
    assert len(storage.indices) == storage.indptr[-1] == len(storage.values)
    assert set(storage.indices) == {4}
    assert all(value == 0 for value in storage.values)


def test_prepare_memory_rejects_negative_counts():
    with pytest.raises(ValueError):
        prepare_memory([1, -1], 3)


def test_sort_indices_sorts_each_row():
    indptr = [0, 2, 5]
    indices = [3, 1, 4, 0, 2]
    result = sort_indices(indptr, indices)
    assert result == [1, 3, 0, 2, 4]
    assert indices == [3, 1, 4, 0, 2]


def test_sort_indices_preserves_rows_as_multisets():
    indptr = [0, 3, 3, 6]
    indices = [5, 5, 1, 9, 0, 2]
    result = sort_indices(indptr, indices)
    for start, stop in zip(indptr, indptr[1:]):
        assert result[start:stop] == sorted(indices[start:stop])