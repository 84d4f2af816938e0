"""Quadrature data of a 2D mesh: shifts, coordinates, Jacobi matrices, areas and centres."""

from __future__ import annotations

import math
from typing import Any, Callable, Iterable, Mapping, Protocol, Sequence

__all__ = [
    "jacobian",
    "node_elements_map",
    "global_to_local_numbering",
    "quadrature_shifts",
    "check_shifts",
    "approx_all_quad_nodes",
    "approx_all_jacobi_matrices",
    "quadrature_node_shifts",
    "dndx",
    "quadrature_shifts_bound",
    "check_bound_shifts",
    "approx_all_quad_nodes_bound",
    "approx_all_jacobi_matrices_bound",
    "approx_elements_areas",
    "approx_centres_of_elements",
]

Point = tuple[float, float]
Matrix = tuple[float, float, float, float]


class _Mesh(Protocol):
    """What the functions of this module need from a mesh."""

    def nodes_count(self) -> int: ...
    def elements_count(self) -> int: ...
    def element_2d(self, e: int) -> Any: ...
    def node_number(self, e: int, i: int) -> int: ...
    def node(self, n: int) -> Sequence[float]: ...
    def boundary_names(self) -> Iterable[str]: ...
    def boundary_elements_count(self, bound: str) -> int: ...
    def element_1d(self, bound: str, e: int) -> Any: ...
    def boundary_node_number(self, bound: str, e: int, i: int) -> int: ...


def jacobian(matrix: Sequence[float]) -> float:
    """Length of a boundary tangent (2 entries) or |det| of a 2x2 Jacobi matrix (4 entries)."""
    if len(matrix) == 2:
        return math.hypot(matrix[0], matrix[1])
    if len(matrix) == 4:
        return abs(matrix[0] * matrix[3] - matrix[1] * matrix[2])
    raise ValueError(f"a Jacobi matrix has 2 or 4 entries, got {len(matrix)}")


def _element_nodes(mesh: _Mesh, e: int) -> list[Sequence[float]]:
    el = mesh.element_2d(e)
    return [mesh.node(mesh.node_number(e, i)) for i in range(el.nodes_count())]


def node_elements_map(mesh: _Mesh) -> list[list[int]]:
    """For every node, the elements that contain it, in increasing order."""
    result: list[list[int]] = [[] for _ in range(mesh.nodes_count())]
    for e in range(mesh.elements_count()):
        for i in range(mesh.element_2d(e).nodes_count()):
            result[mesh.node_number(e, i)].append(e)
    return result


def global_to_local_numbering(mesh: _Mesh) -> list[dict[int, int]]:
    """For every element, a map from global node numbers to local ones."""
    return [
        {mesh.node_number(e, i): i for i in range(mesh.element_2d(e).nodes_count())}
        for e in range(mesh.elements_count())
    ]


def _cumulative(counts: Iterable[int]) -> list[int]:
    shifts = [0]
    for count in counts:
        shifts.append(shifts[-1] + count)
    return shifts


def quadrature_shifts(mesh: _Mesh) -> list[int]:
    """Offsets of each element's quadrature nodes in the flat tables."""
    return _cumulative(mesh.element_2d(e).qnodes_count() for e in range(mesh.elements_count()))


def check_shifts(mesh: _Mesh, shifts: Sequence[int]) -> None:
    """Raise ValueError unless there is one shift per element plus the total."""
    if mesh.elements_count() + 1 != len(shifts):
        raise ValueError("Quadrature shifts are incorrect size.")


def approx_all_quad_nodes(mesh: _Mesh, shifts: Sequence[int]) -> list[Point]:
    """Physical coordinates of every quadrature node of the mesh."""
    check_shifts(mesh, shifts)
    coords: list[Point] = [(0.0, 0.0)] * shifts[-1]
    for e in range(mesh.elements_count()):
        el = mesh.element_2d(e)
        nodes = _element_nodes(mesh, e)
        for q in range(el.qnodes_count()):
            x = sum(node[0] * el.qN(i, q) for i, node in enumerate(nodes))
            y = sum(node[1] * el.qN(i, q) for i, node in enumerate(nodes))
            coords[shifts[e] + q] = (x, y)
    return coords


def approx_all_jacobi_matrices(mesh: _Mesh, shifts: Sequence[int]) -> list[Matrix]:
    """Jacobi matrices (dx/dxi, dx/deta, dy/dxi, dy/deta) at every quadrature node."""
    check_shifts(mesh, shifts)
    matrices: list[Matrix] = [(0.0, 0.0, 0.0, 0.0)] * shifts[-1]
    for e in range(mesh.elements_count()):
        el = mesh.element_2d(e)
        nodes = _element_nodes(mesh, e)
        for q in range(el.qnodes_count()):
            matrices[shifts[e] + q] = (
                sum(node[0] * el.qNxi(i, q) for i, node in enumerate(nodes)),
                sum(node[0] * el.qNeta(i, q) for i, node in enumerate(nodes)),
                sum(node[1] * el.qNxi(i, q) for i, node in enumerate(nodes)),
                sum(node[1] * el.qNeta(i, q) for i, node in enumerate(nodes)),
            )
    return matrices


def quadrature_node_shifts(mesh: _Mesh) -> list[int]:
    """Offsets of each element's block of (node, quadrature node) pairs."""
    return _cumulative(
        mesh.element_2d(e).nodes_count() * mesh.element_2d(e).qnodes_count()
        for e in range(mesh.elements_count())
    )


def dndx(mesh: _Mesh, shifts: Sequence[int], jacobi_matrices: Sequence[Sequence[float]],
         node_shifts: Sequence[int]) -> list[Point]:
    """Global derivatives of the basis functions, not divided by the determinant."""
    result: list[Point] = [(0.0, 0.0)] * node_shifts[-1]
    for e in range(mesh.elements_count()):
        el = mesh.element_2d(e)
        qcount = el.qnodes_count()
        for i in range(el.nodes_count()):
            for q in range(qcount):
                j = jacobi_matrices[shifts[e] + q]
                nxi, neta = el.qNxi(i, q), el.qNeta(i, q)
                result[node_shifts[e] + i * qcount + q] = (
                    nxi * j[3] - neta * j[2],
                    -nxi * j[1] + neta * j[0],
                )
    return result


def quadrature_shifts_bound(mesh: _Mesh) -> dict[str, list[int]]:
    """Quadrature offsets of the elements of every boundary group."""
    return {
        bound: _cumulative(
            mesh.element_1d(bound, e).qnodes_count()
            for e in range(mesh.boundary_elements_count(bound))
        )
        for bound in mesh.boundary_names()
    }


def check_bound_shifts(mesh: _Mesh, shifts: Mapping[str, Sequence[int]]) -> None:
    """Raise ValueError unless the boundary shifts match the mesh's boundary groups."""
    names = list(mesh.boundary_names())
    if len(names) != len(shifts):
        raise ValueError("The number of boundary groups does not match the number of shifts groups.")
    for bound in names:
        if bound not in shifts or mesh.boundary_elements_count(bound) + 1 != len(shifts[bound]):
            raise ValueError("Quadrature shifts on bound are incorrect size.")


def _bound_table(mesh: _Mesh, shifts: Mapping[str, Sequence[int]], weight_of: str) -> dict[str, list[Point]]:
    check_bound_shifts(mesh, shifts)
    tables: dict[str, list[Point]] = {}
    for bound in mesh.boundary_names():
        bound_shifts = shifts[bound]
        table: list[Point] = [(0.0, 0.0)] * bound_shifts[-1]
        for e in range(mesh.boundary_elements_count(bound)):
            el = mesh.element_1d(bound, e)
            factor: Callable[[int, int], float] = getattr(el, weight_of)
            nodes = [mesh.node(mesh.boundary_node_number(bound, e, i)) for i in range(el.nodes_count())]
            for q in range(el.qnodes_count()):
                table[bound_shifts[e] + q] = (
                    sum(node[0] * factor(i, q) for i, node in enumerate(nodes)),
                    sum(node[1] * factor(i, q) for i, node in enumerate(nodes)),
                )
        tables[bound] = table
    return tables


def approx_all_quad_nodes_bound(mesh: _Mesh, shifts: Mapping[str, Sequence[int]]) -> dict[str, list[Point]]:
    """Physical coordinates of the quadrature nodes of every boundary group."""
    return _bound_table(mesh, shifts, "qN")


def approx_all_jacobi_matrices_bound(mesh: _Mesh, shifts: Mapping[str, Sequence[int]]) -> dict[str, list[Point]]:
    """Tangent vectors (dx/dxi, dy/dxi) at the quadrature nodes of every boundary group."""
    return _bound_table(mesh, shifts, "qNxi")


def approx_elements_areas(mesh: _Mesh, shifts: Sequence[int],
                          jacobi_matrices: Sequence[Sequence[float]]) -> list[float]:
    """Area of every element by quadrature."""
    areas = []
    for e in range(mesh.elements_count()):
        el = mesh.element_2d(e)
        area = 0.0
        for q in range(el.qnodes_count()):
            weight = el.weight(q) * jacobian(jacobi_matrices[shifts[e] + q])
            area += sum(weight * el.qN(i, q) for i in range(el.nodes_count()))
        areas.append(area)
    return areas


def approx_centres_of_elements(mesh: _Mesh, is_triangle: Callable[[int], bool]) -> list[Point]:
    """Image of the reference centre of every element.

    ``is_triangle(e)`` tells whether element ``e`` is triangular; its reference
    centre is then (1/3, 1/3), otherwise (0, 0).
    """
    centres = []
    for e in range(mesh.elements_count()):
        el = mesh.element_2d(e)
        x0 = 1.0 / 3.0 if is_triangle(e) else 0.0
        values = [el.N(i, (x0, x0)) for i in range(el.nodes_count())]
        nodes = _element_nodes(mesh, e)
        centres.append((
            sum(node[0] * value for node, value in zip(nodes, values)),
            sum(node[1] * value for node, value in zip(nodes, values)),
        ))
    return centres