"""A mesh together with its precomputed quadrature data and element neighbourhoods."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Callable, Optional

from . import mesh_geometry as geo

__all__ = ["Balancing", "MeshProxy"]

Point = tuple[float, float]


class Balancing(Enum):
    """How nodes are shared out between workers when neighbours are searched."""

    NO = 0
    MEMORY = 1
    SPEED = 2


class MeshProxy:
    """Caches per-element quadrature tables of a 2D mesh.

    The mesh is processed by a single worker, so the range of nodes it owns
    is the whole mesh.
    """

    def __init__(self, mesh: Any) -> None:
        self.set_mesh(mesh)

    def set_mesh(self, mesh: Any) -> None:
        """Attach a mesh and recompute every cached table."""
        if mesh is None:
            raise ValueError("mesh can't be None")
        self._mesh = mesh
        self._nodes_elements_map = geo.node_elements_map(mesh)
        self._global_to_local = geo.global_to_local_numbering(mesh)

        self._quad_shifts = geo.quadrature_shifts(mesh)
        self._quad_coords = geo.approx_all_quad_nodes(mesh, self._quad_shifts)
        self._jacobi_matrices = geo.approx_all_jacobi_matrices(mesh, self._quad_shifts)

        self._quad_node_shifts = geo.quadrature_node_shifts(mesh)
        self._dndx = geo.dndx(mesh, self._quad_shifts, self._jacobi_matrices, self._quad_node_shifts)

        self._quad_shifts_bound = geo.quadrature_shifts_bound(mesh)
        self._quad_coords_bound = geo.approx_all_quad_nodes_bound(mesh, self._quad_shifts_bound)
        self._jacobi_matrices_bound = geo.approx_all_jacobi_matrices_bound(mesh, self._quad_shifts_bound)

        self._areas = geo.approx_elements_areas(mesh, self._quad_shifts, self._jacobi_matrices)

        self._first_node = 0
        self._last_node = mesh.nodes_count()
        self._neighbors: list[tuple[int, ...]] = [() for _ in range(mesh.elements_count())]

    @property
    def mesh(self) -> Any:
        return self._mesh

    @property
    def first_node(self) -> int:
        return self._first_node

    @property
    def last_node(self) -> int:
        return self._last_node

    def nodes_elements_map(self, node: int) -> list[int]:
        """Elements that contain the node."""
        return self._nodes_elements_map[node]

    def global_to_local_numbering(self, element: int, node: int) -> int:
        """Local number of a global node inside an element."""
        return self._global_to_local[element][node]

    def element_area(self, element: int) -> float:
        return self._areas[element]

    def quad_shift(self, element: int) -> int:
        """Offset of the element's quadrature nodes in the flat tables."""
        return self._quad_shifts[element]

    def _quad_slice(self, element: int) -> slice:
        return slice(self._quad_shifts[element], self._quad_shifts[element + 1])

    def quad_coords(self, element: int) -> list[Point]:
        """Physical coordinates of the element's quadrature nodes."""
        return self._quad_coords[self._quad_slice(element)]

    def jacobi_matrices(self, element: int) -> list[tuple[float, float, float, float]]:
        """Jacobi matrices at the element's quadrature nodes."""
        return self._jacobi_matrices[self._quad_slice(element)]

    def dndx(self, element: int, i: int) -> list[Point]:
        """Global derivatives of basis function i at the element's quadrature nodes."""
        qcount = self._mesh.element_2d(element).qnodes_count()
        start = self._quad_node_shifts[element] + i * qcount
        return self._dndx[start:start + qcount]

    def _bound_slice(self, bound: str, element: int) -> slice:
        shifts = self._quad_shifts_bound[bound]
        return slice(shifts[element], shifts[element + 1])

    def quad_coords_bound(self, bound: str, element: int) -> list[Point]:
        """Quadrature node coordinates of an element of a boundary group."""
        return self._quad_coords_bound[bound][self._bound_slice(bound, element)]

    def jacobi_matrices_bound(self, bound: str, element: int) -> list[Point]:
        """Tangent vectors at the quadrature nodes of an element of a boundary group."""
        return self._jacobi_matrices_bound[bound][self._bound_slice(bound, element)]

    def neighbors(self, element: int) -> tuple[int, ...]:
        """Elements whose centres lie within the search radius of the element's centre."""
        return self._neighbors[element]

    def find_neighbours(self, r: float, balancing: Balancing = Balancing.MEMORY,
                        is_triangle: Optional[Callable[[int], bool]] = None) -> None:
        """Find the neighbours of every element touching the owned nodes.

        ``is_triangle(e)`` tells whether element ``e`` is triangular; by
        default every element is taken to be quadrilateral.
        """
        balancing = Balancing(balancing)
        if is_triangle is None:
            is_triangle = lambda e: False  # noqa: E731
        centres = geo.approx_centres_of_elements(self._mesh, is_triangle)
        elements = {
            e
            for node in range(self._first_node, self._last_node)
            for e in self._nodes_elements_map[node]
        }
        count = self._mesh.elements_count()
        neighbors: list[tuple[int, ...]] = [() for _ in range(count)]
        for e_local in elements:
            centre = centres[e_local]
            neighbors[e_local] = tuple(
                e_nonlocal for e_nonlocal in range(count)
                if math.dist(centre, centres[e_nonlocal]) < r
            )
        self._neighbors = neighbors
        # With a single worker there is nothing to rebalance whatever ``balancing`` is.