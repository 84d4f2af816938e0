"""Common part of 2D solutions: nonlocal traversal and VTK output."""

from __future__ import annotations

import os
from typing import Any, Callable, Optional, Sequence, TextIO, Union

from .mesh_proxy import MeshProxy

__all__ = ["Solution2D"]

VTK_DATA_TYPE = "double"

InfluenceFunction = Callable[[Sequence[float], Sequence[float]], float]


def _fmt(value: float) -> str:
    return format(float(value), ".17g")


class Solution2D:
    """A field on a 2D mesh with the parameters of its nonlocal model."""

    def __init__(self, mesh_proxy: MeshProxy, local_weight: float = 1.0,
                 influence_function: Optional[InfluenceFunction] = None) -> None:
        self._mesh_proxy = mesh_proxy
        self._local_weight = local_weight
        if influence_function is None:
            influence_function = lambda x, y: 0.0  # noqa: E731
        self._influence_function = influence_function

    @property
    def mesh_proxy(self) -> MeshProxy:
        return self._mesh_proxy

    @property
    def local_weight(self) -> float:
        return self._local_weight

    @property
    def influence_function(self) -> InfluenceFunction:
        return self._influence_function

    def calc_nonlocal(self, callback: Callable[[int, int], Any]) -> None:
        """Call ``callback(element, node)`` once for each nonlocal element of each owned node."""
        proxy = self._mesh_proxy
        for node in range(proxy.first_node, proxy.last_node):
            visited: set[int] = set()
            for e_local in proxy.nodes_elements_map(node):
                for e_nonlocal in proxy.neighbors(e_local):
                    if e_nonlocal not in visited:
                        visited.add(e_nonlocal)
                        callback(e_nonlocal, node)

    def save_scalars(self, output: TextIO, values: Sequence[float], name: str) -> None:
        """Write a scalar point field in VTK legacy format."""
        output.write(f"SCALARS {name} {VTK_DATA_TYPE} 1\nLOOKUP_TABLE default\n")
        for value in values:
            output.write(f"{_fmt(value)}\n")

    def save_vectors(self, output: TextIO, vectors: Sequence[Sequence[float]], name: str) -> None:
        """Write a planar vector point field in VTK legacy format."""
        xs, ys = vectors
        output.write(f"VECTORS {name} {VTK_DATA_TYPE}\n")
        for i in range(self._mesh_proxy.mesh.nodes_count()):
            output.write(f"{_fmt(xs[i])} {_fmt(ys[i])} 0\n")

    def save_as_vtk(self, output: Union[TextIO, str, os.PathLike]) -> None:
        """Write the mesh and the point data header to a stream or a file path."""
        if isinstance(output, (str, os.PathLike)):
            with open(output, "w", encoding="utf-8") as stream:
                self.save_as_vtk(stream)
            return
        mesh = self._mesh_proxy.mesh
        mesh.save_as_vtk(output)
        output.write(f"POINT_DATA {mesh.nodes_count()}\n")