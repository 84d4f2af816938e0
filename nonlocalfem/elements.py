"""Two-dimensional reference finite elements and their quadrature tables."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Callable, Mapping, Optional, Protocol, Sequence

from .symbolic import Expression, simplify

__all__ = ["Side1D", "Side2D", "Element2D", "Element2DIntegrate"]

Point = tuple[float, float]
BasisFunction = Callable[[Point], Any]


class Side1D(Enum):
    """Ends of a segment."""

    LEFT = 0
    RIGHT = 1


class Side2D(Enum):
    """Sides of a reference domain."""

    DOWN = 0
    RIGHT = 1
    UP = 2
    LEFT = 3


class _Quadrature1D(Protocol):
    def nodes_count(self) -> int: ...
    def node(self, i: int) -> float: ...
    def weight(self, i: int) -> float: ...
    def boundary(self, side: Side1D) -> float: ...


def _derivatives(basis: Sequence[BasisFunction], variable: int) -> list[BasisFunction]:
    if not all(isinstance(function, Expression) for function in basis):
        raise ValueError("derivatives must be given for basis functions that are not symbolic expressions")
    return [simplify(function.derivative(variable)) for function in basis]


class Element2D:
    """A reference element: nodes, basis functions and the shape of its domain.

    The domain lies between ``boundary(LEFT, x)`` and ``boundary(RIGHT, x)``
    in xi and between ``boundary(DOWN, xi)`` and ``boundary(UP, xi)`` in eta.
    Derivatives of symbolic basis functions are found automatically.
    """

    def __init__(self, nodes: Sequence[Sequence[float]], basis: Sequence[BasisFunction],
                 boundaries: Mapping[Side2D, Callable[[float], float]],
                 basis_xi: Optional[Sequence[BasisFunction]] = None,
                 basis_eta: Optional[Sequence[BasisFunction]] = None) -> None:
        self._nodes = [(float(x), float(y)) for x, y in nodes]
        self._N = list(basis)
        if len(self._nodes) != len(self._N):
            raise ValueError("every node needs exactly one basis function")
        self._Nxi = list(basis_xi) if basis_xi is not None else _derivatives(self._N, 0)
        self._Neta = list(basis_eta) if basis_eta is not None else _derivatives(self._N, 1)
        if len(self._Nxi) != len(self._N) or len(self._Neta) != len(self._N):
            raise ValueError("every basis function needs both derivatives")
        missing = [side.name for side in Side2D if side not in boundaries]
        if missing:
            raise ValueError(f"boundaries missing for sides: {', '.join(missing)}")
        self._boundaries = dict(boundaries)

    @staticmethod
    def _point(x: Sequence[float]) -> Point:
        return float(x[0]), float(x[1])

    def nodes_count(self) -> int:
        return len(self._N)

    def node(self, i: int) -> Point:
        return self._nodes[i]

    def N(self, i: int, x: Sequence[float]) -> float:
        return self._N[i](self._point(x))

    def Nxi(self, i: int, x: Sequence[float]) -> float:
        return self._Nxi[i](self._point(x))

    def Neta(self, i: int, x: Sequence[float]) -> float:
        return self._Neta[i](self._point(x))

    def boundary(self, side: Side2D, x: float) -> float:
        return self._boundaries[side](x)


class Element2DIntegrate(Element2D):
    """A reference element with basis values tabulated at product quadrature nodes."""

    def __init__(self, nodes: Sequence[Sequence[float]], basis: Sequence[BasisFunction],
                 boundaries: Mapping[Side2D, Callable[[float], float]],
                 quadrature_x: _Quadrature1D,
                 quadrature_y: Optional[_Quadrature1D] = None,
                 basis_xi: Optional[Sequence[BasisFunction]] = None,
                 basis_eta: Optional[Sequence[BasisFunction]] = None) -> None:
        super().__init__(nodes, basis, boundaries, basis_xi, basis_eta)
        self.set_quadrature(quadrature_x, quadrature_x if quadrature_y is None else quadrature_y)

    def set_quadrature(self, quadrature_x: _Quadrature1D, quadrature_y: _Quadrature1D) -> None:
        """Map the quadratures onto the domain and tabulate weights and basis values."""
        nx, ny = quadrature_x.nodes_count(), quadrature_y.nodes_count()
        if nx == 0 or ny == 0:
            raise ValueError("quadrature needs at least one node")
        qx_left, qx_right = quadrature_x.boundary(Side1D.LEFT), quadrature_x.boundary(Side1D.RIGHT)
        qy_left, qy_right = quadrature_y.boundary(Side1D.LEFT), quadrature_y.boundary(Side1D.RIGHT)
        left = self.boundary(Side2D.LEFT, 0.0)
        jacobian_x = (self.boundary(Side2D.RIGHT, 0.0) - left) / (qx_right - qx_left)

        weights: list[float] = []
        xs: list[float] = []
        ys: list[float] = []
        for i in range(nx):
            x = left + (quadrature_x.node(i) - qx_left) * jacobian_x
            xs.append(x)
            down = self.boundary(Side2D.DOWN, x)
            jacobian_y = (self.boundary(Side2D.UP, x) - down) / (qy_right - qy_left)
            # The eta nodes of the last xi column are the ones tabulated below.
            ys = [down + (quadrature_y.node(j) - qy_left) * jacobian_y for j in range(ny)]
            weights.extend(quadrature_x.weight(i) * jacobian_x * quadrature_y.weight(j) * jacobian_y
                           for j in range(ny))

        points = [(x, y) for x in xs for y in ys]
        self._weights = weights
        self._qN = [[self.N(i, p) for p in points] for i in range(self.nodes_count())]
        self._qNxi = [[self.Nxi(i, p) for p in points] for i in range(self.nodes_count())]
        self._qNeta = [[self.Neta(i, p) for p in points] for i in range(self.nodes_count())]
        self._nearest_qnode = [
            min(range(len(points)), key=lambda q, node=node: math.dist(node, points[q]))
            for node in self._nodes
        ]

    def qnodes_count(self) -> int:
        return len(self._weights)

    def weight(self, q: int) -> float:
        return self._weights[q]

    def qN(self, i: int, q: int) -> float:
        return self._qN[i][q]

    def qNxi(self, i: int, q: int) -> float:
        return self._qNxi[i][q]

    def qNeta(self, i: int, q: int) -> float:
        return self._qNeta[i][q]

    def nearest_qnode(self, i: int) -> int:
        return self._nearest_qnode[i]