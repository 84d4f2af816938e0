import io
import math

import pytest

from nonlocalfem.elements import Element2DIntegrate, Side1D, Side2D
from nonlocalfem.mesh_proxy import MeshProxy
from nonlocalfem.solution_2d import Solution2D

_G = 1 / math.sqrt(3)


class Gauss2:
    def nodes_count(self):
        return 2

    def node(self, i):
        return (-_G, _G)[i]

    def weight(self, i):
        return 1.0

    def boundary(self, side):
        return -1.0 if side is Side1D.LEFT else 1.0


def make_quad():
    ref = [(-1, -1), (1, -1), (1, 1), (-1, 1)]
    basis = [lambda p, s=s, t=t: (1 + s * p[0]) * (1 + t * p[1]) / 4 for s, t in ref]
    basis_xi = [lambda p, s=s, t=t: s * (1 + t * p[1]) / 4 for s, t in ref]
    basis_eta = [lambda p, s=s, t=t: (1 + s * p[0]) * t / 4 for s, t in ref]
    boundaries = {
        Side2D.LEFT: lambda x: -1.0,
        Side2D.RIGHT: lambda x: 1.0,
        Side2D.DOWN: lambda x: -1.0,
        Side2D.UP: lambda x: 1.0,
    }
    return Element2DIntegrate(ref, basis, boundaries, Gauss2(), basis_xi=basis_xi, basis_eta=basis_eta)


class FakeMesh:
    def __init__(self):
        self._nodes = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0), (0.0, 1.0), (1.0, 1.0), (2.0, 1.0)]
        self._elements = [(0, 1, 4, 3), (1, 2, 5, 4)]
        self._quad = make_quad()

    def nodes_count(self):
        return len(self._nodes)

    def elements_count(self):
        return len(self._elements)

    def element_2d(self, e):
        return self._quad

    def node_number(self, e, i):
        return self._elements[e][i]

    def node(self, n):
        return self._nodes[n]

    def boundary_names(self):
        return []

    def boundary_elements_count(self, bound):
        raise KeyError(bound)

    def element_1d(self, bound, e):
        raise KeyError(bound)

    def boundary_node_number(self, bound, e, i):
        raise KeyError(bound)

    def save_as_vtk(self, output):
        output.write("MESH\n")


@pytest.fixture
def proxy():
    return MeshProxy(FakeMesh())


def test_defaults(proxy):
    solution = Solution2D(proxy)
    assert solution.local_weight == 1.0
    assert solution.influence_function((0.0, 0.0), (1.0, 1.0)) == 0.0
    assert solution.mesh_proxy is proxy


def test_parameters_kept(proxy):
    solution = Solution2D(proxy, 0.5, lambda x, y: 2.0)
    assert solution.local_weight == 0.5
    assert solution.influence_function((0.0, 0.0), (0.0, 0.0)) == 2.0


def _collect(solution):
    pairs = []
    solution.calc_nonlocal(lambda e, node: pairs.append((e, node)))
    return pairs


def test_calc_nonlocal_small_radius(proxy):
    proxy.find_neighbours(0.5)
    pairs = _collect(Solution2D(proxy, 0.5))
    assert len(pairs) == len(set(pairs))
    expected = {(e, n) for n in range(proxy.mesh.nodes_count()) for e in proxy.nodes_elements_map(n)}
    assert set(pairs) == expected


def test_calc_nonlocal_large_radius(proxy):
    proxy.find_neighbours(2.0)
    pairs = _collect(Solution2D(proxy, 0.5))
    assert len(pairs) == len(set(pairs))
    assert set(pairs) == {(e, n) for n in range(proxy.mesh.nodes_count()) for e in (0, 1)}


def test_calc_nonlocal_without_neighbours(proxy):
    assert _collect(Solution2D(proxy)) == []


def test_save_scalars(proxy):
    out = io.StringIO()
    Solution2D(proxy).save_scalars(out, [1.0, 0.5], "Temperature")
    assert out.getvalue() == "SCALARS Temperature double 1\nLOOKUP_TABLE default\n1\n0.5\n"


def test_save_scalars_round_trip(proxy):
    values = [0.1, 1 / 3, -2.5e-7]
    out = io.StringIO()
    Solution2D(proxy).save_scalars(out, values, "T")
    lines = out.getvalue().splitlines()[2:]
    assert [float(line) for line in lines] == values


def test_save_vectors(proxy):
    out = io.StringIO()
    n = proxy.mesh.nodes_count()
    Solution2D(proxy).save_vectors(out, ([float(i) for i in range(n)], [0.5] * n), "Flux")
    lines = out.getvalue().splitlines()
    assert lines[0] == "VECTORS Flux double"
    assert len(lines) == n + 1
    assert lines[1] == "0 0.5 0"
    assert all(line.endswith(" 0") for line in lines[1:])


def test_save_as_vtk_stream(proxy):
    out = io.StringIO()
    Solution2D(proxy).save_as_vtk(out)
    assert out.getvalue() == "MESH\nPOINT_DATA 6\n"


def test_save_as_vtk_path(proxy, tmp_path):
    path = tmp_path / "solution.vtk"
    Solution2D(proxy).save_as_vtk(path)
    assert path.read_text(encoding="utf-8") == "MESH\nPOINT_DATA 6\n"