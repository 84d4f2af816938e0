import pytest

from nonlocalfem.influence_1d import Constant1D, NormalDistribution1D, Polynomial1D


def _integral(function, x, a, b, steps=20000):
    h = (b - a) / steps
    return sum(function(x, a + (k + 0.5) * h) for k in range(steps)) * h


def test_constant_is_normalised():
    influence = Constant1D(0.3)
    assert influence.norm * 2 * influence.radius == pytest.approx(1.0)
    assert _integral(influence, 0.0, -1.0, 1.0) == pytest.approx(1.0, abs=1e-3)


def test_constant_support_excludes_radius():
    influence = Constant1D(1.0)
    assert influence(0.0, 0.5) == influence.norm
    assert influence(0.0, 1.0) == 0.0


def test_constant_radius_update_renormalises():
    influence = Constant1D(1.0)
    influence.radius = 2.0
    assert influence.radius == 2.0
    assert influence.norm * 4.0 == pytest.approx(1.0)


@pytest.mark.parametrize("p, q", [(2, 1), (1, 1), (3, 2)])
def test_polynomial_is_normalised(p, q):
    influence = Polynomial1D(0.5, p, q)
    assert _integral(influence, 0.0, -0.5, 0.5) == pytest.approx(1.0, abs=1e-3)


def test_polynomial_shape():
    influence = Polynomial1D(0.5, 2, 1)
    assert influence(0.2, 0.2) == pytest.approx(influence.norm)
    assert influence(0.0, 0.5) == 0.0
    assert influence(0.1, 0.3) == pytest.approx(influence(0.3, 0.1))


@pytest.mark.parametrize("p, q", [(0, 1), (2, 0)])
def test_polynomial_rejects_non_positive_parameters(p, q):
    with pytest.raises(ValueError):
        Polynomial1D(1.0, p, q)


def test_normal_distribution_is_normalised():
    influence = NormalDistribution1D(0.2)
    assert _integral(influence, 0.0, -2.0, 2.0) == pytest.approx(1.0, abs=1e-6)
    assert influence(1.0, 1.0) == pytest.approx(influence.norm)


def test_normal_distribution_radius_update():
    influence = NormalDistribution1D(1.0)
    influence.radius = 0.1
    assert _integral(influence, 0.0, -1.0, 1.0) == pytest.approx(1.0, abs=1e-6)