"""Normalised influence functions of one-dimensional nonlocal models."""

from __future__ import annotations

import math

__all__ = ["Constant1D", "Polynomial1D", "NormalDistribution1D"]


def _beta(a: float, b: float) -> float:
    return math.exp(math.lgamma(a) + math.lgamma(b) - math.lgamma(a + b))


class Constant1D:
    """Constant influence inside the radius, zero outside."""

    def __init__(self, r: float) -> None:
        self.radius = r

    @property
    def radius(self) -> float:
        return self._r

    @radius.setter
    def radius(self, r: float) -> None:
        self._r = r
        self._norm = 0.5 / r

    @property
    def norm(self) -> float:
        return self._norm

    def __call__(self, x: float, y: float) -> float:
        return self._norm if abs(x - y) < self._r else 0.0


class Polynomial1D:
    """Influence ``norm * (1 - (h/r)**p)**q`` inside the radius, zero outside."""

    def __init__(self, r: float, p: int, q: int) -> None:
        if p <= 0:
            raise ValueError("Parameter P must be greater than 0.")
        if q <= 0:
            raise ValueError("Parameter Q must be greater than 0.")
        self._p = p
        self._q = q
        self.radius = r

    @property
    def radius(self) -> float:
        return self._r

    @radius.setter
    def radius(self, r: float) -> None:
        self._r = r
        self._norm = self._p / (2 * r * _beta(1 / self._p, self._q + 1))

    @property
    def norm(self) -> float:
        return self._norm

    def __call__(self, x: float, y: float) -> float:
        h = abs(x - y)
        if h >= self._r:
            return 0.0
        return self._norm * (1 - (h / self._r) ** self._p) ** self._q


class NormalDistribution1D:
    """Gaussian influence with standard deviation equal to the radius."""

    def __init__(self, r: float) -> None:
        self.radius = r

    @property
    def radius(self) -> float:
        return self._r

    @radius.setter
    def radius(self, r: float) -> None:
        self._r = r
        self._norm = 1 / (r * math.sqrt(2 * math.pi))
        self._disp_mul = -0.5 / (r * r)

    @property
    def norm(self) -> float:
        return self._norm

    def __call__(self, x: float, y: float) -> float:
        return self._norm * math.exp(self._disp_mul * (x - y) ** 2)