"""Basis functions that map a scalar data point to a feature vector."""

from __future__ import annotations

import math
from collections.abc import Iterable

PI = 3.14159265


def polynomial_basis(x: float, n: int) -> list[float]:
    """Return the monomials ``[x**(n-1), ..., x, 1]`` of a point ``x``."""
    if n < 0:
        raise ValueError("degree must not be negative")
    powers = []
    q = 1.0
    for _ in range(n):
        powers.append(q)
        q *= x
    powers.reverse()
    return powers


def _check_sigma(sigma: float) -> None:
    if sigma == 0:
        raise ValueError("sigma can't be zero")


def rbf_basis(x: float, mu: Iterable[float], sigma: float) -> list[float]:
    """Return ``exp(-(x - mu_i)**2 / (2 * sigma**2))`` for every centre ``mu_i``."""
    _check_sigma(sigma)
    factor = -2.0 * sigma * sigma
    return [math.exp((x - m) * (x - m) / factor) for m in mu]


def sigmoid(x: float) -> float:
    """Return the logistic sigmoid of ``x``."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def sigmoid_basis(x: float, mu: Iterable[float], sigma: float) -> list[float]:
    """Return ``sigmoid((x - mu_i) / sigma)`` for every centre ``mu_i``."""
    _check_sigma(sigma)
    return [sigmoid((x - m) / sigma) for m in mu]


def fourier_basis(x: float, n: int) -> list[float]:
    """Return ``[1, sin(2*pi*x), cos(2*pi*x), ..., sin(2*pi*n*x), cos(2*pi*n*x)]``."""
    features = [1.0]
    for i in range(1, n + 1):
        angle = 2 * PI * i * x
        features.extend((math.sin(angle), math.cos(angle)))
    return features