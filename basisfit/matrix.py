"""Dense matrix helpers on lists of lists, and least-squares fitting."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[float]]


def _require_square(a: Sequence[Sequence[float]]) -> int:
    n = len(a)
    if any(len(row) != n for row in a):
        raise ValueError("Matrix must be square")
    return n


def _minor(a: Sequence[Sequence[float]], row: int, col: int) -> Matrix:
    return [
        list(r[:col]) + list(r[col + 1:])
        for i, r in enumerate(a)
        if i != row
    ]


def determinant(a: Sequence[Sequence[float]]) -> float:
    """Return the determinant of a square matrix by cofactor expansion."""
    n = _require_square(a)
    if n == 0:
        return 1.0
    if n == 1:
        return a[0][0]
    if n == 2:
        return a[0][0] * a[1][1] - a[0][1] * a[1][0]
    total = 0.0
    sign = 1
    for col, value in enumerate(a[0]):
        total += sign * value * determinant(_minor(a, 0, col))
        sign = -sign
    return total


def transpose(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of a matrix."""
    return [list(column) for column in zip(*a)]


def cofactor(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix of cofactors of a square matrix."""
    n = _require_square(a)
    return [
        [(-1) ** (i + j) * determinant(_minor(a, i, j)) for j in range(n)]
        for i in range(n)
    ]


def inverse(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the inverse of a square matrix via its adjugate."""
    d = determinant(a)
    if d == 0:
        raise ValueError("Determinant is 0")
    return [[value / d for value in row] for row in transpose(cofactor(a))]


def format_matrix(a: Sequence[Sequence[float]]) -> str:
    """Render a matrix one row per line, each value followed by a space."""
    return "".join(
        "".join(f"{value:g} " for value in row) + "\n" for row in a
    )


def matmul(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix product ``a @ b``."""
    if any(len(row) != len(b) for row in a):
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) for column in columns]
        for row in a
    ]


def fit(phi: Sequence[Sequence[float]], y: Sequence[float]) -> Matrix:
    """Solve least squares ``(phi^T phi)^-1 phi^T y``; return a column matrix."""
    phi_t = transpose(phi)
    pseudo_inverse = matmul(inverse(matmul(phi_t, phi)), phi_t)
    return matmul(pseudo_inverse, [[value] for value in y])