"""Fit a cubic (or user-chosen) polynomial to noisy samples by least squares."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import TextIO

from basisfit.basis import polynomial_basis
from basisfit.matrix import Matrix, fit, matmul

DATAPOINTS = 200
DEFAULT_DEGREE = 3
NOISE_MEAN = 2.0
NOISE_STDDEV = 1.5
NOISE_SCALE = 2.0


def default_poly(x: float) -> float:
    """Return ``1 + 2x - 3x^2 + 4x^3``."""
    return 1 + 2 * x - 3 * (x * x) + 4 * (x * x * x)


def evaluate_polynomial(coefficients: Iterable[float], x: float) -> float:
    """Return ``c0 + c1*x + c2*x^2 + ...`` for coefficients in ascending order."""
    total = 0.0
    power = 1.0
    for c in coefficients:
        total += c * power
        power *= x
    return total


def mean_square_error(y: Sequence[float], y_pred: Sequence[Sequence[float]]) -> float:
    """Return the mean square error between values and a column of predictions."""
    if not y:
        raise ValueError("no values to compare")
    return sum((actual - row[0]) ** 2 for actual, row in zip(y, y_pred)) / len(y)


def format_approximation(weights: Sequence[Sequence[float]]) -> str:
    """Render fitted weights (highest power first) as a polynomial, constant first."""
    if not weights:
        raise ValueError("no weights to format")
    power = len(weights) - 1
    parts = [f"{weights[power][0]:.3f}"]
    parts.extend(
        f"({weights[i][0]:.3f})x^{power - i}" for i in range(power - 1, 0, -1)
    )
    parts.append(f"({weights[0][0]:.3f})x^{power}")
    return " + ".join(parts)


class _Console:
    """Prompts on one stream and reads whitespace-separated tokens from another."""

    def __init__(self, infile: TextIO, outfile: TextIO) -> None:
        self._out = outfile
        self._tokens = self._split(infile)

    @staticmethod
    def _split(infile: TextIO) -> Iterator[str]:
        for line in infile:
            yield from line.split()

    def say(self, text: str = "") -> None:
        self._out.write(text + "\n")
        self._out.flush()

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def read_int(self) -> int:
        return int(self._next())

    def read_floats(self, count: int) -> list[float]:
        return [float(self._next()) for _ in range(count)]


def run(
    infile: TextIO,
    outfile: TextIO,
    rng: random.Random | None = None,
) -> Matrix:
    """Run the interactive polynomial fit and return the fitted weight column."""
    rng = rng if rng is not None else random.Random(0)
    console = _Console(infile, outfile)
    console.say(
        "Would you like provide the target polynomial? Press 1 to enter your "
        "choice of polynomial or press 0 to go with the default polynomial"
    )
    degree = DEFAULT_DEGREE
    target: Callable[[float], float] = default_poly
    if console.read_int() != 0:
        console.say(
            "Enter the degree of polynomial(Upto 10 in order to avoid the "
            "numerical overflow/underflow)"
        )
        degree = console.read_int()
        if degree < 0:
            raise ValueError("degree must not be negative")
        console.say(
            f"Please enter {degree + 1} coefficients starting from the constant "
            f"term upto the cofficiant of x^{degree} in space seaprated manner"
        )
        coefficients = console.read_floats(degree + 1)

        def target(x: float) -> float:
            return evaluate_polynomial(coefficients, x)

    phi: Matrix = []
    y: list[float] = []
    for _ in range(DATAPOINTS):
        x = rng.randint(-500, 500) / 50.0
        phi.append(polynomial_basis(x, degree + 1))
        y.append(target(x) + NOISE_SCALE * rng.gauss(NOISE_MEAN, NOISE_STDDEV))

    weights = fit(phi, y)
    console.say("The best fit for the given data points is ")
    console.say(format_approximation(weights))
    mse = mean_square_error(y, matmul(phi, weights))
    console.say(f"The mean square error with the best fit is equal to : {mse:.3f}")
    return weights


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description="Fit a polynomial to noisy samples by least squares."
    )
    parser.add_argument("--seed", type=int, default=0, help="random seed")
    args = parser.parse_args(argv)
    run(sys.stdin, sys.stdout, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())