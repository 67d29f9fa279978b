"""Fit a short Fourier series to noisy samples by least squares."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from basisfit.basis import PI, fourier_basis
from basisfit.matrix import Matrix, fit, matmul
from basisfit.polyfit import _Console, mean_square_error

DATAPOINTS = 500
DEFAULT_HARMONICS = 2
NOISE_MEAN = 1.0
NOISE_STDDEV = 0.0
NOISE_SCALE = 0.3


def default_trig(x: float) -> float:
    """Return ``1.1 sin(4 pi x) - 2.2 cos(4 pi x) - 3.3 sin(2 pi x) + 4.4 cos(2 pi x) - 5.5``."""
    return (
        1.1 * math.sin(4 * PI * x)
        - 2.2 * math.cos(4 * PI * x)
        - 3.3 * math.sin(2 * PI * x)
        + 4.4 * math.cos(2 * PI * x)
        - 5.5
    )


def evaluate_trig(coefficients: Sequence[float], x: float) -> float:
    """Evaluate ``n`` sine terms, then ``n`` cosine terms, then a constant."""
    k = len(coefficients)
    if k == 0:
        raise ValueError("at least the constant term is required")
    half = k // 2
    sines = coefficients[:half]
    cosines = coefficients[half:k - 1]
    total = sum(c * math.sin(2 * i * PI * x) for i, c in enumerate(sines, start=1))
    total += sum(c * math.cos(2 * i * PI * x) for i, c in enumerate(cosines, start=1))
    return total + coefficients[-1]


def format_approximation(weights: Sequence[Sequence[float]]) -> str:
    """Render fitted Fourier weights: sine terms, cosine terms, then the constant."""
    if not weights:
        raise ValueError("no weights to format")
    sines = "".join(
        f"({weights[i][0]:.3f})sin({i + 1}*PI*x) + "
        for i in range(1, len(weights), 2)
    )
    cosines = "".join(
        f"({weights[i][0]:.3f})cos({i}*PI*x) + "
        for i in range(2, len(weights), 2)
    )
    return f"{sines}{cosines}({weights[0][0]:.3f})\n"


def run(
    infile: TextIO,
    outfile: TextIO,
    rng: random.Random | None = None,
) -> Matrix:
    """Run the interactive Fourier fit and return the fitted weight column."""
    rng = rng if rng is not None else random.Random(0)
    console = _Console(infile, outfile)
    console.say(
        "Would you like to provide the target trignometric function? Press 1 to "
        "enter your choice of trignometric function or press 0 to go with the "
        "default trignometric function"
    )
    harmonics = DEFAULT_HARMONICS
    target: Callable[[float], float] = default_trig
    if console.read_int() != 0:
        console.say(
            "Please Provide the number n till which you would like to go for "
            "sin(2*PI*n*x)/cos(2*PI*n*x)"
        )
        harmonics = console.read_int()
        if harmonics < 0:
            raise ValueError("number of harmonics must not be negative")
        console.say(
            f"First Provide the {harmonics} number of cofficients starting from "
            f"sin(2*PI*x) upto sin({2 * harmonics}*PI*x)"
        )
        console.say(
            f"Then Provide another {harmonics} number of cofficients starting from "
            f"cos(2*PI*x) upto cos({2 * harmonics}*PI*x)"
        )
        console.say("And finally the constant term. All in space seaprated manner")
        coefficients = console.read_floats(2 * harmonics + 1)

        def target(x: float) -> float:
            return evaluate_trig(coefficients, x)

    phi: Matrix = []
    y: list[float] = []
    for _ in range(DATAPOINTS):
        x = rng.randint(-500, 500) / 10.0
        phi.append(fourier_basis(x, harmonics))
        y.append(target(x) + NOISE_SCALE * rng.gauss(NOISE_MEAN, NOISE_STDDEV))

    weights = fit(phi, y)
    console.say("The best fit for the given data points is : ")
    outfile.write(format_approximation(weights))
    mse = mean_square_error(y, matmul(phi, weights))
    console.say(f"The mean square error with the best fit is equal to : {mse:.3f}")
    return weights


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        description="Fit a Fourier series to noisy samples by least squares."
    )
    parser.add_argument("--seed", type=int, default=0, help="random seed")
    args = parser.parse_args(argv)
    run(sys.stdin, sys.stdout, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())