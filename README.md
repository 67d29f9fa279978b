# basisfit

Least-squares fitting of one-dimensional data with linear combinations of
basis functions. It needs nothing beyond the Python standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Library

### Basis functions

`basisfit.basis` turns a scalar `x` into a list of floats:

- `polynomial_basis(x, n)` gives `[x**(n-1), ..., x, 1]`. It raises
  `ValueError` for a negative `n`.
- `fourier_basis(x, n)` gives
  `[1, sin(2πx), cos(2πx), ..., sin(2πnx), cos(2πnx)]`, which is `2n + 1` values.
- `rbf_basis(x, mu, sigma)` gives `exp(-(x - μᵢ)² / (2σ²))` for each centre
  `μᵢ` in `mu`.
- `sigmoid_basis(x, mu, sigma)` gives `sigmoid((x - μᵢ) / σ)` for each centre
  `μᵢ` in `mu`.
- `sigmoid(x)` is the logistic function.

`rbf_basis` and `sigmoid_basis` raise `ValueError` when `sigma` is zero. The
module uses the constant `PI = 3.14159265`, not `math.pi`.

### Matrices and fitting

`basisfit.matrix` works on matrices given as lists of row lists:

- `determinant(a)` uses cofactor expansion. An empty matrix has determinant 1.
- `transpose(a)`
- `cofactor(a)` returns the matrix of cofactors.
- `inverse(a)` returns the adjugate divided by the determinant.
- `matmul(a, b)` returns the matrix product.
- `format_matrix(a)` returns a string with one line per row. Each value is
  followed by a space.
- `fit(phi, y)` solves the normal equations `(ΦᵀΦ)⁻¹ Φᵀ y`. It returns the
  weights as a column matrix, with one single-element row for each basis
  function.

`determinant` and `cofactor` raise `ValueError` for non-square input.
`inverse` raises `ValueError` for a singular matrix, and so does `fit` when
`ΦᵀΦ` is singular. `matmul` raises `ValueError` when the inner dimensions do
not match.

```python
from basisfit.basis import polynomial_basis
from basisfit.matrix import fit

xs = [-2.0, -1.0, 0.0, 1.0, 2.0, 3.0]
ys = [1 + 2 * x - 3 * x**2 + 4 * x**3 for x in xs]
phi = [polynomial_basis(x, 4) for x in xs]
weights = fit(phi, ys)   # [[4.0], [-3.0], [2.0], [1.0]] up to rounding
```

### Helpers for the demos

`basisfit.polyfit` has these helpers:

- `default_poly(x)`, which is `1 + 2x - 3x² + 4x³`.
- `evaluate_polynomial(coefficients, x)`, with the coefficients in ascending
  order.
- `mean_square_error(y, y_pred)`, which compares a list of values with a
  column matrix of predictions.
- `format_approximation(weights)`, which renders a polynomial weight column to
  three decimals.

`basisfit.trigfit` has these helpers:

- `default_trig(x)`.
- `evaluate_trig(coefficients, x)`, which takes `n` sine coefficients, then
  `n` cosine coefficients, then a constant.
- `format_approximation(weights)`, which renders a Fourier weight column.

Each of these two modules also has `run(infile, outfile, rng=None)`. It runs
the interactive session on the given text streams and returns the fitted
weight column. The `rng` argument is a `random.Random`, and it defaults to
`random.Random(0)`.

## Command-line demos

Each program samples a target function at random points and adds Gaussian
noise to the samples. It then fits the noisy samples and prints two results:
the fitted expression and the mean square error of the fit.

    basisfit-poly [--seed N]

This program first asks whether to use the default cubic `1 + 2x - 3x² + 4x³`.
If you decline, it reads a degree and then that many coefficients plus one,
constant term first. It fits 200 points drawn from `[-10, 10]`. The noise added
to each sample is `2 · N(2, 1.5)`.

    basisfit-trig [--seed N]

This program first asks whether to use the default trigonometric target. If
you decline, it reads `n`, then `n` sine coefficients, `n` cosine coefficients
and a constant term. It fits 500 points drawn from `[-50, 50]` with a Fourier
basis. Its noise is `0.3 · N(1, 0)`, which amounts to a constant offset of 0.3.

`--seed` sets the random seed. The default is 0, so repeated runs give the same
output. Both programs read their answers from standard input, so they can be
scripted:

    printf '0\n' | basisfit-poly

## What it does not do

- There is no command for fitting with RBF or sigmoid bases. Those bases are
  available only through the library.
- The demos only generate synthetic data. They cannot read your own data
  points from a file.
- Determinants and inverses come from cofactor expansion. This is only
  practical for a small number of basis functions.