import io
import random
import sys

import pytest

from basisfit.trigfit import (
    default_trig,
    evaluate_trig,
    format_approximation,
    main,
    run,
)


@pytest.mark.parametrize("x", [-50.0, -0.35, 0.0, 0.1, 0.77, 12.3])
def test_evaluate_trig_matches_default(x):
    coefficients = [-3.3, 1.1, 4.4, -2.2, -5.5]
    assert evaluate_trig(coefficients, x) == pytest.approx(default_trig(x))


def test_evaluate_trig_constant_only():
    assert evaluate_trig([7.25], 0.4) == 7.25


def test_evaluate_trig_empty_raises():
    with pytest.raises(ValueError):
        evaluate_trig([], 1.0)


def test_format_approximation_two_harmonics():
    text = format_approximation([[-5.5], [-3.3], [4.4], [1.1], [-2.2]])
    assert text == (
        "(-3.300)sin(2*PI*x) + (1.100)sin(4*PI*x) + "
        "(4.400)cos(2*PI*x) + (-2.200)cos(4*PI*x) + (-5.500)\n"
    )


def test_format_approximation_empty_raises():
    with pytest.raises(ValueError):
        format_approximation([])


def test_run_default_recovers_coefficients():
    out = io.StringIO()
    weights = run(io.StringIO("0\n"), out, random.Random(5))
    values = [row[0] for row in weights]
    # Noise has zero spread, so the fit is exact up to the constant shift 0.3.
    assert values == pytest.approx([-5.5 + 0.3, -3.3, 4.4, 1.1, -2.2], abs=1e-6)
    text = out.getvalue()
    assert format_approximation(weights) in text
    assert text.splitlines()[-1].startswith(
        "The mean square error with the best fit is equal to : "
    )


def test_run_custom_single_harmonic():
    out = io.StringIO()
    weights = run(io.StringIO("1\n1\n2 3 4\n"), out, random.Random(9))
    values = [row[0] for row in weights]
    assert values == pytest.approx([4 + 0.3, 2, 3], abs=1e-6)
    assert "First Provide the 1 number of cofficients" in out.getvalue()


def test_run_is_deterministic_for_seed():
    first, second = io.StringIO(), io.StringIO()
    run(io.StringIO("0\n"), first, random.Random(4))
    run(io.StringIO("0\n"), second, random.Random(4))
    assert first.getvalue() == second.getvalue()


def test_run_missing_coefficients_raises():
    with pytest.raises(ValueError):
        run(io.StringIO("1\n1\n2 3\n"), io.StringIO(), random.Random(0))


def test_run_negative_harmonics_raises():
    with pytest.raises(ValueError):
        run(io.StringIO("1\n-2\n"), io.StringIO(), random.Random(0))


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    assert main(["--seed", "1"]) == 0
    assert "The best fit for the given data points is : " in capsys.readouterr().out