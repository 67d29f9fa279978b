"""Least-squares curve fitting with polynomial, Fourier, RBF and sigmoid basis functions."""

__version__ = "0.1.0"
__all__ = ["basis", "matrix", "polyfit", "trigfit"]