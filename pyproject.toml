[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basisfit"
version = "0.1.0"
description = "Least-squares curve fitting with polynomial, Fourier, RBF and sigmoid basis functions"
requires-python = ">=3.10"
dependencies = []
keywords = ["least squares", "basis functions", "curve fitting", "regression", "fourier"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
basisfit-poly = "basisfit.polyfit:main"
basisfit-trig = "basisfit.trigfit:main"

[tool.hatch.build.targets.wheel]
packages = ["basisfit"]

[tool.pytest.ini_options]
addopts = "-ra"
