[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polyconv"
version = "0.1.0"
description = "Convolutions, polynomial arithmetic modulo NTT-friendly primes, linear recurrences, big integers and planar geometry"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fft",
    "ntt",
    "convolution",
    "polynomial",
    "berlekamp-massey",
    "interpolation",
    "subset-convolution",
    "min-plus",
    "bigint",
    "geometry",
    "convex-hull",
    "half-plane-intersection",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["polyconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
