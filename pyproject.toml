[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rankwalk"
version = "0.1.0"
description = "PageRank on edge-list graphs: Jacobi, Gauss-Seidel, power iteration, delta push and Monte Carlo random walks"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pagerank",
    "graph",
    "power-iteration",
    "delta-push",
    "gauss-seidel",
    "jacobi",
    "random-walk",
    "monte-carlo",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rankwalk-jacobi = "rankwalk.cli_jacobi:main"
rankwalk-parlay = "rankwalk.cli_parlay:main"
rankwalk-async = "rankwalk.cli_async:main"

[tool.hatch.build.targets.wheel]
packages = ["rankwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
