[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arenasolve"
version = "0.1.0"
description = "Solvers for classic competitive-programming problems: dynamic programming, strings, number theory, graphs and greedy searching."
requires-python = ">=3.10"
keywords = ["algorithms", "dynamic-programming", "graphs", "number-theory", "strings", "competitive-programming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["arenasolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
