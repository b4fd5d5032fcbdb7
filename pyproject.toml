[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numkit"
version = "0.1.0"
description = "Small numerical methods toolkit: Gaussian elimination, Newton's method, ODE integrators, least squares, Simpson integration and a few classic data structures."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "gaussian-elimination",
    "newton",
    "euler",
    "ode",
    "least-squares",
    "simpson",
    "binary-tree",
    "graph",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
numkit = "numkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
