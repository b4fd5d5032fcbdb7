"""Numerical methods (linear and nonlinear systems, ODE integrators, least squares,
Simpson integration) and a binary tree, hexadecimal number and directed graph."""

__version__ = "0.1.0"

__all__ = [
    "gauss",
    "newton",
    "euler",
    "shichman",
    "least_squares",
    "simpson",
    "cli",
    "binary_tree",
    "hex_number",
    "graph",
]