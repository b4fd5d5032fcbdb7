"""Polynomial approximation of tabulated points by the method of least squares."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from numkit.gauss import solve


@dataclass(frozen=True)
class PolynomialFit:
    """Fitted coefficients (lowest power first), per-point deviations and the standard error."""

    coefficients: tuple[float, ...]
    residuals: tuple[float, ...]
    mistake: float

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1


def _check(xs: Sequence[float], ys: Sequence[float], degree: int) -> None:
    if degree < 0:
        raise ValueError("polynomial degree must not be negative")
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")


def power_sums(
    xs: Sequence[float], ys: Sequence[float], degree: int
) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """Sums of ``x**p`` for ``p`` up to ``2 * degree`` and of ``y * x**p`` up to ``degree``."""
    _check(xs, ys, degree)
    x_sums = [0.0] * (2 * degree + 1)
    xy_sums = [0.0] * (degree + 1)
    for x, y in zip(xs, ys):
        power = 1.0
        for p in range(2 * degree + 1):
            x_sums[p] += power
            if p <= degree:
                xy_sums[p] += power * y
            power *= x
    return tuple(x_sums), tuple(xy_sums)


def _evaluate(coefficients: Sequence[float], x: float) -> float:
    total = 0.0
    power = 1.0
    for c in coefficients:
        total += c * power
        power *= x
    return total


def fit_polynomial(xs: Sequence[float], ys: Sequence[float], degree: int) -> PolynomialFit:
    """Fit a polynomial of the given degree to the points ``(xs[i], ys[i])``.

    More points than ``degree + 1`` are needed to estimate the error.
    """
    _check(xs, ys, degree)
    if len(xs) <= degree + 1:
        raise ValueError("more points than degree + 1 are required")
    x_sums, xy_sums = power_sums(xs, ys, degree)
    size = degree + 1
    matrix = [[x_sums[i + j] for j in range(size)] for i in range(size)]
    coefficients = solve(matrix, xy_sums).x
    residuals = tuple(_evaluate(coefficients, x) - y for x, y in zip(xs, ys))
    mistake = math.sqrt(sum(r * r for r in residuals) / (len(xs) - degree - 1))
    return PolynomialFit(tuple(coefficients), residuals, mistake)


def read_points(lines: Iterable[str]) -> tuple[list[float], list[float], int]:
    """Read ``count degree`` followed by ``count`` pairs ``x y``; returns xs, ys and degree."""
    tokens = " ".join(lines).split()
    if len(tokens) < 2:
        raise ValueError("the number of points and the degree are missing")
    count = int(tokens[0])
    degree = int(tokens[1])
    if count < 0:
        raise ValueError("the number of points must not be negative")
    values = tokens[2:]
    if len(values) < 2 * count:
        raise ValueError(f"expected {count} points, found {len(values) // 2}")
    numbers = [float(v) for v in values[: 2 * count]]
    return numbers[0::2], numbers[1::2], degree