"""Double integrals over rectangles by the composite Simpson rule with grid refinement."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

Function = Callable[[float, float], float]

MAX_ITERATIONS = 10
INITIAL_DIVISIONS = 4

_WEIGHTS = (1, 4, 1)


@dataclass(frozen=True)
class IntegrationResult:
    """Integral value, whether the tolerance was met and how many refinements were made."""

    value: float
    converged: bool
    refinements: int


def simpson_sum(
    function: Function,
    start_x: float,
    step_x: float,
    n: int,
    start_y: float,
    step_y: float,
    m: int,
) -> float:
    """Composite Simpson sum over ``n`` by ``m`` double cells of size ``2*step_x`` by ``2*step_y``."""
    total = 0.0
    for i in range(n):
        xs = [start_x + step_x * (2 * i + d) for d in range(3)]
        for j in range(m):
            ys = [start_y + step_y * (2 * j + d) for d in range(3)]
            for wy, y in zip(_WEIGHTS, ys):
                for wx, x in zip(_WEIGHTS, xs):
                    total += wx * wy * function(x, y)
    return total * step_x * step_y / 9


def integrate(
    function: Function,
    start_x: float,
    finish_x: float,
    start_y: float,
    finish_y: float,
    eps: float = 1e-6,
) -> IntegrationResult:
    """Integrate ``function(x, y)`` over the rectangle, doubling the grid until two sums agree.

    The value returned is the coarser of the last two sums compared.
    """
    if finish_x == start_x:
        raise ValueError("the x interval is empty")
    n = INITIAL_DIVISIONS
    m = int(n * (finish_y - start_y) / (finish_x - start_x))
    if m < 1:
        raise ValueError("the y interval is too short relative to the x interval")

    def grid_sum(n: int, m: int) -> float:
        step_x = (finish_x - start_x) / (2 * n)
        step_y = (finish_y - start_y) / (2 * m)
        return simpson_sum(function, start_x, step_x, n, start_y, step_y, m)

    coarse = grid_sum(n, m)
    n, m = n * 2, m * 2
    fine = grid_sum(n, m)

    refinements = 0
    while abs(coarse - fine) > eps and refinements < MAX_ITERATIONS:
        coarse = fine
        n, m = n * 2, m * 2
        fine = grid_sum(n, m)
        refinements += 1

    return IntegrationResult(coarse, refinements < MAX_ITERATIONS, refinements)