"""Newton's method for systems of nonlinear equations."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from itertools import count

from numkit.gauss import solve

DELTA_X = 1e-9
DEFAULT_EPS = 1e-9
MAX_ITERATIONS = 100

Residual = Callable[[list[float]], Sequence[float]]
Equation = Callable[[list[float]], float]


@dataclass(frozen=True)
class NewtonStep:
    """One iteration: residual norm before the step and size of the step."""

    iteration: int
    delta1: float
    delta2: float


@dataclass(frozen=True)
class NewtonResult:
    """Final approximation, the iteration history and whether both tolerances were met."""

    x: tuple[float, ...]
    steps: tuple[NewtonStep, ...]
    converged: bool

    @property
    def iterations(self) -> int:
        return len(self.steps)


def jacobian(residual: Residual, point: Sequence[float], delta: float = DELTA_X) -> list[list[float]]:
    """Forward-difference Jacobian of ``residual`` at ``point``."""
    base = [float(v) for v in point]
    f0 = list(residual(base))
    columns = []
    for j in range(len(base)):
        shifted = base.copy()
        shifted[j] += delta
        columns.append([(a - b) / delta for a, b in zip(residual(shifted), f0)])
    if not columns:
        return [[] for _ in f0]
    return [list(row) for row in zip(*columns)]


def residual_norm(residual: Sequence[float]) -> float:
    """Largest absolute component of the residual vector."""
    return max(abs(v) for v in residual)


def step_norm(previous: Sequence[float], current: Sequence[float]) -> float:
    """Largest change per component; relative where the new value exceeds one."""
    return max(
        abs(now - before) if now <= 1 else abs((now - before) / now)
        for before, now in zip(previous, current)
    )


def solve_system(
    residual: Residual,
    initial: Sequence[float],
    eps1: float = DEFAULT_EPS,
    eps2: float = DEFAULT_EPS,
    max_iterations: int = MAX_ITERATIONS,
) -> NewtonResult:
    """Find a root of the vector function ``residual`` starting from ``initial``.

    Iteration stops when the residual norm is below ``eps1`` and the step norm
    below ``eps2``, or after ``max_iterations + 1`` iterations.
    """
    x = [float(v) for v in initial]
    if not x:
        raise ValueError("at least one unknown is required")
    steps: list[NewtonStep] = []
    for k in count(1):
        rhs = [-v for v in residual(x)]
        if len(rhs) != len(x):
            raise ValueError("number of equations must equal number of unknowns")
        correction = solve(jacobian(residual, x), rhs).x
        previous = x
        x = [a + c for a, c in zip(x, correction)]
        step = NewtonStep(k, residual_norm(rhs), step_norm(previous, x))
        steps.append(step)
        if step.delta1 < eps1 and step.delta2 < eps2:
            return NewtonResult(tuple(x), tuple(steps), True)
        if k > max_iterations:
            return NewtonResult(tuple(x), tuple(steps), False)
    raise AssertionError("unreachable")


def solve_equations(
    functions: Iterable[Equation],
    initial: Sequence[float],
    eps1: float = DEFAULT_EPS,
    eps2: float = DEFAULT_EPS,
    max_iterations: int = MAX_ITERATIONS,
) -> NewtonResult:
    """Solve ``f_i(x) = 0`` for a list of scalar functions of the vector ``x``."""
    equations = tuple(functions)
    if len(equations) != len(initial):
        raise ValueError("number of equations must equal number of unknowns")

    def residual(point: list[float]) -> list[float]:
        return [f(point) for f in equations]

    return solve_system(residual, initial, eps1, eps2, max_iterations)


def format_steps(steps: Iterable[NewtonStep]) -> str:
    """Render the iteration history as a text table."""
    lines = [
        f"|{'k':>5}{'|':>2}{'delta1':>15}{'|':>2}{'delta2':>15}{'|':>2}\n",
        "|----------------------------------------|\n",
    ]
    lines.extend(
        f"|{s.iteration:>5}{'|':>2}{s.delta1:>15g}{'|':>2}{s.delta2:>15g}{'|':>2}\n"
        for s in steps
    )
    return "".join(lines)