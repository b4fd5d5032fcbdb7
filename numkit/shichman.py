"""Variable-step Shichman (second-order backward differentiation) integration of ODE systems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from numkit.euler import MAX_STEP as EULER_MAX_STEP
from numkit.euler import MIN_STEP as EULER_MIN_STEP
from numkit.euler import Equation, OdeRow, choose_step
from numkit.euler import local_error as euler_local_error
from numkit.newton import solve_system

MAX_STEP = 0.1
MIN_STEP = 0.0005
INITIAL_STEP = 0.005
MAX_ITERATIONS = 10000
NEWTON_MAX_ITERATIONS = 100


@dataclass(frozen=True)
class ShichmanCoefficients:
    """Weights of ``u_next = a1 * u_prev + a0 * u + b0 * f(u_next, t)``."""

    a0: float
    a1: float
    b0: float


def coefficients(step: float, previous_step: float) -> ShichmanCoefficients:
    """Formula weights for the current and the previous step sizes."""
    denominator = previous_step * (2 * step + previous_step)
    a0 = (step + previous_step) ** 2 / denominator
    a1 = -step * step / denominator
    b0 = step * (step + previous_step) / (2 * step + previous_step)
    return ShichmanCoefficients(a0, a1, b0)


def local_error(
    step: float,
    previous_step: float,
    before_previous_step: float,
    u: Sequence[float],
    u_next: Sequence[float],
    u_prev: Sequence[float],
    u_prev_prev: Sequence[float],
) -> float:
    """Largest estimated local truncation error over all components.

    ``u_prev_prev``, ``u_prev``, ``u`` and ``u_next`` are four consecutive states,
    oldest first.
    """
    h, hp, hpp = step, previous_step, before_previous_step
    scale = h * h * (h + hp) * (h + hp) / (2 * h + hp)
    da = h * (h + hp) * (h + hp + hpp)
    db = h * hp * (hp + hpp)
    dc = hpp * hp * (hp + h)
    dd = hp * (hp + hpp) * (hpp + hp + h)
    return max(
        abs(scale * (n / da - c / db + p / dc - pp / dd))
        for c, n, p, pp in zip(u, u_next, u_prev, u_prev_prev)
    )


def _clamp(step: float, low: float, high: float) -> float:
    return max(min(step, high), low)


def _check(equations: Sequence[Equation], u: Sequence[float]) -> None:
    if not equations:
        raise ValueError("at least one equation is required")
    if len(equations) != len(u):
        raise ValueError("number of equations must equal number of unknowns")


def _starting_step(
    equations: Sequence[Equation],
    u_prev: Sequence[float],
    guess: Sequence[float],
    t: float,
    step: float,
    eps: float,
) -> tuple[list[float], float, float]:
    """One backward Euler step; returns the new state, advanced time and next step."""

    def residual(x: list[float]) -> list[float]:
        return [x[i] - u_prev[i] - step * f(x, t) for i, f in enumerate(equations)]

    following = list(solve_system(residual, guess, eps, eps, NEWTON_MAX_ITERATIONS).x)
    error = euler_local_error(step, step, u_prev, following)
    new_step = _clamp(choose_step(step, error, eps), EULER_MIN_STEP, EULER_MAX_STEP)
    return following, t + new_step, new_step


def _shichman_step(
    equations: Sequence[Equation],
    u_prev: Sequence[float],
    u: Sequence[float],
    guess: Sequence[float],
    t: float,
    weights: ShichmanCoefficients,
    eps: float,
) -> list[float]:
    def residual(x: list[float]) -> list[float]:
        return [
            x[i] - weights.a1 * u_prev[i] - weights.a0 * u[i] - weights.b0 * f(x, t)
            for i, f in enumerate(equations)
        ]

    return list(solve_system(residual, guess, eps, eps, NEWTON_MAX_ITERATIONS).x)


def shichman(
    equations: Iterable[Equation],
    u0: Sequence[float],
    t0: float,
    t_end: float,
    eps: float = 0.001,
) -> list[OdeRow]:
    """Integrate with the Shichman method, started by two implicit Euler steps.

    The first two rows hold the initial and the first Euler state; then one row
    is produced for the newest state before each Shichman step.
    """
    eqs = tuple(equations)
    start = [float(v) for v in u0]
    _check(eqs, start)

    t = float(t0)
    step = INITIAL_STEP
    before_previous = step

    u_prev_prev = list(start)
    u_prev = list(start)
    u, t, step = _starting_step(eqs, u_prev, start, t, step, eps)
    u_next, t, step = _starting_step(eqs, u, start, t, step, eps)
    previous = step

    rows = [OdeRow(0, tuple(u_prev), t), OdeRow(0, tuple(u), t)]
    k = 0
    while t < t_end and k < MAX_ITERATIONS:
        rows.append(OdeRow(k, tuple(u_next), t))
        weights = coefficients(step, previous)
        error = local_error(step, previous, before_previous, u, u_next, u_prev, u_prev_prev)

        before_previous = previous
        previous = step
        step = _clamp(choose_step(step, error, eps), MIN_STEP, MAX_STEP)
        t += step

        u_next = _shichman_step(eqs, u_prev, u, u_next, t, weights, eps)
        u_prev_prev = u_prev
        u_prev = u
        u = list(u_next)
        k += 1
    return rows