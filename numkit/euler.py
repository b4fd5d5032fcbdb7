"""Explicit and implicit Euler integration of systems of ODEs with adaptive steps."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from numkit.newton import solve_system

Equation = Callable[[list[float], float], float]

MAX_STEP = 0.1
MIN_STEP = 0.001
INITIAL_STEP = 0.01
EXPLICIT_MAX_ITERATIONS = 10000
IMPLICIT_MAX_ITERATIONS = 1000
NEWTON_MAX_ITERATIONS = 100


@dataclass(frozen=True)
class OdeRow:
    """One line of an integration table: step number, state and time."""

    k: int
    u: tuple[float, ...]
    t: float


@dataclass(frozen=True)
class ImplicitStep:
    """Result of one implicit Euler step: new state, new time, next step size and error."""

    u: tuple[float, ...]
    t: float
    step: float
    error: float


def _check(equations: Sequence[Equation], u: Sequence[float]) -> None:
    if not equations:
        raise ValueError("at least one equation is required")
    if len(equations) != len(u):
        raise ValueError("number of equations must equal number of unknowns")


def _clamp(step: float) -> float:
    return min(max(step, MIN_STEP), MAX_STEP) if step < MIN_STEP else min(step, MAX_STEP)


def explicit_step_size(
    equations: Sequence[Equation],
    u: Sequence[float],
    t: float,
    max_step: float = MAX_STEP,
    eps: float = 0.001,
) -> float:
    """Step size ``min_k eps / (|f_k| + eps / max_step)``.

    The first equation uses ``eps / |f_0 + eps / max_step|``.
    """
    state = list(u)
    sizes = [eps / abs(equations[0](state, t) + eps / max_step)]
    sizes.extend(eps / (abs(f(state, t)) + eps / max_step) for f in equations[1:])
    return min(abs(s) for s in sizes)


def explicit_euler(
    equations: Iterable[Equation],
    u0: Sequence[float],
    t0: float,
    t_end: float,
    eps: float = 0.001,
) -> list[OdeRow]:
    """Integrate with the explicit Euler method; one row per completed step.

    Components are updated in order, so later equations see the already
    advanced earlier components of the same step.
    """
    eqs = tuple(equations)
    u = [float(v) for v in u0]
    _check(eqs, u)
    t = float(t0)
    rows: list[OdeRow] = []
    k = 0
    while t < t_end and k < EXPLICIT_MAX_ITERATIONS:
        step = explicit_step_size(eqs, u, t, MAX_STEP, eps)
        for i, f in enumerate(eqs):
            u[i] += step * f(u, t)
        t += step
        k += 1
        rows.append(OdeRow(k, tuple(u), t))
    return rows


def local_error(
    step: float,
    previous_step: float,
    u_prev: Sequence[float],
    u_next: Sequence[float],
) -> float:
    """Largest estimated local truncation error over all components."""
    factor = step / (previous_step + step)
    ratio = step / previous_step
    return max(
        abs(factor * (b - a - ratio * (a - b))) for a, b in zip(u_prev, u_next)
    )


def choose_step(step: float, error: float, eps: float) -> float:
    """Halve the step when the error exceeds ``eps``, double it below ``eps / 4``."""
    if abs(error) > eps:
        return step / 2
    if abs(error) < eps / 4:
        return step * 2
    return step


def _backward_euler(
    equations: Sequence[Equation],
    u_prev: Sequence[float],
    guess: Sequence[float],
    t: float,
    tau: float,
    eps: float,
) -> list[float]:
    def residual(x: list[float]) -> list[float]:
        return [x[i] - u_prev[i] - tau * f(x, t) for i, f in enumerate(equations)]

    result = solve_system(residual, guess, eps, eps, NEWTON_MAX_ITERATIONS)
    return list(result.x)


def implicit_step(
    equations: Iterable[Equation],
    u: Sequence[float],
    t: float,
    step: float = INITIAL_STEP,
    eps: float = 0.001,
) -> ImplicitStep:
    """Make one backward Euler step of size ``step`` and pick the next step size.

    The returned time is advanced by the newly chosen step.
    """
    eqs = tuple(equations)
    current = [float(v) for v in u]
    _check(eqs, current)
    following = _backward_euler(eqs, current, current, t, step, eps)
    error = local_error(step, step, current, following)
    new_step = _clamp(choose_step(step, error, eps))
    return ImplicitStep(tuple(following), t + new_step, new_step, error)


def implicit_euler(
    equations: Iterable[Equation],
    u0: Sequence[float],
    t0: float,
    t_end: float,
    eps: float = 0.001,
) -> list[OdeRow]:
    """Integrate with the implicit Euler method; one row per state before each step."""
    eqs = tuple(equations)
    u = [float(v) for v in u0]
    _check(eqs, u)
    t = float(t0)
    step = INITIAL_STEP
    previous_step = step
    rows: list[OdeRow] = []
    k = 0
    while t < t_end and k < IMPLICIT_MAX_ITERATIONS:
        rows.append(OdeRow(k, tuple(u), t))
        following = _backward_euler(eqs, u, u, t, step, eps)
        error = local_error(step, previous_step, u, following)
        previous_step = step
        step = _clamp(choose_step(step, error, eps))
        t += step
        u = following
        k += 1
    return rows


def format_rows(rows: Iterable[OdeRow], counter_width: int = 6) -> str:
    """Render integration rows as a text table."""
    rows = list(rows)
    width = len(rows[0].u) if rows else 2
    header = f"{'|':>3}{'k':>{counter_width}}{'|':>3}" + "".join(
        f"{f'U{i + 1}':>15}{'|':>3}" for i in range(width)
    ) + f"{'t':>15}{'|':>3}\n"
    separator = "  |" + "-" * (counter_width + 2) + "|" + ("-" * 17 + "|") * (width + 1) + "\n"
    lines = [header, separator]
    for row in rows:
        cells = "".join(f"{v:>15g}{'|':>3}" for v in row.u)
        lines.append(
            f"{'|':>3}{row.k:>{counter_width}}{'|':>3}{cells}{row.t:>15g}{'|':>3}\n"
        )
    return "".join(lines)