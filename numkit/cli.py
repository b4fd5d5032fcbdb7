"""Command line demonstrations of the numerical methods."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from pathlib import Path

from numkit.euler import explicit_euler, format_rows, implicit_euler
from numkit.gauss import SingularSystemError, format_system, solve
from numkit.least_squares import fit_polynomial, read_points
from numkit.newton import format_steps, solve_equations
from numkit.shichman import shichman
from numkit.simpson import integrate

GAUSS_MATRIX = (
    (8.64, 1.71, 5.42),
    (-6.39, 4.25, 1.84),
    (4.21, 7.92, -3.41),
)
GAUSS_RHS = (10.21, 3.41, 12.29)

ODE_INITIAL = (0.0, -0.412)
ODE_START = 0.0
ODE_END = 1.0
ODE_EPS = 0.001


def _ode_first(u: list[float], t: float) -> float:
    if abs(t) < 1e-9:
        t = 1e-9
    return -u[0] * u[1] + math.sin(t) / t


def _ode_second(u: list[float], t: float) -> float:
    return -u[1] * u[1] + 3 * t / (1 + t * t)


ODE_EQUATIONS = (_ode_first, _ode_second)


def _newton_first(x: list[float]) -> float:
    return math.sin(x[0]) - x[1] - 1.32


def _newton_second(x: list[float]) -> float:
    return math.cos(x[1]) - x[0] + 0.85


def _integrand(x: float, y: float) -> float:
    return (x * x) / (1 + y * y)


def _run_gauss(args: argparse.Namespace) -> int:
    print(format_system(GAUSS_MATRIX, GAUSS_RHS), end="")
    solution = solve(GAUSS_MATRIX, GAUSS_RHS)
    print("\nDecision:")
    for value in solution.x:
        print(f"{value:>11g}")
    print(f"Error: {solution.error:g}")
    return 0


def _run_newton(args: argparse.Namespace) -> int:
    result = solve_equations((_newton_first, _newton_second), (0.5, 0.2), 1e-15, 1e-15)
    print(format_steps(result.steps), end="")
    print("Your decision:")
    for value in result.x:
        print(f"{value:g}")
    return 0


def _write_table(table: str, output: str) -> None:
    print(table, end="")
    Path(output).write_text(table, encoding="utf-8")


def _run_euler_explicit(args: argparse.Namespace) -> int:
    rows = explicit_euler(ODE_EQUATIONS, ODE_INITIAL, ODE_START, ODE_END, ODE_EPS)
    _write_table(format_rows(rows, 6), args.output)
    return 0


def _run_euler_implicit(args: argparse.Namespace) -> int:
    rows = implicit_euler(ODE_EQUATIONS, ODE_INITIAL, ODE_START, ODE_END, ODE_EPS)
    _write_table(format_rows(rows, 7), args.output)
    print("\nHello, I work till the end")
    return 0


def _run_shichman(args: argparse.Namespace) -> int:
    rows = shichman(ODE_EQUATIONS, ODE_INITIAL, ODE_START, ODE_END, ODE_EPS)
    _write_table(format_rows(rows, 7), args.output)
    print("\nHello, I work till the end")
    return 0


def _run_least_squares(args: argparse.Namespace) -> int:
    with open(args.data, encoding="utf-8") as handle:
        xs, ys, degree = read_points(handle)
    for x, y in zip(xs, ys):
        print(f"\n{x:g}   {y:g}", end="")
    print()
    fit = fit_polynomial(xs, ys, degree)
    for residual in fit.residuals:
        print(f"{residual:g}")
    Path(args.output).write_text(
        "".join(f"{c:g}\n" for c in fit.coefficients), encoding="utf-8"
    )
    return 0


def _run_integrate(args: argparse.Namespace) -> int:
    result = integrate(_integrand, 0.0, 4.0, 1.0, 2.0, 1e-6)
    if not result.converged:
        print("\n\nError while integrating(", file=sys.stderr)
    print(f"Your integral:{result.value:>14g}")
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="numkit", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("gauss", help="solve the sample linear system").set_defaults(
        run=_run_gauss
    )
    commands.add_parser("newton", help="solve the sample nonlinear system").set_defaults(
        run=_run_newton
    )
    for name, run, text in (
        ("euler-explicit", _run_euler_explicit, "explicit Euler on the sample ODE system"),
        ("euler-implicit", _run_euler_implicit, "implicit Euler on the sample ODE system"),
        ("shichman", _run_shichman, "Shichman method on the sample ODE system"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("--output", default="Result.txt", help="table file to write")
        sub.set_defaults(run=run)

    squares = commands.add_parser("least-squares", help="fit a polynomial to points")
    squares.add_argument("--data", default="data.txt", help="file with count, degree and points")
    squares.add_argument("--output", default="Coefficient.txt", help="file for coefficients")
    squares.set_defaults(run=_run_least_squares)

    commands.add_parser("integrate", help="integrate the sample function").set_defaults(
        run=_run_integrate
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one demonstration; returns the exit status."""
    args = _parser().parse_args(argv)
    try:
        return args.run(args)
    except (OSError, ValueError) as error:
        if isinstance(error, SingularSystemError):
            print(f"error: singular system: {error}", file=sys.stderr)
        else:
            print(f"error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())