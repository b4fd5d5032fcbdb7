"""Linear systems solved by Gaussian elimination with partial pivoting."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

Matrix = Sequence[Sequence[float]]
Vector = Sequence[float]


class SingularSystemError(ValueError):
    """Raised when elimination meets a zero pivot."""


@dataclass(frozen=True)
class GaussSolution:
    """Solution vector and the largest residual |A x - b| of the original system."""

    x: tuple[float, ...]
    error: float


def _augmented(matrix: Matrix, rhs: Vector) -> list[list[float]]:
    size = len(rhs)
    if size == 0:
        raise ValueError("the system has no equations")
    if len(matrix) != size or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square and match the right-hand side")
    return [[float(v) for v in row] + [float(b)] for row, b in zip(matrix, rhs)]


def solve(matrix: Matrix, rhs: Vector) -> GaussSolution:
    """Solve ``matrix @ x = rhs``; the inputs are left untouched."""
    rows = _augmented(matrix, rhs)
    size = len(rows)

    for i in range(size):
        pivot_index = max(range(i, size), key=lambda k: abs(rows[k][i]))
        rows[i], rows[pivot_index] = rows[pivot_index], rows[i]
        pivot = rows[i][i]
        if pivot == 0:
            raise SingularSystemError(f"zero pivot in column {i}")
        lead = [v / pivot for v in rows[i]]
        rows[i] = lead
        for row in rows[i + 1:]:
            factor = row[i]
            row[i:] = [a - factor * b for a, b in zip(row[i:], lead[i:])]

    x = [0.0] * size
    for k in reversed(range(size)):
        row = rows[k]
        x[k] = row[size] - sum(a * b for a, b in zip(row[k + 1:size], x[k + 1:]))

    error = max(
        abs(sum(float(a) * xi for a, xi in zip(row, x)) - float(b))
        for row, b in zip(matrix, rhs)
    )
    return GaussSolution(tuple(x), error)


def _cell(value: float) -> str:
    return f"{float(value):>11g}"


def format_system(matrix: Matrix, rhs: Vector) -> str:
    """Render the augmented system as a text table."""
    lines = ["Your System: \n"]
    for row, b in zip(matrix, rhs):
        lines.append("".join(_cell(v) for v in row) + f"{'|':>11}" + _cell(b) + "\n")
    return "".join(lines)