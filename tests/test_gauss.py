import math

import pytest

from numkit.gauss import GaussSolution, SingularSystemError, format_system, solve

SOURCE_A = [
    [8.64, 1.71, 5.42],
    [-6.39, 4.25, 1.84],
    [4.21, 7.92, -3.41],
]
SOURCE_B = [10.21, 3.41, 12.29]


def _residuals(matrix, rhs, x):
    return [sum(a * xi for a, xi in zip(row, x)) - b for row, b in zip(matrix, rhs)]


def test_source_example_satisfies_system():
    result = solve(SOURCE_A, SOURCE_B)
    assert len(result.x) == 3
    for r in _residuals(SOURCE_A, SOURCE_B, result.x):
        assert abs(r) < 1e-12


def test_error_is_largest_residual():
    result = solve(SOURCE_A, SOURCE_B)
    residuals = _residuals(SOURCE_A, SOURCE_B, result.x)
    assert result.error == pytest.approx(max(abs(r) for r in residuals), abs=1e-15)
    assert 0 <= result.error < 1e-12


def test_identity_returns_rhs():
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    result = solve(identity, [4.0, -2.5, 7.0])
    assert result.x == (4.0, -2.5, 7.0)
    assert result.error == 0.0


def test_zero_leading_entry_needs_pivoting():
    result = solve([[0, 1], [1, 0]], [2, 3])
    assert result.x == (3.0, 2.0)


def test_tiny_pivot_is_avoided():
    matrix = [[1e-20, 1.0], [1.0, 1.0]]
    rhs = [1.0, 2.0]
    result = solve(matrix, rhs)
    for r in _residuals(matrix, rhs, result.x):
        assert abs(r) < 1e-12


def test_inputs_are_not_modified():
    matrix = [row[:] for row in SOURCE_A]
    rhs = SOURCE_B[:]
    solve(matrix, rhs)
    assert matrix == SOURCE_A
    assert rhs == SOURCE_B


def test_result_is_gauss_solution_with_floats():
    result = solve([[2]], [6])
    assert result == GaussSolution((3.0,), 0.0)


def test_singular_system_raises():
    with pytest.raises(SingularSystemError):
        solve([[1, 2], [2, 4]], [3, 6])


def test_empty_system_raises():
    with pytest.raises(ValueError):
        solve([], [])


@pytest.mark.parametrize(
    "matrix, rhs",
    [
        ([[1, 2], [3, 4]], [1]),
        ([[1, 2, 3], [4, 5, 6]], [1, 2]),
        ([[1], [2]], [1, 2]),
    ],
)
def test_shape_mismatch_raises(matrix, rhs):
    with pytest.raises(ValueError):
        solve(matrix, rhs)


def test_format_system_layout():
    text = format_system([[1, 2], [3, 4]], [5, 6])
    assert text == (
        "Your System: \n"
        "          1          2          |          5\n"
        "          3          4          |          6\n"
    )


def test_format_system_uses_general_number_format():
    text = format_system([[0.5]], [1e-7])
    assert text.splitlines()[1] == "        0.5          |      1e-07"


def test_solution_round_trip_random_like_system():
    matrix = [[4.0, -1.0, 0.5, 2.0], [1.0, 3.0, -2.0, 0.0], [0.0, 1.5, 5.0, -1.0], [2.0, 0.0, 1.0, 6.0]]
    expected = [1.0, -2.0, 0.5, 3.0]
    rhs = [sum(a * x for a, x in zip(row, expected)) for row in matrix]
    result = solve(matrix, rhs)
    for got, want in zip(result.x, expected):
        assert math.isclose(got, want, abs_tol=1e-12)