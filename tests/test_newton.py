import math

import pytest

from numkit.gauss import SingularSystemError
from numkit.newton import (
    NewtonStep,
    format_steps,
    jacobian,
    residual_norm,
    solve_equations,
    solve_system,
    step_norm,
)


def _f1(x):
    return math.sin(x[0]) - x[1] - 1.32


def _f2(x):
    return math.cos(x[1]) - x[0] + 0.85


def _linear(x):
    return [x[0] + x[1] - 3, x[0] - x[1] - 1]


def test_source_example_converges_to_root():
    result = solve_equations([_f1, _f2], [0.5, 0.2])
    assert result.converged
    assert abs(_f1(list(result.x))) < 1e-8
    assert abs(_f2(list(result.x))) < 1e-8


def test_circle_and_hyperbola():
    funcs = [
        lambda x: x[0] * x[0] + x[1] * x[1] - 25,
        lambda x: 3 * x[0] * x[0] - 4 * x[1] * x[1] - 12,
    ]
    result = solve_equations(funcs, [3.0, 3.0])
    assert result.converged
    for f in funcs:
        assert abs(f(list(result.x))) < 1e-7


def test_linear_system_solution():
    result = solve_system(_linear, [0.0, 0.0])
    assert result.converged
    assert result.x == pytest.approx((2.0, 1.0), abs=1e-9)


def test_steps_are_numbered_and_last_meets_tolerances():
    result = solve_system(_linear, [0.0, 0.0], 1e-9, 1e-9)
    assert [s.iteration for s in result.steps] == list(range(1, result.iterations + 1))
    last = result.steps[-1]
    assert last.delta1 < 1e-9 and last.delta2 < 1e-9


def test_iteration_limit_stops_after_limit_plus_one():
    result = solve_system(_linear, [0.0, 0.0], 0.0, 0.0, 3)
    assert not result.converged
    assert [s.iteration for s in result.steps] == [1, 2, 3, 4]


def test_jacobian_of_linear_map():
    matrix = jacobian(lambda x: [2 * x[0] + 3 * x[1], -x[0] + 4 * x[1]], [1.0, 2.0])
    assert len(matrix) == 2
    assert matrix[0] == pytest.approx([2, 3], abs=1e-5)
    assert matrix[1] == pytest.approx([-1, 4], abs=1e-5)


def test_jacobian_does_not_modify_point():
    point = [0.3, 0.7]
    jacobian(lambda x: [x[0] * x[1], x[0] - x[1]], point)
    assert point == [0.3, 0.7]


def test_residual_norm_is_max_absolute():
    assert residual_norm([-3.0, 2.0]) == 3.0
    assert residual_norm([0.5]) == 0.5


def test_step_norm_absolute_below_one():
    assert step_norm([0.0], [0.5]) == 0.5


def test_step_norm_relative_above_one():
    assert step_norm([1.0], [4.0]) == 0.75


def test_step_norm_takes_largest_component():
    assert step_norm([0.0, 0.0], [0.25, -0.5]) == 0.5


def test_equation_count_must_match_unknowns():
    with pytest.raises(ValueError):
        solve_equations([_f1], [0.5, 0.2])


def test_residual_length_must_match_unknowns():
    with pytest.raises(ValueError):
        solve_system(lambda x: [x[0]], [1.0, 2.0])


def test_singular_jacobian_raises():
    with pytest.raises(SingularSystemError):
        solve_system(lambda x: [x[0] - 1, 2 * x[0] - 2], [0.0, 0.0])


def test_format_steps_header_and_row():
    text = format_steps([NewtonStep(1, 0.5, 0.25)])
    assert text == (
        "|    k |         delta1 |         delta2 |\n"
        "|----------------------------------------|\n"
        "|    1 |            0.5 |           0.25 |\n"
    )


def test_format_steps_one_line_per_step():
    result = solve_equations([_f1, _f2], [0.5, 0.2])
    lines = format_steps(result.steps).splitlines()
    assert len(lines) == 2 + result.iterations