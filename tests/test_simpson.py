import math

import pytest

from numkit.simpson import IntegrationResult, integrate, simpson_sum


def test_simpson_sum_of_constant_is_area():
    value = simpson_sum(lambda x, y: 1.0, 0.0, 0.25, 4, 1.0, 0.5, 2)
    assert value == pytest.approx(2.0 * 2.0)


def test_simpson_sum_exact_for_cubic_in_x():
    # Simpson's rule is exact for cubics along each axis.
    value = simpson_sum(lambda x, y: x ** 3, 0.0, 0.5, 2, 0.0, 0.5, 1)
    assert value == pytest.approx((2.0 ** 4 / 4) * 1.0)


def test_simpson_sum_zero_cells():
    assert simpson_sum(lambda x, y: 5.0, 0.0, 0.1, 0, 0.0, 0.1, 3) == 0.0


def test_integrate_bilinear_is_exact():
    result = integrate(lambda x, y: x * y, 0.0, 2.0, 0.0, 2.0, 1e-9)
    assert isinstance(result, IntegrationResult)
    assert result.value == pytest.approx(4.0)
    assert result.converged
    assert result.refinements == 0


def test_integrate_source_example_against_closed_form():
    result = integrate(lambda x, y: x * x / (1 + y * y), 0.0, 4.0, 1.0, 2.0, 1e-6)
    expected = (4.0 ** 3 / 3) * (math.atan(2.0) - math.atan(1.0))
    assert result.converged
    assert result.value == pytest.approx(expected, abs=1e-5)


def test_integrate_refines_for_non_polynomial():
    result = integrate(lambda x, y: math.exp(x + y), 0.0, 1.0, 0.0, 1.0, 1e-8)
    expected = (math.e - 1) ** 2
    assert result.refinements >= 1
    assert result.value == pytest.approx(expected, abs=1e-6)


def test_integrate_rejects_empty_x_interval():
    with pytest.raises(ValueError):
        integrate(lambda x, y: 1.0, 1.0, 1.0, 0.0, 1.0)


def test_integrate_rejects_too_short_y_interval():
    with pytest.raises(ValueError):
        integrate(lambda x, y: 1.0, 0.0, 10.0, 0.0, 1.0)