import math

import pytest

from fuelcost import CostResult, compare, compute_diesel_cost, compute_electric_cost


def cost(total):
    return CostResult.build(total, 0.0, 0.0, "L")


def test_electric_cheaper_in_reference_journey(trip, diesel_params, electric_params):
    comparison = compare(compute_diesel_cost(trip, diesel_params), compute_electric_cost(trip, electric_params))
    assert comparison.cheaper == "electric"
    assert comparison.absolute_difference == pytest.approx(9.66, abs=0.02)
    assert comparison.percentage_difference == pytest.approx(49.2, abs=0.1)
    assert comparison.savings_label == "You Save"


def test_diesel_cheaper_is_extra_cost():
    comparison = compare(cost(10.0), cost(12.5))
    assert comparison.cheaper == "diesel"
    assert comparison.absolute_difference == pytest.approx(2.5)
    assert comparison.percentage_difference == pytest.approx(20.0)
    assert comparison.savings_label == "Extra Cost"


def test_swapping_flips_cheaper_but_not_difference():
    a, b = cost(19.65), cost(9.98)
    forward = compare(a, b)
    backward = compare(b, a)
    assert forward.cheaper == "electric"
    assert backward.cheaper == "diesel"
    assert forward.absolute_difference == backward.absolute_difference
    assert forward.percentage_difference == backward.percentage_difference


def test_both_zero_is_equal_without_nan():
    comparison = compare(cost(0.0), cost(0.0))
    assert comparison.cheaper == "equal"
    assert comparison.percentage_difference == 0.0
    assert not math.isnan(comparison.percentage_difference)


def test_floating_point_noise_counts_as_equal():
    comparison = compare(cost(0.1 + 0.2), cost(0.3))
    assert comparison.cheaper == "equal"
    assert comparison.savings_label == "You Save"
