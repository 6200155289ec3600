"""
Tests for the quadrature engine.

Reference areas under the standard normal density are differences of
``scipy.stats.norm.cdf`` values at the bounds.
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_quadrature.config import FINE_STEP_WIDTH
from pysatl_quadrature.quadrature import (
    MidpointRule,
    TrapezoidRule,
    integrate,
    midpoint,
    trapezoid,
)
from pysatl_quadrature.types import Interval1D, QuadratureRuleName

SQRT2PI = math.sqrt(2.0 * math.pi)

REFERENCE_AREAS = [
    ((-2.33, -2.12), 0.007099947088468542),
    ((-3.83, 1.60), 0.9451366366709532),
    ((-1.99, 0.31), 0.5984240540718074),
    ((-1.51, 2.89), 0.9325520787788957),
    ((1.73, 2.77), 0.039012322980829905),
]

RULES = [QuadratureRuleName.MIDPOINT, QuadratureRuleName.TRAPEZOID]


def std_normal_pdf(x: float) -> float:
    return math.exp(-0.5 * x * x) / SQRT2PI


@pytest.mark.parametrize("rule", RULES)
@pytest.mark.parametrize("bounds, expected", REFERENCE_AREAS)
def test_fine_width_matches_reference(rule, bounds, expected):
    area = integrate(rule, std_normal_pdf, bounds, FINE_STEP_WIDTH)
    assert abs(area - expected) < 1e-8


@pytest.mark.parametrize("bounds, expected", REFERENCE_AREAS)
def test_default_width_trapezoid_is_close(bounds, expected):
    assert abs(trapezoid(std_normal_pdf, bounds) - expected) < 1e-4


@pytest.mark.parametrize("rule", RULES)
def test_reversed_interval_gives_same_magnitude(rule):
    forward = integrate(rule, std_normal_pdf, (-1.0, 2.0))
    backward = integrate(rule, std_normal_pdf, (2.0, -1.0))
    assert forward == backward
    assert forward > 0


@pytest.mark.parametrize("rule", RULES)
def test_repeated_calls_are_bit_identical(rule):
    results = {integrate(rule, std_normal_pdf, (-0.7, 1.3), 0.01) for _ in range(5)}
    assert len(results) == 1


def test_rule_selection_forms_agree():
    bounds = (-1.0, 1.5)
    by_enum = integrate(QuadratureRuleName.TRAPEZOID, std_normal_pdf, bounds)
    by_string = integrate("trapezoid", std_normal_pdf, bounds)
    by_instance = integrate(TrapezoidRule(), std_normal_pdf, bounds)
    by_shortcut = trapezoid(std_normal_pdf, bounds)
    assert by_enum == by_string == by_instance == by_shortcut

    assert midpoint(std_normal_pdf, bounds) == integrate(MidpointRule(), std_normal_pdf, bounds)


def test_accepts_interval_objects():
    area = integrate("midpoint", lambda x: 1.0, Interval1D(0.5, 2.0, right_closed=False))
    assert area == pytest.approx(1.5, abs=1e-12)


def test_rules_differ_on_curved_integrand():
    bounds = (0.0, 1.0)
    assert midpoint(lambda x: x * x, bounds, 0.5) != trapezoid(lambda x: x * x, bounds, 0.5)


def test_zero_length_interval_is_zero():
    assert integrate("midpoint", std_normal_pdf, (0.3, 0.3)) == 0.0
    assert integrate("trapezoid", std_normal_pdf, (0.3, 0.3)) == 0.0


def test_non_finite_values_propagate():
    def f(x: float) -> float:
        return math.nan if x > 0.5 else 1.0

    assert math.isnan(midpoint(f, (0.0, 1.0)))


def test_unknown_rule_name():
    with pytest.raises(ValueError, match="No quadrature rule simpson"):
        integrate("simpson", std_normal_pdf, (0.0, 1.0))


def test_rule_of_wrong_type():
    with pytest.raises(TypeError, match="quadrature rule"):
        integrate(42, std_normal_pdf, (0.0, 1.0))  # type: ignore[arg-type]


@pytest.mark.parametrize("width", [0.0, -1.0, math.inf, math.nan])
def test_invalid_width(width):
    with pytest.raises(ValueError, match="Step width"):
        integrate("midpoint", std_normal_pdf, (0.0, 1.0), width)


def test_unbounded_interval():
    with pytest.raises(ValueError, match="two finite bounds"):
        integrate("midpoint", std_normal_pdf, (None, 1.0))


def test_bounds_too_far_apart():
    with pytest.raises(ValueError, match="overflows"):
        integrate("midpoint", std_normal_pdf, (-1e308, 1e308))
