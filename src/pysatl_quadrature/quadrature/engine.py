"""
Quadrature Engine
=================

Entry points approximating the definite integral of a scalar function over a
finite interval:

- :func:`integrate` — rule chosen at call time.
- :func:`midpoint` / :func:`trapezoid` — fixed-rule shortcuts.

Notes
-----
- The requested width is a target; the interval is always split into
  ``ceil(length / width)`` equal bars (see :class:`Partition`).
- The result is the integral over ``[min(bounds), max(bounds)]`` regardless
  of the order in which the bounds are given.
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_quadrature.config import DEFAULT_STEP_WIDTH
from pysatl_quadrature.quadrature.partition import Partition
from pysatl_quadrature.quadrature.registry import configure_rules_register
from pysatl_quadrature.quadrature.rules import QuadratureRule
from pysatl_quadrature.types import QuadratureRuleName

if TYPE_CHECKING:
    from pysatl_quadrature.types import IntervalLike, ScalarFunc


def resolve_rule(rule: QuadratureRule | QuadratureRuleName | str) -> QuadratureRule:
    """
    Turn a rule name or instance into a rule instance.

    Raises
    ------
    ValueError
        If ``rule`` names no registered rule.
    """
    if isinstance(rule, str):
        return configure_rules_register().get(str(rule))
    if isinstance(rule, QuadratureRule):
        return rule
    raise TypeError(f"Expected a quadrature rule or its name, got {type(rule).__name__}.")


def integrate(
    rule: QuadratureRule | QuadratureRuleName | str,
    f: ScalarFunc,
    interval: IntervalLike,
    width: float = DEFAULT_STEP_WIDTH,
) -> float:
    """
    Approximate the integral of ``f`` over ``interval``.

    Parameters
    ----------
    rule : QuadratureRule, QuadratureRuleName or str
        Rule instance or the name of a registered rule.
    f : Callable[[float], float]
        Integrand; must be finite at every sample point or the result
        becomes NaN/inf.
    interval : Interval1D or tuple
        Two finite bounds in any order.
    width : float, default 0.05
        Target sub-interval width.

    Returns
    -------
    float
        Approximated area; ``0.0`` for a zero-length interval.

    Raises
    ------
    ValueError
        If ``width`` is not positive and finite, a bound is infinite, or the
        rule name is unknown.
    """
    resolved = resolve_rule(rule)
    partition = Partition.from_target_width(interval, width)
    return resolved(f, partition)


def midpoint(f: ScalarFunc, interval: IntervalLike, width: float = DEFAULT_STEP_WIDTH) -> float:
    """Approximate the integral of ``f`` with the midpoint rule."""
    return integrate(QuadratureRuleName.MIDPOINT, f, interval, width)


def trapezoid(f: ScalarFunc, interval: IntervalLike, width: float = DEFAULT_STEP_WIDTH) -> float:
    """Approximate the integral of ``f`` with the trapezoid rule."""
    return integrate(QuadratureRuleName.TRAPEZOID, f, interval, width)
