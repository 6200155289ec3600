"""
Quadrature Rules
================

Pluggable rule strategies evaluated over a :class:`Partition`:

- :class:`QuadratureRule` — protocol shared by all rules.
- :class:`MidpointRule` — one sample at the center of each sub-interval.
- :class:`TrapezoidRule` — samples at every boundary, interior ones counted
  twice.

Notes
-----
- Rules decide where ``f`` is sampled and how samples are weighted; the
  partition itself is always built by :meth:`Partition.from_target_width`.
- ``f`` is scalar (``float -> float``) and evaluated once per sample point in
  ascending order. Samples are summed as they are produced, so no node array
  is ever materialized.
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pysatl_quadrature.types import QuadratureRuleName

if TYPE_CHECKING:
    from pysatl_quadrature.quadrature.partition import Partition
    from pysatl_quadrature.types import ScalarFunc


@runtime_checkable
class QuadratureRule(Protocol):
    """Protocol for quadrature rules.

    Attributes
    ----------
    name : str
        Name the rule is registered under.

    Methods
    -------
    __call__(f, partition)
        Approximate the integral of ``f`` over ``partition``.
    """

    @property
    def name(self) -> str: ...
    def __call__(self, f: ScalarFunc, partition: Partition) -> float: ...


@dataclass(frozen=True, slots=True)
class MidpointRule:
    """Midpoint rule: ``width * Σ f(x_i)`` over sub-interval centers."""

    name: str = QuadratureRuleName.MIDPOINT

    def __call__(self, f: ScalarFunc, partition: Partition) -> float:
        if partition.n == 0:
            return 0.0
        total = sum(float(f(x)) for x in partition.midpoints())
        return total * partition.width


@dataclass(frozen=True, slots=True)
class TrapezoidRule:
    """
    Trapezoid rule over partition boundaries.

    ``width * (f(x_0) + 2 Σ f(x_interior) + f(x_n)) / 2``
    """

    name: str = QuadratureRuleName.TRAPEZOID

    def __call__(self, f: ScalarFunc, partition: Partition) -> float:
        if partition.n == 0:
            return 0.0
        last = partition.n
        total = sum(
            float(f(x)) if i in (0, last) else 2.0 * float(f(x))
            for i, x in enumerate(partition.nodes())
        )
        return total * partition.width / 2.0
