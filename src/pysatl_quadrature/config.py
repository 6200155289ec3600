"""
Quadrature Configuration
========================

Package-wide numeric defaults and the validated options object used by
quadrature-based computations.

Notes
-----
- Defaults are plain module constants; per-call overrides are passed as
  keyword arguments and collected into :class:`QuadratureOptions`.
- ``FINE_STEP_WIDTH`` is the width at which both rules agree with reference
  normal probabilities to ``1e-8``.
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass

from pysatl_quadrature.types import QuadratureRuleName
from pysatl_quadrature.validation import ConstrainedParameters, constraint

DEFAULT_STEP_WIDTH = 0.05
FINE_STEP_WIDTH = 0.0005

# Standard deviations below the location where the quadrature CDF starts.
DEFAULT_TAIL = 15.0

# Partitions above this size still run, but warn first.
MAX_SUBINTERVALS = 10_000_000

DEFAULT_RULE = QuadratureRuleName.MIDPOINT


@dataclass(frozen=True)
class QuadratureOptions(ConstrainedParameters):
    """
    Options for quadrature-based characteristics.

    Parameters
    ----------
    rule : QuadratureRuleName or str, default ``midpoint``
        Rule used to integrate the density.
    width : float, default 0.05
        Target sub-interval width, in units of the distribution's scale.
    tail : float, default 15.0
        Number of scales below the location where integration starts.
    """

    rule: QuadratureRuleName | str = DEFAULT_RULE
    width: float = DEFAULT_STEP_WIDTH
    tail: float = DEFAULT_TAIL

    @constraint(description="width > 0")
    def check_width_positive(self) -> bool:
        return self.width > 0

    @constraint(description="width is finite")
    def check_width_finite(self) -> bool:
        return math.isfinite(self.width)

    @constraint(description="tail > 0")
    def check_tail_positive(self) -> bool:
        return self.tail > 0 and math.isfinite(self.tail)
