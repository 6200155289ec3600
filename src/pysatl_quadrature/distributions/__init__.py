"""
Distributions subpackage

Probability distributions built on the quadrature engine:

- computation primitives (:mod:`.computation`);
- numerical fitters (:mod:`.fitters`);
- the normal distribution (:mod:`.normal`).
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .fitters import (
    CDF_TO_PROBABILITY,
    PDF_TO_CDF_QUADRATURE,
    fit_cdf_to_probability,
    fit_pdf_to_cdf_quadrature,
)
from .normal import NormalDistribution

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    # fitters
    "fit_pdf_to_cdf_quadrature",
    "fit_cdf_to_probability",
    "PDF_TO_CDF_QUADRATURE",
    "CDF_TO_PROBABILITY",
    # distributions
    "NormalDistribution",
]
