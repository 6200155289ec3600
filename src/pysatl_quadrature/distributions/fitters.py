from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from math import inf, isnan
from typing import TYPE_CHECKING, Any, cast

import numpy as np
from mypy_extensions import KwArg

from pysatl_quadrature.config import QuadratureOptions
from pysatl_quadrature.distributions.computation import (
    ComputationMethod,
    FittedComputationMethod,
)
from pysatl_quadrature.quadrature import integrate, resolve_rule
from pysatl_quadrature.types import CharacteristicName, Interval1D, IntervalLike

if TYPE_CHECKING:
    from pysatl_quadrature.distributions.normal import NormalDistribution
    from pysatl_quadrature.types import ScalarFunc


def _resolve(distribution: NormalDistribution, name: str, **options: Any) -> ScalarFunc:
    """
    Resolve a scalar characteristic from the distribution.

    Parameters
    ----------
    distribution : NormalDistribution
        Source distribution.
    name : str
        Characteristic name to resolve (e.g., ``"pdf"``).

    Returns
    -------
    Callable[[float], float]
        Scalar callable for the requested characteristic.
    """
    fn = distribution.query_method(name, **options)

    def _wrap(x: float) -> float:
        return float(fn(x))

    return _wrap


def fit_pdf_to_cdf_quadrature(
    distribution: NormalDistribution, /, **options: Any
) -> FittedComputationMethod[float, float]:
    """
    Fit ``cdf`` by integrating the analytical ``pdf`` with the quadrature engine.

    Integration runs from ``location - tail * scale`` up to the queried point,
    so the step width and the cut-off are both measured in units of the scale.

    Parameters
    ----------
    distribution : NormalDistribution
    **options : Any
        Fields of :class:`~pysatl_quadrature.config.QuadratureOptions`
        (``rule``, ``width``, ``tail``).

    Returns
    -------
    FittedComputationMethod[float, float]
        Fitted ``pdf -> cdf`` conversion.

    Raises
    ------
    ValueError
        If the options are invalid or name an unknown rule.
    """
    settings = QuadratureOptions(**options)
    rule = resolve_rule(settings.rule)
    pdf_func = _resolve(distribution, CharacteristicName.PDF)

    scale = distribution.effective_scale
    lower = distribution.location - settings.tail * scale
    upper = distribution.location + settings.tail * scale
    width = settings.width * scale

    def _cdf(x: float, **_: Any) -> float:
        x = float(x)
        if isnan(x):
            return float("nan")
        if x <= lower:
            return 0.0
        if x == inf:
            return 1.0
        val = integrate(rule, pdf_func, (lower, min(x, upper)), width)
        return float(np.clip(val, 0.0, 1.0))

    cdf_func = cast(Callable[[float, KwArg(Any)], float], _cdf)
    return FittedComputationMethod(
        target=CharacteristicName.CDF, sources=[CharacteristicName.PDF], func=cdf_func
    )


def fit_cdf_to_probability(
    distribution: NormalDistribution, /, **options: Any
) -> FittedComputationMethod[IntervalLike, float]:
    """
    Build interval probability as the difference of ``cdf`` values.

    Parameters
    ----------
    distribution : NormalDistribution
    **options : Any
        Passed to the ``cdf`` resolution (e.g. ``method="quadrature"``).

    Returns
    -------
    FittedComputationMethod[IntervalLike, float]
        Fitted ``cdf -> probability`` conversion.

    Notes
    -----
    ``P(interval) = cdf(upper) - cdf(lower)``. Unbounded ends use the limiting
    values ``cdf(-inf) = 0`` and ``cdf(+inf) = 1``. Endpoint closure does not
    matter for a continuous distribution, and a reversed interval yields the
    same non-negative mass as its ordered counterpart.
    """
    cdf_func = _resolve(distribution, CharacteristicName.CDF, **options)

    def _probability(interval: IntervalLike, **_: Any) -> float:
        bounds = Interval1D.coerce(interval)
        right = 1.0 if bounds.upper == inf else cdf_func(bounds.upper)
        left = 0.0 if bounds.lower == -inf else cdf_func(bounds.lower)
        return max(right - left, 0.0)

    probability_func = cast(Callable[[IntervalLike, KwArg(Any)], float], _probability)
    return FittedComputationMethod(
        target=CharacteristicName.PROBABILITY,
        sources=[CharacteristicName.CDF],
        func=probability_func,
    )


PDF_TO_CDF_QUADRATURE: ComputationMethod[float, float] = ComputationMethod(
    target=CharacteristicName.CDF,
    sources=[CharacteristicName.PDF],
    fitter=fit_pdf_to_cdf_quadrature,
)

CDF_TO_PROBABILITY: ComputationMethod[Any, float] = ComputationMethod(
    target=CharacteristicName.PROBABILITY,
    sources=[CharacteristicName.CDF],
    fitter=fit_cdf_to_probability,
)
