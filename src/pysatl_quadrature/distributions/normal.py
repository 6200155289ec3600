"""
Normal distribution with closed-form and quadrature-based characteristics.

The cumulative distribution function is available two ways:

- analytically, through the error-function approximation
  (:func:`pysatl_quadrature.special.erf`);
- numerically, by integrating the density with the quadrature engine.

The two paths are independent, so their agreement (see
:meth:`NormalDistribution.cdf_discrepancy`) is a check on both.
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from collections.abc import Callable
from dataclasses import dataclass
from functools import cached_property
from typing import TYPE_CHECKING, Any, cast, overload

import numpy as np
from mypy_extensions import KwArg

from pysatl_quadrature.distributions.computation import AnalyticalComputation
from pysatl_quadrature.distributions.fitters import (
    CDF_TO_PROBABILITY,
    PDF_TO_CDF_QUADRATURE,
)
from pysatl_quadrature.special import erf
from pysatl_quadrature.types import CdfMethod, CharacteristicName
from pysatl_quadrature.validation import ConstrainedParameters, constraint

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pysatl_quadrature.distributions.computation import FittedComputationMethod
    from pysatl_quadrature.types import (
        GenericCharacteristicName,
        IntervalLike,
        Number,
        NumericArray,
    )

SQRT2 = math.sqrt(2.0)
SQRT2PI = math.sqrt(2.0 * math.pi)


@dataclass(frozen=True)
class NormalDistribution(ConstrainedParameters):
    """
    Normal (Gaussian) distribution.

    Probability density function:
        f(x) = 1/(|σ|√(2π)) * exp(-(x-μ)²/(2σ²))

    Parameters
    ----------
    location : float, default 0.0
        Mean μ.
    scale : float, default 1.0
        Standard deviation σ. Only its magnitude is used, so ``scale=-2``
        describes the same distribution as ``scale=2``.

    Raises
    ------
    ValueError
        If ``scale`` is zero or either parameter is not finite.
    """

    location: float = 0.0
    scale: float = 1.0

    @constraint(description="location is finite")
    def check_location_finite(self) -> bool:
        return math.isfinite(self.location)

    @constraint(description="scale is finite")
    def check_scale_finite(self) -> bool:
        return math.isfinite(self.scale)

    @constraint(description="scale != 0")
    def check_scale_nonzero(self) -> bool:
        return self.scale != 0

    @classmethod
    def standard(cls) -> NormalDistribution:
        """Standard normal distribution N(0, 1)."""
        return cls(location=0.0, scale=1.0)

    def __str__(self) -> str:
        return f"N(μ={self.location:g}, σ={self.effective_scale:g})"

    # ---- parameters ----
    @property
    def effective_scale(self) -> float:
        """Scale used in every formula, ``|σ|``."""
        return abs(self.scale)

    @property
    def mean(self) -> float:
        return self.location

    @property
    def variance(self) -> float:
        return self.effective_scale * self.effective_scale

    # ---- characteristics ----
    @overload
    def density(self, x: Number) -> float: ...
    @overload
    def density(self, x: NumericArray) -> NumericArray: ...

    def density(self, x: Number | NumericArray) -> float | NumericArray:
        """
        Probability density function.

        Parameters
        ----------
        x : Number or NumericArray
            Points at which to evaluate the density.

        Returns
        -------
        float or NumericArray
            Density values at ``x``.
        """
        arr = np.asarray(x, dtype=float)
        sigma = self.effective_scale
        # squaring sigma itself overflows or underflows at extreme scales
        with np.errstate(over="ignore"):
            z = (arr - self.location) / sigma
            values = np.exp(-0.5 * z * z) / (sigma * SQRT2PI)
        if np.ndim(arr) == 0:
            return float(values)
        return cast("NumericArray", values)

    @overload
    def cdf(self, x: Number, method: CdfMethod | str = ..., **options: Any) -> float: ...
    @overload
    def cdf(
        self, x: NumericArray, method: CdfMethod | str = ..., **options: Any
    ) -> NumericArray: ...

    def cdf(
        self, x: Number | NumericArray, method: CdfMethod | str = CdfMethod.ERF, **options: Any
    ) -> float | NumericArray:
        """
        Cumulative distribution function, ``P(X <= x)``.

        Parameters
        ----------
        x : Number or NumericArray
            Points at which to evaluate the CDF.
        method : CdfMethod or str, default ``"erf"``
            ``"erf"`` for the closed form, ``"quadrature"`` to integrate the
            density.
        **options : Any
            Quadrature settings (``rule``, ``width``, ``tail``); ignored by
            the closed form.

        Returns
        -------
        float or NumericArray
            Probabilities at ``x``; ``0`` at ``-inf``, ``1`` at ``+inf`` and
            NaN at NaN for both methods.
        """
        if CdfMethod(method) == CdfMethod.ERF:
            return self._erf_cdf(x)

        fitted = self.query_method(CharacteristicName.CDF, method=method, **options)
        arr = np.asarray(x, dtype=float)
        if np.ndim(arr) == 0:
            return float(fitted(float(arr)))
        values = np.fromiter((fitted(float(v)) for v in arr.flat), dtype=float, count=arr.size)
        return cast("NumericArray", values.reshape(arr.shape))

    def _erf_cdf(self, x: Number | NumericArray) -> float | NumericArray:
        arr = np.asarray(x, dtype=float)
        z = (arr - self.location) / (self.effective_scale * SQRT2)
        values = 0.5 * (1.0 + erf(z))
        # the formula already tends to 0/1, pin the limits exactly
        values = np.where(arr == -np.inf, 0.0, values)
        values = np.where(arr == np.inf, 1.0, values)
        if np.ndim(arr) == 0:
            return float(values)
        return cast("NumericArray", values)

    def probability(
        self, interval: IntervalLike, method: CdfMethod | str = CdfMethod.ERF, **options: Any
    ) -> float:
        """
        Probability mass of an interval.

        Parameters
        ----------
        interval : Interval1D or tuple
            Bounds in any order; ``±inf`` (or ``None`` in a pair) for
            unbounded ends.
        method : CdfMethod or str, default ``"erf"``
            CDF evaluation method, see :meth:`cdf`.
        **options : Any
            Quadrature settings for ``method="quadrature"``.

        Returns
        -------
        float
            ``cdf(upper) - cdf(lower)``, never negative.
        """
        fitted = self.query_method(CharacteristicName.PROBABILITY, method=method, **options)
        return float(fitted(interval))

    def cdf_discrepancy(self, points: Number | NumericArray, **options: Any) -> float:
        """
        Largest absolute difference between the erf and quadrature CDFs.

        Parameters
        ----------
        points : Number or NumericArray
            Points at which both CDFs are compared.
        **options : Any
            Quadrature settings (``rule``, ``width``, ``tail``).

        Returns
        -------
        float
            ``max |cdf_erf(x) - cdf_quadrature(x)|`` over ``points``.
        """
        arr = np.atleast_1d(np.asarray(points, dtype=float))
        closed = np.asarray(self.cdf(arr, method=CdfMethod.ERF))
        numeric = np.asarray(self.cdf(arr, method=CdfMethod.QUADRATURE, **options))
        return float(np.max(np.abs(closed - numeric)))

    # ---- computation resolution ----
    @cached_property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Closed-form characteristics of this distribution."""

        def pdf(x: float, **_: Any) -> float:
            return float(self.density(x))

        def cdf(x: float, **_: Any) -> float:
            return float(self._erf_cdf(x))

        pdf_func = cast(Callable[[float, KwArg(Any)], float], pdf)
        cdf_func = cast(Callable[[float, KwArg(Any)], float], cdf)
        return {
            CharacteristicName.PDF: AnalyticalComputation(
                target=CharacteristicName.PDF, func=pdf_func
            ),
            CharacteristicName.CDF: AnalyticalComputation(
                target=CharacteristicName.CDF, func=cdf_func
            ),
        }

    def query_method(
        self,
        characteristic_name: GenericCharacteristicName,
        method: CdfMethod | str = CdfMethod.ERF,
        **options: Any,
    ) -> AnalyticalComputation[Any, Any] | FittedComputationMethod[Any, Any]:
        """
        Resolve a characteristic to a scalar callable.

        Parameters
        ----------
        characteristic_name : str
            ``"pdf"``, ``"cdf"`` or ``"probability"``.
        method : CdfMethod or str, default ``"erf"``
            How the CDF (and everything derived from it) is evaluated.
        **options : Any
            Quadrature settings passed to the fitter.

        Returns
        -------
        AnalyticalComputation or FittedComputationMethod

        Raises
        ------
        ValueError
            If the characteristic or the method is unknown.
        """
        method = CdfMethod(method)
        if characteristic_name == CharacteristicName.PDF:
            return self.analytical_computations[CharacteristicName.PDF]
        if characteristic_name == CharacteristicName.CDF:
            if method == CdfMethod.ERF:
                return self.analytical_computations[CharacteristicName.CDF]
            return PDF_TO_CDF_QUADRATURE.fit(self, **options)
        if characteristic_name == CharacteristicName.PROBABILITY:
            return CDF_TO_PROBABILITY.fit(self, method=method, **options)
        raise ValueError(f"Unknown characteristic '{characteristic_name}'.")
