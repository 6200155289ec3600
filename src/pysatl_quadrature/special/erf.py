"""
Error function approximation.

Closed-form, fixed-coefficient approximation of

    erf(x) = 2/√π ∫₀ˣ exp(-t²) dt

(Abramowitz & Stegun 7.1.25). It does not depend on the quadrature engine,
which makes the erf-based normal CDF an independent check of the
quadrature-based one.
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast, overload

import numpy as np

if TYPE_CHECKING:
    from pysatl_quadrature.types import Number, NumericArray

P = 0.47047
A1 = 0.3480242
A2 = -0.0958798
A3 = 0.7478556

MAX_ABS_ERROR = 2.5e-5
"""Published absolute error bound of the approximation."""


@overload
def erf(x: Number) -> float: ...
@overload
def erf(x: NumericArray) -> NumericArray: ...


def erf(x: Number | NumericArray) -> float | NumericArray:
    """
    Approximate the error function.

    Parameters
    ----------
    x : Number or NumericArray
        Point(s) to evaluate.

    Returns
    -------
    float or NumericArray
        ``erf(x)``; a float for scalar input, an array of the same shape
        otherwise.

    Notes
    -----
    The sign is taken from the sign bit of ``x``, so ``erf(-x) == -erf(x)``
    holds exactly and ``+0.0`` is treated as non-negative. Infinite arguments
    give ``±1`` because ``exp(-inf) == 0``.
    """
    arr = np.asarray(x, dtype=float)

    t = 1.0 / (1.0 + P * np.abs(arr))
    with np.errstate(over="ignore"):
        y = 1.0 - (A1 * t + A2 * t**2 + A3 * t**3) * np.exp(-(arr**2))
    result = np.where(np.signbit(arr), -y, y)

    if np.ndim(arr) == 0:
        return float(result)
    return cast("NumericArray", result)
