"""
Core Type Definitions
=====================

Fundamental types and value objects used throughout PySATL Quadrature.
"""

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from math import inf, isnan
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

ScalarFunc = Callable[[float], float]
"""Type alias for scalar functions (float -> float)."""

GenericCharacteristicName: TypeAlias = str
"""Type alias for characteristic names (e.g., 'pdf', 'cdf')."""


class QuadratureRuleName(StrEnum):
    """
    Names of the supported quadrature rules.

    Attributes
    ----------
    MIDPOINT : str
        Sample the center of each sub-interval.
    TRAPEZOID : str
        Sample every partition boundary, interior points weighted twice.
    """

    MIDPOINT = "midpoint"
    TRAPEZOID = "trapezoid"


class CdfMethod(StrEnum):
    """
    Ways of evaluating a cumulative distribution function.

    Attributes
    ----------
    ERF : str
        Closed form through the error function.
    QUADRATURE : str
        Numerical integration of the density.
    """

    ERF = "erf"
    QUADRATURE = "quadrature"


class CharacteristicName(StrEnum):
    """Standard names of distribution characteristics."""

    PDF = "pdf"
    CDF = "cdf"
    PROBABILITY = "probability"


@dataclass(frozen=True, slots=True)
class Interval1D:
    """
    1D interval with configurable closure.

    Unlike a support, an interval used for integration or probability queries
    may be given in either order: ``Interval1D(2, 1)`` describes the same set
    of points as ``Interval1D(1, 2)``.

    Parameters
    ----------
    left : float, default=-inf
        First endpoint of the interval.
    right : float, default=inf
        Second endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if infinite).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if infinite).
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        """Adjust closure for infinite endpoints."""
        if isnan(self.left) or isnan(self.right):
            raise ValueError("Interval endpoints must not be NaN.")
        if abs(self.left) == inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if abs(self.right) == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @property
    def lower(self) -> float:
        """Smaller endpoint."""
        return min(self.left, self.right)

    @property
    def upper(self) -> float:
        """Larger endpoint."""
        return max(self.left, self.right)

    @property
    def is_bounded(self) -> bool:
        """Whether both endpoints are finite."""
        return abs(self.left) < inf and abs(self.right) < inf

    @property
    def length(self) -> float:
        """Absolute distance between the endpoints."""
        return abs(self.right - self.left)

    @classmethod
    def coerce(cls, interval: "Interval1D | tuple[float | None, float | None]") -> "Interval1D":
        """
        Build an interval from an ``Interval1D`` or a ``(start, end)`` pair.

        ``None`` in a pair stands for an unbounded end.

        Raises
        ------
        TypeError
            If ``interval`` is neither an ``Interval1D`` nor a pair.
        """
        if isinstance(interval, Interval1D):
            return interval
        if isinstance(interval, tuple | list) and len(interval) == 2:
            start, end = interval
            return cls(
                left=-inf if start is None else float(start),
                right=inf if end is None else float(end),
            )
        raise TypeError(
            f"Expected Interval1D or a (start, end) pair, got {type(interval).__name__}."
        )


IntervalLike = Interval1D | tuple[float | None, float | None]
"""Anything accepted where an interval is expected."""


__all__ = [
    "CdfMethod",
    "CharacteristicName",
    "GenericCharacteristicName",
    "Interval1D",
    "IntervalLike",
    "Number",
    "NumPyNumber",
    "NumericArray",
    "QuadratureRuleName",
    "ScalarFunc",
]
