from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_quadrature.config import DEFAULT_STEP_WIDTH, MAX_SUBINTERVALS
from pysatl_quadrature.types import Interval1D

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_quadrature.types import IntervalLike


@dataclass(frozen=True, slots=True)
class Partition:
    """
    Split of a finite interval into ``n`` equal sub-intervals.

    Parameters
    ----------
    lower : float
        Smaller bound of the integration interval.
    upper : float
        Larger bound of the integration interval.
    n : int
        Number of sub-intervals (``0`` only for a zero-length interval).
    width : float
        Actual sub-interval width, ``(upper - lower) / n``.
    """

    lower: float
    upper: float
    n: int
    width: float

    @classmethod
    def from_target_width(
        cls, interval: IntervalLike, width: float = DEFAULT_STEP_WIDTH
    ) -> Partition:
        """
        Normalize a target width into an exact partition of ``interval``.

        The interval is cut into ``n = ceil(length / width)`` bars, so the
        actual width never exceeds the requested one and the last bar ends
        exactly on the upper bound.

        Parameters
        ----------
        interval : Interval1D or tuple
            Two finite bounds in any order.
        width : float, default 0.05
            Target sub-interval width.

        Returns
        -------
        Partition

        Raises
        ------
        ValueError
            If ``width`` is not a positive finite number or a bound is infinite,
            or if the number of sub-intervals overflows a float.
        """
        if not (width > 0 and math.isfinite(width)):
            raise ValueError(f"Step width must be a positive finite number, got {width!r}.")

        interval = Interval1D.coerce(interval)
        if not interval.is_bounded:
            raise ValueError(
                f"Quadrature requires two finite bounds, got ({interval.left}, {interval.right})."
            )

        length = interval.length
        if length == 0.0:
            return cls(lower=interval.lower, upper=interval.upper, n=0, width=0.0)

        bars = length / width
        if not math.isfinite(bars):
            raise ValueError(
                f"Interval ({interval.left}, {interval.right}) cannot be split into "
                f"sub-intervals of width {width!r}: the count overflows."
            )
        n = math.ceil(bars)
        if n > MAX_SUBINTERVALS:
            warnings.warn(
                f"Partition of length {length} with width {width} has {n} sub-intervals; "
                "evaluation may be slow.",
                RuntimeWarning,
                stacklevel=3,
            )
        return cls(lower=interval.lower, upper=interval.upper, n=n, width=length / n)

    def nodes(self) -> Iterator[float]:
        """Partition boundaries ``x_0 .. x_n``; the last one is ``upper`` exactly."""
        for i in range(self.n):
            yield self.lower + self.width * i
        yield self.upper

    def midpoints(self) -> Iterator[float]:
        """Centers of the ``n`` sub-intervals."""
        for i in range(self.n):
            yield self.lower + self.width * (i + 0.5)
