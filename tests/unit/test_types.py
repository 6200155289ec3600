from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, nan

import pytest

from pysatl_quadrature.types import Interval1D


class TestInterval1D:
    def test_reversed_interval_has_ordered_bounds(self):
        reversed_interval = Interval1D(2.0, -1.0)
        assert reversed_interval.lower == -1.0
        assert reversed_interval.upper == 2.0
        assert reversed_interval.length == 3.0

    def test_infinite_ends_are_open(self):
        interval = Interval1D()
        assert not interval.left_closed
        assert not interval.right_closed
        assert not interval.is_bounded

    @pytest.mark.parametrize(
        "interval, expected",
        [
            (Interval1D(0, 1), True),
            (Interval1D(1, 0), True),
            (Interval1D(left=0), False),
            (Interval1D(right=0), False),
            (Interval1D(), False),
        ],
        ids=["bounded", "reversed", "ray_right", "ray_left", "real_line"],
    )
    def test_is_bounded(self, interval, expected):
        assert interval.is_bounded is expected

    def test_unbounded_length_is_infinite(self):
        assert Interval1D(left=0.0).length == inf

    def test_nan_endpoint_rejected(self):
        with pytest.raises(ValueError, match="NaN"):
            Interval1D(nan, 1.0)


class TestIntervalCoercion:
    def test_interval_passes_through(self):
        interval = Interval1D(0.0, 1.0)
        assert Interval1D.coerce(interval) is interval

    @pytest.mark.parametrize(
        "pair, expected",
        [
            ((0.0, 1.0), Interval1D(0.0, 1.0)),
            ((None, 0.0), Interval1D(right=0.0)),
            ((0.0, None), Interval1D(left=0.0)),
            ((None, None), Interval1D()),
            ([-1, 2], Interval1D(-1.0, 2.0)),
        ],
    )
    def test_pairs(self, pair, expected):
        assert Interval1D.coerce(pair) == expected

    @pytest.mark.parametrize("value", [1.0, (1.0,), (1.0, 2.0, 3.0), "ab"])
    def test_rejects_non_pairs(self, value):
        with pytest.raises(TypeError, match="Expected Interval1D"):
            Interval1D.coerce(value)
