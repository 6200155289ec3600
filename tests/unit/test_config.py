from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import FrozenInstanceError, dataclass
from math import inf, nan

import pytest

from pysatl_quadrature.config import (
    DEFAULT_STEP_WIDTH,
    DEFAULT_TAIL,
    QuadratureOptions,
)
from pysatl_quadrature.types import QuadratureRuleName
from pysatl_quadrature.validation import ConstrainedParameters, constraint


class TestQuadratureOptions:
    def test_defaults(self):
        options = QuadratureOptions()
        assert options.rule == QuadratureRuleName.MIDPOINT
        assert options.width == DEFAULT_STEP_WIDTH == 0.05
        assert options.tail == DEFAULT_TAIL

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"width": 0.0}, "width > 0"),
            ({"width": -0.1}, "width > 0"),
            ({"width": nan}, "width > 0"),
            ({"width": inf}, "width is finite"),
            ({"tail": 0.0}, "tail > 0"),
            ({"tail": inf}, "tail > 0"),
        ],
    )
    def test_invalid_values(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            QuadratureOptions(**kwargs)

    def test_is_frozen(self):
        options = QuadratureOptions()
        with pytest.raises(FrozenInstanceError):
            options.width = 1.0  # type: ignore[misc]

    def test_constraints_listed(self):
        descriptions = [c.description for c in QuadratureOptions().constraints]
        assert descriptions == ["width > 0", "width is finite", "tail > 0"]


class TestConstrainedParameters:
    def test_subclass_inherits_and_extends_constraints(self):
        @dataclass(frozen=True)
        class Base(ConstrainedParameters):
            a: float

            @constraint(description="a > 0")
            def check_a(self) -> bool:
                return self.a > 0

        @dataclass(frozen=True)
        class Child(Base):
            b: float

            @constraint(description="b > a")
            def check_b(self) -> bool:
                return self.b > self.a

        assert [c.description for c in Child(1.0, 2.0).constraints] == ["a > 0", "b > a"]
        with pytest.raises(ValueError, match='"a > 0"'):
            Child(-1.0, 2.0)
        with pytest.raises(ValueError, match='"b > a"'):
            Child(1.0, 0.5)

    def test_static_constraint_rejected(self):
        with pytest.raises(TypeError, match="must be an instance method"):

            class Broken(ConstrainedParameters):
                @staticmethod
                @constraint(description="always")
                def check() -> bool:
                    return True
