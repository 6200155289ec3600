"""
Quadrature subpackage

Numerical integration of scalar functions over finite intervals:

- step normalization (:mod:`.partition`);
- midpoint and trapezoid rules (:mod:`.rules`);
- rule registry (:mod:`.registry`);
- integration entry points (:mod:`.engine`).
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .engine import integrate, midpoint, resolve_rule, trapezoid
from .partition import Partition
from .registry import (
    QuadratureRuleRegister,
    configure_rules_register,
    reset_rules_register,
)
from .rules import MidpointRule, QuadratureRule, TrapezoidRule

__all__ = [
    # engine
    "integrate",
    "midpoint",
    "trapezoid",
    "resolve_rule",
    # partition
    "Partition",
    # rules
    "QuadratureRule",
    "MidpointRule",
    "TrapezoidRule",
    # registry
    "QuadratureRuleRegister",
    "configure_rules_register",
    "reset_rules_register",
]
