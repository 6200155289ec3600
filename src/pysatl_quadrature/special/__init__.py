"""
Special functions used by closed-form distribution characteristics.
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .erf import erf

__all__ = ["erf"]
