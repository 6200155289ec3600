"""
PySATL Quadrature
=================

Numerical quadrature of scalar functions and, built on it, closed-form and
quadrature-based characteristics of the normal distribution.
"""

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import (
    DEFAULT_STEP_WIDTH,
    DEFAULT_TAIL,
    FINE_STEP_WIDTH,
    QuadratureOptions,
)
from .distributions import *
from .distributions import __all__ as _distr_all
from .quadrature import *
from .quadrature import __all__ as _quad_all
from .special import erf
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-quadrature")
__all__ = [
    "__version__",
    "erf",
    "DEFAULT_STEP_WIDTH",
    "DEFAULT_TAIL",
    "FINE_STEP_WIDTH",
    "QuadratureOptions",
    *_distr_all,
    *_quad_all,
    *_types_all,
]

del _distr_all
del _quad_all
del _types_all
