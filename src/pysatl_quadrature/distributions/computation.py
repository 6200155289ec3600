"""
Computation Primitives
======================

This module defines the building blocks used to compute distribution
characteristics:

- :class:`AnalyticalComputation` — a closed-form callable provided by a
  distribution directly.
- :class:`FittedComputationMethod` — a numerical conversion (e.g. from PDF to
  CDF by quadrature) ready to be called.
- :class:`ComputationMethod` — a factory that *fits* a conversion given a
  distribution and returns :class:`FittedComputationMethod`.

Notes
-----
- Callables are **scalar** (``float -> float``) unless a distribution says
  otherwise for its analytical characteristics.
- ``**options`` in fitters are free-form and carry numeric settings such as
  the quadrature rule and step width.
"""

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from mypy_extensions import KwArg

from pysatl_quadrature.types import GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_quadrature.distributions.normal import NormalDistribution

In = TypeVar("In")
Out = TypeVar("Out")


@dataclass(frozen=True, slots=True)
class AnalyticalComputation(Generic[In, Out]):
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod(Generic[In, Out]):
    """Fitted conversion method (ready-to-use).

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names.
    func : Callable[[In, KwArg(Any)], Out]
        Callable implementing the fitted conversion.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the fitted conversion."""
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class ComputationMethod(Generic[In, Out]):
    """Conversion method factory (to be fitted).

    Parameters
    ----------
    target : str
        Destination characteristic name.
    sources : Sequence[str]
        Source characteristic names.
    fitter : Callable[[NormalDistribution, KwArg(Any)], FittedComputationMethod]
        Fitter that prepares a callable conversion for the given distribution.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Callable[["NormalDistribution", KwArg(Any)], FittedComputationMethod[In, Out]]

    def fit(
        self, distribution: "NormalDistribution", **options: Any
    ) -> FittedComputationMethod[In, Out]:
        """Fit and return a :class:`FittedComputationMethod`."""
        return self.fitter(distribution, **options)
