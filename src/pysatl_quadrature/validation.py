"""
Constraint declarations for immutable parameter objects.

This module provides the small machinery used by value objects of the package
(distribution parameters, quadrature options) to declare validity conditions
as decorated predicate methods and check them on construction.
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar


@dataclass(slots=True, frozen=True)
class ParameterConstraint:
    """
    Constraint on the field values of a parameter object.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], bool]
        Validation function that returns True if constraint is satisfied.
    """

    description: str
    check: Callable[[Any], bool]


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must be a predicate returning bool.
    Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type) -> list[ParameterConstraint]:
    """Collect constraint methods declared directly on the class."""
    constraints: list[ParameterConstraint] = []
    for name, attr in cls.__dict__.items():
        if isinstance(attr, staticmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @staticmethod"
                )
            continue
        if isinstance(attr, classmethod):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(
                    f"@constraint '{name}' must be an instance method, not @classmethod"
                )
            continue

        func = attr if callable(attr) and isfunction(attr) else None
        if not func:
            continue
        if getattr(func, "__is_constraint", False):
            desc = getattr(func, "__constraint_description", func.__name__)
            constraints.append(ParameterConstraint(description=desc, check=func))
    return constraints


class ConstrainedParameters(ABC):
    """
    Base class for frozen dataclasses whose fields must satisfy constraints.

    Subclasses declare predicates with :func:`constraint`; they are collected
    when the subclass is created and checked after ``__init__``.
    """

    _constraints: ClassVar[list[ParameterConstraint]] = []

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # resolves to the nearest parent's list at this point
        inherited = list(cls._constraints)
        own = _collect_constraints(cls)
        known = {c.description for c in own}
        cls._constraints = [*(c for c in inherited if c.description not in known), *own]

    def __post_init__(self) -> None:
        self.validate()

    @property
    def constraints(self) -> list[ParameterConstraint]:
        """Get constraints declared for this class."""
        return self._constraints

    def validate(self) -> None:
        """
        Validate all constraints.

        Raises
        ------
        ValueError
            If any constraint is not satisfied.
        """
        for item in self._constraints:
            if not item.check(self):
                raise ValueError(f'Constraint "{item.description}" does not hold')
