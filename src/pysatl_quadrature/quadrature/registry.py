"""
Global registry for quadrature rules using singleton pattern.

This module keeps the rules available to :func:`integrate` by name, so that a
rule can be selected at call time with a plain string or
:class:`~pysatl_quadrature.types.QuadratureRuleName`.
"""

from __future__ import annotations

__author__ = "PySATL Quadrature developers"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache
from typing import TYPE_CHECKING

from pysatl_quadrature.quadrature.rules import MidpointRule, TrapezoidRule

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_quadrature.quadrature.rules import QuadratureRule


class QuadratureRuleRegister:
    """
    Singleton registry for quadrature rules.

    Maintains a global mapping of rule names to rule instances.
    """

    _instance: ClassVar[QuadratureRuleRegister | None] = None
    _registered_rules: dict[str, QuadratureRule]

    def __new__(cls) -> QuadratureRuleRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_rules = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> QuadratureRule:
        """
        Retrieve a rule by name.

        Raises
        ------
        ValueError
            If no rule with the given name exists.
        """
        self = cls()
        if name not in self._registered_rules:
            raise ValueError(f"No quadrature rule {name} found in register")
        return self._registered_rules[name]

    @classmethod
    def register(cls, rule: QuadratureRule) -> None:
        """
        Register a new rule.

        Raises
        ------
        ValueError
            If a rule with the same name is already registered.
        """
        self = cls()
        if rule.name in self._registered_rules:
            raise ValueError(f"Quadrature rule {rule.name} already found in register")
        self._registered_rules[str(rule.name)] = rule

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._registered_rules

    @classmethod
    def names(cls) -> list[str]:
        return list(cls()._registered_rules)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None


@lru_cache(maxsize=1)
def configure_rules_register() -> QuadratureRuleRegister:
    """
    Register the built-in rules in the global registry.

    Returns
    -------
    QuadratureRuleRegister
        The global registry of quadrature rules.
    """
    for rule in (MidpointRule(), TrapezoidRule()):
        if not QuadratureRuleRegister.contains(rule.name):
            QuadratureRuleRegister.register(rule)
    return QuadratureRuleRegister()


def reset_rules_register() -> None:
    """
    Reset the cached rules registry.
    """
    configure_rules_register.cache_clear()
    QuadratureRuleRegister._reset()
