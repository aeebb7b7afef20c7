"""
Global registry of parametric families.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_uq.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """
    Singleton registry of parametric families, keyed by family name.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _registered_families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        with cls._lock:
            if cls._instance is None:
                instance = super().__new__(cls)
                instance._registered_families = {}
                cls._instance = instance
            return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Retrieve a family by name.

        Raises
        ------
        ValueError
            If no family with this name is registered.
        """
        families = cls()._registered_families
        if name not in families:
            raise ValueError(f"No family {name} found in register")
        return families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._registered_families

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Register a family.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        families = cls()._registered_families
        if family.name in families:
            raise ValueError(f"Family {family.name} already found in register")
        families[family.name] = family

    @classmethod
    def names(cls) -> list[str]:
        return sorted(cls()._registered_families)

    @classmethod
    def _reset(cls) -> None:
        """Drop every registered family."""
        with cls._lock:
            cls._instance = None
