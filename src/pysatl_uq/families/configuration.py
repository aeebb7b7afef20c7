"""
Distribution Families Configuration
===================================

Registers the built-in parametric families:

- ``Student`` — Student's t with location and scale;
- ``Pareto`` — Pareto with shape, scale and location, and the Lomax form.

Registration happens once per process (or after
:func:`reset_families_register`).
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_uq.families.builtins import (
    configure_pareto_family,
    configure_student_family,
)
from pysatl_uq.families.registry import ParametricFamilyRegister
from pysatl_uq.logging import logger


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Register every built-in family in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_student_family()
    configure_pareto_family()
    logger.debug(f"Registered families: {ParametricFamilyRegister.names()}")
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
