"""
Copulas subpackage

- :class:`MarshallOlkinCopula` — bivariate Marshall-Olkin copula;
- :class:`ComposedDistribution` — joint distribution from marginals and a copula.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .composed import ComposedDistribution
from .marshall_olkin import MarshallOlkinCopula

__all__ = [
    "MarshallOlkinCopula",
    "ComposedDistribution",
]
