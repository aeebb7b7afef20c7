"""
Core Type Definitions
=====================

Type aliases, distribution type descriptors and the names of the
characteristics and families shared by the whole package.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable, Mapping
from dataclasses import asdict, dataclass
from enum import Enum, StrEnum, auto
from typing import Any

import numpy as np
from numpy.typing import NDArray

# Numeric aliases

NumPyNumber = np.floating[Any] | np.integer[Any]
"""NumPy scalar accepted wherever a number is expected."""

Number = NumPyNumber | int | float
"""Python or NumPy real scalar."""

NumericArray = NDArray[NumPyNumber]
"""Array of real numbers of any numeric dtype."""

FloatArray = NDArray[np.float64]
"""Double precision array: points, samples and batch results."""

BoolArray = NDArray[np.bool_]
"""Boolean mask."""

ScalarFunc = Callable[[float], float]
"""Scalar evaluator mapped over batches by :func:`pysatl_uq.parallel.map_scalar`."""

type GenericCharacteristicName = str
"""Name of a characteristic (``"pdf"``, ``"cdf"``, ...)."""

type ParametrizationName = str
"""Name of a parametrization within its family."""


# Distribution types


class Kind(StrEnum):
    """Whether a distribution is discrete or continuous."""

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class of distribution type descriptors.

    Subclasses are dataclasses; their fields are the type features.
    """

    __slots__ = ()

    @property
    def features(self) -> Mapping[str, Any]:
        """Features of the type (``kind``, ``dimension``, ...) by name."""
        return asdict(self)  # type: ignore[call-overload]


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Type of distributions on ``R^dimension``.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        Dimension of the points.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Continuous distributions on the real line (marginals, parametric families)."""

BivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=2)
"""Continuous distributions on the plane (bivariate copulas)."""


class ContinuousSupportShape1D(Enum):
    """
    Topological shape of a real interval.

    ``RAY_LEFT`` is ``(-inf, b]`` and ``RAY_RIGHT`` is ``[a, inf)``, with
    either closure at the finite end.
    """

    REAL_LINE = auto()
    RAY_LEFT = auto()
    RAY_RIGHT = auto()
    BOUNDED_INTERVAL = auto()
    EMPTY = auto()
    SINGLE_POINT = auto()


# Names


class CharacteristicName(StrEnum):
    """
    Characteristics provided by the built-in families.

    Note
    ----------
    A family may provide characteristics outside this enumeration; the
    computation strategy resolves them by name.
    """

    PDF = "pdf"
    CDF = "cdf"
    SF = "sf"
    PPF = "ppf"
    ISF = "isf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    STUDENT = "Student"
    PARETO = "Pareto"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "BivariateContinuous",
    "ContinuousSupportShape1D",
    "GenericCharacteristicName",
    "ParametrizationName",
    "ScalarFunc",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "FloatArray",
    "BoolArray",
    "CharacteristicName",
    "FamilyName",
]
