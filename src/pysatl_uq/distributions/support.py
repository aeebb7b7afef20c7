"""
Supports of univariate distributions.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_uq.types import ContinuousSupportShape1D

if TYPE_CHECKING:
    from pysatl_uq.types import BoolArray, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    """Set of values a distribution can take."""

    def contains(self, x: Number | NumericArray) -> bool | BoolArray: ...


@dataclass(frozen=True, slots=True)
class ContinuousSupport:
    """
    Real interval, possibly unbounded.

    Parameters
    ----------
    left, right : float
        Endpoints; the real line by default.
    left_closed, right_closed : bool
        Whether the endpoints belong to the interval. Infinite endpoints are
        always open.
    """

    left: float = -math.inf
    right: float = math.inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if math.isinf(self.left):
            object.__setattr__(self, "left_closed", False)
        if math.isinf(self.right):
            object.__setattr__(self, "right_closed", False)

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Elementwise membership test; a scalar gives a ``bool``."""
        arr = np.asarray(x, dtype=np.float64)
        above = arr >= self.left if self.left_closed else arr > self.left
        below = arr <= self.right if self.right_closed else arr < self.right
        inside = np.logical_and(above, below)
        return bool(inside) if inside.ndim == 0 else inside

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(x))  # type: ignore[arg-type]

    @property
    def is_empty(self) -> bool:
        if self.left != self.right:
            return self.left > self.right
        return not (self.left_closed and self.right_closed)

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """Topological shape of the interval."""
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY
        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT
        left_open, right_open = math.isinf(self.left), math.isinf(self.right)
        if left_open and right_open:
            return ContinuousSupportShape1D.REAL_LINE
        if left_open:
            return ContinuousSupportShape1D.RAY_LEFT
        if right_open:
            return ContinuousSupportShape1D.RAY_RIGHT
        return ContinuousSupportShape1D.BOUNDED_INTERVAL
