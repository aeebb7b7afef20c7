"""
Sample containers and input validation.

:class:`ArraySample` is what every sampler and batch evaluation returns;
:func:`as_point` and :func:`as_sample` coerce user input to float arrays of
a known dimension.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_uq.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_uq.types import FloatArray


class Sample(Protocol):
    """Read-only view of ``n`` realizations of a ``d``-dimensional law."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> npt.NDArray[np.floating[Any]]: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Sample stored as a float array of shape ``(n, d)``.

    Iterating yields the rows, so a sample can be consumed point by point.
    The constructor keeps a reference to ``data``; it does not copy.

    Raises
    ------
    InvalidArgumentError
        If ``data`` is not two-dimensional.
    """

    __slots__ = ("_data",)

    def __init__(self, data: npt.NDArray[np.floating[Any]]) -> None:
        if data.ndim != 2:
            raise InvalidArgumentError(
                f"ArraySample expects an (n, d) array, got {data.ndim} dimension(s)"
            )
        self._data = data

    @property
    def array(self) -> npt.NDArray[np.floating[Any]]:
        return self._data

    @property
    def dimension(self) -> int:
        """Number of coordinates per realization."""
        return int(self._data.shape[1])

    @property
    def shape(self) -> tuple[int, ...]:
        rows, cols = self._data.shape
        return int(rows), int(cols)

    def __len__(self) -> int:
        return int(self._data.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.floating[Any]]]:
        return iter(self._data)


def as_point(point: Any, dimension: int) -> FloatArray:
    """
    Convert ``point`` to a 1D float array of length ``dimension``.

    Raises
    ------
    InvalidArgumentError
        If the point does not have the expected dimension.
    """
    arr = np.asarray(point, dtype=np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    if arr.ndim != 1 or arr.shape[0] != dimension:
        actual = arr.shape[0] if arr.ndim == 1 else arr.shape
        raise InvalidArgumentError(
            f"Invalid point dimension: expected {dimension}, got {actual}"
        )
    return arr


def as_sample(sample: Any, dimension: int) -> FloatArray:
    """
    Convert ``sample`` to a 2D float array of shape ``(n, dimension)``.

    Accepts an :class:`ArraySample`, a 2D array-like, or, when
    ``dimension == 1``, a 1D array-like of scalars.

    Raises
    ------
    InvalidArgumentError
        If the rows do not have the expected dimension.
    """
    data = sample.array if isinstance(sample, ArraySample) else sample
    arr = np.asarray(data, dtype=np.float64)
    if arr.ndim == 1 and dimension == 1:
        arr = arr.reshape(-1, 1)
    if arr.ndim != 2 or arr.shape[1] != dimension:
        actual = arr.shape[1] if arr.ndim == 2 else arr.shape
        raise InvalidArgumentError(
            f"Invalid sample dimension: expected {dimension}, got {actual}"
        )
    return arr
