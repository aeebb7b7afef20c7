"""
Vector Function Evaluations
===========================

Base class of the point and sample transforms.

An :class:`Evaluation` maps points of dimension ``input_dimension`` to
points of dimension ``output_dimension``. Subclasses implement a single
block kernel; the point call evaluates the same kernel on a one-row block,
so a batch always agrees bit for bit with the corresponding point calls.

Notes
-----
- Dimensions are checked before any computation.
- A successful point call adds one to :attr:`Evaluation.calls_number`, a
  successful batch adds its number of rows once, after every worker has
  finished. A failing call changes neither the counter nor the history.
- History is disabled by default.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pysatl_uq.distributions.sampling import ArraySample, as_point, as_sample
from pysatl_uq.parallel import map_rows
from pysatl_uq.persistence import Persistent

from .history import HistoryStrategy

if TYPE_CHECKING:
    from typing import Any

    from pysatl_uq.types import FloatArray


class Evaluation(Persistent, ABC):
    """
    Base class of vector function evaluations.

    Parameters
    ----------
    input_dimension : int
        Dimension of the input points.
    output_dimension : int
        Dimension of the output points.
    name : str, optional
        Instance name; defaults to the class name.
    """

    def __init__(self, input_dimension: int, output_dimension: int, name: str | None = None):
        self._input_dimension = input_dimension
        self._output_dimension = output_dimension
        self._name = type(self).__name__ if name is None else name
        self._calls_lock = threading.Lock()
        self._calls_number = 0
        self._history_enabled = False
        self._history = HistoryStrategy(input_dimension, output_dimension)

    @property
    def input_dimension(self) -> int:
        """Dimension of the input points."""
        return self._input_dimension

    @property
    def output_dimension(self) -> int:
        """Dimension of the output points."""
        return self._output_dimension

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value

    @property
    def calls_number(self) -> int:
        """Number of points evaluated so far."""
        with self._calls_lock:
            return self._calls_number

    # History

    def enable_history(self) -> None:
        self._history_enabled = True

    def disable_history(self) -> None:
        self._history_enabled = False

    @property
    def is_history_enabled(self) -> bool:
        return self._history_enabled

    def clear_history(self) -> None:
        self._history.clear()

    @property
    def history(self) -> HistoryStrategy:
        """Stored inputs and outputs of the calls made while history was enabled."""
        return self._history

    # Evaluation

    @abstractmethod
    def _kernel(self, block: FloatArray) -> FloatArray:
        """Evaluate an ``(m, input_dimension)`` block row by row."""

    def _record(self, inputs: FloatArray, outputs: FloatArray) -> None:
        with self._calls_lock:
            self._calls_number += int(inputs.shape[0])
        if self._history_enabled:
            self._history.store(inputs, outputs)

    def __call__(self, point: Any) -> FloatArray:
        """
        Evaluate a single point.

        Parameters
        ----------
        point : array_like
            Point of dimension ``input_dimension``.

        Returns
        -------
        FloatArray
            Image of the point, of dimension ``output_dimension``.

        Raises
        ------
        InvalidArgumentError
            If the point has a wrong dimension or lies outside the domain.
        """
        x = as_point(point, self._input_dimension).reshape(1, -1)
        y = self._kernel(x)
        self._record(x, y)
        return y[0]

    def evaluate_sample(self, sample: Any) -> ArraySample:
        """
        Evaluate every row of a sample.

        Rows are dispatched to the batch workers in contiguous ranges; the
        whole batch fails if any row fails.

        Parameters
        ----------
        sample : ArraySample or array_like
            Sample of shape ``(n, input_dimension)``.

        Returns
        -------
        ArraySample
            Sample of shape ``(n, output_dimension)`` in input row order.
        """
        block = as_sample(sample, self._input_dimension)
        result = map_rows(self._kernel, block, self._output_dimension)
        self._record(block, result)
        return ArraySample(result)

    # String forms

    def _parameters_repr(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"{type(self).__name__}(input_dimension={self._input_dimension})"

    def __repr__(self) -> str:
        text = (
            f"class={type(self).__name__} name={self._name} "
            f"input_dimension={self._input_dimension} output_dimension={self._output_dimension}"
        )
        parameters = self._parameters_repr()
        return f"{text} {parameters}" if parameters else text
