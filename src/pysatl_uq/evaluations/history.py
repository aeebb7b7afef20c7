"""
Evaluation history storage.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from typing import TYPE_CHECKING

import numpy as np

from pysatl_uq.distributions.sampling import ArraySample

if TYPE_CHECKING:
    from pysatl_uq.types import FloatArray


class HistoryStrategy:
    """
    Thread-safe storage of evaluated inputs and outputs.

    Parameters
    ----------
    input_dimension : int
        Dimension of the stored input rows.
    output_dimension : int
        Dimension of the stored output rows.
    """

    def __init__(self, input_dimension: int, output_dimension: int) -> None:
        self._input_dimension = input_dimension
        self._output_dimension = output_dimension
        self._lock = threading.Lock()
        self._inputs: list[FloatArray] = []
        self._outputs: list[FloatArray] = []

    def store(self, inputs: FloatArray, outputs: FloatArray) -> None:
        """Append a block of input rows and the matching output rows."""
        with self._lock:
            self._inputs.append(np.array(inputs, dtype=np.float64, copy=True))
            self._outputs.append(np.array(outputs, dtype=np.float64, copy=True))

    def clear(self) -> None:
        """Forget every stored row."""
        with self._lock:
            self._inputs.clear()
            self._outputs.clear()

    def __len__(self) -> int:
        with self._lock:
            return sum(int(block.shape[0]) for block in self._inputs)

    @staticmethod
    def _concatenate(blocks: list[FloatArray], dimension: int) -> ArraySample:
        if not blocks:
            return ArraySample(np.empty((0, dimension), dtype=np.float64))
        return ArraySample(np.concatenate(blocks, axis=0))

    @property
    def input_sample(self) -> ArraySample:
        """All stored inputs, in call order."""
        with self._lock:
            return self._concatenate(self._inputs, self._input_dimension)

    @property
    def output_sample(self) -> ArraySample:
        """All stored outputs, in call order."""
        with self._lock:
            return self._concatenate(self._outputs, self._output_dimension)
