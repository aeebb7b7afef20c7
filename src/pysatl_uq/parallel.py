"""
Batch Dispatch
==============

Data-parallel "for" over contiguous index ranges, used by every batch
evaluation of the library.

- :func:`partition` — split ``[0, size)`` into ordered, disjoint ranges.
- :func:`parallel_for` — run a range kernel on a bounded thread pool.
- :func:`map_rows` — apply a block kernel to a 2D array, range by range.
- :func:`map_scalar` — apply a scalar evaluator elementwise.

Notes
-----
- Each worker owns a disjoint range and writes only to its own output
  slots, so the numeric kernels need no locking.
- Results are independent of the partitioning: a row is always computed by
  the same kernel, whatever range it falls in.
- The first failing range aborts the batch: its exception is re-raised in the
  caller once all workers have returned, and no partial output escapes.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from concurrent.futures import ThreadPoolExecutor, wait
from typing import TYPE_CHECKING

import numpy as np

from pysatl_uq.config import get_batch_config
from pysatl_uq.logging import logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_uq.types import FloatArray, Number, NumericArray, ScalarFunc

    type RangeKernel = Callable[[int, int], None]
    type BlockKernel = Callable[[FloatArray], FloatArray]


def partition(size: int, chunks: int) -> list[tuple[int, int]]:
    """
    Split ``[0, size)`` into at most ``chunks`` contiguous ranges.

    Parameters
    ----------
    size : int
        Number of items.
    chunks : int
        Requested number of ranges.

    Returns
    -------
    list[tuple[int, int]]
        Ordered ``(start, stop)`` pairs covering ``[0, size)`` exactly once.
        Range lengths differ by at most one.
    """
    if size <= 0:
        return []
    chunks = max(1, min(chunks, size))
    base, extra = divmod(size, chunks)
    ranges: list[tuple[int, int]] = []
    start = 0
    for k in range(chunks):
        stop = start + base + (1 if k < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges


def _chunk_count(size: int) -> int:
    config = get_batch_config()
    return max(1, min(config.max_workers, size // config.min_chunk_size))


def parallel_for(kernel: RangeKernel, size: int) -> None:
    """
    Run ``kernel(start, stop)`` over a partition of ``[0, size)``.

    Parameters
    ----------
    kernel : Callable[[int, int], None]
        Range kernel. It must only write to the slots of its own range.
    size : int
        Number of items to process.

    Raises
    ------
    Exception
        The exception raised by the first failing range (in range order).
    """
    if size <= 0:
        return

    chunks = _chunk_count(size)
    if chunks == 1:
        kernel(0, size)
        return

    ranges = partition(size, chunks)
    logger.debug(f"Dispatching {size} items across {len(ranges)} workers")
    with ThreadPoolExecutor(max_workers=len(ranges), thread_name_prefix="pysatl-uq") as pool:
        futures = [pool.submit(kernel, start, stop) for start, stop in ranges]
        wait(futures)
    for future in futures:
        # re-raises the worker exception, if any
        future.result()


def map_rows(kernel: BlockKernel, block: FloatArray, output_dimension: int) -> FloatArray:
    """
    Apply a block kernel to the rows of a 2D array.

    Parameters
    ----------
    kernel : Callable[[FloatArray], FloatArray]
        Maps an ``(m, d_in)`` array to an ``(m, d_out)`` array row by row.
    block : FloatArray
        Input array of shape ``(n, d_in)``.
    output_dimension : int
        Output dimension ``d_out``.

    Returns
    -------
    FloatArray
        Output array of shape ``(n, d_out)`` in input row order.
    """
    size = int(block.shape[0])
    result = np.empty((size, output_dimension), dtype=np.float64)

    def _run(start: int, stop: int) -> None:
        result[start:stop] = kernel(block[start:stop])

    parallel_for(_run, size)
    return result


def map_scalar(func: ScalarFunc, values: Number | NumericArray) -> float | FloatArray:
    """
    Apply a scalar evaluator elementwise.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar evaluator.
    values : Number or NumericArray
        Scalar or array of arguments.

    Returns
    -------
    float or FloatArray
        ``func(values)`` for a scalar, otherwise an array of the same shape.
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.ndim == 0:
        return float(func(float(arr)))

    flat = arr.ravel()
    out = np.empty_like(flat)

    def _run(start: int, stop: int) -> None:
        for i in range(start, stop):
            out[i] = func(float(flat[i]))

    parallel_for(_run, flat.size)
    return out.reshape(arr.shape)


__all__ = [
    "partition",
    "parallel_for",
    "map_rows",
    "map_scalar",
]
