"""
Batch Evaluation Configuration
==============================

Process-wide settings controlling how batch evaluations are fanned out
across worker threads.

Notes
-----
- Settings only affect wall-clock time: batch results never depend on the
  number of workers or on the chunking.
- The configuration is replaced atomically; readers always see a consistent
  :class:`BatchConfig` snapshot.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import os
import threading
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from pysatl_uq.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Iterator


def _default_workers() -> int:
    return min(8, os.cpu_count() or 1)


@dataclass(frozen=True, slots=True)
class BatchConfig:
    """
    Parameters of the data-parallel batch dispatch.

    Parameters
    ----------
    max_workers : int
        Upper bound on the number of worker threads used by a batch.
    min_chunk_size : int
        Minimal number of rows handed to one worker. Batches smaller than
        twice this value are evaluated sequentially in the calling thread.
    """

    max_workers: int = _default_workers()
    min_chunk_size: int = 2048

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise InvalidArgumentError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.min_chunk_size < 1:
            raise InvalidArgumentError(f"min_chunk_size must be >= 1, got {self.min_chunk_size}")


_lock = threading.Lock()
_current = BatchConfig()


def get_batch_config() -> BatchConfig:
    """Return the active batch configuration."""
    return _current


def set_batch_config(
    *, max_workers: int | None = None, min_chunk_size: int | None = None
) -> BatchConfig:
    """
    Update the active batch configuration.

    Parameters
    ----------
    max_workers : int, optional
        New worker bound; unchanged if omitted.
    min_chunk_size : int, optional
        New minimal chunk size; unchanged if omitted.

    Returns
    -------
    BatchConfig
        The previous configuration (useful to restore it later).
    """
    global _current

    changes: dict[str, int] = {}
    if max_workers is not None:
        changes["max_workers"] = max_workers
    if min_chunk_size is not None:
        changes["min_chunk_size"] = min_chunk_size

    with _lock:
        previous = _current
        _current = replace(previous, **changes)
    return previous


def reset_batch_config() -> None:
    """Restore the default batch configuration."""
    global _current
    with _lock:
        _current = BatchConfig()


@contextmanager
def batch_config(
    *, max_workers: int | None = None, min_chunk_size: int | None = None
) -> Iterator[BatchConfig]:
    """
    Temporarily override the batch configuration.

    Examples
    --------
    >>> with batch_config(max_workers=4, min_chunk_size=16):
    ...     pass
    """
    global _current

    previous = set_batch_config(max_workers=max_workers, min_chunk_size=min_chunk_size)
    try:
        yield get_batch_config()
    finally:
        with _lock:
            _current = previous


__all__ = [
    "BatchConfig",
    "get_batch_config",
    "set_batch_config",
    "reset_batch_config",
    "batch_config",
]
