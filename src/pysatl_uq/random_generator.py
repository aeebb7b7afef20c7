"""
Process-wide Random Generator
=============================

All random draws of the library (``r_student``, copula realizations,
distribution sampling) consume a single :class:`numpy.random.Generator`.

Notes
-----
- The generator is guarded by a lock: every draw, single or vectorised,
  happens entirely inside the critical section, so concurrent callers are
  serialized and the generator state is never corrupted.
- Batch workers never draw random numbers; samplers draw the whole batch of
  variates in one locked call and only then post-process them.
- :func:`set_seed` makes the stream reproducible.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator


_lock = threading.RLock()
_generator: np.random.Generator = np.random.default_rng()


def set_seed(seed: int | None) -> None:
    """
    Reset the shared generator.

    Parameters
    ----------
    seed : int or None
        Seed of the new stream; ``None`` draws fresh OS entropy.
    """
    global _generator
    with _lock:
        _generator = np.random.default_rng(seed)


@contextmanager
def locked_generator() -> Iterator[np.random.Generator]:
    """
    Give exclusive access to the shared generator.

    Examples
    --------
    >>> with locked_generator() as rng:
    ...     z = rng.standard_normal(3)
    """
    with _lock:
        yield _generator


def uniform(size: int | None = None) -> float | np.ndarray:
    """Draw uniform variates on ``[0, 1)``."""
    with _lock:
        return _generator.random(size)


def standard_exponential(size: int | tuple[int, ...] | None = None) -> float | np.ndarray:
    """Draw standard exponential variates."""
    with _lock:
        return _generator.standard_exponential(size)


__all__ = [
    "set_seed",
    "locked_generator",
    "uniform",
    "standard_exponential",
]
