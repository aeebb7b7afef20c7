"""
Standard normal helpers used by the asymptotic regimes of the evaluators.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from scipy.special import ndtr, ndtri

INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def normal_pdf(x: float) -> float:
    """Standard normal density."""
    return INV_SQRT_2PI * math.exp(-0.5 * x * x)


def normal_cdf(x: float, tail: bool = False) -> float:
    """Standard normal CDF, or survival function when ``tail`` is set."""
    return float(ndtr(-x)) if tail else float(ndtr(x))


def normal_quantile(p: float, tail: bool = False) -> float:
    """Standard normal quantile of ``p`` (upper quantile when ``tail`` is set)."""
    return -float(ndtri(p)) if tail else float(ndtri(p))
