"""
Gamma Distribution Functions
============================

CDF of the standard Gamma distribution with shape ``k``, built on the
regularized incomplete gamma function.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_uq.errors import InvalidArgumentError
from pysatl_uq.special.incomplete_gamma import regularized_incomplete_gamma


def p_gamma(k: float, x: float, tail: bool = False) -> float:
    """
    CDF of the standard Gamma distribution.

    Parameters
    ----------
    k : float
        Shape, ``k > 0``.
    x : float
        Evaluation point.
    tail : bool, default False
        If ``True`` return the survival function.

    Returns
    -------
    float
        ``P(X <= x)`` or ``P(X > x)``.
    """
    if not (k > 0.0) or math.isinf(k):
        raise InvalidArgumentError(f"Gamma requires a finite k > 0, got k={k}")
    if math.isnan(x):
        raise InvalidArgumentError("Gamma CDF is undefined at x=nan")
    if x <= 0.0:
        return 1.0 if tail else 0.0
    return regularized_incomplete_gamma(k, x, tail)


__all__ = ["p_gamma"]
