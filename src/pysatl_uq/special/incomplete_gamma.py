"""
Regularized Incomplete Gamma Function
=====================================

``P(a, x) = gamma(a, x) / Gamma(a)`` and ``Q(a, x) = 1 - P(a, x)``.

Notes
-----
- Power series for ``x < a + 1``, where it converges fastest; Legendre
  continued fraction (modified Lentz) for ``Q`` otherwise.
- Whichever of ``P`` or ``Q`` is evaluated directly is the smaller one,
  the other is its complement.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys

from scipy.special import gammaln

from pysatl_uq.errors import ConvergenceError, InvalidArgumentError

EPSILON = sys.float_info.epsilon
TINY = 1e-300
MAX_ITERATIONS = 20000


def _log_prefactor(a: float, x: float) -> float:
    return a * math.log(x) - x - float(gammaln(a))


def _lower_series(a: float, x: float) -> float:
    term = 1.0 / a
    total = term
    ap = a
    for _ in range(MAX_ITERATIONS):
        ap += 1.0
        term *= x / ap
        total += term
        if abs(term) < abs(total) * EPSILON:
            return total * math.exp(_log_prefactor(a, x))
    raise ConvergenceError(f"Incomplete gamma series did not converge for a={a}, x={x}")


def _upper_continued_fraction(a: float, x: float) -> float:
    b = x + 1.0 - a
    c = 1.0 / TINY
    d = 1.0 / b
    h = d
    for i in range(1, MAX_ITERATIONS + 1):
        an = -i * (i - a)
        b += 2.0
        d = an * d + b
        if abs(d) < TINY:
            d = TINY
        c = b + an / c
        if abs(c) < TINY:
            c = TINY
        d = 1.0 / d
        delta = d * c
        h *= delta
        if abs(delta - 1.0) <= EPSILON:
            return math.exp(_log_prefactor(a, x)) * h
    raise ConvergenceError(
        f"Incomplete gamma continued fraction did not converge for a={a}, x={x}"
    )


def regularized_incomplete_gamma(a: float, x: float, tail: bool = False) -> float:
    """
    Regularized lower incomplete gamma ``P(a, x)`` (or ``Q(a, x)``).

    Parameters
    ----------
    a : float
        Shape, ``a > 0``.
    x : float
        Argument, ``x >= 0``.
    tail : bool, default False
        If ``True`` return the upper function ``Q(a, x)``.

    Returns
    -------
    float
        Value in ``[0, 1]``.

    Raises
    ------
    InvalidArgumentError
        If ``a <= 0`` or ``x < 0``.
    """
    if not (a > 0.0):
        raise InvalidArgumentError(f"Incomplete gamma requires a > 0, got a={a}")
    if not (x >= 0.0):
        raise InvalidArgumentError(f"Incomplete gamma requires x >= 0, got x={x}")

    if x == 0.0:
        return 1.0 if tail else 0.0
    if math.isinf(x):
        return 0.0 if tail else 1.0

    if x < a + 1.0:
        lower = _lower_series(a, x)
        return 1.0 - lower if tail else lower

    upper = _upper_continued_fraction(a, x)
    return upper if tail else 1.0 - upper
