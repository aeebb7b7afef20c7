"""
Pareto Distribution Functions
=============================

Scalar evaluators of the Pareto distribution with shape ``alpha > 0``,
scale ``beta > 0`` and location ``gamma``:

``P(X > x) = (beta / (x - gamma))^alpha`` for ``x >= gamma + beta``.

Notes
-----
- The survival function is evaluated as ``exp(alpha * log(beta / z))`` and
  the CDF as ``-expm1(alpha * log(beta / z))``, ``z = x - gamma``, so both
  keep full relative accuracy in their own small regime.
- The lower quantile uses ``log1p(-q)``, the upper quantile ``log(q)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np

from pysatl_uq.errors import InvalidArgumentError
from pysatl_uq.random_generator import uniform


def _check_parameters(alpha: float, beta: float, gamma: float) -> None:
    if not (alpha > 0.0) or math.isinf(alpha):
        raise InvalidArgumentError(f"Pareto requires a finite alpha > 0, got alpha={alpha}")
    if not (beta > 0.0) or math.isinf(beta):
        raise InvalidArgumentError(f"Pareto requires a finite beta > 0, got beta={beta}")
    if not math.isfinite(gamma):
        raise InvalidArgumentError(f"Pareto requires a finite gamma, got gamma={gamma}")


def _log_survival(alpha: float, beta: float, z: float) -> float:
    return alpha * (math.log(beta) - math.log(z))


def p_pareto(alpha: float, beta: float, gamma: float, x: float, tail: bool = False) -> float:
    """
    CDF of the Pareto distribution.

    Parameters
    ----------
    alpha : float
        Shape, ``alpha > 0``.
    beta : float
        Scale, ``beta > 0``.
    gamma : float
        Location.
    x : float
        Evaluation point.
    tail : bool, default False
        If ``True`` return the survival function.

    Returns
    -------
    float
        ``P(X <= x)`` or ``P(X > x)``.
    """
    _check_parameters(alpha, beta, gamma)
    if math.isnan(x):
        raise InvalidArgumentError("Pareto CDF is undefined at x=nan")

    z = x - gamma
    if z <= beta:
        return 1.0 if tail else 0.0
    log_sf = _log_survival(alpha, beta, z)
    return math.exp(log_sf) if tail else -math.expm1(log_sf)


def d_pareto(alpha: float, beta: float, gamma: float, x: float) -> float:
    """Density of the Pareto distribution."""
    _check_parameters(alpha, beta, gamma)
    if math.isnan(x):
        raise InvalidArgumentError("Pareto PDF is undefined at x=nan")

    z = x - gamma
    if z < beta or math.isinf(z):
        return 0.0
    return alpha / z * math.exp(_log_survival(alpha, beta, z))


def q_pareto(alpha: float, beta: float, gamma: float, q: float, tail: bool = False) -> float:
    """
    Quantile function of the Pareto distribution.

    Parameters
    ----------
    alpha, beta, gamma : float
        Shape, scale and location.
    q : float
        Probability in ``[0, 1]``.
    tail : bool, default False
        If ``True`` return ``x`` such that ``P(X > x) = q``.

    Returns
    -------
    float
        The quantile; ``gamma + beta`` at the lower end and ``inf`` at the
        upper end of the support.

    Raises
    ------
    InvalidArgumentError
        If a parameter is invalid or ``q`` is outside ``[0, 1]``.
    """
    _check_parameters(alpha, beta, gamma)
    if not (0.0 <= q <= 1.0):
        raise InvalidArgumentError(f"Pareto quantile requires q in [0, 1], got q={q}")

    if tail:
        if q == 0.0:
            return math.inf
        return gamma + beta * math.exp(-math.log(q) / alpha)
    if q == 1.0:
        return math.inf
    return gamma + beta * math.exp(-math.log1p(-q) / alpha)


def r_pareto_sample(alpha: float, beta: float, gamma: float, size: int) -> np.ndarray:
    """
    Draw ``size`` Pareto variates by inversion.

    Consumes the process-wide random generator.
    """
    _check_parameters(alpha, beta, gamma)
    if size < 0:
        raise InvalidArgumentError(f"Sample size must be non-negative, got {size}")
    survival = 1.0 - np.asarray(uniform(size), dtype=np.float64)
    return gamma + beta * np.exp(-np.log(survival) / alpha)


def r_pareto(alpha: float, beta: float, gamma: float) -> float:
    """Draw one Pareto variate."""
    return float(r_pareto_sample(alpha, beta, gamma, 1)[0])


__all__ = [
    "p_pareto",
    "q_pareto",
    "d_pareto",
    "r_pareto",
    "r_pareto_sample",
]
