"""
Student's t Distribution Functions
==================================

Scalar evaluators of the standard Student distribution with ``nu > 0``
(possibly non-integer) degrees of freedom:

- :func:`p_student` — CDF, or survival function with ``tail=True``;
- :func:`q_student` — quantile function;
- :func:`d_student` — density;
- :func:`r_student`, :func:`r_student_sample` — random variates.

Notes
-----
Every CDF evaluation is reduced to the upper tail ``P(T > t)`` at
``t = |x| >= 0``; the other side is its complement, so
``p_student(nu, x) + p_student(nu, x, tail=True) == 1`` up to rounding.
The upper tail is evaluated in one of three regimes:

1. small integer ``nu`` (1..7): closed-form recursive trigonometric
   formulas in ``theta = atan(t / sqrt(nu))``;
2. moderate ``nu``: ``P(T > t) = 0.5 * I_y(nu / 2, 1 / 2)`` with
   ``y = nu / (nu + t^2)``;
3. large ``nu`` near the centre: Gaussian approximation with the two
   leading correction terms of Fisher's expansion. The window
   ``t^4 <= 1e-5 nu`` keeps the first omitted term below ``1e-15``.

In the far tail ``y`` underflows long before ``P(T > t)`` does, so the
incomplete beta is fed ``log y`` directly. Quantiles are solved against
``log P(T > t)`` and are infinite only when they exceed the double range.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import sys

import numpy as np
from scipy import optimize as _sp_optimize

from pysatl_uq.errors import ConvergenceError, InvalidArgumentError
from pysatl_uq.logging import logger
from pysatl_uq.random_generator import locked_generator
from pysatl_uq.special.incomplete_beta import (
    incomplete_beta_pair,
    log_beta,
    log_incomplete_beta_pair,
)
from pysatl_uq.special.normal import normal_cdf, normal_pdf, normal_quantile

STUDENT_MAX_CLOSED_FORM_NU = 7
"""Largest integer ``nu`` handled by the trigonometric closed forms."""

STUDENT_CLOSED_FORM_RATIO = 1.0
"""For ``nu`` in 3..7 the closed forms are used while ``t^2 <= ratio * nu``."""

STUDENT_NU_ASYMPTOTIC = 1.0e5
"""``nu`` from which the Gaussian expansion replaces the incomplete beta."""

STUDENT_ASYMPTOTIC_RATIO = 1.0e-5
"""The Gaussian expansion is used while ``t^4 <= ratio * nu``."""

_QUANTILE_RTOL = 4.0 * sys.float_info.epsilon
_QUANTILE_MAX_ITER = 500


def _check_nu(nu: float) -> None:
    if not (nu > 0.0) or math.isinf(nu):
        raise InvalidArgumentError(f"Student requires a finite nu > 0, got nu={nu}")


def _is_small_integer(nu: float) -> bool:
    return nu <= STUDENT_MAX_CLOSED_FORM_NU and nu == math.floor(nu)


def _closed_form_central(nu: int, t: float) -> float:
    """
    ``A(t) = P(|T| <= t)`` for integer ``nu >= 2`` and ``t >= 0``.

    Even ``nu``: ``A = sin(theta) * sum_k c_k cos^{2k}(theta)`` with
    ``c_0 = 1, c_k = c_{k-1} (2k - 1) / (2k)``.
    Odd ``nu``: ``A = 2 / pi * (theta + sin(theta) cos(theta) * sum_k d_k cos^{2k}(theta))``
    with ``d_0 = 1, d_k = d_{k-1} (2k) / (2k + 1)``.
    """
    denominator = nu + t * t
    cos2 = nu / denominator
    sin = t / math.sqrt(denominator)

    term = 1.0
    total = 1.0
    if nu % 2 == 0:
        for k in range(1, (nu - 2) // 2 + 1):
            term *= cos2 * (2 * k - 1) / (2 * k)
            total += term
        return sin * total

    for k in range(1, (nu - 3) // 2 + 1):
        term *= cos2 * (2 * k) / (2 * k + 1)
        total += term
    theta = math.atan(t / math.sqrt(nu))
    return 2.0 / math.pi * (theta + sin * math.sqrt(cos2) * total)


def _beta_arguments(nu: float, t: float) -> tuple[float, float, float, float]:
    """
    ``y = nu / (nu + t^2)``, ``1 - y`` and their logarithms for ``t > 0``.

    The logarithms stay exact when ``y`` underflows.
    """
    if t <= math.sqrt(nu):
        s2 = t * t / nu
        log1p_s2 = math.log1p(s2)
        return 1.0 / (1.0 + s2), s2 / (1.0 + s2), -log1p_s2, math.log(s2) - log1p_s2

    r = math.sqrt(nu) / t
    r2 = r * r
    if r2 < sys.float_info.min:
        log_r2 = math.log(nu) - 2.0 * math.log(t)
    else:
        log_r2 = math.log(r2)
    log1p_r2 = math.log1p(r2)
    return r2 / (1.0 + r2), 1.0 / (1.0 + r2), log_r2 - log1p_r2, -log1p_r2


def _beta_upper_tail(nu: float, t: float) -> float:
    """``P(T > t) = 0.5 * I_y(nu / 2, 1 / 2)``, ``y = nu / (nu + t^2)``."""
    if t * t / nu == 0.0:
        return 0.5
    y, yc, log_y, log_yc = _beta_arguments(nu, t)
    return 0.5 * incomplete_beta_pair(0.5 * nu, 0.5, y, yc, log_x=log_y, log_xc=log_yc)


def _asymptotic_upper_tail(nu: float, t: float) -> float:
    """
    Fisher's expansion of ``P(T > t)`` for large ``nu``.

    ``F(t) = Phi(t) - phi(t) * (P1(t) / nu + P2(t) / nu^2)`` with
    ``P1 = (t^3 + t) / 4`` and ``P2 = (3t^7 - 7t^5 - 5t^3 - 3t) / 96``.
    """
    t2 = t * t
    p1 = t * (t2 + 1.0) / 4.0
    p2 = t * (((3.0 * t2 - 7.0) * t2 - 5.0) * t2 - 3.0) / 96.0
    return normal_cdf(t, tail=True) + normal_pdf(t) * (p1 + p2 / nu) / nu


def _upper_tail(nu: float, t: float) -> float:
    """``P(T > t)`` for ``t >= 0``."""
    if t == 0.0:
        return 0.5
    if math.isinf(t):
        return 0.0

    t2 = t * t
    if nu >= STUDENT_NU_ASYMPTOTIC and t2 * t2 <= STUDENT_ASYMPTOTIC_RATIO * nu:
        return _asymptotic_upper_tail(nu, t)

    if _is_small_integer(nu):
        if nu == 1.0:
            return math.atan2(1.0, t) / math.pi
        if nu == 2.0:
            if t <= 1.0:
                s = math.sqrt(2.0 + t2)
                return 1.0 / (s * (s + t))
            # scaled by t so that t^2 may overflow
            w = math.sqrt(1.0 + 2.0 / t / t)
            return 1.0 / t / t / (w * (w + 1.0))
        if t2 <= STUDENT_CLOSED_FORM_RATIO * nu:
            return 0.5 - 0.5 * _closed_form_central(int(nu), t)

    return _beta_upper_tail(nu, t)


def _log_upper_tail(nu: float, t: float) -> float:
    """``log P(T > t)`` for ``t >= 0``, finite wherever ``t`` is."""
    if math.isinf(t):
        return -math.inf
    if nu <= 2.0 and _is_small_integer(nu):
        return math.log(_upper_tail(nu, t))
    if t > math.sqrt(3.0 * nu):
        # y < 1 / 4: the continued fraction runs directly and stays in log space
        y, yc, log_y, log_yc = _beta_arguments(nu, t)
        return math.log(0.5) + log_incomplete_beta_pair(
            0.5 * nu, 0.5, y, yc, log_x=log_y, log_xc=log_yc
        )
    return math.log(_upper_tail(nu, t))


def p_student(nu: float, x: float, tail: bool = False) -> float:
    """
    CDF of Student's t distribution.

    Parameters
    ----------
    nu : float
        Degrees of freedom, ``nu > 0``.
    x : float
        Evaluation point.
    tail : bool, default False
        If ``True`` return the survival function ``P(T > x)``.

    Returns
    -------
    float
        ``P(T <= x)`` or ``P(T > x)``.

    Raises
    ------
    InvalidArgumentError
        If ``nu`` is not a positive finite number or ``x`` is NaN.
    """
    _check_nu(nu)
    if math.isnan(x):
        raise InvalidArgumentError("Student CDF is undefined at x=nan")

    upper = _upper_tail(nu, abs(x))
    if x >= 0.0:
        return upper if tail else 1.0 - upper
    return 1.0 - upper if tail else upper


def d_student(nu: float, x: float) -> float:
    """Density of Student's t distribution."""
    _check_nu(nu)
    if math.isnan(x):
        raise InvalidArgumentError("Student PDF is undefined at x=nan")
    if math.isinf(x):
        return 0.0
    log_density = (
        -0.5 * (nu + 1.0) * math.log1p(x * x / nu)
        - 0.5 * math.log(nu)
        - log_beta(0.5 * nu, 0.5)
    )
    return math.exp(log_density)


def _cornish_fisher(nu: float, z: float) -> float:
    """Cornish-Fisher expansion of the Student quantile around the normal quantile ``z``."""
    z2 = z * z
    g1 = z * (z2 + 1.0) / 4.0
    g2 = z * ((5.0 * z2 + 16.0) * z2 + 3.0) / 96.0
    g3 = z * (((3.0 * z2 + 19.0) * z2 + 17.0) * z2 - 15.0) / 384.0
    g4 = z * ((((79.0 * z2 + 776.0) * z2 + 1482.0) * z2 - 1920.0) * z2 - 945.0) / 92160.0
    return z + (g1 + (g2 + (g3 + g4 / nu) / nu) / nu) / nu


def _quantile_seed(nu: float, p: float) -> float:
    """Starting point for the upper quantile ``t`` with ``P(T > t) = p``."""
    z = normal_quantile(p, tail=True)
    if nu >= 4.0 and z * z <= nu:
        return _cornish_fisher(nu, z)

    # power-law tail: P(T > t) ~ (nu / t^2)^(nu / 2) / (nu * B(nu / 2, 1 / 2))
    log_t = 0.5 * math.log(nu) - (math.log(p) + math.log(nu) + log_beta(0.5 * nu, 0.5)) / nu
    if log_t > math.log(sys.float_info.max):
        return math.inf
    return max(math.exp(log_t), z)


def _upper_quantile(nu: float, p: float) -> float:
    """``t >= 0`` such that ``P(T > t) = p`` for ``p`` in ``(0, 0.5)``."""
    if nu <= 2.0 and _is_small_integer(nu):
        if nu == 1.0:
            closed = 1.0 / math.tan(math.pi * p)
        else:
            closed = (1.0 - 2.0 * p) / math.sqrt(2.0 * p * (1.0 - p))
        if math.isinf(closed):
            logger.warning(f"Student quantile overflows for nu={nu}, p={p}")
        return closed

    log_p = math.log(p)

    def _objective(t: float) -> float:
        # decreasing in t; compared in log space so that tiny tails keep their digits
        return _log_upper_tail(nu, t) - log_p

    largest = sys.float_info.max
    if _objective(largest) > 0.0:
        logger.warning(f"Student quantile overflows for nu={nu}, p={p}")
        return math.inf

    # bracket [upper / 2, upper] around the root, starting from the seed
    seed = _quantile_seed(nu, p)
    upper = largest if math.isinf(seed) else min(max(1.5 * seed, 1.0), largest)
    while _objective(upper) > 0.0:
        upper = min(2.0 * upper, largest)
    lower = 0.5 * upper
    while _objective(lower) <= 0.0:
        upper = lower
        lower *= 0.5
        if lower < sys.float_info.min:
            lower = 0.0
            break

    try:
        root = _sp_optimize.brentq(
            _objective,
            lower,
            upper,
            xtol=sys.float_info.min,
            rtol=_QUANTILE_RTOL,
            maxiter=_QUANTILE_MAX_ITER,
        )
    except RuntimeError as exc:
        raise ConvergenceError(
            f"Student quantile did not converge for nu={nu}, p={p}"
        ) from exc
    return float(root)


def q_student(nu: float, q: float, tail: bool = False) -> float:
    """
    Quantile function of Student's t distribution.

    Parameters
    ----------
    nu : float
        Degrees of freedom, ``nu > 0``.
    q : float
        Probability in the open interval ``(0, 1)``.
    tail : bool, default False
        If ``True`` return ``x`` such that ``P(T > x) = q``.

    Returns
    -------
    float
        The quantile. It may be infinite when it exceeds the double range.

    Raises
    ------
    InvalidArgumentError
        If ``nu`` is invalid or ``q`` is not in ``(0, 1)``.
    ConvergenceError
        If the root finder fails to converge.
    """
    _check_nu(nu)
    if not (0.0 < q < 1.0):
        raise InvalidArgumentError(f"Student quantile requires q in (0, 1), got q={q}")

    if tail:
        return -q_student(nu, q)
    if q == 0.5:
        return 0.0
    if q < 0.5:
        return -_upper_quantile(nu, q)
    return _upper_quantile(nu, 1.0 - q)


def r_student(nu: float) -> float:
    """
    Draw one Student variate as ``Z / sqrt(chi2_nu / nu)``.

    Consumes the process-wide random generator.
    """
    return float(r_student_sample(nu, 1)[0])


def r_student_sample(nu: float, size: int) -> np.ndarray:
    """
    Draw ``size`` Student variates.

    Parameters
    ----------
    nu : float
        Degrees of freedom, ``nu > 0``.
    size : int
        Number of variates.

    Returns
    -------
    numpy.ndarray
        1D array of length ``size``.
    """
    _check_nu(nu)
    if size < 0:
        raise InvalidArgumentError(f"Sample size must be non-negative, got {size}")
    with locked_generator() as rng:
        normal = rng.standard_normal(size)
        # chi2_nu / nu == Gamma(nu / 2, 1) / (nu / 2)
        gamma = rng.standard_gamma(0.5 * nu, size)
    with np.errstate(divide="ignore"):
        return normal / np.sqrt(gamma / (0.5 * nu))


__all__ = [
    "p_student",
    "q_student",
    "d_student",
    "r_student",
    "r_student_sample",
]
