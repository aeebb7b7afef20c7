"""
Marshall-Olkin Copula
=====================

Bivariate copula

``C(u, v) = u^(1 - alpha) v``  if ``u^alpha >= v^beta``,
``C(u, v) = u v^(1 - beta)``   otherwise,

with ``alpha, beta`` in ``[0, 1]``. Either parameter equal to zero gives
the independent copula.

Notes
-----
- Arguments of the CDF are clipped into ``[0, 1]``.
- The copula has a singular component on the curve ``u^alpha = v^beta``;
  :meth:`MarshallOlkinCopula.compute_pdf` returns the density of the
  absolutely continuous part.
- Realizations use the exponential shock representation: with
  ``E1 ~ Exp(1/alpha - 1)``, ``E2 ~ Exp(1/beta - 1)`` and a common shock
  ``E12 ~ Exp(1)``, ``(exp(-min(E1, E12) / alpha), exp(-min(E2, E12) / beta))``
  follows the copula.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import threading
from typing import TYPE_CHECKING

import numpy as np

from pysatl_uq.distributions.sampling import ArraySample, as_point, as_sample
from pysatl_uq.errors import InvalidArgumentError
from pysatl_uq.parallel import map_rows
from pysatl_uq.persistence import Persistent
from pysatl_uq.random_generator import locked_generator
from pysatl_uq.types import BivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from typing import Any, Self

    from pysatl_uq.types import EuclideanDistributionType, FloatArray


def _check_parameter(name: str, value: float) -> float:
    value = float(value)
    if not (0.0 <= value <= 1.0):
        raise InvalidArgumentError(
            f"Marshall-Olkin copula requires {name} in [0, 1], got {name}={value}"
        )
    return value


def _correlation_matrix(value: float) -> FloatArray:
    return np.array([[1.0, value], [value, 1.0]], dtype=np.float64)


class MarshallOlkinCopula(Persistent):
    """
    Marshall-Olkin copula.

    Parameters
    ----------
    alpha : float, default 0.5
        First parameter, in ``[0, 1]``.
    beta : float, default 0.5
        Second parameter, in ``[0, 1]``.
    name : str, optional
        Instance name; defaults to the class name.

    Raises
    ------
    InvalidArgumentError
        If a parameter lies outside ``[0, 1]``.
    """

    _persistent_fields = ("alpha_", "beta_")

    dimension = 2

    def __init__(self, alpha: float = 0.5, beta: float = 0.5, name: str | None = None):
        self._alpha = _check_parameter("alpha", alpha)
        self._beta = _check_parameter("beta", beta)
        self.name = type(self).__name__ if name is None else name
        # guards the parameters together with the dependence measures derived from them
        self._lock = threading.RLock()
        self._kendall_tau: FloatArray | None = None
        self._spearman_correlation: FloatArray | None = None

    @classmethod
    def _from_fields(cls, fields: Mapping[str, Any]) -> Self:
        return cls(fields["alpha_"], fields["beta_"])

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return BivariateContinuous

    # Parameters

    def _invalidate(self) -> None:
        with self._lock:
            self._kendall_tau = None
            self._spearman_correlation = None

    @property
    def alpha(self) -> float:
        return self._alpha

    @alpha.setter
    def alpha(self, value: float) -> None:
        value = _check_parameter("alpha", value)
        with self._lock:
            self._alpha = value
            self._invalidate()

    @property
    def beta(self) -> float:
        return self._beta

    @beta.setter
    def beta(self, value: float) -> None:
        value = _check_parameter("beta", value)
        with self._lock:
            self._beta = value
            self._invalidate()

    @property
    def alpha_(self) -> float:
        return self._alpha

    @property
    def beta_(self) -> float:
        return self._beta

    def get_parameter(self) -> FloatArray:
        """Return ``[alpha, beta]``."""
        return np.array([self._alpha, self._beta], dtype=np.float64)

    def get_parameter_description(self) -> list[str]:
        return ["alpha", "beta"]

    def set_parameter(self, parameter: Sequence[float] | FloatArray) -> None:
        """
        Set ``[alpha, beta]``.

        Both values are validated before either is assigned.

        Raises
        ------
        InvalidArgumentError
            If ``parameter`` does not hold two values in ``[0, 1]``.
        """
        values = np.asarray(parameter, dtype=np.float64).ravel()
        if values.size != 2:
            raise InvalidArgumentError(
                f"Marshall-Olkin copula expects 2 parameters, got {values.size}"
            )
        alpha = _check_parameter("alpha", values[0])
        beta = _check_parameter("beta", values[1])
        with self._lock:
            self._alpha, self._beta = alpha, beta
            self._invalidate()

    def has_independent_copula(self) -> bool:
        return self._alpha == 0.0 or self._beta == 0.0

    # CDF and PDF

    def _cdf_kernel(self, block: FloatArray) -> FloatArray:
        u = np.clip(block[:, 0], 0.0, 1.0)
        v = np.clip(block[:, 1], 0.0, 1.0)
        first = u**self._alpha >= v**self._beta
        value = np.where(first, u ** (1.0 - self._alpha) * v, u * v ** (1.0 - self._beta))
        return value.reshape(-1, 1)

    def _pdf_kernel(self, block: FloatArray) -> FloatArray:
        u = block[:, 0]
        v = block[:, 1]
        inside = (u > 0.0) & (u < 1.0) & (v > 0.0) & (v < 1.0)
        uu = np.where(inside, u, 0.5)
        vv = np.where(inside, v, 0.5)
        first = uu**self._alpha > vv**self._beta
        value = np.where(
            first,
            (1.0 - self._alpha) * uu ** (-self._alpha),
            (1.0 - self._beta) * vv ** (-self._beta),
        )
        return np.where(inside, value, 0.0).reshape(-1, 1)

    def compute_cdf(self, point: Any) -> float:
        """
        CDF at a point of ``R^2``.

        Raises
        ------
        InvalidArgumentError
            If the point is not of dimension 2.
        """
        x = as_point(point, self.dimension).reshape(1, -1)
        return float(self._cdf_kernel(x)[0, 0])

    def compute_cdf_sample(self, sample: Any) -> FloatArray:
        """CDF of every row of an ``(n, 2)`` sample, dispatched to the batch workers."""
        block = as_sample(sample, self.dimension)
        return map_rows(self._cdf_kernel, block, 1)[:, 0]

    def compute_pdf(self, point: Any) -> float:
        """Density of the absolutely continuous part at a point."""
        x = as_point(point, self.dimension).reshape(1, -1)
        return float(self._pdf_kernel(x)[0, 0])

    def compute_pdf_sample(self, sample: Any) -> FloatArray:
        block = as_sample(sample, self.dimension)
        return map_rows(self._pdf_kernel, block, 1)[:, 0]

    # Sampling

    def get_sample(self, size: int) -> ArraySample:
        """
        Draw ``size`` realizations.

        All variates are drawn from the shared generator in one locked call.

        Returns
        -------
        ArraySample
            Sample of shape ``(size, 2)``.
        """
        if size < 0:
            raise InvalidArgumentError(f"Sample size must be non-negative, got {size}")

        if self.has_independent_copula():
            with locked_generator() as rng:
                return ArraySample(rng.random((size, 2)))

        with locked_generator() as rng:
            shocks = rng.standard_exponential((size, 3))

        rate1 = 1.0 / self._alpha - 1.0
        rate2 = 1.0 / self._beta - 1.0
        e1 = shocks[:, 0] / rate1 if rate1 > 0.0 else np.full(size, math.inf)
        e2 = shocks[:, 1] / rate2 if rate2 > 0.0 else np.full(size, math.inf)
        e12 = shocks[:, 2]
        u = np.exp(-np.minimum(e1, e12) / self._alpha)
        v = np.exp(-np.minimum(e2, e12) / self._beta)
        return ArraySample(np.column_stack((u, v)))

    def get_realization(self) -> FloatArray:
        """Draw one realization."""
        return self.get_sample(1).array[0]

    # Dependence measures

    @property
    def kendall_tau(self) -> FloatArray:
        """Kendall's tau as a 2x2 matrix, ``alpha beta / (alpha + beta - alpha beta)``."""
        with self._lock:
            if self._kendall_tau is None:
                a, b = self._alpha, self._beta
                tau = 0.0 if self.has_independent_copula() else a * b / (a + b - a * b)
                self._kendall_tau = _correlation_matrix(tau)
            return self._kendall_tau.copy()

    @property
    def spearman_correlation(self) -> FloatArray:
        """Spearman's rho as a 2x2 matrix, ``3 alpha beta / (2 alpha + 2 beta - alpha beta)``."""
        with self._lock:
            if self._spearman_correlation is None:
                a, b = self._alpha, self._beta
                if self.has_independent_copula():
                    rho = 0.0
                else:
                    rho = 3.0 * a * b / (2.0 * a + 2.0 * b - a * b)
                self._spearman_correlation = _correlation_matrix(rho)
            return self._spearman_correlation.copy()

    # String forms

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MarshallOlkinCopula):
            return NotImplemented
        return self._alpha == other._alpha and self._beta == other._beta

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"MarshallOlkinCopula(alpha={self._alpha}, beta={self._beta})"

    def __repr__(self) -> str:
        return (
            f"class={type(self).__name__} name={self.name} dimension={self.dimension} "
            f"alpha={self._alpha} beta={self._beta}"
        )
