"""
Composed Distribution
=====================

Joint distribution built from univariate marginals and a copula:

``F(x_1, x_2) = C(F_1(x_1), F_2(x_2))``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_uq.distributions.sampling import ArraySample, as_point, as_sample
from pysatl_uq.errors import InvalidArgumentError
from pysatl_uq.types import CharacteristicName, EuclideanDistributionType, Kind

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import Any

    from pysatl_uq.copulas.marshall_olkin import MarshallOlkinCopula
    from pysatl_uq.distributions.distribution import Distribution
    from pysatl_uq.types import FloatArray


class ComposedDistribution:
    """
    Distribution with given marginals and copula.

    The marginals are shared, not copied.

    Parameters
    ----------
    marginals : Sequence[Distribution]
        Univariate distributions, one per component.
    copula : MarshallOlkinCopula
        Dependence structure.

    Raises
    ------
    InvalidArgumentError
        If the number of marginals differs from the copula dimension or a
        marginal is not univariate.
    """

    def __init__(self, marginals: Sequence[Distribution], copula: MarshallOlkinCopula):
        if len(marginals) != copula.dimension:
            raise InvalidArgumentError(
                f"Expected {copula.dimension} marginals for the copula, got {len(marginals)}"
            )
        for marginal in marginals:
            if marginal.dimension != 1:
                raise InvalidArgumentError("Every marginal must be univariate")
        self._marginals = list(marginals)
        self._copula = copula

    @property
    def marginals(self) -> list[Distribution]:
        return list(self._marginals)

    @property
    def copula(self) -> MarshallOlkinCopula:
        return self._copula

    @property
    def dimension(self) -> int:
        return len(self._marginals)

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=self.dimension)

    def _uniforms(self, block: FloatArray) -> FloatArray:
        columns = [
            np.asarray(marginal.query_method(CharacteristicName.CDF)(block[:, j]), dtype=float)
            for j, marginal in enumerate(self._marginals)
        ]
        return np.column_stack(columns)

    def compute_cdf(self, point: Any) -> float:
        x = as_point(point, self.dimension).reshape(1, -1)
        return self._copula.compute_cdf(self._uniforms(x)[0])

    def compute_cdf_sample(self, sample: Any) -> FloatArray:
        block = as_sample(sample, self.dimension)
        return self._copula.compute_cdf_sample(self._uniforms(block))

    def sample(self, n: int) -> ArraySample:
        """
        Draw ``n`` realizations.

        Copula realizations are mapped through the marginal quantile functions.
        """
        uniforms = self._copula.get_sample(n).array
        columns = [
            np.asarray(marginal.query_method(CharacteristicName.PPF)(uniforms[:, j]), dtype=float)
            for j, marginal in enumerate(self._marginals)
        ]
        return ArraySample(np.column_stack(columns).reshape(n, self.dimension))

    def __str__(self) -> str:
        marginals = ", ".join(str(marginal) for marginal in self._marginals)
        return f"ComposedDistribution(marginals=[{marginals}], copula={self._copula})"
