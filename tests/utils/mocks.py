from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pysatl_uq.distributions import (
    AnalyticalComputation,
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    Distribution,
    SamplingStrategy,
    Support,
)
from pysatl_uq.types import EuclideanDistributionType, GenericCharacteristicName, Kind


@dataclass(slots=True)
class StandaloneEuclideanUnivariateDistribution(Distribution):
    """
    Minimal standalone univariate distribution.

    Notes
    -----
    - Dimension is fixed to 1.
    - One computation strategy instance is kept per distribution, so
      conversions resolve through a single cycle guard.
    """

    _distribution_type: EuclideanDistributionType
    _analytical: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
    _sampling_strategy: SamplingStrategy
    _computation_strategy: ComputationStrategy[Any, Any]
    _support: Support | None

    def __init__(
        self,
        kind: Kind = Kind.CONTINUOUS,
        analytical_computations: (
            Iterable[AnalyticalComputation[Any, Any]]
            | Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]
        ) = (),
        support: Support | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
    ) -> None:
        self._distribution_type = EuclideanDistributionType(kind, 1)
        if isinstance(analytical_computations, Mapping):
            self._analytical = dict(analytical_computations)
        else:
            self._analytical = {ac.target: ac for ac in analytical_computations}
        self._sampling_strategy = DefaultSamplingUnivariateStrategy()
        self._computation_strategy = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )
        self._support = support

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        return self._distribution_type

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self._sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self._computation_strategy

    @property
    def support(self) -> Support | None:
        return self._support
