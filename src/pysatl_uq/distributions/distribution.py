"""
Distribution Interface
======================

The :class:`Distribution` protocol is what strategies, samplers and the
copula layer rely on. Concrete distributions provide the analytical
characteristics and strategies; everything else (conversions, sampling,
point evaluation) is derived here.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_uq.distributions.computation import AnalyticalComputation
    from pysatl_uq.distributions.sampling import Sample
    from pysatl_uq.distributions.strategies import ComputationStrategy, Method, SamplingStrategy
    from pysatl_uq.distributions.support import Support
    from pysatl_uq.types import DistributionType, GenericCharacteristicName


@runtime_checkable
class Distribution(Protocol):
    """
    Probability distribution on ``R^d``.

    Implementations supply the members below; :meth:`query_method`,
    :meth:`calculate_characteristic`, :meth:`sample` and :attr:`dimension`
    come for free.
    """

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Characteristics known in closed form, by name."""
        ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]: ...

    @property
    def support(self) -> Support | None: ...

    @property
    def dimension(self) -> int:
        """Dimension of the realizations."""
        return int(self.distribution_type.features["dimension"])

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> Method[Any, Any]:
        """
        Resolve a characteristic through the computation strategy.

        Raises
        ------
        RuntimeError
            If the characteristic can be neither found nor derived.
        """
        return self.computation_strategy.query_method(characteristic_name, self, **options)

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        """Evaluate a characteristic at ``value`` (scalar or array)."""
        return self.query_method(characteristic_name, **options)(value)

    def sample(self, n: int, **options: Any) -> Sample:
        """Draw ``n`` realizations as an ``(n, d)`` sample."""
        return self.sampling_strategy.sample(n, distr=self, **options)
