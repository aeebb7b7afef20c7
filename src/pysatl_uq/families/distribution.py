"""
Members of parametric families.

A member keeps the parameters it was created with and looks its family up
in the registry on demand.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pysatl_uq.distributions.distribution import Distribution
from pysatl_uq.families.registry import ParametricFamilyRegister

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_uq.distributions.computation import AnalyticalComputation
    from pysatl_uq.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_uq.distributions.support import Support
    from pysatl_uq.families.parametric_family import ParametricFamily
    from pysatl_uq.families.parametrizations import Parametrization
    from pysatl_uq.types import DistributionType, GenericCharacteristicName

    type AnalyticalTable = dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A member of a parametric family.

    ``resolved_type`` and ``resolved_support`` are computed by the family when
    the member is created; analytical characteristics are bound lazily.
    """

    family_name: str
    parameters: Parametrization
    resolved_type: DistributionType
    resolved_support: Support | None = None
    _analytical: AnalyticalTable | None = field(default=None, repr=False, compare=False)

    @property
    def family(self) -> ParametricFamily:
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def base_parameters(self) -> Parametrization:
        """Parameters expressed in the base parametrization of the family."""
        return self.family.to_base(self.parameters)

    @property
    def distribution_type(self) -> DistributionType:
        return self.resolved_type

    @property
    def support(self) -> Support | None:
        return self.resolved_support

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        if self._analytical is None:
            self._analytical = self.family.build_analytical_computations(self.parameters)
        return self._analytical

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy[Any, Any]:
        return self.family.computation_strategy

    def __str__(self) -> str:
        return f"{self.family_name}({self.parameters})"
