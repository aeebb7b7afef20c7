"""
Parametric family definitions.

A :class:`ParametricFamily` bundles the parametrizations of a family, the
analytical characteristics it provides, and the strategies its members use
for derived characteristics and sampling.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from pysatl_uq.distributions.computation import AnalyticalComputation
from pysatl_uq.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from pysatl_uq.families.distribution import ParametricFamilyDistribution
from pysatl_uq.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_uq.distributions.strategies import ComputationStrategy, SamplingStrategy
    from pysatl_uq.distributions.support import Support
    from pysatl_uq.families.parametrizations import Parametrization
    from pysatl_uq.types import GenericCharacteristicName, ParametrizationName

    type ParametrizedFunction = Callable[[Parametrization, Any], Any]
    type SupportResolver = Callable[[Parametrization], Support | None]


class ParametricFamily:
    """
    A family of distributions with one or more parametrizations.

    Parameters
    ----------
    name : str
        Family name, used as the registry key.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Type of the members, or a function of the base parameters.
    distr_parametrizations : list[str]
        Parametrization names; the first one is the base parametrization.
    distr_characteristics : dict
        Characteristic name to a function ``f(parameters, x)``, or to a
        mapping from parametrization name to such functions. Plain functions
        expect base parameters.
    sampling_strategy : SamplingStrategy, optional
        Defaults to inverse transform sampling.
    computation_strategy : ComputationStrategy, optional
        Defaults to :class:`DefaultComputationStrategy`.
    support_by_parametrization : Callable, optional
        Support of a member as a function of its base parameters.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy[Any, Any] | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family '{name}' needs at least one parametrization.")

        self._name = name
        if isinstance(distr_type, DistributionType):
            fixed_type = distr_type
            self._distr_type: Callable[[Parametrization], DistributionType] = (
                lambda _params: fixed_type
            )
        else:
            self._distr_type = distr_type

        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        self.sampling_strategy: SamplingStrategy = (
            DefaultSamplingUnivariateStrategy() if sampling_strategy is None else sampling_strategy
        )
        self.computation_strategy: ComputationStrategy[Any, Any] = (
            DefaultComputationStrategy() if computation_strategy is None else computation_strategy
        )
        self._support_resolver = support_by_parametrization

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {
            key: value if isinstance(value, dict) else {self.base_parametrization_name: value}
            for key, value in distr_characteristics.items()
        }

    @property
    def name(self) -> str:
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Registered parametrization classes by name."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Base parametrization class.

        Raises
        ------
        ValueError
            If the base parametrization is not registered yet.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If the name is not declared by the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family '{self.name}'.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If the name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Express ``parameters`` in the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def support(self, parameters: Parametrization) -> Support | None:
        if self._support_resolver is None:
            return None
        return self._support_resolver(self.to_base(parameters))

    def build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Bind the analytical characteristics to ``parameters``.

        A characteristic given for the parametrization of ``parameters`` is
        used directly; otherwise its base form is bound to the base parameters.
        """
        result: dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]] = {}
        base_parameters: Parametrization | None = None

        for characteristic, forms in self.distr_characteristics.items():
            if parameters.name in forms:
                bound = partial(forms[parameters.name], parameters)
            elif self.base_parametrization_name in forms:
                if base_parameters is None:
                    base_parameters = self.to_base(parameters)
                bound = partial(forms[self.base_parametrization_name], base_parameters)
            else:
                continue
            result[characteristic] = AnalyticalComputation(target=characteristic, func=bound)

        return result

    def distribution(
        self,
        parametrization_name: ParametrizationName | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a member of the family.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization of ``parameters_values``; the base one by default.
        **parameters_values
            Parameter values.

        Returns
        -------
        ParametricFamilyDistribution

        Raises
        ------
        KeyError
            If the parametrization is unknown.
        InvalidArgumentError
            If the parameters violate a constraint.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self.get_parametrization(parametrization_name)

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        base_parameters.validate()
        return ParametricFamilyDistribution(
            family_name=self.name,
            parameters=parameters,
            resolved_type=self._distr_type(base_parameters),
            resolved_support=self.support(parameters),
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: ParametrizationName
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Class decorator registering a parametrization of this family."""
        from pysatl_uq.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution

    def __str__(self) -> str:
        return f"ParametricFamily({self.name}, parametrizations={self.parametrization_names})"
