"""
Student's t distribution family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, Any, cast

from pysatl_uq.dist_func.student import d_student, p_student, q_student, r_student_sample
from pysatl_uq.distributions.strategies import DirectSamplingUnivariateStrategy
from pysatl_uq.distributions.support import ContinuousSupport
from pysatl_uq.families.parametric_family import ParametricFamily
from pysatl_uq.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_uq.families.registry import ParametricFamilyRegister
from pysatl_uq.parallel import map_scalar
from pysatl_uq.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    import numpy as np

    from pysatl_uq.distributions.distribution import Distribution
    from pysatl_uq.types import FloatArray, Number, NumericArray


def _student_quantile(nu: float, p: float, tail: bool) -> float:
    # probabilities 0 and 1 map to the ends of the real line
    if p == 0.0:
        return math.inf if tail else -math.inf
    if p == 1.0:
        return -math.inf if tail else math.inf
    return q_student(nu, p, tail)


def configure_student_family() -> None:
    """
    Configure and register the Student family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT):
        return

    STUDENT_DOC = """
    Student's t distribution with location and scale.

    ``X = mu + sigma * T`` where ``T`` has ``nu`` degrees of freedom:

        f(x) = Γ((ν+1)/2) / (σ √(νπ) Γ(ν/2)) * (1 + ((x-μ)/σ)²/ν)^(-(ν+1)/2)

    The tails decay as ``|x|^(-ν)``; moments of order ``ν`` and above are
    infinite or undefined.
    """

    def pdf(parameters: Parametrization, x: Number | NumericArray) -> float | FloatArray:
        """Probability density of ``mu + sigma * T``."""
        parameters = cast(_Standard, parameters)
        nu, mu, sigma = parameters.nu, parameters.mu, parameters.sigma
        return map_scalar(lambda v: d_student(nu, (v - mu) / sigma) / sigma, x)

    def cdf(parameters: Parametrization, x: Number | NumericArray) -> float | FloatArray:
        parameters = cast(_Standard, parameters)
        nu, mu, sigma = parameters.nu, parameters.mu, parameters.sigma
        return map_scalar(lambda v: p_student(nu, (v - mu) / sigma), x)

    def sf(parameters: Parametrization, x: Number | NumericArray) -> float | FloatArray:
        parameters = cast(_Standard, parameters)
        nu, mu, sigma = parameters.nu, parameters.mu, parameters.sigma
        return map_scalar(lambda v: p_student(nu, (v - mu) / sigma, tail=True), x)

    def ppf(parameters: Parametrization, p: Number | NumericArray) -> float | FloatArray:
        """
        Quantile function.

        Probabilities 0 and 1 give ``-inf`` and ``inf``; probabilities outside
        ``[0, 1]`` raise :class:`~pysatl_uq.errors.InvalidArgumentError`.
        """
        parameters = cast(_Standard, parameters)
        nu, mu, sigma = parameters.nu, parameters.mu, parameters.sigma
        return map_scalar(lambda q: mu + sigma * _student_quantile(nu, q, False), p)

    def isf(parameters: Parametrization, p: Number | NumericArray) -> float | FloatArray:
        parameters = cast(_Standard, parameters)
        nu, mu, sigma = parameters.nu, parameters.mu, parameters.sigma
        return map_scalar(lambda q: mu + sigma * _student_quantile(nu, q, True), p)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean; undefined (NaN) for ``nu <= 1``."""
        parameters = cast(_Standard, parameters)
        return parameters.mu if parameters.nu > 1.0 else math.nan

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance; infinite for ``1 < nu <= 2`` and undefined for ``nu <= 1``."""
        parameters = cast(_Standard, parameters)
        nu, sigma = parameters.nu, parameters.sigma
        if nu > 2.0:
            return sigma**2 * nu / (nu - 2.0)
        return math.inf if nu > 1.0 else math.nan

    def draw(distr: Distribution, n: int) -> np.ndarray:
        parameters = cast(_Standard, cast(Any, distr).base_parameters)
        return parameters.mu + parameters.sigma * r_student_sample(parameters.nu, n)

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    Student = ParametricFamily(
        name=FamilyName.STUDENT,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        sampling_strategy=DirectSamplingUnivariateStrategy(draw),
        support_by_parametrization=_support,
    )
    Student.__doc__ = STUDENT_DOC

    @parametrization(family=Student, name="standard")
    class _Standard(Parametrization):
        """
        Degrees of freedom, location and scale.

        Parameters
        ----------
        nu : float
            Degrees of freedom
        mu : float
            Location, 0 by default
        sigma : float
            Scale, 1 by default
        """

        nu: float
        mu: float = 0.0
        sigma: float = 1.0

        @constraint(description="0 < nu < inf")
        def check_nu_positive(self) -> bool:
            return 0.0 < self.nu < math.inf

        @constraint(description="mu is finite")
        def check_mu_finite(self) -> bool:
            return math.isfinite(self.mu)

        @constraint(description="0 < sigma < inf")
        def check_sigma_positive(self) -> bool:
            return 0.0 < self.sigma < math.inf

    ParametricFamilyRegister.register(Student)
