"""
Pareto distribution family implementation.

Contains the Pareto family with the shape-scale parametrization and the
Lomax (Pareto type II) alternative.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from pysatl_uq.dist_func.pareto import d_pareto, p_pareto, q_pareto
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
    from typing import Any

    from pysatl_uq.types import FloatArray, Number, NumericArray


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    PARETO_DOC = """
    Pareto distribution.

    Heavy-tailed distribution on ``[γ + β, ∞)`` with shape α, scale β and
    location γ:

        P(X > x) = (β / (x - γ))^α,   x ≥ γ + β

    Moments of order α and above are infinite.
    """

    def pdf(parameters: Parametrization, x: Number | NumericArray) -> float | FloatArray:
        parameters = cast(_ShapeScale, parameters)
        alpha, beta, gamma = parameters.alpha, parameters.beta, parameters.gamma
        return map_scalar(lambda v: d_pareto(alpha, beta, gamma, v), x)

    def cdf(parameters: Parametrization, x: Number | NumericArray) -> float | FloatArray:
        """
        Cumulative distribution function for Pareto distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (shape)
            - beta: float (scale)
            - gamma: float (location)
        x : Number or NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        float or FloatArray
            Probabilities P(X ≤ x) for each point x
        """
        parameters = cast(_ShapeScale, parameters)
        alpha, beta, gamma = parameters.alpha, parameters.beta, parameters.gamma
        return map_scalar(lambda v: p_pareto(alpha, beta, gamma, v), x)

    def sf(parameters: Parametrization, x: Number | NumericArray) -> float | FloatArray:
        parameters = cast(_ShapeScale, parameters)
        alpha, beta, gamma = parameters.alpha, parameters.beta, parameters.gamma
        return map_scalar(lambda v: p_pareto(alpha, beta, gamma, v, tail=True), x)

    def ppf(parameters: Parametrization, p: Number | NumericArray) -> float | FloatArray:
        """
        Quantile function for Pareto distribution.

        Returns ``gamma + beta`` at 0 and ``inf`` at 1.
        """
        parameters = cast(_ShapeScale, parameters)
        alpha, beta, gamma = parameters.alpha, parameters.beta, parameters.gamma
        return map_scalar(lambda q: q_pareto(alpha, beta, gamma, q), p)

    def isf(parameters: Parametrization, p: Number | NumericArray) -> float | FloatArray:
        parameters = cast(_ShapeScale, parameters)
        alpha, beta, gamma = parameters.alpha, parameters.beta, parameters.gamma
        return map_scalar(lambda q: q_pareto(alpha, beta, gamma, q, tail=True), p)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Pareto distribution (infinite for alpha <= 1)."""
        parameters = cast(_ShapeScale, parameters)
        alpha = parameters.alpha
        if alpha <= 1.0:
            return math.inf
        return parameters.gamma + alpha * parameters.beta / (alpha - 1.0)

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Pareto distribution (infinite for alpha <= 2)."""
        parameters = cast(_ShapeScale, parameters)
        alpha = parameters.alpha
        if alpha <= 2.0:
            return math.inf
        return parameters.beta**2 * alpha / ((alpha - 1.0) ** 2 * (alpha - 2.0))

    def _support(parameters: Parametrization) -> ContinuousSupport:
        """Support of Pareto distribution"""
        parameters = cast(_ShapeScale, parameters)
        return ContinuousSupport(left=parameters.gamma + parameters.beta)

    Pareto = ParametricFamily(
        name=FamilyName.PARETO,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale", "lomax"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.SF: sf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.ISF: isf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        support_by_parametrization=_support,
    )
    Pareto.__doc__ = PARETO_DOC

    @parametrization(family=Pareto, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape, scale and location parametrization of Pareto distribution.

        Parameters
        ----------
        alpha : float
            Shape (tail index)
        beta : float
            Scale
        gamma : float
            Location, 0 by default
        """

        alpha: float
        beta: float
        gamma: float = 0.0

        @constraint(description="0 < alpha < inf")
        def check_alpha_positive(self) -> bool:
            """Check that the shape is positive."""
            return 0.0 < self.alpha < math.inf

        @constraint(description="0 < beta < inf")
        def check_beta_positive(self) -> bool:
            """Check that the scale is positive."""
            return 0.0 < self.beta < math.inf

        @constraint(description="gamma is finite")
        def check_gamma_finite(self) -> bool:
            return math.isfinite(self.gamma)

    @parametrization(family=Pareto, name="lomax")
    class _Lomax(Parametrization):
        """
        Lomax (Pareto type II) parametrization, supported on ``[0, inf)``.

        Parameters
        ----------
        alpha : float
            Shape
        lam : float
            Scale
        """

        alpha: float
        lam: float

        @constraint(description="0 < alpha < inf")
        def check_alpha_positive(self) -> bool:
            return 0.0 < self.alpha < math.inf

        @constraint(description="0 < lam < inf")
        def check_lam_positive(self) -> bool:
            return 0.0 < self.lam < math.inf

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to the shape-scale parametrization.

            Returns
            -------
            Parametrization
                ``shapeScale`` with ``beta = lam`` and ``gamma = -lam``
            """
            return _ShapeScale(  # type: ignore[call-arg]
                alpha=self.alpha, beta=self.lam, gamma=-self.lam
            )

    ParametricFamilyRegister.register(Pareto)
