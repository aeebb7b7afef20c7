"""
Characteristic Conversions
==========================

Exact conversions between univariate characteristics, used by
:class:`~pysatl_uq.distributions.strategies.DefaultComputationStrategy`
when a distribution does not provide a characteristic analytically:

- ``sf`` from ``cdf`` and ``cdf`` from ``sf`` (complement);
- ``isf`` from ``ppf`` and ``ppf`` from ``isf`` (reflected argument).

Notes
-----
Complements lose relative accuracy in the far tail. Families that care
about tails provide both sides analytically.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_uq.distributions.computation import ComputationMethod, FittedComputationMethod
from pysatl_uq.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_uq.distributions.distribution import Distribution
    from pysatl_uq.types import GenericCharacteristicName, Number, NumericArray


def _complement(value: Any) -> Any:
    result = 1.0 - np.asarray(value, dtype=np.float64)
    return float(result) if result.ndim == 0 else result


def _complement_fitter(
    source: GenericCharacteristicName, target: GenericCharacteristicName
) -> ComputationMethod[Any, Any]:
    def _fit(distribution: Distribution, **_: Any) -> FittedComputationMethod[Any, Any]:
        base = distribution.query_method(source)

        def _func(x: Number | NumericArray, **kwargs: Any) -> Any:
            return _complement(base(x, **kwargs))

        return FittedComputationMethod(target=target, sources=[source], func=_func)

    return ComputationMethod(target=target, sources=[source], fitter=_fit)


def _reflection_fitter(
    source: GenericCharacteristicName, target: GenericCharacteristicName
) -> ComputationMethod[Any, Any]:
    def _fit(distribution: Distribution, **_: Any) -> FittedComputationMethod[Any, Any]:
        base = distribution.query_method(source)

        def _func(p: Number | NumericArray, **kwargs: Any) -> Any:
            return base(_complement(p), **kwargs)

        return FittedComputationMethod(target=target, sources=[source], func=_func)

    return ComputationMethod(target=target, sources=[source], fitter=_fit)


CONVERSIONS: dict[GenericCharacteristicName, list[ComputationMethod[Any, Any]]] = {
    CharacteristicName.SF: [_complement_fitter(CharacteristicName.CDF, CharacteristicName.SF)],
    CharacteristicName.CDF: [_complement_fitter(CharacteristicName.SF, CharacteristicName.CDF)],
    CharacteristicName.ISF: [_reflection_fitter(CharacteristicName.PPF, CharacteristicName.ISF)],
    CharacteristicName.PPF: [_reflection_fitter(CharacteristicName.ISF, CharacteristicName.PPF)],
}
"""Conversion methods keyed by target characteristic."""


__all__ = ["CONVERSIONS"]
