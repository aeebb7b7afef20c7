"""
Characteristic callables
========================

A distribution characteristic (``cdf``, ``ppf``, ``pdf``, ...) is reached
through one of three wrappers:

- :class:`AnalyticalComputation` wraps a formula the family supplies for a
  concrete member;
- :class:`ComputationMethod` describes how to derive ``target`` from
  ``sources`` and is fitted once per distribution;
- :class:`FittedComputationMethod` is the outcome of that fit, a callable
  already bound to its distribution.

Callables take a scalar or a NumPy array and return a result of the same
shape; arrays go through the batch dispatcher of the conversion.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mypy_extensions import KwArg

from pysatl_uq.types import GenericCharacteristicName

if TYPE_CHECKING:
    from pysatl_uq.distributions.distribution import Distribution


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Closed-form characteristic of one family member."""

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class FittedComputationMethod[In, Out]:
    """
    Characteristic derived from other characteristics of a fixed distribution.

    Attributes
    ----------
    target : str
        Name of the derived characteristic.
    sources : Sequence[str]
        Names it was derived from, in the order the fitter resolved them.
    func : Callable
        Evaluator bound to the distribution.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)


@dataclass(frozen=True, slots=True)
class ComputationMethod[In, Out]:
    """
    Recipe turning ``sources`` of a distribution into ``target``.

    ``fitter`` resolves the sources on the given distribution and returns the
    bound :class:`FittedComputationMethod`; strategies cache that result.
    """

    target: GenericCharacteristicName
    sources: Sequence[GenericCharacteristicName]
    fitter: Callable[["Distribution", KwArg(Any)], FittedComputationMethod[In, Out]]

    def fit(self, distribution: "Distribution", **options: Any) -> FittedComputationMethod[In, Out]:
        return self.fitter(distribution, **options)


__all__ = [
    "AnalyticalComputation",
    "FittedComputationMethod",
    "ComputationMethod",
]
