"""
Strategies that turn a distribution into callables and samples.

Characteristic resolution tries the analytical computations of a
distribution first and falls back to the exact conversions registered in
:mod:`pysatl_uq.distributions.conversions`. Univariate samplers either invert
the quantile function or delegate to a family-specific variate generator;
both draw from the shared generator of :mod:`pysatl_uq.random_generator`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_uq.distributions.computation import (
    AnalyticalComputation,
    FittedComputationMethod,
)
from pysatl_uq.errors import InvalidArgumentError
from pysatl_uq.random_generator import uniform
from pysatl_uq.types import CharacteristicName, GenericCharacteristicName

from .conversions import CONVERSIONS
from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

type Method[In, Out] = AnalyticalComputation[In, Out] | FittedComputationMethod[In, Out]


class ComputationStrategy[In, Out](Protocol):
    """Protocol for characteristic resolution strategies."""

    enable_caching: bool

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]: ...


class DefaultComputationStrategy[In, Out]:
    """
    Default characteristic resolver.

    Resolution order
    ----------------
    1. If the distribution provides an analytical implementation, return it.
    2. Else, if caching is enabled and the method is cached, return it.
    3. Else fit the first conversion registered for the target; the fitter
       resolves its sources recursively through the strategy.

    Parameters
    ----------
    enable_caching : bool, default False
        If ``True``, cache fitted conversions per distribution instance.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical base, or no conversion exists,
        or a cycle is detected during resolution.

    Notes
    -----
    A strategy is usually shared by every member of a family, so it may be
    queried from several threads at once. The cache is guarded by a lock and
    the cycle guard is kept per thread.
    """

    def __init__(self, enable_caching: bool = False) -> None:
        self.enable_caching = enable_caching
        self._cache: dict[
            tuple[int, GenericCharacteristicName], FittedComputationMethod[In, Out]
        ] = {}
        self._cache_lock = threading.RLock()
        self._local = threading.local()

    @property
    def _resolving(self) -> dict[int, set[GenericCharacteristicName]]:
        resolving: dict[int, set[GenericCharacteristicName]] | None = getattr(
            self._local, "resolving", None
        )
        if resolving is None:
            resolving = self._local.resolving = {}
        return resolving

    def _push_guard(self, distr: "Distribution", state: GenericCharacteristicName) -> None:
        key = id(distr)
        seen = self._resolving.setdefault(key, set())
        if state in seen:
            raise RuntimeError(
                f"Cycle detected while resolving '{state}'. "
                "Provide at least one analytical base characteristic in the distribution."
            )
        seen.add(state)

    def _pop_guard(self, distr: "Distribution", state: GenericCharacteristicName) -> None:
        key = id(distr)
        seen = self._resolving.get(key)
        if seen is not None:
            seen.discard(state)
            if not seen:
                self._resolving.pop(key, None)

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> Method[In, Out]:
        """
        Resolve an analytical or fitted method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical base.
        **options
            Passed to the fitter when a conversion is required.

        Returns
        -------
        Method
            Analytical or fitted callable implementing ``state``.
        """
        if state in distr.analytical_computations:
            return distr.analytical_computations[state]

        cache_key = (id(distr), state)
        if self.enable_caching:
            with self._cache_lock:
                cached = self._cache.get(cache_key)
            if cached is not None:
                return cached

        if not distr.analytical_computations:
            raise RuntimeError(
                "Distribution provides no analytical computations to ground conversions."
            )

        methods = CONVERSIONS.get(state, [])
        if not methods:
            raise RuntimeError(f"No conversion from any analytical characteristic to '{state}'.")

        self._push_guard(distr, state)
        try:
            fitted: FittedComputationMethod[In, Out] = methods[0].fit(distr, **options)
        finally:
            self._pop_guard(distr, state)

        if self.enable_caching:
            with self._cache_lock:
                # a concurrent fit of the same key may have finished first
                fitted = self._cache.setdefault(cache_key, fitted)
        return fitted


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


def _check_size(n: int) -> None:
    if n < 0:
        raise InvalidArgumentError(f"Sample size must be non-negative, got {n}")


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)`` drawn from the shared generator.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        _check_size(n)
        ppf = distr.query_method(CharacteristicName.PPF, **options)
        u = np.asarray(uniform(n), dtype=np.float64)
        vals = np.asarray(ppf(u), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)


class DirectSamplingUnivariateStrategy(SamplingStrategy):
    """
    Univariate sampler backed by a vectorised variate generator.

    Parameters
    ----------
    draw : Callable[[Distribution, int], numpy.ndarray]
        Returns ``n`` variates of the given distribution.
    """

    def __init__(self, draw: Callable[["Distribution", int], np.ndarray]) -> None:
        self._draw = draw

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample:
        _check_size(n)
        vals = np.asarray(self._draw(distr, n), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)
