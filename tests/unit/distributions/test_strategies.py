from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any, cast

import numpy as np
import pytest
from mypy_extensions import KwArg

from pysatl_uq.distributions import (
    AnalyticalComputation,
    ComputationMethod,
    DefaultComputationStrategy,
    DirectSamplingUnivariateStrategy,
    FittedComputationMethod,
)
from pysatl_uq.distributions.conversions import CONVERSIONS
from pysatl_uq.errors import InvalidArgumentError
from pysatl_uq.types import CharacteristicName
from tests.utils.mocks import StandaloneEuclideanUnivariateDistribution


def _exponential_cdf(x: Any, **_: Any) -> Any:
    return -np.expm1(-np.maximum(np.asarray(x, dtype=float), 0.0))


def _exponential_ppf(p: Any, **_: Any) -> Any:
    return -np.log1p(-np.asarray(p, dtype=float))


def make_distribution(
    *targets: str, strategy: DefaultComputationStrategy[Any, Any] | None = None
) -> StandaloneEuclideanUnivariateDistribution:
    funcs = {
        CharacteristicName.CDF: _exponential_cdf,
        CharacteristicName.PPF: _exponential_ppf,
        CharacteristicName.PDF: lambda x, **_: np.exp(-np.asarray(x, dtype=float)),
    }
    return StandaloneEuclideanUnivariateDistribution(
        analytical_computations=[
            AnalyticalComputation[Any, Any](
                target=target, func=cast(Callable[[Any, KwArg(Any)], Any], funcs[target])
            )
            for target in targets
        ],
        computation_strategy=strategy,
    )


class TestDefaultComputationStrategy:
    def test_analytical_is_returned_directly(self) -> None:
        distr = make_distribution(CharacteristicName.CDF)
        method = distr.query_method(CharacteristicName.CDF)
        assert method is distr.analytical_computations[CharacteristicName.CDF]

    def test_sf_from_cdf(self) -> None:
        distr = make_distribution(CharacteristicName.CDF)
        sf = distr.query_method(CharacteristicName.SF)
        assert isinstance(sf, FittedComputationMethod)
        assert sf.sources == [CharacteristicName.CDF]
        assert sf(2.0) == pytest.approx(math.exp(-2.0))
        np.testing.assert_allclose(sf(np.array([0.0, 1.0])), [1.0, math.exp(-1.0)])

    def test_isf_from_ppf(self) -> None:
        distr = make_distribution(CharacteristicName.PPF)
        assert distr.calculate_characteristic(CharacteristicName.ISF, 0.25) == pytest.approx(
            -math.log(0.25)
        )

    def test_caching_per_distribution(self) -> None:
        strategy: DefaultComputationStrategy[Any, Any] = DefaultComputationStrategy(
            enable_caching=True
        )
        first = make_distribution(CharacteristicName.CDF, strategy=strategy)
        second = make_distribution(CharacteristicName.CDF, strategy=strategy)

        method = first.query_method(CharacteristicName.SF)
        assert first.query_method(CharacteristicName.SF) is method
        assert second.query_method(CharacteristicName.SF) is not method

    def test_no_caching_by_default(self) -> None:
        distr = make_distribution(CharacteristicName.CDF)
        assert distr.query_method(CharacteristicName.SF) is not distr.query_method(
            CharacteristicName.SF
        )

    def test_cycle_is_detected(self) -> None:
        distr = make_distribution(CharacteristicName.PDF)
        with pytest.raises(RuntimeError, match="Cycle detected"):
            distr.query_method(CharacteristicName.CDF)

    def test_guard_is_released_after_failure(self) -> None:
        distr = make_distribution(CharacteristicName.PDF)
        for _ in range(2):
            with pytest.raises(RuntimeError, match="Cycle detected"):
                distr.query_method(CharacteristicName.SF)

    def test_without_analytical_computations(self) -> None:
        distr = make_distribution()
        with pytest.raises(RuntimeError, match="no analytical computations"):
            distr.query_method(CharacteristicName.CDF)

    def test_unknown_characteristic(self) -> None:
        distr = make_distribution(CharacteristicName.CDF)
        with pytest.raises(RuntimeError, match="No conversion"):
            distr.query_method("kurtosis")

    def _install_rendezvous_sf(self, monkeypatch: pytest.MonkeyPatch, parties: int) -> None:
        # every fit of sf waits until all threads are inside their own fit
        barrier = threading.Barrier(parties, timeout=10.0)

        def _fit(distr: Any, **_: Any) -> FittedComputationMethod[Any, Any]:
            cdf = distr.query_method(CharacteristicName.CDF)
            barrier.wait()
            return FittedComputationMethod(
                target=CharacteristicName.SF,
                sources=[CharacteristicName.CDF],
                func=lambda x, **kw: 1.0 - cdf(x, **kw),
            )

        method: ComputationMethod[Any, Any] = ComputationMethod(
            target=CharacteristicName.SF, sources=[CharacteristicName.CDF], fitter=_fit
        )
        monkeypatch.setitem(CONVERSIONS, CharacteristicName.SF, [method])

    def test_concurrent_resolution_of_same_characteristic(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        self._install_rendezvous_sf(monkeypatch, parties=4)
        distr = make_distribution(CharacteristicName.CDF)
        with ThreadPoolExecutor(max_workers=4) as pool:
            methods = list(pool.map(lambda _: distr.query_method(CharacteristicName.SF), range(4)))
        for method in methods:
            assert method(1.0) == pytest.approx(math.exp(-1.0))

    def test_concurrent_fits_share_one_cached_method(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        self._install_rendezvous_sf(monkeypatch, parties=4)
        strategy: DefaultComputationStrategy[Any, Any] = DefaultComputationStrategy(
            enable_caching=True
        )
        distr = make_distribution(CharacteristicName.CDF, strategy=strategy)
        with ThreadPoolExecutor(max_workers=4) as pool:
            methods = list(pool.map(lambda _: distr.query_method(CharacteristicName.SF), range(4)))
        assert all(method is methods[0] for method in methods)
        assert distr.query_method(CharacteristicName.SF) is methods[0]


class TestSamplingStrategies:
    def test_inverse_transform_sampling(self) -> None:
        distr = make_distribution(CharacteristicName.PPF)
        sample = distr.sample(20_000)
        assert sample.shape == (20_000, 1)
        assert np.all(sample.array >= 0.0)
        assert float(sample.array.mean()) == pytest.approx(1.0, abs=0.03)

    def test_inverse_transform_through_conversion(self) -> None:
        distr = StandaloneEuclideanUnivariateDistribution(
            analytical_computations=[
                AnalyticalComputation[Any, Any](
                    target=CharacteristicName.ISF,
                    func=cast(
                        Callable[[Any, KwArg(Any)], Any],
                        lambda p, **_: -np.log(np.asarray(p, dtype=float)),
                    ),
                )
            ]
        )
        assert distr.sample(10).shape == (10, 1)

    def test_direct_sampling(self) -> None:
        strategy = DirectSamplingUnivariateStrategy(lambda distr, n: np.arange(n, dtype=float))
        distr = make_distribution(CharacteristicName.CDF)
        sample = strategy.sample(4, distr)
        np.testing.assert_array_equal(sample.array, [[0.0], [1.0], [2.0], [3.0]])

    def test_negative_size(self) -> None:
        distr = make_distribution(CharacteristicName.PPF)
        with pytest.raises(InvalidArgumentError):
            distr.sample(-1)
