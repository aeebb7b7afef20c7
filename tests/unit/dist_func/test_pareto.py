from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import pareto

from pysatl_uq.dist_func import d_pareto, p_pareto, q_pareto, r_pareto, r_pareto_sample
from pysatl_uq.errors import InvalidArgumentError
from pysatl_uq.random_generator import set_seed

PARAMETERS = [(0.5, 1.0, 0.0), (2.0, 3.0, -1.0), (3.5, 0.25, 10.0)]


class TestParetoCDF:
    @pytest.mark.parametrize("alpha, beta, gamma", PARAMETERS)
    @pytest.mark.parametrize("offset", [1.0001, 1.5, 3.0, 50.0, 1e6])
    def test_matches_scipy(self, alpha: float, beta: float, gamma: float, offset: float) -> None:
        x = gamma + beta * offset
        reference = pareto(b=alpha, loc=gamma, scale=beta)
        assert p_pareto(alpha, beta, gamma, x) == pytest.approx(reference.cdf(x), rel=1e-10)
        assert p_pareto(alpha, beta, gamma, x, tail=True) == pytest.approx(
            reference.sf(x), rel=1e-10
        )

    @pytest.mark.parametrize("alpha, beta, gamma", PARAMETERS)
    def test_below_support(self, alpha: float, beta: float, gamma: float) -> None:
        for x in [-math.inf, gamma - 5.0, gamma + beta]:
            assert p_pareto(alpha, beta, gamma, x) == 0.0
            assert p_pareto(alpha, beta, gamma, x, tail=True) == 1.0

    def test_at_infinity(self) -> None:
        assert p_pareto(2.0, 1.0, 0.0, math.inf) == 1.0
        assert p_pareto(2.0, 1.0, 0.0, math.inf, tail=True) == 0.0

    def test_small_lower_tail_keeps_relative_accuracy(self) -> None:
        # P(X <= beta (1 + h)) ~ alpha * h for small h
        h = 1e-12
        value = p_pareto(3.0, 1.0, 0.0, 1.0 + h)
        assert value == pytest.approx(3.0 * h, rel=1e-3)

    @pytest.mark.parametrize(
        "alpha, beta, gamma",
        [(0.0, 1.0, 0.0), (-1.0, 1.0, 0.0), (math.inf, 1.0, 0.0), (1.0, 0.0, 0.0),
         (1.0, math.nan, 0.0), (1.0, 1.0, math.inf), (1.0, 1.0, math.nan)],
    )
    def test_invalid_parameters(self, alpha: float, beta: float, gamma: float) -> None:
        with pytest.raises(InvalidArgumentError):
            p_pareto(alpha, beta, gamma, 2.0)

    def test_nan_point(self) -> None:
        with pytest.raises(InvalidArgumentError):
            p_pareto(1.0, 1.0, 0.0, math.nan)


class TestParetoDensity:
    @pytest.mark.parametrize("alpha, beta, gamma", PARAMETERS)
    @pytest.mark.parametrize("offset", [1.0, 1.5, 3.0, 50.0])
    def test_matches_scipy(self, alpha: float, beta: float, gamma: float, offset: float) -> None:
        x = gamma + beta * offset
        expected = pareto.pdf(x, alpha, loc=gamma, scale=beta)
        assert d_pareto(alpha, beta, gamma, x) == pytest.approx(expected, rel=1e-10)

    def test_outside_support(self) -> None:
        assert d_pareto(2.0, 1.0, 0.0, 0.5) == 0.0
        assert d_pareto(2.0, 1.0, 0.0, math.inf) == 0.0


class TestParetoQuantile:
    @pytest.mark.parametrize("alpha, beta, gamma", PARAMETERS)
    @pytest.mark.parametrize("q", [1e-12, 0.01, 0.3, 0.5, 0.9, 1 - 1e-9])
    def test_matches_scipy(self, alpha: float, beta: float, gamma: float, q: float) -> None:
        reference = pareto(b=alpha, loc=gamma, scale=beta)
        assert q_pareto(alpha, beta, gamma, q) == pytest.approx(reference.ppf(q), rel=1e-9)
        assert q_pareto(alpha, beta, gamma, q, tail=True) == pytest.approx(
            reference.isf(q), rel=1e-9
        )

    @pytest.mark.parametrize("alpha, beta, gamma", PARAMETERS)
    def test_endpoints(self, alpha: float, beta: float, gamma: float) -> None:
        assert q_pareto(alpha, beta, gamma, 0.0) == gamma + beta
        assert q_pareto(alpha, beta, gamma, 1.0) == math.inf
        assert q_pareto(alpha, beta, gamma, 1.0, tail=True) == gamma + beta
        assert q_pareto(alpha, beta, gamma, 0.0, tail=True) == math.inf

    @pytest.mark.parametrize("q", [0.001, 0.2, 0.75, 0.999])
    def test_round_trip(self, q: float) -> None:
        x = q_pareto(2.5, 2.0, 1.0, q)
        assert p_pareto(2.5, 2.0, 1.0, x) == pytest.approx(q, rel=1e-11)

    @pytest.mark.parametrize("q", [-0.1, 1.1, math.nan])
    def test_invalid_probability(self, q: float) -> None:
        with pytest.raises(InvalidArgumentError):
            q_pareto(1.0, 1.0, 0.0, q)


class TestParetoRandom:
    def test_sample_in_support(self) -> None:
        sample = r_pareto_sample(3.0, 2.0, 1.0, 10_000)
        assert sample.shape == (10_000,)
        assert np.all(sample >= 3.0)

    def test_sample_mean(self) -> None:
        sample = r_pareto_sample(5.0, 1.0, 0.0, 200_000)
        assert float(np.mean(sample)) == pytest.approx(5.0 / 4.0, rel=0.01)

    def test_reproducible_with_seed(self) -> None:
        set_seed(7)
        first = r_pareto_sample(2.0, 1.0, 0.0, 16)
        set_seed(7)
        second = r_pareto_sample(2.0, 1.0, 0.0, 16)
        np.testing.assert_array_equal(first, second)

    def test_single_draw(self) -> None:
        assert isinstance(r_pareto(2.0, 1.0, 0.0), float)

    def test_empty_and_negative_size(self) -> None:
        assert r_pareto_sample(2.0, 1.0, 0.0, 0).shape == (0,)
        with pytest.raises(InvalidArgumentError):
            r_pareto_sample(2.0, 1.0, 0.0, -1)
