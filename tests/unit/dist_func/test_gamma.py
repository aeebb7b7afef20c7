from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.stats import gamma

from pysatl_uq.dist_func import p_gamma
from pysatl_uq.errors import InvalidArgumentError


@pytest.mark.parametrize("k", [0.3, 1.0, 2.5, 40.0])
@pytest.mark.parametrize("x", [1e-3, 0.5, 1.0, 4.0, 30.0])
def test_matches_scipy(k: float, x: float) -> None:
    assert p_gamma(k, x) == pytest.approx(gamma.cdf(x, k), rel=1e-10, abs=1e-300)
    assert p_gamma(k, x, tail=True) == pytest.approx(gamma.sf(x, k), rel=1e-10, abs=1e-300)


def test_exponential_case() -> None:
    assert p_gamma(1.0, 2.0) == pytest.approx(-math.expm1(-2.0), rel=1e-13)


@pytest.mark.parametrize("x", [-1.0, 0.0, -math.inf])
def test_non_positive_points(x: float) -> None:
    assert p_gamma(2.0, x) == 0.0
    assert p_gamma(2.0, x, tail=True) == 1.0


@pytest.mark.parametrize("k", [0.0, -1.0, math.inf, math.nan])
def test_invalid_shape(k: float) -> None:
    with pytest.raises(InvalidArgumentError):
        p_gamma(k, 1.0)


def test_nan_point() -> None:
    with pytest.raises(InvalidArgumentError):
        p_gamma(1.0, math.nan)
