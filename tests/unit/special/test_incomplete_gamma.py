from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest
from scipy.special import gammainc, gammaincc

from pysatl_uq.errors import InvalidArgumentError
from pysatl_uq.special import regularized_incomplete_gamma


@pytest.mark.parametrize(
    "a, x",
    [(0.5, 0.1), (1.0, 1.0), (2.5, 1.0), (2.5, 10.0), (10.0, 3.0), (10.0, 30.0), (100.0, 90.0)],
)
def test_matches_scipy(a: float, x: float) -> None:
    assert regularized_incomplete_gamma(a, x) == pytest.approx(gammainc(a, x), rel=1e-11)
    assert regularized_incomplete_gamma(a, x, tail=True) == pytest.approx(
        gammaincc(a, x), rel=1e-11
    )


def test_exponential_case() -> None:
    for x in (0.2, 1.0, 5.0):
        assert regularized_incomplete_gamma(1.0, x, tail=True) == pytest.approx(
            math.exp(-x), rel=1e-13
        )


def test_complement_identity() -> None:
    a, x = 3.7, 2.9
    total = regularized_incomplete_gamma(a, x) + regularized_incomplete_gamma(a, x, tail=True)
    assert total == pytest.approx(1.0, abs=1e-14)


def test_limits() -> None:
    assert regularized_incomplete_gamma(2.0, 0.0) == 0.0
    assert regularized_incomplete_gamma(2.0, 0.0, tail=True) == 1.0
    assert regularized_incomplete_gamma(2.0, math.inf) == 1.0
    assert regularized_incomplete_gamma(2.0, math.inf, tail=True) == 0.0


@pytest.mark.parametrize("a, x", [(0.0, 1.0), (-1.0, 1.0), (1.0, -0.5), (1.0, math.nan)])
def test_invalid_arguments(a: float, x: float) -> None:
    with pytest.raises(InvalidArgumentError):
        regularized_incomplete_gamma(a, x)
