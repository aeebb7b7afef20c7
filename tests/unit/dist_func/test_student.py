from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy import integrate
from scipy.stats import t as student

from pysatl_uq.dist_func import d_student, p_student, q_student, r_student, r_student_sample
from pysatl_uq.dist_func import student as student_module
from pysatl_uq.dist_func.student import (
    STUDENT_ASYMPTOTIC_RATIO,
    STUDENT_CLOSED_FORM_RATIO,
    STUDENT_NU_ASYMPTOTIC,
)
from pysatl_uq.errors import ConvergenceError, InvalidArgumentError
from pysatl_uq.logging import logger
from pysatl_uq.random_generator import set_seed

NUS = [0.5, 1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 2.5, 10.0, 30.0, 1234.5]
POINTS = [-40.0, -3.0, -1.0, -0.25, 0.0, 0.5, 1.5, 2.0, 6.0, 100.0]


class TestStudentCDF:
    @pytest.mark.parametrize("nu", NUS)
    @pytest.mark.parametrize("x", POINTS)
    def test_matches_scipy(self, nu: float, x: float) -> None:
        assert p_student(nu, x) == pytest.approx(student.cdf(x, nu), rel=1e-11, abs=1e-300)
        assert p_student(nu, x, tail=True) == pytest.approx(
            student.sf(x, nu), rel=1e-11, abs=1e-300
        )

    @pytest.mark.parametrize("nu", NUS)
    @pytest.mark.parametrize("x", POINTS)
    def test_complement_identity(self, nu: float, x: float) -> None:
        assert p_student(nu, x) + p_student(nu, x, tail=True) == pytest.approx(1.0, abs=1e-14)

    @pytest.mark.parametrize("nu", [1.0, 3.0, 5.5, 40.0])
    def test_symmetry(self, nu: float) -> None:
        for x in (0.3, 2.0, 15.0):
            assert p_student(nu, -x) == pytest.approx(p_student(nu, x, tail=True), rel=1e-15)

    @pytest.mark.parametrize("nu", [1.0, 2.0, 3.0, 7.0, 8.5])
    def test_monotone(self, nu: float) -> None:
        xs = np.linspace(-20.0, 20.0, 401)
        values = [p_student(nu, float(x)) for x in xs]
        assert all(left <= right for left, right in zip(values, values[1:], strict=False))

    def test_centre_and_infinities(self) -> None:
        assert p_student(3.0, 0.0) == 0.5
        assert p_student(3.0, math.inf) == 1.0
        assert p_student(3.0, -math.inf) == 0.0
        assert p_student(3.0, math.inf, tail=True) == 0.0

    def test_cauchy_closed_form(self) -> None:
        for x in (-5.0, -0.5, 0.7, 12.0):
            assert p_student(1.0, x) == pytest.approx(0.5 + math.atan(x) / math.pi, rel=1e-14)

    def test_nu_two_closed_form(self) -> None:
        for x in (-3.0, 0.4, 9.0):
            expected = 0.5 + x / (2.0 * math.sqrt(2.0 + x * x))
            assert p_student(2.0, x) == pytest.approx(expected, rel=1e-14)

    def test_far_tail_keeps_relative_accuracy(self) -> None:
        value = p_student(5.0, -1e6)
        assert value > 0.0
        assert value == pytest.approx(student.cdf(-1e6, 5.0), rel=1e-10)

    @pytest.mark.parametrize("nu", [3.0, 5.0, 7.0])
    def test_closed_form_boundary_is_continuous(self, nu: float) -> None:
        x = math.sqrt(STUDENT_CLOSED_FORM_RATIO * nu)
        below = p_student(nu, math.nextafter(x, 0.0), tail=True)
        above = p_student(nu, math.nextafter(x, math.inf), tail=True)
        assert below == pytest.approx(above, rel=1e-12)

    def test_asymptotic_regime(self) -> None:
        nu = 4.0 * STUDENT_NU_ASYMPTOTIC
        for x in (0.1, 1.0, 1.4):
            assert x**4 <= STUDENT_ASYMPTOTIC_RATIO * nu
            assert p_student(nu, x, tail=True) == pytest.approx(student.sf(x, nu), rel=1e-10)

    @pytest.mark.parametrize("nu", [STUDENT_NU_ASYMPTOTIC, 1e6, 1e7])
    def test_asymptotic_regime_boundary_is_continuous(self, nu: float) -> None:
        x = (STUDENT_ASYMPTOTIC_RATIO * nu) ** 0.25
        below = p_student(nu, math.nextafter(x, 0.0), tail=True)
        above = p_student(nu, math.nextafter(x, math.inf), tail=True)
        assert below == pytest.approx(above, rel=1e-12, abs=0.0)

    @pytest.mark.parametrize("nu", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_nu(self, nu: float) -> None:
        with pytest.raises(InvalidArgumentError):
            p_student(nu, 0.5)

    def test_nan_point(self) -> None:
        with pytest.raises(InvalidArgumentError):
            p_student(3.0, math.nan)


def _power_law_tail(nu: float, t: float) -> float:
    """Leading term of ``P(T > t)`` for ``nu / t^2`` far below one."""
    a = 0.5 * nu
    log_beta = math.lgamma(a) + math.lgamma(0.5) - math.lgamma(a + 0.5)
    return math.exp(math.log(0.5 / a) - log_beta + a * (math.log(nu) - 2.0 * math.log(t)))


def _even_nu_tail(nu: float, t: float) -> float:
    """``P(T > t)`` for even ``nu`` by quadrature with an exact normalization."""
    m = int(nu) // 2
    # 1 / B(m, 1/2) == m * C(2m, m) / 4^m, divided as integers
    scale = m * math.comb(2 * m, m) / 4**m / math.sqrt(nu)
    integral, _ = integrate.quad(
        lambda u: math.exp(-0.5 * (nu + 1.0) * math.log1p(u * u / nu)),
        t,
        t + 40.0,
        epsabs=0.0,
        epsrel=1e-13,
        limit=200,
    )
    return scale * integral


class TestStudentExtremeArguments:
    @pytest.mark.parametrize(
        "nu, t", [(0.05, 1e200), (0.5, 1e160), (1.5, 1e170), (0.3, 1e300), (3.5, 1e60)]
    )
    def test_far_tail_does_not_underflow(self, nu: float, t: float) -> None:
        value = p_student(nu, t, tail=True)
        assert value > 0.0
        assert value == pytest.approx(_power_law_tail(nu, t), rel=1e-11, abs=0.0)
        assert p_student(nu, -t) == value

    @pytest.mark.parametrize(
        "nu, t, expected, rel",
        [
            (0.05, 1e200, 4.4856e-11, 1e-4),
            (1.5, 1e170, 3.7709e-256, 1e-4),
            (0.5, 1e160, 3.2070098e-81, 1e-7),
            (99999.0, 1.0, 0.158656463794154, 1e-12),
            (1e5, 5.6, 1.07456308486e-8, 1e-10),
        ],
    )
    def test_reference_values(self, nu: float, t: float, expected: float, rel: float) -> None:
        assert p_student(nu, t, tail=True) == pytest.approx(expected, rel=rel, abs=0.0)

    @pytest.mark.parametrize("nu", [1e4, 5e4, 1e5, 1e6])
    @pytest.mark.parametrize("t", [0.5, 2.0, 5.6, 9.0])
    def test_large_nu_matches_quadrature(self, nu: float, t: float) -> None:
        assert p_student(nu, t, tail=True) == pytest.approx(
            _even_nu_tail(nu, t), rel=1e-11, abs=0.0
        )

    @pytest.mark.parametrize("nu", [1e4, 99998.0, 1e6])
    def test_large_nu_density_normalization(self, nu: float) -> None:
        m = int(nu) // 2
        expected = m * math.comb(2 * m, m) / 4**m / math.sqrt(nu)
        assert d_student(nu, 0.0) == pytest.approx(expected, rel=1e-13, abs=0.0)

    def test_nu_two_tail_beyond_squared_range(self) -> None:
        t = 1e150
        assert p_student(2.0, t, tail=True) == pytest.approx(0.5 / t / t, rel=1e-10, abs=0.0)


class TestStudentDensity:
    @pytest.mark.parametrize("nu", [0.7, 1.0, 4.0, 25.0])
    def test_matches_scipy(self, nu: float) -> None:
        for x in (-7.0, 0.0, 0.3, 4.0):
            assert d_student(nu, x) == pytest.approx(student.pdf(x, nu), rel=1e-12)

    def test_infinite_point(self) -> None:
        assert d_student(3.0, math.inf) == 0.0


class TestStudentQuantile:
    @pytest.mark.parametrize("nu", NUS)
    @pytest.mark.parametrize("p", [1e-12, 1e-5, 0.01, 0.2, 0.5, 0.75, 0.99, 1.0 - 1e-9])
    def test_matches_scipy(self, nu: float, p: float) -> None:
        assert q_student(nu, p) == pytest.approx(student.ppf(p, nu), rel=1e-9, abs=1e-15)

    @pytest.mark.parametrize("nu", NUS)
    @pytest.mark.parametrize("p", [1e-10, 0.003, 0.3, 0.5, 0.8, 0.999])
    def test_round_trip(self, nu: float, p: float) -> None:
        x = q_student(nu, p)
        assert p_student(nu, x) == pytest.approx(p, rel=1e-9)

    @pytest.mark.parametrize("nu", [1.0, 2.0, 4.5, 12.0])
    def test_tail_quantile(self, nu: float) -> None:
        for p in (1e-8, 0.05, 0.6):
            x = q_student(nu, p, tail=True)
            assert x == pytest.approx(-q_student(nu, p), rel=1e-15)
            assert p_student(nu, x, tail=True) == pytest.approx(p, rel=1e-9)

    def test_median(self) -> None:
        assert q_student(3.3, 0.5) == 0.0

    def test_monotone(self) -> None:
        ps = np.linspace(0.001, 0.999, 200)
        values = [q_student(5.5, float(p)) for p in ps]
        assert all(left < right for left, right in zip(values, values[1:], strict=False))

    def test_large_nu_approaches_normal(self) -> None:
        assert q_student(1e7, 0.975) == pytest.approx(1.959963984540054, rel=1e-6)

    @pytest.mark.parametrize("nu, p", [(0.3, 1e-100), (0.05, 1e-20), (0.05, 1e-300), (0.3, 1e-300)])
    def test_quantile_beyond_double_range(self, nu: float, p: float) -> None:
        messages: list[str] = []
        handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
        try:
            assert q_student(nu, p) == -math.inf
            assert q_student(nu, p, tail=True) == math.inf
        finally:
            logger.remove(handler_id)
        assert any("overflows" in message for message in messages)

    @pytest.mark.parametrize(
        "nu, p", [(0.05, 1e-10), (0.3, 1e-60), (0.8, 1e-200), (1.5, 1e-200), (3.0, 1e-300)]
    )
    def test_extreme_quantile_round_trip(self, nu: float, p: float) -> None:
        x = q_student(nu, p)
        assert math.isfinite(x)
        assert p_student(nu, x) == pytest.approx(p, rel=1e-11, abs=0.0)

    def test_root_finder_failure_is_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def failing_brentq(*args: object, **kwargs: object) -> float:
            raise RuntimeError("failed to converge after 500 iterations")

        monkeypatch.setattr(student_module._sp_optimize, "brentq", failing_brentq)
        with pytest.raises(ConvergenceError):
            q_student(5.0, 0.01)

    @pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5, math.nan])
    def test_invalid_probability(self, p: float) -> None:
        with pytest.raises(InvalidArgumentError):
            q_student(3.0, p)


class TestStudentRandom:
    def test_reproducible_with_seed(self) -> None:
        set_seed(7)
        first = r_student_sample(4.0, 10)
        set_seed(7)
        second = r_student_sample(4.0, 10)
        np.testing.assert_array_equal(first, second)

    def test_single_draw_is_float(self) -> None:
        assert isinstance(r_student(3.0), float)

    def test_sample_moments(self) -> None:
        sample = r_student_sample(10.0, 200_000)
        assert sample.shape == (200_000,)
        assert float(sample.mean()) == pytest.approx(0.0, abs=0.02)
        assert float(sample.var()) == pytest.approx(10.0 / 8.0, rel=0.05)

    def test_empty_and_invalid_sizes(self) -> None:
        assert r_student_sample(3.0, 0).shape == (0,)
        with pytest.raises(InvalidArgumentError):
            r_student_sample(3.0, -1)
        with pytest.raises(InvalidArgumentError):
            r_student_sample(-3.0, 5)
