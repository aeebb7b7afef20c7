from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_uq.distributions import ArraySample, as_point, as_sample
from pysatl_uq.errors import InvalidArgumentError


class TestArraySample:
    def test_basic_properties(self) -> None:
        data = np.arange(6, dtype=float).reshape(3, 2)
        sample = ArraySample(data)
        assert len(sample) == 3
        assert sample.dimension == 2
        assert sample.shape == (3, 2)
        assert sample.array is data
        np.testing.assert_array_equal(list(sample)[1], [2.0, 3.0])

    def test_rejects_non_2d(self) -> None:
        with pytest.raises(InvalidArgumentError, match=r"expects an \(n, d\) array"):
            ArraySample(np.zeros(3))


class TestAsPoint:
    def test_scalar_for_dimension_one(self) -> None:
        np.testing.assert_array_equal(as_point(2.5, 1), [2.5])

    def test_converts_sequences(self) -> None:
        point = as_point([1, 2, 3], 3)
        assert point.dtype == np.float64
        assert point.shape == (3,)

    @pytest.mark.parametrize("point", [[1.0, 2.0], [[1.0, 2.0, 3.0]], 4.0])
    def test_wrong_dimension(self, point: object) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid point dimension: expected 3"):
            as_point(point, 3)


class TestAsSample:
    def test_array_sample_input(self) -> None:
        data = np.ones((4, 2))
        np.testing.assert_array_equal(as_sample(ArraySample(data), 2), data)

    def test_one_dimensional_input_for_dimension_one(self) -> None:
        assert as_sample([1.0, 2.0, 3.0], 1).shape == (3, 1)

    def test_one_dimensional_input_rejected_otherwise(self) -> None:
        with pytest.raises(InvalidArgumentError):
            as_sample([1.0, 2.0], 2)

    def test_wrong_row_dimension(self) -> None:
        with pytest.raises(InvalidArgumentError, match="expected 2, got 3"):
            as_sample(np.ones((5, 3)), 2)

    def test_empty_sample(self) -> None:
        assert as_sample(np.empty((0, 4)), 4).shape == (0, 4)
