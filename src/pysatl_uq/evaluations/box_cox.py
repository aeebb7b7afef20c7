"""
Box-Cox Transform
=================

Componentwise Box-Cox transform with an output shift:

``y_j = (x_j^lambda_j - 1) / lambda_j + shift_j``, ``x_j > 0``.

``BoxCoxEvaluation(lambda_, shift)`` and
``InverseBoxCoxEvaluation(lambda_, shift)`` are inverses of each other.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_uq.errors import InvalidArgumentError

from .evaluation import Evaluation
from .inverse_box_cox import TAYLOR_THRESHOLD, InverseBoxCoxEvaluation, box_cox_parameters

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any, Self

    from pysatl_uq.types import FloatArray


class BoxCoxEvaluation(Evaluation):
    """
    Box-Cox transform.

    Parameters
    ----------
    lambda_ : array_like
        Exponents, one per component.
    shift : array_like, optional
        Shifts added to the output, zeros by default.
    name : str, optional
        Instance name.
    """

    _persistent_fields = ("lambda_", "shift_")

    def __init__(self, lambda_: Any, shift: Any = None, name: str | None = None):
        lam, sh = box_cox_parameters(lambda_, shift)
        super().__init__(lam.size, lam.size, name)
        self._lambda = lam
        self._shift = sh

    @property
    def lambda_(self) -> FloatArray:
        return self._lambda

    @property
    def shift_(self) -> FloatArray:
        return self._shift

    @classmethod
    def _from_fields(cls, fields: Mapping[str, Any]) -> Self:
        return cls(fields["lambda_"], fields["shift_"])

    def _kernel(self, block: FloatArray) -> FloatArray:
        if np.any(block <= 0.0):
            bad = float(block[block <= 0.0][0])
            raise InvalidArgumentError(
                f"Can not apply the Box-Cox function to a non-positive value {bad}"
            )
        log_x = np.log(block)
        lam = np.broadcast_to(self._lambda, log_x.shape)
        out = np.empty_like(log_x)

        small = np.abs(lam * log_x * log_x) < TAYLOR_THRESHOLD
        if small.any():
            ls = log_x[small]
            out[small] = ls * (1.0 + 0.5 * lam[small] * ls)

        regular = ~small
        if regular.any():
            out[regular] = np.expm1(lam[regular] * log_x[regular]) / lam[regular]
        return out + self._shift

    def inverse(self) -> InverseBoxCoxEvaluation:
        """Return the inverse Box-Cox transform undoing this one."""
        return InverseBoxCoxEvaluation(self._lambda, self._shift)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoxCoxEvaluation):
            return NotImplemented
        return bool(
            np.array_equal(self._lambda, other._lambda)
            and np.array_equal(self._shift, other._shift)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"BoxCox(lambda={self._lambda.tolist()}, shift={self._shift.tolist()})"

    def __repr__(self) -> str:
        return (
            f"class={type(self).__name__} name={self.name} dimension={self.input_dimension} "
            f"lambda={self._lambda.tolist()} shift={self._shift.tolist()}"
        )
