"""
Inverse Box-Cox Transform
=========================

Componentwise inverse of the Box-Cox transform:

``y_j = (lambda_j (x_j - shift_j) + 1)^(1 / lambda_j)``

Notes
-----
- When ``|lambda_j x'^2| < 1e-8`` (``x' = x_j - shift_j``) the second order
  expansion ``exp(x') (1 - lambda_j x'^2 / 2)`` is used. It covers
  ``lambda_j = 0`` exactly, where the transform is ``exp(x')``.
- Outside the expansion the base ``lambda_j x' + 1`` must be positive. A
  non-positive base raises :class:`~pysatl_uq.errors.InvalidArgumentError`
  for point and sample calls alike; a sample fails as a whole.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_uq.errors import InvalidArgumentError

from .evaluation import Evaluation

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any, Self

    from pysatl_uq.evaluations.box_cox import BoxCoxEvaluation
    from pysatl_uq.types import FloatArray

TAYLOR_THRESHOLD = 1e-8


def box_cox_parameters(lambda_: Any, shift: Any = None) -> tuple[FloatArray, FloatArray]:
    """
    Validate the exponent and shift vectors of a Box-Cox transform.

    Returns
    -------
    tuple[FloatArray, FloatArray]
        Read-only copies of ``lambda_`` and ``shift`` (zeros if omitted).

    Raises
    ------
    InvalidArgumentError
        If ``lambda_`` is empty or not one-dimensional, or if ``shift`` does
        not have the dimension of ``lambda_``.
    """
    lam = np.array(lambda_, dtype=np.float64, ndmin=1)
    if lam.ndim != 1 or lam.size == 0:
        raise InvalidArgumentError("The exponent vector lambda must be a non-empty 1D vector")
    if shift is None:
        sh = np.zeros_like(lam)
    else:
        sh = np.array(shift, dtype=np.float64, ndmin=1)
        if sh.ndim != 1 or sh.size != lam.size:
            raise InvalidArgumentError(
                f"The exponent vector has a dimension={lam.size} "
                f"different from the shift dimension={sh.size}"
            )
    lam.flags.writeable = False
    sh.flags.writeable = False
    return lam, sh


class InverseBoxCoxEvaluation(Evaluation):
    """
    Inverse Box-Cox transform.

    Parameters
    ----------
    lambda_ : array_like
        Exponents, one per component.
    shift : array_like, optional
        Shifts subtracted from the input, zeros by default.
    name : str, optional
        Instance name.

    Raises
    ------
    InvalidArgumentError
        If ``lambda_`` is empty or ``shift`` has another dimension.

    Examples
    --------
    >>> evaluation = InverseBoxCoxEvaluation([0.5])
    >>> evaluation([2.0])
    array([4.])
    """

    _persistent_fields = ("lambda_", "shift_")

    def __init__(self, lambda_: Any, shift: Any = None, name: str | None = None):
        lam, sh = box_cox_parameters(lambda_, shift)
        super().__init__(lam.size, lam.size, name)
        self._lambda = lam
        self._shift = sh

    @property
    def lambda_(self) -> FloatArray:
        """Exponents of the transform."""
        return self._lambda

    @property
    def shift_(self) -> FloatArray:
        """Shifts of the transform."""
        return self._shift

    @classmethod
    def _from_fields(cls, fields: Mapping[str, Any]) -> Self:
        return cls(fields["lambda_"], fields["shift_"])

    def _kernel(self, block: FloatArray) -> FloatArray:
        x = block - self._shift
        lam = np.broadcast_to(self._lambda, x.shape)
        out = np.empty_like(x)

        small = np.abs(lam * x * x) < TAYLOR_THRESHOLD
        if small.any():
            xs = x[small]
            out[small] = np.exp(xs) * (1.0 - 0.5 * lam[small] * xs * xs)

        regular = ~small
        if regular.any():
            xr = x[regular]
            lr = lam[regular]
            lx = lr * xr
            if np.any(lx + 1.0 <= 0.0):
                bad = float((lx + 1.0)[lx + 1.0 <= 0.0][0])
                raise InvalidArgumentError(
                    f"Can not apply the inverse Box-Cox function: non-positive base {bad}"
                )
            out[regular] = np.exp(np.log1p(lx) / lr)
        return out

    def inverse(self) -> BoxCoxEvaluation:
        """Return the Box-Cox transform undoing this one."""
        from pysatl_uq.evaluations.box_cox import BoxCoxEvaluation

        return BoxCoxEvaluation(self._lambda, self._shift)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InverseBoxCoxEvaluation):
            return NotImplemented
        return bool(
            np.array_equal(self._lambda, other._lambda)
            and np.array_equal(self._shift, other._shift)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"InverseBoxCox(lambda={self._lambda.tolist()}, shift={self._shift.tolist()})"

    def __repr__(self) -> str:
        return (
            f"class={type(self).__name__} name={self.name} dimension={self.input_dimension} "
            f"lambda={self._lambda.tolist()} shift={self._shift.tolist()}"
        )
