"""
Exceptions raised by PySATL UQ.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidArgumentError(ValueError):
    r"""Raised when parameters or evaluation inputs are outside their valid domain."""

    def __init__(self, message: str = "Invalid argument.") -> None:
        self.message = message
        super().__init__(self.message)


class ConvergenceError(RuntimeError):
    r"""Raised when an iterative special-function evaluation does not converge."""

    def __init__(self, message: str = "Iterative evaluation did not converge.") -> None:
        self.message = message
        super().__init__(self.message)


__all__ = [
    "InvalidArgumentError",
    "ConvergenceError",
]
