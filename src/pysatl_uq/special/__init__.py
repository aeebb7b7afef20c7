"""
Special functions
=================

Numerically robust special functions underlying the distribution
evaluators:

- regularized incomplete beta function and ``log B`` (:mod:`.incomplete_beta`);
- regularized incomplete gamma function (:mod:`.incomplete_gamma`);
- standard normal helpers (:mod:`.normal`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .incomplete_beta import (
    incomplete_beta_pair,
    log_beta,
    log_incomplete_beta_pair,
    regularized_incomplete_beta,
)
from .incomplete_gamma import regularized_incomplete_gamma
from .normal import normal_cdf, normal_pdf, normal_quantile

__all__ = [
    "regularized_incomplete_beta",
    "incomplete_beta_pair",
    "log_incomplete_beta_pair",
    "log_beta",
    "regularized_incomplete_gamma",
    "normal_cdf",
    "normal_pdf",
    "normal_quantile",
]
