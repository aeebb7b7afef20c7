"""
Distribution functions
======================

Scalar CDF (``p_*``), quantile (``q_*``), density (``d_*``) and random
variate (``r_*``) evaluators of standard parametric distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .gamma import p_gamma
from .pareto import d_pareto, p_pareto, q_pareto, r_pareto, r_pareto_sample
from .student import d_student, p_student, q_student, r_student, r_student_sample

__all__ = [
    # Student
    "p_student",
    "q_student",
    "d_student",
    "r_student",
    "r_student_sample",
    # Pareto
    "p_pareto",
    "q_pareto",
    "d_pareto",
    "r_pareto",
    "r_pareto_sample",
    # Gamma
    "p_gamma",
]
