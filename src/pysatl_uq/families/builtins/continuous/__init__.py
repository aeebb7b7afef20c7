"""
Built-in continuous distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_uq.families.builtins.continuous.pareto import configure_pareto_family
from pysatl_uq.families.builtins.continuous.student import configure_student_family

__all__ = [
    "configure_student_family",
    "configure_pareto_family",
]
