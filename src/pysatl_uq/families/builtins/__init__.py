"""
Built-in distribution families available by default in PySATL UQ.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_uq.families.builtins.continuous import (
    configure_pareto_family,
    configure_student_family,
)

__all__ = [
    "configure_student_family",
    "configure_pareto_family",
]
