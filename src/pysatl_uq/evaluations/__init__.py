"""
Evaluations subpackage

Vector transforms evaluated point by point or on whole samples:

- :class:`Evaluation` — base class with call counting and history;
- :class:`InverseBoxCoxEvaluation` and :class:`BoxCoxEvaluation`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .box_cox import BoxCoxEvaluation
from .evaluation import Evaluation
from .history import HistoryStrategy
from .inverse_box_cox import InverseBoxCoxEvaluation

__all__ = [
    "Evaluation",
    "HistoryStrategy",
    "InverseBoxCoxEvaluation",
    "BoxCoxEvaluation",
]
