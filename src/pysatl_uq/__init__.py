"""
PySATL UQ
=========

Uncertainty quantification core: special functions, Student and Pareto
distribution functions, Box-Cox transforms, the Marshall-Olkin copula,
parametric families, and parallel batch evaluation.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .config import batch_config, get_batch_config, set_batch_config
from .copulas import *
from .copulas import __all__ as _copulas_all
from .dist_func import *
from .dist_func import __all__ as _dist_func_all
from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import ConvergenceError, InvalidArgumentError
from .evaluations import *
from .evaluations import __all__ as _evaluations_all
from .families import *
from .families import __all__ as _family_all
from .logging import disable_logging, set_log_level
from .persistence import Persistent, PersistentState
from .random_generator import set_seed
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-uq")
__all__ = [
    "__version__",
    "InvalidArgumentError",
    "ConvergenceError",
    "Persistent",
    "PersistentState",
    "batch_config",
    "get_batch_config",
    "set_batch_config",
    "set_seed",
    "set_log_level",
    "disable_logging",
    *_copulas_all,
    *_dist_func_all,
    *_distr_all,
    *_evaluations_all,
    *_family_all,
    *_types_all,
]

del _copulas_all
del _dist_func_all
del _distr_all
del _evaluations_all
del _family_all
del _types_all
