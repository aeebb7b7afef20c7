"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL UQ:

- distribution protocol (:mod:`.distribution`);
- characteristic conversions (:mod:`.conversions`);
- sampling protocol, array-backed samples and validators (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import (
    AnalyticalComputation,
    ComputationMethod,
    FittedComputationMethod,
)
from .distribution import Distribution
from .sampling import ArraySample, Sample, as_point, as_sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    DirectSamplingUnivariateStrategy,
    SamplingStrategy,
)
from .support import ContinuousSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    "ComputationMethod",
    "FittedComputationMethod",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    "as_point",
    "as_sample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "DirectSamplingUnivariateStrategy",
    # support
    "Support",
    "ContinuousSupport",
]
