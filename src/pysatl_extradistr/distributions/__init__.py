"""
Distributions subpackage

The vectorized evaluation engine shared by every family:

- R-style argument recycling (:mod:`.recycling`);
- kernel sets with log and tail derivations (:mod:`.computation`);
- evaluation results and the once-per-call diagnostic (:mod:`.evaluation`);
- sampling strategies on an injected generator (:mod:`.sampling`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import KernelSet
from .evaluation import Evaluation, NaNsProducedWarning
from .recycling import (
    as_matrix,
    as_vector,
    recycle,
    recycle_all,
    recycled_length,
)
from .sampling import (
    InverseTransformSampling,
    KernelSampling,
    SamplingStrategy,
    resolve_rng,
    resolve_size,
)

__all__ = [
    # kernels
    "KernelSet",
    # results
    "Evaluation",
    "NaNsProducedWarning",
    # recycling
    "as_matrix",
    "as_vector",
    "recycle",
    "recycle_all",
    "recycled_length",
    # sampling
    "SamplingStrategy",
    "InverseTransformSampling",
    "KernelSampling",
    "resolve_rng",
    "resolve_size",
]
