"""
Stats subpackage

Numeric utilities shared by the distribution kernels:

- normal, factorial, tolerance and integer helpers (:mod:`.numeric`);
- random draw primitives on an injected generator (:mod:`.random`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .numeric import (
    INTEGER_TOLERANCE,
    SUM_TOLERANCE,
    Phi,
    factorial,
    inv_Phi,
    is_integer,
    lfactorial,
    phi,
    tol_equal,
)
from .random import rng_bern, rng_sign, rng_unif

__all__ = [
    "INTEGER_TOLERANCE",
    "SUM_TOLERANCE",
    "Phi",
    "factorial",
    "inv_Phi",
    "is_integer",
    "lfactorial",
    "phi",
    "tol_equal",
    "rng_bern",
    "rng_sign",
    "rng_unif",
]
