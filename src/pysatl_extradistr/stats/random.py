"""
Draw Primitives
===============

Basic random draws composed by the random variate generators.

Every primitive takes an explicit :class:`numpy.random.Generator`; nothing
here touches a global random state.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pysatl_extradistr.types import ArrayLike, NumericArray


def rng_unif(rng: np.random.Generator, size: int) -> NumericArray:
    """
    Draw standard uniforms strictly inside ``(0, 1)``.

    Exact zeros are redrawn so that inversion never hits an infinite
    quantile at the lower end.
    """
    u = rng.random(size)
    zero = u == 0.0
    while np.any(zero):
        u[zero] = rng.random(int(zero.sum()))
        zero = u == 0.0
    return u


def rng_bern(rng: np.random.Generator, p: ArrayLike, size: int) -> NumericArray:
    """Draw Bernoulli(p) variates as 0.0 / 1.0."""
    return (rng_unif(rng, size) <= np.asarray(p, dtype=np.float64)).astype(np.float64)


def rng_sign(rng: np.random.Generator, size: int) -> NumericArray:
    """Draw Rademacher variates, -1.0 or 1.0 with probability 1/2 each."""
    return np.where(rng_unif(rng, size) > 0.5, 1.0, -1.0)


__all__ = [
    "rng_unif",
    "rng_bern",
    "rng_sign",
]
