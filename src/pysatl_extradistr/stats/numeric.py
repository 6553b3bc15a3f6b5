"""
Shared Numeric Helpers
======================

Element-wise numeric helpers reused by the kernels of many families:

- standard normal density, distribution and quantile functions;
- factorial and log-factorial of (possibly non-integer) doubles;
- tolerance equality and integer-valued double tests.

All functions accept scalars or arrays and follow NumPy broadcasting.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any

import numpy as np
from scipy.special import gamma, gammaln, ndtr, ndtri

if TYPE_CHECKING:
    from pysatl_extradistr.types import ArrayLike

SUM_TOLERANCE = 1e-8
"""Absolute tolerance used when a probability vector must sum to one."""

INTEGER_TOLERANCE = 1e-7
"""Tolerance below which a double is considered integer valued."""

_SQRT_2PI = np.sqrt(2.0 * np.pi)


def tol_equal(x: ArrayLike, y: ArrayLike, tol: float = SUM_TOLERANCE) -> Any:
    """
    Compare two values up to an absolute tolerance.

    Parameters
    ----------
    x, y : ArrayLike
        Values to compare.
    tol : float, default=SUM_TOLERANCE
        Absolute tolerance.

    Returns
    -------
    bool or BoolArray
        ``|x - y| < tol`` element-wise.
    """
    return np.abs(np.subtract(x, y)) < tol


def is_integer(x: ArrayLike) -> Any:
    """
    Check whether doubles hold whole numbers.

    Infinite and NaN values are never integers.
    """
    arr = np.asarray(x, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        return np.isfinite(arr) & (np.abs(arr - np.round(arr)) < INTEGER_TOLERANCE)


def phi(x: ArrayLike) -> Any:
    """Standard normal probability density function."""
    arr = np.asarray(x, dtype=np.float64)
    return np.exp(-0.5 * arr * arr) / _SQRT_2PI


def Phi(x: ArrayLike) -> Any:  # noqa: N802
    """Standard normal cumulative distribution function."""
    return ndtr(np.asarray(x, dtype=np.float64))


def inv_Phi(p: ArrayLike) -> Any:  # noqa: N802
    """
    Standard normal quantile function.

    Returns ``-inf``/``inf`` at 0 and 1 and NaN outside ``[0, 1]``.
    """
    return ndtri(np.asarray(p, dtype=np.float64))


def factorial(x: ArrayLike) -> Any:
    """
    Factorial extended to doubles as ``Gamma(x + 1)``.

    Negative values yield NaN.
    """
    arr = np.asarray(x, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        return np.where(arr < 0, np.nan, gamma(arr + 1.0))


def lfactorial(x: ArrayLike) -> Any:
    """
    Log-factorial extended to doubles as ``log Gamma(x + 1)``.

    Negative values yield NaN.
    """
    arr = np.asarray(x, dtype=np.float64)
    with np.errstate(invalid="ignore"):
        return np.where(arr < 0, np.nan, gammaln(arr + 1.0))


__all__ = [
    "SUM_TOLERANCE",
    "INTEGER_TOLERANCE",
    "tol_equal",
    "is_integer",
    "phi",
    "Phi",
    "inv_Phi",
    "factorial",
    "lfactorial",
]
