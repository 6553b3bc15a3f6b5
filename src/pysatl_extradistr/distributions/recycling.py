"""
Argument Recycling
==================

R-style vector recycling for every argument of a vectorized call.

The output length of a call is the maximum length among its arguments;
output element ``i`` reads element ``i mod len(arg)`` of each argument.
Lengths need not be multiples of one another. Matrix arguments recycle
by row, so a ``(m, k)`` matrix contributes ``m`` to the length computation.

Notes
-----
- NumPy shape broadcasting is *not* used here: a length 2 and a length 3
  argument give an output of length 3 reading ``a[0], a[1], a[0]``.
- A zero-length argument makes the whole call empty.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pysatl_extradistr.types import ArrayLike, BoolArray, NumericArray


def as_vector(values: ArrayLike, name: str = "x") -> NumericArray:
    """
    Coerce an argument to a 1D float64 array (a private copy).

    Parameters
    ----------
    values : ArrayLike
        Scalar, sequence or 1D array.
    name : str, default="x"
        Argument name used in error messages.

    Returns
    -------
    NumericArray
        1D copy of ``values``.

    Raises
    ------
    ValueError
        If ``values`` has more than one dimension.
    """
    arr = np.array(values, dtype=np.float64, ndmin=1)
    if arr.ndim != 1:
        raise ValueError(f"'{name}' must be a scalar or a vector, got {arr.ndim} dimensions.")
    return arr


def as_matrix(values: ArrayLike, name: str = "x") -> NumericArray:
    """
    Coerce an argument to a 2D float64 array (a private copy).

    A vector becomes a single row, a scalar a ``(1, 1)`` matrix.

    Raises
    ------
    ValueError
        If ``values`` has more than two dimensions.
    """
    arr = np.array(values, dtype=np.float64, ndmin=1)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2:
        raise ValueError(f"'{name}' must be a vector or a matrix, got {arr.ndim} dimensions.")
    return arr


def recycled_length(arrays: Sequence[NumericArray]) -> int:
    """
    Length of the output of a call over ``arrays``.

    Returns 0 when any array is empty, the maximum of the lengths otherwise.
    """
    lengths = [len(arr) for arr in arrays]
    if not lengths or min(lengths) == 0:
        return 0
    return max(lengths)


def recycle(array: NumericArray, n: int) -> NumericArray:
    """
    Cycle ``array`` (row-wise for matrices) to length ``n``.

    Examples
    --------
    >>> recycle(np.array([1.0, 2.0]), 5)
    array([1., 2., 1., 2., 1.])
    """
    if len(array) == n:
        return array
    return array[np.arange(n) % len(array)]


def recycle_all(arrays: Sequence[NumericArray]) -> tuple[int, list[NumericArray]]:
    """
    Recycle every array of a call to the common output length.

    Returns
    -------
    tuple[int, list[NumericArray]]
        The output length and the recycled arrays, in input order.
    """
    n = recycled_length(arrays)
    return n, [recycle(arr, n) for arr in arrays]


def row_has_nan(array: NumericArray) -> BoolArray:
    """Per-element (vectors) or per-row (matrices) NaN mask."""
    if array.ndim == 1:
        return np.isnan(array)
    return np.isnan(array).any(axis=1)


__all__ = [
    "as_vector",
    "as_matrix",
    "recycled_length",
    "recycle",
    "recycle_all",
    "row_has_nan",
]
