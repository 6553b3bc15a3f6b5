"""
Categorical distribution family implementation.

Contains the Categorical family over the categories ``1..k`` together with
the R-style functions ``dcat``, ``pcat``, ``qcat`` and ``rcat``.

The probability vector is a matrix parameter: a single vector applies to
every element, a matrix gives one probability vector per row and recycles
by row.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_extradistr.distributions.computation import KernelSet
from pysatl_extradistr.families.parametric_family import ParametricFamily
from pysatl_extradistr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradistr.families.registry import ParametricFamilyRegister
from pysatl_extradistr.stats import is_integer, tol_equal
from pysatl_extradistr.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_extradistr.distributions.sampling import SeedLike
    from pysatl_extradistr.types import ArrayLike, BoolArray, NumericArray


def configure_categorical_family() -> None:
    """
    Configure and register the Categorical distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CATEGORICAL):
        return

    CATEGORICAL_DOC = """
    Categorical distribution.

    Probability mass function:
        P[X = x] = p_x for x in {1, ..., k}

    Cumulative distribution function:
        F(x) = p_1 + ... + p_floor(x)

    Quantile function:
        F⁻¹(p) = smallest x with F(x) ≥ p
    """

    def _category_index(x: NumericArray, k: int) -> NumericArray:
        """Zero-based index of ``floor(x)`` clipped to the categories."""
        return (np.floor(np.clip(x, 1.0, float(k))) - 1.0).astype(np.intp)

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function of the Categorical distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - prob: NumericArray (one probability vector per row)
        x : NumericArray
            Points at which to evaluate the mass

        Returns
        -------
        NumericArray
            ``prob[x]`` for integer ``x`` in ``1..k``, 0 otherwise
        """
        prob = cast(_Probabilities, parameters).prob
        k = prob.shape[1]

        inside = is_integer(x) & (x >= 1) & (x <= k)
        index = _category_index(np.where(inside, np.round(x), 1.0), k)
        value = prob[np.arange(len(x)), index]
        return np.where(inside, value, 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        prob = cast(_Probabilities, parameters).prob
        k = prob.shape[1]

        cumulative = np.cumsum(prob, axis=1)
        value = cumulative[np.arange(len(x)), _category_index(x, k)]
        return np.select([x < 1, x >= k], [0.0, 1.0], default=value)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Upper tail summed from the last category down."""
        prob = cast(_Probabilities, parameters).prob
        k = prob.shape[1]

        # upper[:, j] = p_(j+1) + ... + p_k
        upper = np.cumsum(prob[:, ::-1], axis=1)[:, ::-1]
        index = np.minimum(_category_index(x, k) + 1, k - 1)
        value = upper[np.arange(len(x)), index]
        return np.select([x < 1, x >= k], [1.0, 0.0], default=value)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        prob = cast(_Probabilities, parameters).prob
        k = prob.shape[1]

        cumulative = np.cumsum(prob, axis=1)
        below = np.sum(cumulative < p[:, np.newaxis], axis=1)
        return np.minimum(below + 1, k).astype(np.float64)

    Categorical = ParametricFamily(
        name=FamilyName.CATEGORICAL,
        distr_type=UnivariateDiscrete,
        kernels=KernelSet(pdf=pmf, cdf=cdf, sf=sf, ppf=ppf),
    )
    Categorical.__doc__ = CATEGORICAL_DOC

    @parametrization(family=Categorical)
    class _Probabilities(Parametrization):
        """
        Probability vector parametrization of Categorical distribution.

        Parameters
        ----------
        prob : NumericArray
            ``(n, k)`` matrix of category probabilities, one row per element
        """

        prob: NumericArray

        _matrix_parameters = frozenset({"prob"})

        @constraint(description="0 <= prob <= 1")
        def check_prob_in_unit_interval(self) -> BoolArray:
            return np.all((self.prob >= 0) & (self.prob <= 1), axis=1)

        @constraint(description="sum(prob) == 1")
        def check_prob_sums_to_one(self) -> BoolArray:
            return tol_equal(self.prob.sum(axis=1), 1.0)

    ParametricFamilyRegister.register(Categorical)


def _categorical() -> ParametricFamily:
    configure_categorical_family()
    return ParametricFamilyRegister.get(FamilyName.CATEGORICAL)


def dcat(x: ArrayLike, prob: ArrayLike, log: bool = False) -> NumericArray:
    """
    Probability mass function of the Categorical distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of categories.
    prob : ArrayLike
        Probability vector of length ``k`` or ``(m, k)`` matrix of
        probability vectors; rows must sum to one.
    log : bool, default=False
        If ``True``, return log-probabilities.

    Examples
    --------
    >>> dcat(2, prob=[0.2, 0.3, 0.5])
    array([0.3])
    """
    return _categorical().evaluate_density(x, log=log, prob=prob).unwrap()


def pcat(
    q: ArrayLike, prob: ArrayLike, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """Distribution function of the Categorical distribution."""
    return _categorical().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, prob=prob).unwrap()


def qcat(
    p: ArrayLike, prob: ArrayLike, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """Quantile function of the Categorical distribution."""
    return (
        _categorical().evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, prob=prob).unwrap()
    )


def rcat(n: ArrayLike, prob: ArrayLike, rng: SeedLike = None) -> NumericArray:
    """Random generation for the Categorical distribution."""
    return _categorical().evaluate_random(n, rng=rng, prob=prob).unwrap()
