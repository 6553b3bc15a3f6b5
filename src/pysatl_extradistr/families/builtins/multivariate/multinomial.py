"""
Multinomial distribution family implementation.

Contains the Multinomial family together with the R-style functions
``dmnom`` and ``rmnom``. Counts and probability vectors are matrices with
one observation per row; the number of trials is a vector.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import xlogy

from pysatl_extradistr.distributions.computation import KernelSet
from pysatl_extradistr.families.parametric_family import ParametricFamily
from pysatl_extradistr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradistr.families.registry import ParametricFamilyRegister
from pysatl_extradistr.stats import is_integer, lfactorial, tol_equal
from pysatl_extradistr.types import FamilyName, MultivariateDiscrete

if TYPE_CHECKING:
    from pysatl_extradistr.distributions.sampling import SeedLike
    from pysatl_extradistr.types import ArrayLike, BoolArray, NumericArray


def configure_multinomial_family() -> None:
    """
    Configure and register the Multinomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.MULTINOMIAL):
        return

    MULTINOMIAL_DOC = """
    Multinomial distribution.

    Probability mass function:
        P[X = x] = n! / Πx_i! Π p_i^x_i for non-negative integers with Σx_i = n

    Random generation splits the trials category by category with
    conditional Binomial draws; the last category receives the remainder.
    """

    def logpmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_TrialsProbabilities, parameters)
        size, prob = parameters.size, parameters.prob

        counts = np.all(is_integer(x) & (x >= 0), axis=1) & tol_equal(x.sum(axis=1), size)
        safe_x = np.where(counts[:, np.newaxis], x, 0.0)
        value = lfactorial(size) - lfactorial(safe_x).sum(axis=1) + xlogy(safe_x, prob).sum(axis=1)
        return np.where(counts, value, -np.inf)

    def rvs(parameters: Parametrization, size: int, rng: np.random.Generator) -> NumericArray:
        """
        Draw counts with sequential conditional Binomials.

        Category ``j`` receives ``Binomial(left, p_j / (p_j + ... + p_k))``
        of the trials not yet assigned.
        """
        parameters = cast(_TrialsProbabilities, parameters)
        prob = parameters.prob
        k = prob.shape[1]

        left = np.round(parameters.size).astype(np.int64)
        remaining = np.ones(size)
        out = np.zeros((size, k))
        for j in range(k - 1):
            share = np.where(remaining > 0, prob[:, j] / remaining, 0.0)
            draws = rng.binomial(left, np.clip(share, 0.0, 1.0))
            out[:, j] = draws
            left = left - draws
            remaining = remaining - prob[:, j]
        out[:, k - 1] = left
        return out

    Multinomial = ParametricFamily(
        name=FamilyName.MULTINOMIAL,
        distr_type=MultivariateDiscrete,
        kernels=KernelSet(logpdf=logpmf, rvs=rvs),
    )
    Multinomial.__doc__ = MULTINOMIAL_DOC

    @parametrization(family=Multinomial)
    class _TrialsProbabilities(Parametrization):
        """
        Trials-probabilities parametrization of Multinomial distribution.

        Parameters
        ----------
        size : NumericArray
            Number of trials
        prob : NumericArray
            ``(n, k)`` matrix of category probabilities
        """

        size: NumericArray
        prob: NumericArray

        _matrix_parameters = frozenset({"prob"})

        @constraint(description="size is a non-negative integer")
        def check_size_count(self) -> BoolArray:
            return is_integer(self.size) & (self.size >= 0)

        @constraint(description="0 <= prob <= 1")
        def check_prob_in_unit_interval(self) -> BoolArray:
            return np.all((self.prob >= 0) & (self.prob <= 1), axis=1)

        @constraint(description="sum(prob) == 1")
        def check_prob_sums_to_one(self) -> BoolArray:
            return tol_equal(self.prob.sum(axis=1), 1.0)

    ParametricFamilyRegister.register(Multinomial)


def _multinomial() -> ParametricFamily:
    configure_multinomial_family()
    return ParametricFamilyRegister.get(FamilyName.MULTINOMIAL)


def dmnom(x: ArrayLike, size: ArrayLike, prob: ArrayLike, log: bool = False) -> NumericArray:
    """
    Probability mass function of the Multinomial distribution.

    Parameters
    ----------
    x : ArrayLike
        ``k``-vector or ``(m, k)`` matrix of counts, one observation per row.
    size : ArrayLike
        Number of trials, a non-negative integer.
    prob : ArrayLike
        ``k``-vector or matrix of category probabilities; rows must sum to one.
    log : bool, default=False
        If ``True``, return log-probabilities.
    """
    return _multinomial().evaluate_density(x, log=log, size=size, prob=prob).unwrap()


def rmnom(n: ArrayLike, size: ArrayLike, prob: ArrayLike, rng: SeedLike = None) -> NumericArray:
    """
    Random generation for the Multinomial distribution.

    Returns
    -------
    NumericArray
        ``(n, k)`` matrix of counts; every row sums to its ``size``.
    """
    return _multinomial().evaluate_random(n, rng=rng, size=size, prob=prob).unwrap()
