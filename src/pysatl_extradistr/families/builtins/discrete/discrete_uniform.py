"""
Discrete uniform distribution family implementation.

Contains the discrete uniform family on the integers ``min_..max_`` together
with the R-style functions ``ddunif``, ``pdunif``, ``qdunif`` and ``rdunif``.
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
from pysatl_extradistr.stats import is_integer
from pysatl_extradistr.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_extradistr.distributions.sampling import SeedLike
    from pysatl_extradistr.types import ArrayLike, BoolArray, NumericArray


def configure_discrete_uniform_family() -> None:
    """
    Configure and register the discrete uniform distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_UNIFORM):
        return

    DISCRETE_UNIFORM_DOC = """
    Discrete uniform distribution.

    Probability mass function:
        P[X = x] = 1 / (max - min + 1) for integer x in [min, max]

    Cumulative distribution function:
        F(x) = (floor(x) - min + 1) / (max - min + 1)
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Limits, parameters)
        low, high = parameters.min_, parameters.max_

        inside = is_integer(x) & (x >= low) & (x <= high)
        return np.where(inside, 1.0 / (high - low + 1.0), 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Limits, parameters)
        low, high = parameters.min_, parameters.max_

        value = (np.floor(x) - low + 1.0) / (high - low + 1.0)
        return np.select([x < low, x >= high], [0.0, 1.0], default=value)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Limits, parameters)
        low, high = parameters.min_, parameters.max_
        return np.maximum(low + np.ceil(p * (high - low + 1.0)) - 1.0, low)

    DiscreteUniform = ParametricFamily(
        name=FamilyName.DISCRETE_UNIFORM,
        distr_type=UnivariateDiscrete,
        kernels=KernelSet(pdf=pmf, cdf=cdf, ppf=ppf),
    )
    DiscreteUniform.__doc__ = DISCRETE_UNIFORM_DOC

    @parametrization(family=DiscreteUniform)
    class _Limits(Parametrization):
        """
        Limits parametrization of discrete uniform distribution.

        Parameters
        ----------
        min_ : NumericArray
            Smallest value of the support
        max_ : NumericArray
            Largest value of the support
        """

        min_: NumericArray
        max_: NumericArray

        @constraint(description="min and max are integers")
        def check_limits_integer(self) -> BoolArray:
            return is_integer(self.min_) & is_integer(self.max_)

        @constraint(description="min <= max")
        def check_limits_ordered(self) -> BoolArray:
            return self.min_ <= self.max_

    ParametricFamilyRegister.register(DiscreteUniform)


def _discrete_uniform() -> ParametricFamily:
    configure_discrete_uniform_family()
    return ParametricFamilyRegister.get(FamilyName.DISCRETE_UNIFORM)


def ddunif(x: ArrayLike, min_: ArrayLike, max_: ArrayLike, log: bool = False) -> NumericArray:
    """
    Probability mass function of the discrete uniform distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles.
    min_, max_ : ArrayLike
        Integer limits of the support, ``min_ <= max_``.
    log : bool, default=False
        If ``True``, return log-probabilities.
    """
    return _discrete_uniform().evaluate_density(x, log=log, min_=min_, max_=max_).unwrap()


def pdunif(
    q: ArrayLike,
    min_: ArrayLike,
    max_: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the discrete uniform distribution."""
    return (
        _discrete_uniform()
        .evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, min_=min_, max_=max_)
        .unwrap()
    )


def qdunif(
    p: ArrayLike,
    min_: ArrayLike,
    max_: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the discrete uniform distribution."""
    return (
        _discrete_uniform()
        .evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, min_=min_, max_=max_)
        .unwrap()
    )


def rdunif(n: ArrayLike, min_: ArrayLike, max_: ArrayLike, rng: SeedLike = None) -> NumericArray:
    """Random generation for the discrete uniform distribution."""
    return _discrete_uniform().evaluate_random(n, rng=rng, min_=min_, max_=max_).unwrap()
