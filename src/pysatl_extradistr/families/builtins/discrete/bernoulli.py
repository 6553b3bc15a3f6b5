"""
Bernoulli distribution family implementation.

Contains the Bernoulli family on ``{0, 1}`` together with the R-style
functions ``dbern``, ``pbern``, ``qbern`` and ``rbern``.
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
from pysatl_extradistr.stats import rng_bern
from pysatl_extradistr.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_extradistr.distributions.sampling import SeedLike
    from pysatl_extradistr.types import ArrayLike, BoolArray, NumericArray


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli distribution.

    Probability mass function:
        P[X = 1] = p, P[X = 0] = 1 - p
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        prob = cast(_Probability, parameters).prob
        return np.select([x == 1, x == 0], [prob, 1.0 - prob], default=0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        prob = cast(_Probability, parameters).prob
        return np.select([x < 0, x >= 1], [0.0, 1.0], default=1.0 - prob)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        prob = cast(_Probability, parameters).prob
        return np.select([x < 0, x >= 1], [1.0, 0.0], default=prob)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        prob = cast(_Probability, parameters).prob
        return np.where(p <= 1.0 - prob, 0.0, 1.0)

    def rvs(parameters: Parametrization, size: int, rng: np.random.Generator) -> NumericArray:
        prob = cast(_Probability, parameters).prob
        return rng_bern(rng, prob, size)

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        kernels=KernelSet(pdf=pmf, cdf=cdf, sf=sf, ppf=ppf, rvs=rvs),
    )
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli)
    class _Probability(Parametrization):
        prob: NumericArray

        @constraint(description="0 <= prob <= 1")
        def check_prob_in_unit_interval(self) -> BoolArray:
            return (self.prob >= 0) & (self.prob <= 1)

    ParametricFamilyRegister.register(Bernoulli)


def _bernoulli() -> ParametricFamily:
    configure_bernoulli_family()
    return ParametricFamilyRegister.get(FamilyName.BERNOULLI)


def dbern(x: ArrayLike, prob: ArrayLike = 0.5, log: bool = False) -> NumericArray:
    """
    Probability mass function of the Bernoulli distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles.
    prob : ArrayLike, default=0.5
        Probability of success, ``0 <= prob <= 1``.
    log : bool, default=False
        If ``True``, return log-probabilities.
    """
    return _bernoulli().evaluate_density(x, log=log, prob=prob).unwrap()


def pbern(
    q: ArrayLike, prob: ArrayLike = 0.5, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """Distribution function of the Bernoulli distribution."""
    return _bernoulli().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, prob=prob).unwrap()


def qbern(
    p: ArrayLike, prob: ArrayLike = 0.5, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """Quantile function of the Bernoulli distribution."""
    return _bernoulli().evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, prob=prob).unwrap()


def rbern(n: ArrayLike, prob: ArrayLike = 0.5, rng: SeedLike = None) -> NumericArray:
    """Random generation for the Bernoulli distribution."""
    return _bernoulli().evaluate_random(n, rng=rng, prob=prob).unwrap()
