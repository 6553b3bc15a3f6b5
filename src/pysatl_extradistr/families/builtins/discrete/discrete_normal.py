"""
Discrete normal distribution family implementation.

Contains the discretized normal family, the law of ``floor(Y)`` for a normal
``Y``, together with the R-style functions ``ddnorm``, ``pdnorm``, ``qdnorm``
and ``rdnorm``.
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
from pysatl_extradistr.stats import Phi, inv_Phi, is_integer
from pysatl_extradistr.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_extradistr.distributions.sampling import SeedLike
    from pysatl_extradistr.types import ArrayLike, BoolArray, NumericArray


def configure_discrete_normal_family() -> None:
    """
    Configure and register the discrete normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DISCRETE_NORMAL):
        return

    DISCRETE_NORMAL_DOC = """
    Discrete normal distribution.

    Probability mass function:
        P[X = x] = Φ((x - μ + 1)/σ) - Φ((x - μ)/σ) for integer x

    Cumulative distribution function:
        F(x) = Φ((floor(x) - μ + 1)/σ)

    Quantile function:
        F⁻¹(p) = ceil(μ + σΦ⁻¹(p)) - 1
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function.

        Above the location the mass is taken as a difference of upper tails,
        which keeps it from cancelling to zero far out on the right.
        """
        parameters = cast(_LocationScale, parameters)
        mu, sigma = parameters.mu, parameters.sigma

        lower = (x - mu) / sigma
        upper = (x + 1.0 - mu) / sigma
        value = np.where(x >= mu, Phi(-lower) - Phi(-upper), Phi(upper) - Phi(lower))
        return np.where(is_integer(x), value, 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        return Phi((np.floor(x) + 1.0 - parameters.mu) / parameters.sigma)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        return Phi(-(np.floor(x) + 1.0 - parameters.mu) / parameters.sigma)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        return np.ceil(parameters.mu + parameters.sigma * inv_Phi(p)) - 1.0

    DiscreteNormal = ParametricFamily(
        name=FamilyName.DISCRETE_NORMAL,
        distr_type=UnivariateDiscrete,
        kernels=KernelSet(pdf=pmf, cdf=cdf, sf=sf, ppf=ppf),
    )
    DiscreteNormal.__doc__ = DISCRETE_NORMAL_DOC

    @parametrization(family=DiscreteNormal)
    class _LocationScale(Parametrization):
        """
        Location-scale parametrization of the underlying normal.

        Parameters
        ----------
        mu : NumericArray
            Mean of the underlying normal
        sigma : NumericArray
            Standard deviation of the underlying normal
        """

        mu: NumericArray
        sigma: NumericArray

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> BoolArray:
            return self.sigma > 0

    ParametricFamilyRegister.register(DiscreteNormal)


def _discrete_normal() -> ParametricFamily:
    configure_discrete_normal_family()
    return ParametricFamilyRegister.get(FamilyName.DISCRETE_NORMAL)


def ddnorm(
    x: ArrayLike, mu: ArrayLike = 0.0, sigma: ArrayLike = 1.0, log: bool = False
) -> NumericArray:
    """
    Probability mass function of the discrete normal distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles; non-integer values have mass 0.
    mu : ArrayLike, default=0.0
        Mean of the underlying normal.
    sigma : ArrayLike, default=1.0
        Standard deviation of the underlying normal, ``sigma > 0``.
    log : bool, default=False
        If ``True``, return log-probabilities.
    """
    return _discrete_normal().evaluate_density(x, log=log, mu=mu, sigma=sigma).unwrap()


def pdnorm(
    q: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the discrete normal distribution."""
    return (
        _discrete_normal()
        .evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, mu=mu, sigma=sigma)
        .unwrap()
    )


def qdnorm(
    p: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the discrete normal distribution."""
    return (
        _discrete_normal()
        .evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, mu=mu, sigma=sigma)
        .unwrap()
    )


def rdnorm(
    n: ArrayLike, mu: ArrayLike = 0.0, sigma: ArrayLike = 1.0, rng: SeedLike = None
) -> NumericArray:
    """Random generation for the discrete normal distribution."""
    return _discrete_normal().evaluate_random(n, rng=rng, mu=mu, sigma=sigma).unwrap()
