"""
Laplace distribution family implementation.

Contains the Laplace (double exponential) family together with the R-style
functions ``dlaplace``, ``plaplace``, ``qlaplace`` and ``rlaplace``.
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
from pysatl_extradistr.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_extradistr.distributions.sampling import SeedLike
    from pysatl_extradistr.types import ArrayLike, BoolArray, NumericArray

_LOG_HALF = np.log(0.5)


def configure_laplace_family() -> None:
    """
    Configure and register the Laplace distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LAPLACE):
        return

    LAPLACE_DOC = """
    Laplace distribution.

    Probability density function:
        f(x) = 1/(2σ) exp(-|x - μ|/σ)

    Cumulative distribution function:
        F(x) = exp(z)/2 for z < 0, 1 - exp(-z)/2 otherwise, z = (x - μ)/σ
    """

    def _z(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        return (x - parameters.mu) / parameters.sigma

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        sigma = cast(_LocationScale, parameters).sigma
        return -np.log(2.0 * sigma) - np.abs(_z(parameters, x))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        z = _z(parameters, x)
        return np.where(z < 0, _LOG_HALF + z, np.log1p(-0.5 * np.exp(-z)))

    def logsf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        z = _z(parameters, x)
        return np.where(z > 0, _LOG_HALF - z, np.log1p(-0.5 * np.exp(z)))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logcdf(parameters, x))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logsf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        mu, sigma = parameters.mu, parameters.sigma
        return np.where(
            p < 0.5,
            mu + sigma * np.log(2.0 * p),
            mu - sigma * np.log(2.0 * (1.0 - p)),
        )

    Laplace = ParametricFamily(
        name=FamilyName.LAPLACE,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, cdf=cdf, logcdf=logcdf, sf=sf, logsf=logsf, ppf=ppf),
    )
    Laplace.__doc__ = LAPLACE_DOC

    @parametrization(family=Laplace)
    class _LocationScale(Parametrization):
        mu: NumericArray
        sigma: NumericArray

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> BoolArray:
            return self.sigma > 0

    ParametricFamilyRegister.register(Laplace)


def _laplace() -> ParametricFamily:
    configure_laplace_family()
    return ParametricFamilyRegister.get(FamilyName.LAPLACE)


def dlaplace(
    x: ArrayLike, mu: ArrayLike = 0.0, sigma: ArrayLike = 1.0, log: bool = False
) -> NumericArray:
    """Density of the Laplace distribution."""
    return _laplace().evaluate_density(x, log=log, mu=mu, sigma=sigma).unwrap()


def plaplace(
    q: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the Laplace distribution."""
    return _laplace().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, mu=mu, sigma=sigma).unwrap()


def qlaplace(
    p: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the Laplace distribution."""
    return (
        _laplace()
        .evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, mu=mu, sigma=sigma)
        .unwrap()
    )


def rlaplace(
    n: ArrayLike, mu: ArrayLike = 0.0, sigma: ArrayLike = 1.0, rng: SeedLike = None
) -> NumericArray:
    """Random generation for the Laplace distribution."""
    return _laplace().evaluate_random(n, rng=rng, mu=mu, sigma=sigma).unwrap()
