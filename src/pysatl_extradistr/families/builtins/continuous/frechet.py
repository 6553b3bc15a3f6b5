"""
Frechet distribution family implementation.

Contains the Frechet (type II extreme value) family together with the
R-style functions ``dfrechet``, ``pfrechet``, ``qfrechet`` and ``rfrechet``.
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


def configure_frechet_family() -> None:
    """
    Configure and register the Frechet distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.FRECHET):
        return

    FRECHET_DOC = """
    Frechet distribution.

    Probability density function:
        f(x) = λ/σ z^(-1-λ) exp(-z^(-λ)), z = (x - μ)/σ > 0

    Cumulative distribution function:
        F(x) = exp(-z^(-λ))

    Quantile function:
        F⁻¹(p) = μ + σ (-log p)^(-1/λ)
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_ShapeLocationScale, parameters)
        lam, mu, sigma = parameters.lambda_, parameters.mu, parameters.sigma

        z = (x - mu) / sigma
        value = np.log(lam) - np.log(sigma) - (1.0 + lam) * np.log(z) - z ** (-lam)
        return np.where((z > 0) & np.isfinite(z), value, -np.inf)

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_ShapeLocationScale, parameters)
        z = (x - parameters.mu) / parameters.sigma
        return np.where(z > 0, -(z ** (-parameters.lambda_)), -np.inf)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logcdf(parameters, x))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return -np.expm1(logcdf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_ShapeLocationScale, parameters)
        lam, mu, sigma = parameters.lambda_, parameters.mu, parameters.sigma
        return mu + sigma * (-np.log(p)) ** (-1.0 / lam)

    Frechet = ParametricFamily(
        name=FamilyName.FRECHET,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, cdf=cdf, logcdf=logcdf, sf=sf, ppf=ppf),
    )
    Frechet.__doc__ = FRECHET_DOC

    @parametrization(family=Frechet)
    class _ShapeLocationScale(Parametrization):
        """
        Shape-location-scale parametrization of Frechet distribution.

        Parameters
        ----------
        lambda_ : NumericArray
            Shape parameter
        mu : NumericArray
            Location parameter
        sigma : NumericArray
            Scale parameter
        """

        lambda_: NumericArray
        mu: NumericArray
        sigma: NumericArray

        @constraint(description="lambda > 0")
        def check_lambda_positive(self) -> BoolArray:
            return self.lambda_ > 0

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> BoolArray:
            return self.sigma > 0

    ParametricFamilyRegister.register(Frechet)


def _frechet() -> ParametricFamily:
    configure_frechet_family()
    return ParametricFamilyRegister.get(FamilyName.FRECHET)


def dfrechet(
    x: ArrayLike,
    lambda_: ArrayLike = 1.0,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    log: bool = False,
) -> NumericArray:
    """
    Density of the Frechet distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles.
    lambda_ : ArrayLike, default=1.0
        Shape, ``lambda_ > 0``.
    mu : ArrayLike, default=0.0
        Location.
    sigma : ArrayLike, default=1.0
        Scale, ``sigma > 0``.
    log : bool, default=False
        If ``True``, return log-densities.
    """
    return _frechet().evaluate_density(x, log=log, lambda_=lambda_, mu=mu, sigma=sigma).unwrap()


def pfrechet(
    q: ArrayLike,
    lambda_: ArrayLike = 1.0,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the Frechet distribution."""
    return (
        _frechet()
        .evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, lambda_=lambda_, mu=mu, sigma=sigma)
        .unwrap()
    )


def qfrechet(
    p: ArrayLike,
    lambda_: ArrayLike = 1.0,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the Frechet distribution."""
    return (
        _frechet()
        .evaluate_quantile(
            p, lower_tail=lower_tail, log_p=log_p, lambda_=lambda_, mu=mu, sigma=sigma
        )
        .unwrap()
    )


def rfrechet(
    n: ArrayLike,
    lambda_: ArrayLike = 1.0,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    rng: SeedLike = None,
) -> NumericArray:
    """Random generation for the Frechet distribution."""
    return _frechet().evaluate_random(n, rng=rng, lambda_=lambda_, mu=mu, sigma=sigma).unwrap()
