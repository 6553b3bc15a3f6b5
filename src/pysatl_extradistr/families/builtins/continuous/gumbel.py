"""
Gumbel distribution family implementation.

Contains the Gumbel (type I extreme value) family together with the R-style
functions ``dgumbel``, ``pgumbel``, ``qgumbel`` and ``rgumbel``.
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


def configure_gumbel_family() -> None:
    """
    Configure and register the Gumbel distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GUMBEL):
        return

    GUMBEL_DOC = """
    Gumbel distribution.

    Probability density function:
        f(x) = 1/σ exp(-(z + exp(-z))), z = (x - μ)/σ

    Cumulative distribution function:
        F(x) = exp(-exp(-z))

    Quantile function:
        F⁻¹(p) = μ - σ log(-log p)
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        mu, sigma = parameters.mu, parameters.sigma

        z = (x - mu) / sigma
        value = -np.log(sigma) - (z + np.exp(-z))
        return np.where(np.isfinite(x), value, -np.inf)

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        return -np.exp(-(x - parameters.mu) / parameters.sigma)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logcdf(parameters, x))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return -np.expm1(logcdf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_LocationScale, parameters)
        return parameters.mu - parameters.sigma * np.log(-np.log(p))

    Gumbel = ParametricFamily(
        name=FamilyName.GUMBEL,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, cdf=cdf, logcdf=logcdf, sf=sf, ppf=ppf),
    )
    Gumbel.__doc__ = GUMBEL_DOC

    @parametrization(family=Gumbel)
    class _LocationScale(Parametrization):
        """
        Location-scale parametrization of Gumbel distribution.

        Parameters
        ----------
        mu : NumericArray
            Location parameter
        sigma : NumericArray
            Scale parameter
        """

        mu: NumericArray
        sigma: NumericArray

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> BoolArray:
            return self.sigma > 0

    ParametricFamilyRegister.register(Gumbel)


def _gumbel() -> ParametricFamily:
    configure_gumbel_family()
    return ParametricFamilyRegister.get(FamilyName.GUMBEL)


def dgumbel(
    x: ArrayLike, mu: ArrayLike = 0.0, sigma: ArrayLike = 1.0, log: bool = False
) -> NumericArray:
    """Density of the Gumbel distribution."""
    return _gumbel().evaluate_density(x, log=log, mu=mu, sigma=sigma).unwrap()


def pgumbel(
    q: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the Gumbel distribution."""
    return _gumbel().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, mu=mu, sigma=sigma).unwrap()


def qgumbel(
    p: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the Gumbel distribution."""
    return (
        _gumbel()
        .evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, mu=mu, sigma=sigma)
        .unwrap()
    )


def rgumbel(
    n: ArrayLike, mu: ArrayLike = 0.0, sigma: ArrayLike = 1.0, rng: SeedLike = None
) -> NumericArray:
    """Random generation for the Gumbel distribution."""
    return _gumbel().evaluate_random(n, rng=rng, mu=mu, sigma=sigma).unwrap()
