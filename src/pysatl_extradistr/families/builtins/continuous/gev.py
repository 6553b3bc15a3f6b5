"""
Generalized extreme value distribution family implementation.

Contains the GEV family in its location-scale-shape parametrization together
with the R-style functions ``dgev``, ``pgev``, ``qgev`` and ``rgev``.
The shape ``xi = 0`` is the Gumbel limit and is handled exactly.
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


def configure_gev_family() -> None:
    """
    Configure and register the generalized extreme value distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GEV):
        return

    GEV_DOC = """
    Generalized extreme value distribution.

    With z = (x - μ)/σ and t(z) = 1 + ξz (t(z) = exp(-z) when ξ = 0):

    Probability density function:
        f(x) = 1/σ t^(-1/ξ - 1) exp(-t^(-1/ξ)) on the support t > 0

    Cumulative distribution function:
        F(x) = exp(-t^(-1/ξ))

    For ξ > 0 the support is bounded below by μ - σ/ξ, for ξ < 0 it is
    bounded above by the same point.
    """

    def _reduced(parameters: Parametrization, x: NumericArray) -> tuple[NumericArray, ...]:
        """
        Standardized point, support mask and ``s = -log F(x)`` inside the support.
        """
        parameters = cast(_LocationScaleShape, parameters)
        mu, sigma, xi = parameters.mu, parameters.sigma, parameters.xi

        z = (x - mu) / sigma
        gumbel = xi == 0
        t = 1.0 + xi * z
        inside = gumbel | (t > 0)
        safe_xi = np.where(gumbel, 1.0, xi)
        safe_t = np.where(inside & ~gumbel, t, 1.0)
        s = np.where(gumbel, np.exp(-z), safe_t ** (-1.0 / safe_xi))
        return z, inside, gumbel, safe_xi, safe_t, s

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of the GEV distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: NumericArray (location)
            - sigma: NumericArray (scale)
            - xi: NumericArray (shape)
        x : NumericArray
            Points at which to evaluate the log-density

        Returns
        -------
        NumericArray
            Log-density values; ``-inf`` outside the support
        """
        sigma = cast(_LocationScaleShape, parameters).sigma
        z, inside, gumbel, safe_xi, safe_t, s = _reduced(parameters, x)

        value = np.where(
            gumbel,
            -np.log(sigma) - z - s,
            -np.log(sigma) - (1.0 + 1.0 / safe_xi) * np.log(safe_t) - s,
        )
        return np.where(inside & np.isfinite(x), value, -np.inf)

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log of the distribution function; 0 above a finite upper endpoint."""
        xi = cast(_LocationScaleShape, parameters).xi
        _, inside, _, _, _, s = _reduced(parameters, x)
        return np.where(inside, -s, np.where(xi > 0, -np.inf, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logcdf(parameters, x))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return -np.expm1(logcdf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) of the GEV distribution.

        Uses ``μ + σ (exp(-ξ log w) - 1)/ξ`` with ``w = -log p`` so that the
        support endpoints come out exactly at ``p = 0`` and ``p = 1``.
        """
        parameters = cast(_LocationScaleShape, parameters)
        mu, sigma, xi = parameters.mu, parameters.sigma, parameters.xi

        log_w = np.log(-np.log(p))
        safe_xi = np.where(xi == 0, 1.0, xi)
        return np.where(
            xi == 0,
            mu - sigma * log_w,
            mu + sigma * np.expm1(-safe_xi * log_w) / safe_xi,
        )

    GEV = ParametricFamily(
        name=FamilyName.GEV,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, cdf=cdf, logcdf=logcdf, sf=sf, ppf=ppf),
    )
    GEV.__doc__ = GEV_DOC

    @parametrization(family=GEV)
    class _LocationScaleShape(Parametrization):
        """
        Location-scale-shape parametrization of GEV distribution.

        Parameters
        ----------
        mu : NumericArray
            Location parameter
        sigma : NumericArray
            Scale parameter
        xi : NumericArray
            Shape parameter
        """

        mu: NumericArray
        sigma: NumericArray
        xi: NumericArray

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> BoolArray:
            return self.sigma > 0

    ParametricFamilyRegister.register(GEV)


def _gev() -> ParametricFamily:
    configure_gev_family()
    return ParametricFamilyRegister.get(FamilyName.GEV)


def dgev(
    x: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    xi: ArrayLike = 0.0,
    log: bool = False,
) -> NumericArray:
    """
    Density of the generalized extreme value distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles.
    mu : ArrayLike, default=0.0
        Location.
    sigma : ArrayLike, default=1.0
        Scale, ``sigma > 0``.
    xi : ArrayLike, default=0.0
        Shape; ``0`` gives the Gumbel distribution.
    log : bool, default=False
        If ``True``, return log-densities.
    """
    return _gev().evaluate_density(x, log=log, mu=mu, sigma=sigma, xi=xi).unwrap()


def pgev(
    q: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    xi: ArrayLike = 0.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the generalized extreme value distribution."""
    return (
        _gev()
        .evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, mu=mu, sigma=sigma, xi=xi)
        .unwrap()
    )


def qgev(
    p: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    xi: ArrayLike = 0.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the generalized extreme value distribution."""
    return (
        _gev()
        .evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, mu=mu, sigma=sigma, xi=xi)
        .unwrap()
    )


def rgev(
    n: ArrayLike,
    mu: ArrayLike = 0.0,
    sigma: ArrayLike = 1.0,
    xi: ArrayLike = 0.0,
    rng: SeedLike = None,
) -> NumericArray:
    """Random generation for the generalized extreme value distribution."""
    return _gev().evaluate_random(n, rng=rng, mu=mu, sigma=sigma, xi=xi).unwrap()
