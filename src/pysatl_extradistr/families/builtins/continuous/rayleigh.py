"""
Rayleigh distribution family implementation.

Contains the Rayleigh family in its scale parametrization together with the
R-style functions ``drayleigh``, ``prayleigh``, ``qrayleigh`` and ``rrayleigh``.
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


def configure_rayleigh_family() -> None:
    """
    Configure and register the Rayleigh distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.RAYLEIGH):
        return

    RAYLEIGH_DOC = """
    Rayleigh distribution.

    The Rayleigh distribution describes the magnitude of a two-dimensional
    vector whose components are independent centered normals with common
    standard deviation σ.

    Probability density function:
        f(x) = x/σ² * exp(-x²/(2σ²)) for x ≥ 0

    Cumulative distribution function:
        F(x) = 1 - exp(-x²/(2σ²))

    Quantile function:
        F⁻¹(p) = sqrt(-2σ² log(1 - p))
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of the Rayleigh distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - sigma: NumericArray (scale parameter)
        x : NumericArray
            Points at which to evaluate the log-density

        Returns
        -------
        NumericArray
            Log-density values; ``-inf`` outside ``[0, inf)``
        """
        parameters = cast(_Scale, parameters)
        sigma = parameters.sigma

        inside = (x >= 0) & np.isfinite(x)
        value = np.log(x) - 2.0 * np.log(sigma) - x * x / (2.0 * sigma * sigma)
        return np.where(inside, value, -np.inf)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Density of the Rayleigh distribution."""
        parameters = cast(_Scale, parameters)
        sigma = parameters.sigma

        inside = (x >= 0) & np.isfinite(x)
        value = x / (sigma * sigma) * np.exp(-x * x / (2.0 * sigma * sigma))
        return np.where(inside, value, 0.0)

    def logsf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log of the upper tail probability ``P[X > x] = exp(-x²/(2σ²))``.

        Exact in the far tail, where ``1 - F(x)`` underflows.
        """
        parameters = cast(_Scale, parameters)
        sigma = parameters.sigma
        return np.where(x > 0, -x * x / (2.0 * sigma * sigma), 0.0)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Upper tail probability ``P[X > x]``."""
        return np.exp(logsf(parameters, x))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function of the Rayleigh distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - sigma: NumericArray (scale parameter)
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        return -np.expm1(logsf(parameters, x))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log of the cumulative distribution function."""
        return np.log(cdf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) of the Rayleigh distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - sigma: NumericArray (scale parameter)
        p : NumericArray
            Probabilities from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p:
            - For p = 0: returns 0.0
            - For p = 1: returns np.inf
        """
        parameters = cast(_Scale, parameters)
        return parameters.sigma * np.sqrt(-2.0 * np.log1p(-p))

    Rayleigh = ParametricFamily(
        name=FamilyName.RAYLEIGH,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(
            pdf=pdf,
            logpdf=logpdf,
            cdf=cdf,
            logcdf=logcdf,
            sf=sf,
            logsf=logsf,
            ppf=ppf,
        ),
    )
    Rayleigh.__doc__ = RAYLEIGH_DOC

    @parametrization(family=Rayleigh)
    class _Scale(Parametrization):
        """
        Scale parametrization of Rayleigh distribution.

        Parameters
        ----------
        sigma : NumericArray
            Scale parameter (σ) of the distribution
        """

        sigma: NumericArray

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> BoolArray:
            """Check that scale parameter is positive."""
            return self.sigma > 0

    ParametricFamilyRegister.register(Rayleigh)


def _rayleigh() -> ParametricFamily:
    configure_rayleigh_family()
    return ParametricFamilyRegister.get(FamilyName.RAYLEIGH)


def drayleigh(x: ArrayLike, sigma: ArrayLike = 1.0, log: bool = False) -> NumericArray:
    """
    Density of the Rayleigh distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles.
    sigma : ArrayLike, default=1.0
        Scale parameter, ``sigma > 0``.
    log : bool, default=False
        If ``True``, return log-densities.

    Returns
    -------
    NumericArray
        Densities, recycled to the longest argument.
    """
    return _rayleigh().evaluate_density(x, log=log, sigma=sigma).unwrap()


def prayleigh(
    q: ArrayLike, sigma: ArrayLike = 1.0, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """
    Distribution function of the Rayleigh distribution.

    Parameters
    ----------
    q : ArrayLike
        Vector of quantiles.
    sigma : ArrayLike, default=1.0
        Scale parameter, ``sigma > 0``.
    lower_tail : bool, default=True
        If ``True`` probabilities are ``P[X <= q]``, otherwise ``P[X > q]``.
    log_p : bool, default=False
        If ``True``, probabilities are given as ``log(p)``.
    """
    return _rayleigh().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, sigma=sigma).unwrap()


def qrayleigh(
    p: ArrayLike, sigma: ArrayLike = 1.0, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """Quantile function of the Rayleigh distribution."""
    return _rayleigh().evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, sigma=sigma).unwrap()


def rrayleigh(n: ArrayLike, sigma: ArrayLike = 1.0, rng: SeedLike = None) -> NumericArray:
    """
    Random generation for the Rayleigh distribution.

    Parameters
    ----------
    n : ArrayLike
        Number of observations. If ``len(n) > 1``, the length is taken to be
        the number required.
    sigma : ArrayLike, default=1.0
        Scale parameter, ``sigma > 0``.
    rng : numpy.random.Generator, int or None, optional
        Generator or seed.
    """
    return _rayleigh().evaluate_random(n, rng=rng, sigma=sigma).unwrap()
