"""
Half-normal distribution family implementation.

Contains the Half-normal family, the law of ``|X|`` for a centered normal
``X``, together with the R-style functions ``dhnorm``, ``phnorm``, ``qhnorm``
and ``rhnorm``.
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
from pysatl_extradistr.stats import Phi, inv_Phi, phi
from pysatl_extradistr.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from pysatl_extradistr.distributions.sampling import SeedLike
    from pysatl_extradistr.types import ArrayLike, BoolArray, NumericArray

_LOG_SQRT_2_OVER_PI = 0.5 * np.log(2.0 / np.pi)


def configure_half_normal_family() -> None:
    """
    Configure and register the Half-normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.HALF_NORMAL):
        return

    HALF_NORMAL_DOC = """
    Half-normal distribution.

    Probability density function:
        f(x) = 2/σ φ(x/σ) for x ≥ 0

    Cumulative distribution function:
        F(x) = 2Φ(x/σ) - 1

    Quantile function:
        F⁻¹(p) = σ Φ⁻¹((1 + p)/2)
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        sigma = cast(_Scale, parameters).sigma
        return np.where(x >= 0, 2.0 / sigma * phi(x / sigma), 0.0)

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        sigma = cast(_Scale, parameters).sigma
        z = x / sigma
        return np.where(x >= 0, _LOG_SQRT_2_OVER_PI - np.log(sigma) - 0.5 * z * z, -np.inf)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        sigma = cast(_Scale, parameters).sigma
        return np.where(x > 0, 2.0 * Phi(x / sigma) - 1.0, 0.0)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """``P[X > x] = 2Φ(-x/σ)``, accurate far in the tail."""
        sigma = cast(_Scale, parameters).sigma
        return np.where(x > 0, 2.0 * Phi(-x / sigma), 1.0)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        sigma = cast(_Scale, parameters).sigma
        return sigma * inv_Phi((1.0 + p) / 2.0)

    HalfNormal = ParametricFamily(
        name=FamilyName.HALF_NORMAL,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(pdf=pdf, logpdf=logpdf, cdf=cdf, sf=sf, ppf=ppf),
    )
    HalfNormal.__doc__ = HALF_NORMAL_DOC

    @parametrization(family=HalfNormal)
    class _Scale(Parametrization):
        sigma: NumericArray

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> BoolArray:
            return self.sigma > 0

    ParametricFamilyRegister.register(HalfNormal)


def _half_normal() -> ParametricFamily:
    configure_half_normal_family()
    return ParametricFamilyRegister.get(FamilyName.HALF_NORMAL)


def dhnorm(x: ArrayLike, sigma: ArrayLike = 1.0, log: bool = False) -> NumericArray:
    """
    Density of the Half-normal distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles.
    sigma : ArrayLike, default=1.0
        Scale of the underlying normal, ``sigma > 0``.
    log : bool, default=False
        If ``True``, return log-densities.
    """
    return _half_normal().evaluate_density(x, log=log, sigma=sigma).unwrap()


def phnorm(
    q: ArrayLike, sigma: ArrayLike = 1.0, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """Distribution function of the Half-normal distribution."""
    return _half_normal().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, sigma=sigma).unwrap()


def qhnorm(
    p: ArrayLike, sigma: ArrayLike = 1.0, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """Quantile function of the Half-normal distribution."""
    return (
        _half_normal().evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, sigma=sigma).unwrap()
    )


def rhnorm(n: ArrayLike, sigma: ArrayLike = 1.0, rng: SeedLike = None) -> NumericArray:
    """Random generation for the Half-normal distribution."""
    return _half_normal().evaluate_random(n, rng=rng, sigma=sigma).unwrap()
