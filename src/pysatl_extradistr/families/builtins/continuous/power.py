"""
Power distribution family implementation.

Contains the Power family on ``(0, alpha)`` together with the R-style
functions ``dpower``, ``ppower``, ``qpower`` and ``rpower``.
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


def configure_power_family() -> None:
    """
    Configure and register the Power distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POWER):
        return

    POWER_DOC = """
    Power distribution.

    Probability density function:
        f(x) = β x^(β-1) / α^β for 0 < x < α

    Cumulative distribution function:
        F(x) = x^β / α^β

    Quantile function:
        F⁻¹(p) = α p^(1/β)
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log-density; ``-inf`` outside ``(0, alpha)``."""
        parameters = cast(_ScaleShape, parameters)
        alpha, beta = parameters.alpha, parameters.beta

        inside = (x > 0) & (x < alpha)
        value = np.log(beta) + (beta - 1.0) * np.log(x) - beta * np.log(alpha)
        return np.where(inside, value, -np.inf)

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_ScaleShape, parameters)
        alpha, beta = parameters.alpha, parameters.beta

        value = beta * (np.log(x) - np.log(alpha))
        return np.where(x <= 0, -np.inf, np.where(x >= alpha, 0.0, value))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logcdf(parameters, x))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return -np.expm1(logcdf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_ScaleShape, parameters)
        return parameters.alpha * p ** (1.0 / parameters.beta)

    Power = ParametricFamily(
        name=FamilyName.POWER,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, cdf=cdf, logcdf=logcdf, sf=sf, ppf=ppf),
    )
    Power.__doc__ = POWER_DOC

    @parametrization(family=Power)
    class _ScaleShape(Parametrization):
        alpha: NumericArray
        beta: NumericArray

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> BoolArray:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> BoolArray:
            return self.beta > 0

    ParametricFamilyRegister.register(Power)


def _power() -> ParametricFamily:
    configure_power_family()
    return ParametricFamilyRegister.get(FamilyName.POWER)


def dpower(x: ArrayLike, alpha: ArrayLike, beta: ArrayLike, log: bool = False) -> NumericArray:
    """
    Density of the Power distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles.
    alpha : ArrayLike
        Upper end of the support, ``alpha > 0``.
    beta : ArrayLike
        Shape, ``beta > 0``.
    log : bool, default=False
        If ``True``, return log-densities.
    """
    return _power().evaluate_density(x, log=log, alpha=alpha, beta=beta).unwrap()


def ppower(
    q: ArrayLike,
    alpha: ArrayLike,
    beta: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the Power distribution."""
    return (
        _power().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, alpha=alpha, beta=beta).unwrap()
    )


def qpower(
    p: ArrayLike,
    alpha: ArrayLike,
    beta: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the Power distribution."""
    return (
        _power()
        .evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, alpha=alpha, beta=beta)
        .unwrap()
    )


def rpower(n: ArrayLike, alpha: ArrayLike, beta: ArrayLike, rng: SeedLike = None) -> NumericArray:
    """Random generation for the Power distribution."""
    return _power().evaluate_random(n, rng=rng, alpha=alpha, beta=beta).unwrap()
