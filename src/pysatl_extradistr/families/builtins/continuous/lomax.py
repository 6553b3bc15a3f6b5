"""
Lomax distribution family implementation.

Contains the Lomax (Pareto type II) family together with the R-style
functions ``dlomax``, ``plomax``, ``qlomax`` and ``rlomax``.
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


def configure_lomax_family() -> None:
    """
    Configure and register the Lomax distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.LOMAX):
        return

    LOMAX_DOC = """
    Lomax distribution.

    Probability density function:
        f(x) = λκ / (1 + λx)^(κ+1) for x ≥ 0

    Cumulative distribution function:
        F(x) = 1 - (1 + λx)^(-κ)

    Quantile function:
        F⁻¹(p) = ((1 - p)^(-1/κ) - 1) / λ
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_RateShape, parameters)
        lam, kappa = parameters.lambda_, parameters.kappa

        value = np.log(lam) + np.log(kappa) - (kappa + 1.0) * np.log1p(lam * x)
        return np.where((x >= 0) & np.isfinite(x), value, -np.inf)

    def logsf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_RateShape, parameters)
        lam, kappa = parameters.lambda_, parameters.kappa
        return np.where(x > 0, -kappa * np.log1p(lam * x), 0.0)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logsf(parameters, x))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return -np.expm1(logsf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_RateShape, parameters)
        lam, kappa = parameters.lambda_, parameters.kappa
        return np.expm1(-np.log1p(-p) / kappa) / lam

    Lomax = ParametricFamily(
        name=FamilyName.LOMAX,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, cdf=cdf, sf=sf, logsf=logsf, ppf=ppf),
    )
    Lomax.__doc__ = LOMAX_DOC

    @parametrization(family=Lomax)
    class _RateShape(Parametrization):
        """
        Rate-shape parametrization of Lomax distribution.

        Parameters
        ----------
        lambda_ : NumericArray
            Rate parameter
        kappa : NumericArray
            Shape parameter
        """

        lambda_: NumericArray
        kappa: NumericArray

        @constraint(description="lambda > 0")
        def check_lambda_positive(self) -> BoolArray:
            return self.lambda_ > 0

        @constraint(description="kappa > 0")
        def check_kappa_positive(self) -> BoolArray:
            return self.kappa > 0

    ParametricFamilyRegister.register(Lomax)


def _lomax() -> ParametricFamily:
    configure_lomax_family()
    return ParametricFamilyRegister.get(FamilyName.LOMAX)


def dlomax(x: ArrayLike, lambda_: ArrayLike, kappa: ArrayLike, log: bool = False) -> NumericArray:
    """Density of the Lomax distribution."""
    return _lomax().evaluate_density(x, log=log, lambda_=lambda_, kappa=kappa).unwrap()


def plomax(
    q: ArrayLike,
    lambda_: ArrayLike,
    kappa: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the Lomax distribution."""
    return (
        _lomax()
        .evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, lambda_=lambda_, kappa=kappa)
        .unwrap()
    )


def qlomax(
    p: ArrayLike,
    lambda_: ArrayLike,
    kappa: ArrayLike,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the Lomax distribution."""
    return (
        _lomax()
        .evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, lambda_=lambda_, kappa=kappa)
        .unwrap()
    )


def rlomax(n: ArrayLike, lambda_: ArrayLike, kappa: ArrayLike, rng: SeedLike = None) -> NumericArray:
    """Random generation for the Lomax distribution."""
    return _lomax().evaluate_random(n, rng=rng, lambda_=lambda_, kappa=kappa).unwrap()
