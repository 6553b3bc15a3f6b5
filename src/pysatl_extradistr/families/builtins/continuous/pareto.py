"""
Pareto distribution family implementation.

Contains the Pareto (type I) family together with the R-style functions
``dpareto``, ``ppareto``, ``qpareto`` and ``rpareto``.
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


def configure_pareto_family() -> None:
    """
    Configure and register the Pareto distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.PARETO):
        return

    PARETO_DOC = """
    Pareto distribution.

    Probability density function:
        f(x) = a b^a / x^(a+1) for x ≥ b

    Cumulative distribution function:
        F(x) = 1 - (b/x)^a

    Quantile function:
        F⁻¹(p) = b (1 - p)^(-1/a)
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_ShapeScale, parameters)
        a, b = parameters.a, parameters.b

        value = np.log(a) + a * np.log(b) - (a + 1.0) * np.log(x)
        return np.where((x >= b) & np.isfinite(x), value, -np.inf)

    def logsf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log of ``P[X > x] = (b/x)^a``, exact in the heavy tail."""
        parameters = cast(_ShapeScale, parameters)
        a, b = parameters.a, parameters.b
        return np.where(x >= b, a * (np.log(b) - np.log(x)), 0.0)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logsf(parameters, x))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return -np.expm1(logsf(parameters, x))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.log(cdf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_ShapeScale, parameters)
        return parameters.b * np.exp(-np.log1p(-p) / parameters.a)

    Pareto = ParametricFamily(
        name=FamilyName.PARETO,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, cdf=cdf, logcdf=logcdf, sf=sf, logsf=logsf, ppf=ppf),
    )
    Pareto.__doc__ = PARETO_DOC

    @parametrization(family=Pareto)
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of Pareto distribution.

        Parameters
        ----------
        a : NumericArray
            Shape (tail index)
        b : NumericArray
            Scale, the lower end of the support
        """

        a: NumericArray
        b: NumericArray

        @constraint(description="a > 0")
        def check_a_positive(self) -> BoolArray:
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> BoolArray:
            return self.b > 0

    ParametricFamilyRegister.register(Pareto)


def _pareto() -> ParametricFamily:
    configure_pareto_family()
    return ParametricFamilyRegister.get(FamilyName.PARETO)


def dpareto(x: ArrayLike, a: ArrayLike = 1.0, b: ArrayLike = 1.0, log: bool = False) -> NumericArray:
    """Density of the Pareto distribution."""
    return _pareto().evaluate_density(x, log=log, a=a, b=b).unwrap()


def ppareto(
    q: ArrayLike,
    a: ArrayLike = 1.0,
    b: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the Pareto distribution."""
    return _pareto().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, a=a, b=b).unwrap()


def qpareto(
    p: ArrayLike,
    a: ArrayLike = 1.0,
    b: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the Pareto distribution."""
    return _pareto().evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, a=a, b=b).unwrap()


def rpareto(n: ArrayLike, a: ArrayLike = 1.0, b: ArrayLike = 1.0, rng: SeedLike = None) -> NumericArray:
    """Random generation for the Pareto distribution."""
    return _pareto().evaluate_random(n, rng=rng, a=a, b=b).unwrap()
