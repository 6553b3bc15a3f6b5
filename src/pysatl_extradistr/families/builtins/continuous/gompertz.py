"""
Gompertz distribution family implementation.

Contains the Gompertz family together with the R-style functions
``dgompertz``, ``pgompertz``, ``qgompertz`` and ``rgompertz``.
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


def configure_gompertz_family() -> None:
    """
    Configure and register the Gompertz distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GOMPERTZ):
        return

    GOMPERTZ_DOC = """
    Gompertz distribution.

    Probability density function:
        f(x) = a exp(bx - a/b (exp(bx) - 1)) for x ≥ 0

    Cumulative distribution function:
        F(x) = 1 - exp(-a/b (exp(bx) - 1))

    Quantile function:
        F⁻¹(p) = 1/b log(1 - b/a log(1 - p))
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Shapes, parameters)
        a, b = parameters.a, parameters.b

        value = np.log(a) + b * x - a / b * np.expm1(b * x)
        return np.where((x >= 0) & np.isfinite(x), value, -np.inf)

    def logsf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_Shapes, parameters)
        a, b = parameters.a, parameters.b
        return np.where(x > 0, -a / b * np.expm1(b * x), 0.0)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logsf(parameters, x))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return -np.expm1(logsf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_Shapes, parameters)
        a, b = parameters.a, parameters.b
        return np.log1p(-b / a * np.log1p(-p)) / b

    Gompertz = ParametricFamily(
        name=FamilyName.GOMPERTZ,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, cdf=cdf, sf=sf, logsf=logsf, ppf=ppf),
    )
    Gompertz.__doc__ = GOMPERTZ_DOC

    @parametrization(family=Gompertz)
    class _Shapes(Parametrization):
        a: NumericArray
        b: NumericArray

        @constraint(description="a > 0")
        def check_a_positive(self) -> BoolArray:
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> BoolArray:
            return self.b > 0

    ParametricFamilyRegister.register(Gompertz)


def _gompertz() -> ParametricFamily:
    configure_gompertz_family()
    return ParametricFamilyRegister.get(FamilyName.GOMPERTZ)


def dgompertz(
    x: ArrayLike, a: ArrayLike = 1.0, b: ArrayLike = 1.0, log: bool = False
) -> NumericArray:
    """Density of the Gompertz distribution."""
    return _gompertz().evaluate_density(x, log=log, a=a, b=b).unwrap()


def pgompertz(
    q: ArrayLike,
    a: ArrayLike = 1.0,
    b: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the Gompertz distribution."""
    return _gompertz().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, a=a, b=b).unwrap()


def qgompertz(
    p: ArrayLike,
    a: ArrayLike = 1.0,
    b: ArrayLike = 1.0,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the Gompertz distribution."""
    return _gompertz().evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, a=a, b=b).unwrap()


def rgompertz(
    n: ArrayLike, a: ArrayLike = 1.0, b: ArrayLike = 1.0, rng: SeedLike = None
) -> NumericArray:
    """Random generation for the Gompertz distribution."""
    return _gompertz().evaluate_random(n, rng=rng, a=a, b=b).unwrap()
