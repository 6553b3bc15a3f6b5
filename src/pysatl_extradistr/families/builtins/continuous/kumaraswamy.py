"""
Kumaraswamy distribution family implementation.

Contains the Kumaraswamy family on the unit interval together with the
R-style functions ``dkumar``, ``pkumar``, ``qkumar`` and ``rkumar``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import xlog1py, xlogy

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


def configure_kumaraswamy_family() -> None:
    """
    Configure and register the Kumaraswamy distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.KUMARASWAMY):
        return

    KUMARASWAMY_DOC = """
    Kumaraswamy distribution.

    A two-shape distribution on [0, 1] similar to the Beta distribution but
    with closed-form distribution and quantile functions.

    Probability density function:
        f(x) = a b x^(a-1) (1 - x^a)^(b-1) for 0 ≤ x ≤ 1

    Cumulative distribution function:
        F(x) = 1 - (1 - x^a)^b

    Quantile function:
        F⁻¹(p) = (1 - (1 - p)^(1/b))^(1/a)
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of the Kumaraswamy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: NumericArray (first shape parameter)
            - b: NumericArray (second shape parameter)
        x : NumericArray
            Points at which to evaluate the log-density

        Returns
        -------
        NumericArray
            Log-density values; ``-inf`` outside ``[0, 1]``
        """
        parameters = cast(_Shapes, parameters)
        a, b = parameters.a, parameters.b

        inside = (x >= 0) & (x <= 1)
        xa = np.where(inside, x, 0.0) ** a
        value = np.log(a) + np.log(b) + xlogy(a - 1.0, x) + xlog1py(b - 1.0, -xa)
        return np.where(inside, value, -np.inf)

    def logsf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Log of ``P[X > x] = (1 - x^a)^b``."""
        parameters = cast(_Shapes, parameters)
        a, b = parameters.a, parameters.b

        clipped = np.clip(x, 0.0, 1.0)
        value = b * np.log1p(-(clipped**a))
        return np.where(x <= 0, 0.0, np.where(x >= 1, -np.inf, value))

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.exp(logsf(parameters, x))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function; 0 below and 1 above the support."""
        return -np.expm1(logsf(parameters, x))

    def logcdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.log(cdf(parameters, x))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) of the Kumaraswamy distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: NumericArray (first shape parameter)
            - b: NumericArray (second shape parameter)
        p : NumericArray
            Probabilities from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles in [0, 1]
        """
        parameters = cast(_Shapes, parameters)
        a, b = parameters.a, parameters.b
        return (-np.expm1(np.log1p(-p) / b)) ** (1.0 / a)

    Kumaraswamy = ParametricFamily(
        name=FamilyName.KUMARASWAMY,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, cdf=cdf, logcdf=logcdf, sf=sf, logsf=logsf, ppf=ppf),
    )
    Kumaraswamy.__doc__ = KUMARASWAMY_DOC

    @parametrization(family=Kumaraswamy)
    class _Shapes(Parametrization):
        """
        Shape parametrization of Kumaraswamy distribution.

        Parameters
        ----------
        a : NumericArray
            First shape parameter
        b : NumericArray
            Second shape parameter
        """

        a: NumericArray
        b: NumericArray

        @constraint(description="a > 0")
        def check_a_positive(self) -> BoolArray:
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> BoolArray:
            return self.b > 0

    ParametricFamilyRegister.register(Kumaraswamy)


def _kumaraswamy() -> ParametricFamily:
    configure_kumaraswamy_family()
    return ParametricFamilyRegister.get(FamilyName.KUMARASWAMY)


def dkumar(x: ArrayLike, a: ArrayLike, b: ArrayLike, log: bool = False) -> NumericArray:
    """
    Density of the Kumaraswamy distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles.
    a, b : ArrayLike
        Positive shape parameters.
    log : bool, default=False
        If ``True``, return log-densities.
    """
    return _kumaraswamy().evaluate_density(x, log=log, a=a, b=b).unwrap()


def pkumar(
    q: ArrayLike, a: ArrayLike, b: ArrayLike, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """Distribution function of the Kumaraswamy distribution."""
    return _kumaraswamy().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, a=a, b=b).unwrap()


def qkumar(
    p: ArrayLike, a: ArrayLike, b: ArrayLike, lower_tail: bool = True, log_p: bool = False
) -> NumericArray:
    """Quantile function of the Kumaraswamy distribution."""
    return _kumaraswamy().evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, a=a, b=b).unwrap()


def rkumar(n: ArrayLike, a: ArrayLike, b: ArrayLike, rng: SeedLike = None) -> NumericArray:
    """Random generation for the Kumaraswamy distribution."""
    return _kumaraswamy().evaluate_random(n, rng=rng, a=a, b=b).unwrap()
