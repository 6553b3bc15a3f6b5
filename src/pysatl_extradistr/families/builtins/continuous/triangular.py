"""
Triangular distribution family implementation.

Contains the Triangular family on ``[a, b]`` with mode ``c`` together with
the R-style functions ``dtriang``, ``ptriang``, ``qtriang`` and ``rtriang``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_extradistr.distributions.computation import KernelSet
from pysatl_extradistr.distributions.recycling import as_vector, recycle, recycled_length
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


def configure_triangular_family() -> None:
    """
    Configure and register the Triangular distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.TRIANGULAR):
        return

    TRIANGULAR_DOC = """
    Triangular distribution.

    Probability density function:
        f(x) = 2(x - a) / ((b - a)(c - a))  for a ≤ x < c
        f(x) = 2 / (b - a)                  for x = c
        f(x) = 2(b - x) / ((b - a)(b - c))  for c < x ≤ b

    Cumulative distribution function:
        F(x) = (x - a)² / ((b - a)(c - a))      for a < x ≤ c
        F(x) = 1 - (b - x)² / ((b - a)(b - c))  for c < x < b
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Density of the Triangular distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - a: NumericArray (lower limit)
            - b: NumericArray (upper limit)
            - c: NumericArray (mode)
        x : NumericArray
            Points at which to evaluate the density

        Returns
        -------
        NumericArray
            Density values; 0 outside ``[a, b]``
        """
        parameters = cast(_LimitsMode, parameters)
        a, b, c = parameters.a, parameters.b, parameters.c

        width = b - a
        rising = 2.0 * (x - a) / (width * (c - a))
        falling = 2.0 * (b - x) / (width * (b - c))
        return np.select(
            [(x < a) | (x > b), x < c, x == c],
            [0.0, rising, 2.0 / width],
            default=falling,
        )

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        parameters = cast(_LimitsMode, parameters)
        a, b, c = parameters.a, parameters.b, parameters.c

        width = b - a
        rising = (x - a) ** 2 / (width * (c - a))
        falling = 1.0 - (b - x) ** 2 / (width * (b - c))
        return np.select([x <= a, x >= b, x <= c], [0.0, 1.0, rising], default=falling)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        parameters = cast(_LimitsMode, parameters)
        a, b, c = parameters.a, parameters.b, parameters.c

        width = b - a
        at_mode = (c - a) / width
        return np.where(
            p < at_mode,
            a + np.sqrt(p * width * (c - a)),
            b - np.sqrt((1.0 - p) * width * (b - c)),
        )

    Triangular = ParametricFamily(
        name=FamilyName.TRIANGULAR,
        distr_type=UnivariateContinuous,
        kernels=KernelSet(pdf=pdf, cdf=cdf, ppf=ppf),
    )
    Triangular.__doc__ = TRIANGULAR_DOC

    @parametrization(family=Triangular)
    class _LimitsMode(Parametrization):
        """
        Limits-mode parametrization of Triangular distribution.

        Parameters
        ----------
        a : NumericArray
            Lower limit
        b : NumericArray
            Upper limit
        c : NumericArray
            Mode
        """

        a: NumericArray
        b: NumericArray
        c: NumericArray

        @constraint(description="a < b")
        def check_limits_ordered(self) -> BoolArray:
            return self.a < self.b

        @constraint(description="a <= c <= b")
        def check_mode_in_limits(self) -> BoolArray:
            return (self.a <= self.c) & (self.c <= self.b)

    ParametricFamilyRegister.register(Triangular)


def _triangular() -> ParametricFamily:
    configure_triangular_family()
    return ParametricFamilyRegister.get(FamilyName.TRIANGULAR)


def _midpoint(a: ArrayLike, b: ArrayLike) -> NumericArray:
    """Default mode ``(a + b) / 2``, recycling ``a`` and ``b`` against each other."""
    lower, upper = as_vector(a, "a"), as_vector(b, "b")
    n = recycled_length([lower, upper])
    return (recycle(lower, n) + recycle(upper, n)) / 2.0


def dtriang(
    x: ArrayLike,
    a: ArrayLike = -1.0,
    b: ArrayLike = 1.0,
    c: ArrayLike | None = None,
    log: bool = False,
) -> NumericArray:
    """
    Density of the Triangular distribution.

    Parameters
    ----------
    x : ArrayLike
        Vector of quantiles.
    a, b : ArrayLike, default=-1.0, 1.0
        Lower and upper limits, ``a < b``.
    c : ArrayLike, optional
        Mode, ``a <= c <= b``. Defaults to ``(a + b) / 2``.
    log : bool, default=False
        If ``True``, return log-densities.
    """
    c = _midpoint(a, b) if c is None else c
    return _triangular().evaluate_density(x, log=log, a=a, b=b, c=c).unwrap()


def ptriang(
    q: ArrayLike,
    a: ArrayLike = -1.0,
    b: ArrayLike = 1.0,
    c: ArrayLike | None = None,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Distribution function of the Triangular distribution."""
    c = _midpoint(a, b) if c is None else c
    return _triangular().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, a=a, b=b, c=c).unwrap()


def qtriang(
    p: ArrayLike,
    a: ArrayLike = -1.0,
    b: ArrayLike = 1.0,
    c: ArrayLike | None = None,
    lower_tail: bool = True,
    log_p: bool = False,
) -> NumericArray:
    """Quantile function of the Triangular distribution."""
    c = _midpoint(a, b) if c is None else c
    return (
        _triangular()
        .evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, a=a, b=b, c=c)
        .unwrap()
    )


def rtriang(
    n: ArrayLike,
    a: ArrayLike = -1.0,
    b: ArrayLike = 1.0,
    c: ArrayLike | None = None,
    rng: SeedLike = None,
) -> NumericArray:
    """Random generation for the Triangular distribution."""
    c = _midpoint(a, b) if c is None else c
    return _triangular().evaluate_random(n, rng=rng, a=a, b=b, c=c).unwrap()
