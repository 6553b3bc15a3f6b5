"""
Rademacher distribution family implementation.

Contains the parameter-free Rademacher family on ``{-1, 1}`` together with
the R-style functions ``drsign``, ``prsign``, ``qrsign`` and ``rrsign``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_extradistr.distributions.computation import KernelSet
from pysatl_extradistr.families.parametric_family import ParametricFamily
from pysatl_extradistr.families.parametrizations import Parametrization, parametrization
from pysatl_extradistr.families.registry import ParametricFamilyRegister
from pysatl_extradistr.stats import rng_sign
from pysatl_extradistr.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from pysatl_extradistr.distributions.sampling import SeedLike
    from pysatl_extradistr.types import ArrayLike, NumericArray


def configure_rademacher_family() -> None:
    """
    Configure and register the Rademacher distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.RADEMACHER):
        return

    RADEMACHER_DOC = """
    Rademacher distribution.

    Probability mass function:
        P[X = -1] = P[X = 1] = 1/2
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.where((x == -1) | (x == 1), 0.5, 0.0)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.select([x < -1, x >= 1], [0.0, 1.0], default=0.5)

    def sf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        return np.select([x < -1, x >= 1], [1.0, 0.0], default=0.5)

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        return np.where(p <= 0.5, -1.0, 1.0)

    def rvs(parameters: Parametrization, size: int, rng: np.random.Generator) -> NumericArray:
        return rng_sign(rng, size)

    Rademacher = ParametricFamily(
        name=FamilyName.RADEMACHER,
        distr_type=UnivariateDiscrete,
        kernels=KernelSet(pdf=pmf, cdf=cdf, sf=sf, ppf=ppf, rvs=rvs),
    )
    Rademacher.__doc__ = RADEMACHER_DOC

    @parametrization(family=Rademacher)
    class _NoParameters(Parametrization):
        """The Rademacher distribution has no parameters."""

    ParametricFamilyRegister.register(Rademacher)


def _rademacher() -> ParametricFamily:
    configure_rademacher_family()
    return ParametricFamilyRegister.get(FamilyName.RADEMACHER)


def drsign(x: ArrayLike, log: bool = False) -> NumericArray:
    """Probability mass function of the Rademacher distribution."""
    return _rademacher().evaluate_density(x, log=log).unwrap()


def prsign(q: ArrayLike, lower_tail: bool = True, log_p: bool = False) -> NumericArray:
    """Distribution function of the Rademacher distribution."""
    return _rademacher().evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p).unwrap()


def qrsign(p: ArrayLike, lower_tail: bool = True, log_p: bool = False) -> NumericArray:
    """Quantile function of the Rademacher distribution."""
    return _rademacher().evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p).unwrap()


def rrsign(n: ArrayLike, rng: SeedLike = None) -> NumericArray:
    """Random generation for the Rademacher distribution."""
    return _rademacher().evaluate_random(n, rng=rng).unwrap()
