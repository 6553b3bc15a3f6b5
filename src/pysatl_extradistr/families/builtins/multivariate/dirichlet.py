"""
Dirichlet distribution family implementation.

Contains the Dirichlet family on the probability simplex together with the
R-style functions ``ddirichlet`` and ``rdirichlet``. Evaluation points and
concentration vectors are matrices with one observation per row.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammaln, xlogy

from pysatl_extradistr.distributions.computation import KernelSet
from pysatl_extradistr.families.parametric_family import ParametricFamily
from pysatl_extradistr.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_extradistr.families.registry import ParametricFamilyRegister
from pysatl_extradistr.stats import tol_equal
from pysatl_extradistr.types import FamilyName, MultivariateContinuous

if TYPE_CHECKING:
    from pysatl_extradistr.distributions.sampling import SeedLike
    from pysatl_extradistr.types import ArrayLike, BoolArray, NumericArray


def configure_dirichlet_family() -> None:
    """
    Configure and register the Dirichlet distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.DIRICHLET):
        return

    DIRICHLET_DOC = """
    Dirichlet distribution.

    Probability density function on the simplex:
        f(x) = Γ(Σα_i) / ΠΓ(α_i) Π x_i^(α_i - 1)

    Random generation draws independent Gamma(α_i, 1) variates and divides
    each row by its sum.
    """

    def logpdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Log-density of the Dirichlet distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: NumericArray (one concentration vector per row)
        x : NumericArray
            ``(n, k)`` matrix of points

        Returns
        -------
        NumericArray
            Log-density per row; ``-inf`` for rows off the simplex
        """
        alpha = cast(_Concentration, parameters).alpha

        on_simplex = np.all((x >= 0) & (x <= 1), axis=1) & tol_equal(x.sum(axis=1), 1.0)
        normalizer = gammaln(alpha.sum(axis=1)) - gammaln(alpha).sum(axis=1)
        value = normalizer + xlogy(alpha - 1.0, x).sum(axis=1)
        return np.where(on_simplex, value, -np.inf)

    def rvs(parameters: Parametrization, size: int, rng: np.random.Generator) -> NumericArray:
        alpha = cast(_Concentration, parameters).alpha
        draws = rng.standard_gamma(alpha)
        return draws / draws.sum(axis=1, keepdims=True)

    Dirichlet = ParametricFamily(
        name=FamilyName.DIRICHLET,
        distr_type=MultivariateContinuous,
        kernels=KernelSet(logpdf=logpdf, rvs=rvs),
    )
    Dirichlet.__doc__ = DIRICHLET_DOC

    @parametrization(family=Dirichlet)
    class _Concentration(Parametrization):
        """
        Concentration parametrization of Dirichlet distribution.

        Parameters
        ----------
        alpha : NumericArray
            ``(n, k)`` matrix of concentration vectors
        """

        alpha: NumericArray

        _matrix_parameters = frozenset({"alpha"})

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> BoolArray:
            return np.all(self.alpha > 0, axis=1)

    ParametricFamilyRegister.register(Dirichlet)


def _dirichlet() -> ParametricFamily:
    configure_dirichlet_family()
    return ParametricFamilyRegister.get(FamilyName.DIRICHLET)


def ddirichlet(x: ArrayLike, alpha: ArrayLike, log: bool = False) -> NumericArray:
    """
    Density of the Dirichlet distribution.

    Parameters
    ----------
    x : ArrayLike
        ``k``-vector or ``(m, k)`` matrix of points, one per row.
    alpha : ArrayLike
        ``k``-vector or matrix of positive concentration parameters.
    log : bool, default=False
        If ``True``, return log-densities.

    Raises
    ------
    ValueError
        If ``x`` and ``alpha`` have different numbers of columns.
    """
    return _dirichlet().evaluate_density(x, log=log, alpha=alpha).unwrap()


def rdirichlet(n: ArrayLike, alpha: ArrayLike, rng: SeedLike = None) -> NumericArray:
    """
    Random generation for the Dirichlet distribution.

    Returns
    -------
    NumericArray
        ``(n, k)`` matrix; every row lies on the simplex.
    """
    return _dirichlet().evaluate_random(n, rng=rng, alpha=alpha).unwrap()
