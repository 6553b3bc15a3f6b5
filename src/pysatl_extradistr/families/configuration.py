"""
Distribution Families Configuration
====================================

This module registers the built-in parametric families of the library:

- continuous: Rayleigh, Kumaraswamy, generalized extreme value, Power,
  Gumbel, Frechet, Pareto, Laplace, Triangular, Half-normal, Lomax, Gompertz;
- discrete: Categorical, Discrete normal, Bernoulli, Rademacher,
  Discrete uniform;
- multivariate: Dirichlet, Multinomial.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Each ``configure_*`` function is idempotent, so the R-style functions can
  configure their own family lazily.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_extradistr.families.builtins import (
    configure_bernoulli_family,
    configure_categorical_family,
    configure_dirichlet_family,
    configure_discrete_normal_family,
    configure_discrete_uniform_family,
    configure_frechet_family,
    configure_gev_family,
    configure_gompertz_family,
    configure_gumbel_family,
    configure_half_normal_family,
    configure_kumaraswamy_family,
    configure_laplace_family,
    configure_lomax_family,
    configure_multinomial_family,
    configure_pareto_family,
    configure_power_family,
    configure_rademacher_family,
    configure_rayleigh_family,
    configure_triangular_family,
)
from pysatl_extradistr.families.registry import ParametricFamilyRegister

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_rayleigh_family()
    configure_kumaraswamy_family()
    configure_gev_family()
    configure_power_family()
    configure_gumbel_family()
    configure_frechet_family()
    configure_pareto_family()
    configure_laplace_family()
    configure_triangular_family()
    configure_half_normal_family()
    configure_lomax_family()
    configure_gompertz_family()
    configure_categorical_family()
    configure_discrete_normal_family()
    configure_bernoulli_family()
    configure_rademacher_family()
    configure_discrete_uniform_family()
    configure_dirichlet_family()
    configure_multinomial_family()
    register = ParametricFamilyRegister()
    logger.debug("Configured %d distribution families", len(register.list_registered()))
    return register


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
