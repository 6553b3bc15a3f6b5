"""
Built-in multivariate distribution families.

Dirichlet and Multinomial take one observation per matrix row and only
define densities and random generation.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradistr.families.builtins.multivariate.dirichlet import (
    configure_dirichlet_family,
    ddirichlet,
    rdirichlet,
)
from pysatl_extradistr.families.builtins.multivariate.multinomial import (
    configure_multinomial_family,
    dmnom,
    rmnom,
)

__all__ = [
    "configure_dirichlet_family",
    "configure_multinomial_family",
    "ddirichlet",
    "rdirichlet",
    "dmnom",
    "rmnom",
]
