"""
Built-in distribution families for PySATL extradistr.

This package contains implementations of the distribution families that are
available by default, grouped into continuous, discrete and multivariate
families, together with their R-style functions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradistr.families.builtins.continuous import *
from pysatl_extradistr.families.builtins.continuous import __all__ as _continuous_all
from pysatl_extradistr.families.builtins.discrete import *
from pysatl_extradistr.families.builtins.discrete import __all__ as _discrete_all
from pysatl_extradistr.families.builtins.multivariate import *
from pysatl_extradistr.families.builtins.multivariate import __all__ as _multivariate_all

__all__ = [
    *_continuous_all,
    *_discrete_all,
    *_multivariate_all,
]

del _continuous_all
del _discrete_all
del _multivariate_all
