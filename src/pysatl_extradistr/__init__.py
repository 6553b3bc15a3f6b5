"""
PySATL extradistr
=================

Additional probability distributions with R-style vectorized density,
distribution, quantile and random generation functions, built on parametric
families with constrained parametrizations and a recycling evaluation engine.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .families import *
from .families import __all__ as _family_all
from .stats import *
from .stats import __all__ as _stats_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-extradistr")
__all__ = [
    "__version__",
    *_distr_all,
    *_family_all,
    *_stats_all,
    *_types_all,
]

del _distr_all
del _family_all
del _stats_all
del _types_all
