"""
Parametric Families module for working with statistical distribution families.

This package provides the framework for defining parametric families with
constrained parametrizations, the global register of families, and the
built-in families with their R-style functions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .builtins import *
from .builtins import __all__ as _builtins_all
from .configuration import configure_families_register, reset_families_register
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
    *_builtins_all,
]

del _builtins_all
