"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL extradistr.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, TypeAlias

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution.
    CONTINUOUS : str
        Continuous probability distribution.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.

    The recycling engine asks the type whether evaluation points are
    scalars or rows of a matrix.
    """

    __slots__ = ()

    @property
    def is_univariate(self) -> bool:
        """Whether a single observation is a scalar."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int or None
        Dimension of a single observation. ``None`` means the dimension is
        given by the parameters (e.g. the number of categories).
    """

    kind: Kind
    dimension: int | None

    @property
    def is_univariate(self) -> bool:
        """Whether a single observation is a scalar."""
        return self.dimension == 1


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

MultivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=None)
"""Type for multivariate continuous distributions (rows are observations)."""

MultivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=None)
"""Type for multivariate discrete distributions (rows are observations)."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[np.float64]
"""Type alias for numeric arrays."""

BoolArray = NDArray[np.bool_]
"""Type alias for boolean arrays."""

ArrayLike: TypeAlias = Number | Sequence[Number] | Sequence[Sequence[Number]] | NDArray[Any]
"""Anything the engine accepts as a recyclable argument."""


class CharacteristicName(StrEnum):
    """
    Enumeration of the kernels a family may provide.

    ``SF`` and ``LOGSF`` are the direct upper tail forms; when absent the
    engine derives the upper tail from the CDF.
    """

    PDF = "pdf"
    LOGPDF = "logpdf"
    CDF = "cdf"
    LOGCDF = "logcdf"
    SF = "sf"
    LOGSF = "logsf"
    PPF = "ppf"
    RVS = "rvs"


class FamilyName(StrEnum):
    RAYLEIGH = "Rayleigh"
    KUMARASWAMY = "Kumaraswamy"
    GEV = "GeneralizedExtremeValue"
    POWER = "Power"
    GUMBEL = "Gumbel"
    FRECHET = "Frechet"
    PARETO = "Pareto"
    LAPLACE = "Laplace"
    TRIANGULAR = "Triangular"
    HALF_NORMAL = "HalfNormal"
    LOMAX = "Lomax"
    GOMPERTZ = "Gompertz"
    CATEGORICAL = "Categorical"
    DISCRETE_NORMAL = "DiscreteNormal"
    BERNOULLI = "Bernoulli"
    RADEMACHER = "Rademacher"
    DISCRETE_UNIFORM = "DiscreteUniform"
    DIRICHLET = "Dirichlet"
    MULTINOMIAL = "Multinomial"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "MultivariateContinuous",
    "MultivariateDiscrete",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "ArrayLike",
    "CharacteristicName",
    "FamilyName",
]
