"""
Kernel Sets
===========

A :class:`KernelSet` bundles the element-wise kernels of one family:

- ``pdf`` / ``logpdf`` — density or mass and its logarithm;
- ``cdf`` / ``logcdf`` — lower tail distribution function and its logarithm;
- ``sf`` / ``logsf`` — direct upper tail forms, when more accurate than ``1 - cdf``;
- ``ppf`` — quantile function;
- ``rvs`` — family-specific random draw, when inversion is not used.

Every kernel takes the already recycled, already validated parametrization
first and the recycled evaluation points second. Kernels never check
parameter constraints; the family does that before calling them.

Notes
-----
- At least one of ``pdf``/``logpdf`` must be given. The missing one is
  derived by ``exp``/``log``.
- ``logcdf`` falls back to ``log(cdf)``; the upper tail falls back to
  ``1 - cdf`` and ``log1p(-cdf)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_extradistr.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    from pysatl_extradistr.types import NumericArray

    Kernel: TypeAlias = Callable[[Any, NumericArray], NumericArray]
    DrawKernel: TypeAlias = Callable[[Any, int, np.random.Generator], NumericArray]


@dataclass(frozen=True, slots=True)
class KernelSet:
    """
    Element-wise kernels of a family.

    Parameters
    ----------
    pdf, logpdf : Kernel or None
        Density (mass) and log-density. At least one is required.
    cdf, logcdf : Kernel or None
        Lower tail distribution function and its logarithm.
    sf, logsf : Kernel or None
        Upper tail ``P[X > x]`` and its logarithm.
    ppf : Kernel or None
        Quantile function on probabilities already checked to lie in ``[0, 1]``.
    rvs : DrawKernel or None
        Draw ``size`` variates for ``size`` recycled parameter tuples.
    """

    pdf: Kernel | None = None
    logpdf: Kernel | None = None
    cdf: Kernel | None = None
    logcdf: Kernel | None = None
    sf: Kernel | None = None
    logsf: Kernel | None = None
    ppf: Kernel | None = None
    rvs: DrawKernel | None = None

    def __post_init__(self) -> None:
        if self.pdf is None and self.logpdf is None:
            raise ValueError("A kernel set needs at least one of 'pdf' or 'logpdf'.")

    @property
    def available(self) -> frozenset[CharacteristicName]:
        """Characteristics this set can evaluate, directly or by derivation."""
        names = {CharacteristicName.PDF, CharacteristicName.LOGPDF}
        if self.cdf is not None or self.logcdf is not None:
            names |= {
                CharacteristicName.CDF,
                CharacteristicName.LOGCDF,
                CharacteristicName.SF,
                CharacteristicName.LOGSF,
            }
        if self.ppf is not None:
            names.add(CharacteristicName.PPF)
        if self.ppf is not None or self.rvs is not None:
            names.add(CharacteristicName.RVS)
        return frozenset(names)

    def density(self, parameters: Any, x: NumericArray, log: bool) -> NumericArray:
        """Evaluate the density, picking the closed-form log kernel when asked for logs."""
        if log:
            if self.logpdf is not None:
                return self.logpdf(parameters, x)
            return np.log(self.pdf(parameters, x))  # type: ignore[misc]
        if self.pdf is not None:
            return self.pdf(parameters, x)
        return np.exp(self.logpdf(parameters, x))  # type: ignore[misc]

    def _lower(self, parameters: Any, x: NumericArray, log: bool) -> NumericArray:
        if log:
            if self.logcdf is not None:
                return self.logcdf(parameters, x)
            return np.log(self.cdf(parameters, x))  # type: ignore[misc]
        if self.cdf is not None:
            return self.cdf(parameters, x)
        return np.exp(self.logcdf(parameters, x))  # type: ignore[misc]

    def _upper(self, parameters: Any, x: NumericArray, log: bool) -> NumericArray:
        if log:
            if self.logsf is not None:
                return self.logsf(parameters, x)
            if self.sf is not None:
                return np.log(self.sf(parameters, x))
            return np.log1p(-self._lower(parameters, x, log=False))
        if self.sf is not None:
            return self.sf(parameters, x)
        if self.logsf is not None:
            return np.exp(self.logsf(parameters, x))
        return 1.0 - self._lower(parameters, x, log=False)

    def distribution(
        self, parameters: Any, x: NumericArray, lower_tail: bool, log: bool
    ) -> NumericArray:
        """
        Evaluate the distribution function in the requested tail.

        Raises
        ------
        NotImplementedError
            If the set has no distribution function.
        """
        if self.cdf is None and self.logcdf is None:
            raise NotImplementedError("Kernel set has no distribution function.")
        if lower_tail:
            return self._lower(parameters, x, log)
        return self._upper(parameters, x, log)


__all__ = [
    "KernelSet",
]
