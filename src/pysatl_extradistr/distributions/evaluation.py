"""
Evaluation Results and Diagnostics
==================================

NaN is the value-level error channel of every distribution function. This
module pairs the values with a structured record of *why* elements are NaN,
so that the "NaNs produced" diagnostic is raised once per vectorized call
instead of once per element.

- :class:`NaNsProducedWarning` — warning category for invalid-domain NaNs.
- :class:`Evaluation` — values plus the mask of invalid elements.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import warnings
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pysatl_extradistr.types import BoolArray, NumericArray


class NaNsProducedWarning(RuntimeWarning):
    """Emitted when parameters or probabilities outside their domain produced NaN."""


@dataclass(frozen=True, slots=True)
class Evaluation:
    """
    Result of one vectorized call.

    Parameters
    ----------
    values : NumericArray
        Output values. Vector of length ``Nmax`` or ``(Nmax, k)`` matrix.
    invalid : BoolArray
        Per-output-element (per-row for matrices) mask of elements set to
        NaN because a parameter or probability was outside its domain.
        Missing inputs (NaN in, NaN out) are not flagged.
    operation : str
        Name of the call that produced the result, used in the diagnostic.
    reasons : tuple[str, ...]
        Descriptions of the violated constraints.
    """

    values: NumericArray
    invalid: BoolArray
    operation: str = ""
    reasons: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.values)

    @property
    def nan_produced(self) -> bool:
        """Whether any element was invalid."""
        return bool(self.invalid.any())

    def unwrap(self, stacklevel: int = 3) -> NumericArray:
        """
        Return the values, warning once if NaNs were produced.

        Parameters
        ----------
        stacklevel : int, default=3
            Passed to :func:`warnings.warn` so that the warning points at
            the caller of the public function.
        """
        if self.nan_produced:
            where = f" in {self.operation}" if self.operation else ""
            why = f" ({'; '.join(self.reasons)})" if self.reasons else ""
            warnings.warn(
                f"NaNs produced{where}: {int(self.invalid.sum())} of {len(self.invalid)} "
                f"elements had parameters or probabilities outside their domain{why}",
                NaNsProducedWarning,
                stacklevel=stacklevel,
            )
        return self.values


__all__ = [
    "Evaluation",
    "NaNsProducedWarning",
]
