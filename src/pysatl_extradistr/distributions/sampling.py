"""
Sampling Strategies
===================

This module defines how a family turns recycled parameters and an injected
random generator into variates:

- :class:`SamplingStrategy` — protocol for samplers.
- :class:`InverseTransformSampling` — applies the family ``ppf`` to i.i.d.
  uniforms ``U ~ U(0, 1)`` (the default).
- :class:`KernelSampling` — delegates to a family-specific draw kernel
  (Gamma normalization for Dirichlet, sequential Binomials for Multinomial...).

It also provides the argument helpers :func:`resolve_rng` and
:func:`resolve_size` shared by every random generator.

Notes
-----
- Strategies are stateless; all randomness comes from the generator passed
  to :meth:`SamplingStrategy.sample`, and draws are consumed sequentially.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

from pysatl_extradistr.stats import rng_unif

if TYPE_CHECKING:
    from typing import Any, TypeAlias

    from pysatl_extradistr.distributions.computation import KernelSet
    from pysatl_extradistr.types import ArrayLike, NumericArray

    SeedLike: TypeAlias = np.random.Generator | np.random.BitGenerator | int | None


def resolve_rng(rng: SeedLike = None) -> np.random.Generator:
    """
    Turn a generator, bit generator, seed or ``None`` into a generator.

    An existing :class:`numpy.random.Generator` is returned unchanged, so
    consecutive calls sharing it continue the same stream.
    """
    return np.random.default_rng(rng)


def resolve_size(n: ArrayLike) -> int:
    """
    Number of variates requested by ``n``.

    If ``n`` has more than one element its length is the number required,
    otherwise its (integer) value is.

    Raises
    ------
    ValueError
        If the requested number is negative, infinite or NaN.
    """
    arr = np.asarray(n)
    if arr.size > 1:
        return int(arr.size)
    if arr.size == 0:
        return 0
    value = arr.astype(np.float64).reshape(-1)
    count = float(value[0])
    if not np.isfinite(count) or count < 0:
        raise ValueError(f"Invalid number of observations: {count!r}.")
    return int(count)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies."""

    def sample(
        self, parameters: Any, size: int, rng: np.random.Generator
    ) -> NumericArray: ...


class InverseTransformSampling(SamplingStrategy):
    """
    Default sampler using inverse transform sampling.

    The strategy applies the family's ``ppf`` to i.i.d. uniforms, one per
    recycled parameter tuple.

    Parameters
    ----------
    kernels : KernelSet
        Kernel set providing ``ppf``.

    Raises
    ------
    ValueError
        If the kernel set has no ``ppf``.
    """

    def __init__(self, kernels: KernelSet) -> None:
        if kernels.ppf is None:
            raise ValueError("Inverse transform sampling requires a 'ppf' kernel.")
        self._ppf = kernels.ppf

    def sample(self, parameters: Any, size: int, rng: np.random.Generator) -> NumericArray:
        u = rng_unif(rng, size)
        return np.asarray(self._ppf(parameters, u), dtype=np.float64)


class KernelSampling(SamplingStrategy):
    """
    Sampler delegating to a family-specific ``rvs`` kernel.

    Raises
    ------
    ValueError
        If the kernel set has no ``rvs``.
    """

    def __init__(self, kernels: KernelSet) -> None:
        if kernels.rvs is None:
            raise ValueError("Kernel sampling requires an 'rvs' kernel.")
        self._rvs = kernels.rvs

    def sample(self, parameters: Any, size: int, rng: np.random.Generator) -> NumericArray:
        return np.asarray(self._rvs(parameters, size, rng), dtype=np.float64)


def default_sampling_strategy(kernels: KernelSet) -> SamplingStrategy | None:
    """Pick :class:`KernelSampling` when an ``rvs`` kernel exists, inversion otherwise."""
    if kernels.rvs is not None:
        return KernelSampling(kernels)
    if kernels.ppf is not None:
        return InverseTransformSampling(kernels)
    return None


__all__ = [
    "SamplingStrategy",
    "InverseTransformSampling",
    "KernelSampling",
    "default_sampling_strategy",
    "resolve_rng",
    "resolve_size",
]
