"""
Parametric family definitions and the vectorized evaluation engine.

This module contains the main class for defining parametric families of
distributions. A family owns a parametrization (parameters and their
constraints), a kernel set and a sampling strategy, and evaluates its four
operations over recycled arguments:

- :meth:`ParametricFamily.density` — density or mass (``d``);
- :meth:`ParametricFamily.cdf` — distribution function (``p``);
- :meth:`ParametricFamily.quantile` — quantile function (``q``);
- :meth:`ParametricFamily.random` — random variates (``r``).

Each has an ``evaluate_*`` counterpart returning an
:class:`~pysatl_extradistr.distributions.evaluation.Evaluation` instead of
emitting the diagnostic warning.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from pysatl_extradistr.distributions.evaluation import Evaluation
from pysatl_extradistr.distributions.recycling import (
    as_matrix,
    as_vector,
    recycle,
    recycle_all,
    row_has_nan,
)
from pysatl_extradistr.distributions.sampling import (
    default_sampling_strategy,
    resolve_rng,
    resolve_size,
)
from pysatl_extradistr.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_extradistr.distributions.computation import KernelSet
    from pysatl_extradistr.distributions.sampling import SamplingStrategy, SeedLike
    from pysatl_extradistr.families.parametrizations import Parametrization
    from pysatl_extradistr.types import (
        ArrayLike,
        BoolArray,
        EuclideanDistributionType,
        NumericArray,
    )


@dataclass(slots=True)
class _Prepared:
    """Recycled arguments of one call together with their masks."""

    size: int
    values: NumericArray | None
    parameters: Parametrization
    missing: BoolArray
    invalid: BoolArray
    columns: int | None

    @property
    def ok(self) -> BoolArray:
        return ~(self.missing | self.invalid)


class ParametricFamily:
    """
    A family of distributions evaluated through the recycling engine.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : EuclideanDistributionType
        Distribution type; decides whether evaluation points are scalars
        or matrix rows.
    kernels : KernelSet
        Element-wise kernels of the family.
    sampling_strategy : SamplingStrategy, optional
        Strategy for random generation. Defaults to the ``rvs`` kernel when
        the set has one, inverse transform sampling otherwise.
    """

    def __init__(
        self,
        name: str,
        distr_type: EuclideanDistributionType,
        kernels: KernelSet,
        sampling_strategy: SamplingStrategy | None = None,
    ):
        self._name = name
        self._distr_type = distr_type
        self._kernels = kernels
        self._parametrization: type[Parametrization] | None = None
        self.sampling_strategy = (
            default_sampling_strategy(kernels) if sampling_strategy is None else sampling_strategy
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def distribution_type(self) -> EuclideanDistributionType:
        """Get the distribution type."""
        return self._distr_type

    @property
    def kernels(self) -> KernelSet:
        """Get the kernel set."""
        return self._kernels

    @property
    def characteristics(self) -> frozenset[CharacteristicName]:
        """Characteristics the family can evaluate."""
        names = set(self._kernels.available)
        if self.sampling_strategy is None:
            names.discard(CharacteristicName.RVS)
        return frozenset(names)

    @property
    def parametrization(self) -> type[Parametrization]:
        """
        Get the parametrization class.

        Raises
        ------
        ValueError
            If no parametrization is registered.
        """
        if self._parametrization is None:
            raise ValueError(f"Family '{self._name}' has no registered parametrization.")
        return self._parametrization

    @property
    def parameter_names(self) -> tuple[str, ...]:
        """Parameter names in positional order."""
        return self.parametrization.parameter_names()

    def register_parametrization(self, parametrization_class: type[Parametrization]) -> None:
        """
        Register the parametrization class.

        Raises
        ------
        ValueError
            If a parametrization is already registered.
        """
        if self._parametrization is not None:
            raise ValueError(f"Family '{self._name}' already has a parametrization.")
        self._parametrization = parametrization_class

    # ------------------------------------------------------------------ #
    # Recycling
    # ------------------------------------------------------------------ #

    def _coerce_parameters(self, parameters: Mapping[str, ArrayLike]) -> dict[str, NumericArray]:
        cls = self.parametrization
        names = cls.parameter_names()
        unexpected = set(parameters) - set(names)
        if unexpected:
            raise TypeError(
                f"{self._name} got unexpected parameters: {', '.join(sorted(unexpected))}"
            )
        missing = [name for name in names if name not in parameters]
        if missing:
            raise TypeError(f"{self._name} is missing parameters: {', '.join(missing)}")
        return {
            name: (
                as_matrix(parameters[name], name)
                if cls.is_matrix_parameter(name)
                else as_vector(parameters[name], name)
            )
            for name in names
        }

    @staticmethod
    def _common_columns(matrices: Mapping[str, NumericArray]) -> int | None:
        """
        Shared column count of the matrix arguments.

        Raises
        ------
        ValueError
            If two matrix arguments disagree on the number of columns.
        """
        columns: int | None = None
        first = ""
        for name, matrix in matrices.items():
            if columns is None:
                columns, first = matrix.shape[1], name
            elif matrix.shape[1] != columns:
                raise ValueError(
                    f"Number of columns in '{first}' does not equal number of columns in '{name}'."
                )
        return columns

    def _prepare(
        self,
        values: ArrayLike | None,
        parameters: Mapping[str, ArrayLike],
        *,
        values_name: str = "x",
        size: int | None = None,
    ) -> _Prepared:
        """
        Coerce, check and recycle the arguments of one call.

        Either ``values`` (evaluation points or probabilities) take part in
        recycling, or ``size`` fixes the output length (random generation).
        """
        params = self._coerce_parameters(parameters)
        cls = self.parametrization

        arrays: dict[str, NumericArray] = {}
        if values is not None:
            arrays[values_name] = (
                as_vector(values, values_name)
                if self._distr_type.is_univariate
                else as_matrix(values, values_name)
            )
        arrays.update(params)
        columns = self._common_columns({k: v for k, v in arrays.items() if v.ndim == 2})

        empty = any(len(arr) == 0 for arr in arrays.values())
        if size is None:
            n, recycled = recycle_all(list(arrays.values()))
        elif empty:
            # nothing to recycle from, every requested variate is undefined
            n = size
            recycled = [np.full((n, *arr.shape[1:]), np.nan) for arr in arrays.values()]
        else:
            n = size
            recycled = [recycle(arr, n) for arr in arrays.values()]
        by_name = dict(zip(arrays, recycled, strict=True))

        point_values = by_name.pop(values_name) if values is not None else None
        parameter_obj = cls(**by_name)

        missing = np.zeros(n, dtype=bool)
        if size is not None and empty:
            invalid = np.ones(n, dtype=bool)
            return _Prepared(n, point_values, parameter_obj, missing, invalid, columns)

        if point_values is not None:
            missing |= row_has_nan(point_values)
        for arr in by_name.values():
            missing |= row_has_nan(arr)
        invalid = ~parameter_obj.valid_mask(n) & ~missing
        return _Prepared(n, point_values, parameter_obj, missing, invalid, columns)

    def _evaluation(
        self, values: NumericArray, prepared: _Prepared, operation: str, extra: tuple[str, ...] = ()
    ) -> Evaluation:
        reasons = prepared.parameters.violations(prepared.invalid) + extra
        return Evaluation(
            values=values,
            invalid=prepared.invalid,
            operation=f"{self._name} {operation}",
            reasons=reasons,
        )

    def _require(self, characteristic: CharacteristicName) -> None:
        if characteristic not in self.characteristics:
            raise NotImplementedError(f"{self._name} family does not define '{characteristic}'.")

    # ------------------------------------------------------------------ #
    # Operations
    # ------------------------------------------------------------------ #

    def evaluate_density(
        self, x: ArrayLike, /, *, log: bool = False, **parameters: ArrayLike
    ) -> Evaluation:
        """
        Density (mass) over recycled arguments, as a structured result.

        Parameters
        ----------
        x : ArrayLike
            Evaluation points; a matrix (one observation per row) for
            multivariate families.
        log : bool, default=False
            Return log-density.
        **parameters
            Parameter arrays, recycled independently.

        Returns
        -------
        Evaluation
            Values of length ``Nmax`` and the mask of invalid elements.
        """
        prepared = self._prepare(x, parameters)
        out = np.full(prepared.size, np.nan)
        ok = prepared.ok
        if ok.any():
            with np.errstate(all="ignore"):
                out[ok] = self._kernels.density(
                    prepared.parameters.take(ok),
                    prepared.values[ok],  # type: ignore[index]
                    log,
                )
        return self._evaluation(out, prepared, "density")

    def evaluate_cdf(
        self,
        q: ArrayLike,
        /,
        *,
        lower_tail: bool = True,
        log_p: bool = False,
        **parameters: ArrayLike,
    ) -> Evaluation:
        """
        Distribution function over recycled arguments, as a structured result.

        Parameters
        ----------
        q : ArrayLike
            Evaluation points.
        lower_tail : bool, default=True
            If ``True`` return ``P[X <= q]``, otherwise ``P[X > q]``.
        log_p : bool, default=False
            Return log-probabilities.
        **parameters
            Parameter arrays, recycled independently.
        """
        self._require(CharacteristicName.CDF)
        prepared = self._prepare(q, parameters, values_name="q")
        out = np.full(prepared.size, np.nan)
        ok = prepared.ok
        if ok.any():
            with np.errstate(all="ignore"):
                out[ok] = self._kernels.distribution(
                    prepared.parameters.take(ok),
                    prepared.values[ok],  # type: ignore[index]
                    lower_tail,
                    log_p,
                )
        return self._evaluation(out, prepared, "cdf")

    def evaluate_quantile(
        self,
        p: ArrayLike,
        /,
        *,
        lower_tail: bool = True,
        log_p: bool = False,
        **parameters: ArrayLike,
    ) -> Evaluation:
        """
        Quantile function over recycled arguments, as a structured result.

        Probabilities are transformed before the kernel is called: first
        exponentiated when ``log_p`` is set, then complemented when
        ``lower_tail`` is ``False``. Probabilities outside ``[0, 1]`` after
        the transforms give NaN and are reported as invalid.
        """
        self._require(CharacteristicName.PPF)
        prepared = self._prepare(p, parameters, values_name="p")
        probs: NumericArray = prepared.values  # type: ignore[assignment]
        with np.errstate(all="ignore"):
            if log_p and not lower_tail:
                probs = -np.expm1(probs)
            elif log_p:
                probs = np.exp(probs)
            elif not lower_tail:
                probs = 1.0 - probs

        outside = ~prepared.missing & ((probs < 0.0) | (probs > 1.0))
        prepared.invalid = prepared.invalid | outside

        out = np.full(prepared.size, np.nan)
        ok = prepared.ok
        if ok.any():
            with np.errstate(all="ignore"):
                out[ok] = self._kernels.ppf(  # type: ignore[misc]
                    prepared.parameters.take(ok), probs[ok]
                )
        extra = ("p in [0, 1]",) if outside.any() else ()
        return self._evaluation(out, prepared, "quantile", extra)

    def evaluate_random(
        self, n: ArrayLike, /, *, rng: SeedLike = None, **parameters: ArrayLike
    ) -> Evaluation:
        """
        Random variates over recycled parameters, as a structured result.

        Parameters
        ----------
        n : ArrayLike
            Number of variates; if it has more than one element, its length.
        rng : numpy.random.Generator, int or None, optional
            Generator (or seed for a new one) all draws are taken from.
        **parameters
            Parameter arrays, recycled to the requested number of variates.

        Returns
        -------
        Evaluation
            ``n`` variates, or an ``(n, k)`` matrix for multivariate families.
        """
        self._require(CharacteristicName.RVS)
        size = resolve_size(n)
        generator = resolve_rng(rng)
        prepared = self._prepare(None, parameters, size=size)
        if self._distr_type.is_univariate:
            out = np.full(size, np.nan)
        else:
            out = np.full((size, prepared.columns or 0), np.nan)
        ok = prepared.ok
        if ok.any():
            with np.errstate(all="ignore"):
                out[ok] = self.sampling_strategy.sample(  # type: ignore[union-attr]
                    prepared.parameters.take(ok), int(ok.sum()), generator
                )
        return self._evaluation(out, prepared, "random")

    def density(self, x: ArrayLike, /, *, log: bool = False, **parameters: ArrayLike) -> NumericArray:
        """Density (mass); warns once if NaNs were produced. See :meth:`evaluate_density`."""
        return self.evaluate_density(x, log=log, **parameters).unwrap()

    def cdf(
        self,
        q: ArrayLike,
        /,
        *,
        lower_tail: bool = True,
        log_p: bool = False,
        **parameters: ArrayLike,
    ) -> NumericArray:
        """Distribution function; warns once if NaNs were produced. See :meth:`evaluate_cdf`."""
        return self.evaluate_cdf(q, lower_tail=lower_tail, log_p=log_p, **parameters).unwrap()

    def quantile(
        self,
        p: ArrayLike,
        /,
        *,
        lower_tail: bool = True,
        log_p: bool = False,
        **parameters: ArrayLike,
    ) -> NumericArray:
        """Quantile function; warns once if NaNs were produced. See :meth:`evaluate_quantile`."""
        return self.evaluate_quantile(p, lower_tail=lower_tail, log_p=log_p, **parameters).unwrap()

    def random(self, n: ArrayLike, /, *, rng: SeedLike = None, **parameters: ArrayLike) -> NumericArray:
        """Random variates; warns once if NaNs were produced. See :meth:`evaluate_random`."""
        return self.evaluate_random(n, rng=rng, **parameters).unwrap()
