"""
Parametrization classes for distribution families.

This module provides the core abstractions for declaring the parameters of a
family together with their domain constraints. A parametrization instance
holds *recycled* parameter arrays, one element (or one row, for matrix
parameters) per output element of a vectorized call, and evaluates its
constraints element-wise.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec, Self

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from pysatl_extradistr.families.parametric_family import ParametricFamily
    from pysatl_extradistr.types import BoolArray


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values for a parametrization.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.
    check : Callable[[Any], BoolArray]
        Element-wise validation function; ``True`` where the constraint holds.
    """

    description: str
    check: Callable[[Any], BoolArray]


class Parametrization(ABC):
    """
    Abstract base class for distribution parametrizations.

    Subclasses are dataclasses whose fields are the parameters in their
    positional order. Fields listed in ``_matrix_parameters`` hold a
    ``(n, k)`` matrix (one probability or concentration vector per row);
    every other field holds a length ``n`` vector.
    """

    # These attributes are set by the @parametrization decorator
    __family__: ClassVar[ParametricFamily]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []
    _matrix_parameters: ClassVar[frozenset[str]] = frozenset()

    @classmethod
    def parameter_names(cls) -> tuple[str, ...]:
        """Parameter names in declaration order."""
        return tuple(f.name for f in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def is_matrix_parameter(cls, name: str) -> bool:
        """Whether ``name`` recycles by row."""
        return name in cls._matrix_parameters

    @property
    def parameters(self) -> dict[str, Any]:
        """Get parameters as a dictionary."""
        return {name: getattr(self, name) for name in self.parameter_names()}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        """Get constraints for this parametrization."""
        return self._constraints

    def valid_mask(self, size: int) -> BoolArray:
        """
        Evaluate all constraints element-wise.

        Parameters
        ----------
        size : int
            Number of recycled parameter tuples.

        Returns
        -------
        BoolArray
            ``True`` where every constraint holds.
        """
        mask = np.ones(size, dtype=bool)
        with np.errstate(invalid="ignore"):
            for constraint in self._constraints:
                mask &= np.broadcast_to(np.asarray(constraint.check(self), dtype=bool), size)
        return mask

    def violations(self, rows: BoolArray) -> tuple[str, ...]:
        """Descriptions of the constraints failing on any of ``rows``."""
        if not rows.any():
            return ()
        violated: list[str] = []
        with np.errstate(invalid="ignore"):
            for constraint in self._constraints:
                held = np.broadcast_to(np.asarray(constraint.check(self), dtype=bool), rows.shape)
                if np.any(rows & ~held):
                    violated.append(constraint.description)
        return tuple(violated)

    def take(self, rows: BoolArray) -> Self:
        """
        Select recycled parameter tuples.

        Parameters
        ----------
        rows : BoolArray
            Mask over the recycled tuples.

        Returns
        -------
        Parametrization
            New instance holding only the selected tuples.
        """
        return type(self)(**{name: value[rows] for name, value in self.parameters.items()})


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, Any]], Callable[P, Any]]:
    """
    Decorator to mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, Any]], Callable[P, Any]]
        Decorator that marks the function as a constraint.

    Notes
    -----
    The decorated function must return a boolean mask over the recycled
    tuples. Sets marker attributes on the function:
    - __is_constraint: True
    - __constraint_description: description
    """

    def decorator(func: Callable[P, Any]) -> Callable[P, Any]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            return func(*args, **kwargs)

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def parametrization(
    *,
    family: ParametricFamily,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Decorator to register a class as the parametrization of a family.

    Parameters
    ----------
    family : ParametricFamily
        Family to register the parametrization with.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator that registers the parametrization.

    Notes
    -----
    Automatically converts the class to a frozen dataclass if not already one.
    Collects and registers constraint methods marked with @constraint.
    """

    def _collect_constraints(
        cls: type[Parametrization],
    ) -> list[ParametrizationConstraint]:
        """Collect constraint methods from the class."""
        constraints: list[ParametrizationConstraint] = []
        for name, attr in cls.__dict__.items():
            if isinstance(attr, staticmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(
                        f"@constraint '{name}' must be an instance method, not @staticmethod"
                    )
                continue
            if isinstance(attr, classmethod):
                if getattr(attr.__func__, "__is_constraint", False):
                    raise TypeError(
                        f"@constraint '{name}' must be an instance method, not @classmethod"
                    )
                continue

            func = attr if callable(attr) and isfunction(attr) else None
            if not func:
                continue
            if getattr(func, "__is_constraint", False):
                desc = getattr(func, "__constraint_description", func.__name__)
                constraints.append(ParametrizationConstraint(description=desc, check=func))
        return constraints

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        # Attach metadata
        cls.__family__ = family

        # Discover and store constraints
        cls._constraints = _collect_constraints(cls)

        # Register in the family
        family.register_parametrization(cls)
        return cls

    return decorator


__all__ = [
    "Parametrization",
    "ParametrizationConstraint",
    "constraint",
    "parametrization",
]
