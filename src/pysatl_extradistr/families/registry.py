"""
Families Register
=================

Process-wide register of parametric families, keyed by family name.

Built-in families add themselves on first use through their
``configure_<name>_family`` functions; the R-style functions look them up
here, so one family object serves every call.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from pysatl_extradistr.families.parametric_family import ParametricFamily

logger = logging.getLogger(__name__)


class ParametricFamilyRegister:
    """
    Singleton register of parametric families.

    All access goes through class methods, which operate on the single
    shared instance; ``ParametricFamilyRegister()`` always returns that
    instance.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def _families_by_name(cls) -> dict[str, ParametricFamily]:
        return cls()._families

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Look up a family by name.

        Parameters
        ----------
        name : str
            Family name, e.g. ``FamilyName.RAYLEIGH`` or ``"Rayleigh"``.

        Returns
        -------
        ParametricFamily
            The registered family.

        Raises
        ------
        ValueError
            If no family of that name has been registered.
        """
        families = cls._families_by_name()
        try:
            return families[str(name)]
        except KeyError:
            known = ", ".join(sorted(families)) or "none"
            raise ValueError(f"No family {name} found in register (registered: {known})") from None

    @classmethod
    def contains(cls, name: str) -> bool:
        """Whether a family of that name is registered."""
        return str(name) in cls._families_by_name()

    @classmethod
    def list_registered(cls) -> list[str]:
        """Sorted names of the registered families."""
        return sorted(cls._families_by_name())

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add a family under its name.

        Raises
        ------
        ValueError
            If the name is already taken.
        """
        families = cls._families_by_name()
        key = str(family.name)
        if key in families:
            raise ValueError(f"Family {key} already found in register")
        families[key] = family
        logger.debug("Registered distribution family %s", key)

    @classmethod
    def _reset(cls) -> None:
        """Forget the shared instance together with its families."""
        cls._instance = None
        logger.debug("Parametric family register reset")
