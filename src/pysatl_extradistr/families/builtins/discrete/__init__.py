"""
Built-in discrete distribution families.

This module contains implementations of univariate discrete parametric
families and their R-style ``d``/``p``/``q``/``r`` functions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradistr.families.builtins.discrete.bernoulli import (
    configure_bernoulli_family,
    dbern,
    pbern,
    qbern,
    rbern,
)
from pysatl_extradistr.families.builtins.discrete.categorical import (
    configure_categorical_family,
    dcat,
    pcat,
    qcat,
    rcat,
)
from pysatl_extradistr.families.builtins.discrete.discrete_normal import (
    configure_discrete_normal_family,
    ddnorm,
    pdnorm,
    qdnorm,
    rdnorm,
)
from pysatl_extradistr.families.builtins.discrete.discrete_uniform import (
    configure_discrete_uniform_family,
    ddunif,
    pdunif,
    qdunif,
    rdunif,
)
from pysatl_extradistr.families.builtins.discrete.rademacher import (
    configure_rademacher_family,
    drsign,
    prsign,
    qrsign,
    rrsign,
)

__all__ = [
    "configure_categorical_family",
    "configure_discrete_normal_family",
    "configure_bernoulli_family",
    "configure_rademacher_family",
    "configure_discrete_uniform_family",
    "dcat",
    "pcat",
    "qcat",
    "rcat",
    "ddnorm",
    "pdnorm",
    "qdnorm",
    "rdnorm",
    "dbern",
    "pbern",
    "qbern",
    "rbern",
    "drsign",
    "prsign",
    "qrsign",
    "rrsign",
    "ddunif",
    "pdunif",
    "qdunif",
    "rdunif",
]
