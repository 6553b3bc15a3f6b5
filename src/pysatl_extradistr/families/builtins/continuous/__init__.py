"""
Built-in continuous distribution families.

This module contains implementations of continuous parametric families and
their R-style ``d``/``p``/``q``/``r`` functions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_extradistr.families.builtins.continuous.frechet import (
    configure_frechet_family,
    dfrechet,
    pfrechet,
    qfrechet,
    rfrechet,
)
from pysatl_extradistr.families.builtins.continuous.gev import (
    configure_gev_family,
    dgev,
    pgev,
    qgev,
    rgev,
)
from pysatl_extradistr.families.builtins.continuous.gompertz import (
    configure_gompertz_family,
    dgompertz,
    pgompertz,
    qgompertz,
    rgompertz,
)
from pysatl_extradistr.families.builtins.continuous.gumbel import (
    configure_gumbel_family,
    dgumbel,
    pgumbel,
    qgumbel,
    rgumbel,
)
from pysatl_extradistr.families.builtins.continuous.half_normal import (
    configure_half_normal_family,
    dhnorm,
    phnorm,
    qhnorm,
    rhnorm,
)
from pysatl_extradistr.families.builtins.continuous.kumaraswamy import (
    configure_kumaraswamy_family,
    dkumar,
    pkumar,
    qkumar,
    rkumar,
)
from pysatl_extradistr.families.builtins.continuous.laplace import (
    configure_laplace_family,
    dlaplace,
    plaplace,
    qlaplace,
    rlaplace,
)
from pysatl_extradistr.families.builtins.continuous.lomax import (
    configure_lomax_family,
    dlomax,
    plomax,
    qlomax,
    rlomax,
)
from pysatl_extradistr.families.builtins.continuous.pareto import (
    configure_pareto_family,
    dpareto,
    ppareto,
    qpareto,
    rpareto,
)
from pysatl_extradistr.families.builtins.continuous.power import (
    configure_power_family,
    dpower,
    ppower,
    qpower,
    rpower,
)
from pysatl_extradistr.families.builtins.continuous.rayleigh import (
    configure_rayleigh_family,
    drayleigh,
    prayleigh,
    qrayleigh,
    rrayleigh,
)
from pysatl_extradistr.families.builtins.continuous.triangular import (
    configure_triangular_family,
    dtriang,
    ptriang,
    qtriang,
    rtriang,
)

__all__ = [
    "configure_rayleigh_family",
    "configure_kumaraswamy_family",
    "configure_gev_family",
    "configure_power_family",
    "configure_gumbel_family",
    "configure_frechet_family",
    "configure_pareto_family",
    "configure_laplace_family",
    "configure_triangular_family",
    "configure_half_normal_family",
    "configure_lomax_family",
    "configure_gompertz_family",
    "drayleigh",
    "prayleigh",
    "qrayleigh",
    "rrayleigh",
    "dkumar",
    "pkumar",
    "qkumar",
    "rkumar",
    "dgev",
    "pgev",
    "qgev",
    "rgev",
    "dpower",
    "ppower",
    "qpower",
    "rpower",
    "dgumbel",
    "pgumbel",
    "qgumbel",
    "rgumbel",
    "dfrechet",
    "pfrechet",
    "qfrechet",
    "rfrechet",
    "dpareto",
    "ppareto",
    "qpareto",
    "rpareto",
    "dlaplace",
    "plaplace",
    "qlaplace",
    "rlaplace",
    "dtriang",
    "ptriang",
    "qtriang",
    "rtriang",
    "dhnorm",
    "phnorm",
    "qhnorm",
    "rhnorm",
    "dlomax",
    "plomax",
    "qlomax",
    "rlomax",
    "dgompertz",
    "pgompertz",
    "qgompertz",
    "rgompertz",
]
