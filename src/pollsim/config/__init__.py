# src/pollsim/config/__init__.py
"""
pollsim.config
~~~~~~~~~~~~~~

Inputs to a run: the run-wide configuration, the table of observed service
times, and the precinct roster.

Basic usage::

    from pollsim.config import read_configuration, load_precincts, profile_for

    config    = read_configuration("xconfig.txt", "dataallsorted.txt")
    precincts = load_precincts("precincts.txt")
    profile   = profile_for(precincts[101], config)

Configuration file format (whitespace separated)::

    seed hours mean_service_seconds min_expected max_expected too_long_minutes iterations
    zero_pct hour_0_pct hour_1_pct ... hour_{hours-1}_pct

Roster format, one precinct per line::

    number name turnout registered expected per_hour stations minority h1 h2 h3

``h1 h2 h3`` are the station counts whose wait-time histogram is reported.
"""

from __future__ import annotations

from pollsim.config.configuration import (
    SimulationConfig,
    parse_configuration,
    parse_service_times,
    read_configuration,
)
from pollsim.config.profile import PrecinctProfile
from pollsim.config.roster import Precinct, load_precincts, profile_for

__all__ = [
    "Precinct",
    "PrecinctProfile",
    "SimulationConfig",
    "load_precincts",
    "parse_configuration",
    "parse_service_times",
    "profile_for",
    "read_configuration",
]
