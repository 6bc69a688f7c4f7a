# src/pollsim/__init__.py
"""
pollsim
~~~~~~~

Voter-queue simulation for sizing election precincts.

For each precinct, synthetic election days are generated from an hourly
arrival profile and a table of observed voting times, voters are queued onto
a fixed number of stations, and the station count is raised until no voter
waits longer than the configured threshold.

Basic usage::

    from pollsim import Simulation, read_configuration, load_precincts

    config = read_configuration("xconfig.txt", "dataallsorted.txt")
    sim    = Simulation(config, load_precincts("precincts.txt"))
    for number, result in sim.run().items():
        print(number, result.station_count, result.accepted)

Subpackages
-----------
streams     Injected random draws.
arrivals    Service-time sampling and arrival schedules.
stations    Station pool and the clocked allocation loop.
statistics  Wait-time mean, deviation, histograms and too-long counts.
search      Station-count sweep per precinct.
config      Configuration, service-time table and precinct roster.
report      Text formatting.
"""

from __future__ import annotations

from pollsim._exceptions import ConfigurationError, InvariantViolation, PollsimError
from pollsim.config import (
    Precinct,
    PrecinctProfile,
    SimulationConfig,
    load_precincts,
    profile_for,
    read_configuration,
)
from pollsim.search import CapacitySearch, SearchResult
from pollsim.simulation import Simulation

__all__ = [
    "CapacitySearch",
    "ConfigurationError",
    "InvariantViolation",
    "PollsimError",
    "Precinct",
    "PrecinctProfile",
    "SearchResult",
    "Simulation",
    "SimulationConfig",
    "load_precincts",
    "profile_for",
    "read_configuration",
]
