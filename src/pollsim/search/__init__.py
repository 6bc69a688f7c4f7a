# src/pollsim/search/__init__.py
"""
pollsim.search
~~~~~~~~~~~~~~

Station-count search for one precinct.

The lower bound is the station count that could just absorb the expected
turnout at the mean service time over the whole day; the upper bound adds one
station per hour of the day.  Every candidate in between is tried, smallest
first, over several randomized days.

Basic usage::

    from pollsim.search import CapacitySearch
    from pollsim.streams import NumpyRandomStream

    search = CapacitySearch(profile, config.service_times, iterations=10)
    result = search.run(NumpyRandomStream(seed=1))
    result.station_count, result.accepted
"""

from pollsim.search.capacity_search import (
    CapacitySearch,
    SearchResult,
    StationCountResult,
    TrialResult,
    station_bounds,
)

__all__ = [
    "CapacitySearch",
    "SearchResult",
    "StationCountResult",
    "TrialResult",
    "station_bounds",
]
