# src/pollsim/stations/__init__.py
"""
pollsim.stations
~~~~~~~~~~~~~~~~

Voting stations as a fixed pool of parallel servers, and the clocked loop that
assigns arriving voters to them.

Each station serves one voter at a time.  A voter that has arrived takes the
lowest-numbered free station; voters are served in arrival order.

Basic usage::

    from pollsim.stations import StationAllocator

    completed = StationAllocator(3).run(schedule)
    waits = [v.wait for v in completed]

Observing the loop::

    def check(snapshot):
        assert len(snapshot.occupied) <= 3

    StationAllocator(3).run(schedule, observer=check)
"""

from pollsim.stations.allocator import StationAllocator, TickObserver, TickSnapshot
from pollsim.stations.pool import StationPool

__all__ = [
    "StationAllocator",
    "StationPool",
    "TickObserver",
    "TickSnapshot",
]
