# src/pollsim/arrivals/__init__.py
"""
pollsim.arrivals
~~~~~~~~~~~~~~~~

Synthetic voter arrivals for one precinct and one simulated day.

Basic usage::

    from pollsim.arrivals import ServiceTimeSampler, generate_arrivals
    from pollsim.streams import NumpyRandomStream

    stream   = NumpyRandomStream(seed=7)
    sampler  = ServiceTimeSampler([180, 240, 300, 420], stream)
    schedule = generate_arrivals(profile, sampler, stream)

``schedule`` is a list of pending Voter records in arrival-time order.
Sequence numbers follow creation order and need not match arrival rank.
"""

from __future__ import annotations

from pollsim.arrivals.generator import generate_arrivals, voters_at_open, voters_in_hour
from pollsim.arrivals.sampler import ServiceTimeSampler

__all__ = [
    "ServiceTimeSampler",
    "generate_arrivals",
    "voters_at_open",
    "voters_in_hour",
]
