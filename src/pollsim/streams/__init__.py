# src/pollsim/streams/__init__.py
"""
pollsim.streams
~~~~~~~~~~~~~~~

Injected random-draw capability.  The simulation never touches a global
generator; it asks a RandomStream for two kinds of integer draws:

    uniform_int(low, high)   inclusive on both ends
    exponential_int(rate)    non-negative, rate in events per second

Basic usage::

    from pollsim.streams import NumpyRandomStream

    stream = NumpyRandomStream(seed=42)
    stream.uniform_int(0, 9)
    stream.exponential_int(100 / 3600)

    per_precinct = stream.spawn(3)   # independent child streams

Tests substitute any object with the same two methods.
"""

from __future__ import annotations

from pollsim.streams.stream import NumpyRandomStream, RandomStream

__all__ = [
    "NumpyRandomStream",
    "RandomStream",
]
