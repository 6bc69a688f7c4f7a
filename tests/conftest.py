"""
Shared fixtures: deterministic random streams and a small precinct profile.
"""

from __future__ import annotations

from itertools import cycle
from typing import Iterable

import pytest

from pollsim.config import PrecinctProfile


class FixedStream:
    """Always draws the same uniform index and the same exponential gap."""

    def __init__(self, uniform: int = 0, exponential: int = 36) -> None:
        self.uniform = uniform
        self.exponential = exponential
        self.uniform_calls = 0
        self.exponential_calls = 0
        self.rates: list[float] = []

    def uniform_int(self, low: int, high: int) -> int:
        self.uniform_calls += 1
        return min(max(self.uniform, low), high)

    def exponential_int(self, rate: float) -> int:
        self.exponential_calls += 1
        self.rates.append(rate)
        return self.exponential


class ScriptedStream:
    """Replays fixed sequences of draws, cycling when they run out."""

    def __init__(self, uniforms: Iterable[int], exponentials: Iterable[int]) -> None:
        self._uniforms = cycle(list(uniforms))
        self._exponentials = cycle(list(exponentials))

    def uniform_int(self, low: int, high: int) -> int:
        return min(max(next(self._uniforms), low), high)

    def exponential_int(self, rate: float) -> int:
        return next(self._exponentials)


@pytest.fixture
def fixed_stream():
    return FixedStream


@pytest.fixture
def scripted_stream():
    return ScriptedStream


@pytest.fixture
def make_profile():
    def _make(**overrides) -> PrecinctProfile:
        fields = dict(
            expected_voters=100,
            zero_fraction=0.0,
            arrival_fractions=(100.0,),
            mean_service_seconds=60,
            too_long_minutes=10,
            day_length_hours=1,
        )
        fields.update(overrides)
        return PrecinctProfile(**fields)

    return _make
