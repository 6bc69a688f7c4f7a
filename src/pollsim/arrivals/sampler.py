from __future__ import annotations

from typing import Sequence

from pollsim._exceptions import ConfigurationError
from pollsim.streams import RandomStream


class ServiceTimeSampler:
    """
    Empirical service-time distribution: every draw picks one observed
    duration uniformly at random.
    """

    def __init__(self, table: Sequence[int], stream: RandomStream) -> None:
        if len(table) == 0:
            raise ConfigurationError("Service-time table is empty; nothing to sample.")
        if min(table) <= 0:
            raise ConfigurationError(f"Service times must be positive; got {min(table)}.")
        self._table: tuple[int, ...] = tuple(int(t) for t in table)
        self._stream = stream

    def sample(self) -> int:
        return self._table[self._stream.uniform_int(0, self.max_subscript)]

    @property
    def max_subscript(self) -> int:
        return len(self._table) - 1

    @property
    def table(self) -> tuple[int, ...]:
        return self._table

    def __repr__(self) -> str:
        return f"ServiceTimeSampler(size={len(self._table)})"
