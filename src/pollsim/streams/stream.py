from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np
from scipy.stats import expon as _expon


@runtime_checkable
class RandomStream(Protocol):
    """
    The two draws the simulation needs.  Every trial consumes draws in a fixed
    order, so a stream that is owned by one caller gives reproducible results.
    """

    def uniform_int(self, low: int, high: int) -> int: ...

    def exponential_int(self, rate: float) -> int: ...


class NumpyRandomStream:
    """
    RandomStream backed by a ``numpy.random.Generator``.

    Child streams are spawned from the same ``SeedSequence`` so that independent
    consumers (one per precinct) never share generator state.
    """

    def __init__(self, seed: int | np.random.SeedSequence | None = None) -> None:
        if isinstance(seed, np.random.SeedSequence):
            self._seed_seq = seed
        else:
            self._seed_seq = np.random.SeedSequence(seed)
        self._rng = np.random.default_rng(self._seed_seq)

    def uniform_int(self, low: int, high: int) -> int:
        if high < low:
            raise ValueError(f"Empty range [{low}, {high}].")
        return int(self._rng.integers(low, high, endpoint=True))

    def exponential_int(self, rate: float) -> int:
        if rate <= 0.0:
            raise ValueError(f"Exponential rate must be positive; got {rate}.")
        draw = float(_expon.rvs(scale=1.0 / rate, random_state=self._rng))
        # round half up; draws are non-negative
        return int(np.floor(draw + 0.5))

    def spawn(self, n: int) -> list[NumpyRandomStream]:
        return [NumpyRandomStream(child) for child in self._seed_seq.spawn(n)]

    @property
    def generator(self) -> np.random.Generator:
        return self._rng

    def __repr__(self) -> str:
        return f"NumpyRandomStream(entropy={self._seed_seq.entropy!r}, spawn_key={self._seed_seq.spawn_key!r})"
