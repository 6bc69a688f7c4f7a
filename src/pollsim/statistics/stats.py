from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

import numpy as np

from pollsim._exceptions import ConfigurationError
from pollsim.voter import Voter

SECONDS_PER_MINUTE = 60
THRESHOLD_STEPS = (0, 10, 20)


def wait_seconds(voters: Iterable[Voter]) -> np.ndarray:
    return np.fromiter((v.wait for v in voters), dtype=np.int64)


def compute_mean_and_dev(waits: Sequence[int] | np.ndarray, expected_voters: int) -> tuple[float, float]:
    """
    Mean and population standard deviation of wait times, both normalised by
    the expected turnout rather than the number of voters actually served.
    """
    if expected_voters <= 0:
        raise ConfigurationError(f"Expected voters must be positive; got {expected_voters}.")
    w = np.asarray(waits, dtype=np.float64).reshape(-1)
    mean = float(w.sum() / expected_voters)
    dev = float(np.sqrt(np.sum((w - mean) ** 2) / expected_voters))
    return mean, dev


def wait_histogram(waits: Sequence[int] | np.ndarray) -> dict[int, int]:
    """Voter count per whole minute of waiting, for minutes actually observed."""
    w = np.asarray(waits, dtype=np.int64).reshape(-1)
    if w.size == 0:
        return {}
    buckets = np.bincount(w // SECONDS_PER_MINUTE)
    return {int(m): int(c) for m, c in enumerate(buckets) if c}


def too_long_counts(histogram: Mapping[int, int], threshold_minutes: int) -> tuple[int, int, int]:
    """
    Voters whose wait bucket is strictly above ``threshold``, ``threshold + 10``
    and ``threshold + 20`` minutes.
    """
    limits = [threshold_minutes + step for step in THRESHOLD_STEPS]
    counts = [0, 0, 0]
    for minutes in sorted(histogram, reverse=True):
        if minutes <= limits[0]:
            break
        for i, limit in enumerate(limits):
            if minutes > limit:
                counts[i] += histogram[minutes]
    return counts[0], counts[1], counts[2]


@dataclass(frozen=True, slots=True)
class TrialStatistics:
    too_long: int
    too_long_plus10: int
    too_long_plus20: int
    wait_mean_seconds: float
    wait_dev_seconds: float
    histogram: Mapping[int, int]

    @property
    def passed(self) -> bool:
        return self.too_long == 0


def summarize_trial(completed: Iterable[Voter], expected_voters: int, threshold_minutes: int) -> TrialStatistics:
    waits = wait_seconds(completed)
    histogram = wait_histogram(waits)
    mean, dev = compute_mean_and_dev(waits, expected_voters)
    return TrialStatistics(
        *too_long_counts(histogram, threshold_minutes),
        wait_mean_seconds=mean,
        wait_dev_seconds=dev,
        histogram=histogram,
    )


class CumulativeHistogram:
    """Minute-bucket counts summed over the iterations of one station count."""

    def __init__(self) -> None:
        self._counts: Counter[int] = Counter()
        self._iterations = 0

    def add(self, histogram: Mapping[int, int]) -> None:
        self._counts.update(histogram)
        self._iterations += 1

    def averaged(self) -> dict[int, float]:
        """Average voters per bucket per simulated day, lowest to highest minute."""
        if self._iterations == 0:
            return {}
        return {m: self._counts[m] / self._iterations for m in sorted(self._counts)}

    def totals(self) -> dict[int, int]:
        return dict(sorted(self._counts.items()))

    @property
    def iterations(self) -> int:
        return self._iterations

    def __repr__(self) -> str:
        return f"CumulativeHistogram(iterations={self._iterations}, buckets={len(self._counts)})"
