from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from scipy import stats as _stats

from pollsim._exceptions import ConfigurationError
from pollsim.arrivals import ServiceTimeSampler, generate_arrivals
from pollsim.config.profile import PrecinctProfile
from pollsim.stations import StationAllocator
from pollsim.statistics import CumulativeHistogram, TrialStatistics, summarize_trial
from pollsim.streams import RandomStream
from pollsim.voter import Voter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrialResult:
    station_count: int
    iteration: int
    completed: list[Voter]
    statistics: TrialStatistics

    @property
    def passed(self) -> bool:
        return self.statistics.passed


@dataclass
class StationCountResult:
    """All iterations run at one candidate station count."""

    station_count: int
    trials: list[TrialResult] = field(default_factory=list)
    histogram: CumulativeHistogram = field(default_factory=CumulativeHistogram)

    def add(self, trial: TrialResult) -> None:
        self.trials.append(trial)
        self.histogram.add(trial.statistics.histogram)

    @property
    def passed(self) -> bool:
        return all(t.passed for t in self.trials)

    @property
    def failed_trials(self) -> int:
        return sum(not t.passed for t in self.trials)

    def wait_mean_interval(self, confidence: float = 0.95) -> tuple[float, float] | None:
        """Student-t interval for the per-trial wait mean (seconds); None below two trials."""
        means = np.array([t.statistics.wait_mean_seconds for t in self.trials], dtype=np.float64)
        if means.size < 2:
            return None
        centre = float(means.mean())
        sem = float(_stats.sem(means))
        if sem == 0.0:
            return centre, centre
        low, high = _stats.t.interval(confidence, means.size - 1, loc=centre, scale=sem)
        return float(low), float(high)


@dataclass
class SearchResult:
    lower_bound: int
    upper_bound: int
    counts: list[StationCountResult] = field(default_factory=list)

    @property
    def station_count(self) -> int:
        """The accepted count, or the last one tried when none was accepted."""
        return self.counts[-1].station_count

    @property
    def accepted(self) -> bool:
        return bool(self.counts) and self.counts[-1].passed


def station_bounds(profile: PrecinctProfile) -> tuple[int, int]:
    lower = profile.expected_voters * profile.mean_service_seconds // profile.day_length_seconds
    lower = max(1, lower)
    return lower, lower + profile.day_length_hours


class CapacitySearch:
    """
    Linear sweep for the smallest workable station count.

    Counts are tried in ascending order from :func:`station_bounds`; each gets
    ``iterations`` freshly generated days.  The sweep stops at the first count
    where no voter in any iteration waited longer than the threshold.  More
    stations are assumed never to make waits worse, so later counts are not
    checked.
    """

    def __init__(
        self,
        profile: PrecinctProfile,
        service_times: Sequence[int],
        iterations: int,
    ) -> None:
        profile.validate()
        if len(service_times) == 0:
            raise ConfigurationError("Service-time table is empty.")
        if min(service_times) <= 0:
            raise ConfigurationError(f"Service times must be positive; got {min(service_times)}.")
        if iterations < 1:
            raise ConfigurationError(f"Iterations must be at least 1; got {iterations}.")
        self._profile = profile
        self._service_times = tuple(service_times)
        self._iterations = int(iterations)

    def run_trial(self, station_count: int, iteration: int, stream: RandomStream) -> TrialResult:
        sampler = ServiceTimeSampler(self._service_times, stream)
        schedule = generate_arrivals(self._profile, sampler, stream)
        completed = StationAllocator(station_count).run(schedule)
        statistics = summarize_trial(
            completed, self._profile.expected_voters, self._profile.too_long_minutes
        )
        logger.debug(
            "stations=%d iteration=%d voters=%d mean=%.1fs dev=%.1fs too_long=%d",
            station_count,
            iteration,
            len(completed),
            statistics.wait_mean_seconds,
            statistics.wait_dev_seconds,
            statistics.too_long,
        )
        return TrialResult(station_count, iteration, completed, statistics)

    def run(self, stream: RandomStream) -> SearchResult:
        lower, upper = self.bounds
        result = SearchResult(lower, upper)

        for station_count in range(lower, upper + 1):
            count_result = StationCountResult(station_count)
            for iteration in range(self._iterations):
                count_result.add(self.run_trial(station_count, iteration, stream))
            result.counts.append(count_result)

            if count_result.passed:
                logger.info(
                    "Accepted %d stations for %d expected voters",
                    station_count,
                    self._profile.expected_voters,
                )
                break
            logger.debug(
                "%d stations: %d of %d iterations too long",
                station_count,
                count_result.failed_trials,
                self._iterations,
            )
        else:
            logger.warning(
                "No station count in [%d, %d] kept waits under %d minutes for %d expected voters",
                lower,
                upper,
                self._profile.too_long_minutes,
                self._profile.expected_voters,
            )

        return result

    @property
    def bounds(self) -> tuple[int, int]:
        return station_bounds(self._profile)

    @property
    def profile(self) -> PrecinctProfile:
        return self._profile

    @property
    def iterations(self) -> int:
        return self._iterations
