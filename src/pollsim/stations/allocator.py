from __future__ import annotations

import heapq
import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Iterable

from pollsim._exceptions import ConfigurationError
from pollsim.stations.pool import StationPool
from pollsim.voter import Voter

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TickSnapshot:
    """Collection sizes after one processed clock tick."""

    time: int
    pending: int
    in_service: int
    completed: int
    occupied: frozenset[int]


TickObserver = Callable[[TickSnapshot], None]


class StationAllocator:
    """
    Time-stepped multi-server queue.

    Voters move from ``pending`` (arrival order) to ``in_service`` (a heap keyed
    on finish time) to ``completed``; each move removes the voter from one
    container before adding it to the next.  At every tick completions are
    processed first, then waiting voters that have arrived take the lowest free
    station until stations or arrived voters run out.

    With ``skip_idle`` the clock jumps straight to the next arrival or
    completion; ticks in between cannot change any state.
    """

    def __init__(self, station_count: int, *, skip_idle: bool = True) -> None:
        if station_count < 1:
            raise ConfigurationError(f"Station count must be at least 1; got {station_count}.")
        self._station_count = station_count
        self._skip_idle = skip_idle

    def run(
        self,
        schedule: Iterable[Voter],
        observer: TickObserver | None = None,
    ) -> list[Voter]:
        """Serve every voter in ``schedule``; return them in completion order."""

        pool = StationPool(self._station_count)
        pending: deque[Voter] = deque(sorted(schedule, key=lambda v: v.arrival))
        in_service: list[tuple[int, int, Voter]] = []
        completed: list[Voter] = []
        order = 0

        t = 0
        while pending or in_service:

            # ── completion pass ──────────────────────────────────────────
            while in_service and in_service[0][0] <= t:
                _, _, voter = heapq.heappop(in_service)
                voter.complete()
                pool.release(voter.station)
                completed.append(voter)

            # ── assignment pass ──────────────────────────────────────────
            while pending and pool.free_count and pending[0].arrival <= t:
                voter = pending.popleft()
                voter.assign(pool.acquire(), t)
                heapq.heappush(in_service, (voter.finish, order, voter))
                order += 1

            if observer is not None:
                observer(TickSnapshot(t, len(pending), len(in_service), len(completed), pool.occupied))

            t = self._next_tick(t, pending, in_service, pool)

        logger.debug(
            "Served %d voters at %d stations; last finish at %d",
            len(completed),
            pool.count,
            completed[-1].finish if completed else 0,
        )
        return completed

    def _next_tick(
        self,
        t: int,
        pending: deque[Voter],
        in_service: list[tuple[int, int, Voter]],
        pool: StationPool,
    ) -> int:
        if not self._skip_idle:
            return t + 1
        candidates = []
        if in_service:
            candidates.append(in_service[0][0])
        if pending and pool.free_count:
            candidates.append(pending[0].arrival)
        return max(t + 1, min(candidates)) if candidates else t + 1

    @property
    def station_count(self) -> int:
        return self._station_count

    def __repr__(self) -> str:
        return f"StationAllocator(station_count={self.station_count}, skip_idle={self._skip_idle})"
