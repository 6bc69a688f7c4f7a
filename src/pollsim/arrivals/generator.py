from __future__ import annotations

import math

from pollsim.arrivals.sampler import ServiceTimeSampler
from pollsim.config.profile import SECONDS_PER_HOUR, PrecinctProfile
from pollsim.streams import RandomStream
from pollsim.voter import Voter


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def voters_at_open(profile: PrecinctProfile) -> int:
    return _round_half_up(profile.zero_fraction / 100.0 * profile.expected_voters)


def voters_in_hour(profile: PrecinctProfile, hour: int) -> int:
    """
    Arrivals scheduled for ``hour``.  Even hours get one extra voter to offset
    rounding down across the day.
    """
    count = _round_half_up(profile.arrival_fractions[hour] / 100.0 * profile.expected_voters)
    if hour % 2 == 0:
        count += 1
    return count


def generate_arrivals(
    profile: PrecinctProfile,
    sampler: ServiceTimeSampler,
    stream: RandomStream,
) -> list[Voter]:
    """
    Synthesize one day's arrival schedule, sorted by arrival time.

    Voters waiting at the open all arrive at 0.  Within each hour arrivals form
    a Poisson process: exponential gaps at ``count / 3600`` voters per second,
    accumulated from the top of the hour.  A late draw can run past the end of
    its hour, so the result is re-sorted (stably) by arrival time.
    """

    profile.validate()

    voters: list[Voter] = []
    sequence = 0

    for _ in range(voters_at_open(profile)):
        voters.append(Voter(sequence, 0, sampler.sample()))
        sequence += 1

    for hour in range(profile.day_length_hours):
        count = voters_in_hour(profile, hour)
        if count == 0:
            continue
        rate = count / SECONDS_PER_HOUR
        arrival = hour * SECONDS_PER_HOUR
        for _ in range(count):
            arrival += stream.exponential_int(rate)
            voters.append(Voter(sequence, arrival, sampler.sample()))
            sequence += 1

    voters.sort(key=lambda v: v.arrival)
    return voters
