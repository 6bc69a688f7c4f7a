"""
tests/stations/test_allocator.py

Covers:
  - Single-server FIFO queue with fixed arrivals
  - Lowest-free-station assignment and tie handling
  - Invariants checked on every tick (conservation, pool occupancy)
  - Station intervals never overlap
  - Idle-tick skipping agrees with unit stepping
  - More stations never increase total wait
"""

from collections import defaultdict

import pytest

from pollsim import ConfigurationError, InvariantViolation
from pollsim.arrivals import ServiceTimeSampler, generate_arrivals
from pollsim.stations import StationAllocator
from pollsim.streams import NumpyRandomStream
from pollsim.voter import Voter, VoterState


# ── Helpers ───────────────────────────────────────────────────────────────────

def make_voters(pairs):
    """Voters from (arrival, duration) pairs, sequence in list order."""
    return [Voter(i, a, d) for i, (a, d) in enumerate(pairs)]


def random_pairs(seed, make_profile, expected=300):
    profile = make_profile(
        expected_voters=expected,
        zero_fraction=10.0,
        arrival_fractions=(40.0, 20.0, 30.0),
        day_length_hours=3,
    )
    stream = NumpyRandomStream(seed=seed)
    sampler = ServiceTimeSampler([60, 120, 180, 300, 420, 600], stream)
    return [(v.arrival, v.duration) for v in generate_arrivals(profile, sampler, stream)]


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def day_pairs(make_profile):
    return random_pairs(2024, make_profile)


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_zero_stations_raises(self):
        with pytest.raises(ConfigurationError):
            StationAllocator(0)

    def test_negative_stations_raises(self):
        with pytest.raises(ConfigurationError):
            StationAllocator(-2)

    def test_station_count(self):
        assert StationAllocator(4).station_count == 4

    def test_empty_schedule(self):
        assert StationAllocator(2).run([]) == []

    def test_reusable_across_runs(self):
        allocator = StationAllocator(2)
        first = allocator.run(make_voters([(0, 30), (0, 30), (5, 10)]))
        second = allocator.run(make_voters([(0, 30), (0, 30), (5, 10)]))
        assert allocator.station_count == 2
        assert [(v.station, v.start) for v in first] == [(v.station, v.start) for v in second]


# ── Single server ─────────────────────────────────────────────────────────────

class TestSingleServer:

    def test_service_keeps_pace(self):
        voters = make_voters([(36 * (i + 1), 30) for i in range(101)])
        completed = StationAllocator(1).run(voters)
        assert len(completed) == 101
        assert all(v.wait == 0 for v in completed)
        assert completed[-1].finish == 36 * 101 + 30

    def test_backlog_grows_linearly(self):
        voters = make_voters([(36 * (i + 1), 50) for i in range(101)])
        completed = StationAllocator(1).run(voters)
        assert len(completed) == 101
        assert [v.wait for v in completed] == [14 * i for i in range(101)]
        assert completed[-1].finish == 36 + 101 * 50

    def test_all_arrive_at_open(self):
        voters = make_voters([(0, 10)] * 5)
        completed = StationAllocator(1).run(voters)
        assert [v.sequence for v in completed] == [0, 1, 2, 3, 4]
        assert [v.start for v in completed] == [0, 10, 20, 30, 40]

    def test_late_single_voter(self):
        completed = StationAllocator(1).run(make_voters([(10_000, 5)]))
        assert completed[0].start == 10_000
        assert completed[0].wait == 0


# ── Station choice ────────────────────────────────────────────────────────────

class TestStationChoice:

    def test_lowest_free_station(self):
        voters = make_voters([(0, 100), (0, 10), (0, 50), (20, 5)])
        StationAllocator(3).run(voters)
        assert [v.station for v in voters] == [0, 1, 2, 1]
        assert voters[3].start == 20

    def test_completion_frees_station_same_tick(self):
        voters = make_voters([(0, 10), (5, 10)])
        StationAllocator(1).run(voters)
        assert voters[1].start == 10
        assert voters[1].station == 0

    def test_ties_served_in_schedule_order(self):
        voters = make_voters([(5, 20)] * 4)
        StationAllocator(2).run(voters)
        assert [v.start for v in voters] == [5, 5, 25, 25]
        assert [v.station for v in voters] == [0, 1, 0, 1]

    def test_unsorted_input_served_by_arrival(self):
        voters = [Voter(0, 50, 10), Voter(1, 0, 10)]
        StationAllocator(1).run(voters)
        assert voters[1].start == 0
        assert voters[0].start == 50

    def test_no_station_idles_while_voter_waits(self):
        voters = make_voters([(0, 100), (0, 100), (1, 100)])
        StationAllocator(2).run(voters)
        assert voters[2].start == 100


# ── Invariants ────────────────────────────────────────────────────────────────

class TestInvariants:

    @pytest.mark.parametrize("stations", [1, 3, 6])
    def test_tick_invariants(self, day_pairs, stations):
        voters = make_voters(day_pairs)
        total = len(voters)
        snapshots = []

        def observe(snapshot):
            snapshots.append(snapshot)
            assert snapshot.pending + snapshot.in_service + snapshot.completed == total
            assert len(snapshot.occupied) == snapshot.in_service
            assert len(snapshot.occupied) <= stations

        StationAllocator(stations).run(voters, observer=observe)
        times = [s.time for s in snapshots]
        assert times == sorted(set(times))
        assert snapshots[-1].completed == total

    def test_completed_records(self, day_pairs):
        completed = StationAllocator(4).run(make_voters(day_pairs))
        assert len(completed) == len(day_pairs)
        for v in completed:
            assert v.state is VoterState.COMPLETED
            assert v.wait == v.start - v.arrival >= 0
            assert v.finish == v.start + v.duration
            assert 0 <= v.station < 4

    def test_completion_order(self, day_pairs):
        completed = StationAllocator(4).run(make_voters(day_pairs))
        finishes = [v.finish for v in completed]
        assert finishes == sorted(finishes)

    def test_no_station_serves_two_voters_at_once(self, day_pairs):
        completed = StationAllocator(3).run(make_voters(day_pairs))
        by_station = defaultdict(list)
        for v in completed:
            by_station[v.station].append((v.start, v.finish))
        for intervals in by_station.values():
            intervals.sort()
            for (_, finish), (start, _) in zip(intervals, intervals[1:]):
                assert start >= finish

    def test_rerunning_served_voters_raises(self):
        voters = make_voters([(0, 10), (1, 10)])
        StationAllocator(1).run(voters)
        with pytest.raises(InvariantViolation):
            StationAllocator(1).run(voters)


# ── Clock skipping ────────────────────────────────────────────────────────────

class TestClockSkipping:

    @pytest.mark.parametrize("stations", [1, 2, 5])
    def test_skip_idle_matches_unit_steps(self, make_profile, stations):
        pairs = random_pairs(77, make_profile, expected=80)
        fast = make_voters(pairs)
        slow = make_voters(pairs)
        StationAllocator(stations, skip_idle=True).run(fast)
        StationAllocator(stations, skip_idle=False).run(slow)
        assert [(v.station, v.start) for v in fast] == [(v.station, v.start) for v in slow]

    def test_unit_steps_visit_every_second(self):
        times = []
        StationAllocator(1, skip_idle=False).run(
            make_voters([(3, 2)]), observer=lambda s: times.append(s.time)
        )
        assert times == [0, 1, 2, 3, 4, 5]


# ── Monotonicity ──────────────────────────────────────────────────────────────

class TestMonotonicity:

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_more_stations_never_increase_total_wait(self, make_profile, seed):
        pairs = random_pairs(seed, make_profile)
        totals = []
        for stations in range(1, 9):
            completed = StationAllocator(stations).run(make_voters(pairs))
            totals.append(sum(v.wait for v in completed))
        assert all(a >= b for a, b in zip(totals, totals[1:]))
        assert totals[0] > totals[-1]
