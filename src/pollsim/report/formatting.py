from __future__ import annotations

import math

from pollsim.config import Precinct, SimulationConfig
from pollsim.search import SearchResult, StationCountResult, TrialResult

STARS_PER_LINE = 50


def _pct(count: int, expected: int) -> float:
    return 100.0 * count / expected if expected else 0.0


def format_config(config: SimulationConfig) -> str:
    lines = [
        f"RN seed:              {config.seed:8d}",
        f"Election Day length:  {config.day_length_seconds:8d} = {config.day_length_hours:8.2f} hours",
        f"Time to vote mean:    {config.mean_service_seconds:8d} = "
        f"{config.mean_service_seconds / 60.0:8.2f} minutes",
        f"Min and max expected voters for this simulation: "
        f"{config.min_expected:8d}{config.max_expected:8d}",
        f"Wait time (minutes) that is 'too long': {config.too_long_minutes:8d}",
        f"Number of iterations to perform: {config.iterations:4d}",
        f"Max service time subscript: {len(config.service_times) - 1:6d}",
        f"open  : {config.zero_fraction:7.2f}",
    ]
    for hour, fraction in enumerate(config.arrival_fractions):
        lines.append(f"{hour:2d}-{hour + 1:2d} : {fraction:7.2f}")
    return "\n".join(lines) + "\n"


def format_precinct(precinct: Precinct) -> str:
    histo = "".join(f"{s:4d}" for s in sorted(precinct.histogram_stations))
    return (
        f"{precinct.number:4d} {precinct.name:<25s}"
        f"{precinct.turnout:8.2f}{precinct.registered:8d}"
        f"{precinct.expected_voters:8d}{precinct.expected_per_hour:8d}"
        f"{precinct.stations:3d}{precinct.minority:8.2f}"
        f" HH {histo} HH"
    )


def format_trial(precinct: Precinct, trial: TrialResult) -> str:
    s = trial.statistics
    expected = precinct.expected_voters
    return (
        f"{trial.iteration:3d} {precinct.number:4d} {precinct.name:<25s}"
        f"{expected:6d}{trial.station_count:4d}"
        f" stations, mean/dev wait (mins) "
        f"{s.wait_mean_seconds / 60.0:8.2f} {s.wait_dev_seconds / 60.0:8.2f}"
        f" toolong {s.too_long:6d} {_pct(s.too_long, expected):6.2f}"
        f"{s.too_long_plus10:6d} {_pct(s.too_long_plus10, expected):6.2f}"
        f"{s.too_long_plus20:6d} {_pct(s.too_long_plus20, expected):6.2f}"
    )


def voters_per_star(lowest_bucket_total: int, iterations: int) -> int:
    if lowest_bucket_total <= STARS_PER_LINE:
        return 1
    return max(1, lowest_bucket_total // (STARS_PER_LINE * iterations))


def format_histogram(precinct: Precinct, count_result: StationCountResult) -> str:
    """
    Average voters per minute of waiting, every minute from the shortest to the
    longest observed wait, with a bar of stars.
    """
    totals = count_result.histogram.totals()
    iterations = count_result.histogram.iterations
    lines = [
        f"HISTO {format_precinct(precinct)}",
        f"HISTO STATIONS {count_result.station_count:4d}",
    ]
    if totals:
        lower, upper = min(totals), max(totals)
        per_star = voters_per_star(totals[lower], iterations)
        for minute in range(lower, upper + 1):
            average = totals.get(minute, 0) / iterations
            stars = "*" * math.ceil(average / per_star)
            lines.append(f"HISTO {minute:6d}: {average:7.2f}: {stars}")
    lines.append("HISTO")
    return "\n".join(lines) + "\n"


def format_search(precinct: Precinct, result: SearchResult) -> str:
    out = []
    for count_result in result.counts:
        out.append(format_precinct(precinct))
        out.extend(format_trial(precinct, trial) for trial in count_result.trials)

        interval = count_result.wait_mean_interval()
        summary = (
            f"{count_result.station_count:4d} stations: "
            f"{count_result.failed_trials} of {len(count_result.trials)} iterations too long"
        )
        if interval is not None:
            summary += f", mean wait 95% CI ({interval[0] / 60.0:.2f}, {interval[1] / 60.0:.2f}) mins"
        out.append(summary)

        if count_result.station_count in precinct.histogram_stations:
            out.append("")
            out.append(format_histogram(precinct, count_result))

    verdict = "accepted" if result.accepted else "no count accepted in sweep; last tried"
    out.append(
        f"{precinct.number:4d} {precinct.name:<25s} {verdict} {result.station_count:4d} stations "
        f"(searched {result.lower_bound}..{result.upper_bound})"
    )
    return "\n".join(out) + "\n"
