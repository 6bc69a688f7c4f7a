# src/pollsim/statistics/__init__.py
"""
pollsim.statistics
~~~~~~~~~~~~~~~~~~

Reductions over the completed voters of a trial: wait mean and deviation,
a histogram of whole minutes waited, and too-long counts at the threshold,
threshold + 10 and threshold + 20 minutes.

Basic usage::

    from pollsim.statistics import summarize_trial, CumulativeHistogram

    stats = summarize_trial(completed, expected_voters=900, threshold_minutes=30)
    stats.passed               # no voter waited past the threshold

    cumulative = CumulativeHistogram()
    cumulative.add(stats.histogram)
    cumulative.averaged()      # minute -> voters per simulated day
"""

from pollsim.statistics.stats import (
    CumulativeHistogram,
    TrialStatistics,
    compute_mean_and_dev,
    summarize_trial,
    too_long_counts,
    wait_histogram,
    wait_seconds,
)

__all__ = [
    "CumulativeHistogram",
    "TrialStatistics",
    "compute_mean_and_dev",
    "summarize_trial",
    "too_long_counts",
    "wait_histogram",
    "wait_seconds",
]
