# src/pollsim/report/__init__.py
"""
pollsim.report
~~~~~~~~~~~~~~

Fixed-width text for configuration summaries, per-trial lines and
wait-time histograms.  Nothing here writes files; every function returns a
string.
"""

from pollsim.report.formatting import (
    format_config,
    format_histogram,
    format_precinct,
    format_search,
    format_trial,
    voters_per_star,
)

__all__ = [
    "format_config",
    "format_histogram",
    "format_precinct",
    "format_search",
    "format_trial",
    "voters_per_star",
]
