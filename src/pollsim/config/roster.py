from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from pollsim._exceptions import ConfigurationError
from pollsim.config.configuration import SimulationConfig
from pollsim.config.profile import PrecinctProfile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Precinct:
    """One row of the precinct roster."""

    number: int
    name: str
    turnout: float
    registered: int
    expected_voters: int
    expected_per_hour: int
    stations: int
    minority: float
    histogram_stations: frozenset[int]


ROSTER_COLUMNS = [
    "number",
    "name",
    "turnout",
    "registered",
    "expected_voters",
    "expected_per_hour",
    "stations",
    "minority",
    "histo_1",
    "histo_2",
    "histo_3",
]

_INT_COLUMNS = ["number", "registered", "expected_voters", "expected_per_hour", "stations",
                "histo_1", "histo_2", "histo_3"]
_FLOAT_COLUMNS = ["turnout", "minority"]


def _read_roster_frame(path: Path) -> pd.DataFrame:
    try:
        df = pd.read_csv(path, sep=r"\s+", header=None, dtype=str)
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=ROSTER_COLUMNS)
    except pd.errors.ParserError as exc:
        raise ConfigurationError(f"Malformed precinct roster {path}: {exc}") from exc

    if df.shape[1] != len(ROSTER_COLUMNS):
        raise ConfigurationError(
            f"Precinct roster {path} has {df.shape[1]} columns; expected {len(ROSTER_COLUMNS)}."
        )
    df.columns = ROSTER_COLUMNS
    if df.isna().any().any():
        raise ConfigurationError(f"Precinct roster {path} has incomplete rows.")

    try:
        df[_INT_COLUMNS] = df[_INT_COLUMNS].astype(int)
        df[_FLOAT_COLUMNS] = df[_FLOAT_COLUMNS].astype(float)
    except ValueError as exc:
        raise ConfigurationError(f"Precinct roster {path} has non-numeric fields: {exc}") from exc
    return df


def load_precincts(path: Path | str) -> dict[int, Precinct]:
    """
    Load the whitespace-separated precinct roster, keyed and ordered by number.

    A repeated precinct number replaces the earlier row.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Precinct roster {path} not found")

    df = _read_roster_frame(path)

    precincts: dict[int, Precinct] = {}
    for row in df.itertuples(index=False):
        precinct = Precinct(
            number=int(row.number),
            name=str(row.name),
            turnout=float(row.turnout),
            registered=int(row.registered),
            expected_voters=int(row.expected_voters),
            expected_per_hour=int(row.expected_per_hour),
            stations=int(row.stations),
            minority=float(row.minority),
            histogram_stations=frozenset({int(row.histo_1), int(row.histo_2), int(row.histo_3)}),
        )
        if precinct.number in precincts:
            logger.warning("Precinct %d appears more than once; keeping the last row", precinct.number)
        precincts[precinct.number] = precinct

    logger.info("Loaded %d precincts from %s", len(precincts), path)
    return dict(sorted(precincts.items()))


def profile_for(precinct: Precinct, config: SimulationConfig) -> PrecinctProfile:
    profile = PrecinctProfile(
        expected_voters=precinct.expected_voters,
        zero_fraction=config.zero_fraction,
        arrival_fractions=tuple(config.arrival_fractions),
        mean_service_seconds=config.mean_service_seconds,
        too_long_minutes=config.too_long_minutes,
        day_length_hours=config.day_length_hours,
    )
    profile.validate()
    return profile
