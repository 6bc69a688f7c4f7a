from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import numpy as np

from pollsim._exceptions import ConfigurationError
from pollsim.config.profile import SECONDS_PER_HOUR

logger = logging.getLogger(__name__)

_PERCENT_TOLERANCE = 1.0
_FIRST_LINE_FIELDS = (
    "seed",
    "day_length_hours",
    "mean_service_seconds",
    "min_expected",
    "max_expected",
    "too_long_minutes",
    "iterations",
)


@dataclass(frozen=True)
class SimulationConfig:
    """
    Run-wide settings shared by every precinct.

    ``zero_fraction`` and ``arrival_fractions`` are percentages of the expected
    turnout: waiting when the polls open, and arriving during each hour.
    ``service_times`` is the sorted table of observed voting durations (seconds).
    """

    seed: int
    day_length_hours: int
    mean_service_seconds: int
    min_expected: int
    max_expected: int
    too_long_minutes: int
    iterations: int
    zero_fraction: float
    arrival_fractions: tuple[float, ...]
    service_times: tuple[int, ...]

    @property
    def day_length_seconds(self) -> int:
        return self.day_length_hours * SECONDS_PER_HOUR

    def validate(self) -> None:
        if self.day_length_hours <= 0:
            raise ConfigurationError(
                f"Election day length must be positive; got {self.day_length_hours} hours."
            )
        if len(self.arrival_fractions) != self.day_length_hours:
            raise ConfigurationError(
                f"Expected {self.day_length_hours} hourly arrival fractions; "
                f"got {len(self.arrival_fractions)}."
            )
        if self.iterations < 1:
            raise ConfigurationError(f"Iterations must be at least 1; got {self.iterations}.")
        if not self.service_times:
            raise ConfigurationError("Service-time table is empty.")
        if min(self.service_times) <= 0:
            raise ConfigurationError("Service times must be positive.")

        total = self.zero_fraction + sum(self.arrival_fractions)
        if abs(total - 100.0) > _PERCENT_TOLERANCE:
            logger.warning("Arrival percentages sum to %.2f, not 100", total)


def parse_service_times(text: str) -> tuple[int, ...]:
    try:
        values = np.array(text.split(), dtype=np.int64)
    except ValueError as exc:
        raise ConfigurationError(f"Service-time table is not all integers: {exc}") from exc
    return tuple(int(v) for v in np.sort(values))


def parse_configuration(text: str, service_times: Sequence[int]) -> SimulationConfig:
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ConfigurationError("Configuration needs a settings line and an arrivals line.")

    head = lines[0].split()
    if len(head) < len(_FIRST_LINE_FIELDS):
        raise ConfigurationError(
            f"Settings line needs {len(_FIRST_LINE_FIELDS)} integers "
            f"({', '.join(_FIRST_LINE_FIELDS)}); got {len(head)}."
        )
    try:
        settings = dict(zip(_FIRST_LINE_FIELDS, (int(tok) for tok in head)))
    except ValueError as exc:
        raise ConfigurationError(f"Settings line is not all integers: {exc}") from exc

    hours = settings["day_length_hours"]
    arrivals = lines[1].split()
    if len(arrivals) < 1 + max(hours, 0):
        raise ConfigurationError(
            f"Arrivals line needs a zero-arrival percentage and {hours} hourly "
            f"percentages; got {len(arrivals)} values."
        )
    try:
        fractions = [float(tok) for tok in arrivals[: 1 + max(hours, 0)]]
    except ValueError as exc:
        raise ConfigurationError(f"Arrivals line is not all numbers: {exc}") from exc

    config = SimulationConfig(
        zero_fraction=fractions[0],
        arrival_fractions=tuple(fractions[1:]),
        service_times=tuple(int(t) for t in service_times),
        **settings,
    )
    config.validate()
    return config


def read_configuration(
    config_path: Path | str,
    service_times_path: Path | str | None = None,
) -> SimulationConfig:
    """
    Read the two-line configuration file and the service-time table.

    The table defaults to ``dataallsorted.txt`` next to the configuration file.
    """

    config_path = Path(config_path)
    if service_times_path is None:
        service_times_path = config_path.with_name("dataallsorted.txt")
    service_times_path = Path(service_times_path)

    service_times = parse_service_times(service_times_path.read_text())
    config = parse_configuration(config_path.read_text(), service_times)
    logger.info(
        "Read configuration %s: %d hours, %d iterations, %d service times",
        config_path,
        config.day_length_hours,
        config.iterations,
        len(config.service_times),
    )
    return config
