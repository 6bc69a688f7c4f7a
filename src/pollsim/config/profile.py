from __future__ import annotations

from dataclasses import dataclass

from pollsim._exceptions import ConfigurationError

SECONDS_PER_HOUR = 3600


@dataclass(frozen=True, slots=True)
class PrecinctProfile:
    """Everything the core needs to simulate one precinct's election day."""

    expected_voters: int
    zero_fraction: float
    arrival_fractions: tuple[float, ...]
    mean_service_seconds: int
    too_long_minutes: int
    day_length_hours: int

    @property
    def day_length_seconds(self) -> int:
        return self.day_length_hours * SECONDS_PER_HOUR

    def validate(self) -> None:
        if self.day_length_hours <= 0:
            raise ConfigurationError(
                f"Election day length must be positive; got {self.day_length_hours} hours."
            )
        if self.expected_voters <= 0:
            raise ConfigurationError(
                f"Expected voter count must be positive; got {self.expected_voters}."
            )
        if len(self.arrival_fractions) != self.day_length_hours:
            raise ConfigurationError(
                f"Expected {self.day_length_hours} hourly arrival fractions; "
                f"got {len(self.arrival_fractions)}."
            )
        if self.zero_fraction < 0.0 or any(f < 0.0 for f in self.arrival_fractions):
            raise ConfigurationError("Arrival fractions must be non-negative.")
        if self.mean_service_seconds < 0:
            raise ConfigurationError(
                f"Mean service time must be non-negative; got {self.mean_service_seconds}."
            )
