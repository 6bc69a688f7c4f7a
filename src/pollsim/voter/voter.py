from __future__ import annotations

from enum import Enum

from pollsim._exceptions import InvariantViolation


class VoterState(Enum):
    PENDING = 0
    IN_SERVICE = 1
    COMPLETED = 2


class Voter:
    """
    One voter for one simulated day.

    Identity (sequence, arrival, duration) is fixed at creation.  Service fields
    are filled in exactly once by :meth:`assign`; the state only moves forward
    PENDING -> IN_SERVICE -> COMPLETED.
    """

    __slots__ = ("_sequence", "_arrival", "_duration", "_station", "_start", "_state")

    def __init__(self, sequence: int, arrival: int, duration: int) -> None:
        self._sequence = int(sequence)
        self._arrival = int(arrival)
        self._duration = int(duration)
        self._station: int | None = None
        self._start: int | None = None
        self._state = VoterState.PENDING

    # ── lifecycle ────────────────────────────────────────────────────────

    def assign(self, station: int, start: int) -> None:
        if self._state is not VoterState.PENDING:
            raise InvariantViolation(
                f"Voter {self._sequence} assigned while {self._state.name}."
            )
        if start < self._arrival:
            raise InvariantViolation(
                f"Voter {self._sequence} cannot start at {start} before arriving at {self._arrival}."
            )
        self._station = int(station)
        self._start = int(start)
        self._state = VoterState.IN_SERVICE

    def complete(self) -> None:
        if self._state is not VoterState.IN_SERVICE:
            raise InvariantViolation(
                f"Voter {self._sequence} completed while {self._state.name}."
            )
        self._state = VoterState.COMPLETED

    # ── identity ─────────────────────────────────────────────────────────

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def arrival(self) -> int:
        return self._arrival

    @property
    def duration(self) -> int:
        return self._duration

    # ── service assignment ───────────────────────────────────────────────

    @property
    def state(self) -> VoterState:
        return self._state

    @property
    def station(self) -> int | None:
        return self._station

    @property
    def start(self) -> int | None:
        return self._start

    @property
    def wait(self) -> int | None:
        if self._start is None:
            return None
        return self._start - self._arrival

    @property
    def finish(self) -> int | None:
        if self._start is None:
            return None
        return self._start + self._duration

    def __repr__(self) -> str:
        return (
            f"Voter(sequence={self._sequence}, arrival={self._arrival}, "
            f"duration={self._duration}, station={self._station}, "
            f"start={self._start}, state={self._state.name})"
        )
