import heapq

from pollsim._exceptions import ConfigurationError, InvariantViolation


class StationPool:
    """
    Fixed set of station ids ``0 .. count-1`` split into free and occupied.
    :meth:`acquire` always hands out the lowest free id.
    """

    def __init__(self, count: int) -> None:
        if count < 1:
            raise ConfigurationError(f"Station count must be at least 1; got {count}.")
        self._count = int(count)
        self._free: list[int] = list(range(self._count))
        heapq.heapify(self._free)
        self._occupied: set[int] = set()

    def acquire(self) -> int:
        if not self._free:
            raise InvariantViolation("No free station to assign.")
        station = heapq.heappop(self._free)
        self._occupied.add(station)
        return station

    def release(self, station: int) -> None:
        if station not in self._occupied:
            raise InvariantViolation(f"Station {station} released while not occupied.")
        self._occupied.remove(station)
        heapq.heappush(self._free, station)

    @property
    def count(self) -> int:
        return self._count

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def occupied(self) -> frozenset[int]:
        return frozenset(self._occupied)

    def __repr__(self) -> str:
        return (
            f"StationPool(count={self._count}, "
            f"free={sorted(self._free)}, "
            f"occupied={sorted(self._occupied)})"
        )
