from __future__ import annotations

import logging
from typing import Iterator, Mapping

from pollsim.config import Precinct, SimulationConfig, profile_for
from pollsim.search import CapacitySearch, SearchResult
from pollsim.streams import NumpyRandomStream

logger = logging.getLogger(__name__)


class Simulation:
    """
    Runs the station-count search for every precinct whose expected turnout is
    in ``(min_expected, max_expected]``, one precinct after another.
    """

    def __init__(self, config: SimulationConfig, precincts: Mapping[int, Precinct]) -> None:
        config.validate()
        self._config = config
        self._precincts = dict(sorted(precincts.items()))

    def selected(self) -> list[Precinct]:
        lo, hi = self._config.min_expected, self._config.max_expected
        return [p for p in self._precincts.values() if lo < p.expected_voters <= hi]

    def iter_results(self, root: NumpyRandomStream | None = None) -> Iterator[tuple[Precinct, SearchResult]]:
        """
        Search every selected precinct, yielding each result as soon as it is
        ready.  Each precinct draws from its own child of ``root`` (seeded from
        the configuration by default).
        """
        if root is None:
            root = NumpyRandomStream(self._config.seed)

        precincts = self.selected()
        streams = root.spawn(len(precincts))

        for precinct, stream in zip(precincts, streams):
            logger.info(
                "Precinct %d %s: %d expected voters",
                precinct.number,
                precinct.name,
                precinct.expected_voters,
            )
            search = CapacitySearch(
                profile_for(precinct, self._config),
                self._config.service_times,
                self._config.iterations,
            )
            yield precinct, search.run(stream)

        logger.info("Precinct count this batch: %d", len(precincts))

    def run(self, root: NumpyRandomStream | None = None) -> dict[int, SearchResult]:
        return {precinct.number: result for precinct, result in self.iter_results(root)}

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def precincts(self) -> dict[int, Precinct]:
        return dict(self._precincts)
