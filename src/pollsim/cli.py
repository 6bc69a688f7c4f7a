from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from pollsim._exceptions import PollsimError
from pollsim.config import load_precincts, read_configuration
from pollsim.report import format_config, format_search
from pollsim.simulation import Simulation

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pollsim",
        description="Estimate how many voting stations each precinct needs.",
    )
    parser.add_argument("config", type=Path, help="Two-line simulation configuration file")
    parser.add_argument("precincts", type=Path, help="Precinct roster file")
    parser.add_argument("--service-times", type=Path, default=None,
                        help="Observed service times (default: dataallsorted.txt beside the config)")
    parser.add_argument("--output", type=Path, default=None,
                        help="Write the report here instead of stdout")
    parser.add_argument("--seed", type=int, default=None,
                        help="Override the random seed from the configuration")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def _write_report(simulation: Simulation, out: TextIO) -> None:
    out.write(format_config(simulation.config))
    out.write("\n")
    written = 0
    for precinct, result in simulation.iter_results():
        out.write(format_search(precinct, result))
        out.write("\n")
        out.flush()
        written += 1
    out.write(f"PRECINCT COUNT THIS BATCH {written:4d}\n")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = read_configuration(args.config, args.service_times)
        if args.seed is not None:
            config = dataclasses.replace(config, seed=args.seed)
        simulation = Simulation(config, load_precincts(args.precincts))

        if args.output is None:
            _write_report(simulation, sys.stdout)
        else:
            with args.output.open("w") as out:
                _write_report(simulation, out)
    except (PollsimError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    return 0
