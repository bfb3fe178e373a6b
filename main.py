"""Main entry point for the grid ecosystem simulation.

Runs a simulation from command-line options and prints the grid and the
monthly statistics after every simulated month.
"""

import argparse
import logging
import sys
from typing import List, Optional

from ecosim.config.grid import (
    DEFAULT_INITIAL_CARNIVORES,
    DEFAULT_INITIAL_HERBIVORES,
    DEFAULT_INITIAL_PLANTS,
    DEFAULT_SIMULATION_YEARS,
    MAX_SIMULATION_YEARS,
)
from ecosim.config.simulation_config import SimulationConfig
from ecosim.exceptions import ConfigurationError
from ecosim.logging_config import configure_logging
from ecosim.rendering import render_grid, render_legend, render_report, render_summary
from ecosim.seasons import Hemisphere
from ecosim.simulation.engine import SimulationEngine
from ecosim.stats_exporter import SimulationStatsExporter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grid Ecosystem Simulation (plants, herbivores, carnivores)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # One year in the Northern hemisphere with default populations
  python main.py

  # Five years in the Southern hemisphere, reproducible
  python main.py --hemisphere S --years 5 --seed 42

  # Headline numbers only, with a JSON export
  python main.py --years 10 --quiet --export-stats run.json
        """,
    )

    parser.add_argument(
        "--hemisphere",
        type=str.upper,
        choices=["N", "S"],
        default="N",
        help="Hemisphere selecting the season calendar (default: N)",
    )
    parser.add_argument(
        "--years",
        type=int,
        default=DEFAULT_SIMULATION_YEARS,
        help=f"Years to simulate, 1-{MAX_SIMULATION_YEARS} (default: {DEFAULT_SIMULATION_YEARS})",
    )
    parser.add_argument(
        "--plants", type=int, default=DEFAULT_INITIAL_PLANTS, help="Initial plant count"
    )
    parser.add_argument(
        "--herbivores",
        type=int,
        default=DEFAULT_INITIAL_HERBIVORES,
        help="Initial herbivore count",
    )
    parser.add_argument(
        "--carnivores",
        type=int,
        default=DEFAULT_INITIAL_CARNIVORES,
        help="Initial carnivore count",
    )
    parser.add_argument(
        "--carnivore-energy-gain",
        type=int,
        default=None,
        help="Energy a carnivore gains per herbivore eaten (default: 45)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for deterministic behavior (optional)"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Skip the per-month grid and report; print only the final summary",
    )
    parser.add_argument(
        "--export-stats",
        type=str,
        default=None,
        metavar="FILENAME",
        help="Export run statistics to a JSON file (e.g., results.json)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: ECOSIM_LOG_LEVEL env var or INFO)",
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Translate CLI options into a validated configuration.

    Raises:
        ConfigurationError: If any option is out of range
    """
    if not 1 <= args.years <= MAX_SIMULATION_YEARS:
        raise ConfigurationError(
            f"--years must be between 1 and {MAX_SIMULATION_YEARS}, got {args.years}"
        )
    for name in ("plants", "herbivores", "carnivores"):
        if getattr(args, name) < 0:
            raise ConfigurationError(f"--{name} cannot be negative")

    overrides = {}
    if args.carnivore_energy_gain is not None:
        overrides["carnivore_energy_gain"] = args.carnivore_energy_gain

    config = SimulationConfig.from_years(
        args.years,
        hemisphere=Hemisphere.from_code(args.hemisphere),
        initial_plants=args.plants,
        initial_herbivores=args.herbivores,
        initial_carnivores=args.carnivores,
        **overrides,
    )
    config.validate()
    return config


def run_simulation(
    config: SimulationConfig,
    seed: Optional[int] = None,
    quiet: bool = False,
    export_stats: Optional[str] = None,
) -> SimulationEngine:
    """Run one simulation to completion, printing as it goes."""
    engine = SimulationEngine(config, seed=seed)
    initial = engine.setup()

    if not quiet:
        print(render_legend())
        print(render_grid(engine.snapshot()))
        print(render_report(initial))

    for report in engine.run():
        if quiet:
            continue
        print()
        print(f"===== Year {report.year}, {report.month_name} =====")
        print(render_grid(engine.snapshot()))
        print(render_report(report))

    print()
    print(render_summary(engine.history, engine.end_reason))

    if export_stats:
        SimulationStatsExporter(engine).export_stats_json(export_stats)
    return engine


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command-line arguments and run the simulation."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(level=args.log_level)

    try:
        config = config_from_args(args)
    except ConfigurationError as exc:
        parser.error(str(exc))

    logger.info(
        "Starting simulation: %d years, hemisphere %s", args.years, config.hemisphere.value
    )
    if args.export_stats:
        logger.info("Stats will be exported to: %s", args.export_stats)

    run_simulation(config, seed=args.seed, quiet=args.quiet, export_stats=args.export_stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
