"""Builder for exporting run statistics.

Keeps the export format out of the engine. The output is one JSON document
with run metadata, per-species totals and the full per-tick history.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, List

import orjson

if TYPE_CHECKING:
    from ecosim.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

# Counters summed across the run for the totals section
_TOTAL_FIELDS = (
    "plants_eaten",
    "plants_died_natural_age",
    "plants_died_weather",
    "plants_spread",
    "herbivores_eaten",
    "herbivores_died_natural",
    "herbivores_spawned",
    "carnivores_eaten",
    "carnivores_died_natural",
    "carnivores_spawned",
    "animals_immigrated",
    "animals_emigrated",
)


class SimulationStatsExporter:
    """Build and persist run statistics."""

    def __init__(self, engine: "SimulationEngine") -> None:
        self.engine = engine

    def build(self) -> Dict[str, Any]:
        """Assemble the export document."""
        history = [report.model_dump() for report in self.engine.history]
        return {
            "simulation_metadata": self._build_metadata(),
            "totals": self._build_totals(history),
            "population_trend": self._build_population_trend(history),
            "history": history,
        }

    def export_stats_json(self, filename: str) -> None:
        """Write the export document to ``filename`` as indented JSON."""
        export_data = self.build()
        with open(filename, "wb") as f:
            f.write(orjson.dumps(export_data, option=orjson.OPT_INDENT_2))

        logger.info("Stats exported to: %s", filename)
        logger.info("Export includes %d monthly reports", len(export_data["history"]))

    def _build_metadata(self) -> Dict[str, Any]:
        engine = self.engine
        return {
            "seed": engine.seed,
            "config": engine.config.to_dict(),
            "months_completed": engine.completed_months,
            "finished": engine.is_finished,
            "end_reason": engine.end_reason,
        }

    @staticmethod
    def _build_totals(history: List[Dict[str, Any]]) -> Dict[str, int]:
        # Tick 0 is the initial setup; it carries populations but no activity.
        return {
            name: sum(report[name] for report in history if report["tick"] > 0)
            for name in _TOTAL_FIELDS
        }

    @staticmethod
    def _build_population_trend(history: List[Dict[str, Any]]) -> List[Dict[str, int]]:
        return [
            {
                "tick": report["tick"],
                "plants": report["current_plants"],
                "herbivores": report["current_herbivores"],
                "carnivores": report["current_carnivores"],
            }
            for report in history
        ]
