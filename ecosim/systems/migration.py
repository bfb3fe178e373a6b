"""Seasonal migration system.

Runs in UpdatePhase.MIGRATION, after every entity has acted.

- Spring: one to three animals of random species and gender arrive at
  random empty cells.
- Autumn: a small, population-proportional number of herbivores and
  carnivores leave. Victims are drawn uniformly (with replacement) from the
  live registries; a victim that already left is skipped.
- Winter and Summer: no migration.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict

from ecosim.config.ecosystem import (
    CARNIVORE_EMIGRATION_CAP,
    CARNIVORE_EMIGRATION_DIVISOR,
    CARNIVORE_EMIGRATION_FLOOR,
    HERBIVORE_EMIGRATION_CAP,
    HERBIVORE_EMIGRATION_DIVISOR,
    HERBIVORE_EMIGRATION_FLOOR,
    IMMIGRATION_MAX,
    IMMIGRATION_MIN,
)
from ecosim.entities.base import Species, format_position
from ecosim.entities.factory import create_animal, params_for, random_gender
from ecosim.seasons import Season
from ecosim.systems.base import BaseSystem, SystemResult
from ecosim.update_phases import UpdatePhase, runs_in_phase
from ecosim.util.rng import require_rng

if TYPE_CHECKING:
    from ecosim.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)

_MIGRANT_SPECIES = (Species.HERBIVORE, Species.CARNIVORE)

# species -> (floor, divisor, cap)
_EMIGRATION_RULES = {
    Species.HERBIVORE: (
        HERBIVORE_EMIGRATION_FLOOR,
        HERBIVORE_EMIGRATION_DIVISOR,
        HERBIVORE_EMIGRATION_CAP,
    ),
    Species.CARNIVORE: (
        CARNIVORE_EMIGRATION_FLOOR,
        CARNIVORE_EMIGRATION_DIVISOR,
        CARNIVORE_EMIGRATION_CAP,
    ),
}


@runs_in_phase(UpdatePhase.MIGRATION)
class MigrationSystem(BaseSystem):
    """Applies Spring immigration and Autumn emigration.

    Attributes:
        _total_immigrated: Animals that arrived over the whole run
        _total_emigrated: Animals that left over the whole run
    """

    def __init__(self, engine: "SimulationEngine") -> None:
        super().__init__(engine, "Migration")
        self._total_immigrated = 0
        self._total_emigrated = 0

    def _do_update(self, tick: int) -> SystemResult:
        season = self._engine.season
        if season is Season.SPRING:
            arrived = self.immigrate()
            return SystemResult(entities_spawned=arrived, details={"immigrated": arrived})
        if season is Season.AUTUMN:
            left = self.emigrate()
            return SystemResult(entities_removed=left, details={"emigrated": left})
        return SystemResult.empty()

    def immigrate(self) -> int:
        """Place 1-3 random animals at random empty cells.

        Returns:
            Number of animals placed
        """
        grid = self._engine.grid
        stats = self._engine.stats
        rng = require_rng(self._engine, "MigrationSystem.immigrate")

        arrivals = rng.randint(IMMIGRATION_MIN, IMMIGRATION_MAX)
        placed = 0
        for _ in range(arrivals):
            species = rng.choice(_MIGRANT_SPECIES)
            gender = random_gender(rng)
            cell = grid.random_empty_cell(rng, grid.capacity)
            if cell is None:
                continue
            animal = create_animal(species, cell, gender=gender, rng=rng)
            if not grid.place(animal):
                continue
            placed += 1
            stats.animals_immigrated += 1
            stats.record_event(
                f"{params_for(species).name} immigrated to {format_position(cell)}."
            )

        self._total_immigrated += placed
        logger.debug("Immigration: %d of %d arrivals placed", placed, arrivals)
        return placed

    def emigrate(self) -> int:
        """Remove a capped random sample of herbivores and carnivores.

        Returns:
            Number of animals removed
        """
        grid = self._engine.grid
        stats = self._engine.stats
        rng = require_rng(self._engine, "MigrationSystem.emigrate")

        removed = 0
        for species in _MIGRANT_SPECIES:
            floor, divisor, cap = _EMIGRATION_RULES[species]
            population = grid.entities(species)
            if len(population) <= floor:
                continue
            departures = rng.randint(0, min(len(population) // divisor, cap))
            for _ in range(departures):
                animal = rng.choice(population)
                if not animal.alive:
                    continue
                stats.record_event(
                    f"{animal.species_name} at {format_position(animal.position)} emigrated."
                )
                grid.remove(animal)
                stats.animals_emigrated += 1
                removed += 1

        self._total_emigrated += removed
        logger.debug("Emigration: %d animals left", removed)
        return removed

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            **super().get_debug_info(),
            "total_immigrated": self._total_immigrated,
            "total_emigrated": self._total_emigrated,
        }
