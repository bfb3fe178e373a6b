"""Tick engine - the slim orchestrator.

The engine owns the grid, the stats record and the systems, and runs one
simulated month per ``update()`` call in a fixed phase order (see
``UpdatePhase``). Species rules live in ``ecosim.behaviors``; removal lives
in ``EntityLifecycleSystem``; the engine only sequences them.

Design Decisions:
-----------------
1. Entity iteration always walks a point-in-time copy of the registries
   taken before any entity acts. Entities born mid-tick act from the next
   tick on; entities killed mid-tick are skipped by an ``alive`` guard.

2. Carnivores act before herbivores, plants act last.

3. Early termination is a normal outcome: it records a human-readable
   reason and marks the run finished. It is never an exception.
"""

import logging
import random
from typing import Any, Dict, Iterator, List, Optional

from ecosim.behaviors import TickContext, update_entity
from ecosim.config.grid import MONTHS_PER_YEAR, RANDOM_PLACEMENT_RETRY_FACTOR
from ecosim.config.simulation_config import SimulationConfig
from ecosim.entities.base import Species
from ecosim.entities.factory import create_entity
from ecosim.exceptions import SimulationError
from ecosim.seasons import Season, year_of_tick
from ecosim.snapshots import EntityData, GridSnapshot, TickReport
from ecosim.spatial.grid import Grid
from ecosim.stats import MonthlyStats
from ecosim.systems.base import BaseSystem
from ecosim.systems.lifecycle import EntityLifecycleSystem
from ecosim.systems.migration import MigrationSystem
from ecosim.systems.season import SeasonSystem
from ecosim.update_phases import PHASE_DESCRIPTIONS, UpdatePhase

logger = logging.getLogger(__name__)

INITIAL_SETUP_LABEL = "Initial Setup"

END_ALL_ANIMALS_DEAD = "All animals have died."
END_ALL_PLANTS_DEAD = "All plants have died. Remaining animals will likely starve."
END_ALL_HERBIVORES_DEAD = "All herbivores have died. Carnivores will starve."

# Species updated by each entity phase, in execution order
_ENTITY_PHASE_SPECIES = (
    (UpdatePhase.CARNIVORES, Species.CARNIVORE),
    (UpdatePhase.HERBIVORES, Species.HERBIVORE),
    (UpdatePhase.PLANTS, Species.PLANT),
)

# Initial stocking order
_STOCKING_ORDER = (Species.PLANT, Species.HERBIVORE, Species.CARNIVORE)


def completion_reason(months: int) -> str:
    """End-of-run message for a run that reached its configured duration."""
    if months % MONTHS_PER_YEAR == 0:
        years = months // MONTHS_PER_YEAR
        unit = "year" if years == 1 else "years"
        return f"Simulation for {years} {unit} ({months} months) finished."
    return f"Simulation for {months} months finished."


class SimulationEngine:
    """Grid ecosystem simulation engine.

    Architecture:
        SimulationEngine (coordinator)
        ├── Grid (arena, cell map, species registries)
        ├── MonthlyStats (per-tick counters and events)
        ├── SeasonSystem (calendar)
        ├── MigrationSystem (Spring/Autumn migration)
        └── EntityLifecycleSystem (end-of-tick purge)

    Attributes:
        config: Run configuration
        rng: The single RNG every stochastic decision draws from
        seed: Seed used to build ``rng`` (None if an RNG was injected)
        grid: Authoritative world state
        stats: Stats record of the latest tick
        tick: Number of completed ticks
        history: Report of every tick, starting with the initial setup
        end_reason: Why the run finished, once it has
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Run configuration (defaults to the reference instance)
            rng: Shared random number generator for deterministic runs
            seed: Optional seed (used if rng is not provided)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or SimulationConfig()
        self.config.validate()

        if rng is not None:
            self.rng: random.Random = rng
            self.seed: Optional[int] = None
        elif seed is not None:
            self.rng = random.Random(seed)
            self.seed = seed
        else:
            self.seed = random.SystemRandom().randrange(2**32)
            self.rng = random.Random(self.seed)

        self.grid = Grid(self.config.width, self.config.height)
        self.stats = MonthlyStats()
        self.tick: int = 0
        self.history: List[TickReport] = []
        self.end_reason: Optional[str] = None
        self._finished = False
        self._is_setup = False

        self.season_system = SeasonSystem(self, self.config.hemisphere)
        self.migration_system = MigrationSystem(self)
        self.lifecycle_system = EntityLifecycleSystem(self)

        self._current_phase: Optional[UpdatePhase] = None

        logger.info(
            "SimulationEngine initialized: seed=%s grid=%dx%d hemisphere=%s months=%d",
            self.seed,
            self.config.width,
            self.config.height,
            self.config.hemisphere.value,
            self.config.duration_months,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def season(self) -> Season:
        return self.season_system.season

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def is_setup(self) -> bool:
        return self._is_setup

    @property
    def completed_months(self) -> int:
        return self.tick

    @property
    def latest_report(self) -> Optional[TickReport]:
        return self.history[-1] if self.history else None

    # =========================================================================
    # Systems
    # =========================================================================

    def get_systems(self) -> List[BaseSystem]:
        return [self.season_system, self.migration_system, self.lifecycle_system]

    def get_system(self, name: str) -> Optional[BaseSystem]:
        for system in self.get_systems():
            if system.name == name:
                return system
        return None

    def get_current_phase(self) -> Optional[UpdatePhase]:
        return self._current_phase

    def get_phase_description(self, phase: Optional[UpdatePhase] = None) -> str:
        """Human-readable description of a phase (the current one by default)."""
        target = phase if phase is not None else self._current_phase
        if target is None:
            return "Idle"
        return PHASE_DESCRIPTIONS.get(target, target.name)

    # =========================================================================
    # Setup
    # =========================================================================

    def setup(self) -> TickReport:
        """Stock the grid with the configured initial population.

        Plants are placed first, then herbivores, then carnivores, each at
        random empty cells. A species that cannot be fully placed is logged
        and the rest of it skipped.

        Returns:
            The initial-setup report (tick 0)
        """
        if self._is_setup:
            raise SimulationError("Simulation is already set up")

        requested = {
            Species.PLANT: self.config.initial_plants,
            Species.HERBIVORE: self.config.initial_herbivores,
            Species.CARNIVORE: self.config.initial_carnivores,
        }
        max_attempts = self.grid.capacity * RANDOM_PLACEMENT_RETRY_FACTOR
        for species in _STOCKING_ORDER:
            placed = 0
            for _ in range(requested[species]):
                cell = self.grid.random_empty_cell(self.rng, max_attempts)
                if cell is None:
                    break
                if self.grid.place(create_entity(species, cell, rng=self.rng)):
                    placed += 1
            if placed < requested[species]:
                logger.warning(
                    "Could not place all %ss: placed %d of %d (grid may be full)",
                    species.value.lower(),
                    placed,
                    requested[species],
                )

        self._is_setup = True
        self.stats.reset()
        self.stats.set_calendar(INITIAL_SETUP_LABEL, self.season.value)
        self._count_population()
        report = TickReport.from_stats(0, 1, self.stats)
        self.history.append(report)

        logger.info(
            "Initial population: %d plants, %d herbivores, %d carnivores",
            self.stats.current_plants,
            self.stats.current_herbivores,
            self.stats.current_carnivores,
        )
        return report

    # =========================================================================
    # Core Update Loop
    # =========================================================================

    def update(self) -> Optional[TickReport]:
        """Advance the simulation by one month.

        Phase Order:
            1. TICK_START: Increment tick, reset stats
            2. SEASON_UPDATE: Resolve month and season
            3. CARNIVORES / HERBIVORES / PLANTS: Update registry snapshots
            4. MIGRATION: Spring immigration, Autumn emigration
            5. CLEANUP: Purge dead entities
            6. TICK_END: Count populations, check termination, publish report

        Returns:
            The report for this tick, or None if the run already finished

        Raises:
            SimulationError: If called before setup()
        """
        if not self._is_setup:
            raise SimulationError("setup() must be called before update()")
        if self._finished:
            return None

        self._phase_tick_start()
        ctx = self._phase_season_update()
        self._phase_entities(ctx)
        self._phase_migration()
        self._phase_cleanup()
        return self._phase_tick_end()

    # -------------------------------------------------------------------------
    # Phase Implementations
    # -------------------------------------------------------------------------

    def _phase_tick_start(self) -> None:
        """TICK_START: Increment tick, reset per-tick counters."""
        self._current_phase = UpdatePhase.TICK_START
        self.tick += 1
        self.stats.reset()
        self.lifecycle_system.update(self.tick)

    def _phase_season_update(self) -> TickContext:
        """SEASON_UPDATE: Resolve the calendar and build the tick context."""
        self._current_phase = UpdatePhase.SEASON_UPDATE
        self.season_system.update(self.tick)
        self.stats.set_calendar(self.season_system.month_name, self.season.value)
        return TickContext(
            grid=self.grid,
            stats=self.stats,
            season=self.season,
            rng=self.rng,
            config=self.config,
            tick=self.tick,
        )

    def _phase_entities(self, ctx: TickContext) -> None:
        """CARNIVORES, HERBIVORES, PLANTS: update each species in turn.

        All three registries are copied before anyone acts.
        """
        snapshots = {species: self.grid.handles(species) for _, species in _ENTITY_PHASE_SPECIES}
        for phase, species in _ENTITY_PHASE_SPECIES:
            self._current_phase = phase
            for handle in snapshots[species]:
                entity = self.grid.get(handle)
                if entity is None or not entity.alive:
                    continue
                update_entity(entity, ctx)

    def _phase_migration(self) -> None:
        """MIGRATION: Seasonal arrivals and departures."""
        self._current_phase = UpdatePhase.MIGRATION
        self.migration_system.update(self.tick)

    def _phase_cleanup(self) -> None:
        """CLEANUP: Purge dead entities from the grid."""
        self._current_phase = UpdatePhase.CLEANUP
        self.lifecycle_system.reconcile()

    def _phase_tick_end(self) -> TickReport:
        """TICK_END: Count populations, check termination, publish the report."""
        self._current_phase = UpdatePhase.TICK_END
        self._count_population()

        reason = self._termination_reason()
        if reason is None and self.tick >= self.config.duration_months:
            reason = completion_reason(self.tick)
        if reason is not None:
            self.stop(reason)

        report = TickReport.from_stats(self.tick, year_of_tick(self.tick), self.stats)
        report.end_reason = self.end_reason
        self.history.append(report)

        logger.debug(
            "Tick %d (%s, %s): plants=%d herbivores=%d carnivores=%d events=%d",
            self.tick,
            self.stats.month_name,
            self.stats.season_name,
            self.stats.current_plants,
            self.stats.current_herbivores,
            self.stats.current_carnivores,
            len(self.stats.events),
        )
        self._current_phase = None
        return report

    def _count_population(self) -> None:
        self.stats.set_population(
            plants=self.grid.count(Species.PLANT),
            herbivores=self.grid.count(Species.HERBIVORE),
            carnivores=self.grid.count(Species.CARNIVORE),
        )

    def _termination_reason(self) -> Optional[str]:
        """Early-termination predicates, checked from the second tick on."""
        if self.tick <= 1:
            return None
        stats = self.stats
        if stats.total_animals == 0:
            return END_ALL_ANIMALS_DEAD
        if stats.current_plants == 0:
            return END_ALL_PLANTS_DEAD
        if stats.current_herbivores == 0 and stats.current_carnivores > 0:
            return END_ALL_HERBIVORES_DEAD
        return None

    # =========================================================================
    # Control
    # =========================================================================

    def stop(self, reason: str = "Simulation stopped.") -> None:
        """Finish the run. Further update() calls are no-ops."""
        if self._finished:
            return
        self._finished = True
        self.end_reason = reason
        logger.info("Simulation finished after %d months: %s", self.tick, reason)

    def run(self, max_months: Optional[int] = None) -> Iterator[TickReport]:
        """Yield one report per tick until the run finishes.

        Sets the simulation up first if needed.

        Args:
            max_months: Optional cap on ticks run by this call
        """
        if not self._is_setup:
            self.setup()
        ran = 0
        while not self._finished and (max_months is None or ran < max_months):
            report = self.update()
            if report is None:
                break
            ran += 1
            yield report

    def run_to_completion(self) -> List[TickReport]:
        return list(self.run())

    # =========================================================================
    # Read-only views
    # =========================================================================

    def snapshot(self) -> GridSnapshot:
        """Enumerate live entities (row-major) for rendering."""
        return GridSnapshot(
            tick=self.tick,
            width=self.grid.width,
            height=self.grid.height,
            month_name=self.stats.month_name,
            season=self.season.value,
            entities=[EntityData.from_entity(e) for e in self.grid.occupants()],
        )

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "tick": self.tick,
            "seed": self.seed,
            "finished": self._finished,
            "end_reason": self.end_reason,
            "phase": self.get_phase_description(),
            "grid": repr(self.grid),
            "systems": [system.get_debug_info() for system in self.get_systems()],
        }
