"""Entity lifecycle system.

This is the SINGLE OWNER of end-of-tick removal. Behaviours only mark
entities dead (or, for predation and emigration, deregister them at once);
the reconcile step here sweeps the grid and purges every dead entity from
the registries, the cell map and the arena.

Runs in UpdatePhase.CLEANUP. ``_do_update`` resets the per-tick counters
at the start of each tick; ``reconcile`` is called explicitly by the engine.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict

from ecosim.entities.base import Species
from ecosim.systems.base import BaseSystem, SystemResult
from ecosim.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from ecosim.simulation.engine import SimulationEngine

logger = logging.getLogger(__name__)


@runs_in_phase(UpdatePhase.CLEANUP)
class EntityLifecycleSystem(BaseSystem):
    """Purges dead entities and keeps removal totals.

    Attributes:
        _removed_this_tick: Entities purged by the latest reconcile
        _total_removed: Entities purged over the whole run, per species
    """

    def __init__(self, engine: "SimulationEngine") -> None:
        super().__init__(engine, "EntityLifecycle")
        self._removed_this_tick = 0
        self._total_removed: Dict[Species, int] = {species: 0 for species in Species}

    def _do_update(self, tick: int) -> None:
        self._removed_this_tick = 0

    def reconcile(self) -> SystemResult:
        """Purge every dead entity from the grid.

        Returns:
            SystemResult with per-species purge counts
        """
        purged = self._engine.grid.purge_dead()
        per_species: Dict[str, int] = {}
        for entity in purged:
            self._total_removed[entity.species] += 1
            per_species[entity.species.value] = per_species.get(entity.species.value, 0) + 1

        self._removed_this_tick = len(purged)
        if purged:
            logger.debug("Reconcile purged %d entities: %s", len(purged), per_species)
        return SystemResult(entities_removed=len(purged), details=per_species)

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            **super().get_debug_info(),
            "removed_this_tick": self._removed_this_tick,
            "total_removed": {s.value: n for s, n in self._total_removed.items()},
        }
