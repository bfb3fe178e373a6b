"""Update phase definitions for explicit tick ordering.

A tick (one simulated month) runs these phases in order. The engine calls
one method per phase; systems declare the phase they belong to with
``@runs_in_phase`` so diagnostics can report where work happens.

Ordering constraints that matter:

- Carnivores act before herbivores so predation and flight resolve in one
  consistent pass.
- Plants act last; they never affect animals.
- Migration runs after every entity has acted.
- Cleanup purges dead entities before population counts are taken.
"""

from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Dict, Optional

__all__ = [
    "UpdatePhase",
    "PHASE_DESCRIPTIONS",
    "runs_in_phase",
    "get_system_phase",
]

if TYPE_CHECKING:
    from ecosim.systems.base import BaseSystem


class UpdatePhase(Enum):
    """Phases of one simulation tick, in execution order."""

    TICK_START = auto()  # Advance counter, reset stats
    SEASON_UPDATE = auto()  # Resolve month and season
    CARNIVORES = auto()  # Update carnivore snapshot
    HERBIVORES = auto()  # Update herbivore snapshot
    PLANTS = auto()  # Update plant snapshot
    MIGRATION = auto()  # Spring immigration / Autumn emigration
    CLEANUP = auto()  # Purge dead entities
    TICK_END = auto()  # Population counts, termination checks


PHASE_DESCRIPTIONS: Dict[UpdatePhase, str] = {
    UpdatePhase.TICK_START: "Starting month, resetting counters",
    UpdatePhase.SEASON_UPDATE: "Resolving month and season",
    UpdatePhase.CARNIVORES: "Updating carnivores",
    UpdatePhase.HERBIVORES: "Updating herbivores",
    UpdatePhase.PLANTS: "Updating plants",
    UpdatePhase.MIGRATION: "Applying seasonal migration",
    UpdatePhase.CLEANUP: "Removing dead entities",
    UpdatePhase.TICK_END: "Counting populations and checking termination",
}


def runs_in_phase(phase: UpdatePhase) -> Callable:
    """Decorator to declare which phase a system runs in.

    Example:
        @runs_in_phase(UpdatePhase.MIGRATION)
        class MigrationSystem(BaseSystem):
            def _do_update(self, tick: int) -> SystemResult:
                ...
    """

    def decorator(cls):
        cls._phase = phase
        return cls

    return decorator


def get_system_phase(system: "BaseSystem") -> Optional[UpdatePhase]:
    """Get the phase a system is declared to run in."""
    return getattr(system, "_phase", None)
