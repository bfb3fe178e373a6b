"""Base class for engine systems.

A system owns one engine-level concern (calendar, migration, removal) and
is driven by the engine during its declared phase:

    @runs_in_phase(UpdatePhase.MIGRATION)
    class MigrationSystem(BaseSystem):
        def _do_update(self, tick):
            ...

The phase is metadata for diagnostics; the engine still calls each system
from its own ``_phase_*`` method so the tick order reads top to bottom.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

__all__ = [
    "SystemResult",
    "BaseSystem",
]

if TYPE_CHECKING:
    from ecosim.simulation.engine import SimulationEngine
    from ecosim.update_phases import UpdatePhase


@dataclass
class SystemResult:
    """What a system did during one tick.

    Attributes:
        entities_spawned: Entities placed on the grid
        entities_removed: Entities taken off the grid
        skipped: True when the system was disabled
        details: System-specific counters (e.g. {"immigrated": 2})
    """

    entities_spawned: int = 0
    entities_removed: int = 0
    skipped: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def skipped_result() -> "SystemResult":
        return SystemResult(skipped=True)

    @staticmethod
    def empty() -> "SystemResult":
        return SystemResult()


class BaseSystem(ABC):
    """Engine system with an on/off switch and an update counter.

    Subclasses implement ``_do_update``. ``update`` skips disabled systems
    and normalises a ``None`` return to an empty result.
    """

    # Set by @runs_in_phase
    _phase: Optional["UpdatePhase"] = None

    def __init__(self, engine: "SimulationEngine", name: str) -> None:
        self._engine = engine
        self._name = name
        self._enabled = True
        self._update_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @property
    def update_count(self) -> int:
        return self._update_count

    @property
    def phase(self) -> Optional["UpdatePhase"]:
        return self._phase

    def update(self, tick: int) -> SystemResult:
        """Run the system for tick ``tick`` (one-based)."""
        if not self._enabled:
            return SystemResult.skipped_result()

        result = self._do_update(tick)
        self._update_count += 1
        return result if result is not None else SystemResult.empty()

    @abstractmethod
    def _do_update(self, tick: int) -> Optional[SystemResult]:
        """System-specific work for one tick."""

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "enabled": self._enabled,
            "update_count": self._update_count,
            "phase": self._phase.name if self._phase else None,
        }

    def __repr__(self) -> str:
        phase = f", phase={self._phase.name}" if self._phase else ""
        return f"{type(self).__name__}({self._name!r}, enabled={self._enabled}{phase})"
