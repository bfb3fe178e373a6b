"""Engine-level systems (calendar, migration, entity lifecycle)."""

from ecosim.systems.base import BaseSystem, SystemResult
from ecosim.systems.lifecycle import EntityLifecycleSystem
from ecosim.systems.migration import MigrationSystem
from ecosim.systems.season import SeasonSystem

__all__ = [
    "BaseSystem",
    "EntityLifecycleSystem",
    "MigrationSystem",
    "SeasonSystem",
    "SystemResult",
]
