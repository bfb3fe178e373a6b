"""Grid ecosystem simulation core.

Plants, herbivores and carnivores share a fixed-size grid and interact
through foraging, predation, reproduction, aging, seasons and migration.
One tick is one simulated month. Key modules:

- simulation: The tick engine (ecosim.simulation.engine)
- spatial: Grid occupancy map and species registries
- entities: Plant and Animal state
- behaviors: Per-species rules, dispatched by species tag
- systems: Calendar, migration and entity lifecycle
- snapshots: Read-only payloads for presentation

This package has no I/O beyond logging; rendering and export live in
``ecosim.rendering`` and ``ecosim.stats_exporter``.
"""

from . import entities as entities
from . import simulation as simulation
from .config.simulation_config import SimulationConfig
from .seasons import Hemisphere, Season
from .simulation.engine import SimulationEngine

__version__ = "0.1.0"

__all__ = [
    "entities",
    "simulation",
    "Hemisphere",
    "Season",
    "SimulationConfig",
    "SimulationEngine",
]
