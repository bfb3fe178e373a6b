"""TickContext - explicit per-tick state for behaviour updates.

Behaviours receive everything they may read or mutate through this object
instead of reaching into the engine: the grid, the stats record, the
resolved season, the shared RNG and the run configuration.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ecosim.seasons import Season

if TYPE_CHECKING:
    from ecosim.config.simulation_config import SimulationConfig
    from ecosim.spatial.grid import Grid
    from ecosim.stats import MonthlyStats


@dataclass
class TickContext:
    """Per-tick state shared by every behaviour call.

    Attributes:
        grid: Authoritative occupancy map and registries
        stats: Stats record for the running tick
        season: Season resolved for this tick
        rng: The engine's single RNG
        config: Run configuration
        tick: One-based number of the running tick
    """

    grid: "Grid"
    stats: "MonthlyStats"
    season: Season
    rng: random.Random
    config: "SimulationConfig"
    tick: int = 0
