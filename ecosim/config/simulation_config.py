"""Run-level simulation configuration."""

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict

from ecosim.config.animals import CARNIVORE_PARAMS
from ecosim.config.grid import (
    DEFAULT_INITIAL_CARNIVORES,
    DEFAULT_INITIAL_HERBIVORES,
    DEFAULT_INITIAL_PLANTS,
    DEFAULT_SIMULATION_YEARS,
    GRID_HEIGHT,
    GRID_WIDTH,
    MONTHS_PER_YEAR,
)
from ecosim.exceptions import ConfigurationError
from ecosim.seasons import Hemisphere


@dataclass
class SimulationConfig:
    """Configuration for one simulation run.

    The engine only rejects an initial population that cannot fit on the
    grid; every other value is accepted as given.

    Attributes:
        width: Grid columns
        height: Grid rows
        hemisphere: Selects the month-to-season partition
        duration_months: Ticks to run before the run finishes normally
        initial_plants / initial_herbivores / initial_carnivores: Stocking counts
        carnivore_energy_gain: Energy a carnivore gains per herbivore eaten
    """

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    hemisphere: Hemisphere = Hemisphere.NORTHERN
    duration_months: int = DEFAULT_SIMULATION_YEARS * MONTHS_PER_YEAR
    initial_plants: int = DEFAULT_INITIAL_PLANTS
    initial_herbivores: int = DEFAULT_INITIAL_HERBIVORES
    initial_carnivores: int = DEFAULT_INITIAL_CARNIVORES
    carnivore_energy_gain: int = CARNIVORE_PARAMS.energy_gain_per_meal

    @classmethod
    def from_years(cls, years: int, **overrides: Any) -> "SimulationConfig":
        """Build a config whose duration is a whole number of years."""
        return cls(duration_months=years * MONTHS_PER_YEAR, **overrides)

    @property
    def capacity(self) -> int:
        """Maximum live population (one entity per cell)."""
        return self.width * self.height

    @property
    def initial_total(self) -> int:
        return self.initial_plants + self.initial_herbivores + self.initial_carnivores

    def with_overrides(self, **overrides: Any) -> "SimulationConfig":
        """Return a copy with selected fields replaced."""
        return replace(self, **overrides)

    def validate(self) -> None:
        """Validate configuration parameters.

        Raises:
            ConfigurationError: If the grid is degenerate or the initial
                population exceeds grid capacity
        """
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(
                f"Grid dimensions must be positive, got {self.width}x{self.height}"
            )

        if self.initial_total > self.capacity:
            raise ConfigurationError(
                f"Initial population {self.initial_total} exceeds grid capacity "
                f"{self.capacity} ({self.width}x{self.height})"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a JSON-friendly dictionary."""
        data = asdict(self)
        data["hemisphere"] = self.hemisphere.value
        return data
