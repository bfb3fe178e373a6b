"""Per-tick statistics and event log.

The engine resets one ``MonthlyStats`` record at the start of every tick and
behaviours append to it. Presentation code only reads it (through a
``TickReport`` snapshot).
"""

import copy
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from ecosim.entities.base import Species

_NATURAL_DEATH_FIELDS = {
    Species.HERBIVORE: "herbivores_died_natural",
    Species.CARNIVORE: "carnivores_died_natural",
}
_SPAWN_FIELDS = {
    Species.PLANT: "plants_spread",
    Species.HERBIVORE: "herbivores_spawned",
    Species.CARNIVORE: "carnivores_spawned",
}
_EATEN_FIELDS = {
    Species.PLANT: "plants_eaten",
    Species.HERBIVORE: "herbivores_eaten",
    Species.CARNIVORE: "carnivores_eaten",
}


@dataclass
class MonthlyStats:
    """Counters for one simulated month.

    ``carnivores_eaten`` stays at zero: carnivores are apex predators. It is
    kept so every species reports the same set of counters.
    """

    month_name: str = ""
    season_name: str = ""

    plants_eaten: int = 0
    plants_died_natural_age: int = 0
    plants_died_weather: int = 0
    plants_spread: int = 0
    current_plants: int = 0

    herbivores_eaten: int = 0
    herbivores_died_natural: int = 0
    herbivores_spawned: int = 0
    current_herbivores: int = 0

    carnivores_eaten: int = 0
    carnivores_died_natural: int = 0
    carnivores_spawned: int = 0
    current_carnivores: int = 0

    animals_immigrated: int = 0
    animals_emigrated: int = 0

    events: List[str] = field(default_factory=list)

    def reset(self) -> None:
        """Zero the per-tick counters and clear the event log.

        Population counts and calendar names carry over until recomputed.
        """
        self.plants_eaten = 0
        self.plants_died_natural_age = 0
        self.plants_died_weather = 0
        self.plants_spread = 0
        self.herbivores_eaten = 0
        self.herbivores_died_natural = 0
        self.herbivores_spawned = 0
        self.carnivores_eaten = 0
        self.carnivores_died_natural = 0
        self.carnivores_spawned = 0
        self.animals_immigrated = 0
        self.animals_emigrated = 0
        self.events.clear()

    def set_calendar(self, month_name: str, season_name: str) -> None:
        self.month_name = month_name
        self.season_name = season_name

    def set_population(self, plants: int, herbivores: int, carnivores: int) -> None:
        self.current_plants = plants
        self.current_herbivores = herbivores
        self.current_carnivores = carnivores

    def record_event(self, message: str) -> None:
        self.events.append(message)

    def record_natural_death(self, species: Species) -> None:
        """Animal death from energy, age or starvation."""
        name = _NATURAL_DEATH_FIELDS[species]
        setattr(self, name, getattr(self, name) + 1)

    def record_spawn(self, species: Species) -> None:
        """A birth (animals) or a new plant from spread or bloom."""
        name = _SPAWN_FIELDS[species]
        setattr(self, name, getattr(self, name) + 1)

    def record_eaten(self, species: Species) -> None:
        name = _EATEN_FIELDS[species]
        setattr(self, name, getattr(self, name) + 1)

    @property
    def total_animals(self) -> int:
        return self.current_herbivores + self.current_carnivores

    def copy(self) -> "MonthlyStats":
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
