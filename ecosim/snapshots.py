"""Read-only payloads exposed to presentation code.

The engine never formats output itself. After each tick it publishes a
``TickReport`` (counters, events, calendar) and can build a
``GridSnapshot`` (who stands where) on demand. Both are pydantic models so
they serialise cleanly for export.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel

from ecosim.entities.animal import Animal
from ecosim.entities.base import Entity
from ecosim.stats import MonthlyStats


class EntityData(BaseModel):
    """One occupied cell."""

    id: int
    row: int
    col: int
    species: str  # 'Plant', 'Herbivore', 'Carnivore'
    symbol: str
    age: int

    # Animal-specific fields
    gender: Optional[str] = None
    energy: Optional[int] = None
    is_pregnant: Optional[bool] = None

    @classmethod
    def from_entity(cls, entity: Entity) -> "EntityData":
        data = cls(
            id=entity.entity_id if entity.entity_id is not None else -1,
            row=entity.position[0],
            col=entity.position[1],
            species=entity.species_name,
            symbol=entity.symbol,
            age=getattr(entity, "age", 0),
        )
        if isinstance(entity, Animal):
            data.gender = entity.gender.value
            data.energy = entity.energy
            data.is_pregnant = entity.is_pregnant
        return data


class GridSnapshot(BaseModel):
    """Point-in-time enumeration of live entities, row-major."""

    tick: int
    width: int
    height: int
    month_name: str
    season: str
    entities: List[EntityData] = []

    def symbol_map(self) -> Dict[Tuple[int, int], str]:
        return {(e.row, e.col): e.symbol for e in self.entities}

    def count(self, species: str) -> int:
        return sum(1 for e in self.entities if e.species == species)


class TickReport(BaseModel):
    """Statistics published at the end of one tick (tick 0 is initial setup)."""

    tick: int
    year: int
    month_name: str
    season: str

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

    events: List[str] = []
    end_reason: Optional[str] = None

    @classmethod
    def from_stats(cls, tick: int, year: int, stats: MonthlyStats) -> "TickReport":
        data = stats.to_dict()
        data["season"] = data.pop("season_name")
        return cls(tick=tick, year=year, **data)

    @property
    def is_initial(self) -> bool:
        return self.tick == 0
