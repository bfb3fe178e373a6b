"""Plant rules: aging, weather death, spread and seasonal bloom."""

from typing import TYPE_CHECKING

from ecosim.behaviors.base import SpeciesBehavior
from ecosim.config.grid import RANDOM_PLACEMENT_RETRY_FACTOR
from ecosim.config.plants import (
    PLANT_AUTUMN_DEATH_CHANCE,
    PLANT_BASE_SPREAD_CHANCE,
    PLANT_BLOOM_ATTEMPTS,
    PLANT_SPREAD_PLACEMENT_CHANCE,
    PLANT_SPRING_BLOOM_CHANCE,
    PLANT_SUMMER_BLOOM_CHANCE,
    PLANT_WINTER_DEATH_CHANCE,
)
from ecosim.entities.base import Entity, Position, Species
from ecosim.entities.plant import Plant
from ecosim.seasons import Season
from ecosim.util.rng import percent_roll

if TYPE_CHECKING:
    from ecosim.behaviors.context import TickContext

_WEATHER_DEATH_CHANCE = {
    Season.WINTER: PLANT_WINTER_DEATH_CHANCE,
    Season.AUTUMN: PLANT_AUTUMN_DEATH_CHANCE,
}

_BLOOM_CHANCE = {
    Season.SPRING: PLANT_SPRING_BLOOM_CHANCE,
    Season.SUMMER: PLANT_SUMMER_BLOOM_CHANCE,
}


def spread_chance(season: Season) -> int:
    """Percent chance to spread: halved in Winter, doubled in Summer."""
    if season is Season.WINTER:
        return PLANT_BASE_SPREAD_CHANCE // 2
    if season is Season.SUMMER:
        return PLANT_BASE_SPREAD_CHANCE * 2
    return PLANT_BASE_SPREAD_CHANCE


class PlantBehavior(SpeciesBehavior):
    species = Species.PLANT

    def update(self, entity: Entity, ctx: "TickContext") -> None:
        plant: Plant = entity  # type: ignore[assignment]
        if not plant.alive:
            return

        plant.increment_age()
        if plant.is_too_old():
            plant.kill()
            ctx.stats.plants_died_natural_age += 1
            return

        death_chance = _WEATHER_DEATH_CHANCE.get(ctx.season, 0)
        if death_chance and percent_roll(ctx.rng, death_chance):
            plant.kill()
            ctx.stats.plants_died_weather += 1
            return

        self.spread(plant, ctx)
        self.bloom(ctx)

    def spread(self, plant: Plant, ctx: "TickContext") -> bool:
        """Seed one random adjacent empty cell."""
        if not percent_roll(ctx.rng, spread_chance(ctx.season)):
            return False
        cells = ctx.grid.adjacent_empty_cells(plant.position)
        if not cells or not percent_roll(ctx.rng, PLANT_SPREAD_PLACEMENT_CHANCE):
            return False
        return self._plant_at(ctx.rng.choice(cells), ctx)

    def bloom(self, ctx: "TickContext") -> int:
        """Spring/Summer growth at random cells anywhere on the grid."""
        chance = _BLOOM_CHANCE.get(ctx.season, 0)
        if not chance or ctx.grid.is_full():
            return 0

        grown = 0
        max_attempts = ctx.grid.capacity * RANDOM_PLACEMENT_RETRY_FACTOR
        for _ in range(PLANT_BLOOM_ATTEMPTS):
            if not percent_roll(ctx.rng, chance):
                continue
            cell = ctx.grid.random_empty_cell(ctx.rng, max_attempts)
            if cell is not None and self._plant_at(cell, ctx):
                grown += 1
        return grown

    @staticmethod
    def _plant_at(cell: Position, ctx: "TickContext") -> bool:
        if not ctx.grid.place(Plant(cell)):
            return False
        ctx.stats.record_spawn(Species.PLANT)
        return True
