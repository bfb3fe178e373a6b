"""Herbivore rules: graze, flee carnivores, forage toward plants."""

from typing import TYPE_CHECKING, Optional

from ecosim.behaviors.animal import AnimalBehavior
from ecosim.config.animals import HERBIVORE_PARAMS
from ecosim.config.ecosystem import FLEE_RADIUS_DELTAS
from ecosim.entities.animal import Animal
from ecosim.entities.base import Position, Species
from ecosim.seasons import adjusted_radius

if TYPE_CHECKING:
    from ecosim.behaviors.context import TickContext


class HerbivoreBehavior(AnimalBehavior):
    """Herbivores eat plants and are hunted by carnivores.

    Movement priority:

    1. Flee: away from the centroid of every visible carnivore
    2. Forage: one step toward the nearest visible plant when hungry
    3. Random: any adjacent empty cell
    """

    species = Species.HERBIVORE
    prey_species = Species.PLANT

    def meal_gain(self, ctx: "TickContext") -> int:
        return HERBIVORE_PARAMS.energy_gain_per_meal

    def move(self, animal: Animal, ctx: "TickContext") -> None:
        if self.flee(animal, ctx):
            return
        if self.forage(animal, ctx):
            return
        self.random_step(animal, ctx)

    def flee_radius(self, animal: Animal, ctx: "TickContext") -> int:
        return adjusted_radius(animal.params.vision_range, ctx.season, FLEE_RADIUS_DELTAS)

    def flee_target(self, animal: Animal, ctx: "TickContext") -> Optional[Position]:
        """Empty neighbour that most increases distance from visible carnivores.

        The farthest empty neighbour wins even when it is closer to the
        centroid than the current cell. Returns None when no carnivore is
        visible or every neighbour is occupied.
        """
        predators = ctx.grid.find_nearby(
            animal.position, Species.CARNIVORE, self.flee_radius(animal, ctx)
        )
        if not predators:
            return None

        centroid_row = sum(p.position[0] for p in predators) / len(predators)
        centroid_col = sum(p.position[1] for p in predators) / len(predators)

        def distance_from_centroid(cell: Position) -> float:
            return (cell[0] - centroid_row) ** 2 + (cell[1] - centroid_col) ** 2

        best: Optional[Position] = None
        best_distance = -1.0
        for cell in ctx.grid.adjacent_empty_cells(animal.position):
            distance = distance_from_centroid(cell)
            if distance > best_distance:
                best = cell
                best_distance = distance
        return best

    def flee(self, animal: Animal, ctx: "TickContext") -> bool:
        target = self.flee_target(animal, ctx)
        if target is None:
            return False
        return self.step_to(animal, target, ctx)

    def forage(self, animal: Animal, ctx: "TickContext") -> bool:
        if not animal.energy_component.below(animal.params.hunt_threshold):
            return False
        plants = ctx.grid.find_nearby(animal.position, Species.PLANT, animal.params.vision_range)
        target = self.nearest(animal, plants)
        if target is None:
            return False
        return self.step_toward(animal, target, ctx)
