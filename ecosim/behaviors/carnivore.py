"""Carnivore rules: apex predators that hunt herbivores."""

from typing import TYPE_CHECKING

from ecosim.behaviors.animal import AnimalBehavior
from ecosim.entities.animal import Animal
from ecosim.entities.base import Species

if TYPE_CHECKING:
    from ecosim.behaviors.context import TickContext


class CarnivoreBehavior(AnimalBehavior):
    """Carnivores chase the nearest visible herbivore when hungry, else wander.

    They never flee. Meal size comes from the run configuration so the
    balancing variants can be compared.
    """

    species = Species.CARNIVORE
    prey_species = Species.HERBIVORE

    def meal_gain(self, ctx: "TickContext") -> int:
        return ctx.config.carnivore_energy_gain

    def move(self, animal: Animal, ctx: "TickContext") -> None:
        if self.chase(animal, ctx):
            return
        self.random_step(animal, ctx)

    def chase(self, animal: Animal, ctx: "TickContext") -> bool:
        if not animal.energy_component.below(animal.params.hunt_threshold):
            return False
        herbivores = ctx.grid.find_nearby(
            animal.position, Species.HERBIVORE, animal.params.vision_range
        )
        target = self.nearest(animal, herbivores)
        if target is None:
            return False
        return self.step_toward(animal, target, ctx)
