"""Species behaviour registry and dispatch."""

from typing import TYPE_CHECKING, Dict

from ecosim.behaviors.animal import AnimalBehavior
from ecosim.behaviors.base import SpeciesBehavior
from ecosim.behaviors.carnivore import CarnivoreBehavior
from ecosim.behaviors.context import TickContext
from ecosim.behaviors.herbivore import HerbivoreBehavior
from ecosim.behaviors.plant import PlantBehavior
from ecosim.entities.base import Species

if TYPE_CHECKING:
    from ecosim.entities.base import Entity

BEHAVIORS: Dict[Species, SpeciesBehavior] = {
    Species.PLANT: PlantBehavior(),
    Species.HERBIVORE: HerbivoreBehavior(),
    Species.CARNIVORE: CarnivoreBehavior(),
}


def behavior_for(species: Species) -> SpeciesBehavior:
    return BEHAVIORS[species]


def update_entity(entity: "Entity", ctx: TickContext) -> None:
    """Run one tick for any entity, dispatching on its species tag."""
    behavior_for(entity.species).update(entity, ctx)


__all__ = [
    "AnimalBehavior",
    "BEHAVIORS",
    "CarnivoreBehavior",
    "HerbivoreBehavior",
    "PlantBehavior",
    "SpeciesBehavior",
    "TickContext",
    "behavior_for",
    "update_entity",
]
