"""Entity model: plants and animals on the grid."""

from ecosim.entities.animal import Animal
from ecosim.entities.base import Entity, Gender, Position, Species, format_position
from ecosim.entities.factory import create_animal, create_entity, create_plant, random_gender
from ecosim.entities.plant import Plant

__all__ = [
    "Animal",
    "Entity",
    "Gender",
    "Plant",
    "Position",
    "Species",
    "create_animal",
    "create_entity",
    "create_plant",
    "format_position",
    "random_gender",
]
