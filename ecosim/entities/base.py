"""Base entity types for the grid simulation."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Tuple

Position = Tuple[int, int]  # (row, col), zero-based


class Species(Enum):
    """The three built-in species. Values are display names."""

    PLANT = "Plant"
    HERBIVORE = "Herbivore"
    CARNIVORE = "Carnivore"

    @property
    def is_animal(self) -> bool:
        return self is not Species.PLANT


class Gender(Enum):
    MALE = "male"
    FEMALE = "female"


def format_position(position: Position) -> str:
    """Render a position the way event strings show it: ``(r,c)``."""
    return f"({position[0]},{position[1]})"


class Entity(ABC):
    """Base class for everything that occupies a grid cell.

    Entities carry no reference to the grid. The grid assigns ``entity_id``
    (a stable arena handle) when the entity is first placed; until then it
    is ``None``.

    Attributes:
        species: Fixed at creation
        position: Current cell
        alive: Once False the entity is inert and pending removal
        entity_id: Arena handle, assigned by the grid on placement
    """

    def __init__(self, species: Species, position: Position) -> None:
        self.species: Species = species
        self.position: Position = position
        self.alive: bool = True
        self.entity_id: Optional[int] = None

    @property
    @abstractmethod
    def symbol(self) -> str:
        """Single-character grid symbol."""

    @property
    def species_name(self) -> str:
        return self.species.value

    @property
    def row(self) -> int:
        return self.position[0]

    @property
    def col(self) -> int:
        return self.position[1]

    def kill(self) -> None:
        """Mark the entity dead. Idempotent."""
        self.alive = False

    def __repr__(self) -> str:
        state = "alive" if self.alive else "dead"
        return (
            f"{self.__class__.__name__}(id={self.entity_id}, "
            f"pos={format_position(self.position)}, {state})"
        )
