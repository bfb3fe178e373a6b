"""Plant entity."""

from ecosim.config.plants import PLANT_MAX_AGE, PLANT_SYMBOL
from ecosim.entities.base import Entity, Position, Species


class Plant(Entity):
    """A stationary plant. Ages each tick and dies past ``max_age``."""

    def __init__(self, position: Position, age: int = 0, max_age: int = PLANT_MAX_AGE) -> None:
        super().__init__(Species.PLANT, position)
        self.age: int = age
        self.max_age: int = max_age

    @property
    def symbol(self) -> str:
        return PLANT_SYMBOL

    def increment_age(self) -> None:
        self.age += 1

    def is_too_old(self) -> bool:
        return self.age > self.max_age
