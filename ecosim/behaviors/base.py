"""Behaviour capability interface.

Each species gets one stateless behaviour object. The engine never calls
species rules directly; it dispatches on the entity's species tag through
the registry in ``ecosim.behaviors``.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ecosim.entities.base import Entity, Species

if TYPE_CHECKING:
    from ecosim.behaviors.context import TickContext


class SpeciesBehavior(ABC):
    """Per-tick rules for one species."""

    species: Species

    @abstractmethod
    def update(self, entity: Entity, ctx: "TickContext") -> None:
        """Run one tick for ``entity``. Must no-op when the entity is dead."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(species={self.species.value})"
