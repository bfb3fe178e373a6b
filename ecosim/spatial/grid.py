"""Cell occupancy grid and live-entity registries.

The grid is the single owner of simulation state:

- an arena mapping stable integer handles to entities,
- a cell map holding at most one handle per cell,
- one registry (ordered handle list) per species.

Everything else (the engine, behaviours, snapshots) holds handles or
transient references only. All mutation goes through ``place``, ``remove``
and ``relocate``, which keep the cell map and registries consistent.

Removed entities stay in the arena until ``purge_dead`` so that handles taken
in a snapshot earlier in the tick still resolve (to a dead, inert entity).
"""

import itertools
import logging
import random
from typing import Dict, Iterator, List, Optional, Sequence

from ecosim.entities.base import Entity, Position, Species
from ecosim.exceptions import EntityError

logger = logging.getLogger(__name__)

# 8-neighbourhood, row-major
NEIGHBOR_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Grid:
    """Fixed-size 2D occupancy map with per-species registries.

    Attributes:
        width: Number of columns
        height: Number of rows
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize an empty grid.

        Args:
            width: Number of columns
            height: Number of rows
        """
        self.width = width
        self.height = height
        self._cells: List[List[Optional[int]]] = [[None] * width for _ in range(height)]
        self._arena: Dict[int, Entity] = {}
        self._registries: Dict[Species, List[int]] = {species: [] for species in Species}
        self._next_id = itertools.count(1)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def capacity(self) -> int:
        """Population cap: one entity per cell."""
        return self.width * self.height

    def is_valid(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def is_empty(self, position: Position) -> bool:
        """True if the position is valid and no entity occupies it."""
        if not self.is_valid(position):
            return False
        row, col = position
        return self._cells[row][col] is None

    def handle_at(self, position: Position) -> Optional[int]:
        if not self.is_valid(position):
            return None
        row, col = position
        return self._cells[row][col]

    def entity_at(self, position: Position) -> Optional[Entity]:
        """Entity occupying a cell, or None.

        An animal that died this tick keeps its cell until reconcile, so the
        result may be dead; check ``alive`` when it matters.
        """
        handle = self.handle_at(position)
        if handle is None:
            return None
        return self._arena.get(handle)

    def get(self, handle: int) -> Optional[Entity]:
        """Resolve an arena handle. Returns None once the entity is purged."""
        return self._arena.get(handle)

    def handles(self, species: Species) -> List[int]:
        """Point-in-time copy of a species registry."""
        return list(self._registries[species])

    def entities(self, species: Species) -> List[Entity]:
        """Live registered entities of one species, in registry order."""
        result = []
        for handle in self._registries[species]:
            entity = self._arena.get(handle)
            if entity is not None and entity.alive:
                result.append(entity)
        return result

    def count(self, species: Species) -> int:
        """Number of live registered entities of one species."""
        return len(self.entities(species))

    def population(self) -> int:
        """Registered entities across all species (each occupies a cell)."""
        return sum(len(handles) for handles in self._registries.values())

    def is_full(self) -> bool:
        return self.population() >= self.capacity

    def adjacent_cells(self, position: Position) -> List[Position]:
        """Valid 8-neighbours in row-major order."""
        row, col = position
        cells = []
        for d_row, d_col in NEIGHBOR_OFFSETS:
            neighbor = (row + d_row, col + d_col)
            if self.is_valid(neighbor):
                cells.append(neighbor)
        return cells

    def adjacent_empty_cells(self, position: Position) -> List[Position]:
        return [cell for cell in self.adjacent_cells(position) if self.is_empty(cell)]

    def empty_cells(self) -> List[Position]:
        """Every empty cell, row-major."""
        return [
            (row, col)
            for row in range(self.height)
            for col in range(self.width)
            if self._cells[row][col] is None
        ]

    def random_empty_cell(
        self, rng: random.Random, max_attempts: Optional[int] = None
    ) -> Optional[Position]:
        """Draw uniformly random cells until an empty one is found.

        Args:
            rng: Engine RNG
            max_attempts: Draw budget (defaults to the cell count)

        Returns:
            An empty position, or None if the budget ran out
        """
        attempts = self.capacity if max_attempts is None else max_attempts
        for _ in range(attempts):
            position = (rng.randint(0, self.height - 1), rng.randint(0, self.width - 1))
            if self.is_empty(position):
                return position
        return None

    def ring_cells(self, center: Position, radius: int) -> List[Position]:
        """Valid cells on the perimeter of the square ring at ``radius``, row-major."""
        row, col = center
        cells = []
        for d_row in range(-radius, radius + 1):
            for d_col in range(-radius, radius + 1):
                if max(abs(d_row), abs(d_col)) != radius:
                    continue
                cell = (row + d_row, col + d_col)
                if self.is_valid(cell):
                    cells.append(cell)
        return cells

    def find_nearby(self, center: Position, species: Species, radius: int) -> List[Entity]:
        """Live entities of ``species`` within a square of half-width ``radius``.

        The centre cell is excluded. Results are in row-major scan order.
        """
        row, col = center
        found = []
        for r in range(max(0, row - radius), min(self.height, row + radius + 1)):
            for c in range(max(0, col - radius), min(self.width, col + radius + 1)):
                if (r, c) == center:
                    continue
                handle = self._cells[r][c]
                if handle is None:
                    continue
                entity = self._arena[handle]
                if entity.alive and entity.species is species:
                    found.append(entity)
        return found

    def occupants(self) -> Iterator[Entity]:
        """Live entities in row-major cell order."""
        for row in range(self.height):
            for col in range(self.width):
                handle = self._cells[row][col]
                if handle is None:
                    continue
                entity = self._arena[handle]
                if entity.alive:
                    yield entity

    # =========================================================================
    # Mutation
    # =========================================================================

    def place(self, entity: Entity) -> bool:
        """Register an entity at its own ``position``.

        Fails (returns False) when the population is at capacity or the
        target cell is invalid or occupied. On success the entity gets an
        arena handle if it does not have one yet.

        Raises:
            EntityError: If the entity is already dead
        """
        if not entity.alive:
            raise EntityError(f"Cannot place dead entity {entity!r}")
        if self.population() >= self.capacity:
            return False
        if not self.is_empty(entity.position):
            return False

        if entity.entity_id is None:
            entity.entity_id = next(self._next_id)
        handle = entity.entity_id
        self._arena[handle] = entity
        row, col = entity.position
        self._cells[row][col] = handle
        self._registries[entity.species].append(handle)
        return True

    def remove(self, entity: Entity) -> None:
        """Kill an entity and deregister it. Idempotent.

        Clears the cell only if it still points at this entity. The arena
        entry survives until ``purge_dead``.
        """
        entity.kill()
        handle = entity.entity_id
        if handle is None:
            return
        self._clear_cell_if_owned(entity.position, handle)
        registry = self._registries[entity.species]
        if handle in registry:
            registry.remove(handle)

    def relocate(self, entity: Entity, new_position: Position) -> bool:
        """Move an entity to ``new_position``.

        An invalid target models leaving the simulated world: the entity is
        removed (killed) instead. A target held by a different entity is
        refused and nothing changes.

        Returns:
            True if the entity now stands on ``new_position``
        """
        handle = entity.entity_id
        if handle is None or not entity.alive:
            return False
        if not self.is_valid(new_position):
            self.remove(entity)
            return False
        occupant = self.handle_at(new_position)
        if occupant is not None and occupant != handle:
            return False

        self._clear_cell_if_owned(entity.position, handle)
        entity.position = new_position
        row, col = new_position
        self._cells[row][col] = handle
        return True

    def purge_dead(self) -> List[Entity]:
        """Drop every dead entity from the registries, the cell map and the arena.

        Returns:
            The entities purged this call (already-deregistered ones included)
        """
        purged: List[Entity] = []
        for species, registry in self._registries.items():
            survivors = []
            for handle in registry:
                entity = self._arena[handle]
                if entity.alive:
                    survivors.append(handle)
                else:
                    self._clear_cell_if_owned(entity.position, handle)
            registry[:] = survivors

        for handle in [h for h, e in self._arena.items() if not e.alive]:
            purged.append(self._arena.pop(handle))

        if purged:
            logger.debug("Purged %d dead entities", len(purged))
        return purged

    def check_invariants(self) -> List[str]:
        """Describe every inconsistency between cell map, registries and arena.

        Returns an empty list when the grid is consistent. Intended for
        tick boundaries (after reconcile).
        """
        problems: List[str] = []
        registered: Dict[int, Species] = {}
        for species, registry in self._registries.items():
            for handle in registry:
                if handle in registered:
                    problems.append(f"handle {handle} registered twice")
                registered[handle] = species
                entity = self._arena.get(handle)
                if entity is None:
                    problems.append(f"handle {handle} registered but not in arena")
                    continue
                if not entity.alive:
                    problems.append(f"{entity!r} registered but dead")
                if entity.species is not species:
                    problems.append(f"{entity!r} in the {species.value} registry")
                if self.handle_at(entity.position) != handle:
                    problems.append(f"{entity!r} not found at its stored position")

        for row in range(self.height):
            for col in range(self.width):
                handle = self._cells[row][col]
                if handle is None:
                    continue
                if handle not in registered:
                    problems.append(f"cell ({row},{col}) holds unregistered handle {handle}")
                entity = self._arena.get(handle)
                if entity is not None and entity.position != (row, col):
                    problems.append(f"cell ({row},{col}) holds {entity!r}")

        if self.population() > self.capacity:
            problems.append(f"population {self.population()} exceeds capacity {self.capacity}")
        return problems

    def _clear_cell_if_owned(self, position: Position, handle: int) -> None:
        if not self.is_valid(position):
            return
        row, col = position
        if self._cells[row][col] == handle:
            self._cells[row][col] = None

    def __repr__(self) -> str:
        counts: Sequence[str] = [
            f"{species.value}={len(handles)}" for species, handles in self._registries.items()
        ]
        return f"Grid({self.width}x{self.height}, {', '.join(counts)})"


def chebyshev_distance(a: Position, b: Position) -> int:
    """Square-ring distance between two cells."""
    return max(abs(a[0] - b[0]), abs(a[1] - b[1]))


def squared_distance(a: Position, b: Position) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2
