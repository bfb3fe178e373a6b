"""Shared per-tick protocol for herbivores and carnivores.

Every animal runs the same five phases, each short-circuiting once the
animal is dead:

1. Base update: age, hunger, metabolism, cooldown, gestation, death check
2. Eat: species-specific prey search
3. Birth: deliver a litter once gestation completes
4. Mate search and reproduction (females only)
5. Move: species-specific, then a final energy check

Species subclasses supply the prey species, the meal size and the movement
rule; reproduction and birth differ only by parameters.
"""

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from ecosim.behaviors.base import SpeciesBehavior
from ecosim.config.animals import (
    BIRTH_ENERGY_DIVISOR,
    MATE_ENERGY_DIVISOR,
    MATING_ENERGY_DIVISOR,
    PREGNANCY_ENERGY_COST,
)
from ecosim.config.ecosystem import MATE_CONTACT_RADIUS, MATE_SEARCH_RADIUS
from ecosim.entities.animal import Animal
from ecosim.entities.base import Entity, Position, Species, format_position
from ecosim.entities.factory import create_animal
from ecosim.seasons import adjusted_move_cost, adjusted_radius, seasonal_multiplier
from ecosim.spatial.grid import chebyshev_distance, squared_distance

if TYPE_CHECKING:
    from ecosim.behaviors.context import TickContext


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class AnimalBehavior(SpeciesBehavior):
    """Template for the five-phase animal update.

    Attributes:
        species: Species this behaviour drives
        prey_species: What this species eats
    """

    prey_species: Species

    def update(self, entity: Entity, ctx: "TickContext") -> None:
        animal: Animal = entity  # type: ignore[assignment]
        if not animal.alive:
            return

        self.base_update(animal, ctx)
        if not animal.alive:
            return

        self.eat(animal, ctx)

        self.process_birth(animal, ctx)
        if not animal.alive:
            return

        if animal.can_seek_mate():
            candidates = self.find_mates(animal, ctx)
            if candidates:
                self.reproduce(animal, candidates, ctx)

        self.move(animal, ctx)
        if animal.alive and animal.energy <= 0:
            self.die(animal, ctx)

    # -------------------------------------------------------------------------
    # Phase 1: base update
    # -------------------------------------------------------------------------

    def base_update(self, animal: Animal, ctx: "TickContext") -> None:
        """Age, metabolism, cooldown and gestation for one tick."""
        animal.lifecycle.advance()

        move_cost = adjusted_move_cost(animal.params.base_move_cost, ctx.season)
        animal.energy_component.spend(1 + move_cost // 2)

        animal.reproduction.tick_cooldown()
        if animal.reproduction.is_pregnant:
            animal.reproduction.advance_gestation()
            animal.energy_component.spend(PREGNANCY_ENERGY_COST)

        if animal.should_die():
            self.die(animal, ctx)

    def die(self, animal: Animal, ctx: "TickContext") -> None:
        """Natural death (energy, age, starvation).

        The body keeps its cell until the end-of-tick reconcile.
        """
        if not animal.alive:
            return
        animal.kill()
        ctx.stats.record_natural_death(animal.species)

    # -------------------------------------------------------------------------
    # Phase 2: eat
    # -------------------------------------------------------------------------

    @abstractmethod
    def meal_gain(self, ctx: "TickContext") -> int:
        """Energy gained per prey eaten."""

    def eat_radius(self, animal: Animal, ctx: "TickContext") -> int:
        return adjusted_radius(
            animal.params.vision_range, ctx.season, animal.params.eat_radius_deltas
        )

    def eat(self, animal: Animal, ctx: "TickContext") -> bool:
        """Consume the nearest prey within the seasonal eat radius.

        Scans square rings outward; within a ring, row-major order decides.
        Only attempted while the animal is below its eat threshold.
        """
        if not animal.energy_component.below(animal.params.eat_threshold):
            return False

        radius = self.eat_radius(animal, ctx)
        for ring in range(1, radius + 1):
            for cell in ctx.grid.ring_cells(animal.position, ring):
                prey = ctx.grid.entity_at(cell)
                if prey is not None and prey.alive and prey.species is self.prey_species:
                    self.consume(animal, prey, ctx)
                    return True
        return False

    def consume(self, animal: Animal, prey: Entity, ctx: "TickContext") -> None:
        """Eat ``prey``: gain energy, reset hunger, remove the prey from the grid."""
        animal.energy_component.gain(self.meal_gain(ctx))
        animal.lifecycle.record_meal()
        ctx.stats.record_eaten(prey.species)
        ctx.stats.record_event(
            f"{animal.params.name} at {format_position(animal.position)} ate "
            f"{prey.species_name.lower()} at {format_position(prey.position)}"
        )
        ctx.grid.remove(prey)

    # -------------------------------------------------------------------------
    # Phase 3: birth
    # -------------------------------------------------------------------------

    def process_birth(self, animal: Animal, ctx: "TickContext") -> None:
        if not animal.reproduction.is_due():
            return

        self.give_birth(animal, ctx)
        animal.reproduction.complete_birth()
        animal.energy_component.spend(animal.max_energy // BIRTH_ENERGY_DIVISOR)
        if animal.energy <= 0:
            self.die(animal, ctx)

    def give_birth(self, animal: Animal, ctx: "TickContext") -> int:
        """Place a litter on distinct empty cells.

        Adjacent empty cells are preferred; when there are none the whole
        grid is searched. Each offspring draws its own gender.

        Returns:
            Number of offspring placed
        """
        candidates: List[Position] = ctx.grid.adjacent_empty_cells(animal.position)
        if not candidates:
            candidates = ctx.grid.empty_cells()

        low, high = animal.params.offspring_range
        litter = ctx.rng.randint(low, high)
        born = 0
        for _ in range(litter):
            if not candidates:
                break
            cell = candidates.pop(ctx.rng.randrange(len(candidates)))
            offspring = create_animal(animal.species, cell, rng=ctx.rng)
            if not ctx.grid.place(offspring):
                continue
            born += 1
            ctx.stats.record_spawn(animal.species)
            ctx.stats.record_event(f"{animal.params.name} born at {format_position(cell)}")
        return born

    # -------------------------------------------------------------------------
    # Phase 4: mate search and reproduction
    # -------------------------------------------------------------------------

    def find_mates(self, female: Animal, ctx: "TickContext") -> List[Animal]:
        """Eligible males of the same species near ``female``, in registry order."""
        mates = []
        for handle in ctx.grid.handles(female.species):
            candidate = ctx.grid.get(handle)
            if candidate is None or candidate is female:
                continue
            if chebyshev_distance(candidate.position, female.position) > MATE_SEARCH_RADIUS:
                continue
            if candidate.is_eligible_mate_for(female):
                mates.append(candidate)
        return mates

    def reproduce(self, female: Animal, candidates: List[Animal], ctx: "TickContext") -> bool:
        """Attempt mating, gated by the seasonal success multiplier.

        The chosen partner is the first candidate in contact range. The
        female pays half her reproduction energy, the male a quarter of his.

        Returns:
            True if the female became pregnant
        """
        multiplier = seasonal_multiplier(ctx.season, female.params.reproduction_multipliers)
        if ctx.rng.uniform(0.0, 1.0) > multiplier:
            return False

        partner: Optional[Animal] = None
        for candidate in candidates:
            if chebyshev_distance(candidate.position, female.position) <= MATE_CONTACT_RADIUS:
                partner = candidate
                break
        if partner is None:
            return False

        female.reproduction.start_pregnancy()
        female.energy_component.spend(female.params.energy_to_reproduce // MATING_ENERGY_DIVISOR)
        partner.energy_component.spend(partner.params.energy_to_reproduce // MATE_ENERGY_DIVISOR)
        if partner.energy <= 0:
            self.die(partner, ctx)

        ctx.stats.record_event(
            f"{female.params.name} at {format_position(female.position)} mated."
        )
        return True

    # -------------------------------------------------------------------------
    # Phase 5: move
    # -------------------------------------------------------------------------

    @abstractmethod
    def move(self, animal: Animal, ctx: "TickContext") -> None:
        """Species-specific movement rule."""

    def step_to(self, animal: Animal, target: Position, ctx: "TickContext") -> bool:
        """Move one step, paying the base move cost.

        A target holding live prey is eaten first so the cell is free.
        Leaving the grid kills the animal.
        """
        occupant = ctx.grid.entity_at(target)
        if occupant is not None and occupant.alive and occupant.species is self.prey_species:
            self.consume(animal, occupant, ctx)

        moved = ctx.grid.relocate(animal, target)
        if moved:
            animal.energy_component.spend(animal.params.base_move_cost)
        return moved

    def step_toward(self, animal: Animal, target: Entity, ctx: "TickContext") -> bool:
        """Greedy single step toward ``target`` (sign of the row/col delta).

        The step is taken only if the destination is valid and either empty
        or holds live prey.
        """
        row, col = animal.position
        destination = (
            row + _sign(target.position[0] - row),
            col + _sign(target.position[1] - col),
        )
        if not ctx.grid.is_valid(destination):
            return False
        occupant = ctx.grid.entity_at(destination)
        if occupant is not None and not (
            occupant.alive and occupant.species is self.prey_species
        ):
            return False
        return self.step_to(animal, destination, ctx)

    def random_step(self, animal: Animal, ctx: "TickContext") -> bool:
        cells = ctx.grid.adjacent_empty_cells(animal.position)
        if not cells:
            return False
        return self.step_to(animal, ctx.rng.choice(cells), ctx)

    @staticmethod
    def nearest(animal: Animal, targets: List[Entity]) -> Optional[Entity]:
        """Closest target by squared distance; scan order breaks ties."""
        best: Optional[Entity] = None
        best_distance = None
        for target in targets:
            distance = squared_distance(animal.position, target.position)
            if best_distance is None or distance < best_distance:
                best = target
                best_distance = distance
        return best
