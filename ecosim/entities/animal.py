"""Animal entity shared by herbivores and carnivores.

There is one ``Animal`` class for both animal species. The species tag
selects the parameter table and, through the behaviour registry, the
species-specific rules. Shared state is split into components; the
properties below expose the fields behaviours read most often.
"""

from ecosim.config.animals import AnimalParams
from ecosim.entities.base import Entity, Gender, Position, Species
from ecosim.entities.components import (
    EnergyComponent,
    LifecycleComponent,
    ReproductionComponent,
)
from ecosim.exceptions import EntityError


class Animal(Entity):
    """A herbivore or carnivore.

    Attributes:
        params: Immutable species parameters
        gender: Fixed at birth
        energy_component: Clamped energy store
        lifecycle: Age and starvation counters
        reproduction: Pregnancy and cooldown state
    """

    def __init__(
        self,
        species: Species,
        position: Position,
        gender: Gender,
        params: AnimalParams,
        initial_energy: int,
    ) -> None:
        if not species.is_animal:
            raise EntityError(f"Animal cannot have species {species.value}")
        super().__init__(species, position)
        self.params: AnimalParams = params
        self.gender: Gender = gender
        self.energy_component = EnergyComponent(params.max_energy, initial_energy)
        self.lifecycle = LifecycleComponent(params.max_age, params.max_turns_without_food)
        self.reproduction = ReproductionComponent(
            params.gestation_period, params.reproduction_cooldown
        )

    @property
    def symbol(self) -> str:
        if self.gender is Gender.MALE:
            return self.params.male_symbol
        return self.params.female_symbol

    @property
    def is_male(self) -> bool:
        return self.gender is Gender.MALE

    @property
    def is_female(self) -> bool:
        return self.gender is Gender.FEMALE

    # Energy

    @property
    def energy(self) -> int:
        return self.energy_component.energy

    @energy.setter
    def energy(self, value: int) -> None:
        self.energy_component.energy = value

    @property
    def max_energy(self) -> int:
        return self.energy_component.max_energy

    # Lifecycle

    @property
    def age(self) -> int:
        return self.lifecycle.age

    @age.setter
    def age(self, value: int) -> None:
        self.lifecycle.age = value

    @property
    def turns_since_last_meal(self) -> int:
        return self.lifecycle.turns_since_last_meal

    @turns_since_last_meal.setter
    def turns_since_last_meal(self, value: int) -> None:
        self.lifecycle.turns_since_last_meal = value

    # Reproduction

    @property
    def is_pregnant(self) -> bool:
        return self.reproduction.is_pregnant

    @property
    def gestation_progress(self) -> int:
        return self.reproduction.gestation_progress

    @property
    def current_cooldown(self) -> int:
        return self.reproduction.current_cooldown

    def is_of_breeding_age(self) -> bool:
        return self.lifecycle.age >= self.params.min_breeding_age

    def can_seek_mate(self) -> bool:
        """Eligibility of a female to start mating this tick."""
        return (
            self.alive
            and self.is_female
            and not self.reproduction.is_pregnant
            and self.reproduction.current_cooldown == 0
            and self.is_of_breeding_age()
            and self.energy >= self.params.energy_to_reproduce
        )

    def is_eligible_mate_for(self, female: "Animal") -> bool:
        return (
            self.alive
            and self.is_male
            and self.species is female.species
            and self.is_of_breeding_age()
        )

    def should_die(self) -> bool:
        """Natural death conditions: exhausted, too old, or starved."""
        return (
            self.energy_component.is_depleted()
            or self.lifecycle.is_too_old()
            or self.lifecycle.is_starved()
        )
