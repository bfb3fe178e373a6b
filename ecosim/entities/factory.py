"""Entity construction helpers.

All randomised construction draws from the caller's RNG.
"""

import random
from typing import Dict, Optional

from ecosim.config.animals import (
    CARNIVORE_PARAMS,
    HERBIVORE_PARAMS,
    INITIAL_ENERGY_SPREAD_DIVISOR,
    AnimalParams,
)
from ecosim.entities.animal import Animal
from ecosim.entities.base import Gender, Position, Species
from ecosim.entities.plant import Plant
from ecosim.exceptions import EntityError
from ecosim.util.rng import require_rng_param

ANIMAL_PARAMS: Dict[Species, AnimalParams] = {
    Species.HERBIVORE: HERBIVORE_PARAMS,
    Species.CARNIVORE: CARNIVORE_PARAMS,
}


def params_for(species: Species) -> AnimalParams:
    try:
        return ANIMAL_PARAMS[species]
    except KeyError:
        raise EntityError(f"No animal parameters for species {species.value}") from None


def random_gender(rng: random.Random) -> Gender:
    return Gender.MALE if rng.randint(0, 1) == 0 else Gender.FEMALE


def initial_energy_for(params: AnimalParams, rng: random.Random) -> int:
    """Half of max energy plus a random share of up to a quarter more."""
    return params.max_energy // 2 + rng.randint(
        0, params.max_energy // INITIAL_ENERGY_SPREAD_DIVISOR
    )


def create_animal(
    species: Species,
    position: Position,
    gender: Optional[Gender] = None,
    rng: Optional[random.Random] = None,
    energy: Optional[int] = None,
) -> Animal:
    """Create an animal with randomised starting energy.

    Args:
        species: HERBIVORE or CARNIVORE
        position: Starting cell (not yet placed on any grid)
        gender: Fixed gender, or None to draw one
        rng: Engine RNG (required unless both gender and energy are given)
        energy: Explicit starting energy (tests and scenarios)
    """
    params = params_for(species)
    if gender is None or energy is None:
        _rng = require_rng_param(rng, "create_animal")
        if gender is None:
            gender = random_gender(_rng)
        if energy is None:
            energy = initial_energy_for(params, _rng)
    return Animal(species, position, gender, params, energy)


def create_plant(position: Position) -> Plant:
    return Plant(position)


def create_entity(
    species: Species,
    position: Position,
    rng: Optional[random.Random] = None,
    gender: Optional[Gender] = None,
):
    """Create any species; used by stocking and immigration."""
    if species is Species.PLANT:
        return create_plant(position)
    return create_animal(species, position, gender=gender, rng=rng)
