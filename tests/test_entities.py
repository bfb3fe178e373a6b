"""Tests for entity construction and state."""

import pytest

from ecosim.config.animals import CARNIVORE_PARAMS
from ecosim.entities import Animal, Gender, Species, create_animal, create_entity, create_plant
from ecosim.entities.base import Entity
from ecosim.entities.factory import initial_energy_for, params_for
from ecosim.exceptions import EntityError


def test_symbols_follow_gender():
    assert create_animal(Species.HERBIVORE, (0, 0), Gender.MALE, energy=60).symbol == "H"
    assert create_animal(Species.HERBIVORE, (0, 0), Gender.FEMALE, energy=60).symbol == "h"
    assert create_animal(Species.CARNIVORE, (0, 0), Gender.MALE, energy=60).symbol == "C"
    assert create_animal(Species.CARNIVORE, (0, 0), Gender.FEMALE, energy=60).symbol == "c"
    assert create_plant((0, 0)).symbol == "P"


def test_entity_base_is_abstract():
    with pytest.raises(TypeError):
        Entity(Species.PLANT, (0, 0))


def test_random_energy_range(seeded_rng):
    for _ in range(50):
        energy = initial_energy_for(CARNIVORE_PARAMS, seeded_rng)
        assert 60 <= energy <= 90


def test_create_entity_draws_gender(low_rng, high_rng):
    assert create_entity(Species.HERBIVORE, (0, 0), rng=low_rng).gender is Gender.MALE
    assert create_entity(Species.HERBIVORE, (0, 0), rng=high_rng).gender is Gender.FEMALE
    assert create_entity(Species.PLANT, (0, 0)).species is Species.PLANT


def test_plant_is_not_an_animal():
    with pytest.raises(EntityError):
        Animal(Species.PLANT, (0, 0), Gender.MALE, CARNIVORE_PARAMS, 60)
    with pytest.raises(EntityError):
        params_for(Species.PLANT)


def test_new_animal_state():
    animal = create_animal(Species.HERBIVORE, (2, 3), Gender.FEMALE, energy=70)
    assert animal.alive
    assert animal.entity_id is None
    assert (animal.row, animal.col) == (2, 3)
    assert animal.age == 0
    assert animal.turns_since_last_meal == 0
    assert not animal.is_pregnant
    assert animal.current_cooldown == 0


def test_kill_is_idempotent():
    plant = create_plant((0, 0))
    plant.kill()
    plant.kill()
    assert not plant.alive


def test_plant_ageing():
    plant = create_plant((0, 0))
    plant.age = 40
    assert not plant.is_too_old()
    plant.increment_age()
    assert plant.is_too_old()
