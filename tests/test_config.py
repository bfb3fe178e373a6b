"""Tests for run configuration and the parameter tables."""

import pytest

from ecosim.config.animals import CARNIVORE_PARAMS, HERBIVORE_PARAMS
from ecosim.config.simulation_config import SimulationConfig
from ecosim.exceptions import ConfigurationError, EcosimError
from ecosim.seasons import Hemisphere


def test_defaults():
    config = SimulationConfig()
    assert (config.width, config.height) == (20, 20)
    assert config.capacity == 400
    assert config.duration_months == 12
    assert config.hemisphere is Hemisphere.NORTHERN
    assert config.initial_total == 86
    assert config.carnivore_energy_gain == 45
    config.validate()


def test_from_years():
    config = SimulationConfig.from_years(3, hemisphere=Hemisphere.SOUTHERN)
    assert config.duration_months == 36
    assert config.hemisphere is Hemisphere.SOUTHERN


def test_with_overrides_leaves_original():
    config = SimulationConfig()
    changed = config.with_overrides(initial_plants=5)
    assert changed.initial_plants == 5
    assert config.initial_plants == 60


@pytest.mark.parametrize(
    "overrides",
    [
        dict(width=0),
        dict(height=-1),
        dict(width=3, height=3, initial_plants=8, initial_herbivores=2, initial_carnivores=0),
    ],
)
def test_invalid_configs(overrides):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**overrides).validate()


def test_configuration_error_is_an_ecosim_error():
    assert issubclass(ConfigurationError, EcosimError)


def test_to_dict_is_json_friendly():
    data = SimulationConfig(hemisphere=Hemisphere.SOUTHERN).to_dict()
    assert data["hemisphere"] == "S"
    assert data["width"] == 20


def test_parameter_tables():
    assert HERBIVORE_PARAMS.max_age == 70
    assert HERBIVORE_PARAMS.offspring_range == (1, 3)
    assert CARNIVORE_PARAMS.max_turns_without_food == 2
    assert CARNIVORE_PARAMS.offspring_range == (1, 2)
    assert HERBIVORE_PARAMS.male_symbol == "H"
    assert CARNIVORE_PARAMS.female_symbol == "c"
