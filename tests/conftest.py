"""Pytest configuration and fixtures for ecosystem simulation tests."""

import random

import pytest


class FixedRandom(random.Random):
    """Random whose integer and uniform draws are pinned to one end of the range.

    ``choice``/``randrange`` still come from the seeded generator.
    With ``pick="low"`` every percent roll succeeds; with ``pick="high"``
    only certain (100%) rolls succeed.
    """

    def __init__(self, pick: str = "low", seed: int = 0) -> None:
        super().__init__(seed)
        self.pick = pick

    def randint(self, a, b):
        return a if self.pick == "low" else b

    def uniform(self, a, b):
        return a if self.pick == "low" else b


@pytest.fixture
def seeded_rng():
    """Provide a deterministic RNG for tests."""
    return random.Random(42)


@pytest.fixture
def low_rng():
    return FixedRandom("low")


@pytest.fixture
def high_rng():
    return FixedRandom("high")


@pytest.fixture
def grid():
    """An empty 10x10 grid."""
    from ecosim.spatial.grid import Grid

    return Grid(10, 10)


@pytest.fixture
def make_ctx(grid, seeded_rng):
    """Build a TickContext around a grid with a fresh stats record."""
    from ecosim.behaviors.context import TickContext
    from ecosim.config.simulation_config import SimulationConfig
    from ecosim.seasons import Season
    from ecosim.stats import MonthlyStats

    def _make(season=Season.SPRING, rng=None, target_grid=None, **config_overrides):
        g = target_grid if target_grid is not None else grid
        config = SimulationConfig(
            width=g.width,
            height=g.height,
            initial_plants=0,
            initial_herbivores=0,
            initial_carnivores=0,
            **config_overrides,
        )
        return TickContext(
            grid=g,
            stats=MonthlyStats(),
            season=season,
            rng=rng if rng is not None else seeded_rng,
            config=config,
            tick=1,
        )

    return _make


@pytest.fixture
def put(grid):
    """Place an entity on the grid and return it.

    put("plant", (r, c)) or put("herbivore", (r, c), gender=..., energy=..., age=...)
    """
    from ecosim.entities import Gender, Species, create_animal, create_plant

    def _put(kind, position, gender=Gender.MALE, energy=60, age=0, target_grid=None):
        g = target_grid if target_grid is not None else grid
        if kind == "plant":
            entity = create_plant(position)
            entity.age = age
        else:
            species = Species.HERBIVORE if kind == "herbivore" else Species.CARNIVORE
            entity = create_animal(species, position, gender=gender, energy=energy)
            entity.age = age
        assert g.place(entity), f"could not place {kind} at {position}"
        return entity

    return _put


@pytest.fixture
def simulation_engine():
    """Setup a simulation engine for testing with deterministic seed."""
    from ecosim.simulation.engine import SimulationEngine

    engine = SimulationEngine(seed=42)
    engine.setup()
    return engine
