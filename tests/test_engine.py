"""Tests for the tick engine: setup, phase order, termination and determinism."""

import random

import pytest

from ecosim.config.simulation_config import SimulationConfig
from ecosim.entities import Species, create_animal
from ecosim.exceptions import ConfigurationError, SimulationError
from ecosim.seasons import Hemisphere
from ecosim.simulation import SimulationEngine, completion_reason
from ecosim.simulation.engine import (
    END_ALL_ANIMALS_DEAD,
    END_ALL_HERBIVORES_DEAD,
    END_ALL_PLANTS_DEAD,
    INITIAL_SETUP_LABEL,
)
from ecosim.update_phases import PHASE_DESCRIPTIONS, UpdatePhase


def small_config(**overrides):
    values = dict(
        width=6,
        height=6,
        initial_plants=10,
        initial_herbivores=3,
        initial_carnivores=2,
    )
    values.update(overrides)
    return SimulationConfig(**values)


@pytest.fixture
def recorded_updates(monkeypatch):
    """Replace per-entity updates with a recorder; entities do nothing."""
    calls = []

    def record(entity, ctx):
        calls.append(entity)

    monkeypatch.setattr("ecosim.simulation.engine.update_entity", record)
    return calls


class TestSetup:
    def test_initial_population(self, simulation_engine):
        grid = simulation_engine.grid
        assert grid.count(Species.PLANT) == 60
        assert grid.count(Species.HERBIVORE) == 20
        assert grid.count(Species.CARNIVORE) == 6
        assert grid.check_invariants() == []

    def test_initial_report(self, simulation_engine):
        assert len(simulation_engine.history) == 1
        report = simulation_engine.latest_report
        assert report.is_initial
        assert report.month_name == INITIAL_SETUP_LABEL
        assert report.year == 1
        assert report.current_plants == 60
        assert report.current_herbivores == 20
        assert report.current_carnivores == 6
        assert report.events == []

    def test_setup_twice_raises(self, simulation_engine):
        with pytest.raises(SimulationError):
            simulation_engine.setup()

    def test_update_before_setup_raises(self):
        engine = SimulationEngine(small_config(), seed=1)
        with pytest.raises(SimulationError):
            engine.update()

    def test_overfull_config_rejected(self):
        with pytest.raises(ConfigurationError):
            SimulationEngine(SimulationConfig(width=2, height=2, initial_plants=5), seed=1)

    def test_exactly_full_grid(self):
        config = SimulationConfig(
            width=3, height=3, initial_plants=5, initial_herbivores=3, initial_carnivores=1
        )
        engine = SimulationEngine(config, seed=3)
        engine.setup()
        assert engine.grid.is_full()
        assert engine.grid.check_invariants() == []

    def test_seed_is_recorded(self):
        assert SimulationEngine(small_config(), seed=5).seed == 5
        assert isinstance(SimulationEngine(small_config()).seed, int)

    def test_injected_rng(self):
        rng = random.Random(9)
        engine = SimulationEngine(small_config(), rng=rng)
        assert engine.rng is rng
        assert engine.seed is None


class TestTickLoop:
    def test_invariants_hold_every_tick(self):
        engine = SimulationEngine(SimulationConfig.from_years(2), seed=42)
        for report in engine.run():
            assert engine.grid.check_invariants() == []
            assert engine.grid.population() <= engine.grid.capacity
            assert report.current_plants == engine.grid.count(Species.PLANT)
            assert report.current_herbivores == engine.grid.count(Species.HERBIVORE)
            assert report.current_carnivores == engine.grid.count(Species.CARNIVORE)
            assert all(e.alive for e in engine.grid.occupants())

    def test_species_update_order(self, recorded_updates):
        engine = SimulationEngine(small_config(), seed=11)
        engine.setup()

        engine.update()

        species = [entity.species for entity in recorded_updates]
        assert species == (
            [Species.CARNIVORE] * 2 + [Species.HERBIVORE] * 3 + [Species.PLANT] * 10
        )

    def test_current_phase_during_entity_updates(self, monkeypatch):
        engine = SimulationEngine(small_config(), seed=11)
        engine.setup()
        seen = []
        monkeypatch.setattr(
            "ecosim.simulation.engine.update_entity",
            lambda entity, ctx: seen.append((entity.species, engine.get_current_phase())),
        )

        engine.update()

        assert (Species.CARNIVORE, UpdatePhase.CARNIVORES) in seen
        assert (Species.HERBIVORE, UpdatePhase.HERBIVORES) in seen
        assert (Species.PLANT, UpdatePhase.PLANTS) in seen
        assert engine.get_current_phase() is None

    def test_newborns_wait_for_next_tick(self, monkeypatch):
        engine = SimulationEngine(small_config(), seed=11)
        engine.setup()
        herbivore_updates = []

        def spawn_on_first_carnivore(entity, ctx):
            if entity.species is Species.CARNIVORE and not herbivore_updates:
                cell = ctx.grid.random_empty_cell(ctx.rng)
                newborn = create_animal(Species.HERBIVORE, cell, rng=ctx.rng)
                assert ctx.grid.place(newborn)
                herbivore_updates.append("spawned")
            elif entity.species is Species.HERBIVORE:
                herbivore_updates.append(entity)

        monkeypatch.setattr("ecosim.simulation.engine.update_entity", spawn_on_first_carnivore)

        engine.update()

        assert len(herbivore_updates) == 1 + 3
        assert engine.grid.count(Species.HERBIVORE) == 4

    def test_entities_killed_mid_tick_are_skipped(self, monkeypatch):
        engine = SimulationEngine(small_config(), seed=11)
        engine.setup()
        updated = []

        def kill_herbivores(entity, ctx):
            updated.append(entity.species)
            if entity.species is Species.CARNIVORE:
                for herbivore in ctx.grid.entities(Species.HERBIVORE):
                    herbivore.kill()

        monkeypatch.setattr("ecosim.simulation.engine.update_entity", kill_herbivores)

        engine.update()

        assert Species.HERBIVORE not in updated
        assert engine.grid.count(Species.HERBIVORE) == 0
        assert engine.grid.check_invariants() == []

    def test_calendar_progression(self, recorded_updates):
        engine = SimulationEngine(small_config(), seed=2)
        reports = list(engine.run(max_months=3))
        assert [(r.month_name, r.season) for r in reports] == [
            ("February", "Winter"),
            ("March", "Spring"),
            ("April", "Spring"),
        ]
        assert all(r.year == 1 for r in reports)

    def test_southern_calendar(self, recorded_updates):
        engine = SimulationEngine(small_config(hemisphere=Hemisphere.SOUTHERN), seed=2)
        report = next(engine.run(max_months=1))
        assert (report.month_name, report.season) == ("February", "Summer")

    def test_year_rolls_over(self, recorded_updates):
        engine = SimulationEngine(small_config(duration_months=13), seed=2)
        reports = engine.run_to_completion()
        assert (reports[10].month_name, reports[10].year) == ("December", 1)
        assert (reports[11].month_name, reports[11].year) == ("January", 1)
        assert (reports[12].month_name, reports[12].year) == ("February", 2)


class TestTermination:
    def test_runs_for_configured_duration(self, recorded_updates):
        engine = SimulationEngine(small_config(duration_months=3), seed=4)

        reports = engine.run_to_completion()

        assert len(reports) == 3
        assert engine.is_finished
        assert engine.end_reason == "Simulation for 3 months finished."
        assert reports[-1].end_reason == engine.end_reason
        assert all(r.end_reason is None for r in reports[:-1])
        assert len(engine.history) == 4
        assert engine.update() is None

    def test_no_animals_ends_on_second_tick(self):
        engine = SimulationEngine(
            small_config(hemisphere=Hemisphere.SOUTHERN, width=5, height=5, initial_plants=5,
                         initial_herbivores=0, initial_carnivores=0),
            seed=8,
        )
        engine.setup()

        first = engine.update()
        assert first.end_reason is None
        assert not engine.is_finished

        second = engine.update()
        assert second.end_reason == END_ALL_ANIMALS_DEAD
        assert engine.is_finished
        assert engine.completed_months == 2
        assert engine.update() is None

    def test_carnivores_without_herbivores(self):
        engine = SimulationEngine(
            small_config(hemisphere=Hemisphere.SOUTHERN, initial_plants=15,
                         initial_herbivores=0, initial_carnivores=1),
            seed=8,
        )
        reports = engine.run_to_completion()
        assert len(reports) == 2
        assert engine.end_reason == END_ALL_HERBIVORES_DEAD

    def test_no_plants(self):
        engine = SimulationEngine(
            small_config(initial_plants=0, initial_herbivores=2, initial_carnivores=0),
            seed=8,
        )
        reports = engine.run_to_completion()
        assert len(reports) == 2
        assert engine.end_reason == END_ALL_PLANTS_DEAD

    def test_stop(self, simulation_engine):
        simulation_engine.stop("Stopped by test.")
        assert simulation_engine.is_finished
        assert simulation_engine.end_reason == "Stopped by test."
        assert simulation_engine.update() is None
        assert list(simulation_engine.run()) == []

    @pytest.mark.parametrize(
        "months,expected",
        [
            (12, "Simulation for 1 year (12 months) finished."),
            (24, "Simulation for 2 years (24 months) finished."),
            (5, "Simulation for 5 months finished."),
        ],
    )
    def test_completion_reason(self, months, expected):
        assert completion_reason(months) == expected


class TestRunControl:
    def test_run_sets_up_and_caps_months(self):
        engine = SimulationEngine(small_config(), seed=6)
        reports = list(engine.run(max_months=2))
        assert engine.is_setup
        assert len(reports) == 2
        assert engine.tick == 2

    def test_same_seed_same_run(self):
        first = SimulationEngine(SimulationConfig(), seed=1234)
        second = SimulationEngine(SimulationConfig(), seed=1234)

        first_reports = [r.model_dump() for r in first.run_to_completion()]
        second_reports = [r.model_dump() for r in second.run_to_completion()]

        assert first_reports == second_reports
        assert first.snapshot().model_dump() == second.snapshot().model_dump()


class TestViews:
    def test_snapshot_matches_grid(self, simulation_engine):
        snapshot = simulation_engine.snapshot()
        assert snapshot.count("Plant") == 60
        assert snapshot.count("Herbivore") == 20
        assert snapshot.count("Carnivore") == 6
        positions = [(e.row, e.col) for e in snapshot.entities]
        assert positions == sorted(positions)

    def test_snapshot_animal_fields(self, simulation_engine):
        snapshot = simulation_engine.snapshot()
        for entity in snapshot.entities:
            if entity.species == "Plant":
                assert entity.symbol == "P"
                assert entity.energy is None
            else:
                assert entity.gender in ("male", "female")
                assert 0 <= entity.energy <= 120

    def test_phase_description(self, simulation_engine):
        assert simulation_engine.get_phase_description() == "Idle"
        assert (
            simulation_engine.get_phase_description(UpdatePhase.CLEANUP)
            == PHASE_DESCRIPTIONS[UpdatePhase.CLEANUP]
        )

    def test_get_system(self, simulation_engine):
        assert simulation_engine.get_system("Migration") is simulation_engine.migration_system
        assert simulation_engine.get_system("Nope") is None
        assert len(simulation_engine.get_systems()) == 3

    def test_debug_info(self, simulation_engine):
        simulation_engine.update()
        info = simulation_engine.get_debug_info()
        assert info["tick"] == 1
        assert info["seed"] == 42
        assert info["phase"] == "Idle"
        assert [s["name"] for s in info["systems"]] == ["Season", "Migration", "EntityLifecycle"]
