"""Tests for herbivore grazing, fleeing and foraging."""

import pytest

from ecosim.behaviors import HerbivoreBehavior
from ecosim.entities import Species
from ecosim.seasons import Season


class TestEat:
    def test_eats_nearest_ring_first(self, make_ctx, put, grid):
        herbivore = put("herbivore", (5, 5), energy=50)
        herbivore.turns_since_last_meal = 2
        far = put("plant", (3, 3))
        near = put("plant", (6, 6))
        ctx = make_ctx()

        assert HerbivoreBehavior().eat(herbivore, ctx)

        assert herbivore.energy == 85
        assert herbivore.turns_since_last_meal == 0
        assert not near.alive
        assert far.alive
        assert grid.is_empty((6, 6))
        assert ctx.stats.plants_eaten == 1
        assert ctx.stats.events == ["Herbivore at (5,5) ate plant at (6,6)"]

    def test_row_major_order_within_ring(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=50)
        lower = put("plant", (6, 4))
        upper = put("plant", (4, 6))

        HerbivoreBehavior().eat(herbivore, make_ctx())

        assert not upper.alive
        assert lower.alive

    def test_satiated_herbivore_does_not_eat(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=114)
        plant = put("plant", (5, 6))
        assert not HerbivoreBehavior().eat(herbivore, make_ctx())
        assert plant.alive

    def test_just_below_threshold_eats(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=113)
        put("plant", (5, 6))
        assert HerbivoreBehavior().eat(herbivore, make_ctx())
        assert herbivore.energy == 120

    def test_ignores_animals(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=50)
        put("carnivore", (5, 6))
        put("herbivore", (4, 5))
        assert not HerbivoreBehavior().eat(herbivore, make_ctx())

    @pytest.mark.parametrize(
        "season,eaten",
        [(Season.WINTER, False), (Season.AUTUMN, True), (Season.SPRING, True)],
    )
    def test_eat_radius_follows_season(self, make_ctx, put, season, eaten):
        herbivore = put("herbivore", (5, 5), energy=50)
        plant = put("plant", (5, 9))
        assert HerbivoreBehavior().eat(herbivore, make_ctx(season)) is eaten
        assert plant.alive is not eaten

    def test_summer_radius(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=50)
        ctx = make_ctx(Season.SUMMER)
        assert HerbivoreBehavior().eat_radius(herbivore, ctx) == 7


class TestFlee:
    def test_moves_away_from_carnivore(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=100)
        put("carnivore", (5, 3))

        HerbivoreBehavior().move(herbivore, make_ctx(Season.SPRING))

        assert herbivore.position == (4, 6)
        assert herbivore.energy == 90

    def test_flee_radius_shrinks_in_winter(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=100)
        put("carnivore", (5, 0))
        behavior = HerbivoreBehavior()

        assert behavior.flee_target(herbivore, make_ctx(Season.WINTER)) is None
        assert behavior.flee_target(herbivore, make_ctx(Season.SPRING)) is not None

    def test_takes_only_empty_cell_even_if_closer(self, make_ctx, put):
        herbivore = put("herbivore", (0, 1), energy=100)
        put("carnivore", (2, 1))
        put("plant", (0, 0))
        put("plant", (0, 2))
        put("plant", (1, 1))
        put("plant", (1, 2))

        assert HerbivoreBehavior().flee_target(herbivore, make_ctx()) == (1, 0)

    def test_corner_ties_keep_row_major_order(self, make_ctx, put):
        herbivore = put("herbivore", (0, 0), energy=100)
        put("carnivore", (1, 1))

        assert HerbivoreBehavior().flee_target(herbivore, make_ctx()) == (0, 1)

    def test_no_empty_neighbour(self, make_ctx, put):
        herbivore = put("herbivore", (0, 0), energy=100)
        put("carnivore", (1, 1))
        put("plant", (0, 1))
        put("plant", (1, 0))

        assert HerbivoreBehavior().flee_target(herbivore, make_ctx()) is None

    def test_centroid_of_several_predators(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=100)
        put("carnivore", (3, 5))
        put("carnivore", (5, 3))

        target = HerbivoreBehavior().flee_target(herbivore, make_ctx())

        assert target == (6, 6)


class TestForage:
    def test_steps_toward_nearest_plant(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=60)
        put("plant", (5, 8))

        HerbivoreBehavior().move(herbivore, make_ctx())

        assert herbivore.position == (5, 6)
        assert herbivore.energy == 50

    def test_stepping_onto_plant_eats_it(self, make_ctx, put, grid):
        herbivore = put("herbivore", (5, 5), energy=60)
        plant = put("plant", (5, 6))
        ctx = make_ctx()

        assert HerbivoreBehavior().forage(herbivore, ctx)

        assert not plant.alive
        assert herbivore.position == (5, 6)
        assert herbivore.energy == 85
        assert ctx.stats.plants_eaten == 1
        assert grid.entity_at((5, 6)) is herbivore

    def test_not_hungry_enough(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=110)
        put("plant", (5, 8))
        assert not HerbivoreBehavior().forage(herbivore, make_ctx())
        assert herbivore.position == (5, 5)

    def test_blocked_step(self, make_ctx, put):
        herbivore = put("herbivore", (5, 5), energy=60)
        put("herbivore", (5, 6))
        put("plant", (5, 7))

        assert not HerbivoreBehavior().forage(herbivore, make_ctx())
        assert herbivore.position == (5, 5)
        assert herbivore.energy == 60

    def test_falls_back_to_random_step(self, make_ctx, put, grid):
        herbivore = put("herbivore", (5, 5), energy=110)

        HerbivoreBehavior().move(herbivore, make_ctx())

        assert herbivore.position != (5, 5)
        assert max(abs(herbivore.row - 5), abs(herbivore.col - 5)) == 1
        assert herbivore.energy == 100
        assert grid.check_invariants() == []

    def test_boxed_in_stays_put(self, make_ctx, put, grid):
        herbivore = put("herbivore", (0, 0), energy=110)
        for cell in [(0, 1), (1, 0), (1, 1)]:
            put("herbivore", cell)

        HerbivoreBehavior().move(herbivore, make_ctx())

        assert herbivore.position == (0, 0)
        assert herbivore.energy == 110
        assert grid.count(Species.HERBIVORE) == 4
