"""Animal species parameter tables.

Each animal species is described by one frozen ``AnimalParams`` record.
Seasonal adjustments are keyed by season name so this module does not depend
on the season calculator.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

# Shared animal constants
REPRODUCTION_COOLDOWN = 1  # Ticks between successful births
PREGNANCY_ENERGY_COST = 3  # Paid every tick of gestation
BIRTH_ENERGY_DIVISOR = 3  # Birth costs max_energy // 3
MATING_ENERGY_DIVISOR = 2  # Female pays energy_to_reproduce // 2
MATE_ENERGY_DIVISOR = 4  # Male pays his energy_to_reproduce // 4
INITIAL_ENERGY_SPREAD_DIVISOR = 4  # Initial energy = max // 2 + randint(0, max // 4)

# Seasonal move-cost deltas applied to the per-tick metabolism charge
MOVE_COST_DELTAS: Dict[str, int] = {
    "Winter": 5,
    "Autumn": 2,
    "Summer": -2,
}
MIN_MOVE_COST = 1


@dataclass(frozen=True)
class AnimalParams:
    """Immutable parameters for one animal species.

    Attributes:
        name: Display name used in event strings ("Herbivore")
        max_age: Dies once age exceeds this
        max_energy: Energy cap
        vision_range: Base detection radius in cells
        base_move_cost: Energy charged per step and used for metabolism
        gestation_period: Ticks from mating to birth
        min_breeding_age: Minimum age for either parent
        energy_to_reproduce: Energy a female needs to start mating
        max_turns_without_food: Starvation limit
        energy_gain_per_meal: Energy gained per successful meal
        eat_threshold: Only eats while energy < max_energy * eat_threshold
        hunt_threshold: Forages/chases while energy < max_energy * hunt_threshold
        offspring_range: Inclusive (min, max) litter size
        male_symbol / female_symbol: Grid display characters
        eat_radius_deltas: Seasonal change to vision for the eat search
        reproduction_multipliers: Seasonal mating success probability
        reproduction_cooldown: Ticks a female waits after giving birth
    """

    name: str
    max_age: int
    max_energy: int
    vision_range: int
    base_move_cost: int
    gestation_period: int
    min_breeding_age: int
    energy_to_reproduce: int
    max_turns_without_food: int
    energy_gain_per_meal: int
    eat_threshold: float
    hunt_threshold: float
    offspring_range: Tuple[int, int]
    male_symbol: str
    female_symbol: str
    eat_radius_deltas: Dict[str, int] = field(default_factory=dict)
    reproduction_multipliers: Dict[str, float] = field(default_factory=dict)
    reproduction_cooldown: int = REPRODUCTION_COOLDOWN


HERBIVORE_PARAMS = AnimalParams(
    name="Herbivore",
    max_age=70,
    max_energy=120,
    vision_range=5,
    base_move_cost=10,
    gestation_period=3,
    min_breeding_age=2,
    energy_to_reproduce=40,
    max_turns_without_food=3,
    energy_gain_per_meal=35,
    eat_threshold=0.95,
    hunt_threshold=0.90,
    offspring_range=(1, 3),
    male_symbol="H",
    female_symbol="h",
    eat_radius_deltas={"Winter": -2, "Autumn": -1, "Summer": 2},
    reproduction_multipliers={"Winter": 0.2, "Autumn": 0.5, "Summer": 1.5},
)

CARNIVORE_PARAMS = AnimalParams(
    name="Carnivore",
    max_age=100,
    max_energy=120,
    vision_range=6,
    base_move_cost=15,
    gestation_period=4,
    min_breeding_age=5,
    energy_to_reproduce=50,
    max_turns_without_food=2,
    energy_gain_per_meal=45,
    eat_threshold=0.90,
    hunt_threshold=0.85,
    offspring_range=(1, 2),
    male_symbol="C",
    female_symbol="c",
    eat_radius_deltas={"Winter": -2, "Autumn": -1, "Summer": 1},
    reproduction_multipliers={"Winter": 0.15, "Autumn": 0.4, "Summer": 1.3},
)
