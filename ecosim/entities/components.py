"""Shared animal state components.

Herbivores and carnivores share one set of lifecycle, energy and
reproduction fields. Each concern lives in a small slotted component so the
two species compose the same state instead of inheriting it.
"""

from typing import Optional


class EnergyComponent:
    """Integer energy clamped to ``[0, max_energy]`` on every write.

    Attributes:
        energy: Current energy level
        max_energy: Maximum energy capacity
    """

    __slots__ = ("_energy", "max_energy")

    def __init__(self, max_energy: int, initial_energy: Optional[int] = None) -> None:
        self.max_energy: int = max_energy
        self._energy: int = 0
        self.energy = max_energy // 2 if initial_energy is None else initial_energy

    @property
    def energy(self) -> int:
        return self._energy

    @energy.setter
    def energy(self, value: int) -> None:
        self._energy = max(0, min(self.max_energy, int(value)))

    def gain(self, amount: int) -> int:
        """Add energy (capped at max). Returns the amount actually gained."""
        before = self._energy
        self.energy = before + amount
        return self._energy - before

    def spend(self, amount: int) -> int:
        """Remove energy (floored at zero). Returns the amount actually spent."""
        before = self._energy
        self.energy = before - amount
        return before - self._energy

    def is_depleted(self) -> bool:
        return self._energy <= 0

    def below(self, threshold_ratio: float) -> bool:
        """True while energy is strictly below ``threshold_ratio * max_energy``."""
        return self._energy < self.max_energy * threshold_ratio


class LifecycleComponent:
    """Age and starvation tracking.

    Attributes:
        age: Ticks lived
        max_age: Dies once age exceeds this
        turns_since_last_meal: Ticks since the last successful meal
        max_turns_without_food: Dies once turns_since_last_meal exceeds this
    """

    __slots__ = ("age", "max_age", "turns_since_last_meal", "max_turns_without_food")

    def __init__(self, max_age: int, max_turns_without_food: int, age: int = 0) -> None:
        self.age: int = age
        self.max_age: int = max_age
        self.turns_since_last_meal: int = 0
        self.max_turns_without_food: int = max_turns_without_food

    def advance(self) -> None:
        """One tick older, one tick hungrier."""
        self.age += 1
        self.turns_since_last_meal += 1

    def record_meal(self) -> None:
        self.turns_since_last_meal = 0

    def is_too_old(self) -> bool:
        return self.age > self.max_age

    def is_starved(self) -> bool:
        return self.turns_since_last_meal > self.max_turns_without_food


class ReproductionComponent:
    """Pregnancy, gestation and post-birth cooldown.

    Attributes:
        gestation_period: Ticks from mating to birth
        reproduction_cooldown: Cooldown applied after each birth
        current_cooldown: Counts down to zero
        is_pregnant: Whether gestation is under way
        gestation_progress: Ticks of gestation completed
    """

    __slots__ = (
        "gestation_period",
        "reproduction_cooldown",
        "current_cooldown",
        "is_pregnant",
        "gestation_progress",
    )

    def __init__(self, gestation_period: int, reproduction_cooldown: int) -> None:
        self.gestation_period: int = gestation_period
        self.reproduction_cooldown: int = reproduction_cooldown
        self.current_cooldown: int = 0
        self.is_pregnant: bool = False
        self.gestation_progress: int = 0

    def tick_cooldown(self) -> None:
        if self.current_cooldown > 0:
            self.current_cooldown -= 1

    def start_pregnancy(self) -> None:
        self.is_pregnant = True
        self.gestation_progress = 0

    def advance_gestation(self) -> None:
        self.gestation_progress += 1

    def is_due(self) -> bool:
        return self.is_pregnant and self.gestation_progress >= self.gestation_period

    def complete_birth(self) -> None:
        """Clear pregnancy and start the post-birth cooldown."""
        self.is_pregnant = False
        self.gestation_progress = 0
        self.current_cooldown = self.reproduction_cooldown
