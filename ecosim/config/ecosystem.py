"""Ecosystem interaction constants (mating, flight, migration)."""

# Mate search
MATE_SEARCH_RADIUS = 2  # Registry scan for candidate males
MATE_CONTACT_RADIUS = 1  # Chosen male must be adjacent

# Herbivore flight: detection radius adjustment relative to vision
FLEE_RADIUS_DELTAS = {"Summer": 1, "Winter": -1}

# Spring immigration
IMMIGRATION_MIN = 1
IMMIGRATION_MAX = 3

# Autumn emigration: species leave only above a floor, count capped
HERBIVORE_EMIGRATION_FLOOR = 2
HERBIVORE_EMIGRATION_DIVISOR = 4
HERBIVORE_EMIGRATION_CAP = 2
CARNIVORE_EMIGRATION_FLOOR = 1
CARNIVORE_EMIGRATION_DIVISOR = 5
CARNIVORE_EMIGRATION_CAP = 1
