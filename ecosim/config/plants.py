"""Plant lifecycle configuration constants.

Chances are whole percentages compared against a 1-100 roll.
"""

PLANT_MAX_AGE = 40
PLANT_SYMBOL = "P"

# Weather death (per tick)
PLANT_WINTER_DEATH_CHANCE = 20
PLANT_AUTUMN_DEATH_CHANCE = 10

# Spread to one adjacent cell
PLANT_BASE_SPREAD_CHANCE = 35
PLANT_SPREAD_PLACEMENT_CHANCE = 75  # Second gate once the spread roll succeeds

# Seasonal bloom: random cells anywhere on the grid
PLANT_SPRING_BLOOM_CHANCE = 75
PLANT_SUMMER_BLOOM_CHANCE = 100
PLANT_BLOOM_ATTEMPTS = 2
