"""Grid and run-length configuration constants."""

# Grid dimensions (reference instance)
GRID_WIDTH = 20
GRID_HEIGHT = 20

# Run length
MONTHS_PER_YEAR = 12
MAX_SIMULATION_YEARS = 10
DEFAULT_SIMULATION_YEARS = 1

# Initial stocking defaults
DEFAULT_INITIAL_PLANTS = 60
DEFAULT_INITIAL_HERBIVORES = 20
DEFAULT_INITIAL_CARNIVORES = 6

# Retry budget for random empty-cell searches, as a multiple of cell count
RANDOM_PLACEMENT_RETRY_FACTOR = 2

# Rendering
EMPTY_CELL_SYMBOL = "*"
