"""Configuration package for the ecosystem simulation.

Constants are split by concern (grid, plants, animals, ecosystem); the
run-level ``SimulationConfig`` dataclass lives in ``simulation_config``.
"""
