"""Simulation engine package."""

from ecosim.simulation.engine import SimulationEngine, completion_reason

__all__ = ["SimulationEngine", "completion_reason"]
