"""Ecosim exception hierarchy.

Centralised base classes so callers can catch simulator failures narrowly.
Ecological outcomes (failed placements, deaths) are never exceptions; these
types cover programming and configuration errors only.
"""


class EcosimError(Exception):
    """Root of all ecosim domain exceptions."""


class SimulationError(EcosimError):
    """Errors during simulation execution (engine, systems, entities)."""


class EntityError(SimulationError):
    """An entity-level failure (placement of a dead entity, bad species)."""


class ConfigurationError(EcosimError):
    """Invalid or missing configuration."""
