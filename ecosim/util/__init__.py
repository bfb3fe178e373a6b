"""Small shared helpers for the simulation core."""

from ecosim.util.rng import MissingRNGError, percent_roll, require_rng, require_rng_param

__all__ = ["MissingRNGError", "percent_roll", "require_rng", "require_rng_param"]
