"""RNG utilities for deterministic simulation.

Every stochastic decision in the simulator draws from one ``random.Random``
owned by the engine and passed down explicitly. These helpers fail loudly if
that instance is missing rather than silently creating an unseeded fallback.
"""

import random
from typing import Any, Optional


class MissingRNGError(RuntimeError):
    """Raised when an RNG is required but not available.

    This indicates a bug in the simulation setup: every behaviour receives
    the engine's RNG through its tick context.
    """

    pass


def require_rng(context_obj: Any, context: str = "unknown") -> random.Random:
    """Get the RNG from a context object, failing loudly if unavailable.

    Args:
        context_obj: Object expected to carry an ``rng`` attribute (engine or tick context)
        context: Description of the caller (for error messages)

    Returns:
        The object's RNG

    Raises:
        MissingRNGError: If the object is None or has no RNG
    """
    if context_obj is None:
        raise MissingRNGError(
            f"Cannot get RNG: context is None (context: {context}). "
            "Behaviours must be driven through a TickContext."
        )

    rng = getattr(context_obj, "rng", None)
    if rng is None:
        raise MissingRNGError(
            f"Cannot get RNG: object has no 'rng' attribute (context: {context})."
        )

    return rng


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Example:
        def create_animal(species, position, gender, rng=None):
            _rng = require_rng_param(rng, "create_animal")
            energy = params.max_energy // 2 + _rng.randint(0, params.max_energy // 4)
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the engine RNG explicitly.")
    return rng


def percent_roll(rng: random.Random, chance_percent: int) -> bool:
    """Return True with probability ``chance_percent`` / 100.

    Draws an integer in [1, 100] and succeeds when it is at most the chance,
    so 0 never succeeds and anything >= 100 always does.
    """
    return rng.randint(1, 100) <= chance_percent
