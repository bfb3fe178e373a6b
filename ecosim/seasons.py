"""Season calculator and seasonal modifiers.

The calendar is a pure function of the tick index: tick ``n`` (zero-based)
falls in month ``n % 12`` (0 = January). Each hemisphere partitions the
twelve months into four seasons; the Southern partition is the Northern one
shifted by six months.

Modifier helpers translate a season into the numeric adjustments consumed by
behaviour rules (move cost, search radius, reproduction odds). They hold no
state and draw no randomness.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping

from ecosim.config.animals import MIN_MOVE_COST, MOVE_COST_DELTAS
from ecosim.config.grid import MONTHS_PER_YEAR

__all__ = [
    "Season",
    "Hemisphere",
    "MONTH_NAMES",
    "SeasonInfo",
    "month_index",
    "month_name",
    "year_of_tick",
    "season_for",
    "season_info",
    "adjusted_move_cost",
    "adjusted_radius",
    "seasonal_multiplier",
]


class Season(Enum):
    WINTER = "Winter"
    SPRING = "Spring"
    SUMMER = "Summer"
    AUTUMN = "Autumn"


class Hemisphere(Enum):
    NORTHERN = "N"
    SOUTHERN = "S"

    @classmethod
    def from_code(cls, code: str) -> "Hemisphere":
        """Parse a hemisphere flag ("N"/"S", case-insensitive, full names accepted)."""
        normalized = code.strip().upper()[:1]
        for hemisphere in cls:
            if hemisphere.value == normalized:
                return hemisphere
        raise ValueError(f"Unknown hemisphere: {code!r}")


MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Northern partition, indexed by month (0 = January)
_NORTHERN_SEASONS = (
    Season.WINTER,  # Jan
    Season.WINTER,  # Feb
    Season.SPRING,  # Mar
    Season.SPRING,  # Apr
    Season.SPRING,  # May
    Season.SUMMER,  # Jun
    Season.SUMMER,  # Jul
    Season.SUMMER,  # Aug
    Season.AUTUMN,  # Sep
    Season.AUTUMN,  # Oct
    Season.AUTUMN,  # Nov
    Season.WINTER,  # Dec
)

_SOUTHERN_OFFSET = 6


@dataclass(frozen=True)
class SeasonInfo:
    """Calendar position of one tick."""

    tick_index: int
    month_index: int
    month_name: str
    season: Season


def month_index(tick_index: int) -> int:
    """Month of year (0 = January) for a zero-based tick index."""
    return tick_index % MONTHS_PER_YEAR


def month_name(tick_index: int) -> str:
    return MONTH_NAMES[month_index(tick_index)]


def year_of_tick(tick: int) -> int:
    """One-based year of a one-based tick. Ticks 1..12 are year 1."""
    return (max(tick, 1) - 1) // MONTHS_PER_YEAR + 1


def season_for(tick_index: int, hemisphere: Hemisphere) -> Season:
    """Map a zero-based tick index to its season in the given hemisphere."""
    month = month_index(tick_index)
    if hemisphere is Hemisphere.SOUTHERN:
        month = (month + _SOUTHERN_OFFSET) % MONTHS_PER_YEAR
    return _NORTHERN_SEASONS[month]


def season_info(tick_index: int, hemisphere: Hemisphere) -> SeasonInfo:
    return SeasonInfo(
        tick_index=tick_index,
        month_index=month_index(tick_index),
        month_name=month_name(tick_index),
        season=season_for(tick_index, hemisphere),
    )


def adjusted_move_cost(base_move_cost: int, season: Season) -> int:
    """Seasonal metabolism cost: harsher in Winter/Autumn, lighter in Summer."""
    delta = MOVE_COST_DELTAS.get(season.value, 0)
    return max(MIN_MOVE_COST, base_move_cost + delta)


def adjusted_radius(base_radius: int, season: Season, deltas: Mapping[str, int]) -> int:
    """Apply a seasonal radius delta, never shrinking below one cell."""
    return max(1, base_radius + deltas.get(season.value, 0))


def seasonal_multiplier(season: Season, multipliers: Mapping[str, float]) -> float:
    """Look up a seasonal probability multiplier (1.0 when the season is unlisted)."""
    return multipliers.get(season.value, 1.0)
