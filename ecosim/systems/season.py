"""Calendar system: resolves the month and season of each tick.

Runs in UpdatePhase.SEASON_UPDATE. The mapping itself is the pure function
``ecosim.seasons.season_info``; this system only remembers the result for
the rest of the tick and for reporting.
"""

from typing import TYPE_CHECKING, Any, Dict

from ecosim.seasons import Hemisphere, Season, SeasonInfo, season_info
from ecosim.systems.base import BaseSystem, SystemResult
from ecosim.update_phases import UpdatePhase, runs_in_phase

if TYPE_CHECKING:
    from ecosim.simulation.engine import SimulationEngine


@runs_in_phase(UpdatePhase.SEASON_UPDATE)
class SeasonSystem(BaseSystem):
    """Tracks the calendar position of the running tick.

    Tick ``n`` (one-based) is month index ``n % 12``: setup sits at January
    and the first simulated month is February.

    Attributes:
        hemisphere: Selects the season partition
        info: Calendar position of the most recent tick
    """

    def __init__(self, engine: "SimulationEngine", hemisphere: Hemisphere) -> None:
        super().__init__(engine, "Season")
        self.hemisphere = hemisphere
        self.info: SeasonInfo = season_info(0, hemisphere)
        self._season_changes = 0

    def _do_update(self, tick: int) -> SystemResult:
        previous = self.info.season
        self.info = season_info(tick, self.hemisphere)
        changed = self.info.season is not previous
        if changed:
            self._season_changes += 1

        return SystemResult(
            details={
                "month": self.info.month_name,
                "season": self.info.season.value,
                "season_changed": changed,
            },
        )

    @property
    def season(self) -> Season:
        return self.info.season

    @property
    def month_name(self) -> str:
        return self.info.month_name

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            **super().get_debug_info(),
            "hemisphere": self.hemisphere.value,
            "month": self.info.month_name,
            "season": self.info.season.value,
            "season_changes": self._season_changes,
        }
