"""Console rendering of grid snapshots and monthly reports.

Pure functions from read-only payloads to strings. Nothing here touches
engine state or prints; callers decide where the text goes.
"""

from typing import List, Optional

from ecosim.config.animals import CARNIVORE_PARAMS, HERBIVORE_PARAMS
from ecosim.config.grid import EMPTY_CELL_SYMBOL
from ecosim.config.plants import PLANT_SYMBOL
from ecosim.snapshots import GridSnapshot, TickReport

_ROW_LABEL_WIDTH = 5


def render_grid(snapshot: GridSnapshot) -> str:
    """Draw the grid with column headers, row labels and one symbol per cell."""
    symbols = snapshot.symbol_map()
    lines: List[str] = []

    header = " " * _ROW_LABEL_WIDTH + "".join(f"{col:<2}" for col in range(snapshot.width))
    lines.append(header.rstrip())
    lines.append(" " * _ROW_LABEL_WIDTH + "--" * snapshot.width)

    for row in range(snapshot.height):
        cells = " ".join(
            symbols.get((row, col), EMPTY_CELL_SYMBOL) for col in range(snapshot.width)
        )
        lines.append(f"{row:>2} | {cells}")
    return "\n".join(lines)


def render_legend() -> str:
    return (
        f"Legend: {PLANT_SYMBOL}=Plant, "
        f"{HERBIVORE_PARAMS.male_symbol}/{HERBIVORE_PARAMS.female_symbol}=Herbivore (M/F), "
        f"{CARNIVORE_PARAMS.male_symbol}/{CARNIVORE_PARAMS.female_symbol}=Carnivore (M/F), "
        f"{EMPTY_CELL_SYMBOL}=Empty"
    )


def render_report(report: TickReport) -> str:
    """Monthly statistics block for one tick."""
    lines = [
        "",
        f"--- Monthly Statistics for {report.month_name} ({report.season}) ---",
        f"Plants Eaten by Herbivores: {report.plants_eaten}",
        f"Plants Died (Old Age): {report.plants_died_natural_age}",
        f"Plants Died (Weather): {report.plants_died_weather}",
        f"New Plants (Spread): {report.plants_spread}",
        "",
        f"Herbivores Eaten by Carnivores: {report.herbivores_eaten}",
        f"Herbivores Died (Natural Causes/Starvation): {report.herbivores_died_natural}",
        f"New Herbivores (Born): {report.herbivores_spawned}",
        "",
        f"Carnivores Died (Natural Causes/Starvation): {report.carnivores_died_natural}",
        f"New Carnivores (Born): {report.carnivores_spawned}",
        "",
        f"Animals Immigrated: {report.animals_immigrated}",
        f"Animals Emigrated: {report.animals_emigrated}",
        "",
        "Current Population:",
        f"Plants: {report.current_plants}",
        f"Herbivores: {report.current_herbivores}",
        f"Carnivores: {report.current_carnivores}",
        "",
        "Monthly Events:",
    ]
    if report.events:
        lines.extend(f"- {event}" for event in report.events)
    else:
        lines.append("No specific events this month.")
    return "\n".join(lines)


def render_summary(
    reports: List[TickReport], end_reason: Optional[str], width: int = 40
) -> str:
    """Closing banner: months run, final populations and why the run ended."""
    last = reports[-1] if reports else None
    lines = ["=" * width, "SIMULATION COMPLETE", "=" * width]
    if last is not None:
        lines.append(f"Months simulated: {last.tick}")
        lines.append(
            f"Final population: {last.current_plants} plants, "
            f"{last.current_herbivores} herbivores, {last.current_carnivores} carnivores"
        )
    if end_reason:
        lines.append(end_reason)
    return "\n".join(lines)
