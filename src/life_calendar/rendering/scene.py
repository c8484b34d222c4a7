"""Label composition for life and year calendars."""

from datetime import date

from ..constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    LEGEND_LABEL_GAP,
    LEGEND_OFFSET_BOTTOM,
    LIFE_MARGIN_LEFT,
    LIFE_MARGIN_RIGHT,
    LIFE_YEAR_LABEL_WIDTH,
    SAFE_AREA_TOP,
    WEEK_TICK_INTERVAL,
    WEEKS_PER_YEAR,
    YEAR_MARGIN_SIDE,
    YEAR_TICK_INTERVAL,
)
from ..layout import GridLayout
from ..weeks import CellState
from .labels import CalendarLabels, LegendEntry, TextLabel

# Legend swatch offsets from the legend's left edge
_LEGEND_OFFSETS = (0, 80, 150)


def life_labels(
    layout: GridLayout,
    birth_date: date,
    weeks_lived: int,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
) -> CalendarLabels:
    """
    Build the header, axis and legend labels of a life calendar.

    Args:
        layout: Resolved grid geometry (axis ticks follow it)
        birth_date: Birth date, shown as the birth year
        weeks_lived: Unclamped weeks lived, used for the counters
        width: Canvas width in pixels
        height: Canvas height in pixels
    """
    text_x = LIFE_MARGIN_LEFT + LIFE_YEAR_LABEL_WIDTH
    weeks_remaining = max(layout.total_units - weeks_lived, 0)

    header = [
        TextLabel("LIFE CALENDAR", width - LIFE_MARGIN_RIGHT, SAFE_AREA_TOP + 30,
                  size=12, role="text", anchor="rs"),
        TextLabel("WEEK OF THE YEAR", 30, layout.start_y + layout.grid_height / 2,
                  size=10, rotation=90),
        TextLabel(f"Age: {weeks_lived // WEEKS_PER_YEAR} years", text_x, SAFE_AREA_TOP + 60,
                  size=14, role="text", bold=True),
        TextLabel(f"{weeks_lived:,} weeks lived", text_x, SAFE_AREA_TOP + 85, size=12),
        TextLabel(f"{weeks_remaining:,} weeks remaining", text_x, SAFE_AREA_TOP + 105, size=12),
        TextLabel(f"Born: {birth_date.year}", text_x, SAFE_AREA_TOP + 130, size=10),
    ]

    for week in range(0, layout.columns + 1, WEEK_TICK_INTERVAL):
        x = layout.start_x + week * layout.cell_size
        header.append(TextLabel(str(week), x, layout.start_y - 15, size=8, anchor="ms"))

    for year in range(0, layout.rows + 1, YEAR_TICK_INTERVAL):
        y = layout.start_y + year * layout.cell_size + layout.dot_diameter / 2
        header.append(TextLabel(str(year), layout.start_x - 15, y + 3, size=8, anchor="rs"))

    return CalendarLabels(
        header=tuple(header),
        legend=legend_entries(("Lived", "Now", "Future"), width, height),
    )


def year_labels(
    layout: GridLayout,
    reference_date: date,
    elapsed_units: int,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
) -> CalendarLabels:
    """Build the header, row and legend labels of a year calendar."""
    current_week = elapsed_units + 1
    weeks_remaining = layout.total_units - current_week
    percent_complete = round(100 * elapsed_units / layout.total_units)

    header = [
        TextLabel("YEAR CALENDAR", width - YEAR_MARGIN_SIDE, SAFE_AREA_TOP + 30,
                  size=12, role="text", anchor="rs"),
        TextLabel(str(reference_date.year), YEAR_MARGIN_SIDE, SAFE_AREA_TOP + 100,
                  size=48, role="text", bold=True),
        TextLabel(f"Week {current_week} of {layout.total_units}", YEAR_MARGIN_SIDE,
                  SAFE_AREA_TOP + 150, size=28, role="text"),
        TextLabel(f"{weeks_remaining:,} weeks remaining", YEAR_MARGIN_SIDE,
                  SAFE_AREA_TOP + 190, size=20),
        TextLabel(f"{percent_complete}% of the year complete", YEAR_MARGIN_SIDE,
                  SAFE_AREA_TOP + 225, size=20),
    ]

    # One row per quarter
    for row in range(layout.rows):
        y = layout.start_y + row * layout.cell_size + layout.dot_diameter / 2
        header.append(TextLabel(f"Q{row + 1}", layout.start_x - 20, y, size=16, anchor="rm"))

    return CalendarLabels(
        header=tuple(header),
        legend=legend_entries(("Past", "Now", "Ahead"), width, height),
    )


def legend_entries(
    names: tuple[str, str, str],
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
) -> tuple[LegendEntry, ...]:
    """Lay out lived/current/future swatches on the bottom band."""
    legend_y = height - LEGEND_OFFSET_BOTTOM
    start_x = width / 2 - 150
    states = (CellState.LIVED, CellState.CURRENT, CellState.FUTURE)

    entries = []
    for state, name, offset in zip(states, names, _LEGEND_OFFSETS):
        x = start_x + offset
        label = TextLabel(name, x + LEGEND_LABEL_GAP, legend_y + 4, size=10)
        entries.append(LegendEntry(state=state, label=label, x=x, y=legend_y))
    return tuple(entries)
