"""Pillow rendering of laid-out calendar grids."""

from .labels import CalendarLabels, LegendEntry, TextLabel
from .renderer import Renderer, load_font, state_color
from .scene import legend_entries, life_labels, year_labels

__all__ = [
    "CalendarLabels",
    "LegendEntry",
    "TextLabel",
    "Renderer",
    "load_font",
    "state_color",
    "legend_entries",
    "life_labels",
    "year_labels",
]
