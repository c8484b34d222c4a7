"""Render a life (or the current year) as a grid of weeks."""

from .errors import CalendarError, EncodingError, InvalidInput, LayoutError
from .models import CalendarRequest, GridRequest, RenderResult
from .pipeline import render_calendar
from .themes import THEMES, ThemeSpec, resolve_theme

__all__ = [
    "CalendarError",
    "EncodingError",
    "InvalidInput",
    "LayoutError",
    "CalendarRequest",
    "GridRequest",
    "RenderResult",
    "render_calendar",
    "THEMES",
    "ThemeSpec",
    "resolve_theme",
]
