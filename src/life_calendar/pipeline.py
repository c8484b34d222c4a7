"""Shared calendar orchestration used by CLI and web app entry points."""

import logging
from datetime import date

from .config import Settings
from .errors import InvalidInput
from .layout import GridLayout, GridSpec, layout_for_spec
from .models import SUPPORTED_MODES, CalendarRequest, GridRequest, RenderResult
from .rendering import CalendarLabels, Renderer, life_labels, year_labels
from .themes import THEMES, resolve_theme, supported_theme_names
from .weeks import WeekCount, cell_states, life_weeks, parse_date, weeks_between, year_weeks

logger = logging.getLogger(__name__)


def validate_request(request: CalendarRequest) -> list[str]:
    """Return problems with the mode and theme; date checks happen while counting."""
    reasons: list[str] = []
    if request.mode not in SUPPORTED_MODES:
        modes = " or ".join(f'"{m}"' for m in SUPPORTED_MODES)
        reasons.append(f"mode must be either {modes}")
    theme = request.theme_name
    if theme and (not isinstance(theme, str) or theme not in THEMES):
        themes = " or ".join(f'"{t}"' for t in supported_theme_names())
        reasons.append(f"theme must be either {themes}")
    return reasons


def count_weeks(request: CalendarRequest, reference: date, settings: Settings) -> WeekCount:
    if request.mode == "year":
        return year_weeks(reference)
    life_expectancy = request.life_expectancy
    if life_expectancy is None:
        life_expectancy = settings.default_life_expectancy
    return life_weeks(request.birth_date, reference, life_expectancy)


def build_labels(
    request: CalendarRequest,
    grid: GridRequest,
    layout: GridLayout,
    reference: date,
) -> CalendarLabels:
    if request.mode == "year":
        return year_labels(layout, reference, grid.elapsed_units, grid.width, grid.height)
    birth = parse_date(request.birth_date, "birthDate")
    return life_labels(layout, birth, weeks_between(birth, reference), grid.width, grid.height)


def render_calendar(
    request: CalendarRequest,
    settings: Settings | None = None,
    renderer: Renderer | None = None,
) -> RenderResult:
    """
    Calculate, lay out and render one calendar.

    Args:
        request: Boundary parameters
        settings: Runtime settings; environment defaults when omitted
        renderer: Renderer to draw with; a default 1170x2532 PNG renderer when omitted

    Returns:
        The encoded image

    Raises:
        InvalidInput: If the request parameters are rejected
        LayoutError: If the grid does not fit the canvas
        EncodingError: If PNG encoding fails
    """
    settings = settings or Settings.from_env()
    renderer = renderer or Renderer()

    reasons = validate_request(request)
    reference = date.today()
    if request.reference_date:
        try:
            reference = parse_date(request.reference_date, "referenceDate")
        except InvalidInput as e:
            reasons.extend(e.reasons)
    weeks: WeekCount | None = None
    try:
        weeks = count_weeks(request, reference, settings)
    except InvalidInput as e:
        reasons.extend(e.reasons)
    if reasons:
        raise InvalidInput(reasons)

    theme = resolve_theme(request.theme_name or settings.default_theme)
    spec = GridSpec.year() if request.mode == "year" else GridSpec.life()
    grid = GridRequest(
        total_units=weeks.total_units,
        elapsed_units=weeks.elapsed_units,
        columns=spec.columns,
        rows=spec.rows or 0,
        theme=theme,
        width=renderer.width,
        height=renderer.height,
    )

    layout = layout_for_spec(
        spec, grid.total_units, grid.width, grid.height, tolerance=settings.layout_tolerance
    )
    states = cell_states(grid.total_units, grid.elapsed_units)
    labels = build_labels(request, grid, layout, reference)

    result = renderer.render(theme, layout, states, labels)
    logger.info(
        "Rendered %s calendar: theme=%s elapsed=%d total=%d bytes=%d",
        request.mode,
        theme.name,
        grid.elapsed_units,
        grid.total_units,
        result.length,
    )
    return result
