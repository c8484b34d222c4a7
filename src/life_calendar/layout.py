"""Pure grid geometry: where every dot goes, independent of any drawing backend."""

import math
from dataclasses import dataclass
from typing import Iterator

from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    HEADER_HEIGHT,
    LIFE_COLUMNS,
    LIFE_DOT_DIAMETER,
    LIFE_MARGIN_LEFT,
    LIFE_MARGIN_RIGHT,
    LIFE_SPACING,
    LIFE_YEAR_LABEL_WIDTH,
    MARGIN_BOTTOM,
    SAFE_AREA_TOP,
    YEAR_COLUMNS,
    YEAR_DOT_DIAMETER,
    YEAR_MARGIN_SIDE,
    YEAR_ROWS,
    YEAR_SPACING,
)
from .errors import LayoutError


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass(frozen=True)
class GridSpec:
    """Per-mode grid sizing and the page bands around the grid."""
    columns: int
    dot_diameter: int
    spacing: int
    margin_top: int
    margin_bottom: int
    margin_left: int
    margin_right: int
    rows: int | None = None

    @classmethod
    def life(cls) -> "GridSpec":
        """52 weeks per row, one row per year; left band holds the year labels."""
        return cls(
            columns=LIFE_COLUMNS,
            dot_diameter=LIFE_DOT_DIAMETER,
            spacing=LIFE_SPACING,
            margin_top=SAFE_AREA_TOP + HEADER_HEIGHT,
            margin_bottom=MARGIN_BOTTOM,
            margin_left=LIFE_MARGIN_LEFT + LIFE_YEAR_LABEL_WIDTH,
            margin_right=LIFE_MARGIN_RIGHT,
        )

    @classmethod
    def year(cls) -> "GridSpec":
        return cls(
            columns=YEAR_COLUMNS,
            rows=YEAR_ROWS,
            dot_diameter=YEAR_DOT_DIAMETER,
            spacing=YEAR_SPACING,
            margin_top=SAFE_AREA_TOP + HEADER_HEIGHT,
            margin_bottom=MARGIN_BOTTOM,
            margin_left=YEAR_MARGIN_SIDE,
            margin_right=YEAR_MARGIN_SIDE,
        )

    def drawing_area(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> Rect:
        """Canvas minus the header, footer and side bands."""
        return Rect(
            x=self.margin_left,
            y=self.margin_top,
            width=width - self.margin_left - self.margin_right,
            height=height - self.margin_top - self.margin_bottom,
        )


@dataclass(frozen=True)
class GridLayout:
    """Resolved grid geometry. All coordinates are in canvas pixels."""
    total_units: int
    columns: int
    rows: int
    dot_diameter: int
    spacing: int
    area: Rect
    start_x: float
    start_y: float

    @property
    def cell_size(self) -> int:
        return self.dot_diameter + self.spacing

    @property
    def grid_width(self) -> int:
        return self.columns * self.cell_size

    @property
    def grid_height(self) -> int:
        return self.rows * self.cell_size

    def center(self, index: int) -> tuple[float, float]:
        """Centre of the dot at linear ``index`` (row-major)."""
        col = index % self.columns
        row = index // self.columns
        radius = self.dot_diameter / 2
        return (
            self.start_x + col * self.cell_size + radius,
            self.start_y + row * self.cell_size + radius,
        )

    def iter_centers(self) -> Iterator[tuple[float, float]]:
        for index in range(self.total_units):
            yield self.center(index)

    def centers(self) -> tuple[tuple[float, float], ...]:
        return tuple(self.iter_centers())


def compute_grid_layout(
    total_units: int,
    columns: int,
    dot_diameter: int,
    spacing: int,
    area: Rect,
    tolerance: float = 0.0,
    rows: int | None = None,
) -> GridLayout:
    """
    Centre a grid of dots inside ``area``.

    Args:
        total_units: Number of dots to place
        columns: Dots per row
        dot_diameter: Dot diameter in pixels
        spacing: Gap between neighbouring dots in pixels
        area: Drawing rectangle available to the grid
        tolerance: Pixels the grid may overflow ``area`` before failing
        rows: Fixed row count; derived from ``total_units`` when omitted

    Returns:
        The resolved GridLayout

    Raises:
        LayoutError: If the configuration is inconsistent or the grid does
            not fit inside ``area`` within ``tolerance``
    """
    if total_units <= 0 or columns <= 0:
        raise LayoutError(
            f"Grid needs positive units and columns (got {total_units}, {columns})"
        )
    if dot_diameter <= 0 or spacing < 0:
        raise LayoutError(
            f"Invalid dot geometry: diameter={dot_diameter}, spacing={spacing}"
        )

    derived_rows = math.ceil(total_units / columns)
    if rows is None:
        rows = derived_rows
    elif rows < derived_rows:
        raise LayoutError(
            f"{rows} rows x {columns} columns cannot hold {total_units} units"
        )

    cell_size = dot_diameter + spacing
    grid_width = columns * cell_size
    grid_height = rows * cell_size

    overflow_x = grid_width - area.width
    overflow_y = grid_height - area.height
    if overflow_x > tolerance or overflow_y > tolerance:
        raise LayoutError(
            f"Grid {grid_width}x{grid_height}px does not fit drawing area "
            f"{area.width}x{area.height}px (tolerance {tolerance}px)"
        )

    return GridLayout(
        total_units=total_units,
        columns=columns,
        rows=rows,
        dot_diameter=dot_diameter,
        spacing=spacing,
        area=area,
        start_x=area.x + (area.width - grid_width) / 2,
        start_y=area.y + (area.height - grid_height) / 2,
    )


def layout_for_spec(
    spec: GridSpec,
    total_units: int,
    width: int = CANVAS_WIDTH,
    height: int = CANVAS_HEIGHT,
    tolerance: float = 0.0,
) -> GridLayout:
    """Lay out ``total_units`` dots using a mode's GridSpec on a canvas."""
    return compute_grid_layout(
        total_units=total_units,
        columns=spec.columns,
        dot_diameter=spec.dot_diameter,
        spacing=spec.spacing,
        area=spec.drawing_area(width, height),
        tolerance=tolerance,
        rows=spec.rows,
    )
