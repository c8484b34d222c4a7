"""Tests for pure grid geometry."""

import pytest

from life_calendar.errors import LayoutError
from life_calendar.layout import GridSpec, Rect, compute_grid_layout, layout_for_spec


@pytest.fixture
def area() -> Rect:
    return Rect(x=100, y=200, width=600, height=400)


def test_rows_and_sizes(area):
    layout = compute_grid_layout(100, 13, dot_diameter=10, spacing=5, area=area)

    assert layout.rows == 8
    assert layout.cell_size == 15
    assert layout.grid_width == 195
    assert layout.grid_height == 120


def test_grid_is_centered(area):
    layout = compute_grid_layout(100, 13, dot_diameter=10, spacing=5, area=area)
    center_x, center_y = area.center

    assert abs(layout.start_x + layout.grid_width / 2 - center_x) <= 1
    assert abs(layout.start_y + layout.grid_height / 2 - center_y) <= 1


def test_dot_centers_follow_row_major_order(area):
    layout = compute_grid_layout(30, 10, dot_diameter=8, spacing=3, area=area)

    assert layout.center(0) == (layout.start_x + 4, layout.start_y + 4)
    assert layout.center(9) == (layout.start_x + 9 * 11 + 4, layout.start_y + 4)
    assert layout.center(10) == (layout.start_x + 4, layout.start_y + 11 + 4)
    assert len(layout.centers()) == 30


def test_layout_is_deterministic(area):
    first = compute_grid_layout(4160, 52, dot_diameter=8, spacing=3, area=Rect(0, 0, 1000, 1000))
    second = compute_grid_layout(4160, 52, dot_diameter=8, spacing=3, area=Rect(0, 0, 1000, 1000))

    assert first == second
    assert first.centers() == second.centers()


def test_rejects_grid_larger_than_area():
    with pytest.raises(LayoutError, match="does not fit"):
        compute_grid_layout(52, 52, dot_diameter=20, spacing=5, area=Rect(0, 0, 1000, 100))


def test_tolerance_allows_small_overflow():
    # 10 columns x 11px = 110px in a 105px area
    with pytest.raises(LayoutError):
        compute_grid_layout(10, 10, dot_diameter=8, spacing=3, area=Rect(0, 0, 105, 50))

    layout = compute_grid_layout(
        10, 10, dot_diameter=8, spacing=3, area=Rect(0, 0, 105, 50), tolerance=5
    )
    assert layout.start_x == -2.5


@pytest.mark.parametrize(
    "total_units, columns, dot, spacing",
    [(0, 10, 8, 3), (10, 0, 8, 3), (10, 10, 0, 3), (10, 10, 8, -1)],
)
def test_rejects_degenerate_configuration(area, total_units, columns, dot, spacing):
    with pytest.raises(LayoutError):
        compute_grid_layout(total_units, columns, dot, spacing, area)


def test_fixed_rows_must_hold_every_unit(area):
    with pytest.raises(LayoutError, match="cannot hold"):
        compute_grid_layout(60, 13, dot_diameter=10, spacing=5, area=area, rows=4)


class TestGridSpec:
    def test_life_drawing_area(self):
        assert GridSpec.life().drawing_area(1170, 2532) == Rect(120, 550, 1000, 1882)

    def test_life_grid_for_eighty_years(self):
        layout = layout_for_spec(GridSpec.life(), 80 * 52)

        assert (layout.columns, layout.rows) == (52, 80)
        assert layout.start_x == 334
        assert layout.start_y == 1051

    def test_life_grid_fits_maximum_expectancy(self):
        layout = layout_for_spec(GridSpec.life(), 150 * 52)
        assert layout.rows == 150

    def test_year_grid(self):
        layout = layout_for_spec(GridSpec.year(), 52)

        assert (layout.columns, layout.rows) == (13, 4)
        assert layout.cell_size == 65
        assert layout.start_x == 162.5

    def test_life_grid_overflows_small_canvas(self):
        with pytest.raises(LayoutError):
            layout_for_spec(GridSpec.life(), 80 * 52, width=600, height=800)
