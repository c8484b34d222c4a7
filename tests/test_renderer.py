"""Tests for the Pillow calendar renderer."""

from datetime import date
from io import BytesIO

from PIL import Image, ImageColor
import pytest

from life_calendar.errors import LayoutError
from life_calendar.layout import GridSpec, layout_for_spec
from life_calendar.rendering import CalendarLabels, Renderer, legend_entries, life_labels, year_labels
from life_calendar.themes import resolve_theme
from life_calendar.weeks import CellState, cell_states


def rgb(color: str) -> tuple[int, int, int]:
    return ImageColor.getrgb(color)[:3]


def pixel_at(image: Image.Image, xy: tuple[float, float]) -> tuple[int, int, int]:
    return image.getpixel((int(xy[0]), int(xy[1])))


class TestLifeRendering:
    @pytest.fixture
    def layout(self):
        return layout_for_spec(GridSpec.life(), 80 * 52)

    @pytest.fixture
    def labels(self, layout):
        return life_labels(layout, date(1990, 5, 15), weeks_lived=10)

    def test_canvas_size_and_background(self, layout, labels):
        theme = resolve_theme("dark")
        image = Renderer().render_image(theme, layout, cell_states(layout.total_units, 10), labels)

        assert image.size == (1170, 2532)
        assert image.getpixel((5, 5)) == rgb(theme.background)

    @pytest.mark.parametrize("theme_name", ["dark", "light"])
    def test_dots_are_colored_by_state(self, layout, labels, theme_name):
        theme = resolve_theme(theme_name)
        image = Renderer().render_image(theme, layout, cell_states(layout.total_units, 10), labels)

        assert pixel_at(image, layout.center(0)) == rgb(theme.lived)
        assert pixel_at(image, layout.center(9)) == rgb(theme.lived)
        assert pixel_at(image, layout.center(10)) == rgb(theme.current)
        assert pixel_at(image, layout.center(11)) == rgb(theme.future)
        assert pixel_at(image, layout.center(layout.total_units - 1)) == rgb(theme.future)

    def test_legend_swatches(self, layout, labels):
        theme = resolve_theme("light")
        image = Renderer().render_image(theme, layout, cell_states(layout.total_units, 10), labels)

        colors = [pixel_at(image, (entry.x, entry.y)) for entry in labels.legend]
        assert colors == [rgb(theme.lived), rgb(theme.current), rgb(theme.future)]

    def test_header_text_is_drawn(self, layout, labels):
        theme = resolve_theme("dark")
        blank = Renderer().render_image(
            theme, layout, cell_states(layout.total_units, 10), CalendarLabels()
        )
        labelled = Renderer().render_image(theme, layout, cell_states(layout.total_units, 10), labels)

        header_band = (0, 250, 1170, 550)
        assert blank.crop(header_band).getcolors() == [(1170 * 300, rgb(theme.background))]
        assert len(labelled.crop(header_band).getcolors(maxcolors=4096)) > 1

    def test_render_is_deterministic(self, layout, labels):
        theme = resolve_theme("dark")
        states = cell_states(layout.total_units, 10)

        first = Renderer().render(theme, layout, states, labels)
        second = Renderer().render(theme, layout, states, labels)

        assert first.data == second.data

    def test_rejects_mismatched_states(self, layout, labels):
        with pytest.raises(LayoutError, match="cell states"):
            Renderer().render_image(resolve_theme("dark"), layout, cell_states(10, 0), labels)


def test_life_labels_text():
    layout = layout_for_spec(GridSpec.life(), 80 * 52)
    labels = life_labels(layout, date(1990, 5, 15), weeks_lived=1774)
    texts = [label.text for label in labels.header]

    assert "LIFE CALENDAR" in texts
    assert "Age: 34 years" in texts
    assert "1,774 weeks lived" in texts
    assert "2,386 weeks remaining" in texts
    assert "Born: 1990" in texts
    assert [t for t in texts if t in {"0", "10", "50", "80"}] == ["0", "10", "50", "0", "10", "50", "80"]


def test_year_labels_text():
    layout = layout_for_spec(GridSpec.year(), 52)
    labels = year_labels(layout, date(2024, 1, 1), elapsed_units=0)
    texts = [label.text for label in labels.header]

    assert "2024" in texts
    assert "Week 1 of 52" in texts
    assert "51 weeks remaining" in texts
    assert ["Q1", "Q2", "Q3", "Q4"] == [t for t in texts if t.startswith("Q")]


def test_legend_entries_cover_each_state():
    entries = legend_entries(("Lived", "Now", "Future"), width=1170, height=2532)

    assert [e.state for e in entries] == [CellState.LIVED, CellState.CURRENT, CellState.FUTURE]
    assert {e.y for e in entries} == {2472}
    assert [e.label.text for e in entries] == ["Lived", "Now", "Future"]


def test_year_render_encodes_png():
    layout = layout_for_spec(GridSpec.year(), 52)
    theme = resolve_theme("light")
    labels = year_labels(layout, date(2024, 6, 1), elapsed_units=21)

    result = Renderer().render(theme, layout, cell_states(52, 21), labels)

    assert result.content_type == "image/png"
    assert len(result) == result.length > 0
    with Image.open(BytesIO(result.data)) as img:
        assert img.size == (1170, 2532)
        assert pixel_at(img.convert("RGB"), layout.center(21)) == rgb(theme.current)
