"""Renderer for drawing calendar images using Pillow."""

import math
from functools import lru_cache
from typing import Sequence

from PIL import Image, ImageDraw, ImageFont

from ..constants import CANVAS_HEIGHT, CANVAS_WIDTH
from ..errors import LayoutError
from ..layout import GridLayout
from ..models import RenderResult
from ..output import OutputProvider, PngOutputProvider
from ..themes import ThemeSpec
from ..weeks import CellState
from .labels import CalendarLabels, LegendEntry, TextLabel

FontT = ImageFont.FreeTypeFont | ImageFont.ImageFont


@lru_cache(maxsize=None)
def load_font(size: int, bold: bool = False) -> FontT:
    """Load DejaVu Sans at ``size``, falling back to Pillow's bundled font."""
    name = "DejaVuSans-Bold.ttf" if bold else "DejaVuSans.ttf"
    try:
        return ImageFont.truetype(name, size)
    except OSError:
        return ImageFont.load_default(size=size)


def state_color(theme: ThemeSpec, state: CellState) -> str:
    if state is CellState.LIVED:
        return theme.lived
    if state is CellState.CURRENT:
        return theme.current
    return theme.future


class Renderer:
    """Renders a laid-out calendar grid as a PIL Image."""

    def __init__(
        self,
        width: int = CANVAS_WIDTH,
        height: int = CANVAS_HEIGHT,
        output_provider: OutputProvider | None = None,
    ):
        """
        Initialize renderer.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            output_provider: Encoder for ``render``; PNG when omitted
        """
        self.width = width
        self.height = height
        self.output_provider = output_provider or PngOutputProvider()

    def render(
        self,
        theme: ThemeSpec,
        layout: GridLayout,
        cell_states: Sequence[CellState],
        labels: CalendarLabels,
    ) -> RenderResult:
        """
        Render and encode the calendar.

        Raises:
            EncodingError: If the image cannot be encoded
        """
        image = self.render_image(theme, layout, cell_states, labels)
        return RenderResult(data=self.output_provider.encode(image))

    def render_image(
        self,
        theme: ThemeSpec,
        layout: GridLayout,
        cell_states: Sequence[CellState],
        labels: CalendarLabels,
    ) -> Image.Image:
        """
        Paint the calendar. Later steps draw over earlier ones.

        Returns:
            PIL Image of the calendar
        """
        if len(cell_states) != layout.total_units:
            raise LayoutError(
                f"Got {len(cell_states)} cell states for {layout.total_units} grid units"
            )

        image = Image.new("RGB", (self.width, self.height), theme.background)
        draw = ImageDraw.Draw(image)

        self._draw_header(image, draw, theme, labels.header)
        self._draw_dots(draw, theme, layout, cell_states)
        self._draw_legend(image, draw, theme, labels.legend)
        return image

    def _draw_header(
        self,
        image: Image.Image,
        draw: ImageDraw.ImageDraw,
        theme: ThemeSpec,
        header: Sequence[TextLabel],
    ) -> None:
        for label in header:
            self._draw_text(image, draw, theme, label)

    def _draw_dots(
        self,
        draw: ImageDraw.ImageDraw,
        theme: ThemeSpec,
        layout: GridLayout,
        cell_states: Sequence[CellState],
    ) -> None:
        """Draw one filled circle per grid index, coloured by its state."""
        radius = layout.dot_diameter / 2
        for index, state in enumerate(cell_states):
            x, y = layout.center(index)
            draw.ellipse(
                (x - radius, y - radius, x + radius, y + radius),
                fill=state_color(theme, state),
            )

    def _draw_legend(
        self,
        image: Image.Image,
        draw: ImageDraw.ImageDraw,
        theme: ThemeSpec,
        legend: Sequence[LegendEntry],
    ) -> None:
        for entry in legend:
            r = entry.radius
            draw.ellipse(
                (entry.x - r, entry.y - r, entry.x + r, entry.y + r),
                fill=state_color(theme, entry.state),
            )
            self._draw_text(image, draw, theme, entry.label)

    def _draw_text(
        self,
        image: Image.Image,
        draw: ImageDraw.ImageDraw,
        theme: ThemeSpec,
        label: TextLabel,
    ) -> None:
        font = load_font(label.size, label.bold)
        fill = getattr(theme, label.role)
        if label.rotation:
            self._draw_rotated_text(image, label, font, fill)
            return
        draw.text((label.x, label.y), label.text, font=font, fill=fill, anchor=label.anchor)

    def _draw_rotated_text(
        self, image: Image.Image, label: TextLabel, font: FontT, fill: str
    ) -> None:
        """Draw text on a transparent tile, rotate it and paste it centred on the label."""
        left, top, right, bottom = font.getbbox(label.text)
        tile_size = (max(1, math.ceil(right - left)), max(1, math.ceil(bottom - top)))
        tile = Image.new("RGBA", tile_size, (0, 0, 0, 0))
        ImageDraw.Draw(tile).text((-left, -top), label.text, font=font, fill=fill)

        rotated = tile.rotate(label.rotation, expand=True)
        x = round(label.x - rotated.width / 2)
        y = round(label.y - rotated.height / 2)
        image.paste(rotated, (x, y), rotated)
