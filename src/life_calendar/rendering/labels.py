"""Text and legend annotations placed around the grid."""

from dataclasses import dataclass
from typing import Literal

from ..constants import LEGEND_SWATCH_RADIUS
from ..weeks import CellState

ColorRole = Literal["text", "text_secondary"]


@dataclass(frozen=True)
class TextLabel:
    """
    A single line of text.

    ``anchor`` uses Pillow's two-letter anchor codes. Rotated labels are
    always centred on ``(x, y)``.
    """
    text: str
    x: float
    y: float
    size: int
    role: ColorRole = "text_secondary"
    anchor: str = "ls"
    bold: bool = False
    rotation: int = 0  # degrees, counter-clockwise


@dataclass(frozen=True)
class LegendEntry:
    state: CellState
    label: TextLabel
    x: float
    y: float
    radius: int = LEGEND_SWATCH_RADIUS


@dataclass(frozen=True)
class CalendarLabels:
    header: tuple[TextLabel, ...] = ()
    legend: tuple[LegendEntry, ...] = ()
