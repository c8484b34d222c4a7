"""Request and result records passed between the calendar stages."""

import math
from dataclasses import dataclass, field
from datetime import date

from .constants import CANVAS_HEIGHT, CANVAS_WIDTH, PNG_MEDIA_TYPE
from .themes import ThemeSpec

SUPPORTED_MODES: tuple[str, ...] = ("life", "year")


@dataclass(frozen=True)
class CalendarRequest:
    """Parameters for one calendar render, as received at the boundary."""
    mode: str = "life"
    birth_date: date | str | None = None
    life_expectancy: int | None = None  # settings default when omitted
    theme_name: str | None = None
    reference_date: date | str | None = None  # today when omitted


@dataclass(frozen=True)
class GridRequest:
    """Everything the layout and renderer need for a single grid."""
    total_units: int
    elapsed_units: int
    columns: int
    theme: ThemeSpec
    rows: int = 0
    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT

    def __post_init__(self) -> None:
        if not self.rows:
            object.__setattr__(self, "rows", math.ceil(self.total_units / self.columns))


@dataclass(frozen=True)
class RenderResult:
    """An encoded image owned by the caller."""
    data: bytes = field(repr=False)
    content_type: str = PNG_MEDIA_TYPE

    @property
    def length(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return self.length
