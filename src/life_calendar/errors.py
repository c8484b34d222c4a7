"""Error types raised by the calendar core."""

from typing import Iterable


class CalendarError(Exception):
    """Base exception for all calendar rendering failures."""
    pass


class InvalidInput(CalendarError):
    """Raised when request parameters are malformed or out of range.

    Carries every problem found so callers can report them at once.
    """

    def __init__(self, reasons: str | Iterable[str]):
        if isinstance(reasons, str):
            reasons = [reasons]
        self.reasons: list[str] = list(reasons)
        super().__init__("; ".join(self.reasons))


class LayoutError(CalendarError):
    """Raised when a grid configuration cannot fit its drawing area."""
    pass


class EncodingError(CalendarError):
    """Raised when the raster backend fails to encode an image."""
    pass
