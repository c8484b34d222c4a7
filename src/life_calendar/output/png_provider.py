"""PNG output provider."""

from .base import PillowImageOutputProvider


class PngOutputProvider(PillowImageOutputProvider):
    """Output provider for PNG format."""

    @property
    def output_format(self) -> str:
        return "png"

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": False, "compress_level": 6}
