"""Output providers for encoded calendar images."""

from dataclasses import dataclass
from pathlib import Path

from .base import OutputProvider
from .png_provider import PngOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    media_type: str
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "png": OutputFormatSpec(
        extension=".png",
        media_type="image/png",
        provider_class=PngOutputProvider,
    ),
}


def resolve_output_provider(file_path: str) -> OutputProvider:
    """
    Resolve the appropriate output provider based on file extension.

    Args:
        file_path: Output file path (extension determines format)

    Returns:
        An OutputProvider instance

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    spec = _OUTPUT_FORMATS.get(ext.removeprefix("."))
    if spec is None:
        supported = ", ".join(s.extension for s in _OUTPUT_FORMATS.values())
        raise ValueError(f"Unsupported output format: {ext}. Supported formats: {supported}")
    return spec.provider_class(file_path)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


def media_type_for_output_format(output_format: str) -> str:
    """Resolve media type for a supported output format."""
    spec = _OUTPUT_FORMATS.get(output_format.lower())
    if spec is None:
        supported = ", ".join(supported_output_formats())
        raise ValueError(f"Invalid format. Choose from: {supported}")
    return spec.media_type


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "PngOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
    "media_type_for_output_format",
]
