"""Base class for output format providers."""

from abc import ABC, abstractmethod
from io import BytesIO

from PIL import Image

from ..errors import EncodingError


class OutputProvider(ABC):
    """Abstract base class for output format providers."""

    def __init__(self, path: str = ""):
        """
        Initialize the provider with an output file path.

        Args:
            path: Path to the output file
        """
        self.path = path

    @abstractmethod
    def encode(self, image: Image.Image) -> bytes:
        """
        Encode a rendered image into the output format.

        Args:
            image: The rendered canvas

        Returns:
            Encoded output as bytes

        Raises:
            EncodingError: If the imaging backend fails
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """
        Write encoded data to a file.

        Args:
            data: Encoded data to write
        """
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)


class PillowImageOutputProvider(OutputProvider, ABC):
    """Template output provider for Pillow-supported still image formats."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Pillow format identifier (for example, ``png``)."""
        raise NotImplementedError

    def encode(self, image: Image.Image) -> bytes:
        buffer = BytesIO()
        try:
            image.save(buffer, format=self.output_format, **self.save_options)
        except (OSError, ValueError) as e:
            raise EncodingError(f"Failed to encode {self.output_format.upper()}: {e}") from e
        return buffer.getvalue()

    @property
    def save_options(self) -> dict[str, object]:
        """Additional Pillow ``save`` kwargs for this format."""
        return {}
