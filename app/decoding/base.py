from abc import ABC, abstractmethod

from app.processor.exceptions import SymbolDecodeError
from app.processor.models import Bitmap


class BaseSymbolDecoder(ABC):
    """Contract for all QR symbol decoding adapters."""

    @abstractmethod
    def decode(self, bitmap: Bitmap) -> str | None:
        """Search a bitmap for a QR symbol.

        Args:
            bitmap: RGBA raster from the image materializer.

        Returns:
            The decoded payload, or None when the image holds no readable symbol.

        Raises:
            SymbolDecodeError: on a malformed bitmap or an internal decoder failure.
        """

    @staticmethod
    def check_bitmap(bitmap: Bitmap) -> None:
        if not bitmap.is_well_formed():
            raise SymbolDecodeError(
                f"malformed bitmap: {bitmap.width}x{bitmap.height} with "
                f"{len(bitmap.pixels)} bytes, expected {bitmap.expected_size}"
            )
