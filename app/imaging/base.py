from abc import ABC, abstractmethod

from app.processor.models import Bitmap


class BaseImageMaterializer(ABC):
    """Contract for all image decoding adapters."""

    @abstractmethod
    def materialize(self, data: bytes) -> Bitmap:
        """Decode compressed image bytes into an RGBA bitmap.

        Args:
            data: Raw downloaded file content.

        Returns:
            Bitmap with width, height and RGBA pixel bytes.

        Raises:
            MaterializeError: if the bytes are not a decodable image.
        """
