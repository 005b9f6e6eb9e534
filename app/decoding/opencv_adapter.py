import cv2
import numpy as np

from app.decoding.base import BaseSymbolDecoder
from app.processor.exceptions import SymbolDecodeError
from app.processor.models import Bitmap


class OpenCvQrDecoder(BaseSymbolDecoder):
    """Decodes QR symbols using OpenCV's QRCodeDetector."""

    def decode(self, bitmap: Bitmap) -> str | None:
        self.check_bitmap(bitmap)
        try:
            rgba = np.frombuffer(bitmap.pixels, dtype=np.uint8).reshape(
                bitmap.height, bitmap.width, 4
            )
            gray = cv2.cvtColor(rgba, cv2.COLOR_RGBA2GRAY)
            text, _points, _straight = cv2.QRCodeDetector().detectAndDecode(gray)
        except Exception as exc:
            raise SymbolDecodeError(str(exc) or type(exc).__name__) from exc
        return text or None
