import cv2
import numpy as np

from app.imaging.base import BaseImageMaterializer
from app.processor.exceptions import MaterializeError
from app.processor.models import Bitmap


class OpenCvMaterializer(BaseImageMaterializer):
    """Decodes images using OpenCV."""

    def materialize(self, data: bytes) -> Bitmap:
        try:
            buffer = np.frombuffer(data, dtype=np.uint8)
            image = cv2.imdecode(buffer, cv2.IMREAD_COLOR)
        except Exception as exc:
            raise MaterializeError(str(exc) or type(exc).__name__) from exc
        if image is None:
            raise MaterializeError("unsupported or corrupt image")

        rgba = cv2.cvtColor(image, cv2.COLOR_BGR2RGBA)
        height, width = rgba.shape[:2]
        return Bitmap(width=width, height=height, pixels=rgba.tobytes())
