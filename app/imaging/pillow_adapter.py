import io

from PIL import Image

from app.imaging.base import BaseImageMaterializer
from app.processor.exceptions import MaterializeError
from app.processor.models import Bitmap


class PillowMaterializer(BaseImageMaterializer):
    """Decodes images using Pillow."""

    def materialize(self, data: bytes) -> Bitmap:
        try:
            with Image.open(io.BytesIO(data)) as image:
                rgba = image.convert("RGBA")
            return Bitmap(width=rgba.width, height=rgba.height, pixels=rgba.tobytes())
        except Exception as exc:
            raise MaterializeError(str(exc) or type(exc).__name__) from exc
