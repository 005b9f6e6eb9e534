from PIL import Image
from pyzbar.pyzbar import ZBarSymbol
from pyzbar.pyzbar import decode as zbar_decode

from app.decoding.base import BaseSymbolDecoder
from app.processor.exceptions import SymbolDecodeError
from app.processor.models import Bitmap


class PyzbarQrDecoder(BaseSymbolDecoder):
    """Decodes QR symbols using zbar."""

    def decode(self, bitmap: Bitmap) -> str | None:
        self.check_bitmap(bitmap)
        try:
            image = Image.frombytes("RGBA", (bitmap.width, bitmap.height), bitmap.pixels)
            symbols = zbar_decode(image.convert("L"), symbols=[ZBarSymbol.QRCODE])
        except Exception as exc:
            raise SymbolDecodeError(str(exc) or type(exc).__name__) from exc
        for symbol in symbols:
            text = symbol.data.decode("utf-8", errors="replace")
            if text:
                return text
        return None
