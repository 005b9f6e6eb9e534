import io

import pytest
import qrcode
from PIL import Image


def _png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def make_qr_png(text: str) -> bytes:
    qr = qrcode.QRCode(box_size=10, border=4)
    qr.add_data(text)
    qr.make(fit=True)
    image = qr.make_image(fill_color="black", back_color="white").get_image()
    return _png_bytes(image.convert("RGB"))


@pytest.fixture()
def qr_png_bytes() -> bytes:
    """PNG image of a QR code encoding 'HELLO'."""
    return make_qr_png("HELLO")


@pytest.fixture()
def blank_png_bytes() -> bytes:
    """Plain white PNG with no QR code."""
    return _png_bytes(Image.new("RGB", (200, 200), "white"))


@pytest.fixture()
def corrupt_image_bytes() -> bytes:
    return b"definitely not an image"
