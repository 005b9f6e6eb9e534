from collections.abc import Callable

from app.config.settings import Settings
from app.decoding.base import BaseSymbolDecoder


def _opencv() -> BaseSymbolDecoder:
    from app.decoding.opencv_adapter import OpenCvQrDecoder

    return OpenCvQrDecoder()


def _pyzbar() -> BaseSymbolDecoder:
    # pyzbar loads the native zbar library on import
    from app.decoding.pyzbar_adapter import PyzbarQrDecoder

    return PyzbarQrDecoder()


class SymbolDecoderFactory:
    """Creates the correct QR symbol decoder based on settings."""

    ADAPTERS: dict[str, Callable[[], BaseSymbolDecoder]] = {
        "opencv": _opencv,
        "pyzbar": _pyzbar,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseSymbolDecoder:
        engine = settings.decoder_engine.lower()
        builder = cls.ADAPTERS.get(engine)
        if builder is None:
            raise ValueError(
                f"Unknown decoder engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return builder()
