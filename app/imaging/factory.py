from app.config.settings import Settings
from app.imaging.base import BaseImageMaterializer
from app.imaging.opencv_adapter import OpenCvMaterializer
from app.imaging.pillow_adapter import PillowMaterializer


class ImageMaterializerFactory:
    """Creates the correct image materializer based on settings."""

    ADAPTERS: dict[str, type[BaseImageMaterializer]] = {
        "pillow": PillowMaterializer,
        "opencv": OpenCvMaterializer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseImageMaterializer:
        engine = settings.image_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown image engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()
