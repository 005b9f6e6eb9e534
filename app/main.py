from app.config.settings import Settings
from app.download.retriever import AttachmentRetriever
from app.field.definition import qr_scan_definition
from app.field.field import QrScanField
from app.i18n.messages import Translator
from app.logging.logger import Log
from app.processor.processor import build_processor
from app.processor.response_mapper import ResponseMapper


def create_field(
    settings: Settings | None = None,
    retriever: AttachmentRetriever | None = None,
) -> QrScanField:
    """Entry point: load settings -> configure logging -> build the field."""
    settings = settings or Settings()
    Log.configure(settings.log_level)
    processor = build_processor(settings, retriever=retriever)
    return QrScanField(
        definition=qr_scan_definition(settings.allowed_domains),
        processor=processor,
        mapper=ResponseMapper(Translator(settings.default_locale)),
    )
