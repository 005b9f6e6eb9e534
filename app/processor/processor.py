from typing import Any

from app.config.settings import Settings
from app.decoding.factory import SymbolDecoderFactory
from app.download.retriever import AttachmentRetriever
from app.field.context import FieldContext, format_context
from app.i18n.messages import Translator
from app.imaging.factory import ImageMaterializerFactory
from app.logging.logger import Log
from app.processor.exceptions import (
    DownloadError,
    DownloadStatusError,
    FieldProcessingError,
    MaterializeError,
    MissingSelectionError,
    SymbolDecodeError,
    UnresolvableUrlError,
)
from app.processor.models import (
    DecodeOutcome,
    FieldResponse,
    MissingSelection,
    Stage,
    StageError,
    UnresolvableUrl,
)
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.response_mapper import ResponseMapper
from app.processor.steps import DecodeStep, DownloadStep, MaterializeStep, ResolveAttachmentStep


def outcome_for_error(exc: FieldProcessingError) -> DecodeOutcome:
    """Translate a stage failure into its pipeline outcome."""
    if isinstance(exc, MissingSelectionError):
        return MissingSelection()
    if isinstance(exc, UnresolvableUrlError):
        return UnresolvableUrl()
    if isinstance(exc, DownloadStatusError):
        return StageError(Stage.DOWNLOAD, exc.detail, status_code=exc.status_code)
    if isinstance(exc, DownloadError):
        return StageError(Stage.DOWNLOAD, exc.detail)
    if isinstance(exc, MaterializeError):
        return StageError(Stage.MATERIALIZE, str(exc))
    if isinstance(exc, SymbolDecodeError):
        return StageError(Stage.DECODE, str(exc))
    raise TypeError(f"Unhandled processing error type: {type(exc).__name__}") from exc


class Processor:
    """Runs the attachment QR pipeline for one invocation.

    Pipeline: resolve attachment -> download -> materialize -> decode -> map.
    Stage failures short-circuit straight to the response mapper. Errors
    outside the stage taxonomy propagate to the caller.
    """

    def __init__(self, steps: list[PipelineStep], mapper: ResponseMapper) -> None:
        self._steps = steps
        self._mapper = mapper

    async def process(
        self,
        selection: Any,
        field_context: FieldContext | None = None,
    ) -> FieldResponse:
        field_context = field_context or FieldContext()
        context = PipelineContext(selection=selection, field_context=field_context)
        try:
            for step in self._steps:
                context = await step.run(context)
        except FieldProcessingError as exc:
            name = context.attachment.name if context.attachment else "unknown"
            Log.error(f"{format_context(field_context)} Failed to process {name}: {exc}")
            context.outcome = outcome_for_error(exc)

        if context.outcome is None:
            raise RuntimeError("pipeline finished without producing an outcome")
        return self._mapper.map(context.outcome, field_context.locale)


def build_processor(
    settings: Settings,
    retriever: AttachmentRetriever | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if retriever is None:
        retriever = AttachmentRetriever(
            timeout_seconds=settings.download_timeout_seconds,
            allowed_domains=settings.allowed_domains,
            enforce_allowlist=settings.enforce_domain_allowlist,
        )
    steps: list[PipelineStep] = [
        ResolveAttachmentStep(),
        DownloadStep(retriever=retriever),
        MaterializeStep(materializer=ImageMaterializerFactory.create(settings)),
        DecodeStep(decoder=SymbolDecoderFactory.create(settings)),
    ]
    mapper = ResponseMapper(Translator(settings.default_locale))
    return Processor(steps=steps, mapper=mapper)
