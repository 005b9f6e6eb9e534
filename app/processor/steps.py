import asyncio

from app.attachment.validator import resolve_attachment
from app.decoding.base import BaseSymbolDecoder
from app.download.retriever import AttachmentRetriever
from app.field.context import format_context
from app.imaging.base import BaseImageMaterializer
from app.logging.logger import Log
from app.processor.models import Found, NotFound
from app.processor.pipeline import PipelineContext, PipelineStep


class ResolveAttachmentStep(PipelineStep):
    async def run(self, context: PipelineContext) -> PipelineContext:
        context.attachment = resolve_attachment(context.selection)
        Log.info(
            f"{format_context(context.field_context)} "
            f"Processing attachment: {context.attachment.name}"
        )
        return context


class DownloadStep(PipelineStep):
    def __init__(self, retriever: AttachmentRetriever) -> None:
        self._retriever = retriever

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.attachment is None:
            raise ValueError("PipelineContext.attachment must be set before download")
        context.raw_bytes = await self._retriever.fetch(context.attachment.url)
        Log.debug(
            f"{format_context(context.field_context)} "
            f"Downloaded {len(context.raw_bytes)} bytes for {context.attachment.name}"
        )
        return context


class MaterializeStep(PipelineStep):
    def __init__(self, materializer: BaseImageMaterializer) -> None:
        self._materializer = materializer

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.bitmap = await asyncio.to_thread(
            self._materializer.materialize, context.raw_bytes
        )
        Log.debug(
            f"{format_context(context.field_context)} "
            f"Decoded image {context.bitmap.width}x{context.bitmap.height}"
        )
        return context


class DecodeStep(PipelineStep):
    def __init__(self, decoder: BaseSymbolDecoder) -> None:
        self._decoder = decoder

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.bitmap is None:
            raise ValueError("PipelineContext.bitmap must be set before symbol decoding")
        text = await asyncio.to_thread(self._decoder.decode, context.bitmap)
        if text is None:
            context.outcome = NotFound()
            Log.info(f"{format_context(context.field_context)} No QR code found")
        else:
            context.outcome = Found(text)
            Log.info(f"{format_context(context.field_context)} QR code decoded: {text}")
        return context
