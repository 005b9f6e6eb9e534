from unittest.mock import AsyncMock, MagicMock

import pytest

from app.config.settings import Settings
from app.decoding.base import BaseSymbolDecoder
from app.decoding.opencv_adapter import OpenCvQrDecoder
from app.download.retriever import AttachmentRetriever
from app.field.context import FieldContext
from app.i18n.messages import Translator
from app.imaging.base import BaseImageMaterializer
from app.imaging.pillow_adapter import PillowMaterializer
from app.processor.exceptions import (
    DownloadStatusError,
    DownloadTransportError,
    MaterializeError,
    SymbolDecodeError,
)
from app.processor.models import (
    Bitmap,
    FieldCode,
    Found,
    MissingSelection,
    NotFound,
    Stage,
    StageError,
    UnresolvableUrl,
)
from app.processor.processor import Processor, build_processor, outcome_for_error
from app.processor.response_mapper import ResponseMapper
from app.processor.steps import DecodeStep, DownloadStep, MaterializeStep, ResolveAttachmentStep

BITMAP = Bitmap(width=1, height=1, pixels=b"\x00\x00\x00\xff")
ATTACHMENT = [{"tmp_url": "https://tmp.example.com/a.png", "name": "a.png"}]


def _make_pipeline() -> tuple[Processor, MagicMock, MagicMock, MagicMock]:
    retriever = MagicMock(spec=AttachmentRetriever)
    retriever.fetch = AsyncMock(return_value=b"image-bytes")
    materializer = MagicMock(spec=BaseImageMaterializer)
    materializer.materialize.return_value = BITMAP
    decoder = MagicMock(spec=BaseSymbolDecoder)
    decoder.decode.return_value = "HELLO"

    steps = [
        ResolveAttachmentStep(),
        DownloadStep(retriever=retriever),
        MaterializeStep(materializer=materializer),
        DecodeStep(decoder=decoder),
    ]
    processor = Processor(steps=steps, mapper=ResponseMapper(Translator("en-US")))
    return processor, retriever, materializer, decoder


class TestProcessorSuccess:
    @pytest.mark.asyncio
    async def test_runs_all_steps_and_returns_text(self) -> None:
        processor, retriever, materializer, decoder = _make_pipeline()

        response = await processor.process(ATTACHMENT)

        retriever.fetch.assert_awaited_once_with("https://tmp.example.com/a.png")
        materializer.materialize.assert_called_once_with(b"image-bytes")
        decoder.decode.assert_called_once_with(BITMAP)
        assert response.code is FieldCode.SUCCESS
        assert response.data == "HELLO"
        assert response.msg == "QR code scan successful"
        assert response.outcome == Found("HELLO")

    @pytest.mark.asyncio
    async def test_not_found_is_a_normal_result(self) -> None:
        processor, _retriever, _materializer, decoder = _make_pipeline()
        decoder.decode.return_value = None

        response = await processor.process(ATTACHMENT)

        assert response.data == response.msg == "No QR code found"
        assert response.outcome == NotFound()

    @pytest.mark.asyncio
    async def test_fetches_temporary_url_over_permanent(self) -> None:
        processor, retriever, _materializer, _decoder = _make_pipeline()

        await processor.process(
            [{"url": "https://perm.example.com/a.png", "tmp_url": "https://tmp.example.com/a.png"}]
        )

        retriever.fetch.assert_awaited_once_with("https://tmp.example.com/a.png")

    @pytest.mark.asyncio
    async def test_accepts_bare_attachment_object(self) -> None:
        processor, retriever, _materializer, _decoder = _make_pipeline()

        response = await processor.process({"url": "https://perm.example.com/a.png"})

        retriever.fetch.assert_awaited_once_with("https://perm.example.com/a.png")
        assert response.data == "HELLO"

    @pytest.mark.asyncio
    async def test_uses_locale_from_context(self) -> None:
        processor, *_ = _make_pipeline()

        response = await processor.process(ATTACHMENT, FieldContext(locale="ja-JP"))

        assert response.msg == "QRコードスキャン成功"

    @pytest.mark.asyncio
    async def test_repeated_invocations_give_same_result(self) -> None:
        processor, retriever, *_ = _make_pipeline()

        first = await processor.process(ATTACHMENT)
        second = await processor.process(ATTACHMENT)

        assert first == second
        assert first.outcome == second.outcome
        assert retriever.fetch.await_count == 2


class TestProcessorValidationFailures:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("selection", [None, [], "", False, [""], [0], [False]])
    async def test_missing_selection(self, selection: object) -> None:
        processor, retriever, *_ = _make_pipeline()

        response = await processor.process(selection)

        assert response.data == response.msg == "Please select at least one attachment field"
        assert response.outcome == MissingSelection()
        retriever.fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unresolvable_url(self) -> None:
        processor, retriever, *_ = _make_pipeline()

        response = await processor.process([{"name": "a.png"}])

        assert response.data == response.msg == "Failed to download attachment"
        assert response.outcome == UnresolvableUrl()
        retriever.fetch.assert_not_awaited()


class TestProcessorStageFailures:
    @pytest.mark.asyncio
    async def test_download_status_failure(self) -> None:
        processor, retriever, materializer, _decoder = _make_pipeline()
        retriever.fetch.side_effect = DownloadStatusError(404)

        response = await processor.process(ATTACHMENT)

        assert response.code is FieldCode.SUCCESS
        assert response.data == response.msg == "Failed to download attachment (404)"
        assert response.outcome == StageError(Stage.DOWNLOAD, "404", status_code=404)
        materializer.materialize.assert_not_called()

    @pytest.mark.asyncio
    async def test_download_transport_failure(self) -> None:
        processor, retriever, *_ = _make_pipeline()
        retriever.fetch.side_effect = DownloadTransportError("connection reset")

        response = await processor.process(ATTACHMENT)

        assert response.data == response.msg == "QR code scan failed - connection reset"
        assert response.outcome == StageError(Stage.DOWNLOAD, "connection reset")

    @pytest.mark.asyncio
    async def test_materialize_failure(self) -> None:
        processor, _retriever, materializer, decoder = _make_pipeline()
        materializer.materialize.side_effect = MaterializeError("cannot identify image")

        response = await processor.process(ATTACHMENT)

        assert response.data == response.msg == "QR code scan failed - cannot identify image"
        assert response.outcome == StageError(Stage.MATERIALIZE, "cannot identify image")
        decoder.decode.assert_not_called()

    @pytest.mark.asyncio
    async def test_decode_failure(self) -> None:
        processor, _retriever, _materializer, decoder = _make_pipeline()
        decoder.decode.side_effect = SymbolDecodeError("malformed bitmap")

        response = await processor.process(ATTACHMENT)

        assert response.data == "QR code scan failed - malformed bitmap"
        assert response.outcome == StageError(Stage.DECODE, "malformed bitmap")

    @pytest.mark.asyncio
    async def test_unexpected_errors_propagate(self) -> None:
        processor, retriever, *_ = _make_pipeline()
        retriever.fetch.side_effect = RuntimeError("bug")

        with pytest.raises(RuntimeError, match="bug"):
            await processor.process(ATTACHMENT)


class TestOutcomeForError:
    def test_rejects_base_error(self) -> None:
        from app.processor.exceptions import FieldProcessingError

        with pytest.raises(TypeError):
            outcome_for_error(FieldProcessingError("x"))


class TestBuildProcessor:
    def test_wires_configured_adapters(self) -> None:
        processor = build_processor(Settings())
        steps = processor._steps
        assert [type(step) for step in steps] == [
            ResolveAttachmentStep,
            DownloadStep,
            MaterializeStep,
            DecodeStep,
        ]
        assert isinstance(steps[2]._materializer, PillowMaterializer)  # type: ignore[attr-defined]
        assert isinstance(steps[3]._decoder, OpenCvQrDecoder)  # type: ignore[attr-defined]

    def test_uses_injected_retriever(self) -> None:
        retriever = AttachmentRetriever()
        processor = build_processor(Settings(), retriever=retriever)
        assert processor._steps[1]._retriever is retriever  # type: ignore[attr-defined]
