from collections.abc import Mapping
from typing import Any

from app.field.context import FieldContext, format_context
from app.field.definition import FieldDefinition
from app.logging.logger import Log
from app.processor.models import FieldResponse, Unhandled
from app.processor.processor import Processor
from app.processor.response_mapper import ResponseMapper

UNKNOWN_ERROR = "unknown error"


class QrScanField:
    """Host entry point: scans the selected attachment for a QR code."""

    def __init__(
        self,
        definition: FieldDefinition,
        processor: Processor,
        mapper: ResponseMapper,
    ) -> None:
        self.definition = definition
        self._processor = processor
        self._mapper = mapper

    async def execute(
        self,
        form_item_params: Mapping[str, Any] | None,
        context: Any = None,
    ) -> dict[str, object]:
        """Run one invocation and return the host wire dict. Never raises."""
        return (await self.run(form_item_params, context)).to_dict()

    async def run(
        self,
        form_item_params: Mapping[str, Any] | None,
        context: Any = None,
    ) -> FieldResponse:
        """Like ``execute`` but returns the structured response."""
        field_context = self._resolve_context(context)
        try:
            Log.info(f"{format_context(field_context)} Starting QR scan")
            selection = (form_item_params or {}).get("file")
            return await self._processor.process(selection, field_context)
        except Exception as exc:
            Log.exception(f"{format_context(field_context)} QR scan failed")
            detail = str(exc) or UNKNOWN_ERROR
            return self._mapper.map(Unhandled(detail), field_context.locale)

    @staticmethod
    def _resolve_context(context: Any) -> FieldContext:
        # tracing identifiers only feed log lines; a bad context must not change the result
        try:
            return FieldContext.from_host(context)
        except Exception as exc:
            Log.warning(f"Ignoring unreadable field context: {exc}")
            return FieldContext()
