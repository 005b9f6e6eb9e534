from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from app.attachment.models import AttachmentRef
from app.field.context import FieldContext
from app.processor.models import Bitmap, DecodeOutcome


@dataclass(slots=True)
class PipelineContext:
    selection: Any
    field_context: FieldContext
    attachment: AttachmentRef | None = None
    raw_bytes: bytes = b""
    bitmap: Bitmap | None = None
    outcome: DecodeOutcome | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
