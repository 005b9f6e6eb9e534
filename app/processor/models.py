from dataclasses import dataclass, field
from enum import Enum, IntEnum


@dataclass(frozen=True)
class Bitmap:
    """Raw RGBA raster: ``len(pixels) == width * height * 4``."""

    width: int
    height: int
    pixels: bytes

    @property
    def expected_size(self) -> int:
        return self.width * self.height * 4

    def is_well_formed(self) -> bool:
        return self.width > 0 and self.height > 0 and len(self.pixels) == self.expected_size


class Stage(str, Enum):
    DOWNLOAD = "download"
    MATERIALIZE = "materialize"
    DECODE = "decode"


@dataclass(frozen=True)
class Found:
    text: str


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class StageError:
    stage: Stage
    detail: str
    status_code: int | None = None


@dataclass(frozen=True)
class MissingSelection:
    pass


@dataclass(frozen=True)
class UnresolvableUrl:
    pass


@dataclass(frozen=True)
class Unhandled:
    detail: str


DecodeOutcome = Found | NotFound | StageError | MissingSelection | UnresolvableUrl | Unhandled


class FieldCode(IntEnum):
    """Transport-level status codes understood by the host."""

    SUCCESS = 0


@dataclass(frozen=True)
class FieldResponse:
    """Caller-facing result of one invocation.

    ``outcome`` carries the structured result; only ``code``, ``data`` and
    ``msg`` go over the wire.
    """

    code: FieldCode
    data: str
    msg: str
    outcome: DecodeOutcome | None = field(default=None, compare=False)

    def to_dict(self) -> dict[str, object]:
        return {"code": int(self.code), "data": self.data, "msg": self.msg}
