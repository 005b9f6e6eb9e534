from collections.abc import Mapping, Sequence
from typing import Any

from app.attachment.models import AttachmentRef
from app.processor.exceptions import MissingSelectionError, UnresolvableUrlError

URL_FIELDS = ("tmp_url", "url", "link")
DEFAULT_NAME = "unknown"


def is_absent(value: Any) -> bool:
    """True for None and falsy scalars; empty containers still count as present."""
    return value is None or (not value and not isinstance(value, (Mapping, list, tuple)))


def normalize_selection(selection: Any) -> list[Any]:
    """Coerce a host attachment selection into a list.

    The host may send nothing, a list of attachments, or a bare attachment
    object for single-select fields.
    """
    if is_absent(selection):
        return []
    if isinstance(selection, Sequence) and not isinstance(selection, (str, bytes)):
        return list(selection)
    return [selection]


def _read(attachment: Any, key: str) -> Any:
    if isinstance(attachment, Mapping):
        return attachment.get(key)
    return getattr(attachment, key, None)


def resolve_attachment(selection: Any) -> AttachmentRef:
    """Validate a selection and pick the first attachment's URL and name.

    Raises:
        MissingSelectionError: if nothing usable was selected.
        UnresolvableUrlError: if the attachment has no ``tmp_url``/``url``/``link``.
    """
    attachments = normalize_selection(selection)
    if not attachments:
        raise MissingSelectionError("no attachment selected")

    attachment = attachments[0]
    if is_absent(attachment):
        raise MissingSelectionError("first attachment is missing")

    url = next((value for key in URL_FIELDS if (value := _read(attachment, key))), None)
    if not url:
        raise UnresolvableUrlError("attachment has no retrieval URL")

    name = _read(attachment, "name") or DEFAULT_NAME
    return AttachmentRef(url=str(url), name=str(name))
