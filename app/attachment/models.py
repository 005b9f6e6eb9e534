from dataclasses import dataclass


@dataclass(frozen=True)
class AttachmentRef:
    """Validated attachment: where to fetch it and what to call it in logs."""

    url: str
    name: str = "unknown"
