class FieldProcessingError(Exception):
    """Base exception for all attachment processing errors."""


class MissingSelectionError(FieldProcessingError):
    """Raised when no attachment was selected."""


class UnresolvableUrlError(FieldProcessingError):
    """Raised when the selected attachment exposes no retrieval URL."""


class DownloadError(FieldProcessingError):
    """Base exception for attachment download failures."""

    @property
    def detail(self) -> str:
        return str(self)


class DownloadStatusError(DownloadError):
    """Raised when the attachment URL answers with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"download failed with HTTP status {status_code}")
        self.status_code = status_code

    @property
    def detail(self) -> str:
        return str(self.status_code)


class DownloadTransportError(DownloadError):
    """Raised when the attachment cannot be fetched at the transport level."""


class MaterializeError(FieldProcessingError):
    """Raised when downloaded bytes cannot be decoded into a bitmap."""


class SymbolDecodeError(FieldProcessingError):
    """Raised when the symbol decoder fails on a bitmap."""
