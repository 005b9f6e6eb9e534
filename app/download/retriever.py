from collections.abc import Iterable

import httpx

from app.processor.exceptions import DownloadStatusError, DownloadTransportError


def host_allowed(url: str, allowed_domains: Iterable[str]) -> bool:
    """True if the URL's host is one of the domains or a subdomain of one."""
    host = (httpx.URL(url).host or "").lower().rstrip(".")
    for domain in allowed_domains:
        domain = domain.lower().strip(".")
        if host == domain or host.endswith(f".{domain}"):
            return True
    return False


class AttachmentRetriever:
    """Fetches attachment bytes with a single HTTP GET."""

    def __init__(
        self,
        *,
        timeout_seconds: float = 30,
        allowed_domains: Iterable[str] = (),
        enforce_allowlist: bool = False,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._allowed_domains = tuple(allowed_domains)
        self._enforce_allowlist = enforce_allowlist
        self._transport = transport

    async def fetch(self, url: str) -> bytes:
        """Download the body at ``url``.

        Raises:
            DownloadStatusError: on a non-2xx response.
            DownloadTransportError: on network failure, a malformed URL or a
                host outside the allowlist.
        """
        self._check_allowed(url)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise DownloadTransportError(str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            raise DownloadStatusError(response.status_code)
        return response.content

    def _check_allowed(self, url: str) -> None:
        if not self._enforce_allowlist:
            return
        try:
            allowed = host_allowed(url, self._allowed_domains)
        except httpx.InvalidURL as exc:
            raise DownloadTransportError(str(exc)) from exc
        if not allowed:
            raise DownloadTransportError(f"host of '{url}' is not in the allowed domain list")
