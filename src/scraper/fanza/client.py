"""Async HTTP client for FANZA detail pages.

Sends browser-like headers and the age verification cookie.
Failures are returned as FetchResult values rather than raised,
so a single bad candidate URL never interrupts a lookup.
"""

from types import TracebackType

import httpx

from src.scraper.types import FetchResult
from src.scraper.utils.logger import setup_logger
from src.settings import settings

AGE_CHECK_COOKIE = {"age_check_done": "1"}


class FanzaClient:
    """HTTP client for FANZA pages.

    Usable as an async context manager; the underlying
    httpx.AsyncClient is created lazily on first fetch otherwise.
    """

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            timeout: Request timeout (seconds). Defaults to settings.
            transport: Custom httpx transport (used by tests).
        """
        self._timeout = timeout if timeout is not None else settings.fanza.timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None
        self._logger = setup_logger("scraper.fanza.client")

    @staticmethod
    def default_headers() -> dict[str, str]:
        """Return request headers sent with every fetch."""
        return {
            "User-Agent": settings.fanza.user_agent,
            "Accept-Language": settings.fanza.accept_language,
        }

    # -------------------------------------------------------------------------
    # Context Manager
    # -------------------------------------------------------------------------

    async def __aenter__(self) -> "FanzaClient":
        """Enter context and create HTTP client."""
        self._ensure_client()
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        """Exit context and close HTTP client."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers=self.default_headers(),
                cookies=AGE_CHECK_COOKIE,
                follow_redirects=True,
                transport=self._transport,
            )
        return self._client

    # -------------------------------------------------------------------------
    # HTTP Methods
    # -------------------------------------------------------------------------

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a page body.

        Args:
            url: Page URL.

        Returns:
            FetchResult with text on 2xx, error otherwise.
        """
        client = self._ensure_client()

        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            self._logger.debug(f"HTTP {status_code} for {url}")
            return FetchResult(url=url, error=f"HTTP {status_code}", status_code=status_code)
        except httpx.HTTPError as e:
            self._logger.debug(f"Request failed for {url}: {e!r}")
            return FetchResult(url=url, error=f"{type(e).__name__}: {e}")

        return FetchResult(url=url, text=response.text, status_code=response.status_code)
