"""Unit tests for the FANZA HTTP client."""

import httpx
import pytest

from src.scraper.fanza.client import FanzaClient
from src.settings import settings

URL = "https://www.dmm.co.jp/mono/dvd/-/detail/=/cid=abp123/"


def _client(handler) -> FanzaClient:
    return FanzaClient(timeout=5.0, transport=httpx.MockTransport(handler))


class TestFetch:
    async def test_success_returns_text(self) -> None:
        async with _client(lambda request: httpx.Response(200, text="<html>ok</html>")) as client:
            result = await client.fetch(URL)

        assert result.ok
        assert result.text == "<html>ok</html>"
        assert result.status_code == 200
        assert result.url == URL

    async def test_sends_headers_and_age_cookie(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, text="")

        async with _client(handler) as client:
            await client.fetch(URL)

        request = seen[0]
        assert request.headers["User-Agent"] == settings.fanza.user_agent
        assert request.headers["Accept-Language"] == settings.fanza.accept_language
        assert "age_check_done=1" in request.headers["Cookie"]

    async def test_http_error_status_is_failure(self) -> None:
        async with _client(lambda request: httpx.Response(404, text="missing")) as client:
            result = await client.fetch(URL)

        assert not result.ok
        assert result.error == "HTTP 404"
        assert result.status_code == 404
        assert result.text is None

    async def test_transport_error_is_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as client:
            result = await client.fetch(URL)

        assert not result.ok
        assert result.error.startswith("ConnectError")

    async def test_follows_redirects(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path.endswith("cid=abp123/"):
                return httpx.Response(301, headers={"Location": "https://www.dmm.co.jp/final/"})
            return httpx.Response(200, text="final")

        async with _client(handler) as client:
            result = await client.fetch(URL)

        assert result.text == "final"

    async def test_lazy_client_without_context(self) -> None:
        client = _client(lambda request: httpx.Response(200, text="x"))
        result = await client.fetch(URL)
        await client.aclose()
        assert result.ok


@pytest.mark.parametrize("status_code", [403, 500, 503])
async def test_server_errors_do_not_raise(status_code: int) -> None:
    async with _client(lambda request: httpx.Response(status_code)) as client:
        result = await client.fetch(URL)
    assert result.error == f"HTTP {status_code}"
