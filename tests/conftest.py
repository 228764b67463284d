"""Shared pytest fixtures for scraper and API tests."""

import json
import os
from collections.abc import Callable
from pathlib import Path

# Must be set before src.settings is imported
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest  # noqa: E402

from src.scraper.fanza.mappings import FanzaMappingStore  # noqa: E402
from src.scraper.types import FetchResult  # noqa: E402

# ---------------------------------------------------------------------------
# Sample pages
# ---------------------------------------------------------------------------

JSON_LD_PAGE = """
<html><head>
<script type="application/ld+json">{"@type": "Product", "description": "JSON-LD summary"}</script>
<meta name="description" content="Meta summary">
</head><body></body></html>
"""

HTML_BLOCK_PAGE = """
<html><body>
<div class="mg-b20 lh4"><p class="mg-b20">  Block summary  </p></div>
</body></html>
"""

META_ONLY_PAGE = """
<html><head><meta name="description" content="Meta summary"></head></html>
"""

EMPTY_PAGE = "<html><head><title>Empty</title></head><body></body></html>"

REGION_BLOCKED_PAGE = (
    '<html><body><div class="not-available-in-your-region">Sorry</div>'
    '<meta name="description" content="Should be ignored"></body></html>'
)

# JSON-LD nested deeper than the decoder recursion limit
DEEP_JSON_LD_PAGE = (
    '<html><head><script type="application/ld+json">'
    + "[" * 100_000
    + "]" * 100_000
    + "</script></head></html>"
)


# ---------------------------------------------------------------------------
# Fake transport
# ---------------------------------------------------------------------------


class FakeFanzaClient:
    """In-memory FanzaClient replacement.

    Pages map URL -> body. Unknown URLs return a 404 FetchResult;
    URLs listed in errors return a connection error.
    """

    def __init__(
        self,
        pages: dict[str, str] | None = None,
        errors: set[str] | None = None,
    ) -> None:
        self.pages = pages or {}
        self.errors = errors or set()
        self.requested: list[str] = []

    async def fetch(self, url: str) -> FetchResult:
        self.requested.append(url)
        if url in self.errors:
            return FetchResult(url=url, error="ConnectError: connection refused")
        if url not in self.pages:
            return FetchResult(url=url, error="HTTP 404", status_code=404)
        return FetchResult(url=url, text=self.pages[url], status_code=200)

    async def __aenter__(self) -> "FakeFanzaClient":
        return self

    async def __aexit__(self, *_: object) -> None:
        return None


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Path of a (not yet created) mapping config file."""
    return tmp_path / "config" / "config.json"


@pytest.fixture
def make_store(config_file: Path) -> Callable[..., FanzaMappingStore]:
    """Factory building a loaded store from given tables."""

    def _make(
        mappings: dict[str, str] | None = None,
        suffixes: dict[str, str] | None = None,
    ) -> FanzaMappingStore:
        config_file.parent.mkdir(parents=True, exist_ok=True)
        config_file.write_text(
            json.dumps(
                {
                    "fanza_mappings": mappings or {},
                    "fanza_suffixes": suffixes or {},
                }
            ),
            encoding="utf-8",
        )
        store = FanzaMappingStore(config_file)
        store.load()
        return store

    return _make


@pytest.fixture
def fake_client() -> FakeFanzaClient:
    """Empty fake client; tests fill in pages."""
    return FakeFanzaClient()
