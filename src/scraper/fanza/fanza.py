"""FANZA summary extractor.

Resolves a movie ID to candidate detail pages, fetches them in
order and returns the first summary found. Results (including
'not found') are cached per raw ID for 24 hours.
"""

from dataclasses import dataclass, field
from pathlib import Path

from src.scraper.fanza.cache import SummaryCache
from src.scraper.fanza.client import FanzaClient
from src.scraper.fanza.content import FanzaContentExtractor
from src.scraper.fanza.mappings import FanzaMappingStore
from src.scraper.fanza.normalizer import FanzaIdNormalizer
from src.scraper.fanza.url_builder import FanzaUrlBuilder
from src.scraper.types import CacheEntry, FetchResult, SummaryResult
from src.scraper.utils.logger import setup_logger
from src.settings import settings

# Present in pages served to visitors outside Japan
REGION_BLOCK_MARKER = "not-available-in-your-region"


@dataclass
class FanzaContext:
    """Process-wide state shared by all summary lookups.

    Attributes:
        store: Prefix/suffix mapping tables.
        cache: Summary result cache.
        client: HTTP client for detail pages.
    """

    store: FanzaMappingStore
    cache: SummaryCache = field(default_factory=SummaryCache)
    client: FanzaClient = field(default_factory=FanzaClient)

    @classmethod
    def from_settings(cls, config_file: Path | None = None) -> "FanzaContext":
        """Build a context with mapping tables loaded from disk.

        Args:
            config_file: Override settings.fanza.config_file.

        Returns:
            Ready-to-use context.
        """
        store = FanzaMappingStore(config_file or settings.fanza.config_file)
        store.load()
        return cls(store=store)


@dataclass(frozen=True)
class CandidateOutcome:
    """Result of trying one candidate URL."""

    url: str
    summary: str | None = None
    reason: str | None = None


class FanzaSummaryExtractor:
    """Looks up movie summaries on FANZA detail pages."""

    def __init__(self, context: FanzaContext) -> None:
        """Initialize extractor.

        Args:
            context: Shared mapping tables, cache and HTTP client.
        """
        self._context = context
        self._normalizer = FanzaIdNormalizer(context.store)
        self._url_builder = FanzaUrlBuilder(self._normalizer)
        self._content = FanzaContentExtractor()
        self._logger = setup_logger("scraper.fanza")

    @property
    def context(self) -> FanzaContext:
        """Return shared context."""
        return self._context

    # -------------------------------------------------------------------------
    # ID / URL helpers
    # -------------------------------------------------------------------------

    def normalize_movie_id(self, movie_id: str) -> str:
        """Return the content ID for a raw movie ID."""
        return self._normalizer.normalize(movie_id)

    def get_urls_by_id(self, movie_id: str) -> list[str]:
        """Return candidate detail URLs for a movie ID."""
        return self._url_builder.build_urls(movie_id)

    def set_mappings(self, mappings: dict[str, str]) -> None:
        """Replace and persist the prefix table."""
        self._context.store.set_mappings(mappings)

    def set_suffixes(self, suffixes: dict[str, str]) -> None:
        """Replace and persist the suffix table."""
        self._context.store.set_suffixes(suffixes)

    # -------------------------------------------------------------------------
    # Summary lookup
    # -------------------------------------------------------------------------

    async def get_summary(self, movie_id: str) -> SummaryResult:
        """Get the summary for a movie ID.

        Steps:
        1. Fresh cache entry for the raw ID
        2. Each candidate URL for the normalized ID
        3. DVD page with the cleaned raw ID, if it differs
        4. Cache and return a negative result

        Args:
            movie_id: Raw movie ID as requested.

        Returns:
            Dict with summary (None when not found) and source url.
        """
        cached = self._context.cache.get(movie_id)
        if cached is not None:
            self._logger.info(f"Returning cached summary for {movie_id}")
            return _to_result(cached)

        normalized_id = self._normalizer.normalize(movie_id)
        self._logger.info(f"Movie ID {movie_id} has been normalized to {normalized_id}")

        for url in self._url_builder.build_urls(normalized_id):
            outcome = await self._try_candidate(url)
            if outcome.summary:
                return self._store_result(movie_id, outcome.summary, outcome.url)
            self._logger.debug(f"No summary at {url}: {outcome.reason}")

        cleaned_id = self._normalizer.clean(movie_id)
        if cleaned_id != normalized_id:
            self._logger.info(
                f"Normalized ID search failed, trying original ID format: {cleaned_id}"
            )
            outcome = await self._try_candidate(self._url_builder.build_dvd_url(cleaned_id))
            if outcome.summary:
                return self._store_result(movie_id, outcome.summary, outcome.url)
            self._logger.debug(f"No summary at {outcome.url}: {outcome.reason}")

        self._logger.warning(f"Failed to get summary for movie {movie_id}")
        return self._store_result(movie_id, None, None)

    async def _try_candidate(self, url: str) -> CandidateOutcome:
        """Fetch one URL and run the extraction chain on it.

        Args:
            url: Candidate detail URL.

        Returns:
            Outcome carrying the summary or the reason for none.
        """
        self._logger.debug(f"Trying URL: {url}")
        fetched: FetchResult = await self._context.client.fetch(url)

        if not fetched.ok:
            self._logger.error(f"Failed to fetch {url}: {fetched.error}")
            return CandidateOutcome(url=url, reason=fetched.error)

        if REGION_BLOCK_MARKER in fetched.text:
            self._logger.warning(f"Region not available: {url}")
            return CandidateOutcome(url=url, reason="region blocked")

        try:
            summary = self._content.extract(fetched.text)
        except Exception as e:
            self._logger.error(f"Extract error for {url}: {e!r}")
            return CandidateOutcome(url=url, reason=f"parse error: {type(e).__name__}")

        if not summary:
            self._logger.warning(f"Could not find summary information in the page: {url}")
            return CandidateOutcome(url=url, reason="no summary in page")

        self._logger.info(f"Got summary from {url}")
        return CandidateOutcome(url=url, summary=summary)

    def _store_result(
        self,
        movie_id: str,
        summary: str | None,
        url: str | None,
    ) -> SummaryResult:
        """Cache an outcome under the raw ID and return it."""
        entry = CacheEntry(summary=summary, url=url, timestamp=self._context.cache.now())
        self._context.cache.put(movie_id, entry)
        return _to_result(entry)


def _to_result(entry: CacheEntry) -> SummaryResult:
    """Convert a cache entry to the public result shape."""
    if entry.url is None:
        return SummaryResult(summary=entry.summary)
    return SummaryResult(summary=entry.summary, url=entry.url)
