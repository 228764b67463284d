"""FANZA summary scraper package.

Looks up movie summaries on dmm.co.jp detail pages using httpx
and BeautifulSoup.

Classes:
    FanzaSummaryExtractor: Main lookup orchestrating the process.
    FanzaContext: Shared mapping tables, cache and HTTP client.
    FanzaMappingStore: Prefix/suffix tables persisted as JSON.
    FanzaIdNormalizer: Raw movie ID to content ID.
    FanzaUrlBuilder: Candidate detail URL generation.
    FanzaContentExtractor: Summary extraction strategies.
    SummaryCache: 24h in-memory result cache.
    FanzaClient: Async HTTP client.

Usage:
    from src.scraper.fanza import FanzaContext, FanzaSummaryExtractor

    extractor = FanzaSummaryExtractor(FanzaContext.from_settings())
    result = await extractor.get_summary("ABP-123")
"""

from src.scraper.fanza.cache import CACHE_TTL, SummaryCache
from src.scraper.fanza.client import FanzaClient
from src.scraper.fanza.content import FanzaContentExtractor
from src.scraper.fanza.errors import ConfigLoadError, ConfigSaveError, FanzaError
from src.scraper.fanza.fanza import FanzaContext, FanzaSummaryExtractor
from src.scraper.fanza.mappings import FanzaMappingStore
from src.scraper.fanza.normalizer import FanzaIdNormalizer
from src.scraper.fanza.url_builder import FanzaUrlBuilder

__all__ = [
    "CACHE_TTL",
    "ConfigLoadError",
    "ConfigSaveError",
    "FanzaClient",
    "FanzaContentExtractor",
    "FanzaContext",
    "FanzaError",
    "FanzaIdNormalizer",
    "FanzaMappingStore",
    "FanzaSummaryExtractor",
    "FanzaUrlBuilder",
    "SummaryCache",
]
