"""Scraper data types package.

Usage:
    from src.scraper.types import SummaryResult, CacheEntry
"""

from src.scraper.types.fanza import (
    CacheEntry,
    FetchResult,
    PrefixRule,
    SummaryResult,
)

__all__ = [
    "CacheEntry",
    "FetchResult",
    "PrefixRule",
    "SummaryResult",
]
