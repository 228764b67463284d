"""FANZA scraping data types.

Structures exchanged between the summary pipeline stages
and returned to API/CLI callers.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple, NotRequired, TypedDict


class SummaryResult(TypedDict):
    """Outcome of a summary lookup."""

    summary: str | None
    url: NotRequired[str | None]


class PrefixRule(NamedTuple):
    """Compiled mapping-table entry.

    Attributes:
        prefix: Lowercase raw prefix to match (e.g. 'abc').
        mapped_prefix: Site prefix substituted in (may contain '_').
        suffix: Literal appended after the padded number, or ''.
    """

    prefix: str
    mapped_prefix: str
    suffix: str


@dataclass(frozen=True)
class CacheEntry:
    """Cached summary outcome for one raw movie ID.

    A None summary is a cached negative result.
    """

    summary: str | None
    url: str | None
    timestamp: datetime


@dataclass(frozen=True)
class FetchResult:
    """Result of fetching one candidate URL.

    Exactly one of text / error is set.
    """

    url: str
    text: str | None = None
    error: str | None = None
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        """True when the body was retrieved."""
        return self.error is None and self.text is not None
