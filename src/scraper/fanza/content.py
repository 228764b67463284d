"""Summary extraction from FANZA detail pages.

Detail pages expose the synopsis in several places depending on
the category and page generation. Strategies are tried in order:

1. JSON-LD structured data ('description')
2. Known HTML content blocks
3. Description meta tags
"""

import json
import logging
from typing import Protocol

from bs4 import BeautifulSoup, Tag

from src.scraper.utils.logger import setup_logger


class ExtractionStrategy(Protocol):
    """Single way of locating the summary in a parsed page."""

    name: str

    def extract(self, soup: BeautifulSoup) -> str | None:
        """Return the summary, or None if this strategy finds nothing."""
        ...


# =============================================================================
# STRATEGIES
# =============================================================================


class JsonLdStrategy:
    """Reads 'description' from the JSON-LD script block."""

    name = "json-ld"

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def extract(self, soup: BeautifulSoup) -> str | None:
        script_tag = soup.select_one('script[type="application/ld+json"]')
        if not script_tag:
            return None

        try:
            data = json.loads(script_tag.get_text())
        except (ValueError, RecursionError) as e:
            self._logger.warning(f"Failed to parse JSON-LD: {e}")
            return None

        if not isinstance(data, dict):
            return None

        description = data.get("description")
        if isinstance(description, str) and description:
            return description
        return None


class HtmlBlockStrategy:
    """Reads the summary from known content containers."""

    name = "html"

    # Tried in order when the main summary block is absent or empty
    FALLBACK_SELECTORS = (".txt.introduction p", ".nw-video-description")

    def extract(self, soup: BeautifulSoup) -> str | None:
        summary_div = soup.select_one("div.mg-b20.lh4")
        if summary_div:
            for candidate in (
                summary_div.select_one("p.mg-b20"),
                summary_div.select_one("p"),
                summary_div,
            ):
                text = _clean_text(candidate)
                if text:
                    return text

        for selector in self.FALLBACK_SELECTORS:
            text = _clean_text(soup.select_one(selector))
            if text:
                return text

        return None


class MetaTagStrategy:
    """Reads the description or og:description meta tags."""

    name = "meta"

    SELECTORS = ('meta[name="description"]', 'meta[property="og:description"]')

    def extract(self, soup: BeautifulSoup) -> str | None:
        for selector in self.SELECTORS:
            tag = soup.select_one(selector)
            if not tag:
                continue
            content = tag.get("content")
            if isinstance(content, str) and content.strip():
                return content.strip()
        return None


def _clean_text(element: Tag | None) -> str | None:
    """Return stripped element text, or None when empty."""
    if element is None:
        return None
    text = element.get_text().strip()
    return text or None


# =============================================================================
# EXTRACTOR
# =============================================================================


class FanzaContentExtractor:
    """Runs extraction strategies over a detail page.

    Attributes:
        strategies: Strategies in priority order.
    """

    def __init__(self, strategies: tuple[ExtractionStrategy, ...] | None = None) -> None:
        """Initialize extractor.

        Args:
            strategies: Override default strategy order.
        """
        self._logger = setup_logger("scraper.fanza.content")
        self.strategies: tuple[ExtractionStrategy, ...] = strategies or (
            JsonLdStrategy(self._logger),
            HtmlBlockStrategy(),
            MetaTagStrategy(),
        )

    def extract(self, html: str) -> str | None:
        """Extract the summary from page HTML.

        Args:
            html: Page HTML content.

        Returns:
            First non-empty summary found, or None.
        """
        return self.extract_from_soup(BeautifulSoup(html, "html.parser"))

    def extract_from_soup(self, soup: BeautifulSoup) -> str | None:
        """Extract the summary from an already parsed page."""
        for strategy in self.strategies:
            summary = strategy.extract(soup)
            if summary:
                self._logger.debug(f"Got summary from {strategy.name}")
                return summary
        return None
