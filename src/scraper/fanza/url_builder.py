"""FANZA detail page URL builder.

Generates candidate detail URLs across the site's content
categories for a movie ID.
"""

import re

from src.scraper.fanza.normalizer import FanzaIdNormalizer
from src.scraper.utils.logger import setup_logger
from src.settings import settings

# Detail page paths, in lookup order
URL_TEMPLATES: tuple[str, ...] = (
    "/mono/dvd/-/detail/=/cid={cid}/",
    "/digital/videoa/-/detail/=/cid={cid}/",
    "/digital/videoc/-/detail/=/cid={cid}/",
    "/digital/anime/-/detail/=/cid={cid}/",
    "/mono/anime/-/detail/=/cid={cid}/",
    "/digital/nikkatsu/-/detail/=/cid={cid}/",
)
DVD_TEMPLATE = URL_TEMPLATES[0]

# Separator only present in already-mapped content IDs (e.g. 'h_123abc001')
CID_SEPARATOR = "_"

_STANDARD_CID_RE = re.compile(r"[a-z]+[0-9]{3,}[a-z]?")
_DEFAULT_FORMAT_RE = re.compile(r"[a-z]+00[0-9]{3,}")


class FanzaUrlBuilder:
    """Builds candidate FANZA detail URLs for a movie ID."""

    def __init__(
        self,
        normalizer: FanzaIdNormalizer,
        base_url: str | None = None,
    ) -> None:
        """Initialize builder.

        Args:
            normalizer: ID normalizer sharing the mapping tables.
            base_url: Site base URL. Defaults to settings.fanza.base_url.
        """
        self._normalizer = normalizer
        self._base_url = (base_url or settings.fanza.base_url).rstrip("/")
        self._logger = setup_logger("scraper.fanza.url_builder")

    # -------------------------------------------------------------------------
    # Single URL
    # -------------------------------------------------------------------------

    def build_url(self, template: str, cid: str) -> str:
        """Build a full URL from a path template.

        Args:
            template: One of URL_TEMPLATES.
            cid: Content ID to substitute.

        Returns:
            Complete URL.
        """
        return f"{self._base_url}{template.format(cid=cid)}"

    def build_dvd_url(self, cid: str) -> str:
        """Build the physical DVD detail URL for a content ID."""
        return self.build_url(DVD_TEMPLATE, cid)

    def build_all(self, cid: str) -> list[str]:
        """Build one URL per template, in declaration order."""
        return [self.build_url(template, cid) for template in URL_TEMPLATES]

    # -------------------------------------------------------------------------
    # Candidate URLs
    # -------------------------------------------------------------------------

    def build_urls(self, movie_id: str) -> list[str]:
        """Generate candidate URLs for a raw or normalized ID.

        Resolution order:
        1. IDs containing '_' are used verbatim
        2. Known mapping prefix
        3. IDs already shaped like 'abc123' / 'abc123a' are used verbatim
        4. Full normalization

        For cases 3 and 4, IDs in the default 'label00number' format
        get the digital videoa URL tried before the DVD one.

        Args:
            movie_id: Movie ID.

        Returns:
            Six URLs, one per content category.
        """
        if CID_SEPARATOR in movie_id:
            self._logger.debug(f"Using ID with separator: {movie_id}")
            return self.build_all(movie_id)

        mapped = self._normalizer.match_mapped_prefix(self._normalizer.clean(movie_id))
        if mapped:
            self._logger.debug(f"URL mapping: {movie_id} -> {mapped}")
            return self.build_all(mapped)

        movie_id_lower = movie_id.lower()
        if _STANDARD_CID_RE.fullmatch(movie_id_lower):
            cid = movie_id_lower
            self._logger.debug(f"ID already in standard format: {cid}")
        else:
            cid = self._normalizer.normalize(movie_id)
            self._logger.debug(f"Normalized ID: {movie_id} -> {cid}")

        urls = self.build_all(cid)

        if self.prefers_digital(cid):
            urls[0], urls[1] = urls[1], urls[0]
            self._logger.debug(f"Swapped URL priority, preferred: {urls[0]}")

        return urls

    @staticmethod
    def prefers_digital(cid: str) -> bool:
        """Check if a content ID has the default 'label00number' shape."""
        return bool(_DEFAULT_FORMAT_RE.search(cid))
