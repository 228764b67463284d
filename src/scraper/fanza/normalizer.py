"""FANZA content ID normalizer.

Turns user-typed catalog numbers ('ABP-123', 'abp 123', 'SSIS001')
into the content ID ('cid') format used in dmm.co.jp detail URLs.
"""

import re

from src.scraper.fanza.mappings import FanzaMappingStore
from src.scraper.utils.logger import setup_logger

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")
_LEADING_DIGITS_RE = re.compile(r"^(\d+)")
_STANDARD_ID_RE = re.compile(r"^([a-z]+)(\d+)$")

# Minimum width of the numeric segment
NUMBER_WIDTH = 3

# Inserted between label and number when no mapping exists
DEFAULT_NUMBER_PREFIX = "00"


class FanzaIdNormalizer:
    """Normalizes raw movie IDs into FANZA content IDs.

    Mapping rules come from the shared FanzaMappingStore, so
    updates to the tables apply to subsequent calls.
    """

    def __init__(self, store: FanzaMappingStore) -> None:
        """Initialize normalizer.

        Args:
            store: Mapping tables to apply.
        """
        self._store = store
        self._logger = setup_logger("scraper.fanza.normalizer")

    # -------------------------------------------------------------------------
    # Normalization
    # -------------------------------------------------------------------------

    def normalize(self, movie_id: str) -> str:
        """Normalize a raw movie ID.

        Resolution order:
        1. Known mapping prefix followed by digits
        2. Standard 'letters+digits' form (mapped, or label + '00' + number)
        3. Cleaned ID unchanged

        Args:
            movie_id: Raw ID as typed by the user.

        Returns:
            Content ID. Never raises.
        """
        cleaned = self.clean(movie_id)

        mapped = self.match_mapped_prefix(cleaned)
        if mapped:
            self._logger.debug(f"Special handling mapping, final ID: {mapped}")
            return mapped

        match = _STANDARD_ID_RE.match(cleaned)
        if not match:
            self._logger.debug(f"Cannot match standard format, using cleaned ID: {cleaned}")
            return cleaned

        prefix, number = match.groups()
        padded = self.pad_number(number)
        suffix = self._store.get_suffix(prefix) or ""

        mapped_prefix = self._store.get_mapping(prefix)
        if mapped_prefix is not None:
            result = f"{mapped_prefix}{padded}{suffix}"
            self._logger.debug(f"Mapping prefix {prefix} to {mapped_prefix}, final ID: {result}")
            return result

        result = f"{prefix}{DEFAULT_NUMBER_PREFIX}{padded}{suffix}"
        self._logger.debug(f"No mapping, using default format, final ID: {result}")
        return result

    def match_mapped_prefix(self, cleaned: str) -> str | None:
        """Apply the first matching prefix rule to a cleaned ID.

        Rules are tried longest prefix first, so 'abcd' wins over
        'abc' for 'abcd123'.

        Args:
            cleaned: Lowercase alphanumeric ID.

        Returns:
            Mapped content ID, or None if no rule applies.
        """
        for rule in self._store.rules:
            if not cleaned.startswith(rule.prefix):
                continue

            digits = _LEADING_DIGITS_RE.match(cleaned[len(rule.prefix) :])
            if not digits:
                continue

            self._logger.debug(f"Detected known prefix {rule.prefix}, mapping to {rule.mapped_prefix}")
            return f"{rule.mapped_prefix}{self.pad_number(digits.group(1))}{rule.suffix}"

        return None

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def clean(movie_id: str) -> str:
        """Lowercase and strip everything but [a-z0-9].

        Args:
            movie_id: Raw ID.

        Returns:
            Cleaned ID, e.g. 'ABP-123' -> 'abp123'.
        """
        return _NON_ALNUM_RE.sub("", movie_id.lower())

    @staticmethod
    def pad_number(number: str) -> str:
        """Left-pad a digit string with zeros to at least 3 digits."""
        return number.zfill(NUMBER_WIDTH)
