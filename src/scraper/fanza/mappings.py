"""Prefix and suffix mapping tables for FANZA content IDs.

Some labels are published on the site under a different internal
prefix (e.g. 'abc' -> '118abc') or need a literal suffix after the
number. Both tables are persisted in a JSON config file:

    {
      "fanza_mappings": {"abc": "118abc"},
      "fanza_suffixes": {"abc": "a"}
    }
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.scraper.fanza.errors import ConfigLoadError, ConfigSaveError
from src.scraper.types import PrefixRule
from src.scraper.utils.logger import setup_logger

MAPPINGS_KEY = "fanza_mappings"
SUFFIXES_KEY = "fanza_suffixes"


class FanzaConfigFile(BaseModel):
    """Validated content of the mapping config file.

    Unknown top-level keys are kept so saving never drops them.
    """

    model_config = ConfigDict(extra="allow")

    fanza_mappings: dict[str, str] = Field(default_factory=dict)
    fanza_suffixes: dict[str, str] = Field(default_factory=dict)


class FanzaMappingStore:
    """Holds the prefix/suffix tables and their ordered rule list.

    Tables are replaced wholesale by set_mappings / set_suffixes,
    which persist to disk before touching in-memory state.

    Attributes:
        config_file: Path of the JSON config file.
    """

    def __init__(self, config_file: Path) -> None:
        """Initialize store (tables stay empty until load()).

        Args:
            config_file: Path of the JSON config file.
        """
        self._config_file = config_file
        self._logger = setup_logger("scraper.fanza.mappings")
        self._mappings: dict[str, str] = {}
        self._suffixes: dict[str, str] = {}
        self._mapping_index: dict[str, str] = {}
        self._suffix_index: dict[str, str] = {}
        self._rules: tuple[PrefixRule, ...] = ()

    @property
    def config_file(self) -> Path:
        """Return config file path."""
        return self._config_file

    @property
    def prefix_mappings(self) -> dict[str, str]:
        """Return a copy of the prefix table."""
        return dict(self._mappings)

    @property
    def suffix_mappings(self) -> dict[str, str]:
        """Return a copy of the suffix table."""
        return dict(self._suffixes)

    @property
    def rules(self) -> tuple[PrefixRule, ...]:
        """Return prefix rules, longest prefix first."""
        return self._rules

    def get_mapping(self, prefix: str) -> str | None:
        """Return the mapped prefix for a label, matched case-insensitively."""
        return self._mapping_index.get(prefix.lower())

    def get_suffix(self, prefix: str) -> str | None:
        """Return the suffix for a label, matched case-insensitively."""
        return self._suffix_index.get(prefix.lower())

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def load(self) -> None:
        """Load both tables from the config file.

        A missing file is created with empty tables. Any read or
        parse failure leaves both tables empty.
        """
        if not self._config_file.exists():
            self._logger.warning(
                f"Config file not found, using empty mappings: {self._config_file}"
            )
            self._set_tables({}, {})
            try:
                self._write_config({}, {})
            except ConfigSaveError as e:
                self._logger.error(str(e))
            return

        try:
            config = self._read_config()
        except ConfigLoadError as e:
            self._logger.warning(f"Failed to load mappings: {e}")
            self._set_tables({}, {})
            return

        self._set_tables(config.fanza_mappings, config.fanza_suffixes)
        self._logger.info(
            f"Loaded {len(self._mappings)} prefix mappings "
            f"and {len(self._suffixes)} suffix mappings"
        )

    def _read_config(self) -> FanzaConfigFile:
        """Read and validate the config file.

        Returns:
            Parsed config (empty tables for a blank file).

        Raises:
            ConfigLoadError: On I/O, JSON or schema errors.
        """
        try:
            content = self._config_file.read_text(encoding="utf-8")
            if not content.strip():
                return FanzaConfigFile()
            return FanzaConfigFile.model_validate(json.loads(content))
        except (OSError, ValueError, ValidationError) as e:
            raise ConfigLoadError(f"{self._config_file}: {e}") from e

    # -------------------------------------------------------------------------
    # Updates
    # -------------------------------------------------------------------------

    def set_mappings(self, mappings: dict[str, str]) -> None:
        """Replace the prefix table and persist it.

        Args:
            mappings: New prefix -> site prefix table.

        Raises:
            ConfigSaveError: When the file can't be written. The
                in-memory tables are left unchanged.
        """
        mappings = _validate_table(mappings)
        self._write_config(mappings, self._suffixes)
        self._set_tables(mappings, self._suffixes)
        self._logger.info(f"Saved {len(mappings)} prefix mappings")

    def set_suffixes(self, suffixes: dict[str, str]) -> None:
        """Replace the suffix table and persist it.

        Args:
            suffixes: New prefix -> suffix table.

        Raises:
            ConfigSaveError: When the file can't be written. The
                in-memory tables are left unchanged.
        """
        suffixes = _validate_table(suffixes)
        self._write_config(self._mappings, suffixes)
        self._set_tables(self._mappings, suffixes)
        self._logger.info(f"Saved {len(suffixes)} suffix mappings")

    def _write_config(self, mappings: dict[str, str], suffixes: dict[str, str]) -> None:
        """Write both tables, sorted, preserving other top-level keys.

        Raises:
            ConfigSaveError: On I/O or serialization errors.
        """
        try:
            existing = self._read_existing_keys()
            existing[MAPPINGS_KEY] = _sorted_table(mappings)
            existing[SUFFIXES_KEY] = _sorted_table(suffixes)

            self._config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(existing, f, indent=2, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            raise ConfigSaveError(f"Failed to save config {self._config_file}: {e}") from e

    def _read_existing_keys(self) -> dict[str, Any]:
        """Return the current file content as a dict, or {} if unusable."""
        if not self._config_file.exists():
            return {}
        content = self._config_file.read_text(encoding="utf-8")
        if not content.strip():
            return {}
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            self._logger.warning("Existing config is not valid JSON, overwriting")
            return {}
        return data if isinstance(data, dict) else {}

    def _set_tables(self, mappings: dict[str, str], suffixes: dict[str, str]) -> None:
        """Swap in new tables and recompile the lookup indexes and rules."""
        self._mappings = dict(mappings)
        self._suffixes = dict(suffixes)
        self._mapping_index = _lowercase_keys(self._mappings)
        self._suffix_index = _lowercase_keys(self._suffixes)
        self._rules = build_rules(self._mappings, self._suffixes)


# =============================================================================
# HELPERS
# =============================================================================


def build_rules(
    mappings: dict[str, str],
    suffixes: dict[str, str],
) -> tuple[PrefixRule, ...]:
    """Compile tables into rules ordered longest prefix first.

    Keys of both tables are matched case-insensitively. Ties are
    broken alphabetically. Empty keys are skipped since they would
    match every ID.

    Args:
        mappings: Prefix -> site prefix table.
        suffixes: Prefix -> suffix table.

    Returns:
        Ordered rule tuple.
    """
    suffix_index = _lowercase_keys(suffixes)
    rules = [
        PrefixRule(
            prefix=prefix,
            mapped_prefix=mapped,
            suffix=suffix_index.get(prefix, ""),
        )
        for prefix, mapped in _lowercase_keys(mappings).items()
        if prefix
    ]
    rules.sort(key=lambda r: (-len(r.prefix), r.prefix))
    return tuple(rules)


def _lowercase_keys(table: dict[str, str]) -> dict[str, str]:
    """Return table keyed by lowercased keys."""
    return {key.lower(): value for key, value in table.items()}


def _sorted_table(table: dict[str, str]) -> dict[str, str]:
    """Return table with keys sorted case-insensitively."""
    return {key: table[key] for key in sorted(table, key=str.lower)}


def _validate_table(table: Any) -> dict[str, str]:
    """Check a table is a str -> str mapping.

    Raises:
        ValueError: On wrong types.
    """
    if not isinstance(table, dict):
        raise ValueError("Mapping table must be an object")
    for key, value in table.items():
        if not isinstance(key, str) or not isinstance(value, str):
            raise ValueError(f"Invalid mapping entry: {key!r} -> {value!r}")
    return dict(table)
