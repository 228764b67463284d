"""FANZA scraper exceptions."""


class FanzaError(Exception):
    """Base exception for FANZA scraper errors."""

    pass


class ConfigLoadError(FanzaError):
    """Raised when the mapping config file can't be read or parsed."""

    pass


class ConfigSaveError(FanzaError):
    """Raised when the mapping config file can't be written."""

    pass
