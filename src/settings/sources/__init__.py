"""Scraping source settings.

Exports configuration classes for scraped sites:
- FANZA (dmm.co.jp detail pages)
"""

from src.settings.sources.fanza import FanzaSettings

__all__ = [
    "FanzaSettings",
]
