"""Scraper utilities package: logging."""

from src.scraper.utils.logger import setup_logger

__all__ = ["setup_logger"]
