"""Scraper package: FANZA movie summary lookup."""
