"""FANZA summary service dependency.

The extractor is built once in the application lifespan and
stored on app.state; routes receive it through this dependency.
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from src.scraper.fanza import FanzaSummaryExtractor


def get_summary_extractor(request: Request) -> FanzaSummaryExtractor:
    """Return the application-wide summary extractor.

    Args:
        request: Incoming request.

    Returns:
        Extractor created at startup.

    Raises:
        HTTPException: 503 if the service was not initialized.
    """
    extractor = getattr(request.app.state, "summary_extractor", None)
    if extractor is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Summary service not initialized",
        )
    return extractor


SummaryExtractor = Annotated[FanzaSummaryExtractor, Depends(get_summary_extractor)]
