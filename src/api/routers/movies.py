"""Movie summary and mapping endpoints for REST API."""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from src.api.dependencies.fanza import SummaryExtractor
from src.api.schemas import (
    MappingsResponse,
    MappingTable,
    MappingUpdateResponse,
    SummaryNotFoundResponse,
    SummaryResponse,
)
from src.scraper.fanza import ConfigSaveError

router = APIRouter(tags=["Movies"])


# =============================================================================
# SUMMARY
# =============================================================================


@router.get(
    "/movies/{movie_id}/summary",
    response_model=SummaryResponse,
    responses={404: {"model": SummaryNotFoundResponse}},
    summary="Get movie summary",
    description="Look up the synopsis of a movie on FANZA detail pages.",
)
async def get_movie_summary(
    movie_id: str,
    extractor: SummaryExtractor,
) -> SummaryResponse | JSONResponse:
    """Get summary by movie ID.

    Args:
        movie_id: Raw movie ID (e.g. 'ABP-123').
        extractor: Summary extractor.

    Returns:
        Summary and source URL, or a 404 body when none is found.
    """
    result = await extractor.get_summary(movie_id)

    if result["summary"]:
        return SummaryResponse(
            movie_id=movie_id,
            summary=result["summary"],
            url=result.get("url"),
        )

    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=SummaryNotFoundResponse(movie_id=movie_id).model_dump(by_alias=True),
    )


# =============================================================================
# MAPPINGS
# =============================================================================


@router.get(
    "/fanza/mappings",
    response_model=MappingsResponse,
    summary="Get mapping tables",
)
def get_mappings(extractor: SummaryExtractor) -> MappingsResponse:
    """Return current prefix and suffix tables."""
    store = extractor.context.store
    return MappingsResponse(mappings=store.prefix_mappings, suffixes=store.suffix_mappings)


@router.put(
    "/fanza/mappings",
    response_model=MappingUpdateResponse,
    summary="Replace prefix mappings",
)
def put_mappings(body: MappingTable, extractor: SummaryExtractor) -> MappingUpdateResponse:
    """Replace and persist the prefix table.

    Raises:
        HTTPException: 500 if the config file can't be written.
    """
    try:
        extractor.set_mappings(body.root)
    except ConfigSaveError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e
    return MappingUpdateResponse(success=True, count=len(body.root))


@router.put(
    "/fanza/suffixes",
    response_model=MappingUpdateResponse,
    summary="Replace suffix mappings",
)
def put_suffixes(body: MappingTable, extractor: SummaryExtractor) -> MappingUpdateResponse:
    """Replace and persist the suffix table.

    Raises:
        HTTPException: 500 if the config file can't be written.
    """
    try:
        extractor.set_suffixes(body.root)
    except ConfigSaveError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e
    return MappingUpdateResponse(success=True, count=len(body.root))
