"""Pydantic schemas for API request/response validation.

Defines data transfer objects for health, summaries and mappings.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, RootModel

# =============================================================================
# HEALTH
# =============================================================================


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(examples=["healthy"])
    version: str = Field(examples=["1.0.0"])
    mappings: int = Field(default=0, description="Loaded prefix mappings")
    cached: int = Field(default=0, description="Cached summary entries")
    timestamp: datetime = Field(default_factory=datetime.now)


# =============================================================================
# SUMMARY
# =============================================================================


class SummaryResponse(BaseModel):
    """Movie summary lookup response."""

    model_config = ConfigDict(populate_by_name=True)

    movie_id: str = Field(alias="movieId", examples=["ABP-123"])
    summary: str | None = None
    url: str | None = Field(
        default=None,
        examples=["https://www.dmm.co.jp/mono/dvd/-/detail/=/cid=118abp123/"],
    )


class SummaryNotFoundResponse(SummaryResponse):
    """Returned with 404 when no summary could be found."""

    message: str = "Summary not found for this movie"


# =============================================================================
# MAPPINGS
# =============================================================================


class MappingTable(RootModel[dict[str, str]]):
    """Prefix-keyed table (prefix -> site prefix, or prefix -> suffix)."""


class MappingsResponse(BaseModel):
    """Current mapping tables."""

    mappings: dict[str, str] = Field(default_factory=dict)
    suffixes: dict[str, str] = Field(default_factory=dict)


class MappingUpdateResponse(BaseModel):
    """Result of a mapping table update."""

    success: bool
    count: int
