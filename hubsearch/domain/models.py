"""Pydantic models for registry search payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr


class SearchResultItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: StrictStr
    is_automated: StrictBool
    is_trusted: StrictBool
    is_official: StrictBool
    star_count: StrictInt
    description: StrictStr


class SearchResponse(BaseModel):
    """Body of ``GET /v1/search``; every field is required."""

    model_config = ConfigDict(frozen=True)

    num_pages: StrictInt
    num_results: StrictInt
    results: list[SearchResultItem]
    page_size: StrictInt
    query: StrictStr
    page: StrictInt


__all__ = ["SearchResultItem", "SearchResponse"]
