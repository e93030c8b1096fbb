"""Container image registry search with memoized JSON fetching."""

from hubsearch.domain.models import SearchResponse, SearchResultItem
from hubsearch.services.fetcher import CachedJsonFetcher
from hubsearch.services.search import HubSearchService, build_search_service, format_badges

__all__ = [
    "CachedJsonFetcher",
    "HubSearchService",
    "SearchResponse",
    "SearchResultItem",
    "build_search_service",
    "format_badges",
]
