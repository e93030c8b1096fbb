"""Registry image search used by image-name autocompletion."""

from __future__ import annotations

from urllib.parse import quote

import httpx

from hubsearch.config import HubSearchSettings, get_settings
from hubsearch.domain.models import SearchResponse, SearchResultItem
from hubsearch.i18n import I18nService
from hubsearch.services.fetcher import CachedJsonFetcher
from hubsearch.services.http import RequestOptions
from hubsearch.services.popular import popular_images

# Characters encodeURIComponent leaves alone.
_UNRESERVED = "-_.!~*'()"

_BADGES = (
    ("is_automated", "Automated"),
    ("is_trusted", "Trusted"),
    ("is_official", "Official"),
)


def format_badges(item: SearchResultItem) -> str:
    """Return the badge for the first set flag, e.g. ``"[Official]"``."""

    for attribute, label in _BADGES:
        if getattr(item, attribute):
            return f"[{label}]"
    return ""


def build_search_request(
    term: str,
    count: int,
    *,
    host: str = "registry.hub.docker.com",
    port: int = 443,
) -> RequestOptions:
    return RequestOptions(
        hostname=host,
        port=port,
        path=f"/v1/search?q={quote(term, safe=_UNRESERVED)}&n={count}",
        method="GET",
    )


class HubSearchService:
    """Search the registry hub, falling back to popular images for an empty prefix."""

    def __init__(
        self,
        fetcher: CachedJsonFetcher,
        *,
        i18n: I18nService | None = None,
        settings: HubSearchSettings | None = None,
        locale: str | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._settings = settings or get_settings()
        self._i18n = i18n or I18nService(
            locales_path=self._settings.locales_path,
            default_locale=self._settings.default_language,
        )
        self._locale = locale

    async def search_one(self, name: str, *, use_cache: bool = True) -> SearchResultItem | None:
        response = await self._invoke(name, 1, use_cache)
        if not response.results:
            return None
        return response.results[0]

    async def search_many(self, prefix: str, *, use_cache: bool = True) -> list[SearchResultItem]:
        if not prefix:
            return popular_images(self._i18n, locale=self._locale)
        response = await self._invoke(prefix, self._settings.max_results, use_cache)
        return list(response.results)

    async def _invoke(self, term: str, count: int, use_cache: bool) -> SearchResponse:
        options = build_search_request(
            term,
            count,
            host=self._settings.registry_host,
            port=self._settings.registry_port,
        )
        data = await self._fetcher.fetch_json(options, use_cache)
        return SearchResponse.model_validate(data)


def build_search_service(
    http_client: httpx.AsyncClient,
    settings: HubSearchSettings | None = None,
    *,
    locale: str | None = None,
) -> HubSearchService:
    settings = settings or get_settings()
    fetcher = CachedJsonFetcher(
        http_client,
        timeout_seconds=settings.request_timeout_seconds,
        evict_failures=settings.evict_failed_fetches,
    )
    return HubSearchService(fetcher, settings=settings, locale=locale)


__all__ = [
    "HubSearchService",
    "build_search_request",
    "build_search_service",
    "format_badges",
]
