"""JSON fetching with optional per-fetcher memoization.

Cached entries are ``asyncio.Task`` objects keyed by the request fingerprint
(method, hostname and path). The task is created and stored before the first
suspension point, so concurrent callers asking for the same fingerprint always
share one network call. Each caller awaits its own ``asyncio.shield`` wrapper:
cancelling a caller never cancels the shared task or its siblings.

The parsed document is owned by the cache; cached callers each receive a deep
copy, so mutating a result never changes what other callers see.
"""

from __future__ import annotations

import asyncio
import copy
import json
from typing import Any

import httpx

from hubsearch.logging import logger
from hubsearch.services.http import RequestOptions, https_request


def request_fingerprint(options: RequestOptions) -> str:
    return f"{options.method} {options.hostname} {options.path}"


class CachedJsonFetcher:
    """Fetch and parse JSON documents, memoizing them on request.

    ``timeout_seconds`` overrides the client's timeout; when omitted the
    client's own setting applies.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        timeout_seconds: float | None = None,
        evict_failures: bool = False,
    ) -> None:
        self._client = http_client
        self._timeout = httpx.USE_CLIENT_DEFAULT if timeout_seconds is None else timeout_seconds
        self._evict_failures = evict_failures
        self._entries: dict[str, asyncio.Task[Any]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def is_cached(self, options: RequestOptions) -> bool:
        return request_fingerprint(options) in self._entries

    async def fetch_json(self, options: RequestOptions, use_cache: bool) -> Any:
        if not use_cache:
            return await self._fetch(options)

        key = request_fingerprint(options)
        entry = self._entries.get(key)
        if entry is None:
            logger.debug("json_fetch_started", key=key)
            fetch = self._fetch_evicting(key, options) if self._evict_failures else self._fetch(options)
            entry = asyncio.create_task(fetch)
            self._entries[key] = entry
        else:
            logger.debug("json_cache_hit", key=key, settled=entry.done())
        return copy.deepcopy(await asyncio.shield(entry))

    async def _fetch(self, options: RequestOptions) -> Any:
        request = options.with_headers(Accept="application/json")
        body = await https_request(self._client, request, timeout=self._timeout)
        return json.loads(body)

    async def _fetch_evicting(self, key: str, options: RequestOptions) -> Any:
        # Runs inside the cached task; the entry is gone before the task settles.
        try:
            return await self._fetch(options)
        except (Exception, asyncio.CancelledError):
            if self._entries.get(key) is asyncio.current_task():
                del self._entries[key]
                logger.debug("json_cache_evicted", key=key)
            raise


__all__ = ["CachedJsonFetcher", "request_fingerprint"]
