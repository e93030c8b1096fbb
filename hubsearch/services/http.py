"""Generic HTTPS request step shared by the registry clients."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

import httpx

from hubsearch.logging import logger


@dataclass(frozen=True, slots=True)
class RequestOptions:
    hostname: str
    path: str
    port: int = 443
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"https://{self.hostname}:{self.port}{self.path}"

    def with_headers(self, **headers: str) -> RequestOptions:
        return replace(self, headers={**self.headers, **headers})


async def https_request(
    client: httpx.AsyncClient,
    options: RequestOptions,
    *,
    timeout: Any = httpx.USE_CLIENT_DEFAULT,
) -> str:
    """Send ``options`` and return the response body as text.

    Non-2xx responses raise ``httpx.HTTPStatusError``; transport problems
    surface as ``httpx.RequestError``. Without ``timeout`` the client's own
    timeout applies.
    """
    try:
        response = await client.request(
            options.method,
            options.url,
            headers=dict(options.headers),
            timeout=timeout,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning(
            "https_request_failed",
            method=options.method,
            url=options.url,
            status_code=exc.response.status_code,
        )
        raise
    except httpx.RequestError as exc:
        logger.warning(
            "https_request_failed",
            method=options.method,
            url=options.url,
            error=str(exc),
        )
        raise
    return response.text


__all__ = ["RequestOptions", "https_request"]
