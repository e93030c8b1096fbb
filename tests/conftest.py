"""Shared fixtures and a recording mock transport for registry tests."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

import httpx
import pytest
import structlog

from hubsearch.config import HubSearchSettings


def _make_item(name: str = "redis", **overrides: Any) -> dict[str, Any]:
    item = {
        "is_automated": False,
        "name": name,
        "is_trusted": False,
        "is_official": True,
        "star_count": 830,
        "description": f"{name} description",
    }
    item.update(overrides)
    return item


def _make_payload(results: list[dict[str, Any]], query: str = "redis") -> dict[str, Any]:
    return {
        "num_pages": 1,
        "num_results": len(results),
        "results": results,
        "page_size": len(results),
        "query": query,
        "page": 1,
    }


class _RecordingHandler:
    """MockTransport handler that records requests and can hold them open."""

    def __init__(
        self,
        payload: Any = None,
        *,
        status_code: int = 200,
        text: str | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.payload = payload
        self.status_code = status_code
        self.text = text
        self.gate = gate
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def make_item() -> Callable[..., dict[str, Any]]:
    return _make_item


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    return _make_payload


@pytest.fixture
def recording_handler() -> type[_RecordingHandler]:
    return _RecordingHandler


@pytest.fixture
def settings() -> HubSearchSettings:
    return HubSearchSettings(_env_file=None)


@pytest.fixture
def restore_logging():
    levels = {name: logging.getLogger(name).level for name in (None, "httpx", "httpcore")}
    yield
    structlog.reset_defaults()
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
