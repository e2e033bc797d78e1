"""Fixtures — stand-in scraping service, scraper client, controller."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx
import pytest
import pytest_asyncio

from src.scraper.client import ScraperClient
from src.scraper.controller import RequestController

ENDPOINT = "https://scraper.test/api/scrape"

SAMPLE_DATA = {
    "siteTitle": "Example Domain",
    "baseUrl": "https://example.com",
    "pages": [
        {"url": "https://example.com", "title": "Example Domain", "content": "Hello"},
        {"url": "https://example.com/about", "title": "About", "content": "Über uns"},
    ],
}


class FakeScraperService:
    """Programmable remote scraping service behind ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: Any = {"success": True, "data": SAMPLE_DATA}
        self.raw: bytes | None = None
        self.exc: Exception | None = None
        self.gate: asyncio.Event | None = None

    def reply(self, status_code: int, body: Any = None, raw: bytes | None = None) -> None:
        self.status_code = status_code
        self.body = body
        self.raw = raw

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if self.exc is not None:
            raise self.exc
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def sample_data() -> dict:
    return SAMPLE_DATA


@pytest.fixture
def scraper_service() -> FakeScraperService:
    return FakeScraperService()


@pytest_asyncio.fixture
async def http_client(scraper_service: FakeScraperService):
    """AsyncClient wired to the fake service."""
    client = httpx.AsyncClient(transport=httpx.MockTransport(scraper_service.handler))
    yield client
    await client.aclose()


@pytest.fixture
def scraper(http_client: httpx.AsyncClient) -> ScraperClient:
    return ScraperClient(http_client, ENDPOINT, timeout=5)


@pytest.fixture
def controller(scraper: ScraperClient) -> RequestController:
    return RequestController(scraper)


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging's changes to the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
