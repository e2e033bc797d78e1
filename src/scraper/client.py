"""HTTP client for the remote scraping service."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .errors import TransportFailure
from .models import ScrapeRequest

logger = logging.getLogger(__name__)


def _decode(response: httpx.Response) -> Any:
    """Return the JSON body, or ``None`` when there is none."""
    try:
        return response.json()
    except ValueError:
        return None


class ScraperClient:
    """Issues the single ``POST`` a scrape submission is made of. No retries."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        timeout: float | None = None,
    ) -> None:
        self._client = client
        self._endpoint = endpoint
        self._timeout = timeout

    @property
    def endpoint(self) -> str:
        return self._endpoint

    async def scrape(self, request: ScrapeRequest) -> Any:
        """POST *request* and return the decoded 2xx body.

        Raises :class:`TransportFailure` for non-2xx responses (carrying the
        decoded error body) and for network errors.
        """
        try:
            response = await self._client.post(
                self._endpoint,
                json=request.to_payload(),
                timeout=self._timeout,
            )
        except httpx.TimeoutException as exc:
            logger.warning("scrape request timed out", extra={"url": request.url, "timeout": self._timeout})
            description = f"Request timed out after {self._timeout:g} seconds" if self._timeout else str(exc)
            raise TransportFailure(description) from exc
        except httpx.RequestError as exc:
            logger.warning("scrape request failed", extra={"url": request.url}, exc_info=True)
            raise TransportFailure(str(exc)) from exc

        payload = _decode(response)
        if not response.is_success:
            logger.warning(
                "scraper returned error status",
                extra={"url": request.url, "status_code": response.status_code},
            )
            raise TransportFailure(
                f"Request failed with status code {response.status_code}",
                payload,
            )
        return payload


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(headers={"Accept": "application/json"})
