"""Request lifecycle controller — validate, dispatch, await, normalize."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .client import ScraperClient
from .errors import (
    EMPTY_URL_MESSAGE,
    INVALID_MAX_PAGES_MESSAGE,
    TRANSPORT_FAILURE_MESSAGE,
    BusinessFailure,
    ScrapeError,
    SubmissionInProgressError,
    ValidationFailure,
)
from .models import LifecycleState, ScrapeRequest, ScrapeResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """Point-in-time view of the session; holds a result or an error, never both."""

    state: LifecycleState
    result: ScrapeResult | None = None
    error: str | None = None

    @property
    def busy(self) -> bool:
        return self.state is LifecycleState.SUBMITTING


def _parse_max_pages(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValidationFailure(INVALID_MAX_PAGES_MESSAGE)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    try:
        return int(str(raw).strip())
    except (TypeError, ValueError) as exc:
        raise ValidationFailure(INVALID_MAX_PAGES_MESSAGE) from exc


def build_request(raw_url: str | None, raw_max_pages: Any) -> ScrapeRequest:
    """Turn raw form input into a :class:`ScrapeRequest`.

    Page-count bounds are left to the form; only the integer parse happens here.
    """
    url = (raw_url or "").strip()
    if not url:
        raise ValidationFailure(EMPTY_URL_MESSAGE)
    return ScrapeRequest(url=url, max_pages=_parse_max_pages(raw_max_pages))


def parse_response(body: Any) -> ScrapeResult:
    """Extract the result from a 2xx body or raise :class:`BusinessFailure`."""
    if isinstance(body, Mapping) and body.get("success"):
        data = body.get("data")
        if isinstance(data, dict):
            return ScrapeResult(data)
    raise BusinessFailure(body)


class RequestController:
    """Drives one submission at a time and holds its outcome.

    Every submission ends in exactly one of a :class:`ScrapeResult` or an
    error string. Failures never escape :meth:`submit` as exceptions; only a
    submission made while another is in flight raises
    :class:`SubmissionInProgressError`.
    """

    def __init__(self, client: ScraperClient) -> None:
        self._client = client
        self._state = LifecycleState.IDLE
        self._result: ScrapeResult | None = None
        self._error: str | None = None

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def result(self) -> ScrapeResult | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def busy(self) -> bool:
        return self._state is LifecycleState.SUBMITTING

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(state=self._state, result=self._result, error=self._error)

    async def submit(self, raw_url: str | None, raw_max_pages: Any) -> SessionSnapshot:
        """Validate input, run the scrape and return the terminal snapshot."""
        # Must stay free of awaits up to the SUBMITTING transition.
        if self.busy:
            logger.warning("submission rejected, request already in flight")
            raise SubmissionInProgressError("A scrape request is already in progress")

        try:
            request = build_request(raw_url, raw_max_pages)
        except ValidationFailure as exc:
            self._fail(exc.message)
            return self.snapshot()

        self._state = LifecycleState.SUBMITTING
        self._result = None
        self._error = None
        logger.info(
            "scrape submitted",
            extra={"url": request.url, "max_pages": request.max_pages, "endpoint": self._client.endpoint},
        )

        try:
            body = await self._client.scrape(request)
            self._succeed(parse_response(body))
        except ScrapeError as exc:
            self._fail(exc.message)
        finally:
            # Anything unexpected still leaves the controller usable.
            if self._state is LifecycleState.SUBMITTING:
                self._fail(TRANSPORT_FAILURE_MESSAGE)

        return self.snapshot()

    def _succeed(self, result: ScrapeResult) -> None:
        self._state = LifecycleState.SUCCEEDED
        self._result = result
        self._error = None
        logger.info(
            "scrape succeeded",
            extra={"base_url": result.base_url, "page_count": result.page_count},
        )

    def _fail(self, message: str) -> None:
        self._state = LifecycleState.FAILED
        self._result = None
        self._error = message
        logger.info("scrape failed", extra={"error": message})

