"""Data models for the scrape client."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Bounds offered by the page-count selector
MIN_PAGES = 1
MAX_PAGES = 5


class LifecycleState(str, enum.Enum):
    """Where the current submission stands."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class ScrapeRequest(BaseModel):
    """Body of the outbound call to the remote scraping service."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, str_strip_whitespace=True)

    url: str = Field(min_length=1)
    max_pages: int = Field(alias="maxPages")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class ScrapeResult:
    """Payload returned by the remote service on success.

    The mapping is kept exactly as received; its shape is owned by the
    remote service, so only the few fields the view needs are surfaced.
    """

    data: dict[str, Any]

    @property
    def site_title(self) -> str | None:
        return _as_text(self.data.get("siteTitle")) or None

    @property
    def base_url(self) -> str:
        return _as_text(self.data.get("baseUrl"))

    @property
    def pages(self) -> list[Any]:
        pages = self.data.get("pages")
        return pages if isinstance(pages, list) else []

    @property
    def page_count(self) -> int:
        return len(self.pages)
