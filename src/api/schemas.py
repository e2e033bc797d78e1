"""Request/response Pydantic models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from src.scraper.controller import SessionSnapshot
from src.scraper.models import MAX_PAGES, MIN_PAGES, LifecycleState

DEFAULT_SITE_TITLE = "Scraped Content"


class ScrapeForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str = ""
    max_pages: int | None = Field(default=None, ge=MIN_PAGES, le=MAX_PAGES, alias="maxPages")


class ResultSummary(BaseModel):
    title: str
    base_url: str
    page_count: int


class SessionResponse(BaseModel):
    state: LifecycleState
    busy: bool = False
    error: str | None = None
    result: dict[str, Any] | None = None
    summary: ResultSummary | None = None

    @classmethod
    def from_snapshot(cls, snapshot: SessionSnapshot) -> "SessionResponse":
        result = snapshot.result
        if result is None:
            return cls(state=snapshot.state, busy=snapshot.busy, error=snapshot.error)
        return cls(
            state=snapshot.state,
            busy=snapshot.busy,
            result=result.data,
            summary=ResultSummary(
                title=result.site_title or DEFAULT_SITE_TITLE,
                base_url=result.base_url,
                page_count=result.page_count,
            ),
        )
