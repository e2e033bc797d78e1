"""Client for the remote scraping service."""

from __future__ import annotations

from .client import ScraperClient, create_http_client
from .controller import RequestController, SessionSnapshot
from .errors import (
    BusinessFailure,
    ScrapeError,
    SubmissionInProgressError,
    TransportFailure,
    ValidationFailure,
)
from .exporter import ExportArtifact, ResultExporter
from .models import LifecycleState, ScrapeRequest, ScrapeResult

__all__ = [
    "BusinessFailure",
    "ExportArtifact",
    "LifecycleState",
    "RequestController",
    "ResultExporter",
    "ScrapeError",
    "ScrapeRequest",
    "ScrapeResult",
    "ScraperClient",
    "SessionSnapshot",
    "SubmissionInProgressError",
    "TransportFailure",
    "ValidationFailure",
    "create_http_client",
]
