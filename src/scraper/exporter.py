"""JSON export of a held scrape result."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import date, datetime, timezone

from .models import ScrapeResult

logger = logging.getLogger(__name__)

EXPORT_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    content: str
    media_type: str = EXPORT_MEDIA_TYPE

    @property
    def content_disposition(self) -> str:
        return f'attachment; filename="{self.filename}"'


def export_filename(today: date) -> str:
    return f"scraped-{today.isoformat()}.json"


class ResultExporter:
    """Serializes a :class:`ScrapeResult` into a downloadable JSON file."""

    def export_json(self, result: ScrapeResult | None, today: date | None = None) -> ExportArtifact | None:
        """Return the artifact for *result*, or ``None`` when there is no result.

        The payload comes from a trusted remote contract, so a serialization
        error is a bug and is left to propagate.
        """
        if result is None:
            return None
        day = today or datetime.now(timezone.utc).date()
        artifact = ExportArtifact(
            filename=export_filename(day),
            content=json.dumps(result.data, indent=2, ensure_ascii=False),
        )
        logger.debug("result exported", extra={"filename": artifact.filename, "bytes": len(artifact.content)})
        return artifact
