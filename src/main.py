"""FastAPI app entrypoint."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.routes import router
from src.config import get_settings
from src.logging_config import setup_logging
from src.scraper.client import ScraperClient, create_http_client
from src.scraper.controller import RequestController
from src.scraper.exporter import ResultExporter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    # Initialize logging FIRST so all subsequent operations produce JSON logs
    setup_logging(settings.log_level)
    logger.info("starting scrape client")

    http_client = create_http_client()
    scraper = ScraperClient(
        http_client,
        settings.scraper_api_url,
        timeout=settings.scraper_timeout_seconds or None,
    )

    # Attach to app state for dependency injection
    app.state.settings = settings
    app.state.controller = RequestController(scraper)
    app.state.exporter = ResultExporter()

    logger.info(
        "scrape client ready",
        extra={
            "scraper_api_url": settings.scraper_api_url,
            "timeout_seconds": settings.scraper_timeout_seconds,
        },
    )

    yield

    logger.info("shutting down scrape client")
    await http_client.aclose()


app = FastAPI(title="Scrape Client", lifespan=lifespan)
app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
