"""POST /scrape, GET /session, GET /session/download endpoint handlers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from src.api.schemas import ScrapeForm, SessionResponse
from src.config import Settings
from src.scraper.controller import RequestController
from src.scraper.errors import SubmissionInProgressError
from src.scraper.exporter import ResultExporter

router = APIRouter()


def _get_controller(request: Request) -> RequestController:
    return request.app.state.controller


def _get_exporter(request: Request) -> ResultExporter:
    return request.app.state.exporter


def _get_settings(request: Request) -> Settings:
    return request.app.state.settings


@router.post("/scrape", response_model=SessionResponse)
async def submit_scrape(
    body: ScrapeForm,
    controller: RequestController = Depends(_get_controller),
    settings: Settings = Depends(_get_settings),
):
    max_pages = body.max_pages if body.max_pages is not None else settings.default_max_pages
    try:
        snapshot = await controller.submit(body.url, max_pages)
    except SubmissionInProgressError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return SessionResponse.from_snapshot(snapshot)


@router.get("/session", response_model=SessionResponse)
async def get_session(controller: RequestController = Depends(_get_controller)):
    return SessionResponse.from_snapshot(controller.snapshot())


@router.get("/session/download")
async def download_result(
    controller: RequestController = Depends(_get_controller),
    exporter: ResultExporter = Depends(_get_exporter),
):
    artifact = exporter.export_json(controller.result)
    if artifact is None:
        raise HTTPException(status_code=404, detail="No result to download")
    return Response(
        content=artifact.content,
        media_type=artifact.media_type,
        headers={"Content-Disposition": artifact.content_disposition},
    )
