"""FastAPI entrypoint wiring the movie API, the HTML shell and static assets."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.db import init_models
from app.routers import movies, pages

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Configure logging + ensure database tables before serving."""

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    init_models()
    logger.info("Movie catalog ready")
    yield


app = FastAPI(title=get_settings().app_title, lifespan=lifespan)
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(movies.router)
app.include_router(pages.router)


@app.exception_handler(StarletteHTTPException)
async def not_found_page(request: Request, exc: StarletteHTTPException):
    """Unknown page paths get the HTML not-found page; the API keeps plain errors."""

    if exc.status_code == status.HTTP_404_NOT_FOUND and not _is_api_or_static(request.url.path):
        return pages.render_not_found(request)
    return await http_exception_handler(request, exc)


def _is_api_or_static(path: str) -> bool:
    return path == "/api" or path.startswith(("/api/", "/static/"))
