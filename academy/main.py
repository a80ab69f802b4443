## Main application entry point
import json
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.exception_handlers import http_exception_handler
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from academy.api.routes import router as api_router
from academy.cadence_by_example.routes import router as cadence_by_example_router
from academy.catalog.routes import router as catalog_router
from academy.content.errors import (
    NOT_FOUND_MESSAGE,
    RESOLUTION_FAILED_MESSAGE,
    ContentNotFound,
    ContentResolutionError,
)
from academy.content.registry import get_registry
from academy.log import get_logger, setup_logging
from academy.roadmaps.routes import router as roadmaps_router
from academy.settings import settings
from academy.templating import STATIC_DIR, templates
from academy.tutorials.routes import router as tutorials_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings)
    # Build + validate the content registry before serving; a bad catalog fails startup
    get_registry()
    logger.info("academy_started", env=settings.env, site_url=settings.site_url)
    yield


app = FastAPI(lifespan=lifespan)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


def _error_page(request: Request, message: str, status_code: int):
    return templates.TemplateResponse(
        request, "error.html", {"message": message}, status_code=status_code
    )


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    return templates.TemplateResponse(request, "home.html", {"lang": settings.default_language})


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


# Unmatched routes and unsupported {lang}: JSON under /api, the error page elsewhere
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if request.url.path.startswith("/api/"):
        return await http_exception_handler(request, exc)
    return _error_page(request, str(exc.detail), exc.status_code)


@app.exception_handler(ContentNotFound)
async def content_not_found_handler(request: Request, exc: ContentNotFound):
    return _error_page(request, NOT_FOUND_MESSAGE, 404)


@app.exception_handler(ContentResolutionError)
async def content_resolution_handler(request: Request, exc: ContentResolutionError):
    logger.error(
        "content_resolution_error",
        path=request.url.path,
        lang=exc.lang,
        name=exc.name,
        cause=repr(exc.__cause__),
    )
    return _error_page(request, RESOLUTION_FAILED_MESSAGE, 500)


# Failures from loaders that call our own API (bad status, transport, bad JSON)
@app.exception_handler(httpx.HTTPError)
@app.exception_handler(json.JSONDecodeError)
async def upstream_error_handler(request: Request, exc: Exception):
    logger.error("upstream_request_failed", path=request.url.path, error=f"{type(exc).__name__}: {exc}")
    return _error_page(request, RESOLUTION_FAILED_MESSAGE, 502)


app.include_router(api_router)
app.include_router(catalog_router)
app.include_router(roadmaps_router)
app.include_router(tutorials_router)
app.include_router(cadence_by_example_router)
