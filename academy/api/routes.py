# academy/api/routes.py
"""JSON API: catalogued static content, served as-is."""
import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from academy.content.errors import ContentNotFound
from academy.content.registry import ContentRegistry
from academy.content.types import ContentType
from academy.deps import get_registry, supported_lang

DATA_DIR = Path(__file__).resolve().parent.parent / "content" / "data"
CADENCE_BY_EXAMPLE_PATH = DATA_DIR / "cadence_by_example.json"

router = APIRouter(prefix="/api")


@lru_cache(maxsize=1)
def load_cadence_by_example_data() -> Any:
    with CADENCE_BY_EXAMPLE_PATH.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _record_url(lang: str, content_type: ContentType, slug: str) -> str:
    return f"/{lang}/catalog/{content_type.value}s/{slug}"


@router.get("/content/cadenceByExample")
def cadence_by_example():
    return JSONResponse(load_cadence_by_example_data())


@router.get("/catalog/{lang}")
def catalog(
    lang: str = Depends(supported_lang),
    registry: ContentRegistry = Depends(get_registry),
):
    return JSONResponse(
        [
            {
                "title": r.title,
                "slug": r.slug,
                "contentType": r.content_type.value,
                "excerpt": r.excerpt,
                "url": _record_url(lang, r.content_type, r.slug),
            }
            for r in registry.list(lang)
        ]
    )


@router.get("/content/{lang}/roadmaps/{name}")
def roadmap(
    name: str,
    lang: str = Depends(supported_lang),
    registry: ContentRegistry = Depends(get_registry),
):
    try:
        record = registry.get(lang, name, ContentType.ROADMAP)
    except ContentNotFound as e:
        return JSONResponse({"error": str(e)}, status_code=404)
    return JSONResponse(record.model_dump(mode="json", by_alias=True))
