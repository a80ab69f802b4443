# Catalog listing page
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from academy.content.registry import ContentRegistry
from academy.content.types import ContentType
from academy.deps import get_registry, supported_lang
from academy.templating import templates

router = APIRouter()

@router.get("/{lang}/catalog", response_class=HTMLResponse)
def catalog(
    request: Request,
    lang: str = Depends(supported_lang),
    registry: ContentRegistry = Depends(get_registry),
):
    return templates.TemplateResponse(
        request,
        "catalog.html",
        {
            "lang": lang,
            "roadmaps": registry.list(lang, ContentType.ROADMAP),
            "tutorials": registry.list(lang, ContentType.TUTORIAL),
        },
    )
