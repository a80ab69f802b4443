# Tutorial article pages
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from academy.content.registry import ContentRegistry
from academy.deps import get_registry, supported_lang
from academy.loaders import load_tutorial
from academy.templating import templates

router = APIRouter(prefix="/{lang}/catalog/tutorials")

@router.get("/{name}", response_class=HTMLResponse)
async def tutorial_detail(
    request: Request,
    name: str,
    lang: str = Depends(supported_lang),
    registry: ContentRegistry = Depends(get_registry),
):
    data = await load_tutorial(lang, name, registry)
    return templates.TemplateResponse(
        request,
        "tutorial_detail.html",
        {"lang": lang, "translations": registry.languages_for(name), **data},
    )
