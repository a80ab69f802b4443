# Roadmap pages
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from academy.content.registry import ContentRegistry
from academy.deps import get_registry, supported_lang
from academy.loaders import load_roadmap
from academy.templating import templates

router = APIRouter(prefix="/{lang}/catalog/roadmaps")

@router.get("/{name}", response_class=HTMLResponse)
async def roadmap_detail(
    request: Request,
    name: str,
    lang: str = Depends(supported_lang),
    registry: ContentRegistry = Depends(get_registry),
):
    data = await load_roadmap(lang, name, registry)
    return templates.TemplateResponse(
        request,
        "roadmap_detail.html",
        {
            "lang": lang,
            "roadmap": data["roadmap"],
            "translations": registry.languages_for(name),
        },
    )
