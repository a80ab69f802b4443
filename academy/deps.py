## Shared request dependencies
from typing import AsyncIterator

import httpx
from fastapi import HTTPException

from academy.content.registry import ContentRegistry, get_registry as _get_registry
from academy.settings import settings


def get_registry() -> ContentRegistry:
    return _get_registry()


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    # Same-origin client for loaders that call back into our own API
    async with httpx.AsyncClient(base_url=settings.site_url) as client:
        yield client


def supported_lang(lang: str) -> str:
    """Route matcher for the {lang} path segment."""
    if lang not in settings.supported_languages:
        raise HTTPException(status_code=404)
    return lang
