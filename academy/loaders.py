# academy/loaders.py
"""
Page loaders: each one fetches the data a single page renders.

- load_roadmap / load_tutorial resolve a static record from the registry
- load_cadence_by_example calls the site's own JSON API and passes the body through
"""
from typing import Any, Dict

import httpx

from academy.content.errors import ContentNotFound, ContentResolutionError
from academy.content.registry import ContentRegistry
from academy.content.rendering import render_markdown, table_of_contents
from academy.content.types import ContentType
from academy.log import get_logger

logger = get_logger(__name__)

CADENCE_BY_EXAMPLE_ENDPOINT = "/api/content/cadenceByExample"


def _resolve(registry: ContentRegistry, lang: str, name: str, content_type: ContentType):
    try:
        return registry.get(lang, name, content_type)
    except ContentNotFound:
        logger.info("content_not_found", lang=lang, name=name, content_type=content_type.value)
        raise
    except Exception as e:
        logger.exception("content_resolution_failed", lang=lang, name=name, content_type=content_type.value)
        raise ContentResolutionError(lang, name) from e


async def load_roadmap(lang: str, name: str, registry: ContentRegistry) -> Dict[str, Any]:
    roadmap = _resolve(registry, lang, name, ContentType.ROADMAP)
    return {"roadmap": roadmap}


async def load_tutorial(lang: str, name: str, registry: ContentRegistry) -> Dict[str, Any]:
    article = _resolve(registry, lang, name, ContentType.TUTORIAL)
    try:
        html = render_markdown(article.body)
        toc = table_of_contents(article.body)
    except Exception as e:
        logger.exception("tutorial_render_failed", lang=lang, name=name)
        raise ContentResolutionError(lang, name) from e
    return {"article": article, "html": html, "toc": toc}


async def load_cadence_by_example(client: httpx.AsyncClient) -> Dict[str, Any]:
    """Fetch the examples catalogue; non-2xx and bad JSON propagate to the caller."""
    response = await client.get(CADENCE_BY_EXAMPLE_ENDPOINT)
    response.raise_for_status()
    content = response.json()

    return {"content": content}
