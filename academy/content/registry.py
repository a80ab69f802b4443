# academy/content/registry.py
"""
Read-only lookup table from (language, slug) to a static content record.

Built once at startup from the explicit entries in ``academy.content.catalog``
and validated while building:
- every language is supported
- no (language, slug) key is registered twice
- every slug exists in the default language (translations never stand alone)
"""
from functools import lru_cache
from types import MappingProxyType
from typing import Iterable, List, Tuple

from academy.content.errors import ContentNotFound, RegistryValidationError
from academy.content.types import Content, ContentType
from academy.log import get_logger
from academy.settings import settings

logger = get_logger(__name__)

Key = Tuple[str, str]


class ContentRegistry:
    def __init__(
        self,
        entries: Iterable[Tuple[str, Content]],
        *,
        languages: Iterable[str],
        default_language: str,
    ):
        self.languages = tuple(languages)
        self.default_language = default_language

        if default_language not in self.languages:
            raise RegistryValidationError(
                f"Default language {default_language!r} is not in supported languages {list(self.languages)}"
            )

        items: dict[Key, Content] = {}
        for lang, record in entries:
            if lang not in self.languages:
                raise RegistryValidationError(f"Unsupported language {lang!r} for {record.slug!r}")
            key = (lang, record.slug)
            if key in items:
                raise RegistryValidationError(f"Duplicate content key {key}")
            items[key] = record

        orphans = sorted(
            (lang, slug) for lang, slug in items if (default_language, slug) not in items
        )
        if orphans:
            raise RegistryValidationError(
                f"Records missing a {default_language!r} original: {orphans}"
            )

        self._items = MappingProxyType(items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: Key) -> bool:
        return key in self._items

    def get(self, lang: str, name: str, content_type: ContentType | None = None) -> Content:
        record = self._items.get((lang, name))
        if record is None or (content_type is not None and record.content_type != content_type):
            raise ContentNotFound(lang, name)
        return record

    def list(self, lang: str, content_type: ContentType | None = None) -> List[Content]:
        records = [
            record
            for (record_lang, _), record in self._items.items()
            if record_lang == lang and (content_type is None or record.content_type == content_type)
        ]
        return sorted(records, key=lambda r: r.title.lower())

    def languages_for(self, name: str) -> List[str]:
        return [lang for lang in self.languages if (lang, name) in self._items]


def build_registry() -> ContentRegistry:
    from academy.content.catalog import ENTRIES

    registry = ContentRegistry(
        ENTRIES,
        languages=settings.supported_languages,
        default_language=settings.default_language,
    )
    logger.info("content_registry_built", records=len(registry), languages=list(registry.languages))
    return registry


@lru_cache(maxsize=1)
def get_registry() -> ContentRegistry:
    return build_registry()
