import re

_NON_SLUG = re.compile(r"[^a-z0-9-]+")


def generate_slug(module_name: str) -> str:
    """
    Derive a record's slug from the dotted name of the module defining it.

    Content lives at ``<kind>/<name>/<lang>/<file>.py`` so the slug is the
    segment two above the file:
    ``academy.content.roadmaps.beginner_dapp_roadmap.en.overview`` -> ``beginner-dapp-roadmap``.
    """
    parts = module_name.split(".")
    if len(parts) < 3:
        raise ValueError(f"Cannot derive slug from module name {module_name!r}")

    name = parts[-3].lower().replace("_", "-")
    slug = _NON_SLUG.sub("-", name).strip("-")
    if not slug:
        raise ValueError(f"Cannot derive slug from module name {module_name!r}")
    return slug
