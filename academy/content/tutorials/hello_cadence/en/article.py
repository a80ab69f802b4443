from pathlib import Path

from academy.content.slug import generate_slug
from academy.content.types import (
    ContentMetadata,
    ContentType,
    Expertise,
    Subject,
    TutorialArticle,
)

article = TutorialArticle(
    title="Hello, Cadence",
    content_type=ContentType.TUTORIAL,
    slug=generate_slug(__name__),
    excerpt="Write, deploy and call your first Cadence contract.",
    author="Academy Team",
    metadata=ContentMetadata(
        expertise=Expertise.BEGINNER,
        duration="15 minutes",
        prerequisites=(),
        subjects=(Subject.CADENCE, Subject.FLOW),
    ),
    body=Path(__file__).with_name("body.md").read_text(encoding="utf-8"),
)
