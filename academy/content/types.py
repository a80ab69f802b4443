## Pydantic schemas for static content records
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContentType(str, Enum):
    ROADMAP = "roadmap"
    COURSE = "course"
    TUTORIAL = "tutorial"
    ARTICLE = "article"


class Expertise(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Subject(str, Enum):
    CADENCE = "cadence"
    FLOW = "flow"
    JAVASCRIPT = "javascript"
    DAPP = "dapp"
    TOOLING = "tooling"


class Record(BaseModel):
    # Frozen + tuples: records never change once defined.
    # JSON output uses camelCase (contentType) like the front end expects.
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class ContentMetadata(Record):
    expertise: Expertise
    duration: str
    prerequisites: Tuple[str, ...] = ()
    subjects: Tuple[Subject, ...] = ()


class CourseSummary(Record):
    title: str
    excerpt: str
    content_type: ContentType = ContentType.COURSE
    duration: str
    subjects: Tuple[Subject, ...] = ()
    url: str


class ChapterExcerpt(Record):
    excerpt: str


class RoadmapOverview(Record):
    title: str = Field(min_length=1)
    content_type: ContentType = ContentType.ROADMAP
    slug: str = Field(min_length=1)
    excerpt: str
    metadata: ContentMetadata
    contents: Tuple[CourseSummary, ...] = ()
    chapters: Tuple[ChapterExcerpt, ...] = ()


class TutorialArticle(Record):
    title: str = Field(min_length=1)
    content_type: ContentType = ContentType.TUTORIAL
    slug: str = Field(min_length=1)
    excerpt: str
    author: str | None = None
    metadata: ContentMetadata
    body: str


Content = RoadmapOverview | TutorialArticle
