from academy.content.slug import generate_slug
from academy.content.types import (
    ChapterExcerpt,
    ContentMetadata,
    ContentType,
    CourseSummary,
    Expertise,
    RoadmapOverview,
    Subject,
)

overview = RoadmapOverview(
    title="Beginner Dapp Roadmap",
    content_type=ContentType.ROADMAP,
    slug=generate_slug(__name__),
    excerpt="Lorem ipsum dolor sit amet.",
    metadata=ContentMetadata(
        expertise=Expertise.BEGINNER,
        duration="3 chapters",
        prerequisites=("javascript",),
        subjects=(Subject.CADENCE,),
    ),
    contents=(
        CourseSummary(
            title="Beginner Cadence Course",
            excerpt="Lorem ipsum",
            content_type=ContentType.COURSE,
            duration="4 chapters",
            subjects=(Subject.CADENCE,),
            url="catalog/courses/beginner-cadence",
        ),
        CourseSummary(
            title="Basic Dapp",
            excerpt="Lorem ipsum",
            content_type=ContentType.COURSE,
            duration="4 chapters",
            subjects=(Subject.CADENCE,),
            url="catalog/courses/basic-dapp",
        ),
    ),
    chapters=(
        ChapterExcerpt(excerpt="This is the first chapter"),
        ChapterExcerpt(excerpt="This is the second chapter"),
        ChapterExcerpt(excerpt="This is the third chapter"),
    ),
)
