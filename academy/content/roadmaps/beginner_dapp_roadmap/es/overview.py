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
    title="Ruta de Dapp para principiantes",
    content_type=ContentType.ROADMAP,
    slug=generate_slug(__name__),
    excerpt="Lorem ipsum dolor sit amet.",
    metadata=ContentMetadata(
        expertise=Expertise.BEGINNER,
        duration="3 capítulos",
        prerequisites=("javascript",),
        subjects=(Subject.CADENCE,),
    ),
    contents=(
        CourseSummary(
            title="Curso de Cadence para principiantes",
            excerpt="Lorem ipsum",
            content_type=ContentType.COURSE,
            duration="4 capítulos",
            subjects=(Subject.CADENCE,),
            url="catalog/courses/beginner-cadence",
        ),
        CourseSummary(
            title="Dapp básica",
            excerpt="Lorem ipsum",
            content_type=ContentType.COURSE,
            duration="4 capítulos",
            subjects=(Subject.CADENCE,),
            url="catalog/courses/basic-dapp",
        ),
    ),
    chapters=(
        ChapterExcerpt(excerpt="Este es el primer capítulo"),
        ChapterExcerpt(excerpt="Este es el segundo capítulo"),
        ChapterExcerpt(excerpt="Este es el tercer capítulo"),
    ),
)
