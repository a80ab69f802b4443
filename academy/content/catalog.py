# Every record the site serves, keyed by language.
# Adding content means importing its module here.
from academy.content.roadmaps.beginner_dapp_roadmap.en import overview as beginner_dapp_roadmap_en
from academy.content.roadmaps.beginner_dapp_roadmap.es import overview as beginner_dapp_roadmap_es
from academy.content.tutorials.hello_cadence.en import article as hello_cadence_en

ENTRIES = (
    ("en", beginner_dapp_roadmap_en.overview),
    ("es", beginner_dapp_roadmap_es.overview),
    ("en", hello_cadence_en.article),
)
