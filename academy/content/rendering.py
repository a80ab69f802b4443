# Markdown -> HTML for tutorial articles
import re
from typing import List, NamedTuple

from markdown_it import MarkdownIt
from markupsafe import Markup

TOC_LEVELS = ("h2", "h3")

_ANCHOR_STRIP = re.compile(r"[^\w\- ]+")


class Heading(NamedTuple):
    level: int
    title: str
    anchor: str


def _md() -> MarkdownIt:
    return MarkdownIt("js-default")  # disables raw HTML parsing vs commonmark


def heading_anchor(title: str) -> str:
    text = _ANCHOR_STRIP.sub("", title.strip().lower())
    return re.sub(r"[\s_]+", "-", text).strip("-")


def _tag_headings(tokens) -> List[Heading]:
    """Give each h2/h3 a unique id and collect them in document order."""
    headings: List[Heading] = []
    used: set[str] = set()
    for i, tok in enumerate(tokens):
        if tok.type != "heading_open" or tok.tag not in TOC_LEVELS:
            continue
        title = tokens[i + 1].content
        base = heading_anchor(title) or f"section-{len(headings) + 1}"
        anchor, n = base, 0
        while anchor in used:
            n += 1
            anchor = f"{base}-{n}"
        used.add(anchor)
        tok.attrSet("id", anchor)
        headings.append(Heading(level=int(tok.tag[1]), title=title, anchor=anchor))
    return headings


def render_markdown(text: str) -> Markup:
    md = _md()
    env: dict = {}
    tokens = md.parse(text, env)
    _tag_headings(tokens)
    return Markup(md.renderer.render(tokens, md.options, env))  # mark as safe for Jinja


def table_of_contents(text: str) -> List[Heading]:
    return _tag_headings(_md().parse(text))
