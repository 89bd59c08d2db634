from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import markdown
from markdown.extensions.toc import TocExtension
from pygments.formatters import HtmlFormatter

from packages.core.paths import DocRoute

# Headings deeper than this stay in the document but not in the outline.
OUTLINE_MAX_LEVEL = 4


@dataclass(frozen=True)
class Heading:
    level: int
    text: str
    id: str


@dataclass
class RenderedDocument:
    html: str
    headings: list[Heading] = field(default_factory=list)


@dataclass(frozen=True)
class Crumb:
    label: str
    href: str | None = None


def _flatten_toc(tokens: Iterable[dict]) -> list[Heading]:
    headings: list[Heading] = []
    for token in tokens:
        if token["level"] <= OUTLINE_MAX_LEVEL:
            headings.append(
                Heading(level=token["level"], text=token["name"], id=token["id"])
            )
        headings.extend(_flatten_toc(token.get("children") or []))
    return headings


def render_markdown(text: str) -> RenderedDocument:
    """Render markdown to HTML and collect the heading outline."""
    md = markdown.Markdown(
        extensions=[
            "extra",
            "codehilite",
            TocExtension(toc_depth=f"1-{OUTLINE_MAX_LEVEL}"),
        ],
        extension_configs={"codehilite": {"guess_lang": False}},
        output_format="html",
    )
    html = md.convert(text)
    return RenderedDocument(html=html, headings=_flatten_toc(md.toc_tokens))


def breadcrumbs(route: DocRoute | None) -> list[Crumb]:
    crumbs = [Crumb(label="Home", href="/")]
    if route is None:
        return crumbs
    crumbs.extend(Crumb(label=part) for part in route.folder_parts)
    crumbs.append(Crumb(label=route.file_name))
    return crumbs


def highlight_css(style: str = "default") -> str:
    """Stylesheet for the ``codehilite`` classes emitted by ``render_markdown``."""
    return HtmlFormatter(style=style).get_style_defs(".codehilite")


__all__ = [
    "Heading",
    "RenderedDocument",
    "Crumb",
    "render_markdown",
    "breadcrumbs",
    "highlight_css",
]
