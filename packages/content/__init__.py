from packages.content.render import (
    Crumb,
    Heading,
    RenderedDocument,
    breadcrumbs,
    highlight_css,
    render_markdown,
)
from packages.content.store import (
    WELCOME_MARKDOWN,
    DocumentNotFound,
    DocumentStore,
    DocumentUnreadable,
)

__all__ = [
    "Crumb",
    "Heading",
    "RenderedDocument",
    "breadcrumbs",
    "highlight_css",
    "render_markdown",
    "WELCOME_MARKDOWN",
    "DocumentNotFound",
    "DocumentStore",
    "DocumentUnreadable",
]
