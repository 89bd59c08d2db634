from __future__ import annotations

import logging
from pathlib import Path

from packages.core.paths import DocRoute

logger = logging.getLogger(__name__)

WELCOME_MARKDOWN = """# Welcome

Pick a document from the sidebar to start reading.

Folders open and close independently; the badge next to each folder counts
every document inside it, nested folders included.
"""


class DocumentNotFound(LookupError):
    """Raised when a route does not map to a readable markdown file."""


class DocumentUnreadable(DocumentNotFound):
    """The file exists but its bytes are not valid UTF-8."""


class DocumentStore:
    """Reads ``{root}/{folder...}/{file}.md`` for a parsed /docs route."""

    def __init__(self, root: str | Path, suffix: str = ".md"):
        self.root = Path(root)
        self.suffix = suffix

    def path_for(self, route: DocRoute) -> Path:
        segments = [*route.folder_parts, route.file_name]
        for segment in segments:
            if segment in {"", ".", ".."} or "\\" in segment or ":" in segment:
                raise DocumentNotFound(f"Invalid path segment: {segment!r}")
        candidate = self.root.joinpath(*route.folder_parts, route.file_name + self.suffix)
        if not candidate.resolve().is_relative_to(self.root.resolve()):
            raise DocumentNotFound(f"Path escapes docs root: {route.link}")
        return candidate

    def read(self, route: DocRoute) -> str:
        path = self.path_for(route)
        if not path.is_file():
            logger.info("Document not found for %s (%s)", route.link, path)
            raise DocumentNotFound(f"Document not found: {route.link}")
        try:
            return path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            logger.warning("Document %s is not valid UTF-8: %s", path, exc)
            raise DocumentUnreadable(f"Document could not be read: {route.link}") from exc


__all__ = ["WELCOME_MARKDOWN", "DocumentNotFound", "DocumentUnreadable", "DocumentStore"]
