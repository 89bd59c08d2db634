from __future__ import annotations

from dataclasses import dataclass

from packages.core.doc_tree import DocFile, build_path_for_file

DOCS_ROUTE_PREFIX = "/docs/"


@dataclass(frozen=True)
class DocRoute:
    folder_parts: tuple[str, ...]
    file_name: str

    @property
    def folder(self) -> str | None:
        return "/".join(self.folder_parts) or None

    @property
    def link(self) -> str:
        return DOCS_ROUTE_PREFIX + "/".join((*self.folder_parts, self.file_name))


def link_for(file: DocFile) -> str:
    """Route path for a file; stable for a given position in the tree."""
    return DOCS_ROUTE_PREFIX + build_path_for_file(file)


def is_active(link: str, current_location: str) -> bool:
    # Exact match only: a folder is never active because a descendant is open.
    return link == current_location


def parse_doc_route(pathname: str) -> DocRoute | None:
    """Split ``/docs/a/b/file`` into folder segments and the trailing file name."""
    segments = [part for part in pathname.split("/") if part]
    if len(segments) < 2 or segments[0] != DOCS_ROUTE_PREFIX.strip("/"):
        return None
    return DocRoute(folder_parts=tuple(segments[1:-1]), file_name=segments[-1])


__all__ = ["DOCS_ROUTE_PREFIX", "DocRoute", "link_for", "is_active", "parse_doc_route"]
