"""Sidebar view models built from the doc tree and a viewer's expand state.

Templates and the JSON API both consume :class:`Navigation`. ``visible_rows``
flattens it into the rows a sidebar actually shows, honoring collapsed
folders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Callable, Iterator, Union

from packages.core.counts import total_document_count
from packages.core.doc_tree import DocFile, DocFolder, DocTree, count_files
from packages.core.paths import is_active, link_for
from packages.core.tree_state import TreeStateStore


@dataclass(frozen=True)
class NavFile:
    file: DocFile
    link: str
    active: bool


@dataclass
class NavFolder:
    folder: DocFolder
    count: int
    expanded: bool
    toggle: Callable[[], bool]
    files: list[NavFile] = field(default_factory=list)
    sub_folders: list[NavFolder] = field(default_factory=list)

    @property
    def full_path(self) -> str:
        return self.folder.full_path


NavNode = Union[NavFile, NavFolder]


@dataclass(frozen=True)
class NavRow:
    depth: int
    node: NavNode

    @property
    def is_folder(self) -> bool:
        return isinstance(self.node, NavFolder)


@dataclass
class Navigation:
    location: str
    total: int
    root_files: list[NavFile] = field(default_factory=list)
    folders: list[NavFolder] = field(default_factory=list)


def _nav_file(file: DocFile, current_location: str) -> NavFile:
    link = link_for(file)
    return NavFile(file=file, link=link, active=is_active(link, current_location))


def _nav_folder(
    folder: DocFolder, state: TreeStateStore, current_location: str
) -> NavFolder:
    return NavFolder(
        folder=folder,
        count=count_files(folder),
        expanded=state.is_expanded(folder.full_path),
        toggle=partial(state.toggle, folder.full_path),
        files=[_nav_file(f, current_location) for f in folder.files],
        sub_folders=[
            _nav_folder(sub, state, current_location) for sub in folder.sub_folders
        ],
    )


def build_nav(
    tree: DocTree, state: TreeStateStore, current_location: str
) -> Navigation:
    """Snapshot the sidebar for one viewer at ``current_location``."""
    return Navigation(
        location=current_location,
        total=total_document_count(tree),
        root_files=[_nav_file(f, current_location) for f in tree.root_files],
        folders=[_nav_folder(f, state, current_location) for f in tree.folders],
    )


def _walk(node: NavNode, depth: int) -> Iterator[NavRow]:
    yield NavRow(depth=depth, node=node)
    if isinstance(node, NavFolder) and node.expanded:
        for child in [*node.files, *node.sub_folders]:
            yield from _walk(child, depth + 1)


def visible_rows(navigation: Navigation) -> Iterator[NavRow]:
    """Depth-first rows; a collapsed folder contributes only its own row."""
    for node in [*navigation.root_files, *navigation.folders]:
        yield from _walk(node, 0)


__all__ = [
    "NavFile",
    "NavFolder",
    "NavNode",
    "NavRow",
    "Navigation",
    "build_nav",
    "visible_rows",
]
