from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class DocFile:
    name: str
    display_name: str
    folder: str | None = None


@dataclass(frozen=True)
class DocFolder:
    name: str
    display_name: str
    full_path: str
    files: tuple[DocFile, ...] = ()
    sub_folders: tuple[DocFolder, ...] = ()
    icon: str | None = None


@dataclass(frozen=True)
class DocTree:
    root_files: tuple[DocFile, ...] = ()
    folders: tuple[DocFolder, ...] = ()
    title: str = "Docshelf"


def to_display_name(slug: str) -> str:
    """Turn a file/folder slug into a readable label (README stays README)."""
    if slug == slug.upper():
        return slug
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), slug.replace("-", " "))


def build_path_for_file(file: DocFile) -> str:
    """Return the tree-relative path of a file, e.g. ``core/guard``."""
    if file.folder:
        return f"{file.folder}/{file.name}"
    return file.name


def count_files(folder: DocFolder) -> int:
    """Count every file under ``folder``, nested folders included."""
    return len(folder.files) + sum(count_files(sub) for sub in folder.sub_folders)


def iter_folders(tree: DocTree) -> Iterator[DocFolder]:
    def walk(folder: DocFolder) -> Iterator[DocFolder]:
        yield folder
        for sub in folder.sub_folders:
            yield from walk(sub)

    for folder in tree.folders:
        yield from walk(folder)


def iter_files(tree: DocTree) -> Iterator[DocFile]:
    """Yield root files, then each folder's files depth-first in stored order."""
    yield from tree.root_files
    for folder in iter_folders(tree):
        yield from folder.files


def find_folder(tree: DocTree, full_path: str) -> DocFolder | None:
    for folder in iter_folders(tree):
        if folder.full_path == full_path:
            return folder
    return None


__all__ = [
    "DocFile",
    "DocFolder",
    "DocTree",
    "to_display_name",
    "build_path_for_file",
    "count_files",
    "iter_folders",
    "iter_files",
    "find_folder",
]
