from __future__ import annotations

from packages.core.doc_tree import DocTree, count_files, iter_folders


def total_document_count(tree: DocTree) -> int:
    """Number of documents in the whole tree (root files plus every folder)."""
    return len(tree.root_files) + sum(count_files(folder) for folder in tree.folders)


def folder_counts(tree: DocTree) -> dict[str, int]:
    """Map each folder's full path to its recursive document count."""
    return {folder.full_path: count_files(folder) for folder in iter_folders(tree)}


__all__ = ["total_document_count", "folder_counts"]
