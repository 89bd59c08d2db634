from packages.core.counts import folder_counts, total_document_count
from packages.core.doc_tree import (
    DocFile,
    DocFolder,
    DocTree,
    build_path_for_file,
    count_files,
    find_folder,
    iter_files,
    iter_folders,
    to_display_name,
)
from packages.core.paths import DocRoute, is_active, link_for, parse_doc_route
from packages.core.tree_state import NavSession, NavSessionRegistry, TreeStateStore

__all__ = [
    "DocFile",
    "DocFolder",
    "DocTree",
    "DocRoute",
    "NavSession",
    "NavSessionRegistry",
    "TreeStateStore",
    "build_path_for_file",
    "count_files",
    "find_folder",
    "folder_counts",
    "is_active",
    "iter_files",
    "iter_folders",
    "link_for",
    "parse_doc_route",
    "to_display_name",
    "total_document_count",
]
