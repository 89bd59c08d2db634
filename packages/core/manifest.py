from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import AliasChoices, BaseModel, Field, ValidationError

from packages.core.doc_tree import DocFile, DocFolder, DocTree, to_display_name

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Docshelf"


class ManifestError(ValueError):
    """Raised when the docs manifest is missing or malformed."""


class ManifestFile(BaseModel):
    name: str
    display_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("display_name", "displayName")
    )
    folder: Optional[str] = None


class ManifestFolder(BaseModel):
    name: str
    display_name: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("display_name", "displayName")
    )
    full_path: Optional[str] = Field(
        default=None, validation_alias=AliasChoices("full_path", "fullPath")
    )
    icon: Optional[str] = None
    files: List[Union[str, ManifestFile]] = Field(default_factory=list)
    folders: List[ManifestFolder] = Field(
        default_factory=list,
        validation_alias=AliasChoices("folders", "sub_folders", "subFolders"),
    )


class Manifest(BaseModel):
    title: Optional[str] = None
    root_files: List[Union[str, ManifestFile]] = Field(
        default_factory=list,
        validation_alias=AliasChoices("root_files", "rootFiles"),
    )
    folders: List[ManifestFolder] = Field(default_factory=list)


def _build_file(entry: Union[str, ManifestFile], folder: str | None) -> DocFile:
    if isinstance(entry, str):
        entry = ManifestFile(name=entry)
    return DocFile(
        name=entry.name,
        display_name=entry.display_name or to_display_name(entry.name),
        folder=entry.folder or folder,
    )


def _build_folder(node: ManifestFolder, parent_path: str | None) -> DocFolder:
    full_path = node.full_path or (
        f"{parent_path}/{node.name}" if parent_path else node.name
    )
    display_name = node.display_name or to_display_name(node.name)
    if node.icon and not node.display_name:
        display_name = f"{node.icon} {display_name}"
    return DocFolder(
        name=node.name,
        display_name=display_name,
        full_path=full_path,
        icon=node.icon,
        files=tuple(_build_file(f, full_path) for f in node.files),
        sub_folders=tuple(_build_folder(sub, full_path) for sub in node.folders),
    )


def build_tree(data: dict | None, title: str | None = None) -> DocTree:
    """Build the immutable DocTree from an already-parsed manifest mapping."""
    try:
        manifest = Manifest.model_validate(data or {})
    except ValidationError as exc:
        raise ManifestError(f"Invalid docs manifest: {exc}") from exc
    return DocTree(
        root_files=tuple(_build_file(f, None) for f in manifest.root_files),
        folders=tuple(_build_folder(f, None) for f in manifest.folders),
        title=title or manifest.title or DEFAULT_TITLE,
    )


def load_manifest(path: str | Path, title: str | None = None) -> DocTree:
    """Read a YAML manifest from disk and build the DocTree."""
    manifest_path = Path(path)
    try:
        raw = manifest_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"Docs manifest not found: {manifest_path}") from exc
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ManifestError(f"Docs manifest is not valid YAML: {exc}") from exc
    if data is not None and not isinstance(data, dict):
        raise ManifestError("Docs manifest must be a mapping at the top level")
    tree = build_tree(data, title=title)
    logger.info("Loaded docs manifest %s", manifest_path)
    return tree


__all__ = [
    "ManifestError",
    "Manifest",
    "ManifestFolder",
    "ManifestFile",
    "build_tree",
    "load_manifest",
]
