from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class DocFileResponse(BaseModel):
    name: str
    display_name: str
    folder: Optional[str] = None
    link: str


class DocFolderResponse(BaseModel):
    name: str
    display_name: str
    full_path: str
    icon: Optional[str] = None
    count: int
    files: List[DocFileResponse] = Field(default_factory=list)
    sub_folders: List[DocFolderResponse] = Field(default_factory=list)


class DocTreeResponse(BaseModel):
    title: str
    total: int
    root_files: List[DocFileResponse] = Field(default_factory=list)
    folders: List[DocFolderResponse] = Field(default_factory=list)


class NavFileResponse(BaseModel):
    name: str
    display_name: str
    link: str
    active: bool


class NavFolderResponse(BaseModel):
    full_path: str
    display_name: str
    count: int
    expanded: bool
    files: List[NavFileResponse] = Field(default_factory=list)
    sub_folders: List[NavFolderResponse] = Field(default_factory=list)


class NavRowResponse(BaseModel):
    depth: int
    kind: str
    label: str
    target: str


class NavResponse(BaseModel):
    location: str
    total: int
    expanded: List[str] = Field(default_factory=list)
    root_files: List[NavFileResponse] = Field(default_factory=list)
    folders: List[NavFolderResponse] = Field(default_factory=list)
    rows: List[NavRowResponse] = Field(default_factory=list)


class ToggleRequest(BaseModel):
    path: str


class ToggleResponse(BaseModel):
    path: str
    expanded: bool


class HeadingResponse(BaseModel):
    level: int
    text: str
    id: str


class DocumentResponse(BaseModel):
    link: str
    folder: Optional[str] = None
    name: str
    markdown: str
    html: str
    headings: List[HeadingResponse] = Field(default_factory=list)
