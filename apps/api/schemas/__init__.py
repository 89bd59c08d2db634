from apps.api.schemas.models import (
    DocFileResponse,
    DocFolderResponse,
    DocTreeResponse,
    DocumentResponse,
    HeadingResponse,
    NavFileResponse,
    NavFolderResponse,
    NavResponse,
    NavRowResponse,
    ToggleRequest,
    ToggleResponse,
)

__all__ = [
    "DocFileResponse",
    "DocFolderResponse",
    "DocTreeResponse",
    "DocumentResponse",
    "HeadingResponse",
    "NavFileResponse",
    "NavFolderResponse",
    "NavResponse",
    "NavRowResponse",
    "ToggleRequest",
    "ToggleResponse",
]
