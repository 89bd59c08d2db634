from fastapi import APIRouter, Depends, HTTPException, status

from apps.api import schemas
from apps.api.deps import get_document_store
from packages.content import (
    DocumentNotFound,
    DocumentStore,
    DocumentUnreadable,
    render_markdown,
)
from packages.core import DocRoute, parse_doc_route

router = APIRouter(prefix="/documents", tags=["documents"])


def _route_or_404(doc_path: str) -> DocRoute:
    route = parse_doc_route(f"/docs/{doc_path}")
    if route is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Document not found"
        )
    return route


@router.get("/{doc_path:path}", response_model=schemas.DocumentResponse)
def read_document(
    doc_path: str, store: DocumentStore = Depends(get_document_store)
) -> schemas.DocumentResponse:
    route = _route_or_404(doc_path)
    try:
        text = store.read(route)
    except DocumentUnreadable:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Document could not be read"
        )
    except DocumentNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Document not found"
        )
    rendered = render_markdown(text)
    return schemas.DocumentResponse(
        link=route.link,
        folder=route.folder,
        name=route.file_name,
        markdown=text,
        html=rendered.html,
        headings=[
            schemas.HeadingResponse(level=h.level, text=h.text, id=h.id)
            for h in rendered.headings
        ],
    )
