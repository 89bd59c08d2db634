from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from apps.api.deps import remember_nav_session, resolve_nav_session
from packages.content import (
    WELCOME_MARKDOWN,
    DocumentNotFound,
    DocumentStore,
    DocumentUnreadable,
    RenderedDocument,
    breadcrumbs,
    highlight_css,
    render_markdown,
)
from packages.core import DocRoute, DocTree, iter_files, link_for, parse_doc_route
from packages.core.nav import build_nav, visible_rows

# Template and static asset locations are kept in the data-only site-web folder.
SITE_WEB_ROOT = Path(__file__).resolve().parent / "site-web"
TEMPLATES_DIR = SITE_WEB_ROOT / "templates"
STATIC_DIR = SITE_WEB_ROOT / "static"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(tags=["site-web"], include_in_schema=False)


def _page(
    request: Request, template: str, context: dict, status_code: int = 200
) -> HTMLResponse:
    """Render a page with the sidebar for the caller's nav session."""
    session = resolve_nav_session(request)
    doc_tree: DocTree = request.app.state.doc_tree
    location = request.url.path
    navigation = build_nav(doc_tree, session.store, location)
    response = templates.TemplateResponse(
        request,
        template,
        {
            "site_title": doc_tree.title,
            "location": location,
            "navigation": navigation,
            "nav_rows": list(visible_rows(navigation)),
            **context,
        },
        status_code=status_code,
    )
    remember_nav_session(request, response, session)
    return response


def _display_name(doc_tree: DocTree, link: str) -> str | None:
    for file in iter_files(doc_tree):
        if link_for(file) == link:
            return file.display_name
    return None


def _load_document(store: DocumentStore, route: DocRoute) -> RenderedDocument:
    return render_markdown(store.read(route))


def _safe_next(target: str) -> str:
    if not target.startswith("/") or target.startswith("//") or "\\" in target:
        return "/"
    return target


@lru_cache(maxsize=1)
def _highlight_stylesheet() -> str:
    return highlight_css()


@router.get("/", response_class=HTMLResponse)
async def home(request: Request) -> HTMLResponse:
    return _page(
        request,
        "index.html",
        {"title": "Welcome", "document": render_markdown(WELCOME_MARKDOWN)},
    )


@router.get("/docs/{doc_path:path}", response_class=HTMLResponse)
async def document(request: Request, doc_path: str) -> HTMLResponse:
    route = parse_doc_route(f"/docs/{doc_path}")
    not_found = {"title": "Not found", "crumbs": breadcrumbs(route)}
    if route is None:
        return _page(request, "not_found.html", not_found, status_code=404)
    try:
        # File I/O and rendering stay off the event loop; nav state does not.
        rendered = await run_in_threadpool(
            _load_document, request.app.state.document_store, route
        )
    except DocumentUnreadable:
        not_found["unreadable"] = True
        return _page(request, "not_found.html", not_found, status_code=404)
    except DocumentNotFound:
        return _page(request, "not_found.html", not_found, status_code=404)
    title = _display_name(request.app.state.doc_tree, route.link) or route.file_name
    return _page(
        request,
        "document.html",
        {"title": title, "crumbs": breadcrumbs(route), "document": rendered},
    )


@router.post("/nav/toggle", response_class=RedirectResponse)
async def toggle_folder(request: Request, path: str, next: str = "/") -> RedirectResponse:
    session = resolve_nav_session(request)
    session.store.toggle(path)
    response = RedirectResponse(url=_safe_next(next), status_code=303)
    remember_nav_session(request, response, session)
    return response


@router.get("/assets/highlight.css")
async def highlight_stylesheet() -> Response:
    return Response(_highlight_stylesheet(), media_type="text/css")
