import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.staticfiles import StaticFiles

from apps import site_web
from apps.api.routers import documents, nav, tree
from packages.content import DocumentStore
from packages.core import NavSessionRegistry, total_document_count
from packages.core.config import load_site_config
from packages.core.manifest import ManifestError, load_manifest

logger = logging.getLogger(__name__)


def load_site_state(app: FastAPI) -> None:
    """Build the doc tree once and attach it with the per-viewer state registry."""
    config = load_site_config()
    try:
        doc_tree = load_manifest(config.manifest_path, title=config.site_title)
    except ManifestError:
        logger.exception("Could not load docs manifest %s", config.manifest_path)
        raise
    app.state.config = config
    app.state.doc_tree = doc_tree
    app.state.document_store = DocumentStore(config.docs_dir)
    app.state.nav_sessions = NavSessionRegistry(config.max_nav_sessions)
    logger.info(
        "Serving %s document(s) from %s",
        total_document_count(doc_tree),
        config.docs_dir,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    load_site_state(app)
    yield


# /docs belongs to the documents, so the OpenAPI UI moves under /api.
app = FastAPI(
    title="Docshelf",
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
    openapi_url="/api/openapi.json",
)


app.include_router(tree.router, prefix="/api")
app.include_router(nav.router, prefix="/api")
app.include_router(documents.router, prefix="/api")
app.include_router(site_web.router)
app.mount("/static", StaticFiles(directory=site_web.STATIC_DIR), name="site-static")


@app.get("/healthz", tags=["meta"])
async def healthz(request: Request):
    return JSONResponse(
        {
            "app": "docshelf",
            "status": "ok",
            "documents": total_document_count(request.app.state.doc_tree),
        }
    )
