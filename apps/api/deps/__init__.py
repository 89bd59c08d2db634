from fastapi import Request, Response

from packages.content import DocumentStore
from packages.core import DocTree, NavSession


def get_tree(request: Request) -> DocTree:
    return request.app.state.doc_tree


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store


def resolve_nav_session(request: Request) -> NavSession:
    cookie_name = request.app.state.config.nav_cookie
    return request.app.state.nav_sessions.resolve(request.cookies.get(cookie_name))


def remember_nav_session(
    request: Request, response: Response, session: NavSession
) -> None:
    """Hand a freshly created session id back to the browser."""
    if not session.created:
        return
    response.set_cookie(
        request.app.state.config.nav_cookie,
        session.id,
        httponly=True,
        samesite="lax",
    )


def get_nav_session(request: Request, response: Response) -> NavSession:
    session = resolve_nav_session(request)
    remember_nav_session(request, response, session)
    return session
