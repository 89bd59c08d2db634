from fastapi import APIRouter, Depends

from apps.api import schemas
from apps.api.deps import get_nav_session, get_tree
from packages.core import DocTree, NavSession
from packages.core.nav import NavFile, NavFolder, NavRow, build_nav, visible_rows

router = APIRouter(prefix="/nav", tags=["nav"])


def _serialize_file(node: NavFile) -> schemas.NavFileResponse:
    return schemas.NavFileResponse(
        name=node.file.name,
        display_name=node.file.display_name,
        link=node.link,
        active=node.active,
    )


def _serialize_folder(node: NavFolder) -> schemas.NavFolderResponse:
    return schemas.NavFolderResponse(
        full_path=node.full_path,
        display_name=node.folder.display_name,
        count=node.count,
        expanded=node.expanded,
        files=[_serialize_file(f) for f in node.files],
        sub_folders=[_serialize_folder(sub) for sub in node.sub_folders],
    )


def _serialize_row(row: NavRow) -> schemas.NavRowResponse:
    if isinstance(row.node, NavFolder):
        return schemas.NavRowResponse(
            depth=row.depth,
            kind="folder",
            label=row.node.folder.display_name,
            target=row.node.full_path,
        )
    return schemas.NavRowResponse(
        depth=row.depth,
        kind="file",
        label=row.node.file.display_name,
        target=row.node.link,
    )


@router.get("", response_model=schemas.NavResponse)
async def read_nav(
    location: str = "/",
    tree: DocTree = Depends(get_tree),
    session: NavSession = Depends(get_nav_session),
) -> schemas.NavResponse:
    navigation = build_nav(tree, session.store, location)
    return schemas.NavResponse(
        location=navigation.location,
        total=navigation.total,
        expanded=sorted(session.store.expanded),
        root_files=[_serialize_file(f) for f in navigation.root_files],
        folders=[_serialize_folder(f) for f in navigation.folders],
        rows=[_serialize_row(row) for row in visible_rows(navigation)],
    )


@router.post("/toggle", response_model=schemas.ToggleResponse)
async def toggle_folder(
    payload: schemas.ToggleRequest,
    session: NavSession = Depends(get_nav_session),
) -> schemas.ToggleResponse:
    expanded = session.store.toggle(payload.path)
    return schemas.ToggleResponse(path=payload.path, expanded=expanded)
