from fastapi import APIRouter, Depends

from apps.api import schemas
from apps.api.deps import get_tree
from packages.core import (
    DocFile,
    DocFolder,
    DocTree,
    count_files,
    link_for,
    total_document_count,
)

router = APIRouter(prefix="/tree", tags=["tree"])


def _serialize_file(file: DocFile) -> schemas.DocFileResponse:
    return schemas.DocFileResponse(
        name=file.name,
        display_name=file.display_name,
        folder=file.folder,
        link=link_for(file),
    )


def _serialize_folder(folder: DocFolder) -> schemas.DocFolderResponse:
    return schemas.DocFolderResponse(
        name=folder.name,
        display_name=folder.display_name,
        full_path=folder.full_path,
        icon=folder.icon,
        count=count_files(folder),
        files=[_serialize_file(f) for f in folder.files],
        sub_folders=[_serialize_folder(sub) for sub in folder.sub_folders],
    )


@router.get("", response_model=schemas.DocTreeResponse)
def read_tree(tree: DocTree = Depends(get_tree)) -> schemas.DocTreeResponse:
    return schemas.DocTreeResponse(
        title=tree.title,
        total=total_document_count(tree),
        root_files=[_serialize_file(f) for f in tree.root_files],
        folders=[_serialize_folder(f) for f in tree.folders],
    )
