# routers/documents.py

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional

from core.logging_config import logger
from core.permission_helpers import requires_page, require_school_access, load_school_row
from core.permissions import PageKey
from core.supabase_helpers import select_rows, insert_row, update_row, delete_row
from dependencies.auth import CurrentUser
from models.document import FolderCreate, DocumentUpdate


FOLDERS_TABLE = "folders"
DOCUMENTS_TABLE = "documents"

# Folders and documents share the documenten page.
router = APIRouter(tags=["Documents"])

guard = requires_page(PageKey.documenten)


# ============================================================
# FOLDERS
# ============================================================
@router.get("/folders", summary="List document folders for a school")
def list_folders(
    school_id: str = Query(..., alias="schoolId"),
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    rows = select_rows(FOLDERS_TABLE, {"school_id": school_id}, order="name")
    return {"success": True, "data": rows}


@router.post("/folders", summary="Create a folder", status_code=201)
def create_folder(payload: FolderCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)
    return insert_row(FOLDERS_TABLE, payload.model_dump(), "Folder")


@router.delete("/folders/{folder_id}", summary="Delete a folder")
def delete_folder(folder_id: str, current_user: CurrentUser = Depends(guard)):
    """Documents in the folder stay; their folder_id is set to null by the DB."""
    load_school_row(current_user, FOLDERS_TABLE, folder_id, "Folder")
    delete_row(FOLDERS_TABLE, folder_id, "Folder")
    return {"success": True}


# ============================================================
# DOCUMENTS
# ============================================================
@router.get(
    "/documents",
    summary="List documents",
    description="""
    **Permissions:** Requires the `documenten` page and access to the school.

    Filter by `folderId`, or by `module` + `entityId` for documents attached
    to another record (e.g. a maintenance task or a quote).
    """,
)
def list_documents(
    school_id: str = Query(..., alias="schoolId"),
    folder_id: Optional[str] = Query(None, alias="folderId"),
    module: Optional[str] = None,
    entity_id: Optional[str] = Query(None, alias="entityId"),
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)

    if entity_id and not module:
        raise HTTPException(400, "entityId requires module")

    rows = select_rows(
        DOCUMENTS_TABLE,
        {
            "school_id": school_id,
            "folder_id": folder_id,
            "module": module,
            "entity_id": entity_id,
        },
        order="created_at",
        desc=True,
    )
    return {"success": True, "data": rows}


@router.patch("/documents/{document_id}", summary="Update document metadata")
def update_document(
    document_id: str,
    payload: DocumentUpdate,
    current_user: CurrentUser = Depends(guard),
):
    document = load_school_row(current_user, DOCUMENTS_TABLE, document_id, "Document")
    changes = payload.model_dump(exclude_unset=True)

    folder_id = changes.get("folder_id")
    if folder_id:
        folder = load_school_row(current_user, FOLDERS_TABLE, folder_id, "Folder")
        if folder.get("school_id") != document.get("school_id"):
            raise HTTPException(400, "Folder belongs to a different school")

    return update_row(DOCUMENTS_TABLE, document_id, changes, "Document")


@router.delete("/documents/{document_id}", summary="Delete a document record")
def delete_document(document_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, DOCUMENTS_TABLE, document_id, "Document")
    delete_row(DOCUMENTS_TABLE, document_id, "Document")
    logger.info(f"Document {document_id} deleted by {current_user.id}")
    return {"success": True}
