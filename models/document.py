# models/document.py

from typing import Optional
from pydantic import BaseModel, Field


# -------------------------------------------------
# Folders
# -------------------------------------------------
class FolderCreate(BaseModel):
    """Folder names are unique per school (DB constraint)."""
    school_id: str
    name: str = Field(..., min_length=1, max_length=120)


# -------------------------------------------------
# Documents
# -------------------------------------------------
# Rows are written by the upload service; the API only edits metadata.
class DocumentUpdate(BaseModel):
    folder_id: Optional[str] = None
    description: Optional[str] = None
