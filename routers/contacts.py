# routers/contacts.py

from fastapi import APIRouter, Depends, Query
from typing import Optional

from core.permission_helpers import requires_page, require_school_access, load_school_row
from core.permissions import PageKey
from core.supabase_helpers import select_rows, insert_row, update_row, delete_row
from dependencies.auth import CurrentUser
from models.contact import ContactCreate, ContactUpdate
from models.enums import ContactCategory


TABLE = "contact_data"

router = APIRouter(
    prefix="/contact-data",
    tags=["Contacts"],
)

guard = requires_page(PageKey.contacten)


@router.get("", summary="List contacts for a school")
def list_contacts(
    school_id: str = Query(..., alias="schoolId"),
    category: Optional[ContactCategory] = None,
    current_user: CurrentUser = Depends(guard),
):
    require_school_access(current_user, school_id)
    rows = select_rows(
        TABLE,
        {"school_id": school_id, "category": category.value if category else None},
        order="name",
    )
    return {"success": True, "data": rows}


@router.post("", summary="Create a contact", status_code=201)
def create_contact(payload: ContactCreate, current_user: CurrentUser = Depends(guard)):
    require_school_access(current_user, payload.school_id)
    return insert_row(TABLE, payload.model_dump(mode="json"), "Contact")


@router.patch("/{contact_id}", summary="Update a contact")
def update_contact(contact_id: str, payload: ContactUpdate, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, TABLE, contact_id, "Contact")
    return update_row(TABLE, contact_id, payload.model_dump(mode="json", exclude_unset=True), "Contact")


@router.delete("/{contact_id}", summary="Delete a contact")
def delete_contact(contact_id: str, current_user: CurrentUser = Depends(guard)):
    load_school_row(current_user, TABLE, contact_id, "Contact")
    delete_row(TABLE, contact_id, "Contact")
    return {"success": True}
