"""
Contact message endpoints.
Public site posts new messages here; the admin dashboard lists and moderates them.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from dependencies import get_message_store
from errors import ValidationError
from models import MESSAGE_STATUSES, ContactMessage, MessageStatus, new_message_id, utc_timestamp
from storage import MessageRepository
from utils.validation import sanitize, validate_contact

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact-messages", tags=["contact"])


@router.post("", status_code=201)
def create_message(
    payload: dict = Body(...),
    store: MessageRepository = Depends(get_message_store)
):
    """Validate, sanitize and store a contact form submission."""
    errors = validate_contact(payload)
    if errors:
        logger.info("Contact form rejected: %s", errors)
        raise ValidationError(errors)

    message = ContactMessage(
        id=new_message_id(),
        full_name=sanitize(payload["fullName"]),
        email=sanitize(payload["email"]),
        inquiry_type=payload["inquiryType"],
        message=sanitize(payload["message"]),
        timestamp=utc_timestamp(),
    )
    store.append(message)

    return {
        "success": True,
        "message": "Contact message received successfully",
        "data": {"id": message.id},
    }


@router.get("")
def list_messages(
    status: Optional[MessageStatus] = Query(None),
    store: MessageRepository = Depends(get_message_store)
):
    """All messages, newest first. Counts always cover the whole collection."""
    messages = store.list_messages()
    meta = {
        "total": len(messages),
        "unread": sum(1 for m in messages if m.status == "unread"),
    }
    if status:
        messages = [m for m in messages if m.status == status]

    return {
        "success": True,
        "data": [m.to_dict() for m in messages],
        "meta": meta,
    }


@router.get("/{message_id}")
def get_message(message_id: str, store: MessageRepository = Depends(get_message_store)):
    return {"success": True, "data": store.get(message_id).to_dict()}


@router.patch("/{message_id}")
def update_message(
    message_id: str,
    payload: dict = Body(...),
    store: MessageRepository = Depends(get_message_store)
):
    """Mark read/unread and/or replied. Other fields cannot change."""
    status = payload.get("status")
    replied = payload.get("replied")

    errors = []
    if status is not None and status not in MESSAGE_STATUSES:
        errors.append("Status must be one of: " + ", ".join(MESSAGE_STATUSES))
    if replied is not None and not isinstance(replied, bool):
        errors.append("Replied must be true or false")
    if errors:
        raise ValidationError(errors)

    updated = store.update(message_id, status=status, replied=replied)
    return {
        "success": True,
        "message": "Contact message updated successfully",
        "data": updated.to_dict(),
    }


@router.delete("/{message_id}")
def delete_message(message_id: str, store: MessageRepository = Depends(get_message_store)):
    store.delete(message_id)
    return {"success": True, "message": "Contact message deleted successfully"}
