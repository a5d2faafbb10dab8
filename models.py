"""
Data models for persisted contact messages.
"""
import secrets
import string
import time
from datetime import datetime, timezone
from typing import Literal, get_args
from pydantic import BaseModel, ConfigDict, Field

InquiryType = Literal["general", "membership", "sponsorship", "collaboration"]
MessageStatus = Literal["unread", "read"]

INQUIRY_TYPES = get_args(InquiryType)
MESSAGE_STATUSES = get_args(MessageStatus)


class ContactMessage(BaseModel):
    """One inquiry submitted through the public contact form."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    full_name: str = Field(alias="fullName")
    email: str
    inquiry_type: InquiryType = Field(alias="inquiryType")
    message: str
    timestamp: str  # ISO-8601, UTC
    status: MessageStatus = "unread"
    replied: bool = False

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys used on disk and over HTTP."""
        return self.model_dump(by_alias=True)


_ID_ALPHABET = string.digits + string.ascii_lowercase


def new_message_id() -> str:
    """Time-based id with a random suffix, e.g. msg_1718000000000_k3j9x0a1b."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"msg_{int(time.time() * 1000)}_{suffix}"


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
