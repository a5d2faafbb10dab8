"""
Abstract base class for contact message repositories.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from models import INQUIRY_TYPES, ContactMessage


class MessageRepository(ABC):
    """Abstract base class for contact message storage backends."""

    @abstractmethod
    def list_messages(self) -> List[ContactMessage]:
        """Return every message, newest first. Never raises on a missing store."""
        pass

    @abstractmethod
    def get(self, message_id: str) -> ContactMessage:
        """Return one message or raise NotFoundError."""
        pass

    @abstractmethod
    def append(self, message: ContactMessage) -> ContactMessage:
        """Persist a new message at the front of the collection."""
        pass

    @abstractmethod
    def update(
        self,
        message_id: str,
        status: Optional[str] = None,
        replied: Optional[bool] = None
    ) -> ContactMessage:
        """Change the mutable fields of a message and persist. Raises NotFoundError."""
        pass

    @abstractmethod
    def delete(self, message_id: str) -> None:
        """Remove a message and persist the remainder. Raises NotFoundError."""
        pass

    def update_status(self, message_id: str, status: str) -> ContactMessage:
        """Mark a message read or unread."""
        return self.update(message_id, status=status)

    def update_replied(self, message_id: str, replied: bool) -> ContactMessage:
        """Set or clear the replied flag."""
        return self.update(message_id, replied=replied)

    def stats(self) -> dict:
        """Counts over the whole collection."""
        messages = self.list_messages()
        by_type = {}
        for inquiry_type in INQUIRY_TYPES:
            by_type[inquiry_type] = sum(1 for m in messages if m.inquiry_type == inquiry_type)
        unread = sum(1 for m in messages if m.status == "unread")
        return {
            "total": len(messages),
            "unread": unread,
            "read": len(messages) - unread,
            "replied": sum(1 for m in messages if m.replied),
            "byInquiryType": by_type,
        }
