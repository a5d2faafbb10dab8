"""
Message store factory.
Creates the contact message repository configured for this process.
"""
from pathlib import Path
from typing import Optional

from .base import MessageRepository


def create_message_store(path: Optional[Path] = None) -> MessageRepository:
    """
    Factory function for the contact message repository.

    Messages live in a single JSON file (CONTACTS_FILE, default data/contacts.json).
    The file does not need to exist; it is created on the first write.
    """
    from config import CONTACTS_FILE
    from .json_store import JsonMessageStore
    return JsonMessageStore(path or CONTACTS_FILE)
