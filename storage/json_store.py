"""
Contact message storage in a single JSON file.

The whole collection is one pretty-printed JSON array. Every mutation reads
the file, changes the list in memory and writes the full list back.
Records that do not parse are left out of every listing but are written
back untouched, so a mutation never erases data it could not read.
"""
import json
import logging
import os
import tempfile
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Tuple

from pydantic import ValidationError as ModelValidationError

from errors import NotFoundError, PersistenceError
from models import MESSAGE_STATUSES, ContactMessage
from .base import MessageRepository

logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def _sort_key(message: ContactMessage) -> datetime:
    try:
        parsed = datetime.fromisoformat(message.timestamp.replace("Z", "+00:00"))
    except ValueError:
        return _OLDEST
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class JsonMessageStore(MessageRepository):
    """
    JSON file-backed message repository.

    One lock per store serialises read-modify-write cycles inside this
    process. Separate processes writing the same file can still lose updates.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Tuple[List[ContactMessage], list]:
        """
        Load the collection.

        Returns the parsed messages and the raw records that failed to parse.
        Missing, unreadable or corrupt files read as empty.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return [], []
        except UnicodeDecodeError as e:
            logger.warning("Corrupt message file %s, treating as empty: %s", self.path, e)
            return [], []
        except OSError as e:
            logger.warning("Could not read %s: %s", self.path, e)
            return [], []

        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Corrupt message file %s, treating as empty: %s", self.path, e)
            return [], []

        if not isinstance(records, list):
            logger.warning("Message file %s does not hold an array, treating as empty", self.path)
            return [], []

        messages = []
        unparsed = []
        for record in records:
            try:
                messages.append(ContactMessage.model_validate(record))
            except ModelValidationError as e:
                record_id = record.get("id", record.get("_id")) if isinstance(record, dict) else None
                logger.warning("Skipping malformed record %s: %s", record_id, e)
                unparsed.append(record)
        return messages, unparsed

    def _write(self, messages: List[ContactMessage], unparsed: Optional[list] = None):
        """Replace the file with the given collection, unparsed records last."""
        records = [m.to_dict() for m in messages] + list(unparsed or [])
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".contacts-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.exception("Failed to write message file %s", self.path)
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError("Could not save contact messages") from e

    @staticmethod
    def _index_of(messages: List[ContactMessage], message_id: str) -> int:
        for i, message in enumerate(messages):
            if message.id == message_id:
                return i
        logger.info("Contact message %s not found", message_id)
        raise NotFoundError(message_id)

    def list_messages(self) -> List[ContactMessage]:
        with self._lock:
            messages, _ = self._read()
        return sorted(messages, key=_sort_key, reverse=True)

    def get(self, message_id: str) -> ContactMessage:
        with self._lock:
            messages, _ = self._read()
        return messages[self._index_of(messages, message_id)]

    def append(self, message: ContactMessage) -> ContactMessage:
        with self._lock:
            messages, unparsed = self._read()
            messages.insert(0, message)
            self._write(messages, unparsed)
        logger.info("Stored contact message %s (%s)", message.id, message.inquiry_type)
        return message

    def update(
        self,
        message_id: str,
        status: Optional[str] = None,
        replied: Optional[bool] = None
    ) -> ContactMessage:
        if status is not None and status not in MESSAGE_STATUSES:
            raise ValueError(f"Unknown status: {status}")

        with self._lock:
            messages, unparsed = self._read()
            index = self._index_of(messages, message_id)
            changes = {}
            if status is not None:
                changes["status"] = status
            if replied is not None:
                changes["replied"] = bool(replied)
            updated = messages[index].model_copy(update=changes)
            if changes:
                messages[index] = updated
                self._write(messages, unparsed)

        if changes:
            logger.info("Updated contact message %s: %s", message_id, changes)
        return updated

    def delete(self, message_id: str) -> None:
        with self._lock:
            messages, unparsed = self._read()
            index = self._index_of(messages, message_id)
            del messages[index]
            self._write(messages, unparsed)
        logger.info("Deleted contact message %s", message_id)
