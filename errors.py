"""
Error types shared by the store, auth layer, chat proxy and HTTP handlers.
"""
from typing import List


class ValidationError(Exception):
    """Malformed or incomplete input. Carries every failed check."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class NotFoundError(Exception):
    """No contact message with the given id."""

    def __init__(self, message_id: str):
        super().__init__(f"Contact message {message_id} not found")
        self.message_id = message_id


class AuthenticationError(Exception):
    """Bad credentials or a missing/invalid/expired session token."""


class UpstreamError(Exception):
    """The chat completion API failed or could not be reached."""


class PersistenceError(Exception):
    """The message file could not be written."""
