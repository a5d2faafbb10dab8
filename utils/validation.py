"""
Pure functions for checking and cleaning contact form submissions.
No I/O, safe to call from anywhere.
"""
import re
from typing import List

from models import INQUIRY_TYPES

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

FULL_NAME_MIN_LENGTH = 2
MESSAGE_MIN_LENGTH = 10

NAME_ERROR = f"Full name is required and must be at least {FULL_NAME_MIN_LENGTH} characters"
EMAIL_ERROR = "Valid email address is required"
INQUIRY_TYPE_ERROR = "Valid inquiry type is required"
MESSAGE_ERROR = f"Message is required and must be at least {MESSAGE_MIN_LENGTH} characters"

_HTML_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
}
_HTML_PATTERN = re.compile("[<>\"']")


def is_valid_email(value) -> bool:
    """Check for a local@domain.tld shape."""
    return isinstance(value, str) and bool(EMAIL_PATTERN.match(value))


def validate_contact(data: dict) -> List[str]:
    """Check a contact submission and return every problem found.

    An empty list means the submission can be stored. Checks run in form
    order and all of them run, so the caller can show every error at once.
    """
    errors = []

    full_name = data.get("fullName")
    if not isinstance(full_name, str) or len(full_name.strip()) < FULL_NAME_MIN_LENGTH:
        errors.append(NAME_ERROR)

    if not is_valid_email(data.get("email")):
        errors.append(EMAIL_ERROR)

    if data.get("inquiryType") not in INQUIRY_TYPES:
        errors.append(INQUIRY_TYPE_ERROR)

    message = data.get("message")
    if not isinstance(message, str) or len(message.strip()) < MESSAGE_MIN_LENGTH:
        errors.append(MESSAGE_ERROR)

    return errors


def sanitize(text: str) -> str:
    """Escape < > " ' as HTML entities and trim surrounding whitespace.

    Entities produced here contain none of the escaped characters, so
    sanitizing twice gives the same result as sanitizing once.
    """
    return _HTML_PATTERN.sub(lambda m: _HTML_ESCAPES[m.group(0)], text).strip()
