"""
Admin authentication: static admin table, bcrypt password checks and
JWT session tokens carried in the admin_token cookie.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional

import bcrypt
import jwt
from starlette.requests import HTTPConnection

from config import (
    ADMIN_USERS, BCRYPT_ROUNDS, JWT_ALGORITHM, JWT_SECRET_KEY,
    SESSION_COOKIE_NAME, SESSION_TTL_HOURS
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdminPrincipal:
    """A statically configured admin identity."""
    email: str
    password_hash: str
    role: str
    name: str

    def profile(self) -> dict:
        """Public fields only, safe to return to the browser."""
        return {"email": self.email, "role": self.role, "name": self.name}


class AdminDirectory:
    """Read-only lookup table of admins, built once at process start."""

    def __init__(self, admins: Iterable[AdminPrincipal]):
        self._admins = tuple(admins)

    @classmethod
    def from_config(cls, records=ADMIN_USERS) -> "AdminDirectory":
        return cls(AdminPrincipal(**record) for record in records)

    def __len__(self) -> int:
        return len(self._admins)

    def find(self, email: str) -> Optional[AdminPrincipal]:
        """Case-insensitive lookup by email."""
        if not email:
            return None
        wanted = email.lower()
        for admin in self._admins:
            if admin.email.lower() == wanted:
                return admin
        return None

    def verify_credentials(self, email: str, password: str) -> Optional[dict]:
        """Return the admin's public profile, or None for any bad combination.

        Unknown email and wrong password give the same None.
        """
        admin = self.find(email)
        if admin is None:
            logger.info("Login rejected for %s", email)
            return None

        if not verify_password(password, admin.password_hash):
            logger.info("Login rejected for %s", email)
            return None

        return admin.profile()


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash a password with bcrypt."""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError as e:
        logger.error("Stored password hash is not a valid bcrypt hash: %s", e)
        return False


def issue_token(payload: dict, secret: str = None, issued_at: datetime = None) -> str:
    """Create a signed session token for {email, role}, valid for 24 hours."""
    issued_at = issued_at or datetime.now(timezone.utc)
    claims = {
        'email': payload['email'],
        'role': payload['role'],
        'iat': issued_at,
        'exp': issued_at + timedelta(hours=SESSION_TTL_HOURS),
    }
    return jwt.encode(claims, secret or JWT_SECRET_KEY, algorithm=JWT_ALGORITHM)


def verify_token(token: str, secret: str = None) -> Optional[dict]:
    """Decode and verify a session token.

    Returns None when the token is expired, tampered with or malformed.
    The reason is logged only.
    """
    try:
        return jwt.decode(
            token,
            secret or JWT_SECRET_KEY,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["exp", "iat"]}
        )
    except jwt.ExpiredSignatureError:
        logger.info("Session token expired")
        return None
    except jwt.InvalidTokenError as e:
        logger.warning("Session token rejected: %s", e)
        return None


def extract_token(request: HTTPConnection) -> Optional[str]:
    """Find the session token: Bearer Authorization header first, then cookie."""
    auth_header = request.headers.get('authorization')
    if auth_header and auth_header.startswith('Bearer '):
        return auth_header[len('Bearer '):].strip() or None

    return request.cookies.get(SESSION_COOKIE_NAME) or None
