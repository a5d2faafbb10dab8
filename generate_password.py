"""
Generate a bcrypt hash for an admin password
Usage: python generate_password.py <password>
"""
import sys

from auth import hash_password
from config import BCRYPT_ROUNDS

MIN_PASSWORD_LENGTH = 8


def generate_password(argv=None) -> int:
    """Print a bcrypt hash and the matching admin config snippet. Returns an exit code."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Error: Please provide a password", file=sys.stderr)
        print("Usage: python generate_password.py <password>")
        return 1

    password = argv[0]
    if len(password) < MIN_PASSWORD_LENGTH:
        print(f"Warning: Password is less than {MIN_PASSWORD_LENGTH} characters. "
              "Consider using a stronger password.", file=sys.stderr)

    print(f"Generating password hash (cost {BCRYPT_ROUNDS})...\n")
    password_hash = hash_password(password)

    print(f"Hash: {password_hash}")
    print("\nAdd this to your environment (.env):\n")
    print("ADMIN_EMAIL=admin@example.com")
    print(f"ADMIN_PASSWORD_HASH='{password_hash}'")
    print("ADMIN_NAME='Admin Name'")
    return 0


if __name__ == "__main__":
    sys.exit(generate_password())
