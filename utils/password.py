"""
Password hashing helpers.

Passwords are stored as bcrypt hashes only. The work factor is the bcrypt
library default unless a caller passes rounds explicitly.

Usage:
    python -m utils.password <password>
"""

import sys

import bcrypt


def hash_password(password: str, rounds: int | None = None) -> str:
    """
    Hash a password with bcrypt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor, library default when None

    Returns:
        bcrypt hash as str (e.g. "$2b$12$...")

    Raises:
        ValueError: If the password is empty or longer than bcrypt accepts (72 bytes)
    """
    if not password:
        raise ValueError("Password must not be empty")
    password_bytes = password.encode('utf-8')
    if len(password_bytes) > 72:
        raise ValueError("Password must not exceed 72 bytes")

    salt = bcrypt.gensalt() if rounds is None else bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password_bytes, salt).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    Returns False for malformed hashes instead of raising.
    """
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        return False


def main():
    """Command-line interface for hash generation."""
    if len(sys.argv) != 2:
        print("Usage: python -m utils.password <password>")
        sys.exit(1)

    try:
        print(hash_password(sys.argv[1]))
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
