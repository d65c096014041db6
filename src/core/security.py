"""
Core security utilities for password handling.
"""
from functools import lru_cache
import logging
import secrets

from passlib.context import CryptContext

from ..config import settings

# Set up logging
logger = logging.getLogger(__name__)

# Password hashing context; the work factor comes from configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

MAX_PASSWORD_BYTES = 72

def password_too_long(password: str) -> bool:
    """bcrypt only reads the first 72 bytes of its input."""
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES

def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    A fresh salt is generated for every call, so hashing the same password
    twice yields two different strings that both verify.

    Args:
        password: Plain text password

    Returns:
        str: Hashed password

    Raises:
        ValueError: If the password is longer than 72 UTF-8 bytes
    """
    if password_too_long(password):
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a hash.

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password to compare against

    Returns:
        bool: True if password matches hash, False on mismatch, when the
        password is longer than bcrypt can distinguish, or when the stored
        hash is not a recognised bcrypt string
    """
    if not hashed_password or plain_password is None:
        return False
    if password_too_long(plain_password):
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        logger.warning("Password verification against a malformed hash")
        return False

@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """
    Hash of a random throwaway password.

    Login verifies against it when the email is unknown so that both failure
    paths pay the same bcrypt cost.
    """
    return hash_password(secrets.token_urlsafe(16))
