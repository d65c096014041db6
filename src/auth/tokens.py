"""
Bearer token issuing and verification.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from jose import jwt, JWTError, ExpiredSignatureError

from .exceptions import InvalidTokenException, TokenExpiredException

# Set up logging
logger = logging.getLogger(__name__)

class TokenService:
    """
    Mints and verifies signed, time-bounded tokens bound to a patient email.

    The signing key is supplied once at construction and never changes for
    the lifetime of the instance. Tokens signed with any other key fail
    verification as invalid.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", ttl: timedelta = timedelta(minutes=30)):
        if not secret_key:
            raise ValueError("Token signing key must not be empty")
        if ttl <= timedelta(0):
            raise ValueError("Token lifetime must be positive")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._ttl = ttl

    def issue(self, subject: str, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create a signed token for a subject.

        Args:
            subject: Patient email the token is bound to
            expires_delta: Override for the configured lifetime

        Returns:
            str: Encoded JWT
        """
        issued_at = datetime.now(timezone.utc)
        expires_at = issued_at + (expires_delta if expires_delta is not None else self._ttl)

        claims = {
            "sub": subject,
            "iat": issued_at,
            "exp": expires_at,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Verify a token and return the subject it is bound to.

        The signature is checked before the expiry, so a tampered token is
        always reported as invalid even when it is also stale.

        Args:
            token: Encoded JWT

        Returns:
            str: The subject email

        Raises:
            InvalidTokenException: Signature mismatch, malformed token or missing subject
            TokenExpiredException: The token is past its expiry
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_sub": True},
            )
        except ExpiredSignatureError:
            raise TokenExpiredException()
        except JWTError as e:
            logger.debug(f"Token rejected: {str(e)}")
            raise InvalidTokenException()

        subject = claims.get("sub")
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenException()
        return subject
