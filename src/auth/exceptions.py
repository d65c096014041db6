"""
Authentication-specific exceptions.
"""
from fastapi import HTTPException, status

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}

class AuthException(HTTPException):
    """Base class for authentication exceptions."""
    def __init__(self, status_code: int, detail: str, headers: dict = None):
        super().__init__(status_code=status_code, detail=detail, headers=headers)

class InvalidCredentialsException(AuthException):
    """Exception raised when credentials are invalid.

    Unknown email and wrong password both raise this with the same detail.
    """
    def __init__(self, detail: str = "Invalid email or password"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)

class EmailAlreadyExistsException(AuthException):
    """Exception raised when email already exists."""
    def __init__(self, detail: str = "Email already registered"):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)

class AccountInactiveException(AuthException):
    """Exception raised when a deactivated patient tries to log in."""
    def __init__(self, detail: str = "Account has been deactivated"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)

class MissingCredentialsException(AuthException):
    """Exception raised when the Authorization header is absent or not a bearer credential."""
    def __init__(self, detail: str = "Missing or invalid Authorization header"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, headers=BEARER_CHALLENGE)

class TokenExpiredException(AuthException):
    """Exception raised when token has expired."""
    def __init__(self, detail: str = "Token has expired"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, headers=BEARER_CHALLENGE)

class InvalidTokenException(AuthException):
    """Exception raised when token signature or structure is invalid."""
    def __init__(self, detail: str = "Invalid token"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, headers=BEARER_CHALLENGE)

class UnauthenticatedException(AuthException):
    """Exception raised when a bearer token cannot be resolved to a patient."""
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail, headers=BEARER_CHALLENGE)
