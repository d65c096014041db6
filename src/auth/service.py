"""
Authentication service layer for business logic.
"""
import logging
from typing import Dict, Any, Optional

from ..core.security import hash_password, verify_password, dummy_password_hash
from ..patients.models import Patient
from ..patients.repository import PatientRepository
from ..patients.schemas import PatientRegistration
from .tokens import TokenService
from .exceptions import (
    InvalidCredentialsException,
    EmailAlreadyExistsException,
    AccountInactiveException,
    MissingCredentialsException,
    TokenExpiredException,
    InvalidTokenException,
    UnauthenticatedException
)

# Set up logging
logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

def register_patient(repository: PatientRepository, registration: PatientRegistration) -> Patient:
    """
    Register a new patient.

    Args:
        repository: Patient store
        registration: Validated registration data including the plain password

    Returns:
        Patient: The stored patient with its assigned id

    Raises:
        EmailAlreadyExistsException: If the email is already registered
    """
    email = registration.email
    logger.info(f"Patient registration attempt for email: {email}")

    # Fast-path rejection; the unique index on email is the real guard
    if repository.exists_by_email(email):
        logger.warning(f"Registration failed: Email {email} already registered")
        raise EmailAlreadyExistsException()

    patient = Patient(
        full_name=registration.full_name,
        email=email,
        password_hash=hash_password(registration.password),
        contact_number=registration.contact_number,
        date_of_birth=registration.date_of_birth,
        health_card_number=registration.health_card_number,
        is_active=True
    )

    patient = repository.add(patient)
    logger.info(f"Patient account created: {patient.id}")
    return patient

def authenticate_patient(repository: PatientRepository, email: str, password: str) -> Patient:
    """
    Check a patient's email and password.

    Args:
        repository: Patient store
        email: Patient's email address
        password: Patient's plain text password

    Returns:
        Patient: The matching patient

    Raises:
        InvalidCredentialsException: Unknown email or wrong password
        AccountInactiveException: Correct password on a deactivated account
    """
    patient = repository.find_by_email(email)

    if patient is None:
        # Spend the same hashing time as a real mismatch
        verify_password(password, dummy_password_hash())
        logger.warning(f"Login failed: Invalid credentials for {email}")
        raise InvalidCredentialsException()

    if not verify_password(password, patient.password_hash):
        logger.warning(f"Login failed: Invalid credentials for {email}")
        raise InvalidCredentialsException()

    if not patient.is_active:
        logger.warning(f"Login failed: Account {patient.id} is deactivated")
        raise AccountInactiveException()

    logger.info(f"Login successful: Patient {patient.id}")
    return patient

def login_patient(
    repository: PatientRepository,
    token_service: TokenService,
    email: str,
    password: str
) -> Dict[str, Any]:
    """
    Authenticate a patient and issue a bearer token.

    Args:
        repository: Patient store
        token_service: Token issuer
        email: Patient's email address
        password: Patient's plain text password

    Returns:
        Dict with the token, token type and patient
    """
    patient = authenticate_patient(repository, email, password)
    token = token_service.issue(patient.email)

    return {
        "token": token,
        "token_type": "bearer",
        "patient": patient
    }

def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Pull the token out of an Authorization header value.

    Raises:
        MissingCredentialsException: Header absent, wrong scheme or empty token
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise MissingCredentialsException()

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise MissingCredentialsException()
    return token

def resolve_current_patient(
    authorization: Optional[str],
    repository: PatientRepository,
    token_service: TokenService
) -> Patient:
    """
    Resolve the calling patient from a bearer Authorization header.

    The patient is re-read from the store on every call, so a deleted or
    deactivated account stops resolving even while its token is unexpired.

    Args:
        authorization: Raw Authorization header value
        repository: Patient store
        token_service: Token verifier

    Returns:
        Patient: The authenticated patient

    Raises:
        MissingCredentialsException: Header absent or malformed
        UnauthenticatedException: Invalid or expired token, or no matching active patient
    """
    token = extract_bearer_token(authorization)

    try:
        email = token_service.verify(token)
    except TokenExpiredException:
        logger.info("Bearer token rejected: expired")
        raise UnauthenticatedException()
    except InvalidTokenException:
        logger.warning("Bearer token rejected: invalid signature or format")
        raise UnauthenticatedException()

    patient = repository.find_by_email(email)
    if patient is None or not patient.is_active:
        logger.warning(f"Bearer token subject {email} no longer resolves to an active patient")
        raise UnauthenticatedException()

    return patient
