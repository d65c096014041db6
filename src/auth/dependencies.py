"""
FastAPI dependencies for authentication.
"""
from typing import Optional
from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from ..database import get_db
from ..patients.models import Patient
from ..patients.repository import PatientRepository, SQLAlchemyPatientRepository
from .service import resolve_current_patient
from .tokens import TokenService

def get_patient_repository(db: Session = Depends(get_db)) -> PatientRepository:
    """
    Patient repository bound to the request's database session.

    Args:
        db: Database session

    Returns:
        PatientRepository: SQLAlchemy-backed repository
    """
    return SQLAlchemyPatientRepository(db)

def get_token_service(request: Request) -> TokenService:
    """
    The application's token service, built once at startup.
    """
    return request.app.state.token_service

def get_current_patient(
    authorization: Optional[str] = Header(None),
    repository: PatientRepository = Depends(get_patient_repository),
    token_service: TokenService = Depends(get_token_service)
) -> Patient:
    """
    Get current authenticated patient from the bearer token.

    Args:
        authorization: Authorization header value
        repository: Patient repository
        token_service: Token verifier

    Returns:
        Patient: Current authenticated patient

    Raises:
        MissingCredentialsException: If the header is absent or malformed
        UnauthenticatedException: If the token or the patient cannot be resolved
    """
    return resolve_current_patient(authorization, repository, token_service)
