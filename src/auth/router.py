"""
Authentication routes for patient registration and login.
"""
from typing import Union
from fastapi import APIRouter, Depends, status

from ..config import settings
from ..patients.repository import PatientRepository
from ..patients.schemas import PatientRegistration, PatientResponse
from .dependencies import get_patient_repository, get_token_service
from .schemas import PatientLogin, LoginResponse
from .service import register_patient, authenticate_patient, login_patient
from .tokens import TokenService

# Create API router
router = APIRouter(prefix="/auth", tags=["Authentication"])

@router.post("/register", response_model=PatientResponse, status_code=status.HTTP_201_CREATED, summary="Patient Self-Registration")
def register_route(
    registration: PatientRegistration,
    repository: PatientRepository = Depends(get_patient_repository)
):
    """
    Patient self-registration endpoint.

    Args:
        registration: Patient registration data
        repository: Patient repository

    Returns:
        PatientResponse: The created patient, without the password hash

    Raises:
        EmailAlreadyExistsException: If the email is already registered (409)
    """
    return register_patient(repository, registration)

@router.post("/login", response_model=Union[LoginResponse, PatientResponse], summary="Patient Login")
def login_route(
    login_data: PatientLogin,
    repository: PatientRepository = Depends(get_patient_repository),
    token_service: TokenService = Depends(get_token_service)
):
    """
    Patient login endpoint.

    Returns the patient together with a bearer token, or the patient alone
    when LOGIN_ISSUES_TOKEN is disabled.

    Args:
        login_data: Patient login credentials
        repository: Patient repository
        token_service: Token issuer

    Raises:
        InvalidCredentialsException: If credentials are invalid (401)
        AccountInactiveException: If the account is deactivated (403)
    """
    if settings.login_issues_token:
        return login_patient(repository, token_service, login_data.email, login_data.password)
    return authenticate_patient(repository, login_data.email, login_data.password)
