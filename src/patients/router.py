"""
Patient routes.
"""
from fastapi import APIRouter, Depends

from ..auth.dependencies import get_current_patient
from .models import Patient
from .schemas import PatientResponse

# Create API router
router = APIRouter(prefix="/patients", tags=["Patients"])

@router.get("/me", response_model=PatientResponse, summary="Get Current Patient Profile")
def read_current_patient(current_patient: Patient = Depends(get_current_patient)):
    """
    Return the calling patient's profile.

    Requires `Authorization: Bearer <token>`. Any authentication failure
    responds with 401.
    """
    return current_patient
