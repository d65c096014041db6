"""
Auth Schemas - Pydantic models for login requests and responses.
"""
from pydantic import BaseModel
from ..patients.schemas import PatientEmail, PatientResponse

class PatientLogin(BaseModel):
    """
    Patient Login Schema - Used for authentication

    Fields:
    - email: Patient's email address
    - password: Patient's plain text password
    """
    email: PatientEmail
    password: str

class LoginResponse(BaseModel):
    """
    Login Response Schema - Returned after successful authentication

    Fields:
    - token: Signed bearer token
    - token_type: Type of token (always "bearer")
    - patient: Redacted patient record
    """
    token: str
    token_type: str = "bearer"
    patient: PatientResponse
