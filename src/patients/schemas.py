"""
Patient Schemas - Pydantic models for patient data validation and serialization.
"""
from typing import Annotated, Optional
from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from datetime import date, datetime

from ..core.security import MAX_PASSWORD_BYTES, password_too_long

def _check_email_format(value: str) -> str:
    # Email is an exact-match key, so the normalised form is discarded
    validate_email(value, check_deliverability=False)
    return value

PatientEmail = Annotated[str, AfterValidator(_check_email_format)]

class PatientBase(BaseModel):
    """
    Base Patient Schema - Contains fields common to patient schemas

    Fields:
    - full_name: Patient's full name
    - email: Patient's email address, kept exactly as submitted
    - contact_number: Patient's contact number (optional)
    - date_of_birth: Patient's date of birth (optional)
    - health_card_number: Health card number (optional)
    """
    full_name: str = Field(..., min_length=1)
    email: PatientEmail
    contact_number: Optional[str] = None
    date_of_birth: Optional[date] = None
    health_card_number: Optional[str] = None

class PatientRegistration(PatientBase):
    """
    Patient Registration Schema - Used for patient self-registration

    Extends PatientBase with:
    - password: Plain text password (hashed before storage, never returned)
    """
    password: str = Field(..., min_length=1)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        if password_too_long(value):
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value

class PatientResponse(PatientBase):
    """
    Patient Response Schema - Redacted view returned by the API

    The password hash is never part of this schema.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    is_active: bool
    created_at: Optional[datetime] = None
