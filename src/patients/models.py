"""
Patient Model - Stores registered patients and their login secret.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Date, func
from ..database import Base

class Patient(Base):
    """
    Patient Model - One row per registered patient

    Fields:
    - id: Primary key assigned by the database
    - full_name: Patient's display name
    - email: Unique login identifier and token subject
    - password_hash: bcrypt hash of the password (never the plain text)
    - contact_number: Patient's contact number (optional)
    - date_of_birth: Patient's date of birth (optional)
    - health_card_number: Health card number (optional)
    - is_active: Whether the patient may log in
    - created_at: When the patient registered
    """
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    contact_number = Column(String, nullable=True)
    date_of_birth = Column(Date, nullable=True)
    health_card_number = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def __repr__(self):
        """String representation of the Patient model"""
        return f"<Patient(id={self.id}, email={self.email})>"
