"""
Patient persistence.

`PatientRepository` is the storage contract the auth flows depend on;
`SQLAlchemyPatientRepository` backs it with the application database.
"""
from abc import ABC, abstractmethod
from typing import Optional
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..auth.exceptions import EmailAlreadyExistsException
from ..exceptions import RepositoryUnavailableException
from .models import Patient

# Set up logging
logger = logging.getLogger(__name__)

class PatientRepository(ABC):
    """
    Durable mapping from email to patient record.

    Implementations own id assignment and must enforce email uniqueness
    themselves, raising EmailAlreadyExistsException from `add` when a
    concurrent registration won the race.
    """

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        """Return True if a patient is registered under `email`."""

    @abstractmethod
    def find_by_email(self, email: str) -> Optional[Patient]:
        """Return the patient registered under `email`, or None."""

    @abstractmethod
    def add(self, patient: Patient) -> Patient:
        """Persist a new patient and return it with its assigned id."""


class SQLAlchemyPatientRepository(PatientRepository):
    """Patient repository over a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    def exists_by_email(self, email: str) -> bool:
        try:
            return self.db.query(Patient.id).filter(Patient.email == email).first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Patient lookup failed: {str(e)}")
            raise RepositoryUnavailableException()

    def find_by_email(self, email: str) -> Optional[Patient]:
        try:
            return self.db.query(Patient).filter(Patient.email == email).first()
        except SQLAlchemyError as e:
            logger.error(f"Patient lookup failed: {str(e)}")
            raise RepositoryUnavailableException()

    def add(self, patient: Patient) -> Patient:
        try:
            self.db.add(patient)
            self.db.commit()
            self.db.refresh(patient)
        except IntegrityError as e:
            self.db.rollback()
            # Only the unique index on email means a registration slipped past the pre-check
            if self._email_stored(patient.email):
                logger.warning(f"Insert rejected by unique constraint for {patient.email}")
                raise EmailAlreadyExistsException()
            logger.error(f"Patient insert violated a constraint: {str(e.orig)}")
            raise RepositoryUnavailableException("Patient record could not be stored")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Patient insert failed: {str(e)}")
            raise RepositoryUnavailableException()

        return patient

    def _email_stored(self, email: str) -> bool:
        # Post-rollback check; independent of the overridable pre-check
        try:
            return self.db.query(Patient.id).filter(Patient.email == email).first() is not None
        except SQLAlchemyError as e:
            logger.error(f"Patient lookup failed: {str(e)}")
            raise RepositoryUnavailableException()
