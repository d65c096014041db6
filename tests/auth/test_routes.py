"""
Tests for the registration and login endpoints.
"""
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from src.auth.dependencies import get_patient_repository
from src.config import settings
from src.main import app
from src.patients.models import Patient
from src.patients.repository import SQLAlchemyPatientRepository

PATIENT = {
    "full_name": "Alice Example",
    "email": "a@x.com",
    "password": "secret1",
    "contact_number": "555-0100",
    "date_of_birth": "1990-05-17",
    "health_card_number": "HC-1234",
}


def _register(client, **overrides):
    payload = dict(PATIENT, **overrides)
    return client.post("/auth/register", json=payload)


def test_register_returns_created_patient_without_secret(client):
    response = _register(client)

    assert response.status_code == 201
    data = response.json()
    assert data["id"] is not None
    assert data["email"] == "a@x.com"
    assert data["full_name"] == "Alice Example"
    assert data["date_of_birth"] == "1990-05-17"
    assert data["is_active"] is True
    assert "password" not in data
    assert "password_hash" not in data
    assert "secret1" not in response.text


def test_register_duplicate_email_conflicts(client, db):
    assert _register(client).status_code == 201

    response = _register(client, full_name="Someone Else", password="other")
    assert response.status_code == 409
    assert response.json()["detail"] == "Email already registered"
    assert db.query(Patient).count() == 1


def test_register_validation_error_hides_password(client):
    response = _register(client, email="not-an-email")

    assert response.status_code == 422
    body = response.json()
    assert body["detail"] == "Validation error"
    assert all("input" not in error for error in body["errors"])
    assert "secret1" not in response.text


def test_login_returns_token_and_patient(client):
    _register(client)

    response = client.post("/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert response.status_code == 200
    data = response.json()
    assert data["token"]
    assert data["token_type"] == "bearer"
    assert data["patient"]["email"] == "a@x.com"
    assert "password_hash" not in data["patient"]


def test_login_failures_are_indistinguishable(client):
    _register(client)

    wrong_password = client.post("/auth/login", json={"email": "a@x.com", "password": "wrong"})
    unknown_email = client.post("/auth/login", json={"email": "nobody@x.com", "password": "secret1"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()


def test_login_inactive_account_is_forbidden(client, db):
    _register(client)
    db.query(Patient).filter(Patient.email == "a@x.com").update({"is_active": False})
    db.commit()

    response = client.post("/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert response.status_code == 403


def test_login_without_token_variant(client, monkeypatch):
    monkeypatch.setattr(settings, "login_issues_token", False)
    _register(client)

    response = client.post("/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert response.status_code == 200
    data = response.json()
    assert "token" not in data
    assert data["email"] == "a@x.com"


def test_repository_outage_is_server_fault(client):
    db = MagicMock()
    db.query.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))
    app.dependency_overrides[get_patient_repository] = lambda: SQLAlchemyPatientRepository(db)

    response = client.post("/auth/login", json={"email": "a@x.com", "password": "secret1"})
    assert response.status_code == 503
    assert response.json()["detail"] == "Patient store is unavailable"


def test_register_rejects_password_over_72_bytes(client, db):
    response = _register(client, password="x" * 72 + "A")

    assert response.status_code == 422
    assert [error["loc"][-1] for error in response.json()["errors"]] == ["password"]
    assert db.query(Patient).count() == 0


def test_login_with_over_long_password_is_invalid(client):
    _register(client, password="x" * 72)

    response = client.post("/auth/login", json={"email": "a@x.com", "password": "x" * 72 + "B"})
    assert response.status_code == 401


def test_register_keeps_email_exactly_as_submitted(client):
    first = _register(client, email="a@X.com")
    second = _register(client, email="a@x.com")

    assert first.status_code == 201
    assert first.json()["email"] == "a@X.com"
    assert second.status_code == 201
    assert second.json()["email"] == "a@x.com"

    response = client.post("/auth/login", json={"email": "a@X.com", "password": "secret1"})
    assert response.json()["patient"]["email"] == "a@X.com"
