"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        database_url: SQLAlchemy connection string for the patient store
        secret_key: Signing key material for bearer tokens
        algorithm: Algorithm used for JWT signing (typically HS256)
        access_token_expire_minutes: Token lifetime in minutes
        bcrypt_rounds: bcrypt work factor used when hashing passwords
        login_issues_token: Whether /auth/login returns a token with the patient

        # Frontend settings
        frontend_url: URL of the frontend application (allowed CORS origin)
    """
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Database settings
    database_url: str = "sqlite:///./patients.db"

    # JWT settings
    secret_key: str = Field(..., min_length=1)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(default=30, gt=0)

    # Password hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # Login variant
    login_issues_token: bool = True

    # Frontend settings
    frontend_url: str = "http://localhost:3000"

# Create settings instance
settings = Settings()
