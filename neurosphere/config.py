"""
NeuroSphere application settings.

Loaded from environment variables (and a local .env file) with
pydantic-settings.

Example:
    from neurosphere.config import settings

    print(settings.MONGODB_DATABASE)
"""

from typing import Optional, List

from pydantic_settings import BaseSettings, SettingsConfigDict

AUTH_PROVIDERS = ("firebase", "jwt")


class Settings(BaseSettings):
    """NeuroSphere settings."""

    # ==========================================================================
    # Database
    # ==========================================================================
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "neurosphere"
    MONGODB_TIMEOUT_MS: int = 5000

    # ==========================================================================
    # Authentication
    # ==========================================================================
    AUTH_PROVIDER: str = "firebase"  # "firebase" or "jwt"

    # Firebase (AUTH_PROVIDER = "firebase")
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None
    FIREBASE_PROJECT_ID: Optional[str] = None
    FIREBASE_CHECK_REVOKED: bool = False

    # Shared-secret tokens for local development (AUTH_PROVIDER = "jwt")
    JWT_SECRET: Optional[str] = None
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # ==========================================================================
    # External Services
    # ==========================================================================
    # Hosted AI therapist (chat + feedback)
    THERAPIST_API_URL: str = "https://psychologist-api.onrender.com"
    # The hosted service cold-starts slowly
    THERAPIST_TIMEOUT_SECONDS: float = 60.0

    # ==========================================================================
    # Analytics
    # ==========================================================================
    DEFAULT_TIMEFRAME: str = "week"  # week, month, 3months, year

    # ==========================================================================
    # Entry History
    # ==========================================================================
    HISTORY_DEFAULT_LIMIT: int = 30
    HISTORY_MAX_LIMIT: int = 100

    # ==========================================================================
    # Server
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    # Comma-separated origins or "*"
    CORS_ORIGINS: str = "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    def get_cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Check settings that have no usable default.

        Raises:
            ValueError: Unknown auth provider, missing JWT secret, or a
                default timeframe the analytics do not know
        """
        errors = []

        if self.AUTH_PROVIDER not in AUTH_PROVIDERS:
            errors.append(f"AUTH_PROVIDER must be one of {AUTH_PROVIDERS}, got '{self.AUTH_PROVIDER}'")

        if self.AUTH_PROVIDER == "jwt" and not self.JWT_SECRET:
            errors.append("JWT_SECRET is required when AUTH_PROVIDER is 'jwt'")

        if self.DEFAULT_TIMEFRAME not in ("week", "month", "3months", "year"):
            errors.append(f"DEFAULT_TIMEFRAME '{self.DEFAULT_TIMEFRAME}' is not a known timeframe")

        if self.HISTORY_DEFAULT_LIMIT > self.HISTORY_MAX_LIMIT:
            errors.append("HISTORY_DEFAULT_LIMIT cannot exceed HISTORY_MAX_LIMIT")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))


# Global settings instance
settings = Settings()
