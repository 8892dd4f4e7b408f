"""
FastAPI dependencies for NeuroSphere application.

Provides dependency injection for all services.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth.base import TokenVerifier
from common.auth.firebase_auth import FirebaseAuth
from common.auth.jwt_auth import JWTAuth
from neurosphere.config import Settings
from neurosphere.middleware.auth import AuthMiddleware

# Entry services
from neurosphere.services.mood.mood_service import MoodService
from neurosphere.services.sleep.sleep_service import SleepService

# Therapist and user services
from neurosphere.services.therapist.therapist_client import TherapistClient
from neurosphere.services.user.user_context_service import UserContextService

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

# Auth
_auth_middleware: Optional[AuthMiddleware] = None

# Entries
_mood_service: Optional[MoodService] = None
_sleep_service: Optional[SleepService] = None

# Therapist / user
_therapist_client: Optional[TherapistClient] = None
_user_context_service: Optional[UserContextService] = None


# ─────────────────────────────────────────────────────────────────
# Initialization
# ─────────────────────────────────────────────────────────────────

def build_token_verifier(settings: Settings) -> TokenVerifier:
    """
    Create the token verifier named by AUTH_PROVIDER.

    Raises:
        ValueError: Unknown provider or missing JWT secret
    """
    if settings.AUTH_PROVIDER == "firebase":
        return FirebaseAuth(
            credentials_path=settings.FIREBASE_CREDENTIALS_PATH,
            project_id=settings.FIREBASE_PROJECT_ID,
            check_revoked=settings.FIREBASE_CHECK_REVOKED
        )
    if settings.AUTH_PROVIDER == "jwt":
        return JWTAuth(
            secret=settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            access_token_expire_minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
        )
    raise ValueError(f"Unknown AUTH_PROVIDER: {settings.AUTH_PROVIDER}")


def init_auth_services(token_verifier: TokenVerifier) -> None:
    """Initialize auth services."""
    global _auth_middleware

    _auth_middleware = AuthMiddleware(token_verifier=token_verifier)
    logger.info(f"Token verifier: {type(token_verifier).__name__}")


def init_entry_services(db: AsyncIOMotorDatabase, history_max_limit: int = 100) -> None:
    """Initialize mood and sleep services."""
    global _mood_service, _sleep_service

    _mood_service = MoodService(db=db, max_limit=history_max_limit)
    _sleep_service = SleepService(db=db, max_limit=history_max_limit)


def init_therapist_services(
    db: AsyncIOMotorDatabase,
    therapist_api_url: str,
    therapist_timeout: float = 60.0
) -> None:
    """Initialize therapist proxy and user context services."""
    global _therapist_client, _user_context_service

    _therapist_client = TherapistClient(base_url=therapist_api_url, timeout=therapist_timeout)
    _user_context_service = UserContextService(db=db)


def init_all_services(
    db: AsyncIOMotorDatabase,
    token_verifier: TokenVerifier,
    therapist_api_url: str,
    therapist_timeout: float = 60.0,
    history_max_limit: int = 100
) -> None:
    """
    Initialize all services at application startup.

    Args:
        db: Main MongoDB database connection
        token_verifier: Firebase or JWT verifier (see build_token_verifier)
        therapist_api_url: Root URL of the therapist service
        therapist_timeout: Seconds to wait for the therapist service
        history_max_limit: Largest history page the entry services return
    """
    init_auth_services(token_verifier)
    init_entry_services(db, history_max_limit)
    init_therapist_services(db, therapist_api_url, therapist_timeout)


# ─────────────────────────────────────────────────────────────────
# Auth getters
# ─────────────────────────────────────────────────────────────────

def get_auth_middleware() -> AuthMiddleware:
    """Get auth middleware instance."""
    if _auth_middleware is None:
        raise RuntimeError("Auth services not initialized.")
    return _auth_middleware


async def require_auth(
    request: Request,
    auth_middleware: Annotated[AuthMiddleware, Depends(get_auth_middleware)]
) -> dict:
    """Dependency that requires authentication."""
    return await auth_middleware.require_auth(request)


# ─────────────────────────────────────────────────────────────────
# Entry getters
# ─────────────────────────────────────────────────────────────────

def get_mood_service() -> MoodService:
    """Get mood service instance."""
    if _mood_service is None:
        raise RuntimeError("Entry services not initialized.")
    return _mood_service


def get_sleep_service() -> SleepService:
    """Get sleep service instance."""
    if _sleep_service is None:
        raise RuntimeError("Entry services not initialized.")
    return _sleep_service


# ─────────────────────────────────────────────────────────────────
# Therapist / user getters
# ─────────────────────────────────────────────────────────────────

def get_therapist_client() -> TherapistClient:
    """Get therapist proxy client."""
    if _therapist_client is None:
        raise RuntimeError("Therapist services not initialized.")
    return _therapist_client


def get_user_context_service() -> UserContextService:
    """Get user context service instance."""
    if _user_context_service is None:
        raise RuntimeError("Therapist services not initialized.")
    return _user_context_service

