"""
Authentication module - Bearer token verification (Firebase, JWT).
"""

from common.auth.base import TokenVerifier
from common.auth.jwt_auth import JWTAuth
from common.auth.firebase_auth import FirebaseAuth

__all__ = ["TokenVerifier", "JWTAuth", "FirebaseAuth"]
