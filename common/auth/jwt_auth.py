"""
Shared-secret JWT verification for local development and tests.

Lets the API run without a Firebase project: tokens are signed with
JWT_SECRET and carry the user id in "sub".

Example:
    verifier = JWTAuth(secret="dev-secret")

    token = await verifier.create_token("uid_123", email="user@example.com")
    claims = await verifier.verify_token(token)
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Any

from jose import jwt, JWTError

from common.auth.base import TokenVerifier


class JWTAuth(TokenVerifier):
    """
    Signs and verifies HS256 tokens with a shared secret.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 60,
    ):
        if not secret:
            raise ValueError("JWT secret must not be empty")

        self.secret = secret
        self.algorithm = algorithm
        self.access_token_expire = timedelta(minutes=access_token_expire_minutes)

    async def create_token(self, user_id: str, **claims: Any) -> str:
        """Issue a token for a development user."""
        now = datetime.now(timezone.utc)
        payload = {
            **claims,
            "sub": user_id,
            "iat": now,
            "exp": now + self.access_token_expire,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    async def verify_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise ValueError(f"Invalid token: {e}")
