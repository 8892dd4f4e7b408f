"""
Authentication middleware for protected routes.

Verifies identity provider bearer tokens and attaches the caller to
the request.
"""

import logging
from typing import Optional

from fastapi import Request

from common.auth.base import TokenVerifier
from common.utils.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """
    Middleware that verifies the bearer token and attaches user to request.
    """

    def __init__(self, token_verifier: TokenVerifier):
        """
        Initialize AuthMiddleware.

        Args:
            token_verifier: Firebase or JWT token verifier
        """
        self._token_verifier = token_verifier

    async def require_auth(self, request: Request) -> dict:
        """
        Validate request is authenticated.

        Args:
            request: HTTP request object

        Returns:
            User dict with _id (identity provider uid), email and claims

        Raises:
            UnauthorizedException: No header, or the token fails verification

        Side Effects:
            - Attaches user to request.state.user
        """
        token = self._extract_token(request)

        if not token:
            raise UnauthorizedException(
                message="Authentication required",
                code="AUTH_REQUIRED"
            )

        try:
            claims = await self._token_verifier.verify_token(token)
        except ValueError as e:
            logger.debug(f"Token rejected: {e}")
            raise UnauthorizedException(
                message="Invalid or expired token",
                code="INVALID_TOKEN"
            )

        user_id = claims.get("sub") or claims.get("uid")
        if not user_id:
            raise UnauthorizedException(
                message="Invalid or expired token",
                code="INVALID_TOKEN"
            )

        user = {
            "_id": user_id,
            "email": claims.get("email"),
            "claims": claims,
        }

        request.state.user = user
        return user

    @staticmethod
    def _extract_token(request: Request) -> Optional[str]:
        """Return the token of an "Authorization: Bearer <token>" header, else None."""
        scheme, _, token = request.headers.get("Authorization", "").partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token or " " in token:
            return None
        return token
