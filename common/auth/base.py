"""
Token verifier interface.

Accounts live with the identity provider (Firebase). The API never signs
users in; it only checks the bearer token on each request and reads the
uid from it.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class TokenVerifier(ABC):
    """
    Verifies bearer tokens issued by an identity provider.
    """

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify a bearer token.

        Args:
            token: Raw token from the Authorization header

        Returns:
            Decoded claims. "sub" always holds the user id.

        Raises:
            ValueError: Token is malformed, expired, revoked or badly signed
        """
