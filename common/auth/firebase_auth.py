"""
Firebase ID token verification.

The mobile and web clients sign in with Firebase Authentication and send
the resulting ID token as a bearer token.

Example:
    verifier = FirebaseAuth(credentials_path="serviceAccount.json")

    claims = await verifier.verify_token(id_token)
    print(claims["sub"])  # Firebase uid
"""

import logging
import os
from typing import Dict, Any, Optional

import firebase_admin
from dotenv import load_dotenv
from firebase_admin import auth, credentials

from common.auth.base import TokenVerifier

load_dotenv()

logger = logging.getLogger(__name__)

# Service account fields read from FIREBASE_* environment variables
_SERVICE_ACCOUNT_FIELDS = (
    "project_id",
    "private_key_id",
    "private_key",
    "client_email",
    "client_id",
)


def service_account_from_env() -> Optional[Dict[str, Any]]:
    """
    Build a service account dict from FIREBASE_PROJECT_ID,
    FIREBASE_PRIVATE_KEY, FIREBASE_CLIENT_EMAIL and friends.

    Returns None unless project id, private key and client email are all set.
    """
    values = {
        field: os.environ.get(f"FIREBASE_{field.upper()}", "").strip().strip('"')
        for field in _SERVICE_ACCOUNT_FIELDS
    }
    if not (values["project_id"] and values["private_key"] and values["client_email"]):
        return None

    # Keys pasted into .env files carry escaped newlines
    values["private_key"] = values["private_key"].replace("\\n", "\n")
    values["type"] = "service_account"
    values["token_uri"] = "https://oauth2.googleapis.com/token"
    return values


class FirebaseAuth(TokenVerifier):
    """
    Verifies Firebase ID tokens with the Admin SDK.
    """

    def __init__(
        self,
        credentials_path: Optional[str] = None,
        project_id: Optional[str] = None,
        check_revoked: bool = False,
    ):
        """
        Initialize the Firebase app once per process.

        Args:
            credentials_path: Service account JSON file. Falls back to
                FIREBASE_* variables, then to application default credentials.
            project_id: Firebase project id
            check_revoked: Also reject tokens of signed-out or disabled users
        """
        if not firebase_admin._apps:
            if credentials_path:
                cred = credentials.Certificate(credentials_path)
            else:
                service_account = service_account_from_env()
                if service_account:
                    cred = credentials.Certificate(service_account)
                else:
                    cred = credentials.ApplicationDefault()

            options = {"projectId": project_id} if project_id else {}
            firebase_admin.initialize_app(cred, options)
            logger.info("Firebase app initialized")

        self._check_revoked = check_revoked

    async def verify_token(self, token: str) -> Dict[str, Any]:
        """Verify a Firebase ID token and expose the uid as "sub"."""
        try:
            claims = auth.verify_id_token(token, check_revoked=self._check_revoked)
        except auth.RevokedIdTokenError:
            raise ValueError("Token has been revoked")
        except auth.UserDisabledError:
            raise ValueError("User account is disabled")
        except auth.ExpiredIdTokenError:
            raise ValueError("Token has expired")
        except auth.InvalidIdTokenError as e:
            raise ValueError(f"Invalid token: {e}")

        claims["sub"] = claims.get("uid")
        return claims
