"""
AI therapist proxy client.

Forwards chat messages and session feedback to the externally hosted
therapist service. One request per call, no retries.
"""

import logging
from typing import Optional, Dict, Any

import httpx

from common.utils.exceptions import InternalServerException, ServiceUnavailableException

logger = logging.getLogger(__name__)


class TherapistClient:
    """
    Thin HTTP client for the therapist service's /chat and /feedback endpoints.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize TherapistClient.

        Args:
            base_url: Root URL of the therapist service
            timeout: Seconds to wait for a reply
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST a JSON payload and return the decoded JSON reply.

        Raises:
            ServiceUnavailableException: Unreachable service, non-2xx status or non-JSON body
            InternalServerException: The service reported an error in its body
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.post(url, json=payload)
        except httpx.RequestError as e:
            logger.error(f"Therapist service request error on {path}: {e}")
            raise ServiceUnavailableException(
                message="Therapist service is unavailable",
                code="THERAPIST_UNAVAILABLE"
            )

        if not response.is_success:
            logger.error(f"Therapist service error on {path}: {response.status_code}")
            raise ServiceUnavailableException(
                message="Error fetching data from therapist service",
                code="THERAPIST_UNAVAILABLE"
            )

        try:
            data = response.json()
        except ValueError:
            logger.error(f"Therapist service returned a non-JSON body on {path}")
            raise ServiceUnavailableException(
                message="Error fetching data from therapist service",
                code="THERAPIST_UNAVAILABLE"
            )

        if not isinstance(data, dict):
            logger.error(f"Therapist service returned an unexpected body on {path}")
            raise ServiceUnavailableException(
                message="Error fetching data from therapist service",
                code="THERAPIST_UNAVAILABLE"
            )

        if data.get("error"):
            logger.warning(f"Therapist service reported an error on {path}: {data['error']}")
            raise InternalServerException(
                message=str(data["error"]),
                code="THERAPIST_ERROR"
            )

        return data

    async def chat(
        self,
        user_id: str,
        message: str,
        gender: Optional[str] = None,
        age: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Send a chat message to the therapist.

        Args:
            user_id: Identity provider user ID
            message: The user's message
            gender: User gender passed as context
            age: User age passed as context

        Returns:
            dict with keys:
                - response: str (therapist reply)
                - audio_base64: str or None (spoken reply)
        """
        data = await self._post("/chat", {
            "user_id": user_id,
            "message": message,
            "gender": gender,
            "age": age,
        })

        logger.debug(f"Therapist replied to user {user_id}")
        return {
            "response": data.get("response"),
            "audio_base64": data.get("audio_base64"),
        }

    async def send_feedback(self, user_id: str, feedback: str) -> Dict[str, Any]:
        """
        Submit end-of-session feedback.

        Returns:
            dict with message and the upstream status
        """
        data = await self._post("/feedback", {
            "user_id": user_id,
            "feedback": feedback,
        })

        logger.info(f"Therapist feedback submitted for user {user_id}")
        return {
            "message": "Feedback submitted successfully",
            "status": data.get("status"),
        }
