"""User services."""

from neurosphere.services.user.user_context_service import UserContextService

__all__ = ["UserContextService"]
