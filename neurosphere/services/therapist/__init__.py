"""Therapist proxy services."""

from neurosphere.services.therapist.therapist_client import TherapistClient

__all__ = ["TherapistClient"]
