"""
NeuroSphere Middleware.
"""

from neurosphere.middleware.auth import AuthMiddleware

__all__ = [
    "AuthMiddleware",
]
