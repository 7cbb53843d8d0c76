"""
REST API Endpoints

Thin API layer that delegates to services.
"""

from .user_endpoints import router as user_router, get_user_service

__all__ = [
    "user_router",
    "get_user_service",
]
