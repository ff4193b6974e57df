"""
Pydantic Schemas
================

Data models for request/response validation.
"""

from users_api.schemas.models import (
    UserCreate,
    User,
    HealthResponse,
)

__all__ = [
    "UserCreate",
    "User",
    "HealthResponse",
]
