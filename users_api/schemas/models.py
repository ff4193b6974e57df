"""
Data Models
===========

Pydantic models for the user endpoints. They provide:
- Request body validation before a handler runs
- Response serialization
- The schemas shown in the generated OpenAPI docs
"""

import re
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field


EMAIL_PATTERN = re.compile(
    r"(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}",
    re.IGNORECASE,
)


def check_email_shape(value: str) -> str:
    """
    Reject strings that are not shaped like an email address.

    The value is returned exactly as sent: no case folding, no DNS lookup.
    Reserved domains such as .test or .local are accepted.
    """
    if not EMAIL_PATTERN.fullmatch(value):
        raise ValueError("value is not a valid email address")
    return value


EmailAddress = Annotated[str, AfterValidator(check_email_shape)]


# =============================================================================
# User Models
# =============================================================================

class UserCreate(BaseModel):
    """
    Request body for creating a user.

    Example:
        {
            "name": "Ada Lovelace",
            "email": "ada@example.com"
        }
    """
    name: str = Field(..., description="Display name of the user")
    email: EmailAddress = Field(
        ...,
        description="Email address (must be email-shaped)",
        json_schema_extra={"format": "email"},
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ada Lovelace",
                "email": "ada@example.com",
            }
        }
    )


class User(BaseModel):
    """A stored user as returned by the list endpoint."""
    id: str = Field(..., description="Server-generated UUID")
    name: str = Field(..., description="Display name of the user")
    email: str = Field(..., description="Email address")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0b5d1c4e-8f3a-4a8e-9d3f-3c2f7e6a1b2c",
                "name": "Ada Lovelace",
                "email": "ada@example.com",
            }
        }
    )


# =============================================================================
# Health Check Model
# =============================================================================

class HealthResponse(BaseModel):
    """API health check response."""
    status: str = Field(..., description="'healthy' or 'unhealthy'")
    version: str = Field(..., description="API version")
    user_count: int = Field(..., description="Number of users currently stored")
