"""
API Routes
==========

FastAPI endpoints for the user registry.

ENDPOINTS:
- GET /users: List every stored user
- POST /users: Create a user
- GET /health: Health check endpoint

Request bodies are validated against the Pydantic models before a handler
runs; a rejected body never reaches the store.
"""

import logging

from fastapi import APIRouter, HTTPException, Response, status

from users_api.schemas.models import HealthResponse, User, UserCreate
from users_api.store.user_store import get_user_store
from users_api import __version__

logger = logging.getLogger(__name__)

router = APIRouter()


# =============================================================================
# Users
# =============================================================================

@router.get(
    "/users",
    response_model=list[User],
    status_code=status.HTTP_200_OK,
    tags=["users"],
    summary="List Users",
    description="Show Users",
)
async def list_users() -> list[User]:
    """
    Return all users in the order they were created.

    Returns an empty list when nothing has been created since startup.
    """
    try:
        users = get_user_store().list()
    except Exception as e:
        logger.error(f"Listing users failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to list users: {str(e)}"
        )

    logger.debug(f"Listing {len(users)} users")
    return users


@router.post(
    "/users",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    tags=["users"],
    summary="Create User",
    description="Create a new User",
    responses={status.HTTP_201_CREATED: {"description": "User Created"}},
)
async def create_user(request: UserCreate) -> Response:
    """
    Create a user from a validated request body.

    The response has no body; the new user shows up in GET /users.

    Args:
        request: UserCreate with name and email

    Raises:
        HTTPException: If the user could not be stored
    """
    try:
        user = get_user_store().add(name=request.name, email=request.email)
    except Exception as e:
        logger.error(f"User creation failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to create user: {str(e)}"
        )

    logger.info(f"User created: {user.id}")
    return Response(status_code=status.HTTP_201_CREATED)


# =============================================================================
# Health Check
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health Check",
    description="Check if the API is running",
)
async def health_check() -> HealthResponse:
    """Report API status and the current number of stored users."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        user_count=get_user_store().count,
    )
