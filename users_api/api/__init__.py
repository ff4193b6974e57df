"""
API Module
==========

FastAPI routes and endpoint definitions.
"""

from users_api.api.routes import router

__all__ = ["router"]
