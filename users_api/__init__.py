"""
User Registry API
=================

A small HTTP API for listing and creating users, backed by an in-memory
store. Request and response bodies are validated with Pydantic and the
same models drive the generated OpenAPI documentation.

Layout:
- api: Route handlers
- schemas: Request/response models
- store: Process-local user collection
"""

__version__ = "1.0.0"
