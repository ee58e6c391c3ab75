"""REST API presentation layer for PayID.

Structure:
    api/
    ├── app.py               # FastAPI application factories
    ├── dependencies.py      # Dependency injection
    ├── exception_handlers.py
    ├── routers/             # API route handlers
    └── schemas/             # Pydantic response schemas
"""

from payid.presentation.api.app import create_private_app, create_public_app

__all__ = ["create_private_app", "create_public_app"]
