"""API package for the application.

Holds the /api router, the frontend routes and the pydantic schemas.
It intentionally avoids importing submodules to prevent import cycles.
- api package
"""

__all__ = []
