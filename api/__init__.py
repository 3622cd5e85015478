"""
API package for the workout API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

from api.deps import (
    get_settings,
    get_text_generator,
    get_workout_generator,
)

__all__ = [
    "get_settings",
    "get_text_generator",
    "get_workout_generator",
]
